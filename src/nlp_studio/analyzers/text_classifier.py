"""
Text Classifier Module
Language-model classification of feedback-style text into six categories.
"""

import logging

from nlp_studio.core.llm_gateway import ExternalServiceFailure, LLMGateway

from .interface import AnalyzerInterface
from .results import ClassifyResult, OperationKind

logger = logging.getLogger("NLPSTUDIO_CLASSIFIER")

CATEGORIES = [
    "bug report",
    "complaint",
    "praise",
    "question",
    "feature request",
    "other",
]

FALLBACK_RESULT = ClassifyResult(label="other", reason="Fallback classifier.")


def build_classify_prompt(text: str) -> str:
    options = "\n".join(f"- {category}" for category in CATEGORIES)
    return (
        "Classify the following text into one of these categories:\n"
        f"{options}\n\n"
        "Return ONLY the category on the first line and one short sentence "
        "explaining why on the next line.\n\n"
        f'Text:\n"{text}"\n'
    )


def parse_classification(output: str) -> ClassifyResult:
    """First line is the label, the remaining lines are the reason."""
    label_line, *reason_lines = output.split("\n")
    return ClassifyResult(
        label=label_line.strip().lower(),
        reason=" ".join(reason_lines).strip(),
    )


class TextClassifier(AnalyzerInterface):
    """Six-way classifier delegating to the LLM gateway."""

    operation = OperationKind.CLASSIFY

    def __init__(self, gateway: LLMGateway):
        self.gateway = gateway

    async def analyze(self, text: str) -> ClassifyResult:
        outcome = await self.gateway.generate(build_classify_prompt(text))
        if isinstance(outcome, ExternalServiceFailure):
            logger.warning(f"Classifier fallback used: {outcome.reason}")
            return FALLBACK_RESULT.model_copy()
        return parse_classification(outcome.text)
