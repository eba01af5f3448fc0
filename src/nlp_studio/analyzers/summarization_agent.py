"""
Summarization Agent Module
Asks the language model for a short paraphrase; falls back to a text prefix.
"""

import logging
from typing import Optional

from nlp_studio import config
from nlp_studio.core.llm_gateway import ExternalServiceFailure, LLMGateway

from .interface import AnalyzerInterface
from .results import OperationKind, SummaryResult

logger = logging.getLogger("NLPSTUDIO_SUMMARIZATION")

FALLBACK_NOTE = "Language model unavailable — using fallback summary."


def build_summary_prompt(text: str) -> str:
    return f'Summarize the following text in 2–4 clear, simple sentences:\n\n"{text}"\n'


class SummarizationAgent(AnalyzerInterface):
    """
    Summarization agent backed by the LLM gateway.

    Lifecycle:
        agent = SummarizationAgent(gateway)
        result = await agent.analyze(text)
    """

    operation = OperationKind.SUMMARY

    def __init__(self, gateway: LLMGateway, fallback_chars: Optional[int] = None):
        self.gateway = gateway
        self.fallback_chars = fallback_chars if fallback_chars is not None else config.SUMMARY_FALLBACK_CHARS

    def fallback(self, text: str) -> SummaryResult:
        return SummaryResult(summary=text[:self.fallback_chars] + "...", note=FALLBACK_NOTE)

    async def analyze(self, text: str) -> SummaryResult:
        outcome = await self.gateway.generate(build_summary_prompt(text))
        if isinstance(outcome, ExternalServiceFailure):
            logger.warning(f"Summary fallback used: {outcome.reason}")
            return self.fallback(text)
        return SummaryResult(summary=outcome.text)
