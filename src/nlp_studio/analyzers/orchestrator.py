"""
Operation Dispatcher Module
Routes a (text, operation) pair to exactly one analyzer and checks the result shape.
"""

import inspect
import logging
from typing import Mapping, Optional, Union

from nlp_studio.core.llm_gateway import LLMGateway
from nlp_studio.errors import InternalError, UnsupportedOperation

from .chat_agent import ChatAgent
from .interface import AnalyzerInterface
from .nlp.keyword_extractor import KeywordExtractor
from .nlp.ner_extractor import NERExtractor
from .results import RESULT_TYPES, AnalysisResult, OperationKind
from .sentiment_analyzer import SentimentAnalyzer
from .summarization_agent import SummarizationAgent
from .text_classifier import TextClassifier

logger = logging.getLogger("NLPSTUDIO_DISPATCHER")


def parse_operation(operation: Union[str, OperationKind, None]) -> OperationKind:
    """Coerce a client-supplied identifier; anything unknown is rejected."""
    if isinstance(operation, OperationKind):
        return operation
    if not isinstance(operation, str) or not operation:
        raise UnsupportedOperation(operation)
    try:
        return OperationKind(operation)
    except ValueError:
        raise UnsupportedOperation(operation) from None


def default_analyzers(gateway: LLMGateway) -> dict[OperationKind, AnalyzerInterface]:
    """One analyzer per operation; LLM-backed ones share ``gateway``."""
    analyzers = [
        SentimentAnalyzer(),
        SummarizationAgent(gateway),
        KeywordExtractor(),
        NERExtractor(),
        TextClassifier(gateway),
        ChatAgent(gateway),
    ]
    return {analyzer.operation: analyzer for analyzer in analyzers}


class OperationDispatcher:
    """Maps OperationKind values to analyzers and runs them uniformly."""

    def __init__(
        self,
        analyzers: Optional[Mapping[OperationKind, AnalyzerInterface]] = None,
        gateway: Optional[LLMGateway] = None,
    ):
        """
        Initialize the dispatcher.

        Args:
            analyzers: Explicit operation -> analyzer table (must cover every OperationKind)
            gateway: LLM gateway used to build the default table when ``analyzers`` is None
        """
        if analyzers is None:
            if gateway is None:
                raise ValueError("Either analyzers or gateway must be provided")
            analyzers = default_analyzers(gateway)

        missing = set(OperationKind) - set(analyzers)
        if missing:
            raise ValueError(f"No analyzer registered for: {sorted(op.value for op in missing)}")

        self.analyzers = dict(analyzers)
        logger.info("OperationDispatcher initialized with %d analyzers", len(self.analyzers))

    async def run(self, text: str, operation: Union[str, OperationKind]) -> AnalysisResult:
        """
        Run one analysis to completion.

        Raises:
            UnsupportedOperation: ``operation`` is not an OperationKind (no analyzer runs)
            InternalError: the analyzer raised or returned the wrong result shape
        """
        kind = parse_operation(operation)
        analyzer = self.analyzers[kind]

        try:
            result = analyzer.analyze(text)
            if inspect.isawaitable(result):
                result = await result
        except Exception as exc:
            logger.error(f"{kind.value} analyzer failed: {exc}", exc_info=True)
            raise InternalError(f"{kind.value} analysis failed: {exc}") from exc

        expected = RESULT_TYPES[kind]
        if not isinstance(result, expected):
            logger.error(
                "%s analyzer returned %s, expected %s",
                kind.value, type(result).__name__, expected.__name__,
            )
            raise InternalError(f"{kind.value} analyzer returned an unexpected result shape")

        logger.debug(f"{kind.value} analysis completed")
        return result
