"""Analysis service — runs the dispatcher and records successful results."""
import logging

from nlp_studio.analyzers.orchestrator import OperationDispatcher, parse_operation
from nlp_studio.db.history_store import AnalysisRecord, AnalysisStore

logger = logging.getLogger(__name__)


class AnalysisService:
    """Glue between the operation dispatcher and the history store."""

    def __init__(self, dispatcher: OperationDispatcher, store: AnalysisStore):
        self.dispatcher = dispatcher
        self.store = store

    async def create(self, text: str, operation: str) -> AnalysisRecord:
        """
        Run one analysis and append it to the history.

        Failed analyses are not stored; UnsupportedOperation and
        InternalError propagate to the caller.
        """
        kind = parse_operation(operation)
        result = await self.dispatcher.run(text, kind)
        record = self.store.append(text, kind, result.model_dump(exclude_none=True))
        logger.info(f"Analysis {record.id} stored ({kind.value}, {len(text)} chars)")
        return record
