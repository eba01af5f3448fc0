"""
Analysis History Store
Process-local, memory-only list of past analyses. Restarting the process discards it.
"""

import itertools
import logging
from datetime import datetime, timezone
from typing import Any, Mapping

from pydantic import BaseModel

from nlp_studio.analyzers.results import OperationKind
from nlp_studio.errors import NotFound

logger = logging.getLogger("NLPSTUDIO_HISTORY")

# Fields an update may overwrite; ``id`` is fixed once assigned
MUTABLE_FIELDS = ("inputText", "operation", "result", "createdAt")


class AnalysisRecord(BaseModel):
    """One stored analysis."""
    id: int
    inputText: str
    operation: OperationKind
    result: dict[str, Any]
    createdAt: datetime


class AnalysisStore:
    """
    Ordered in-memory history of analyses.

    Ids come from a counter that only moves forward, so they stay strictly
    increasing in insertion order for the lifetime of the instance. None of
    the methods await, which keeps id assignment and insertion atomic on the
    event loop.
    """

    def __init__(self):
        self._records: list[AnalysisRecord] = []
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._records)

    def append(self, input_text: str, operation: OperationKind, result: Mapping[str, Any]) -> AnalysisRecord:
        """Store a new record with a fresh id and the current UTC time."""
        record = AnalysisRecord(
            id=next(self._ids),
            inputText=input_text,
            operation=operation,
            result=dict(result),
            createdAt=datetime.now(timezone.utc),
        )
        self._records.append(record)
        logger.debug(f"Stored analysis {record.id} ({record.operation.value})")
        return record

    def list(self) -> list[AnalysisRecord]:
        """Snapshot of all records, oldest first."""
        return list(self._records)

    def _index_of(self, record_id: int) -> int:
        for idx, record in enumerate(self._records):
            if record.id == record_id:
                return idx
        raise NotFound(record_id)

    def get(self, record_id: int) -> AnalysisRecord:
        return self._records[self._index_of(record_id)]

    def update(self, record_id: int, fields: Mapping[str, Any]) -> AnalysisRecord:
        """
        Shallow-merge ``fields`` into an existing record.

        Only MUTABLE_FIELDS are applied; other keys are ignored. The new
        ``result`` is not checked against ``operation``.

        Raises:
            NotFound: no record has ``record_id``
        """
        idx = self._index_of(record_id)
        changes = {key: value for key, value in fields.items() if key in MUTABLE_FIELDS}
        merged = self._records[idx].model_copy(update=changes)
        self._records[idx] = merged
        logger.debug(f"Updated analysis {record_id}: {sorted(changes)}")
        return merged

    def delete(self, record_id: int) -> None:
        """Remove the record if present; unknown ids are ignored."""
        before = len(self._records)
        self._records = [r for r in self._records if r.id != record_id]
        if len(self._records) < before:
            logger.debug(f"Deleted analysis {record_id}")

    def clear(self) -> None:
        """Drop every record. The id counter keeps counting."""
        self._records.clear()
