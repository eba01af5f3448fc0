"""Analysis history request/response schemas."""
from datetime import datetime
from typing import Any, Optional

from pydantic import BaseModel

from nlp_studio.analyzers.results import OperationKind


class AnalysisCreateRequest(BaseModel):
    """Request to run and store an analysis.

    Both fields are optional here so the router can answer 400 (not 422)
    when one is missing, and unknown operations reach the dispatcher.
    """
    inputText: Optional[str] = None
    operation: Optional[str] = None

    model_config = {"json_schema_extra": {"example": {"inputText": "I love this product", "operation": "sentiment"}}}


class AnalysisUpdateRequest(BaseModel):
    """Partial record; only the fields sent are merged."""
    inputText: Optional[str] = None
    operation: Optional[OperationKind] = None
    result: Optional[dict[str, Any]] = None
    createdAt: Optional[datetime] = None


class ErrorResponse(BaseModel):
    error: str
    details: Optional[str] = None
