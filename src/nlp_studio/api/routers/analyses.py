"""
Analysis history router.

Endpoints:
  POST   /api/analyses        — Run an analysis and store it
  GET    /api/analyses        — List stored analyses (oldest first)
  GET    /api/analyses/{id}   — Fetch one analysis
  PUT    /api/analyses/{id}   — Merge a partial record
  DELETE /api/analyses/{id}   — Remove an analysis (always 204)
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Response, status
from fastapi.responses import JSONResponse

from nlp_studio.api.dependencies import get_analysis_service, get_store
from nlp_studio.api.schemas.analysis import AnalysisCreateRequest, AnalysisUpdateRequest, ErrorResponse
from nlp_studio.api.services.analysis_service import AnalysisService
from nlp_studio.db.history_store import AnalysisRecord, AnalysisStore
from nlp_studio.errors import InternalError, NotFound, UnsupportedOperation

logger = logging.getLogger(__name__)

router = APIRouter()


@router.get(
    "",
    response_model=list[AnalysisRecord],
    summary="List stored analyses",
)
async def list_analyses(store: AnalysisStore = Depends(get_store)):
    return store.list()


@router.post(
    "",
    response_model=AnalysisRecord,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "Missing field or unsupported operation"}, 500: {"model": ErrorResponse}},
    summary="Run an NLP operation and store the result",
)
async def create_analysis(
    payload: AnalysisCreateRequest,
    service: AnalysisService = Depends(get_analysis_service),
):
    """
    Run one NLP operation on the submitted text.

    - operation: sentiment | summary | keywords | entities | classify | chat

    Returns the stored record including its result.
    """
    if not payload.inputText or not payload.inputText.strip() or not payload.operation:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, "inputText and operation are required")

    try:
        return await service.create(payload.inputText, payload.operation)
    except UnsupportedOperation as exc:
        raise HTTPException(status.HTTP_400_BAD_REQUEST, str(exc))
    except InternalError as exc:
        logger.error("Error in /api/analyses: %s", exc)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Failed to run NLP operation", "details": str(exc)},
        )


@router.get(
    "/{analysis_id}",
    response_model=AnalysisRecord,
    summary="Fetch one analysis",
)
async def get_analysis(analysis_id: int, store: AnalysisStore = Depends(get_store)):
    try:
        return store.get(analysis_id)
    except NotFound as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))


@router.put(
    "/{analysis_id}",
    response_model=AnalysisRecord,
    summary="Update an analysis",
)
async def update_analysis(
    analysis_id: int,
    payload: AnalysisUpdateRequest,
    store: AnalysisStore = Depends(get_store),
):
    """Merge the given fields into the record; fields not sent are kept."""
    try:
        return store.update(analysis_id, payload.model_dump(exclude_unset=True, exclude_none=True))
    except NotFound as exc:
        raise HTTPException(status.HTTP_404_NOT_FOUND, str(exc))


@router.delete(
    "/{analysis_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete an analysis",
)
async def delete_analysis(analysis_id: int, store: AnalysisStore = Depends(get_store)):
    store.delete(analysis_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
