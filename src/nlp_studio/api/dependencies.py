"""FastAPI dependencies resolving the per-app service instances."""
from fastapi import Request

from nlp_studio.api.services.analysis_service import AnalysisService
from nlp_studio.db.history_store import AnalysisStore


def get_analysis_service(request: Request) -> AnalysisService:
    return request.app.state.analysis_service


def get_store(request: Request) -> AnalysisStore:
    return request.app.state.store
