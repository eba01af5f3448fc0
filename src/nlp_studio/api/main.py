"""Main FastAPI application for the NLP Studio text analysis API."""
import asyncio
import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.sessions import SessionMiddleware

from nlp_studio import config
from nlp_studio.analyzers.orchestrator import OperationDispatcher
from nlp_studio.api.routers import analyses, auth
from nlp_studio.api.services.analysis_service import AnalysisService
from nlp_studio.core.llm_gateway import GeminiGateway, LLMGateway
from nlp_studio.db.history_store import AnalysisStore

# Setup logging
logging.basicConfig(
    level=config.LOG_LEVEL,
    format='%(asctime)s - [%(levelname)s] - %(name)s - %(message)s'
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Warm up analyzers at startup, drop the history at shutdown."""
    logger.info("Preparing text analyzers...")
    dispatcher: OperationDispatcher = app.state.dispatcher
    for kind, analyzer in dispatcher.analyzers.items():
        ready = await asyncio.to_thread(analyzer.validate)
        if not ready:
            logger.warning(f"{kind.value} analyzer running in degraded mode")
    logger.info(f"{len(dispatcher.analyzers)} analyzers ready")
    if config.IS_PROD and config.SESSION_SECRET == "supersecret":
        logger.warning("SESSION_SECRET is the development default; set it in production")
    yield
    logger.info(f"Shutting down; discarding {len(app.state.store)} stored analyses")
    app.state.store.clear()


def create_app(
    store: Optional[AnalysisStore] = None,
    dispatcher: Optional[OperationDispatcher] = None,
    gateway: Optional[LLMGateway] = None,
) -> FastAPI:
    """
    Build the API with its own store and dispatcher.

    Args:
        store: History store (a fresh, empty one by default)
        dispatcher: Operation dispatcher (default analyzers by default)
        gateway: LLM gateway for the default dispatcher (Gemini by default)
    """
    app = FastAPI(
        title="NLP Studio — Text Analysis API",
        description=(
            "Sentiment, summaries, keywords, entities, classification and chat "
            "for submitted text, with an in-memory analysis history."
        ),
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.store = store if store is not None else AnalysisStore()
    app.state.dispatcher = dispatcher or OperationDispatcher(gateway=gateway or GeminiGateway())
    app.state.analysis_service = AnalysisService(app.state.dispatcher, app.state.store)

    # Sessions: secure cross-site cookie in production, lax locally
    app.add_middleware(
        SessionMiddleware,
        secret_key=config.SESSION_SECRET,
        session_cookie=config.SESSION_COOKIE,
        max_age=config.SESSION_MAX_AGE,
        same_site="none" if config.IS_PROD else "lax",
        https_only=config.IS_PROD,
    )

    # CORS for the React frontend (plus preview deployments)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=[config.FRONTEND_URL, *config.EXTRA_CORS_ORIGINS],
        allow_origin_regex=config.CORS_ORIGIN_REGEX or None,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_origin(request: Request, call_next):
        logger.debug("Origin: %s", request.headers.get("origin"))
        return await call_next(request)

    # ── Include Routers ────────────────────────────────────────────────────
    app.include_router(analyses.router, prefix="/api/analyses", tags=["Analyses"])
    app.include_router(auth.router, tags=["Auth"])

    # ── Health Check ────────────────────────────────────────────────────────
    @app.get("/", tags=["Health"], summary="Service status")
    async def root():
        return {"status": "ok", "message": "NLP app backend is running"}

    @app.get("/health", tags=["Health"], summary="Service health check")
    async def health(request: Request):
        """
        Check API health.

        Returns:
            - status: "ok" if running
            - analyses: Number of analyses currently stored
        """
        return {
            "status": "ok",
            "analyses": len(request.app.state.store),
        }

    return app


app = create_app()
