"""
app/main.py

FastAPI application entry point.

Responsibilities:
  - Build the FastAPI app from an explicit Settings object (create_app)
  - Wire the SummaryService with the Gemini summarizer and text extractor
  - Restrict CORS to the configured frontend origin
  - Register the upload router and a /health endpoint for liveness probes
  - Add a global handler for application errors that escape the controller
  - Refuse to start (exit status 1) when configuration is invalid (main)
"""

from __future__ import annotations

import sys
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.api.upload_controller import router as upload_router
from app.api.upload_controller import server_error
from app.core.config import Settings, load_settings
from app.core.exceptions import AppBaseException, ConfigurationError
from app.core.logger import configure_logging, get_logger
from app.extractor.text_extractor import TextExtractor
from app.models.summary_models import HealthResponse
from app.services.summary_service import SummaryService
from app.summarizer.base import Summarizer
from app.summarizer.gemini_summarizer import GeminiSummarizer

logger = get_logger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    summarizer: Optional[Summarizer] = None,
    extractor: Optional[TextExtractor] = None,
) -> FastAPI:
    """
    Build a new application instance.

    Args:
        settings   : Loaded configuration. Read from the environment when omitted
                     (``uvicorn app.main:create_app --factory``).
        summarizer : Override for the Gemini summarizer (tests inject a stub).
        extractor  : Override for the default PDF/DOCX extractor.

    Raises:
        ConfigurationError: If settings are omitted and the environment is invalid.
    """
    settings = settings or load_settings()
    configure_logging(settings.debug)

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        description=(
            "Accepts a PDF or DOCX upload, extracts its text and returns an "
            "AI-generated summary."
        ),
    )

    app.state.settings = settings
    app.state.summary_service = SummaryService(
        settings=settings,
        summarizer=summarizer or GeminiSummarizer(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
        ),
        extractor=extractor,
    )

    # ── Middleware ─────────────────────────────────────────────────────────────

    app.add_middleware(
        CORSMiddleware,
        allow_origins=[settings.frontend_url],
        allow_methods=["POST"],
        allow_headers=["*"],
    )

    # ── Routers ────────────────────────────────────────────────────────────────

    app.include_router(upload_router)

    # ── Global exception handler ───────────────────────────────────────────────

    @app.exception_handler(AppBaseException)
    async def app_exception_handler(request: Request, exc: AppBaseException) -> JSONResponse:
        """
        Safety-net for any AppBaseException that escapes controller-level handling.
        Returns { "error": "Internal server error" } (+ details in dev mode).
        """
        logger.exception("Unhandled application error on %s: %s", request.url.path, exc)
        return server_error(request, exc)

    # ── Health endpoint ────────────────────────────────────────────────────────

    @app.get("/health", response_model=HealthResponse, tags=["Health"], summary="Liveness probe")
    async def health() -> HealthResponse:
        """Returns 200 OK when the service is running."""
        return HealthResponse()

    logger.info(
        "%s v%s configured — model=%s  frontend=%s  dev_mode=%s",
        settings.app_name,
        settings.app_version,
        settings.gemini_model,
        settings.frontend_url,
        settings.dev_mode,
    )
    return app


def main() -> None:
    """Load configuration, fail fast if it is invalid, then serve."""
    configure_logging()
    try:
        settings = load_settings()
    except ConfigurationError as exc:
        logger.error("Refusing to start: %s", exc)
        sys.exit(1)

    app = create_app(settings)
    logger.info("Server running on %s:%d", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port)


if __name__ == "__main__":
    main()
