from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from chat_relay.api import chat, health
from chat_relay.core.exceptions import RelayError
from chat_relay.core.logging import configure_logging
from chat_relay.core.settings import Settings, get_settings
from chat_relay.services.gemini_service import GeminiService, UpstreamClient
from chat_relay.services.relay_service import ChatRelay

logger = logging.getLogger(__name__)

INVALID_BODY_MESSAGE = "Invalid request body"


async def relay_error_handler(request: Request, exc: RelayError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def validation_error_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    logger.info("Rejecting malformed request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(status_code=400, content={"error": INVALID_BODY_MESSAGE})


def create_app(
    settings: Settings | None = None,
    upstream: UpstreamClient | None = None,
) -> FastAPI:
    """Build the relay application.

    ``upstream`` defaults to a :class:`GeminiService`, which raises
    ``StartupConfigError`` when no API key is configured.
    """
    settings = settings or get_settings()
    configure_logging(settings)

    if upstream is None:
        upstream = GeminiService(settings=settings)

    app = FastAPI(title=settings.app_name)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.state.settings = settings
    app.state.chat_relay = ChatRelay(
        upstream=upstream,
        history_enabled=settings.history_enabled,
        generic_error=settings.generic_error_message,
    )

    app.add_exception_handler(RelayError, relay_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    app.include_router(chat.router)
    app.include_router(health.router)

    # Mounted last so the API routes take precedence over "/".
    static_dir = Path(settings.static_dir)
    if static_dir.is_dir():
        app.mount("/", StaticFiles(directory=static_dir, html=True), name="static")
    else:
        logger.warning("Static directory %s not found; not serving /", static_dir)

    return app
