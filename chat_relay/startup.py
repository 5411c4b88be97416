from __future__ import annotations

import logging
from dataclasses import dataclass

import uvicorn
from fastapi import FastAPI

from chat_relay.core.exceptions import StartupConfigError
from chat_relay.core.logging import configure_logging
from chat_relay.core.settings import Settings, get_settings
from chat_relay.main import create_app

logger = logging.getLogger(__name__)


@dataclass
class Startup:
    settings: Settings
    app: FastAPI | None = None
    error: StartupConfigError | None = None

    @property
    def ok(self) -> bool:
        return self.app is not None and self.error is None


def initialize(settings: Settings | None = None) -> Startup:
    """Validate configuration and build the app without exiting the process."""
    settings = settings or get_settings()
    configure_logging(settings)

    logger.info("Model: %s", settings.gemini_model)
    logger.info("History enabled: %s", settings.history_enabled)
    logger.info("GEMINI_API_KEY set: %s", settings.api_key_set)

    try:
        app = create_app(settings)
    except StartupConfigError as e:
        return Startup(settings=settings, error=e)
    return Startup(settings=settings, app=app)


def main() -> int:
    startup = initialize()
    if not startup.ok:
        logger.error("Refusing to start: %s", startup.error)
        return 1

    settings = startup.settings
    logger.info("Server running on %s:%d", settings.host, settings.port)
    uvicorn.run(startup.app, host=settings.host, port=settings.port)
    return 0
