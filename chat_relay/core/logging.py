from __future__ import annotations

import logging

from chat_relay.core.settings import Settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"

# Loggers that follow LOG_LEVEL alongside the relay's own stage logs.
_SERVICE_LOGGERS = ("chat_relay", "uvicorn.error", "uvicorn.access")
# The Gemini SDK and its HTTP transport log every request at INFO.
_SDK_LOGGERS = ("google_genai", "httpx", "httpcore")


def _level(name: str | None, default: int) -> int:
    return getattr(logging, (name or "").upper(), default)


def configure_logging(settings: Settings) -> int:
    """Configure stdlib logging for the relay and return the service level."""
    level = _level(settings.log_level, logging.INFO)
    sdk_level = _level(settings.sdk_log_level, logging.WARNING)

    logging.basicConfig(level=level, format=LOG_FORMAT)

    for name in _SERVICE_LOGGERS:
        logging.getLogger(name).setLevel(level)
    for name in _SDK_LOGGERS:
        logging.getLogger(name).setLevel(sdk_level)

    return level
