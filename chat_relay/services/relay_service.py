from __future__ import annotations

import logging
from typing import Sequence

from chat_relay.core.exceptions import ClientInputError, UpstreamError
from chat_relay.core.settings import DEFAULT_ERROR_MESSAGE
from chat_relay.models.chat import ChatTurn
from chat_relay.services.gemini_service import UpstreamClient

logger = logging.getLogger(__name__)

INVALID_KEY = "invalid key"
MODEL_ISSUE = "model issue"
QUOTA = "quota"

_STATUS_HINTS = {
    401: INVALID_KEY,
    403: INVALID_KEY,
    404: MODEL_ISSUE,
    429: QUOTA,
}


def classify_upstream_error(exc: BaseException) -> str | None:
    """Best-effort operator hint for why an upstream call failed."""
    code = getattr(exc, "code", None)
    if isinstance(code, int) and code in _STATUS_HINTS:
        return _STATUS_HINTS[code]

    text = f"{type(exc).__name__} {exc}".lower()
    if "api key" in text or "api_key" in text or "permission denied" in text:
        return INVALID_KEY
    if "quota" in text or "resource_exhausted" in text or "rate limit" in text:
        return QUOTA
    if "model" in text and ("not found" in text or "not supported" in text):
        return MODEL_ISSUE
    return None


class ChatRelay:
    """Forwards one chat message to the upstream model and returns its text."""

    def __init__(
        self,
        upstream: UpstreamClient,
        history_enabled: bool = True,
        generic_error: str = DEFAULT_ERROR_MESSAGE,
    ) -> None:
        self._upstream = upstream
        self._history_enabled = history_enabled
        self._generic_error = generic_error

    @property
    def upstream(self) -> UpstreamClient:
        return self._upstream

    async def relay(self, message: str | None, history: Sequence[ChatTurn] = ()) -> str:
        logger.info(
            "Chat request received (message_chars=%d, history_turns=%d)",
            len(message or ""),
            len(history),
        )

        if message is None or not message.strip():
            logger.info("Rejecting chat request: message is missing")
            raise ClientInputError("Message is required")

        if history and not self._history_enabled:
            logger.debug("History disabled; dropping %d prior turns", len(history))
            history = ()

        logger.info("Calling upstream model %s", self._upstream.model)
        try:
            text = await self._upstream.generate(message, list(history))
        except Exception as e:
            logger.exception(
                "Upstream call failed: %s: %s", type(e).__name__, e
            )
            hint = classify_upstream_error(e)
            if hint:
                logger.error("Upstream failure looks like: %s", hint)
            raise UpstreamError(self._generic_error) from e

        logger.info("Upstream responded")
        logger.info("Final text extracted (chars=%d)", len(text))
        return text
