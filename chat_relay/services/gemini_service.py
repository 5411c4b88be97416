from __future__ import annotations

import asyncio
import logging
from typing import Protocol, Sequence

from google import genai
from google.genai import types

from chat_relay.core.exceptions import EmptyUpstreamResponse, StartupConfigError
from chat_relay.core.settings import Settings, get_settings
from chat_relay.models.chat import ChatTurn

logger = logging.getLogger(__name__)


class UpstreamClient(Protocol):
    """Anything that can turn a message (plus prior turns) into generated text."""

    model: str

    async def generate(self, message: str, history: Sequence[ChatTurn]) -> str:
        ...


def _upstream_role(role: str) -> str:
    role = (role or "").strip().lower()
    if role in {"model", "assistant", "bot"}:
        return "model"
    return "user"


def build_contents(message: str, history: Sequence[ChatTurn]) -> list[types.Content]:
    contents: list[types.Content] = []

    for turn in history:
        contents.append(
            types.Content(
                role=_upstream_role(turn.role),
                parts=[types.Part.from_text(text=turn.text)],
            )
        )

    contents.append(
        types.Content(role="user", parts=[types.Part.from_text(text=message)])
    )
    return contents


class GeminiService:
    def __init__(self, settings: Settings | None = None, client: genai.Client | None = None):
        self._settings = settings or get_settings()

        if client is None:
            if not self._settings.api_key_set:
                raise StartupConfigError("GEMINI_API_KEY is not configured")
            client = genai.Client(api_key=self._settings.gemini_api_key)

        self._client = client

    @property
    def model(self) -> str:
        return self._settings.gemini_model

    async def generate(self, message: str, history: Sequence[ChatTurn]) -> str:
        contents = build_contents(message, history)

        def _send() -> str:
            response = self._client.models.generate_content(
                model=self.model,
                contents=contents,
            )
            logger.debug("Gemini raw response: %r", response)

            text = getattr(response, "text", None)
            if isinstance(text, str) and text.strip():
                return text
            raise EmptyUpstreamResponse(
                f"Gemini model {self.model!r} returned no text"
            )

        return await asyncio.to_thread(_send)
