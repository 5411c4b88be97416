from __future__ import annotations

from typing import Literal

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator


class ChatTurn(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    role: str  # "user" or "model"; "assistant" is accepted
    text: str = Field(validation_alias=AliasChoices("text", "content"))


class ChatRequest(BaseModel):
    # Optional here so a missing message is a 400 from the handler, not a 422.
    message: str | None = None
    history: list[ChatTurn] = Field(default_factory=list)

    @field_validator("history", mode="before")
    @classmethod
    def _null_history(cls, value):
        return [] if value is None else value


class ChatResponse(BaseModel):
    response: str


class ErrorResponse(BaseModel):
    error: str


class GenerateRequest(BaseModel):
    """Single-shot request used by the original ``/generate`` page."""

    prompt: str | None = None


class GenerateResponse(BaseModel):
    text: str


class ProbeResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    status: Literal["ok"] = "ok"
    message: str
    api_key_set: bool = Field(alias="apiKeySet")
