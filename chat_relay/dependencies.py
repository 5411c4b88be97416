from __future__ import annotations

from fastapi import Request

from chat_relay.core.settings import Settings
from chat_relay.services.relay_service import ChatRelay


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_chat_relay(request: Request) -> ChatRelay:
    return request.app.state.chat_relay
