from fastapi import APIRouter, Depends
from fastapi.responses import JSONResponse

from chat_relay.core.exceptions import ClientInputError, UpstreamError
from chat_relay.dependencies import get_chat_relay
from chat_relay.models.chat import (
    ChatRequest,
    ChatResponse,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
)
from chat_relay.services.relay_service import ChatRelay

router = APIRouter()

GENERATE_ERROR = "Error generating response"

_ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


@router.post("/api/chat", response_model=ChatResponse, responses=_ERROR_RESPONSES)
async def chat_endpoint(
    request: ChatRequest | None = None,
    relay: ChatRelay = Depends(get_chat_relay),
) -> ChatResponse:
    request = request or ChatRequest()
    response_text = await relay.relay(message=request.message, history=request.history)
    return ChatResponse(response=response_text)


@router.post("/generate", response_model=GenerateResponse, responses=_ERROR_RESPONSES)
async def generate_endpoint(
    request: GenerateRequest | None = None,
    relay: ChatRelay = Depends(get_chat_relay),
):
    request = request or GenerateRequest()
    try:
        text = await relay.relay(message=request.prompt)
    except ClientInputError:
        return JSONResponse(status_code=400, content={"error": "Prompt is required"})
    except UpstreamError:
        return JSONResponse(status_code=500, content={"error": GENERATE_ERROR})
    return GenerateResponse(text=text)
