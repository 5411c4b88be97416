from fastapi import APIRouter, Depends

from chat_relay.core.settings import Settings
from chat_relay.dependencies import get_app_settings
from chat_relay.models.chat import ProbeResponse

router = APIRouter()


@router.get("/api/test", response_model=ProbeResponse)
def api_test(settings: Settings = Depends(get_app_settings)) -> ProbeResponse:
    # Must not touch the upstream service.
    return ProbeResponse(message="Server is running", apiKeySet=settings.api_key_set)


@router.get("/health")
def health_check() -> dict[str, str]:
    return {"status": "ok"}
