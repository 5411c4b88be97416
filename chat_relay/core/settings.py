from __future__ import annotations

from functools import lru_cache

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_ERROR_MESSAGE = "Sorry, something went wrong. Please try again later."


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = Field(default="Gemini Chat Relay", alias="APP_NAME")
    log_level: str = Field(default="INFO", alias="LOG_LEVEL")
    sdk_log_level: str = Field(default="WARNING", alias="SDK_LOG_LEVEL")

    gemini_api_key: str | None = Field(
        default=None,
        validation_alias=AliasChoices("GEMINI_API_KEY", "GOOGLE_API_KEY"),
    )
    gemini_model: str = Field(default="gemini-2.5-flash", alias="GEMINI_MODEL")
    # Some model/mode combinations only make sense single-turn.
    history_enabled: bool = Field(default=True, alias="CHAT_HISTORY_ENABLED")

    host: str = Field(default="0.0.0.0", alias="HOST")
    port: int = Field(default=3000, alias="PORT")

    cors_origins_raw: str = Field(default="*", alias="CORS_ORIGINS")
    static_dir: str = Field(default="public", alias="STATIC_DIR")

    generic_error_message: str = Field(
        default=DEFAULT_ERROR_MESSAGE, alias="GENERIC_ERROR_MESSAGE"
    )

    @property
    def api_key_set(self) -> bool:
        return bool(self.gemini_api_key and self.gemini_api_key.strip())

    @property
    def cors_origins(self) -> list[str]:
        origins = [o.strip() for o in self.cors_origins_raw.split(",")]
        return [o for o in origins if o] or ["*"]


@lru_cache
def get_settings() -> Settings:
    return Settings()
