# chatrelay/settings.py
from functools import lru_cache
from typing import List

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # core
    APP_NAME: str = Field(default="chat-relay")
    ENV: str = Field(default="dev")
    DEBUG: bool = Field(default=False)
    PORT: int = Field(default=4000)
    CORS_ORIGINS: List[str] = Field(default_factory=lambda: ["*"])

    # provider
    LLM_PROVIDER: str | None = None
    LLM_API_KEY: str | None = None
    LLM_API_URL: str | None = None
    LLM_MODEL: str | None = None
    REQUEST_TIMEOUT: float = Field(default=120.0)

    # simulated streaming
    STREAM_CHUNK_CHARS: int = Field(default=60)
    STREAM_DELAY_MS: int = Field(default=60)

    # read root-level .env
    model_config = SettingsConfigDict(
        env_file=".env",
        extra="ignore",
    )

    @property
    def app_name(self) -> str:
        return self.APP_NAME

    @property
    def stream_delay(self) -> float:
        return self.STREAM_DELAY_MS / 1000.0


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    return Settings()
