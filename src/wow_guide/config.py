"""
Configuration management for the WoW collection guide service.

Loads settings from environment variables and an optional .env file. The
generative-API credential has no default; the server refuses to start
without it.
"""

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        env_prefix="WOW_GUIDE_",
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
    )

    api_key: str | None = Field(default=None, description="Text-generation API credential")
    api_url: str = Field(
        default="https://api.perplexity.ai/chat/completions",
        description="Chat-completions endpoint of the text-generation API",
    )
    model: str = Field(default="sonar", description="Text-generation model identifier")
    api_timeout: float = Field(default=30.0, gt=0, description="HTTP request timeout in seconds")
    temperature: float = Field(default=0.3, ge=0.0, le=2.0)
    top_p: float = Field(default=0.9, gt=0.0, le=1.0)
    max_tokens: int = Field(default=1024, ge=1, description="Output-length ceiling")
    guide_language: str = Field(default="Polish", description="Language the guide is written in")

    host: str = Field(default="0.0.0.0", description="Listening address")
    port: int = Field(
        default=3000,
        ge=1,
        le=65535,
        validation_alias=AliasChoices("WOW_GUIDE_PORT", "PORT"),
        description="Listening port, also read from PORT as set by hosting platforms",
    )
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])
    log_level: str = Field(default="INFO", description="Logging level")

    blizzard_client_id: str | None = Field(default=None, description="Battle.net OAuth client ID")
    blizzard_client_secret: str | None = Field(
        default=None, description="Battle.net OAuth client secret"
    )
    blizzard_region: str = Field(default="eu", description="Battle.net API region")


_settings: Settings | None = None


def get_settings() -> Settings:
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings


def reload_settings() -> Settings:
    global _settings
    _settings = Settings()
    return _settings
