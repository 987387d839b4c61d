"""Configuration models."""

from pathlib import Path
from typing import Optional

from pydantic import (
    AnyHttpUrl,
    BaseModel,
    ConfigDict,
    Field,
    TypeAdapter,
    ValidationError,
    field_validator,
)
from pydantic_settings import BaseSettings, SettingsConfigDict

DEFAULT_AI_ENDPOINT = "https://api.openai.com/v1/chat/completions"

_http_url = TypeAdapter(AnyHttpUrl)


class GitSettings(BaseModel):
    """Repository the release notes are drafted from."""

    model_config = ConfigDict(frozen=True)

    path: str = Field(..., description="Path to the local Git repository")
    branch: str = Field(..., description="Branch to check out and pull before reading the log")

    @field_validator("path", "branch")
    @classmethod
    def not_empty(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("must not be empty")
        return value


class AISettings(BaseModel):
    """Chat-completion credentials. No key means a plain-text summary."""

    model_config = ConfigDict(frozen=True)

    key: Optional[str] = Field(None, description="API key for the chat-completion endpoint")
    url: Optional[str] = Field(None, description="Endpoint override")

    @field_validator("key", "url", mode="before")
    @classmethod
    def blank_is_none(cls, value: Optional[str]) -> Optional[str]:
        if isinstance(value, str):
            value = value.strip()
            return value or None
        return value

    @field_validator("url")
    @classmethod
    def valid_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None:
            try:
                _http_url.validate_python(value)
            except ValidationError as e:
                raise ValueError("must be an absolute http(s) URL") from e
        return value

    @property
    def enabled(self) -> bool:
        """Whether an AI summary should be requested."""
        return bool(self.key)

    @property
    def endpoint(self) -> str:
        return self.url or DEFAULT_AI_ENDPOINT


class ReleaseConfig(BaseModel):
    """Persisted relnotes configuration document."""

    model_config = ConfigDict(
        frozen=True,
        json_schema_extra={
            "example": {
                "git": {"path": "/path/to/repo", "branch": "main"},
                "ai": {"key": "sk-...", "url": None},
            }
        },
    )

    git: GitSettings
    ai: AISettings = Field(default_factory=AISettings)


class Settings(BaseSettings):
    """Runtime settings loaded from environment variables (RELNOTES_*)."""

    model_config = SettingsConfigDict(
        env_prefix="RELNOTES_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    config_file: Path = Path("default.json")
    non_interactive: bool = False
    log_level: str = "WARNING"
