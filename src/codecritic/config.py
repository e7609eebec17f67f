from __future__ import annotations

from pydantic import AliasChoices, Field, SecretStr, confloat, conint, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from .constants import Limits
from .models import ProviderId

_PROVIDER_ALIASES = {
    "openai": "primary",
    "claude": "secondary",
    "anthropic": "secondary",
}


class CodeCriticConfig(BaseSettings):
    """Configuration loaded from CODECRITIC_* environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="CODECRITIC_",
        frozen=True,
        extra="ignore",
        populate_by_name=True,
    )

    # Provider credentials. Presence decides availability for the process lifetime.
    openai_api_key: SecretStr = Field(
        default="",
        validation_alias=AliasChoices("CODECRITIC_OPENAI_API_KEY", "OPENAI_API_KEY", "openai_api_key"),
        description="OpenAI API key (primary provider)",
    )
    claude_api_key: SecretStr = Field(
        default="",
        validation_alias=AliasChoices(
            "CODECRITIC_CLAUDE_API_KEY", "CLAUDE_API_KEY", "ANTHROPIC_API_KEY", "claude_api_key"
        ),
        description="Anthropic API key (secondary provider)",
    )

    # Model settings
    openai_model: str = Field(default="gpt-4.1")
    claude_model: str = Field(default="claude-sonnet-4-5-20250929")
    max_tokens: conint(ge=1) = Field(default=4000)
    temperature: confloat(ge=0, le=2) = Field(default=0.1)
    timeout_seconds: conint(ge=1) = Field(default=120, description="Per-call provider timeout")

    default_provider: ProviderId = Field(default="primary")
    max_code_length: conint(ge=1) = Field(default=Limits.MAX_CODE_LENGTH)

    @field_validator("default_provider", mode="before")
    @classmethod
    def _normalize_provider(cls, value: str) -> str:
        if isinstance(value, str):
            lowered = value.strip().lower()
            return _PROVIDER_ALIASES.get(lowered, lowered)
        return value

    def has_openai(self) -> bool:
        return bool(self.openai_api_key.get_secret_value())

    def has_claude(self) -> bool:
        return bool(self.claude_api_key.get_secret_value())
