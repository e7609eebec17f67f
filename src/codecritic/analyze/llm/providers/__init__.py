from __future__ import annotations

from .base import LLMProvider, ProviderResponse
from .openai_provider import OpenAIProvider
from .anthropic_provider import AnthropicProvider

PROVIDER_ALIASES: dict[str, str] = {
    "anthropic": "claude",
}


def normalize_provider_name(name: str) -> str:
    lowered = (name or "").strip().lower()
    return PROVIDER_ALIASES.get(lowered, lowered)


__all__ = [
    "LLMProvider",
    "ProviderResponse",
    "OpenAIProvider",
    "AnthropicProvider",
    "PROVIDER_ALIASES",
    "normalize_provider_name",
]
