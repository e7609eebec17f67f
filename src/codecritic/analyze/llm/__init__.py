"""LLM provider access and response parsing."""

from .provider_orchestrator import LLMResponse, LLMUsage, ProviderOrchestrator
from .response_parser import ResponseParser

__all__ = [
    "LLMResponse",
    "LLMUsage",
    "ProviderOrchestrator",
    "ResponseParser",
]
