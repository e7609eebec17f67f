from __future__ import annotations

import time
from dataclasses import asdict, dataclass
from typing import TYPE_CHECKING, Optional, Sequence

from ...constants import PRIMARY, SECONDARY
from ...errors import NoProviderAvailable
from ...logging import PROCESS_LOGGER, ReviewLogger
from .providers import AnthropicProvider, LLMProvider, OpenAIProvider, normalize_provider_name

if TYPE_CHECKING:
    from ...config import CodeCriticConfig

_SLOT_INDEX = {PRIMARY: 0, SECONDARY: 1}


@dataclass
class LLMUsage:
    provider: str
    model: str
    tokens_in: int
    tokens_out: int
    cost_usd: float
    latency_ms: int

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class LLMResponse:
    content: str
    usage: LLMUsage


class ProviderOrchestrator:
    """
    Pick one provider per request from a fixed, ordered provider list.

    Selection:
    1. Preferred provider if it is available
    2. Otherwise the first other available provider, in list order
    3. Otherwise NoProviderAvailable

    One call per request; a failed call is not retried on another provider.
    """

    def __init__(self, providers: Sequence[LLMProvider]) -> None:
        self.providers: tuple[LLMProvider, ...] = tuple(providers)

    @classmethod
    def from_config(cls, config: "CodeCriticConfig") -> "ProviderOrchestrator":
        common = {
            "max_tokens": config.max_tokens,
            "temperature": config.temperature,
            "timeout": config.timeout_seconds,
        }
        return cls(
            [
                OpenAIProvider(
                    config.openai_api_key.get_secret_value(),
                    model=config.openai_model,
                    **common,
                ),
                AnthropicProvider(
                    config.claude_api_key.get_secret_value(),
                    model=config.claude_model,
                    **common,
                ),
            ]
        )

    def _preferred_index(self, preferred: Optional[str]) -> int:
        key = normalize_provider_name(preferred or PRIMARY)
        if key in _SLOT_INDEX:
            index = _SLOT_INDEX[key]
            return index if index < len(self.providers) else 0
        for index, provider in enumerate(self.providers):
            if provider.name == key:
                return index
        return 0

    def select(self, preferred: Optional[str] = PRIMARY) -> LLMProvider:
        if not self.providers:
            raise NoProviderAvailable("No AI providers configured")

        first = self._preferred_index(preferred)
        candidate = self.providers[first]
        if candidate.is_available():
            return candidate

        for index, provider in enumerate(self.providers):
            if index != first and provider.is_available():
                return provider

        raise NoProviderAvailable("No AI providers available")

    def available_providers(self) -> list[str]:
        return [provider.name for provider in self.providers if provider.is_available()]

    async def analyze(self, prompt: str, preferred: Optional[str] = PRIMARY) -> str:
        """Raw model text from the selected provider."""
        response = await self.complete(prompt, preferred)
        return response.content

    async def complete(
        self,
        prompt: str,
        preferred: Optional[str] = PRIMARY,
        *,
        logger: Optional[ReviewLogger] = None,
    ) -> LLMResponse:
        log = logger or PROCESS_LOGGER
        provider = self.select(preferred)
        log.info(
            "Provider selected",
            provider=provider.name,
            preferred=preferred,
            model=provider.model,
        )

        start = time.time()
        response = await provider.complete(prompt)
        latency_ms = int((time.time() - start) * 1000)

        usage = LLMUsage(
            provider=provider.name,
            model=response.model,
            tokens_in=response.input_tokens,
            tokens_out=response.output_tokens,
            cost_usd=provider.estimate_cost(response.model, response.input_tokens, response.output_tokens),
            latency_ms=latency_ms,
        )
        log.info("Provider response received", **usage.to_dict())
        return LLMResponse(content=response.content, usage=usage)
