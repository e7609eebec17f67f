from __future__ import annotations

from typing import Any, Callable, Optional

from .base import LLMProvider, ProviderResponse


class OpenAIProvider(LLMProvider):
    """OpenAI Responses API provider."""

    name = "openai"
    display_name = "OpenAI"

    def __init__(
        self,
        api_key: str,
        *,
        model: str = "gpt-4.1",
        client_getter: Optional[Callable[[], Any]] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(api_key, model=model, **kwargs)
        self._client_getter = client_getter

    @property
    def client(self):
        if self._client_getter is not None:
            return self._client_getter()
        if self._client is None:
            from openai import AsyncOpenAI

            self._client = AsyncOpenAI(api_key=self.api_key)
        return self._client

    async def _call(self, prompt: str) -> ProviderResponse:
        response = await self.client.responses.create(
            model=self.model,
            instructions=self.system_prompt,
            input=prompt,
            max_output_tokens=self.max_tokens,
            temperature=self.temperature,
        )
        usage = getattr(response, "usage", None)
        input_tokens = int(getattr(usage, "input_tokens", 0) or 0) if usage else 0
        output_tokens = int(getattr(usage, "output_tokens", 0) or 0) if usage else 0
        content = getattr(response, "output_text", "") or ""
        return ProviderResponse(
            content=content,
            input_tokens=input_tokens,
            output_tokens=output_tokens,
            model=self.model,
        )

    def estimate_cost(self, model: str, tokens_in: int, tokens_out: int) -> float:
        pricing = {
            "gpt-4.1": {"input": 0.002, "output": 0.008},
            "gpt-4.1-mini": {"input": 0.0004, "output": 0.0016},
            "gpt-4.1-nano": {"input": 0.0001, "output": 0.0004},
            "gpt-4o": {"input": 0.005, "output": 0.015},
            "gpt-4o-mini": {"input": 0.00015, "output": 0.0006},
        }
        rates = pricing.get(model, {"input": 0.002, "output": 0.008})
        return (tokens_in / 1000 * rates["input"]) + (tokens_out / 1000 * rates["output"])
