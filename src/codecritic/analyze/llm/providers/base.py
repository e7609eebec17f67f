from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ....errors import ProviderError, ProviderUnavailable
from ....logging import PROCESS_LOGGER, ReviewLogger
from ...prompt_builder import SYSTEM_PROMPT


@dataclass(frozen=True)
class ProviderResponse:
    content: str
    input_tokens: int
    output_tokens: int
    model: str


class LLMProvider(ABC):
    """
    One LLM vendor behind a uniform availability/analyze contract.

    Availability is decided once from the credential and never changes.
    """

    name: str = ""
    display_name: str = ""

    def __init__(
        self,
        api_key: str,
        *,
        model: str,
        max_tokens: int = 4000,
        temperature: float = 0.1,
        timeout: float = 120,
        system_prompt: str = SYSTEM_PROMPT,
        logger: Optional[ReviewLogger] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.max_tokens = max_tokens
        self.temperature = temperature
        self.timeout = timeout
        self.system_prompt = system_prompt
        self._available = bool(api_key)
        self._client = None
        if not self._available:
            (logger or PROCESS_LOGGER).warning(
                f"{self.display_name or self.name} API key not provided", provider=self.name
            )

    def is_available(self) -> bool:
        return self._available

    async def analyze(self, prompt: str) -> str:
        """Return the model's raw text answer for ``prompt``."""
        response = await self.complete(prompt)
        return response.content

    async def complete(self, prompt: str) -> ProviderResponse:
        """Single request/response call. Every failure surfaces as ProviderError."""
        if not self._available:
            raise ProviderUnavailable(
                f"{self.display_name or self.name} client not initialized. Please check your API key.",
                provider=self.name,
            )
        try:
            return await asyncio.wait_for(self._call(prompt), timeout=self.timeout)
        except ProviderError:
            raise
        except asyncio.TimeoutError as exc:
            raise ProviderError(
                f"{self.display_name} request timed out after {self.timeout}s", provider=self.name
            ) from exc
        except asyncio.CancelledError:
            task = asyncio.current_task()
            if task is not None and task.cancelling():
                raise
            raise ProviderError(f"{self.display_name} request was cancelled", provider=self.name) from None
        except Exception as exc:
            raise ProviderError(
                f"Failed to get response from {self.display_name}: {exc}", provider=self.name
            ) from exc

    @abstractmethod
    async def _call(self, prompt: str) -> ProviderResponse:
        """Make the vendor call. Returns content + token usage."""

    @abstractmethod
    def estimate_cost(self, model: str, tokens_in: int, tokens_out: int) -> float:
        """Estimate cost in USD for a given model + token usage."""
