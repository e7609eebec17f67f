from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace
from typing import Optional
from unittest.mock import AsyncMock

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

import pytest

from codecritic.analyze.llm.providers.base import ProviderResponse

_PROVIDER_ENV_VARS = (
    "OPENAI_API_KEY",
    "CLAUDE_API_KEY",
    "ANTHROPIC_API_KEY",
    "CODECRITIC_OPENAI_API_KEY",
    "CODECRITIC_CLAUDE_API_KEY",
    "CODECRITIC_DEFAULT_PROVIDER",
)


@pytest.fixture(params=["asyncio"])
def anyio_backend(request):
    """Restrict anyio tests to asyncio only (trio is not installed)."""
    return request.param


@pytest.fixture(autouse=True)
def _clear_provider_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep real credentials from the shell out of every test."""
    for name in _PROVIDER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def make_fake_provider(
    name: str,
    *,
    available: bool = True,
    content: str = "",
    error: Optional[BaseException] = None,
) -> SimpleNamespace:
    """Provider double with the gateway surface the orchestrator relies on."""
    complete = AsyncMock(
        side_effect=error,
        return_value=ProviderResponse(content=content, input_tokens=11, output_tokens=7, model=f"{name}-model"),
    )
    return SimpleNamespace(
        name=name,
        model=f"{name}-model",
        is_available=lambda: available,
        complete=complete,
        estimate_cost=lambda *_args, **_kwargs: 0.25,
    )


@pytest.fixture
def fake_provider():
    return make_fake_provider
