from __future__ import annotations

import pytest
from pydantic import ValidationError

from codecritic.config import CodeCriticConfig


def test_config_defaults() -> None:
    cfg = CodeCriticConfig()

    assert cfg.default_provider == "primary"
    assert cfg.openai_model == "gpt-4.1"
    assert cfg.max_tokens == 4000
    assert cfg.temperature == 0.1
    assert cfg.max_code_length == 50_000
    assert cfg.has_openai() is False
    assert cfg.has_claude() is False


def test_config_reads_prefixed_env_and_masks(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODECRITIC_OPENAI_API_KEY", "sk_test_dummy")
    monkeypatch.setenv("CODECRITIC_TIMEOUT_SECONDS", "30")
    cfg = CodeCriticConfig()

    assert cfg.has_openai() is True
    assert cfg.timeout_seconds == 30
    assert "sk_test_dummy" not in repr(cfg)


def test_config_reads_vendor_env_names(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("OPENAI_API_KEY", "sk-openai")
    monkeypatch.setenv("CLAUDE_API_KEY", "sk-claude")
    cfg = CodeCriticConfig()

    assert cfg.openai_api_key.get_secret_value() == "sk-openai"
    assert cfg.claude_api_key.get_secret_value() == "sk-claude"


def test_anthropic_env_name_is_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("ANTHROPIC_API_KEY", "sk-ant")
    assert CodeCriticConfig().has_claude() is True


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("Secondary", "secondary"), ("openai", "primary"), ("CLAUDE", "secondary"), ("anthropic", "secondary")],
)
def test_default_provider_is_normalized(monkeypatch: pytest.MonkeyPatch, raw: str, expected: str) -> None:
    monkeypatch.setenv("CODECRITIC_DEFAULT_PROVIDER", raw)
    assert CodeCriticConfig().default_provider == expected


def test_invalid_default_provider_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODECRITIC_DEFAULT_PROVIDER", "gemini")
    with pytest.raises(ValidationError):
        CodeCriticConfig()


def test_invalid_temperature_raises(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CODECRITIC_TEMPERATURE", "3.5")
    with pytest.raises(ValidationError):
        CodeCriticConfig()


def test_config_is_frozen() -> None:
    cfg = CodeCriticConfig()

    # Pydantic 2.x raises ValidationError for frozen models
    with pytest.raises((TypeError, ValidationError)):
        cfg.max_tokens = 10
