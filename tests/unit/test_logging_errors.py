from __future__ import annotations

import json

import pytest

from codecritic.constants import ExitCode
from codecritic.errors import (
    CodeCriticError,
    InvalidRequestError,
    InvalidResponseFormat,
    NoProviderAvailable,
    ProviderError,
    ProviderUnavailable,
    ReviewPathError,
)
from codecritic.logging import ReviewLogger


def _lines(captured_err: str) -> list[dict]:
    return [json.loads(line) for line in captured_err.strip().splitlines()]


def test_logger_emits_json(capsys) -> None:
    logger = ReviewLogger("run-1")
    logger.info("hello", detail="world")
    payload = _lines(capsys.readouterr().err)[0]

    assert payload["run_id"] == "run-1"
    assert payload["level"] == "info"
    assert payload["message"] == "hello"
    assert payload["detail"] == "world"


def test_logger_redacts_sensitive_keys(capsys) -> None:
    logger = ReviewLogger("run-3")
    logger.info("secret", api_key="sk-test", access_token="abc", tokens_in=12)
    payload = _lines(capsys.readouterr().err)[0]

    assert payload["api_key"] == "***"
    assert payload["access_token"] == "***"
    assert payload["tokens_in"] == 12


def test_logger_redacts_any_key_containing_token_except_usage_counters(capsys) -> None:
    logger = ReviewLogger("run-5")
    logger.info("usage", token_value="abc", tokens_out=7, max_tokens=4000, output_tokens=3)
    payload = _lines(capsys.readouterr().err)[0]

    assert payload["token_value"] == "***"
    assert payload["tokens_out"] == 7
    assert payload["max_tokens"] == 4000
    assert payload["output_tokens"] == 3


def test_stage_records_duration_and_errors(capsys) -> None:
    logger = ReviewLogger("run-4")
    with pytest.raises(ValueError):
        with logger.stage("parse_response"):
            raise ValueError("bad json")

    messages = _lines(capsys.readouterr().err)
    assert [m["message"] for m in messages] == ["stage_start", "stage_error", "stage_end"]
    assert messages[1]["error"] == "bad json"
    assert messages[2]["status"] == "error"
    assert messages[2]["duration_ms"] >= 0


def test_review_path_error_hierarchy() -> None:
    for exc_type in (ProviderError, ProviderUnavailable, NoProviderAvailable, InvalidResponseFormat):
        assert issubclass(exc_type, ReviewPathError)
    assert issubclass(ProviderUnavailable, ProviderError)
    assert not issubclass(InvalidRequestError, ReviewPathError)


def test_error_exit_codes() -> None:
    assert CodeCriticError().exit_code == ExitCode.ERROR
    assert InvalidRequestError("x").exit_code == ExitCode.ERROR
