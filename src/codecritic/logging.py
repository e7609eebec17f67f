from __future__ import annotations

import json
import sys
from contextlib import contextmanager
from datetime import datetime, timezone
from typing import Any, Dict, Iterator


# Usage counters, not credentials.
_TOKEN_COUNT_KEYS = frozenset(
    {"tokens_in", "tokens_out", "input_tokens", "output_tokens", "max_tokens"}
)


class ReviewLogger:
    """Structured JSON logger, one object per line on stderr."""

    def __init__(self, run_id: str):
        self.run_id = run_id

    def info(self, message: str, **kwargs: Any) -> None:
        self._emit("info", message, **kwargs)

    def warning(self, message: str, **kwargs: Any) -> None:
        self._emit("warning", message, **kwargs)

    def error(self, message: str, **kwargs: Any) -> None:
        self._emit("error", message, **kwargs)

    @contextmanager
    def stage(self, name: str) -> Iterator[None]:
        """Context manager that tracks stage timing."""
        start = datetime.now(timezone.utc)
        self.info("stage_start", stage=name)
        status = "ok"
        try:
            yield
        except Exception as exc:
            status = "error"
            self.error("stage_error", stage=name, error=str(exc))
            raise
        finally:
            end = datetime.now(timezone.utc)
            duration_ms = int((end - start).total_seconds() * 1000)
            self.info("stage_end", stage=name, duration_ms=duration_ms, status=status)

    def _emit(self, level: str, message: str, **kwargs: Any) -> None:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": level,
            "run_id": self.run_id,
            "message": message,
        }
        payload.update(self._sanitize(kwargs))

        sys.stderr.write(json.dumps(payload, ensure_ascii=False, default=str) + "\n")
        sys.stderr.flush()

    @staticmethod
    def _sanitize(fields: Dict[str, Any]) -> Dict[str, Any]:
        redacted: Dict[str, Any] = {}
        for key, value in fields.items():
            if ReviewLogger._is_sensitive_key(key):
                redacted[key] = "***"
            else:
                redacted[key] = value
        return redacted

    @staticmethod
    def _is_sensitive_key(key: str) -> bool:
        lowered = key.lower()
        if lowered in _TOKEN_COUNT_KEYS:
            return False
        return any(marker in lowered for marker in ("token", "secret", "password", "api_key", "apikey"))


PROCESS_LOGGER = ReviewLogger("codecritic")
