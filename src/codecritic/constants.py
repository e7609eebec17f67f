from __future__ import annotations

from enum import Enum


class ExitCode(int, Enum):
    """Process exit codes."""

    SUCCESS = 0
    ERROR = 2


class Limits:
    """Shared hard limits."""

    MAX_CODE_LENGTH = 50_000
    FALLBACK_COMMENT_MIN_LINES = 5


AUTO_DETECT_LANGUAGES = frozenset({"auto", "auto-detect", "auto-detected"})

PRIMARY = "primary"
SECONDARY = "secondary"
