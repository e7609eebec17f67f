from __future__ import annotations

from .constants import ExitCode


class CodeCriticError(Exception):
    """Base exception for all codecritic errors."""

    exit_code: ExitCode = ExitCode.ERROR


class InvalidRequestError(CodeCriticError):
    """Caller passed input the review core cannot accept (blank or oversized code)."""


class ReviewPathError(CodeCriticError):
    """AI path failed; the review falls back to built-in rules."""


class ProviderError(ReviewPathError):
    """Vendor call failed (auth, network, timeout, malformed vendor response)."""

    def __init__(self, message: str, *, provider: str = "") -> None:
        super().__init__(message)
        self.provider = provider


class ProviderUnavailable(ProviderError):
    """Provider invoked without a configured credential."""


class NoProviderAvailable(ReviewPathError):
    """No configured provider can serve the request."""


class InvalidResponseFormat(ReviewPathError):
    """Model output could not be extracted, parsed, or validated."""
