"""AI code review core with provider fallback and built-in rules."""

from .analyze import ReviewOrchestrator, detect_language
from .config import CodeCriticConfig
from .models import AnalysisResult, Issue, ReviewOutcome

__version__ = "0.1.0"

__all__ = [
    "AnalysisResult",
    "CodeCriticConfig",
    "Issue",
    "ReviewOrchestrator",
    "ReviewOutcome",
    "detect_language",
]
