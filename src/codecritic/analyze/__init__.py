"""Review pipeline: detection, prompting, provider calls, parsing, enhancement, fallback."""

from .enhancer import ResultEnhancer
from .fallback import FallbackAnalyzer
from .language_detector import detect_language, resolve_language
from .orchestrator import AIPathResult, ReviewOrchestrator
from .prompt_builder import PromptBuilder

__all__ = [
    "AIPathResult",
    "FallbackAnalyzer",
    "PromptBuilder",
    "ResultEnhancer",
    "ReviewOrchestrator",
    "detect_language",
    "resolve_language",
]
