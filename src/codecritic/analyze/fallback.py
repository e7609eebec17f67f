from __future__ import annotations

import re
from types import MappingProxyType
from typing import List, Mapping, Optional

from ..constants import Limits
from ..models import AnalysisResult, Issue
from .language_detector import UNKNOWN_LANGUAGE, resolve_language

FALLBACK_EXPLANATION = "Analyzed using built-in rules due to AI service unavailability."
FALLBACK_SUGGESTION = (
    "Basic analysis completed. For detailed analysis, please check your AI provider configuration."
)

_VAR_DECLARATION_RE = re.compile(r"\bvar\s")

_C_STYLE_COMMENTS = ("//", "/*")
_COMMENT_MARKERS: Mapping[str, tuple[str, ...]] = MappingProxyType(
    {
        "python": ("#", '"""', "'''"),
        UNKNOWN_LANGUAGE: ("#", '"""', "'''") + _C_STYLE_COMMENTS,
    }
)


def _first_matching_line(code: str, pattern: re.Pattern[str]) -> int:
    for idx, line in enumerate(code.split("\n")):
        if pattern.search(line):
            return idx + 1
    return 1


class FallbackAnalyzer:
    """Rule-based review used whenever the AI path cannot produce a result.

    Never calls a provider and never fails.
    """

    def analyze(self, code: str, language: Optional[str] = None) -> AnalysisResult:
        code = code or ""
        detected = resolve_language(code, language)

        issues: List[Issue] = []
        issues.extend(self._check_var_declarations(code, detected))
        issues.extend(self._check_missing_comments(code, detected))

        return AnalysisResult(
            detected_language=detected,
            issues=issues,
            improved_code=code,
            score=max(50, 80 - len(issues) * 10),
            suggestions=[FALLBACK_SUGGESTION],
            explanation=FALLBACK_EXPLANATION,
        )

    def _check_var_declarations(self, code: str, language: str) -> List[Issue]:
        if language.lower() != "javascript" or not _VAR_DECLARATION_RE.search(code):
            return []
        return [
            Issue(
                type="warning",
                title="Avoid var keyword",
                description=(
                    "Use let or const instead of var for better scoping and to avoid hoisting issues."
                ),
                line=_first_matching_line(code, _VAR_DECLARATION_RE),
                column=0,
                severity="medium",
                rule="no-var",
                example="Use \"const\" for values that don't change, or \"let\" for variables that do.",
            )
        ]

    def _check_missing_comments(self, code: str, language: str) -> List[Issue]:
        if len(code.split("\n")) <= Limits.FALLBACK_COMMENT_MIN_LINES:
            return []
        markers = _COMMENT_MARKERS.get(language.lower(), _C_STYLE_COMMENTS)
        if any(marker in code for marker in markers):
            return []
        return [
            Issue(
                type="info",
                title="Add code comments",
                description=(
                    "Consider adding comments to explain complex logic and improve code readability."
                ),
                line=1,
                column=0,
                severity="low",
                rule="missing-comments",
                example="Add inline comments or doc comments for functions.",
            )
        ]
