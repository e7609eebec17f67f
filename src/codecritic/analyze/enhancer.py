from __future__ import annotations

from types import MappingProxyType
from typing import Iterable, Mapping

from ..models import AnalysisResult, Issue, IssueSeverity, IssueType

DEFAULT_SEVERITY: Mapping[IssueType, IssueSeverity] = MappingProxyType(
    {"error": "high", "warning": "medium", "info": "low"}
)
FALLBACK_SEVERITY: IssueSeverity = "medium"

SCORE_DEDUCTIONS: Mapping[IssueType, int] = MappingProxyType({"error": 20, "warning": 10, "info": 5})
FALLBACK_DEDUCTION = 5
MIN_REPAIRED_SCORE = 10
MAX_REPAIRED_SCORE = 95

# Scores the model tends to emit without actually grading the code.
SUSPICIOUS_SCORES = (0, 100)


def line_count(code: str) -> int:
    return len((code or "").split("\n"))


def default_severity(issue_type: str) -> str:
    return DEFAULT_SEVERITY.get(issue_type, FALLBACK_SEVERITY)


def reasonable_score(issues: Iterable[Issue]) -> int:
    deductions = sum(SCORE_DEDUCTIONS.get(issue.type, FALLBACK_DEDUCTION) for issue in issues)
    return max(MIN_REPAIRED_SCORE, min(MAX_REPAIRED_SCORE, 100 - deductions))


class ResultEnhancer:
    """Normalize a parsed AI result so it is safe to store and display.

    Mutates the result in place. Never fails. Running it twice is a no-op.
    Only a score of exactly 0 or 100 is repaired; other implausible scores
    pass through.
    """

    def enhance(self, result: AnalysisResult, original_code: str) -> AnalysisResult:
        max_line = line_count(original_code)

        for issue in result.issues:
            issue.line = min(max(issue.line, 1), max_line)
            issue.column = max(issue.column or 0, 0)

        for issue in result.issues:
            if not issue.severity:
                issue.severity = default_severity(issue.type)

        if result.score in SUSPICIOUS_SCORES:
            result.score = reasonable_score(result.issues)

        return result
