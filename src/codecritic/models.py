from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Dict, List, Literal, Optional, Union

IssueType = Literal["error", "warning", "info"]
IssueSeverity = Literal["high", "medium", "low"]
ProviderId = Literal["primary", "secondary"]
ReviewPath = Literal["ai", "fallback"]

Score = Union[int, float]


def _coerce_int(value: Any) -> Optional[int]:
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        try:
            value = float(value.strip())
        except ValueError:
            return None
    if isinstance(value, float):
        return int(value) if math.isfinite(value) else None
    return None


@dataclass
class Issue:
    """One review finding.

    ``type`` and ``severity`` hold whatever the model produced; unrecognized
    values survive parsing and are handled by the enhancer.
    """

    type: str
    title: str
    description: str
    line: int
    severity: Optional[str] = None
    rule: str = ""
    column: Optional[int] = None
    example: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Issue":
        line = _coerce_int(data.get("line"))
        example = data.get("example")
        severity = data.get("severity")
        return cls(
            type=str(data.get("type") or ""),
            title=str(data.get("title") or ""),
            description=str(data.get("description") or ""),
            line=line if line is not None else 1,
            severity=str(severity) if severity else None,
            rule=str(data.get("rule") or ""),
            column=_coerce_int(data.get("column")),
            example=str(example) if example is not None else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {
            "type": self.type,
            "title": self.title,
            "description": self.description,
            "line": self.line,
        }
        if self.column is not None:
            out["column"] = self.column
        out["severity"] = self.severity
        out["rule"] = self.rule
        if self.example is not None:
            out["example"] = self.example
        return out


@dataclass
class AnalysisResult:
    detected_language: str
    issues: List[Issue]
    improved_code: str
    score: Score
    suggestions: List[str]
    explanation: str = ""

    def to_dict(self) -> Dict[str, Any]:
        """Wire form consumed by the persistence layer (camelCase keys)."""
        return {
            "detectedLanguage": self.detected_language,
            "issues": [issue.to_dict() for issue in self.issues],
            "improvedCode": self.improved_code,
            "score": self.score,
            "suggestions": list(self.suggestions),
            "explanation": self.explanation,
        }


@dataclass
class ReviewOutcome:
    result: AnalysisResult
    path: ReviewPath
    provider: Optional[str] = None
    error: Optional[str] = None
    usage: Optional[Dict[str, Any]] = None

    @property
    def fallback_used(self) -> bool:
        return self.path == "fallback"
