from __future__ import annotations

import json
import re
from typing import Any

from ...errors import InvalidResponseFormat
from ...models import AnalysisResult, Issue

# Opening fences may carry a language tag (```json, ```python); closing fences are bare.
_FENCE_RE = re.compile(r"```[\w+#.-]*[ \t]*\n?")


class ResponseParser:
    """Parse model output into a validated AnalysisResult. All or nothing."""

    REQUIRED_FIELDS = ("detectedLanguage", "issues", "improvedCode", "score", "suggestions")

    def parse(self, response_text: str) -> AnalysisResult:
        """
        Parse a model response.

        Handles:
        - Bare JSON
        - Markdown code blocks containing JSON
        - Prose before/after the JSON object

        Raises InvalidResponseFormat on any extraction, syntax or schema problem.
        """
        content = self._extract_json_content(response_text or "")

        try:
            parsed = json.loads(content)
        except json.JSONDecodeError as exc:
            raise InvalidResponseFormat(f"Invalid AI response format: {exc}") from exc

        self._validate(parsed)
        return self._to_result(parsed)

    def _extract_json_content(self, text: str) -> str:
        """Strip code fences, then slice from the first '{' to the last '}'."""
        cleaned = _FENCE_RE.sub("", text)
        start = cleaned.find("{")
        end = cleaned.rfind("}")
        if start == -1 or end == -1 or end < start:
            raise InvalidResponseFormat("Invalid AI response format: no JSON object found")
        return cleaned[start : end + 1].strip()

    def _validate(self, obj: Any) -> None:
        if not isinstance(obj, dict):
            raise InvalidResponseFormat("Invalid AI response format: top level is not an object")

        for field_name in self.REQUIRED_FIELDS:
            if field_name not in obj:
                raise InvalidResponseFormat(f"Missing required field: {field_name}")

        issues = obj["issues"]
        if not isinstance(issues, list):
            raise InvalidResponseFormat("Issues must be an array")
        for idx, item in enumerate(issues):
            if not isinstance(item, dict):
                raise InvalidResponseFormat(f"Issue {idx + 1}: not an object")

        if not isinstance(obj["suggestions"], list):
            raise InvalidResponseFormat("Suggestions must be an array")
        for field_name in ("detectedLanguage", "improvedCode"):
            if not isinstance(obj[field_name], str):
                raise InvalidResponseFormat(f"{field_name} must be a string")

        score = obj["score"]
        if isinstance(score, bool) or not isinstance(score, (int, float)) or not 0 <= score <= 100:
            raise InvalidResponseFormat("Score must be a number between 0 and 100")

    def _to_result(self, obj: dict) -> AnalysisResult:
        return AnalysisResult(
            detected_language=obj["detectedLanguage"],
            issues=[Issue.from_dict(item) for item in obj["issues"]],
            improved_code=obj["improvedCode"],
            score=obj["score"],
            suggestions=[str(s) for s in obj["suggestions"]],
            explanation=str(obj.get("explanation") or ""),
        )
