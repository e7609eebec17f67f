from __future__ import annotations

from typing import Optional

from ..constants import AUTO_DETECT_LANGUAGES

# First matching rule wins; rules are never scored against each other.
JS_MARKERS = ("function", "=>", "const ", "let ", "var ", "console.log")
TS_MARKERS = ("interface ", "type ", ": string", ": number", ": boolean")
PYTHON_MARKERS = ("def ", "import ", "print(")
JAVA_MARKERS = ("public class", "public static void main", "system.out.println")
CSHARP_MARKERS = ("using system", "namespace ", "console.writeline")

UNKNOWN_LANGUAGE = "text"


def _contains_any(text: str, markers: tuple[str, ...]) -> bool:
    return any(marker in text for marker in markers)


def detect_language(code: str) -> str:
    """Best-effort language tag for a code snippet. Heuristic, not a parser."""
    text = (code or "").strip().lower()

    if _contains_any(text, JS_MARKERS):
        if _contains_any(text, TS_MARKERS):
            return "typescript"
        return "javascript"

    if _contains_any(text, PYTHON_MARKERS) or text.startswith("#"):
        return "python"

    if _contains_any(text, JAVA_MARKERS):
        return "java"

    if _contains_any(text, CSHARP_MARKERS):
        return "csharp"

    return UNKNOWN_LANGUAGE


def resolve_language(code: str, language: Optional[str]) -> str:
    """Use the caller's language tag when it is real, otherwise detect one."""
    tag = (language or "").strip()
    if not tag or tag.lower() in AUTO_DETECT_LANGUAGES:
        return detect_language(code)
    return tag
