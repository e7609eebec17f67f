from __future__ import annotations

from codecritic.analyze.prompt_builder import PromptBuilder
from codecritic.analyze.standards import GENERIC_STANDARDS, LANGUAGE_STANDARDS


def test_prompt_embeds_code_and_language() -> None:
    code = "def add(a, b):\n    return a + b"
    prompt = PromptBuilder().build(code, "python")

    assert "Analyze the following python code" in prompt
    assert f"```python\n{code}\n```" in prompt
    assert "Focus on industry standards for python" in prompt


def test_prompt_output_contract_matches_result_fields() -> None:
    prompt = PromptBuilder().build("x = 1", "python")
    for field_name in ("detectedLanguage", "issues", "improvedCode", "score", "suggestions", "explanation"):
        assert f'"{field_name}"' in prompt
    assert "Return ONLY valid JSON, no markdown or extra text" in prompt


def test_prompt_appends_language_standards() -> None:
    prompt = PromptBuilder().build("const x = 1;", "JavaScript")
    assert prompt.endswith(LANGUAGE_STANDARDS["javascript"])
    assert "Prefer const/let over var" in prompt


def test_unknown_language_gets_generic_standards() -> None:
    prompt = PromptBuilder().build("SELECT 1", "sql")
    assert prompt.endswith(GENERIC_STANDARDS)


def test_code_with_braces_and_dollars_is_verbatim() -> None:
    code = "const tpl = `${name}`;\nfunction f() { return {a: 1}; }"
    prompt = PromptBuilder().build(code, "javascript")
    assert code in prompt


def test_prompt_is_deterministic() -> None:
    builder = PromptBuilder()
    assert builder.build("x = 1", "python") == builder.build("x = 1", "python")


def test_standards_table_is_read_only() -> None:
    try:
        LANGUAGE_STANDARDS["go"] = "nope"  # type: ignore[index]
    except TypeError:
        pass
    else:  # pragma: no cover
        raise AssertionError("standards table should be immutable")
