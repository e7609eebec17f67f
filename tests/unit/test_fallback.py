from __future__ import annotations

from codecritic.analyze.fallback import FALLBACK_EXPLANATION, FallbackAnalyzer

JS_NO_COMMENTS = """function total(items) {
  var sum = 0;
  var x = 1;
  for (const item of items) {
    sum += item.price * x;
  }
  return sum;
}"""


def test_javascript_var_and_missing_comments() -> None:
    result = FallbackAnalyzer().analyze(JS_NO_COMMENTS, "javascript")

    assert [issue.rule for issue in result.issues] == ["no-var", "missing-comments"]
    assert result.score == 60
    assert result.issues[0].line == 2
    assert result.issues[0].severity == "medium"
    assert result.issues[1].line == 1
    assert result.issues[1].severity == "low"


def test_fallback_keeps_code_unchanged_and_explains() -> None:
    result = FallbackAnalyzer().analyze(JS_NO_COMMENTS, "javascript")

    assert result.improved_code == JS_NO_COMMENTS
    assert result.explanation == FALLBACK_EXPLANATION
    assert "built-in rules" in result.explanation
    assert len(result.suggestions) == 1


def test_fallback_detects_language_when_missing() -> None:
    result = FallbackAnalyzer().analyze(JS_NO_COMMENTS)
    assert result.detected_language == "javascript"
    assert "no-var" in [issue.rule for issue in result.issues]


def test_var_rule_only_applies_to_javascript() -> None:
    result = FallbackAnalyzer().analyze("var x = 1;", "typescript")
    assert result.issues == []
    assert result.score == 80


def test_short_snippets_skip_comment_rule() -> None:
    code = "const a = 1;\nconst b = 2;\nconst c = 3;\nconst d = 4;\nconst e = 5;"
    result = FallbackAnalyzer().analyze(code, "javascript")
    assert result.issues == []


def test_commented_code_passes() -> None:
    code = "// totals\n" + JS_NO_COMMENTS.replace("var", "let")
    result = FallbackAnalyzer().analyze(code, "javascript")
    assert result.issues == []
    assert result.score == 80


def test_python_hash_comments_count() -> None:
    code = "\n".join(["# helpers"] + [f"x{i} = {i}" for i in range(6)])
    assert FallbackAnalyzer().analyze(code, "python").issues == []


def test_python_without_comments_is_flagged() -> None:
    code = "\n".join(f"x{i} = {i}" for i in range(6))
    result = FallbackAnalyzer().analyze(code, "python")
    assert [issue.rule for issue in result.issues] == ["missing-comments"]
    assert result.score == 70
