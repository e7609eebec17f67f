from __future__ import annotations

from string import Template

from .standards import standards_for

SYSTEM_PROMPT = (
    "You are an expert code reviewer specializing in industry standards and best practices. "
    "Always respond with valid JSON only."
)

# Field names in the output template must match AnalysisResult exactly;
# ResponseParser validates against them.
_PREAMBLE_TEMPLATE = Template("""
You are a senior software engineer and code reviewer. Analyze the following $language code and provide a comprehensive review following industry standards.

**CODE TO ANALYZE:**
```$language
$code
```

**ANALYSIS REQUIREMENTS:**
1. Identify issues categorized as: ERROR (critical problems), WARNING (potential issues), INFO (improvements)
2. Focus on: naming conventions, error handling, performance, security, maintainability, documentation
3. Provide line numbers for each issue
4. Generate an improved version of the code
5. Include explanations for why each change matters

**OUTPUT FORMAT (STRICT JSON):**
{
  "detectedLanguage": "$language",
  "issues": [
    {
      "type": "error|warning|info",
      "title": "Brief issue title",
      "description": "Detailed explanation with industry standard reference",
      "line": number,
      "column": number,
      "severity": "high|medium|low",
      "rule": "rule-name-slug",
      "example": "How to fix this issue"
    }
  ],
  "improvedCode": "Complete improved version of the code with all fixes applied",
  "score": number_from_0_to_100,
  "suggestions": [
    "Overall suggestion 1",
    "Overall suggestion 2"
  ],
  "explanation": "Brief summary of main improvements made"
}

**IMPORTANT RULES:**
- Return ONLY valid JSON, no markdown or extra text
- Include line numbers starting from 1
- Ensure improved code is complete and functional
- Score based on code quality (100 = perfect, 0 = many issues)
- Focus on industry standards for $language
""")


class PromptBuilder:
    """
    Build the analysis prompt for a code snippet.

    The prompt includes:
    - Reviewer persona and analysis requirements
    - The code in a fenced block tagged with the language
    - JSON-only output contract
    - Language-specific standards (generic block for unknown languages)
    """

    def build(self, code: str, language: str) -> str:
        return self.preamble(code, language) + standards_for(language)

    @staticmethod
    def preamble(code: str, language: str) -> str:
        return _PREAMBLE_TEMPLATE.safe_substitute(language=language, code=code)
