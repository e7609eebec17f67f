from __future__ import annotations

import uuid
from dataclasses import dataclass
from typing import Callable, Optional

from ..config import CodeCriticConfig
from ..errors import InvalidRequestError, ProviderError, ReviewPathError
from ..logging import ReviewLogger
from ..models import AnalysisResult, ReviewOutcome
from .enhancer import ResultEnhancer
from .fallback import FallbackAnalyzer
from .language_detector import resolve_language
from .llm import ProviderOrchestrator, ResponseParser
from .llm.provider_orchestrator import LLMUsage
from .prompt_builder import PromptBuilder


@dataclass
class AIPathResult:
    """Result-or-error of one AI path attempt. Exactly one of result/error is set."""

    result: Optional[AnalysisResult] = None
    error: Optional[Exception] = None
    usage: Optional[LLMUsage] = None

    @property
    def success(self) -> bool:
        return self.result is not None and self.error is None


class ReviewOrchestrator:
    """Runs one code review: AI path first, built-in rules on any AI path failure."""

    def __init__(
        self,
        config: Optional[CodeCriticConfig] = None,
        *,
        providers: Optional[ProviderOrchestrator] = None,
        logger_factory: Optional[Callable[[], ReviewLogger]] = None,
    ) -> None:
        self.config = config or CodeCriticConfig()
        self.providers = providers or ProviderOrchestrator.from_config(self.config)
        self._logger_factory = logger_factory or (lambda: ReviewLogger(uuid.uuid4().hex))

        self.prompt_builder = PromptBuilder()
        self.response_parser = ResponseParser()
        self.enhancer = ResultEnhancer()
        self.fallback_analyzer = FallbackAnalyzer()

    async def analyze(
        self,
        code: str,
        language: Optional[str] = None,
        provider_preference: Optional[str] = None,
    ) -> AnalysisResult:
        outcome = await self.run(code, language, provider_preference)
        return outcome.result

    async def run(
        self,
        code: str,
        language: Optional[str] = None,
        provider_preference: Optional[str] = None,
    ) -> ReviewOutcome:
        """
        Review ``code`` and report which path produced the result.

        Steps:
        1. Detect language (when not supplied)
        2. Build prompt
        3. Select provider and call it
        4. Parse and validate the response
        5. Enhance the parsed result
        Any failure in 3-5 switches to the fallback analyzer.
        """
        self._check_request(code)
        logger = self._logger_factory()
        preferred = provider_preference or self.config.default_provider

        ai = await self._run_ai_path(code, language, preferred, logger)

        if ai.success:
            logger.info(
                "Code analysis completed",
                path="ai",
                language=ai.result.detected_language,
                score=ai.result.score,
                issues_count=len(ai.result.issues),
            )
            return ReviewOutcome(
                result=ai.result,
                path="ai",
                provider=ai.usage.provider if ai.usage else None,
                usage=ai.usage.to_dict() if ai.usage else None,
            )

        error_message = str(ai.error) if ai.error else "unknown error"
        logger.warning(
            "Code analysis failed, using built-in rules",
            error=error_message,
            error_type=type(ai.error).__name__ if ai.error else None,
        )
        with logger.stage("fallback"):
            result = self.fallback_analyzer.analyze(code, language)
        logger.info(
            "Code analysis completed",
            path="fallback",
            language=result.detected_language,
            score=result.score,
            issues_count=len(result.issues),
        )
        return ReviewOutcome(
            result=result,
            path="fallback",
            provider=self._failed_provider(ai),
            error=error_message,
            usage=ai.usage.to_dict() if ai.usage else None,
        )

    async def _run_ai_path(
        self,
        code: str,
        language: Optional[str],
        preferred: str,
        logger: ReviewLogger,
    ) -> AIPathResult:
        usage: Optional[LLMUsage] = None
        try:
            with logger.stage("detect_language"):
                detected = resolve_language(code, language)

            with logger.stage("build_prompt"):
                prompt = self.prompt_builder.build(code, detected)

            with logger.stage("provider_call"):
                response = await self.providers.complete(prompt, preferred, logger=logger)
                usage = response.usage

            with logger.stage("parse_response"):
                parsed = self.response_parser.parse(response.content)

            with logger.stage("enhance"):
                enhanced = self.enhancer.enhance(parsed, code)
        except ReviewPathError as exc:
            return AIPathResult(error=exc, usage=usage)
        except Exception as exc:
            # Unexpected failures take the fallback path too; callers never see them.
            logger.error("Unexpected AI path failure", error=str(exc), error_type=type(exc).__name__)
            return AIPathResult(error=exc, usage=usage)

        return AIPathResult(result=enhanced, usage=usage)

    @staticmethod
    def _failed_provider(ai: AIPathResult) -> Optional[str]:
        if ai.usage is not None:
            return ai.usage.provider
        if isinstance(ai.error, ProviderError) and ai.error.provider:
            return ai.error.provider
        return None

    def _check_request(self, code: str) -> None:
        if not isinstance(code, str) or not code.strip():
            raise InvalidRequestError("code must be a non-empty string")
        if len(code) > self.config.max_code_length:
            raise InvalidRequestError(
                f"code exceeds {self.config.max_code_length} characters ({len(code)})"
            )
