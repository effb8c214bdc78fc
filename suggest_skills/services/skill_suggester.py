from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from suggest_skills.config import CredentialPolicy, Settings, has_api_key, is_mock_mode
from suggest_skills.errors import (
    EmptyResult,
    MalformedResponse,
    MissingCredentialError,
    TitleValidationError,
    UpstreamFailure,
    UpstreamTimeout,
)
from suggest_skills.schemas.skills import SkillRequest
from suggest_skills.services.ai_client import GeminiSkillClient, SkillModelClient
from suggest_skills.services.mock_provider import mock_skills
from suggest_skills.services.prompt_builder import build_prompt
from suggest_skills.services.response_parser import ParseError, parse_skills
from suggest_skills.services.sanitizer import SanitizerConfig, sanitize


logger = logging.getLogger(__name__)


def _provider_details(exc: BaseException) -> tuple[Any, Any]:
    # google-genai APIError exposes code/status/details; HTTP clients expose a response.
    response = getattr(exc, "response", None)
    status = getattr(exc, "code", None) or getattr(exc, "status", None)
    payload = getattr(exc, "details", None)
    if response is not None:
        status = status or getattr(response, "status_code", None) or getattr(response, "status", None)
        payload = payload or getattr(response, "data", None) or getattr(response, "text", None)
    return status, payload


class SkillSuggester:
    def __init__(self, settings: Settings, client: SkillModelClient | None, *, mock_mode: bool) -> None:
        if client is None and not mock_mode:
            raise ValueError("an AI client is required outside mock mode")
        self.settings = settings
        self.client = client
        self.mock_mode = mock_mode
        self.sanitizer_config = SanitizerConfig(
            max_items=settings.max_items,
            max_length=settings.max_skill_length,
        )

    async def suggest(self, request: SkillRequest) -> list[str]:
        title = (request.title or "").strip()
        if not title:
            raise TitleValidationError()

        if self.mock_mode:
            return mock_skills(title)[: self.settings.max_items]

        prompt = build_prompt(
            request,
            response_shape=self.settings.response_shape,
            min_items=min(self.settings.min_items, self.settings.max_items),
            max_items=self.settings.max_items,
            default_locale=self.settings.default_locale,
        )

        started = time.perf_counter()
        raw = await self._generate(prompt)
        elapsed_ms = int((time.perf_counter() - started) * 1000)
        logger.info("suggest_skills.ai_response ms=%d title=%r chars=%d", elapsed_ms, title, len(raw))

        try:
            candidates = parse_skills(raw, expected_shape=self.settings.response_shape)
        except ParseError as exc:
            logger.warning("suggest_skills.malformed kind=%s raw=%r", exc.kind.value, raw[:200])
            raise MalformedResponse(str(exc)) from exc

        skills = sanitize(candidates, self.sanitizer_config)
        if not skills:
            logger.warning("suggest_skills.empty title=%r candidates=%d", title, len(candidates))
            raise EmptyResult()
        return skills

    async def _generate(self, prompt: str) -> str:
        if self.client is None:
            raise RuntimeError("AI client is not configured")
        attempts = self.settings.ai_max_attempts
        delay = self.settings.ai_retry_delay_seconds

        for attempt in range(1, attempts + 1):
            try:
                text = await asyncio.wait_for(
                    self.client.generate(prompt, response_shape=self.settings.response_shape),
                    timeout=self.settings.ai_timeout_seconds,
                )
                return (text or "").strip()
            except asyncio.TimeoutError as exc:
                logger.error(
                    "suggest_skills.ai_timeout after=%.1fs attempt=%d",
                    self.settings.ai_timeout_seconds,
                    attempt,
                )
                raise UpstreamTimeout() from exc
            except Exception as exc:  # noqa: BLE001 - any provider error is an upstream failure
                status, payload = _provider_details(exc)
                logger.error(
                    "suggest_skills.ai_failed attempt=%d/%d message=%s status=%s data=%s",
                    attempt,
                    attempts,
                    exc,
                    status,
                    payload,
                )
                if attempt == attempts:
                    raise UpstreamFailure(str(exc), status=status, payload=payload) from exc
                await asyncio.sleep(delay)
                delay *= 2

        raise UpstreamFailure("no attempts made")


def build_suggester(settings: Settings, client: SkillModelClient | None = None) -> SkillSuggester:
    """Apply the startup credential policy and build the request-time service.

    - MOCK_AI=true: canned data, no client needed.
    - No GEMINI_API_KEY + `mock` policy: warn and serve canned data.
    - No GEMINI_API_KEY + `strict` policy: fail startup.
    """

    mock_mode = is_mock_mode(settings)
    if not mock_mode and client is None:
        if not has_api_key(settings):
            # Only reachable under the strict policy.
            raise MissingCredentialError(
                "GEMINI_API_KEY is missing. Set it in .env, enable MOCK_AI=true, "
                f"or use CREDENTIAL_POLICY={CredentialPolicy.MOCK.value}."
            )
        client = GeminiSkillClient(api_key=settings.gemini_api_key, model=settings.gemini_model)

    if mock_mode and not settings.mock_ai:
        logger.warning("GEMINI_API_KEY is missing; serving mock skills (credential_policy=mock)")
    logger.info(
        "suggest_skills.startup mode=%s model=%s shape=%s max_items=%d",
        "mock" if mock_mode else "live",
        settings.gemini_model,
        settings.response_shape.value,
        settings.max_items,
    )
    return SkillSuggester(settings, client, mock_mode=mock_mode)
