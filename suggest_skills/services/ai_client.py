from __future__ import annotations

import logging
from typing import Protocol

from google import genai
from google.genai import types

from suggest_skills.config import ResponseShape


logger = logging.getLogger(__name__)


_SKILL_LIST_SCHEMA = types.Schema(type=types.Type.ARRAY, items=types.Schema(type=types.Type.STRING))

# Structured-output schema matching the shape the prompt asks for.
RESPONSE_SCHEMAS: dict[ResponseShape, types.Schema] = {
    ResponseShape.ARRAY: _SKILL_LIST_SCHEMA,
    ResponseShape.OBJECT: types.Schema(
        type=types.Type.OBJECT,
        properties={"skills": _SKILL_LIST_SCHEMA},
        required=["skills"],
    ),
}


class SkillModelClient(Protocol):
    async def generate(self, prompt: str, *, response_shape: ResponseShape) -> str: ...


class GeminiSkillClient:
    """Thin async wrapper over the google-genai SDK.

    Only sends the prompt and returns the raw text; timeouts, retries and parsing
    are handled by the caller.
    """

    def __init__(self, api_key: str, model: str, *, temperature: float = 0.2) -> None:
        self._client = genai.Client(api_key=api_key)
        self.model = model
        self.temperature = temperature

    async def generate(self, prompt: str, *, response_shape: ResponseShape) -> str:
        config = types.GenerateContentConfig(
            temperature=self.temperature,
            response_mime_type="application/json",
            response_schema=RESPONSE_SCHEMAS[response_shape],
        )
        response = await self._client.aio.models.generate_content(
            model=self.model,
            contents=prompt,
            config=config,
        )
        text = getattr(response, "text", None) or ""
        logger.debug("gemini.response model=%s shape=%s chars=%d", self.model, response_shape.value, len(text))
        return text
