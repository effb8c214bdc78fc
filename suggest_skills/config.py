from __future__ import annotations

import json
import os
from enum import Enum
from functools import lru_cache
from pathlib import Path
from typing import Annotated, Any

from dotenv import load_dotenv
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, NoDecode, SettingsConfigDict


# Load project-root .env early so both pydantic-settings and any direct os.getenv access
# see consistent values, even if the process CWD is not the repo root.
_ENV_PATH = Path(__file__).resolve().parents[1] / ".env"
_IN_TEST = (os.getenv("ENVIRONMENT") or "").lower() == "test" or bool(os.getenv("PYTEST_CURRENT_TEST"))
if _ENV_PATH.exists() and not _IN_TEST:
    load_dotenv(dotenv_path=_ENV_PATH, override=True)


class ResponseShape(str, Enum):
    # Bare JSON array: ["React", "Git"]
    ARRAY = "array"
    # Object with a skills field: {"skills": ["React", "Git"]}
    OBJECT = "object"


class CredentialPolicy(str, Enum):
    # Missing GEMINI_API_KEY falls back to canned mock data.
    MOCK = "mock"
    # Missing GEMINI_API_KEY aborts startup.
    STRICT = "strict"


def _parse_list(raw: Any) -> list[str]:
    if raw is None:
        return []

    items: list[Any]
    if isinstance(raw, (list, tuple, set)):
        items = list(raw)
    elif isinstance(raw, str):
        s = raw.strip()
        if not s:
            return []

        # Support JSON array string or comma-separated string.
        if s.startswith("["):
            try:
                parsed = json.loads(s)
                items = parsed if isinstance(parsed, list) else [parsed]
            except ValueError:
                items = [p.strip() for p in s.strip("[]").split(",")]
        else:
            items = [p.strip() for p in s.split(",")]
    else:
        items = [raw]

    values: list[str] = []
    for item in items:
        if item is None:
            continue
        value = str(item).strip().strip('"').strip("'")
        if value:
            values.append(value)
    return values


class Settings(BaseSettings):
    app_name: str = Field(default="suggest-skills", validation_alias="APP_NAME")
    version: str = Field(default="0.1.0")
    environment: str = Field(default="development", validation_alias="ENVIRONMENT")
    debug: bool = Field(default=False, validation_alias="DEBUG")
    host: str = Field(default="0.0.0.0", validation_alias="HOST")
    port: int = Field(default=3000, validation_alias="PORT")

    # - JSON array string: CORS_ORIGINS=["http://localhost:5173"]
    # - Comma-separated:   CORS_ORIGINS=http://localhost:5173,https://example.com
    cors_origins: Annotated[list[str], NoDecode] = Field(
        default_factory=lambda: ["*"],
        validation_alias="CORS_ORIGINS",
    )

    # AI provider
    gemini_api_key: str | None = Field(default=None, validation_alias="GEMINI_API_KEY")
    gemini_model: str = Field(default="gemini-1.5-flash", validation_alias="GEMINI_MODEL")
    mock_ai: bool = Field(default=False, validation_alias="MOCK_AI")
    credential_policy: CredentialPolicy = Field(default=CredentialPolicy.MOCK, validation_alias="CREDENTIAL_POLICY")
    ai_timeout_seconds: float = Field(default=30.0, gt=0, validation_alias="AI_TIMEOUT_SECONDS")
    ai_max_attempts: int = Field(default=2, ge=1, le=5, validation_alias="AI_MAX_ATTEMPTS")
    ai_retry_delay_seconds: float = Field(default=0.5, ge=0, validation_alias="AI_RETRY_DELAY_SECONDS")

    # Output shaping
    response_shape: ResponseShape = Field(default=ResponseShape.ARRAY, validation_alias="RESPONSE_SHAPE")
    min_items: int = Field(default=8, ge=1, validation_alias="MIN_ITEMS")
    max_items: int = Field(default=12, ge=1, le=50, validation_alias="MAX_ITEMS")
    max_skill_length: int = Field(default=40, ge=1, validation_alias="MAX_SKILL_LENGTH")
    default_locale: str = Field(default="ar", validation_alias="DEFAULT_LOCALE")

    @field_validator("cors_origins", mode="before")
    @classmethod
    def _validate_cors_origins(cls, v: Any) -> list[str]:
        return _parse_list(v)

    @field_validator("gemini_api_key", mode="before")
    @classmethod
    def _blank_key_is_missing(cls, v: Any) -> Any:
        if isinstance(v, str) and not v.strip():
            return None
        return v

    @field_validator("response_shape", "credential_policy", mode="before")
    @classmethod
    def _lowercase_enum(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        populate_by_name=True,
    )


@lru_cache
def get_settings() -> Settings:
    return Settings()


def has_api_key(settings: Settings) -> bool:
    return bool(settings.gemini_api_key)


def is_mock_mode(settings: Settings) -> bool:
    """Return True if requests are answered from canned data instead of the AI provider.

    MOCK_AI=true always wins. Without an API key, mock mode is only used under the
    `mock` credential policy; the `strict` policy refuses to start instead.
    """

    if settings.mock_ai:
        return True
    return not has_api_key(settings) and settings.credential_policy == CredentialPolicy.MOCK
