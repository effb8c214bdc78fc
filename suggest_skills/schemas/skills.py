# skills.py
from typing import Any, Optional

from pydantic import BaseModel, field_validator


class SkillRequest(BaseModel):
    # Title is validated by the service so a blank value maps to 400, not 422.
    title: Optional[str] = None
    years: Optional[str] = None
    stack: Optional[str] = None
    locale: Optional[str] = None

    @field_validator("title", "years", "stack", "locale", mode="before")
    @classmethod
    def _coerce_scalar(cls, v: Any) -> Any:
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, (int, float)):
            return str(v)
        return v


class ErrorResponse(BaseModel):
    error: str
    hint: str | None = None
