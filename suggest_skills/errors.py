from __future__ import annotations

from typing import Any


class SkillSuggestionError(RuntimeError):
    """Base for failures that map to a JSON error response."""

    status_code: int = 500
    error: str = "Internal Server Error"
    hint: str | None = None

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.error)

    def to_body(self) -> dict[str, Any]:
        body: dict[str, Any] = {"error": self.error}
        if self.hint:
            body["hint"] = self.hint
        return body


class TitleValidationError(SkillSuggestionError):
    status_code = 400
    error = "title is required"


class UpstreamFailure(SkillSuggestionError):
    status_code = 500
    error = "AI provider request failed"

    def __init__(self, message: str | None = None, *, status: Any = None, payload: Any = None) -> None:
        super().__init__(message)
        # Provider-reported details are logged, never returned to the caller.
        self.status = status
        self.payload = payload


class UpstreamTimeout(SkillSuggestionError):
    status_code = 504
    error = "AI provider timed out"


class MalformedResponse(SkillSuggestionError):
    status_code = 502
    error = "AI model did not return valid JSON"


class EmptyResult(SkillSuggestionError):
    status_code = 502
    error = "No suitable hard skills extracted"
    hint = "Try a more specific job title or send a clear stack"


class MissingCredentialError(RuntimeError):
    pass
