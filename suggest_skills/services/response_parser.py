from __future__ import annotations

import json
import re
from enum import Enum
from typing import Any, Callable

from suggest_skills.config import ResponseShape


_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)
_DECODER = json.JSONDecoder()

_MISSING = object()


class ParseErrorKind(str, Enum):
    INVALID_FORMAT = "invalid_format"


class ParseError(ValueError):
    def __init__(self, message: str, *, kind: ParseErrorKind = ParseErrorKind.INVALID_FORMAT) -> None:
        super().__init__(message)
        self.kind = kind


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text or "").strip()


def parse_direct(text: str, expected_shape: ResponseShape) -> Any:
    try:
        return json.loads(text)
    except (ValueError, RecursionError):
        return _MISSING


def parse_fragment(text: str, expected_shape: ResponseShape) -> Any:
    """Decode the first complete JSON array/object embedded in surrounding prose.

    The expected shape's opening bracket is tried first, then the other one.
    Fragments without any string or name/skill entries (e.g. a "[1]" citation) are skipped.
    """

    openers = ["[", "{"] if expected_shape == ResponseShape.ARRAY else ["{", "["]
    for opener in openers:
        start = text.find(opener)
        while start != -1:
            try:
                value, _end = _DECODER.raw_decode(text, start)
            except RecursionError:
                # Nesting deeper than the decoder allows; later openers sit inside the same structure.
                return _MISSING
            except ValueError:
                start = text.find(opener, start + 1)
                continue
            if _has_skill_entries(_extract_candidates(value)):
                return value
            start = text.find(opener, start + 1)
    return _MISSING


# Tried in order until one decodes.
PARSING_STRATEGIES: tuple[Callable[[str, ResponseShape], Any], ...] = (
    parse_direct,
    parse_fragment,
)


def _extract_candidates(value: Any) -> list[Any] | None:
    if isinstance(value, list):
        return value
    if isinstance(value, dict) and isinstance(value.get("skills"), list):
        return value["skills"]
    return None


def _has_skill_entries(candidates: list[Any] | None) -> bool:
    if not candidates:
        return False
    return any(
        isinstance(item, str) or (isinstance(item, dict) and ("name" in item or "skill" in item))
        for item in candidates
    )


def parse_skills(raw_text: str, *, expected_shape: ResponseShape = ResponseShape.ARRAY) -> list[Any]:
    text = strip_code_fences(raw_text)
    if not text:
        raise ParseError("empty model output")

    for strategy in PARSING_STRATEGIES:
        value = strategy(text, expected_shape)
        if value is _MISSING:
            continue
        candidates = _extract_candidates(value)
        if candidates is None:
            # Valid JSON of the wrong shape is final; later strategies only handle undecodable text.
            raise ParseError(f"unexpected JSON shape: {type(value).__name__}")
        return candidates

    raise ParseError("model output is not a JSON array or an object with a 'skills' array")
