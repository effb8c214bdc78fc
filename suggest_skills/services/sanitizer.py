from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any


# Case-insensitive substrings; any candidate containing one of these is treated as a
# soft skill. Matching is deliberately coarse: "Project Management" is dropped too.
SOFT_SKILLS: tuple[str, ...] = (
    "communication",
    "problem",
    "teamwork",
    "leadership",
    "collaboration",
    "time management",
    "critical thinking",
    "creativity",
    "adaptability",
    "fast learner",
    "self-motivated",
    "attention to detail",
    "work ethic",
    "analytical",
    "multitasking",
    "proactive",
    "strategic",
    "presentation",
    "negotiation",
    "interpersonal",
    "flexibility",
    "initiative",
    "motivation",
    "organization",
    "planning",
    "mentoring",
    "management",
    "research",
    "sales",
    "marketing",
    "customer service",
    "writing",
    "verbal",
    "listening",
    "conflict",
    "decision",
    "cooperation",
    "dependability",
    "empathy",
)

MAX_SKILL_LENGTH = 40

_GLYPH_RE = re.compile(r"[™®©]")
_PAREN_RE = re.compile(r"\(.*?\)", re.DOTALL)
_WHITESPACE_RE = re.compile(r"\s+")


@dataclass(frozen=True)
class SanitizerConfig:
    max_items: int
    max_length: int = MAX_SKILL_LENGTH
    lexicon: tuple[str, ...] = SOFT_SKILLS


def normalize(value: str) -> str:
    # Parentheses go before whitespace collapsing so "A (x) B" ends as "A B" in one pass.
    text = _GLYPH_RE.sub("", str(value))
    text = _PAREN_RE.sub("", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def is_soft_skill(value: str, lexicon: Iterable[str] = SOFT_SKILLS) -> bool:
    low = value.lower()
    return any(word in low for word in lexicon)


def coerce_candidate(candidate: Any) -> str:
    if isinstance(candidate, str):
        return candidate
    if isinstance(candidate, Mapping):
        value = candidate.get("name") or candidate.get("skill") or ""
        return value if isinstance(value, str) else str(value)
    return ""


def sanitize(candidates: Iterable[Any], config: SanitizerConfig) -> list[str]:
    if config.max_items <= 0:
        return []

    seen: set[str] = set()
    ordered: list[str] = []
    for candidate in candidates:
        skill = normalize(coerce_candidate(candidate))
        if not skill:
            continue
        if is_soft_skill(skill, config.lexicon):
            continue
        if len(skill) > config.max_length:
            continue
        if skill in seen:
            continue
        seen.add(skill)
        ordered.append(skill)
        if len(ordered) >= config.max_items:
            break
    return ordered
