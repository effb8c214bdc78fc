from __future__ import annotations

from suggest_skills.services.mock_provider import (
    BACKEND_SKILLS,
    DATA_SKILLS,
    DEFAULT_SKILLS,
    FRONTEND_SKILLS,
    mock_skills,
)
from suggest_skills.services.sanitizer import is_soft_skill


def test_frontend_title_returns_fixed_list() -> None:
    assert mock_skills("Frontend Developer") == [
        "JavaScript",
        "React",
        "TypeScript",
        "HTML5",
        "CSS3",
        "REST APIs",
        "Git",
        "Jest",
    ]


def test_keyword_priority_first_match_wins() -> None:
    assert mock_skills("Senior BACKEND engineer") == BACKEND_SKILLS
    assert mock_skills("Data Analyst") == DATA_SKILLS
    # frontend is checked before backend and data.
    assert mock_skills("Frontend/Backend data person") == FRONTEND_SKILLS
    assert mock_skills("backend data pipelines") == BACKEND_SKILLS


def test_default_list_is_technical() -> None:
    result = mock_skills("Architect")
    assert result == DEFAULT_SKILLS
    assert not any(is_soft_skill(s) for s in result)


def test_mock_skills_returns_copies() -> None:
    result = mock_skills("frontend")
    result.append("Extra")
    assert "Extra" not in FRONTEND_SKILLS
