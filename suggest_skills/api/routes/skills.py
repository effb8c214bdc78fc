from __future__ import annotations

from fastapi import APIRouter, Body, Depends, Request

from suggest_skills.schemas.skills import ErrorResponse, SkillRequest
from suggest_skills.services.skill_suggester import SkillSuggester


router = APIRouter(tags=["skills"])


def get_suggester(request: Request) -> SkillSuggester:
    # Built once in the app lifespan; read-only afterwards.
    return request.app.state.suggester


@router.post(
    "/suggest-skills",
    response_model=list[str],
    summary="Suggest hard skills for a job title",
    responses={
        400: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
        504: {"model": ErrorResponse},
    },
)
async def suggest_skills(
    payload: SkillRequest | None = Body(default=None),
    suggester: SkillSuggester = Depends(get_suggester),
) -> list[str]:
    return await suggester.suggest(payload or SkillRequest())
