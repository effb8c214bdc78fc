from datetime import datetime, timezone

from fastapi import APIRouter, Request
from pydantic import BaseModel, ConfigDict, Field

from suggest_skills.config import Settings, has_api_key


router = APIRouter(tags=["health"])


class HealthStatus(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    ok: bool
    service: str
    port: int
    has_api_key: bool = Field(alias="hasApiKey")
    mock_ai: bool = Field(alias="mockAI")
    ai_model: str = Field(alias="model")
    timestamp: datetime


@router.get("/", response_model=HealthStatus, summary="Service heartbeat")
@router.get("/api/health", response_model=HealthStatus, summary="Service heartbeat")
def health_check(request: Request) -> HealthStatus:
    settings: Settings = request.app.state.settings
    suggester = getattr(request.app.state, "suggester", None)
    return HealthStatus(
        ok=True,
        service=settings.app_name,
        port=settings.port,
        has_api_key=has_api_key(settings),
        mock_ai=bool(suggester.mock_mode) if suggester is not None else settings.mock_ai,
        ai_model=settings.gemini_model,
        timestamp=datetime.now(timezone.utc),
    )
