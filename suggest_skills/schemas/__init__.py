# __init__.py
from suggest_skills.schemas.skills import ErrorResponse, SkillRequest

__all__ = [
	"ErrorResponse",
	"SkillRequest",
]
