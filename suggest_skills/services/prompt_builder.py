from __future__ import annotations

from suggest_skills.config import ResponseShape
from suggest_skills.schemas.skills import SkillRequest


NOT_SPECIFIED = "not specified"

EXCLUDED_SOFT_SKILLS = "Communication, Problem Solving, Teamwork, Leadership, Time Management, Creativity"

DOMAIN_EXAMPLES = (
    "   - Frontend: HTML, CSS, JavaScript, React, Vue, Next.js, Redux, Vite, TailwindCSS, Ant Design\n"
    "   - Backend: Node.js, Express, NestJS, Prisma, PostgreSQL, Redis, Docker, Kubernetes\n"
    "   - Data/ML: Python, Pandas, NumPy, Scikit-learn, TensorFlow\n"
    "   - Architecture/Design: Revit, AutoCAD, 3ds Max, SketchUp, Lumion, V-Ray, Enscape, Rhino, "
    "Grasshopper, Photoshop, Illustrator, Navisworks, BIM 360"
)

_FORMAT_EXAMPLES = {
    ResponseShape.ARRAY: '["Item1", "Item2", "..."]',
    ResponseShape.OBJECT: '{\n  "skills": ["Item1", "Item2", "..."]\n}',
}


def _field(value: str | None) -> str:
    value = (value or "").strip()
    return value or NOT_SPECIFIED


def build_prompt(
    request: SkillRequest,
    *,
    response_shape: ResponseShape = ResponseShape.ARRAY,
    min_items: int = 8,
    max_items: int = 12,
    default_locale: str = "ar",
) -> str:
    title = (request.title or "").strip()
    if not title:
        raise ValueError("title is required to build a prompt")

    locale = (request.locale or "").strip() or default_locale
    if response_shape == ResponseShape.ARRAY:
        container = "a JSON array of strings"
    else:
        container = 'a JSON object with a "skills" array of strings'

    lines = [
        "You are a technical recruiter. List HARD SKILLS ONLY for the job title below.",
        f'- Job title: "{title}"',
        f'- Years of experience: "{_field(request.years)}"',
        f'- Current stack: "{_field(request.stack)}"',
        f"- Locale: {locale}",
        "",
        "Rules:",
        f"1) Return {container} ONLY, with no text outside the JSON.",
        "2) Every item must name a tool, software, language, framework, library, platform, "
        "technology or protocol used in the field today.",
        f"3) Do not include soft skills such as {EXCLUDED_SOFT_SKILLS}, or generic words.",
        f"4) Return between {min_items} and {max_items} items.",
        "5) Acceptable examples by field:",
        DOMAIN_EXAMPLES,
        "",
        "Return JSON only, in exactly this shape:",
        _FORMAT_EXAMPLES[response_shape],
    ]
    return "\n".join(lines)
