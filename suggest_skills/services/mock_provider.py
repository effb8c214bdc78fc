# mock_provider.py
FRONTEND_SKILLS = ["JavaScript", "React", "TypeScript", "HTML5", "CSS3", "REST APIs", "Git", "Jest"]
BACKEND_SKILLS = ["Node.js", "Express", "SQL", "PostgreSQL", "REST APIs", "Auth (JWT/OAuth)", "Docker", "Testing"]
DATA_SKILLS = ["SQL", "Python", "Pandas", "NumPy", "ETL", "Data Visualization", "Power BI", "Statistics"]
# Generic tools rather than soft skills, which the endpoint exists to exclude.
DEFAULT_SKILLS = ["Git", "SQL", "Linux", "Docker", "REST APIs", "Microsoft Excel"]

# First keyword found in the lowercased title wins.
_KEYWORD_SKILLS = (
    ("frontend", FRONTEND_SKILLS),
    ("backend", BACKEND_SKILLS),
    ("data", DATA_SKILLS),
)


def mock_skills(title: str) -> list[str]:
    t = (title or "").lower()
    for keyword, skills in _KEYWORD_SKILLS:
        if keyword in t:
            return list(skills)
    return list(DEFAULT_SKILLS)
