from __future__ import annotations

import json
import os
import sys

from fastapi.testclient import TestClient

# Ensure suggest_skills/ is importable when running as a script.
sys.path.append(os.path.dirname(os.path.dirname(__file__)))

from suggest_skills.config import Settings
from suggest_skills.main import create_app


def main() -> int:
    app = create_app(settings=Settings(_env_file=None, mock_ai=True))

    with TestClient(app) as client:
        # 1) /api/health
        r = client.get("/api/health")
        print("GET /api/health ->", r.status_code)
        print(json.dumps(r.json(), indent=2, ensure_ascii=False))
        if r.status_code != 200 or not r.json().get("mockAI"):
            return 1

        # 2) /api/suggest-skills with a keyword title
        r2 = client.post("/api/suggest-skills", json={"title": "Frontend Developer"})
        print("\nPOST /api/suggest-skills (Frontend Developer) ->", r2.status_code)
        skills = r2.json()
        print(json.dumps(skills, indent=2, ensure_ascii=False))
        if r2.status_code != 200 or not skills:
            return 1

        # 3) blank title must be rejected
        r3 = client.post("/api/suggest-skills", json={"title": "  "})
        print("\nPOST /api/suggest-skills (blank title) ->", r3.status_code)
        print(json.dumps(r3.json(), indent=2, ensure_ascii=False))
        if r3.status_code != 400:
            return 2

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
