from __future__ import annotations

import asyncio
import os
from typing import TYPE_CHECKING, Any, Callable

import pytest
from fastapi.testclient import TestClient

if TYPE_CHECKING:
    from suggest_skills.config import ResponseShape


def pytest_configure() -> None:
    # Ensure a local .env cannot switch tests to a live AI provider.
    os.environ["ENVIRONMENT"] = "test"
    os.environ.pop("GEMINI_API_KEY", None)
    os.environ.pop("MOCK_AI", None)
    os.environ.pop("CREDENTIAL_POLICY", None)


class FakeSkillClient:
    """Scripted stand-in for the Gemini client.

    Each queued item is either raw model text or an exception instance to raise.
    """

    def __init__(self, *responses: Any, delay: float = 0.0) -> None:
        self.responses = list(responses)
        self.delay = delay
        self.prompts: list[str] = []
        self.shapes: list[ResponseShape] = []

    async def generate(self, prompt: str, *, response_shape: ResponseShape) -> str:
        self.prompts.append(prompt)
        self.shapes.append(response_shape)
        if self.delay:
            await asyncio.sleep(self.delay)
        item = self.responses.pop(0) if len(self.responses) > 1 else self.responses[0]
        if isinstance(item, BaseException):
            raise item
        return item


def make_settings(**overrides: Any):
    from suggest_skills.config import Settings

    values: dict[str, Any] = {
        "gemini_api_key": "test-key",
        "mock_ai": False,
        "credential_policy": "mock",
        "ai_timeout_seconds": 5.0,
        "ai_max_attempts": 1,
        "ai_retry_delay_seconds": 0.0,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture()
def settings_factory() -> Callable[..., Any]:
    return make_settings


@pytest.fixture()
def fake_client_cls() -> type[FakeSkillClient]:
    return FakeSkillClient


@pytest.fixture()
def fake_client() -> FakeSkillClient:
    return FakeSkillClient('["React", "TypeScript", "Git"]')


@pytest.fixture()
def app_factory() -> Callable[..., Any]:
    from suggest_skills.main import create_app

    def _build(client: Any = None, **overrides: Any):
        return create_app(settings=make_settings(**overrides), client=client)

    return _build


@pytest.fixture()
def client(app_factory, fake_client) -> Any:
    app = app_factory(client=fake_client)
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def mock_client(app_factory) -> Any:
    app = app_factory(client=None, mock_ai=True)
    with TestClient(app) as c:
        yield c
