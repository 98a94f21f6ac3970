"""
Pytest configuration and shared fixtures.
"""

import json
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, List

import httpx
import pytest
from fastapi.testclient import TestClient

from jobtracker.config import AISettings
from jobtracker.main import app
from jobtracker.rate_limit import limiter
from jobtracker.schemas import JobCreate, JobStatus
from jobtracker.services.ai_service import AIService, get_ai_service
from jobtracker.store import JobStore, get_store


class FakeClock:
    """Clock that moves forward one second per reading."""

    def __init__(self, start: datetime = datetime(2024, 1, 1, tzinfo=timezone.utc)):
        self.now = start

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


def completion_payload(content: str) -> Dict[str, Any]:
    """Body of a successful chat completions response."""
    return {
        "id": "chatcmpl-test",
        "object": "chat.completion",
        "choices": [
            {"index": 0, "message": {"role": "assistant", "content": content}, "finish_reason": "stop"}
        ],
    }


class RecordingTransport(httpx.MockTransport):
    """MockTransport that keeps every request it was sent."""

    def __init__(self, handler: Callable[[httpx.Request], httpx.Response]):
        self.requests: List[httpx.Request] = []

        def recording_handler(request: httpx.Request) -> httpx.Response:
            self.requests.append(request)
            return handler(request)

        super().__init__(recording_handler)


def reply_with(content: str) -> RecordingTransport:
    """Transport answering every request with the given model reply."""
    return RecordingTransport(lambda request: httpx.Response(200, json=completion_payload(content)))


def fail_with(status_code: int, message: str, code: str = None) -> RecordingTransport:
    """Transport answering every request with an OpenAI-style error."""
    body = {"error": {"message": message, "type": code, "code": code}}
    return RecordingTransport(lambda request: httpx.Response(status_code, json=body))


def make_ai_service(transport: httpx.AsyncBaseTransport, **overrides) -> AIService:
    config = {"openai_api_key": "sk-test", "openai_base_url": "https://llm.test/v1"}
    config.update(overrides)
    return AIService(AISettings(**config), transport=transport)


@pytest.fixture(autouse=True)
def no_api_key_env(monkeypatch):
    """Keep a developer's real API key out of the tests."""
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)
    monkeypatch.delenv("JOBTRACKER_OPENAI_API_KEY", raising=False)


@pytest.fixture(autouse=True)
def reset_rate_limits():
    """Each test starts with fresh rate limit counters."""
    limiter.reset()
    yield


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(clock) -> JobStore:
    return JobStore(clock=clock)


@pytest.fixture
def job_data() -> JobCreate:
    return JobCreate(
        title="X",
        company="Y",
        application_link="https://a.com",
        status=JobStatus.APPLIED,
    )


@pytest.fixture
def job_payload() -> Dict[str, str]:
    """Valid create-job request body."""
    return {
        "title": "Backend Engineer",
        "company": "Acme Corp",
        "applicationLink": "https://acme.example.com/jobs/123",
        "status": "Applied",
    }


@pytest.fixture
def ai_transport() -> RecordingTransport:
    return reply_with(json.dumps({
        "summary": "Build APIs for a fintech team.",
        "keySkills": ["Python", "FastAPI", "PostgreSQL"],
    }))


@pytest.fixture
def client(store, ai_transport):
    """TestClient wired to an isolated store and a mocked completion API."""
    service = make_ai_service(ai_transport)
    app.dependency_overrides[get_store] = lambda: store
    app.dependency_overrides[get_ai_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()
