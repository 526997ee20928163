"""Shared fixtures: isolated settings, a TestClient and mocked upstream services."""

from __future__ import annotations

import asyncio
import os
import tempfile
from pathlib import Path
from typing import Callable

import httpx
import pytest

_TMP_DIR = Path(tempfile.mkdtemp(prefix="attune-tests-"))
os.environ["DB_URL"] = f"sqlite+aiosqlite:///{_TMP_DIR / 'attune.db'}"
os.environ["LOG_FILE"] = str(_TMP_DIR / "app.log")
os.environ["PIPELINE_LOG_FILE"] = str(_TMP_DIR / "pipeline.log")
os.environ["GEMINI_API_KEY"] = "test-gemini-key"
os.environ["ELEVENLABS_API_KEY"] = "test-elevenlabs-key"

from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import delete  # noqa: E402

from attune.database import session_scope  # noqa: E402
from attune.main import app  # noqa: E402
from attune.models import RequestLog, Task  # noqa: E402
from attune.services import (  # noqa: E402
    GeminiClient,
    SpeechClient,
    get_gemini_client,
    get_speech_client,
)

Handler = Callable[[httpx.Request], httpx.Response]


def gemini_text_response(text: str) -> httpx.Response:
    """Build a successful generateContent response carrying ``text``."""

    return httpx.Response(
        200,
        json={"candidates": [{"content": {"parts": [{"text": text}], "role": "model"}}]},
    )


def make_gemini_client(handler: Handler) -> GeminiClient:
    return GeminiClient(
        api_key="test-gemini-key",
        base_url="https://gemini.test/v1beta",
        transport=httpx.MockTransport(handler),
    )


def make_speech_client(handler: Handler) -> SpeechClient:
    return SpeechClient(
        api_key="test-elevenlabs-key",
        base_url="https://elevenlabs.test/v1",
        transport=httpx.MockTransport(handler),
    )


def run_async(coro):
    return asyncio.run(coro)


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def use_gemini():
    """Route Gemini calls to ``handler`` and return the list of captured requests."""

    def install(handler: Handler) -> list[httpx.Request]:
        captured: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        gemini = make_gemini_client(recording)
        app.dependency_overrides[get_gemini_client] = lambda: gemini
        return captured

    yield install
    app.dependency_overrides.pop(get_gemini_client, None)


@pytest.fixture
def use_speech():
    """Route ElevenLabs calls to ``handler`` and return the list of captured requests."""

    def install(handler: Handler) -> list[httpx.Request]:
        captured: list[httpx.Request] = []

        def recording(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return handler(request)

        speech = make_speech_client(recording)
        app.dependency_overrides[get_speech_client] = lambda: speech
        return captured

    yield install
    app.dependency_overrides.pop(get_speech_client, None)


@pytest.fixture
def clean_database(client):
    async def _clear() -> None:
        async with session_scope() as session:
            await session.execute(delete(Task))
            await session.execute(delete(RequestLog))
            await session.commit()

    run_async(_clear())
    yield
