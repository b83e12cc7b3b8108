from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tts_playground.core.settings import Settings
from tts_playground.main import create_app

from .fakes import FakeGeminiClient


@pytest.fixture
def settings() -> Settings:
    return Settings(gemini_api_key="test-key", log_level="debug")


@pytest.fixture
def fake_client() -> FakeGeminiClient:
    return FakeGeminiClient()


@pytest.fixture
def api(settings, fake_client) -> TestClient:
    return TestClient(create_app(settings, client=fake_client))
