"""Shared test fixtures for the mood journal relay and client."""

import sys
from pathlib import Path
from unittest.mock import MagicMock

import pytest

ROOT = Path(__file__).parent.parent
# Relay package (``app``) and the flat client modules
sys.path.insert(0, str(ROOT / "backend"))
sys.path.insert(0, str(ROOT / "client" / "streamlit_app"))


def make_llm_response(*texts):
    response = MagicMock()
    response.content = [MagicMock(text=text) for text in texts]
    return response


@pytest.fixture
def mock_anthropic():
    """Anthropic client whose messages.create returns one text block."""
    mock_client = MagicMock()
    mock_client.messages.create.return_value = make_llm_response("This is a mocked AI response.")
    return mock_client


@pytest.fixture
def relay_settings():
    from app.core.config import Settings

    return Settings(ANTHROPIC_API_KEY="test-key", LLM_MODEL="test-model", LLM_MAX_TOKENS=256)


@pytest.fixture
def relay_client(mock_anthropic, relay_settings):
    from fastapi.testclient import TestClient

    from app.main import create_app
    from app.services.llm_provider import ChatProvider

    provider = ChatProvider(model="test-model", max_tokens=256, client=mock_anthropic)
    return TestClient(create_app(settings=relay_settings, provider=provider))


@pytest.fixture
def history_dir(tmp_path):
    return tmp_path / "history"
