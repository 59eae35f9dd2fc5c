"""Pytest fixtures for ui-library-assistant tests."""

import os
from unittest.mock import patch

import pytest

from ui_library_assistant.config import Settings
from ui_library_assistant.responses.streaming import MockStreamingClient
from ui_library_assistant.widget.history import JsonFileChatHistory


@pytest.fixture
def mock_env_vars():
    """Mock environment variables for testing (no streaming delays)."""
    env_vars = {
        "STREAM_INITIAL_DELAY": "0",
        "STREAM_CHUNK_DELAY": "0",
        "LOG_LEVEL": "DEBUG",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def settings(mock_env_vars) -> Settings:
    """Create Settings instance with mocked environment."""
    return Settings()


@pytest.fixture
def history_path(tmp_path):
    return str(tmp_path / "history" / "chat.json")


@pytest.fixture
def history(history_path) -> JsonFileChatHistory:
    return JsonFileChatHistory(history_path)


@pytest.fixture
def client(settings) -> MockStreamingClient:
    return MockStreamingClient(settings)


class RecordingNotifier:
    """Notifier that remembers every notification."""

    def __init__(self):
        self.notifications = []

    def notify(self, message, level="info"):
        self.notifications.append((message, level))


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()
