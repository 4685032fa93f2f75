"""
Shared fixtures for the allergyscan tests.

No network access or tesseract binary is needed: the cleanup service and the
OCR engine are replaced with doubles.
"""

import pytest
from fastapi.testclient import TestClient

from allergyscan.text_cleanup import NoOpTextCleaner, TextCleaner, TextCleanupError


class FailingCleaner(TextCleaner):
    """Cleaner that always fails, like an unreachable cleanup service."""

    def __init__(self, error: Exception = None):
        self.error = error or TextCleanupError("service unavailable")
        self.calls = 0

    def cleanup(self, text: str) -> str:
        self.calls += 1
        raise self.error


class RecordingCleaner(TextCleaner):
    """Cleaner that records its input and returns a canned output."""

    def __init__(self, output: str = None):
        self.output = output
        self.inputs = []

    def cleanup(self, text: str) -> str:
        self.inputs.append(text)
        return text if self.output is None else self.output


@pytest.fixture
def failing_cleaner():
    return FailingCleaner()


@pytest.fixture
def recording_cleaner():
    return RecordingCleaner()


@pytest.fixture
def client(monkeypatch):
    """API client whose pipeline never calls the cleanup service."""
    import allergyscan.pipeline as pipeline
    from allergyscan.api.main import app

    monkeypatch.setattr(pipeline, "get_default_text_cleaner", lambda: NoOpTextCleaner())
    return TestClient(app)
