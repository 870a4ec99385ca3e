"""Pytest configuration and shared fixtures."""

import shutil
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from roster_page.config import Settings
from roster_page.core.app_factory import create_app

PROJECT_TEMPLATES = Path(__file__).resolve().parent.parent / "templates"


class RecordingSink:
    """Sink that keeps every write separately."""

    def __init__(self, fail_after: int | None = None):
        self.chunks: list[str] = []
        self.fail_after = fail_after

    def write(self, chunk: str) -> int:
        if self.fail_after is not None and len(self.chunks) >= self.fail_after:
            raise BrokenPipeError("client went away")
        self.chunks.append(chunk)
        return len(chunk)

    @property
    def text(self) -> str:
        return "".join(self.chunks)


@pytest.fixture
def templates_dir(tmp_path):
    """Private copy of the shipped fragments that a test may modify."""
    target = tmp_path / "templates"
    shutil.copytree(PROJECT_TEMPLATES, target)
    return target


@pytest.fixture
def template_paths(templates_dir):
    """Fragment paths in the default load order."""
    return [templates_dir / name for name in ("layout.html", "bio.html", "view.html")]


@pytest.fixture
def make_settings(templates_dir):
    """Factory for Settings pointing at the private template copy."""

    def _make(**overrides) -> Settings:
        values = {"templates_dir": templates_dir, **overrides}
        return Settings(**values)

    return _make


@pytest.fixture
def test_settings(make_settings):
    """Buffered-mode settings."""
    return make_settings()


@pytest.fixture
def test_client(test_settings):
    """FastAPI test client with lifespan context (buffered rendering)."""
    with TestClient(create_app(test_settings)) as client:
        yield client


@pytest.fixture
def streaming_client(make_settings):
    """FastAPI test client with lifespan context (streaming rendering)."""
    with TestClient(create_app(make_settings(render_mode="streaming"))) as client:
        yield client


@pytest.fixture
def recording_sink():
    """Sink recording individual writes."""
    return RecordingSink()


@pytest.fixture
def failing_sink():
    """Sink that accepts one write and then raises BrokenPipeError."""
    return RecordingSink(fail_after=1)
