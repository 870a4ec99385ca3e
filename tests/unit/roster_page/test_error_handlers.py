"""Tests for exception handlers and app-state dependencies."""

import asyncio
from types import SimpleNamespace

import pytest
from fastapi.testclient import TestClient

from roster_page.core.app_factory import create_app
from roster_page.dependencies import get_app_settings, get_template_set
from roster_page.exceptions import ErrorCode, RosterException, SinkWriteException


@pytest.fixture
def app(test_settings):
    app = create_app(test_settings)

    @app.get("/boom/roster")
    async def roster_error():
        raise SinkWriteException(details={"fragment": "layout"})

    @app.get("/boom/unexpected")
    async def unexpected_error():
        raise RuntimeError("secret internals")

    return app


def test_handlers_registered(app):
    """Test both exception handlers are registered."""
    assert RosterException in app.exception_handlers
    assert Exception in app.exception_handlers


def test_roster_exception_response(app):
    """Test a RosterException becomes a structured JSON error."""
    client = TestClient(app)

    response = client.get("/boom/roster")

    assert response.status_code == 500
    assert response.json() == {
        "error": {
            "code": ErrorCode.SINK_WRITE_ERROR.value,
            "message": "Failed to write rendered output",
            "details": {"fragment": "layout"},
        }
    }


def test_unexpected_exception_hides_details(app):
    """Test unexpected exceptions get a generic 500 body."""
    client = TestClient(app, raise_server_exceptions=False)

    response = client.get("/boom/unexpected")

    assert response.status_code == 500
    assert response.json()["error"]["code"] == "INTERNAL_ERROR"
    assert "secret" not in response.text


def test_get_template_set_missing():
    """Test the dependency fails loudly if the set was never loaded."""
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace()))

    with pytest.raises(RuntimeError):
        asyncio.run(get_template_set(request))


def test_get_app_settings(test_settings):
    """Test the dependency returns the settings stored on app state."""
    request = SimpleNamespace(app=SimpleNamespace(state=SimpleNamespace(settings=test_settings)))

    assert asyncio.run(get_app_settings(request)) is test_settings
