"""Tests for custom exception classes."""

from roster_page.exceptions import (
    ErrorCode,
    RenderException,
    RosterException,
    SinkWriteException,
    StartupTemplateException,
)


class TestErrorCodes:
    """Tests for ErrorCode enum."""

    def test_error_code_values(self):
        """Test that error codes have correct values."""
        assert ErrorCode.ROSTER_ERROR == "ROSTER_ERROR"
        assert ErrorCode.TEMPLATE_STARTUP_ERROR == "TEMPLATE_STARTUP_ERROR"
        assert ErrorCode.RENDER_ERROR == "RENDER_ERROR"
        assert ErrorCode.SINK_WRITE_ERROR == "SINK_WRITE_ERROR"


class TestRosterException:
    """Tests for RosterException."""

    def test_roster_exception_basic(self):
        """Test creating basic roster exception."""
        exc = RosterException(message="Test error")

        assert exc.message == "Test error"
        assert exc.code == ErrorCode.ROSTER_ERROR
        assert exc.status_code == 500
        assert exc.details == {}
        assert str(exc) == "Test error"

    def test_roster_exception_with_details(self):
        """Test roster exception with details."""
        exc = RosterException(
            message="Test error", code=ErrorCode.INTERNAL_ERROR, status_code=503, details={"key": "value"}
        )

        assert exc.code == ErrorCode.INTERNAL_ERROR
        assert exc.status_code == 503
        assert exc.details["key"] == "value"


class TestTemplateExceptions:
    """Tests for template and output exceptions."""

    def test_startup_template_exception_defaults(self):
        """Test startup exception defaults."""
        exc = StartupTemplateException("Broken fragment")

        assert isinstance(exc, RosterException)
        assert exc.code == ErrorCode.TEMPLATE_STARTUP_ERROR
        assert exc.status_code == 500

    def test_startup_template_exception_specific_code(self):
        """Test startup exception with a narrower code."""
        exc = StartupTemplateException("Missing", code=ErrorCode.TEMPLATE_MISSING, details={"missing": ["bio"]})

        assert exc.code == ErrorCode.TEMPLATE_MISSING
        assert exc.details == {"missing": ["bio"]}

    def test_render_exception(self):
        """Test render exception."""
        exc = RenderException("Render failed", details={"fragment": "layout"})

        assert exc.code == ErrorCode.RENDER_ERROR
        assert exc.status_code == 500
        assert exc.details["fragment"] == "layout"

    def test_sink_write_exception_defaults(self):
        """Test sink write exception defaults."""
        exc = SinkWriteException()

        assert exc.message == "Failed to write rendered output"
        assert exc.code == ErrorCode.SINK_WRITE_ERROR
