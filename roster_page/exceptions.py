"""Custom exceptions for Roster Page with proper HTTP status codes."""

from enum import Enum
from typing import Any


class ErrorCode(str, Enum):
    """Error codes for structured error responses."""

    # Generic errors
    ROSTER_ERROR = "ROSTER_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"

    # Template errors
    TEMPLATE_STARTUP_ERROR = "TEMPLATE_STARTUP_ERROR"
    TEMPLATE_MISSING = "TEMPLATE_MISSING"
    TEMPLATE_SYNTAX_ERROR = "TEMPLATE_SYNTAX_ERROR"
    TEMPLATE_UNRESOLVED_REFERENCE = "TEMPLATE_UNRESOLVED_REFERENCE"
    RENDER_ERROR = "RENDER_ERROR"

    # Output errors
    SINK_WRITE_ERROR = "SINK_WRITE_ERROR"


class RosterException(Exception):
    """Base exception for roster page errors with HTTP status code support.

    All custom exceptions should inherit from this class to ensure
    consistent error handling across the application.
    """

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.ROSTER_ERROR,
        status_code: int = 500,
        details: dict[str, Any] | None = None,
    ):
        """Initialize roster exception.

        Args:
            message: Human-readable error message
            code: Error code from ErrorCode enum
            status_code: HTTP status code (default 500)
            details: Additional error context/details
        """
        self.message = message
        self.code = code
        self.status_code = status_code
        self.details = details or {}
        super().__init__(message)


class StartupTemplateException(RosterException):
    """Template set could not be loaded. Fatal at startup."""

    def __init__(
        self,
        message: str,
        code: ErrorCode = ErrorCode.TEMPLATE_STARTUP_ERROR,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, code, status_code=500, details=details)


class RenderException(RosterException):
    """Executing a fragment against a view context failed."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.RENDER_ERROR,
            status_code=500,
            details=details,
        )


class SinkWriteException(RosterException):
    """Writing rendered output to the sink failed (e.g. client went away)."""

    def __init__(self, message: str = "Failed to write rendered output", details: dict[str, Any] | None = None):
        super().__init__(
            message,
            code=ErrorCode.SINK_WRITE_ERROR,
            status_code=500,
            details=details,
        )
