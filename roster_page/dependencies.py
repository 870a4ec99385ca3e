"""FastAPI dependencies for dependency injection."""

from fastapi import Request

from roster_page.config import Settings
from roster_page.views.template_registry import TemplateSet


async def get_template_set(request: Request) -> TemplateSet:
    """
    Get the loaded template set from app state.

    Args:
        request: The FastAPI request object.

    Returns:
        The shared TemplateSet instance.

    Raises:
        RuntimeError: If the template set is not loaded.
    """
    template_set: TemplateSet | None = getattr(request.app.state, "template_set", None)

    if template_set is None:
        raise RuntimeError("Template set not loaded. This should never happen.")

    return template_set


async def get_app_settings(request: Request) -> Settings:
    """
    Get the settings the application was created with.

    Args:
        request: The FastAPI request object.

    Returns:
        The Settings instance stored on app state.

    Raises:
        RuntimeError: If settings are not stored on app state.
    """
    settings: Settings | None = getattr(request.app.state, "settings", None)

    if settings is None:
        raise RuntimeError("Settings not initialized.")

    return settings
