"""Application factory for creating and configuring the FastAPI app."""

from fastapi import FastAPI

from roster_page import __version__
from roster_page.config import Settings, get_settings
from roster_page.core.lifespan import lifespan
from roster_page.logging_config import get_logger, log_with_context
from roster_page.middleware.error_handlers import register_error_handlers
from roster_page.routers import view_router
from roster_page.views.template_registry import load_templates

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Templates are loaded here rather than in the lifespan so that a broken
    template set stops the process before the server ever binds.

    Args:
        settings: Settings to use (defaults to the process singleton)

    Returns:
        Configured FastAPI application instance

    Raises:
        StartupTemplateException: If the template set cannot be loaded
    """
    if settings is None:
        settings = get_settings()

    log_with_context(
        logger,
        "info",
        "Loading template set",
        templates_dir=str(settings.templates_dir),
        template_files=settings.template_files,
        event_type="templates_loading",
    )
    template_set = load_templates(settings.template_paths)

    app = FastAPI(
        title="Roster Page",
        description="Renders the team roster under a title taken from the request path.",
        version=__version__,
        lifespan=lifespan,
        # /{title} owns every single-segment path
        docs_url=None,
        redoc_url=None,
        openapi_url=None,
    )

    # Read-only after this point
    app.state.settings = settings
    app.state.template_set = template_set

    register_error_handlers(app)

    app.include_router(view_router.router, tags=["views"])

    return app
