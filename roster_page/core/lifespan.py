"""Application lifespan management."""

import time
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

from fastapi import FastAPI

from roster_page import __version__
from roster_page.logging_config import get_logger, log_with_context

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Manage application lifespan - startup and shutdown events.

    The template set is loaded by create_app() before the server starts,
    so there is nothing left to build here; startup only records state.
    Exceptions after yield are re-raised.
    """
    app.state.startup_time = time.time()

    log_with_context(
        logger,
        "info",
        "Starting Roster Page application",
        version=__version__,
        fragments=list(app.state.template_set.names),
        render_mode=app.state.settings.render_mode,
        event_type="app_startup",
    )

    try:
        yield
    except Exception as e:
        log_with_context(
            logger,
            "error",
            "Application error during lifespan",
            error=str(e),
            error_type=type(e).__name__,
            event_type="app_error",
        )
        raise
    finally:
        uptime_seconds = int(time.time() - app.state.startup_time)
        log_with_context(
            logger,
            "info",
            "Shutting down Roster Page application",
            uptime_seconds=uptime_seconds,
            event_type="app_shutdown",
        )
