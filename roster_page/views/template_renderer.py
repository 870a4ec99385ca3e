"""Rendering of the roster page for one request."""

import io
from collections.abc import Iterator

from fastapi.responses import HTMLResponse, StreamingResponse

from roster_page.config import Settings
from roster_page.exceptions import RenderException
from roster_page.logging_config import get_logger, log_with_context
from roster_page.models import ViewContext, build_members
from roster_page.views.template_registry import LAYOUT, TemplateSet

logger = get_logger(__name__)

HTML_MEDIA_TYPE = "text/html"


class TemplateRenderer:
    """Turns a request's title into a rendered roster page."""

    @staticmethod
    def build_context(title: str) -> ViewContext:
        """Build the view context for one request.

        Args:
            title: Raw path segment, used verbatim

        Returns:
            A new ViewContext with a fresh copy of the roster
        """
        return ViewContext(title=title, members=build_members())

    @staticmethod
    def render_roster(title: str, template_set: TemplateSet, settings: Settings) -> HTMLResponse | StreamingResponse:
        """Render the roster page.

        In ``buffered`` mode the whole page is rendered before the status
        line is committed, so a RenderException propagates and the client
        gets a proper error response. In ``streaming`` mode 200 is committed
        first and rendering failures can only be logged.

        Args:
            title: Raw path segment
            template_set: Loaded fragment set
            settings: Settings instance (selects the render mode)

        Returns:
            HTMLResponse (buffered) or StreamingResponse (streaming)

        Raises:
            RenderException: In buffered mode, if the layout fails to render
        """
        context = TemplateRenderer.build_context(title)

        if settings.render_mode == "streaming":
            return StreamingResponse(
                TemplateRenderer.stream_roster(context, template_set),
                status_code=200,
                media_type=HTML_MEDIA_TYPE,
            )

        buffer = io.StringIO()
        template_set.render(LAYOUT, context.template_vars(), buffer)
        body = buffer.getvalue()

        log_with_context(
            logger,
            "info",
            "Page rendered",
            title_length=len(title),
            member_count=len(context.members),
            render_mode="buffered",
            body_length=len(body),
            event_type="page_rendered",
        )
        return HTMLResponse(content=body, status_code=200, media_type=HTML_MEDIA_TYPE)

    @staticmethod
    def stream_roster(context: ViewContext, template_set: TemplateSet) -> Iterator[str]:
        """Yield the page chunk by chunk after the status has been committed.

        A RenderException ends the body early and is logged; it is never
        re-raised because the 200 status is already on the wire. Closing the
        generator early (client disconnect) is logged as a sink write failure.
        """
        written = 0
        try:
            for chunk in template_set.generate(LAYOUT, context.template_vars()):
                yield chunk
                written += len(chunk)
        except RenderException as e:
            log_with_context(
                logger,
                "error",
                "Render failed after response was committed",
                error=e.message,
                error_code=e.code.value,
                chars_written=written,
                event_type="render_error",
            )
            return
        except GeneratorExit:
            log_with_context(
                logger,
                "warning",
                "Client stopped reading the response",
                chars_written=written,
                event_type="sink_write_error",
            )
            raise

        log_with_context(
            logger,
            "info",
            "Page rendered",
            title_length=len(context.title),
            member_count=len(context.members),
            render_mode="streaming",
            body_length=written,
            event_type="page_rendered",
        )
