"""Page route serving the rendered roster."""

from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from roster_page.config import Settings
from roster_page.dependencies import get_app_settings, get_template_set
from roster_page.views.template_registry import TemplateSet
from roster_page.views.template_renderer import TemplateRenderer

router = APIRouter()


@router.get("/", response_class=HTMLResponse)
async def index(
    template_set: TemplateSet = Depends(get_template_set),
    settings: Settings = Depends(get_app_settings),
):
    """Render the roster page with an empty title."""
    return TemplateRenderer.render_roster("", template_set, settings)


@router.get("/{title}", response_class=HTMLResponse)
async def roster(
    title: str,
    template_set: TemplateSet = Depends(get_template_set),
    settings: Settings = Depends(get_app_settings),
):
    """Render the roster page titled with the path segment."""
    return TemplateRenderer.render_roster(title, template_set, settings)
