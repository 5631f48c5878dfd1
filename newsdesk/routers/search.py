import logging
import re

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates
from jinja2 import TemplateError

from newsdesk.config import Settings
from newsdesk.exceptions import ParamParseError, RenderError
from newsdesk.models.search import Search
from newsdesk.services import news as news_service

logger = logging.getLogger(__name__)

router = APIRouter(tags=["search"])

_PAGE_RE = re.compile(r"[+-]?[0-9]+")


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_templates(request: Request) -> Jinja2Templates:
    return request.app.state.templates


def parse_page(page: str | None) -> int:
    """Parse the ``page`` query value; absent or empty means the first page."""
    if not page:
        return 1
    if not _PAGE_RE.fullmatch(page):
        raise ParamParseError(f"page is not an integer: {page!r}")
    value = int(page)
    if value < 1:
        raise ParamParseError(f"page must be at least 1, got {value}")
    return value


def _render(request: Request, templates: Jinja2Templates, search: Search | None) -> HTMLResponse:
    try:
        return templates.TemplateResponse(request, "index.html", {"search": search})
    except TemplateError as exc:
        logger.exception("Rendering index.html failed")
        raise RenderError(str(exc)) from exc


@router.get("/", response_class=HTMLResponse)
def index(request: Request, templates: Jinja2Templates = Depends(get_templates)):
    return _render(request, templates, None)


@router.get("/search", response_class=HTMLResponse)
def search(
    request: Request,
    q: str = "",
    page: str | None = None,
    settings: Settings = Depends(get_app_settings),
    templates: Jinja2Templates = Depends(get_templates),
):
    current = Search(search_key=q, next_page=parse_page(page))
    results = news_service.search_everything(
        current.search_key,
        current.next_page,
        settings.page_size,
        settings.news_api_key,
        base_url=settings.news_api_base,
    )
    current.paginate(results, settings.page_size)
    return _render(request, templates, current)
