from __future__ import annotations

import logging
from typing import Awaitable, Callable, TypedDict

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from mdpage.config import PAGE_TEMPLATE, TEMPLATES_PATH
from mdpage.content import load_document_text

logger = logging.getLogger(__name__)

templates = Jinja2Templates(directory=TEMPLATES_PATH)

page_router = APIRouter(tags=["page"])


class PageData(TypedDict):
    """Template context for the document page; `md_text` is the raw document text."""

    md_text: str


# Shape of a page load hook: request in, page data out.
PageServerLoad = Callable[[Request], Awaitable[PageData]]


async def load(request: Request) -> PageData:
    md_text = await load_document_text()
    return {"md_text": md_text}


def register_page(
    router: APIRouter,
    path: str,
    template_name: str,
    page_load: PageServerLoad,
) -> None:
    """
    Serves `template_name` at GET `path`, rendered with whatever `page_load` returns.
    `page_load` runs once per request; its exceptions are left to the framework.
    """

    @router.get(path, response_class=HTMLResponse)
    async def render_page(request: Request) -> HTMLResponse:
        data = await page_load(request)
        logger.debug("[page] render path=%s template=%s", path, template_name)
        return templates.TemplateResponse(request, template_name, dict(data))


register_page(page_router, "/", PAGE_TEMPLATE, load)
