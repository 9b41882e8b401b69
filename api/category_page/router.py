"""
Category page endpoint.
"""

from __future__ import annotations

from fastapi import APIRouter, status
from fastapi.responses import HTMLResponse

from . import service
from .config import CategoryPageConfig, default_config
from .renderer import PageRenderer

NO_STORE = {"Cache-Control": "no-store"}


def build_router(config: CategoryPageConfig, renderer: PageRenderer | None = None) -> APIRouter:
    """
    Router serving one category page at `config.path`.
    """
    page_renderer = renderer or PageRenderer()
    router = APIRouter()

    @router.get(config.path, response_class=HTMLResponse)
    async def category_page() -> HTMLResponse:
        # Loaded once per request; metadata and body share the same data.
        data = await service.load_page_data(config)
        metadata = service.page_metadata(data, config)
        if data is None:
            return HTMLResponse(
                content=page_renderer.render_not_found(metadata, config),
                status_code=status.HTTP_404_NOT_FOUND,
                headers=NO_STORE,
            )

        return HTMLResponse(content=page_renderer.render(data, metadata, config), headers=NO_STORE)

    return router


router = build_router(default_config())
