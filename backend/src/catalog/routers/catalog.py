"""Catalog navigation endpoints."""

from fastapi import APIRouter, Query

from catalog.dependencies import Controller
from catalog.schemas.catalog import CatalogViewResponse

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("", response_model=CatalogViewResponse)
async def browse(controller: Controller, offset: int = Query(0, ge=0)) -> CatalogViewResponse:
    """Load the page containing row ``offset`` (clamped to the last page)."""
    view = await controller.navigate(offset)
    return CatalogViewResponse.from_view(view)


@router.get("/pages/{page}", response_model=CatalogViewResponse)
async def go_to_page(controller: Controller, page: int) -> CatalogViewResponse:
    """Load a 1-based page; out-of-range pages land on the first or last page."""
    view = await controller.go_to_page(page)
    return CatalogViewResponse.from_view(view)


@router.get("/view", response_model=CatalogViewResponse)
async def current_view(controller: Controller) -> CatalogViewResponse:
    """Return the session as it stands, without fetching."""
    return CatalogViewResponse.from_view(controller.view())
