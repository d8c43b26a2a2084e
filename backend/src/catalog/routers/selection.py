"""Selection endpoints.

Manual toggles are never blocked while a bulk selection runs; clients can
read ``busy`` and disable their controls if they want to.
"""

from fastapi import APIRouter

from catalog.dependencies import Controller
from catalog.schemas.selection import (
    BulkSelectRequest,
    BulkSelectResponse,
    PageSelectionRequest,
    SelectionResponse,
    ToggleRequest,
    ToggleResponse,
)

router = APIRouter(prefix="/selection", tags=["selection"])


@router.get("", response_model=SelectionResponse)
async def get_selection(controller: Controller) -> SelectionResponse:
    return SelectionResponse.from_store(controller.store, busy=controller.busy)


@router.put("/{item_id}", response_model=ToggleResponse)
async def toggle_item(
    controller: Controller, item_id: int, body: ToggleRequest
) -> ToggleResponse:
    selected = controller.toggle(item_id, body.selected)
    return ToggleResponse(id=item_id, selected=selected, count=controller.store.size())


@router.post("/page", response_model=SelectionResponse)
async def select_loaded_page(
    controller: Controller, body: PageSelectionRequest
) -> SelectionResponse:
    """Select or deselect every row of the loaded page, leaving other pages alone."""
    if body.selected:
        controller.select_page()
    else:
        controller.deselect_page()
    return SelectionResponse.from_store(controller.store, busy=controller.busy)


@router.post("/bulk", response_model=BulkSelectResponse)
async def bulk_select(controller: Controller, body: BulkSelectRequest) -> BulkSelectResponse:
    """Replace the selection with the first ``count`` items of the collection.

    A failed page fetch answers 502 and leaves the selection unchanged.
    """
    result = await controller.bulk_select(body.count)
    return BulkSelectResponse.from_result(result, controller.store, busy=controller.busy)


@router.delete("", response_model=SelectionResponse)
async def clear_selection(controller: Controller) -> SelectionResponse:
    controller.clear()
    return SelectionResponse.from_store(controller.store, busy=controller.busy)
