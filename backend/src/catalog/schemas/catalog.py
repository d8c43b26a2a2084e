"""Catalog view response schemas."""

from pydantic import BaseModel

from catalog.schemas.pagination import PageResponse
from catalog.services.catalog import CatalogView
from catalog.services.view import PageSelectionState


class RowResponse(BaseModel):
    """One rendered row: display columns plus its checkbox state."""

    model_config = {"from_attributes": True}

    id: int
    api_link: str
    title: str
    category: str
    selected: bool


class CatalogViewResponse(PageResponse[RowResponse]):
    """The loaded page with selection flags and session status."""

    page_selection: PageSelectionState
    selected_count: int
    busy: bool
    error: str | None = None

    @classmethod
    def from_view(cls, view: CatalogView) -> "CatalogViewResponse":
        return cls(
            items=[RowResponse.model_validate(row) for row in view.rows],
            page_selection=view.page_selection,
            selected_count=view.selected_count,
            busy=view.busy,
            error=view.error,
            **cls.pagination_fields(view.pagination),  # type: ignore[arg-type]
        )
