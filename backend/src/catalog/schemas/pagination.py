"""Generic pagination envelope shared by page-shaped responses.

PageResponse[T] mirrors PaginationState plus the rows of the loaded page.
``[T]`` is a Python 3.12 type parameter, so the row type is checked::

    class CatalogViewResponse(PageResponse[RowResponse]):
        selected_count: int

Routers build these from service-layer dataclasses; services never import
Pydantic response models.
"""

from pydantic import BaseModel

from catalog.pagination import PaginationState


class PageResponse[T](BaseModel):
    """One page of rows plus where it sits in the remote collection."""

    items: list[T]
    total: int
    offset: int
    page: int
    page_size: int
    page_count: int
    first_row: int
    last_row: int
    has_previous: bool
    has_next: bool

    @staticmethod
    def pagination_fields(state: PaginationState) -> dict[str, object]:
        """Flatten a PaginationState into this model's pagination fields."""
        return {
            "total": state.total_records,
            "offset": state.offset,
            "page": state.current_page,
            "page_size": state.page_size,
            "page_count": state.page_count,
            "first_row": state.first_row,
            "last_row": state.last_row,
            "has_previous": state.has_previous,
            "has_next": state.has_next,
        }
