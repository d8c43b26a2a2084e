"""Selection request and response schemas."""

from pydantic import BaseModel, field_validator

from catalog.selection import SelectionStore
from catalog.services.bulk import BulkSelection, coerce_count


class ToggleRequest(BaseModel):
    selected: bool


class PageSelectionRequest(BaseModel):
    """Select (True) or deselect (False) every row of the loaded page."""

    selected: bool


class BulkSelectRequest(BaseModel):
    """Requested K for bulk selection.

    Never rejected: anything that is not a non-negative integer becomes 0,
    which clears the selection.
    """

    count: int = 0

    @field_validator("count", mode="before")
    @classmethod
    def _coerce(cls, value: object) -> int:
        return coerce_count(value)


class ToggleResponse(BaseModel):
    id: int
    selected: bool
    count: int


class SelectionResponse(BaseModel):
    """Current selection across the whole collection."""

    count: int
    ids: list[int]
    busy: bool

    @classmethod
    def from_store(cls, store: SelectionStore, *, busy: bool) -> "SelectionResponse":
        return cls(count=store.size(), ids=list(store.ids()), busy=busy)


class BulkSelectResponse(BaseModel):
    requested: int
    target: int
    generation: int
    pages_fetched: int
    applied: bool
    selection: SelectionResponse

    @classmethod
    def from_result(
        cls, result: BulkSelection, store: SelectionStore, *, busy: bool
    ) -> "BulkSelectResponse":
        return cls(
            requested=result.requested,
            target=result.target,
            generation=result.generation,
            pages_fetched=result.pages_fetched,
            applied=result.applied,
            selection=SelectionResponse.from_store(store, busy=busy),
        )
