"""Per-row selection flags for the loaded page.

Reads the SelectionStore, never writes it. Rows are derived fresh on every
call, so a selection change made by any path shows up on the next read.
"""

from dataclasses import dataclass
from enum import StrEnum

from catalog.models import Page
from catalog.selection import SelectionStore


class PageSelectionState(StrEnum):
    """State of the header checkbox for the loaded page."""

    NONE = "none"
    SOME = "some"
    ALL = "all"


@dataclass(frozen=True)
class RowView:
    id: int
    api_link: str
    title: str
    category: str
    selected: bool


def bind_rows(page: Page | None, store: SelectionStore) -> list[RowView]:
    if page is None:
        return []
    return [
        RowView(
            id=item.id,
            api_link=item.api_link,
            title=item.title,
            category=item.category,
            selected=store.is_selected(item.id),
        )
        for item in page.items
    ]


def page_selection_state(page: Page | None, store: SelectionStore) -> PageSelectionState:
    if page is None or not page.items:
        return PageSelectionState.NONE
    selected = sum(1 for item in page.items if store.is_selected(item.id))
    if selected == 0:
        return PageSelectionState.NONE
    if selected == len(page.items):
        return PageSelectionState.ALL
    return PageSelectionState.SOME
