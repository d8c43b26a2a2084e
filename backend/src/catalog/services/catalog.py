"""Catalog session orchestration.

CatalogController owns everything one browsing session needs: the
SelectionStore, the pagination state, the currently loaded page, the page
fetcher and the bulk selector. Routers only ever talk to this object; the
store is handed to the view binder by reference, never copied.

Navigation and bulk selection are independent. A navigation replaces the
loaded page; a bulk selection replaces the selection. Neither waits for the
other.
"""

from dataclasses import dataclass

from catalog.exceptions import FetchError
from catalog.logging import get_logger
from catalog.models import Page
from catalog.pagination import PaginationState, offset_for_page, page_for_offset
from catalog.repositories.artwork import PageFetcher
from catalog.selection import SelectionStore
from catalog.services.bulk import BulkSelection, BulkSelector
from catalog.services.view import PageSelectionState, RowView, bind_rows, page_selection_state

logger = get_logger(__name__)


@dataclass
class CatalogView:
    """Everything a renderer needs for one frame of the session."""

    pagination: PaginationState
    rows: list[RowView]
    page_selection: PageSelectionState
    selected_count: int
    busy: bool
    error: str | None


class CatalogController:
    def __init__(
        self,
        fetcher: PageFetcher,
        *,
        store: SelectionStore | None = None,
        concurrency_limit: int = 3,
        selection_cap: int = 1000,
    ) -> None:
        self.store = store if store is not None else SelectionStore()
        self.bulk = BulkSelector(
            self.store,
            fetcher,
            concurrency_limit=concurrency_limit,
            selection_cap=selection_cap,
        )
        self.pagination = PaginationState(page_size=fetcher.page_size)
        self.page: Page | None = None
        self.last_error: str | None = None
        self._fetcher = fetcher

    # -- navigation ----------------------------------------------------------

    async def navigate(self, offset: int) -> CatalogView:
        """Load the page containing ``offset``.

        Before the first successful fetch the total is unknown, so the offset
        is only aligned to a page boundary; afterwards it is clamped to the
        last existing page. On failure the previous page stays loaded, the
        error is recorded on the view and re-raised, and the selection is
        not touched.
        """
        page_size = self.pagination.page_size
        if self.page is None:
            aligned = offset_for_page(page_for_offset(offset, page_size), page_size)
            requested = PaginationState(page_size=page_size, offset=aligned)
        else:
            requested = self.pagination.at(offset)

        page = await self._load(requested.current_page)
        state = requested.with_total(page.total)
        if state.page_count and state.current_page != page.number:
            # Asked past the end of a collection we had not sized yet
            page = await self._load(state.current_page)
            state = state.with_total(page.total)

        self.pagination = state
        self.page = page
        self.last_error = None
        logger.info("page_loaded", page=page.number, offset=state.offset, total=state.total_records)
        return self.view()

    async def go_to_page(self, page: int) -> CatalogView:
        return await self.navigate(offset_for_page(page, self.pagination.page_size))

    async def next_page(self) -> CatalogView:
        return await self.navigate(self.pagination.offset + self.pagination.page_size)

    async def previous_page(self) -> CatalogView:
        return await self.navigate(self.pagination.offset - self.pagination.page_size)

    async def _load(self, number: int) -> Page:
        try:
            return await self._fetcher.fetch_page(number)
        except FetchError as exc:
            self.last_error = exc.message
            logger.warning("navigation_failed", page=number, error=exc.message)
            raise

    # -- selection -----------------------------------------------------------

    def toggle(self, item_id: int, selected: bool) -> bool:
        return self.store.toggle(item_id, selected)

    def select_page(self) -> frozenset[int]:
        """Select every row of the loaded page; a no-op with no page loaded."""
        return self.store.select_page(self.page.ids if self.page else ())

    def deselect_page(self) -> frozenset[int]:
        return self.store.deselect_page(self.page.ids if self.page else ())

    def clear(self) -> frozenset[int]:
        logger.info("selection_cleared", previous=self.store.size())
        return self.store.clear()

    async def bulk_select(self, count: int) -> BulkSelection:
        """Select the first ``count`` items of the collection.

        Sizes the collection first if no page was loaded yet, except for a
        non-positive count, which clears without any fetch. After an
        applied, non-empty selection the view jumps back to the first page so
        the selected rows are visible; a failure of that jump only affects
        the view.
        """
        if count > 0 and self.page is None:
            await self.navigate(0)

        result = await self.bulk.select(count, self.pagination.total_records)

        if result.applied and result.target > 0 and self.pagination.current_page != 1:
            try:
                await self.navigate(0)
            except FetchError:
                logger.warning("bulk_select_view_reset_failed", generation=result.generation)
        return result

    # -- reads ---------------------------------------------------------------

    @property
    def busy(self) -> bool:
        return self.bulk.busy

    def view(self) -> CatalogView:
        return CatalogView(
            pagination=self.pagination,
            rows=bind_rows(self.page, self.store),
            page_selection=page_selection_state(self.page, self.store),
            selected_count=self.store.size(),
            busy=self.bulk.busy,
            error=self.last_error,
        )
