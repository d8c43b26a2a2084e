"""Bulk selection: select the first K items of the whole remote collection.

K is usually larger than one page, so the selector walks pages 1..P in
batches of at most ``concurrency_limit`` concurrent fetches, waits for each
batch before starting the next, and stops issuing batches once K ids are
collected. Ids are assembled in page order, not arrival order, so the result
is always the same prefix of the collection for the same K.

The store is only written once, with replace_all, after every needed page
arrived. A failed fetch raises before that point and leaves the store as it
was. Each call takes a new generation number; a call that has been overtaken
by a newer one never writes.
"""

import asyncio
from dataclasses import dataclass
from itertools import batched
from numbers import Integral, Real

from catalog.logging import get_logger
from catalog.models import Page
from catalog.pagination import page_count
from catalog.repositories.artwork import PageFetcher
from catalog.selection import SelectionStore

logger = get_logger(__name__)


def coerce_count(value: object) -> int:
    """Turn a user-supplied K into a non-negative int.

    Negative, missing, boolean and non-integral values become 0, which means
    "clear the selection". Integral floats and numeric strings are accepted.
    """
    count: int | None = None
    if isinstance(value, bool):
        count = None
    elif isinstance(value, Integral):
        count = int(value)
    elif isinstance(value, Real) and float(value).is_integer():
        count = int(value)
    elif isinstance(value, str):
        try:
            count = int(value.strip())
        except ValueError:
            count = None

    if count is None or count < 0:
        if value is not None:
            logger.warning("bulk_count_coerced", value=repr(value), count=0)
        return 0
    return count


@dataclass(frozen=True)
class BulkSelection:
    """Outcome of one bulk selection call.

    ``applied`` is False when a newer call started before this one finished;
    ``ids`` then holds what this call collected, which was discarded.
    """

    requested: int
    target: int
    generation: int
    ids: tuple[int, ...]
    pages_fetched: int
    applied: bool

    @property
    def count(self) -> int:
        return len(self.ids)


class BulkSelector:
    """Materializes a prefix of the collection into a SelectionStore."""

    def __init__(
        self,
        store: SelectionStore,
        fetcher: PageFetcher,
        *,
        concurrency_limit: int = 3,
        selection_cap: int = 1000,
    ) -> None:
        if concurrency_limit <= 0:
            raise ValueError(f"concurrency_limit must be positive, got {concurrency_limit}")
        if selection_cap <= 0:
            raise ValueError(f"selection_cap must be positive, got {selection_cap}")
        self._store = store
        self._fetcher = fetcher
        self._concurrency_limit = concurrency_limit
        self._selection_cap = selection_cap
        self._generation = 0
        self._in_flight = 0

    @property
    def busy(self) -> bool:
        """True while any bulk selection is still fetching."""
        return self._in_flight > 0

    @property
    def generation(self) -> int:
        return self._generation

    def effective_target(self, count: int, total_records: int) -> int:
        return max(0, min(count, total_records, self._selection_cap))

    async def select(self, count: int, total_records: int) -> BulkSelection:
        """Replace the selection with the first ``count`` ids of the collection.

        Raises NetworkError / ParseError if any needed page fails; the store
        is untouched in that case.
        """
        self._generation += 1
        generation = self._generation
        target = self.effective_target(count, total_records)
        log = logger.bind(generation=generation, requested=count, target=target)

        if target == 0:
            self._store.clear()
            log.info("bulk_select_cleared")
            return BulkSelection(count, 0, generation, (), 0, applied=True)

        log.info("bulk_select_started", total_records=total_records)
        self._in_flight += 1
        try:
            ids, pages_fetched = await self._collect(target, generation)
        finally:
            self._in_flight -= 1

        if generation != self._generation:
            log.info("bulk_select_superseded", latest=self._generation, collected=len(ids))
            return BulkSelection(count, target, generation, ids, pages_fetched, applied=False)

        self._store.replace_all(ids)
        log.info("bulk_select_applied", selected=len(ids), pages_fetched=pages_fetched)
        return BulkSelection(count, target, generation, ids, pages_fetched, applied=True)

    async def _collect(self, target: int, generation: int) -> tuple[tuple[int, ...], int]:
        page_size = self._fetcher.page_size
        collected: list[int] = []
        pages_fetched = 0
        needed_pages = range(1, page_count(target, page_size) + 1)

        for batch in batched(needed_pages, self._concurrency_limit):
            if generation != self._generation:
                # Overtaken: the result will be discarded, stop spending requests on it
                break
            pages = await self._fetch_batch(batch)
            pages_fetched += len(pages)
            logger.debug("bulk_batch_fetched", generation=generation, pages=list(batch))

            for page in pages:
                collected.extend(page.ids[: target - len(collected)])
                if len(collected) >= target or len(page) < page_size:
                    return tuple(collected), pages_fetched

        return tuple(collected), pages_fetched

    async def _fetch_batch(self, batch: tuple[int, ...]) -> list[Page]:
        """Fetch every page of ``batch`` concurrently, results in batch order.

        On the first failure the remaining fetches are cancelled and drained
        before the error propagates.
        """
        tasks = [asyncio.create_task(self._fetcher.fetch_page(number)) for number in batch]
        try:
            return list(await asyncio.gather(*tasks))
        except BaseException:
            for task in tasks:
                task.cancel()
            await asyncio.gather(*tasks, return_exceptions=True)
            raise
