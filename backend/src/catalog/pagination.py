"""Offset/page arithmetic for the remote collection.

Pure functions plus the PaginationState value type; no I/O. The remote
source is addressed by 1-based page index, while the view is addressed by a
0-based row offset, so everything converts through here.
"""

from dataclasses import dataclass, replace


def _check_page_size(page_size: int) -> None:
    if page_size <= 0:
        raise ValueError(f"page_size must be positive, got {page_size}")


def page_for_offset(offset: int, page_size: int) -> int:
    """Return the 1-based remote page that contains row ``offset``."""
    _check_page_size(page_size)
    return max(offset, 0) // page_size + 1


def offset_for_page(page: int, page_size: int) -> int:
    """Return the offset of the first row of 1-based ``page``."""
    _check_page_size(page_size)
    return (max(page, 1) - 1) * page_size


def page_count(total_records: int, page_size: int) -> int:
    """Number of pages needed for ``total_records``; 0 for an empty collection."""
    _check_page_size(page_size)
    if total_records <= 0:
        return 0
    return -(-total_records // page_size)


def clamp_offset(offset: int, total_records: int, page_size: int) -> int:
    """Clamp ``offset`` to the start of an existing page.

    The valid range is ``[0, (page_count - 1) * page_size]``. Offsets past the
    end land on the last page and offsets inside a page snap to its first row.
    """
    last_page_offset = max(0, page_count(total_records, page_size) - 1) * page_size
    aligned = offset_for_page(page_for_offset(offset, page_size), page_size)
    return min(aligned, last_page_offset)


@dataclass(frozen=True)
class PaginationState:
    """Where the view currently is within the remote collection."""

    page_size: int
    offset: int = 0
    total_records: int = 0

    @property
    def current_page(self) -> int:
        return page_for_offset(self.offset, self.page_size)

    @property
    def page_count(self) -> int:
        return page_count(self.total_records, self.page_size)

    @property
    def first_row(self) -> int:
        """1-based index of the first visible row, 0 when nothing is visible."""
        return self.offset + 1 if self.total_records > 0 else 0

    @property
    def last_row(self) -> int:
        return min(self.offset + self.page_size, self.total_records)

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    @property
    def has_next(self) -> bool:
        return self.current_page < self.page_count

    def at(self, offset: int) -> "PaginationState":
        """Return a copy moved to ``offset``, clamped against the known total."""
        return replace(self, offset=clamp_offset(offset, self.total_records, self.page_size))

    def with_total(self, total_records: int) -> "PaginationState":
        """Return a copy with a fresh total, re-clamping the current offset."""
        total = max(total_records, 0)
        return replace(
            self, total_records=total, offset=clamp_offset(self.offset, total, self.page_size)
        )
