"""Domain records for the remote collection.

Plain frozen dataclasses: the core never mutates fetched data, and nothing
here knows about HTTP or JSON. Wire payloads are validated in
repositories/artwork.py and converted into these.
"""

from dataclasses import dataclass

MISSING_CATEGORY = "N/A"


@dataclass(frozen=True, slots=True)
class Item:
    """One element of the remote collection.

    Only ``id`` matters for selection; the rest is display data.
    """

    id: int
    title: str
    category: str = MISSING_CATEGORY

    @property
    def api_link(self) -> str:
        """Identifier as shown in the "Code" column."""
        return str(self.id)


@dataclass(frozen=True, slots=True)
class Page:
    """Items returned for one 1-based page index, in collection order.

    ``total`` is the collection size reported by the same response, so it can
    differ between pages if the remote collection changes.
    """

    number: int
    items: tuple[Item, ...]
    total: int

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(item.id for item in self.items)

    def __len__(self) -> int:
        return len(self.items)
