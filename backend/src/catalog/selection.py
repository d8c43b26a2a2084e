"""Selection state, independent of whichever page is loaded.

SelectionStore holds item identifiers only, never Item payloads, so memory
grows with the number of selected items rather than with the collection.
It is the only mutable state shared between navigation, manual toggles and
bulk selection; callers go through the methods below and never reach into
the underlying mapping.

A dict is used as an insertion-ordered set: enumeration follows the order in
which ids were added, so a bulk result enumerates in collection order.
"""

from collections.abc import Iterable, Iterator


class SelectionStore:
    """Set of selected item identifiers.

    Single-id mutations return the resulting membership of that id.
    Set-level mutations return a snapshot of the whole selection.
    """

    def __init__(self, ids: Iterable[int] = ()) -> None:
        self._ids: dict[int, None] = dict.fromkeys(ids)

    # -- single identifier ---------------------------------------------------

    def add(self, item_id: int) -> bool:
        self._ids.setdefault(item_id, None)
        return True

    def remove(self, item_id: int) -> bool:
        self._ids.pop(item_id, None)
        return False

    def toggle(self, item_id: int, is_selected: bool) -> bool:
        """Set membership of ``item_id`` to ``is_selected``."""
        return self.add(item_id) if is_selected else self.remove(item_id)

    # -- page scoped ---------------------------------------------------------

    def select_page(self, ids: Iterable[int]) -> frozenset[int]:
        """Add every id of the loaded page; ids outside ``ids`` are untouched."""
        for item_id in ids:
            self._ids.setdefault(item_id, None)
        return self.snapshot()

    def deselect_page(self, ids: Iterable[int]) -> frozenset[int]:
        """Remove every id of the loaded page; ids outside ``ids`` are untouched."""
        for item_id in ids:
            self._ids.pop(item_id, None)
        return self.snapshot()

    # -- wholesale -----------------------------------------------------------

    def replace_all(self, ids: Iterable[int]) -> frozenset[int]:
        """Atomically swap the whole selection for ``ids``.

        The new mapping is built first and assigned in one step, so a failure
        while consuming ``ids`` leaves the previous selection in place.
        """
        self._ids = dict.fromkeys(ids)
        return self.snapshot()

    def clear(self) -> frozenset[int]:
        return self.replace_all(())

    # -- reads ---------------------------------------------------------------

    def is_selected(self, item_id: int) -> bool:
        return item_id in self._ids

    def size(self) -> int:
        return len(self._ids)

    def ids(self) -> tuple[int, ...]:
        """Selected ids in insertion order."""
        return tuple(self._ids)

    def snapshot(self) -> frozenset[int]:
        return frozenset(self._ids)

    def __contains__(self, item_id: object) -> bool:
        return item_id in self._ids

    def __len__(self) -> int:
        return len(self._ids)

    def __iter__(self) -> Iterator[int]:
        return iter(self.ids())

    def __repr__(self) -> str:
        return f"SelectionStore(size={len(self._ids)})"
