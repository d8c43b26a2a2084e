from collections.abc import Callable

import pytest

from catalog.pagination import (
    PaginationState,
    clamp_offset,
    offset_for_page,
    page_count,
    page_for_offset,
)


@pytest.mark.parametrize(
    "offset, expected",
    [(0, 1), (11, 1), (12, 2), (23, 2), (24, 3), (-5, 1)],
)
def test_page_for_offset(offset: int, expected: int) -> None:
    assert page_for_offset(offset, 12) == expected


@pytest.mark.parametrize("total, expected", [(0, 0), (1, 1), (12, 1), (13, 2), (48, 4), (50, 5)])
def test_page_count(total: int, expected: int) -> None:
    assert page_count(total, 12) == expected


def test_offset_for_page_is_inverse_of_page_for_offset() -> None:
    for page in range(1, 10):
        assert page_for_offset(offset_for_page(page, 12), 12) == page
    assert offset_for_page(0, 12) == 0


@pytest.mark.parametrize(
    "offset, total, expected",
    [
        (0, 50, 0),
        (30, 50, 24),  # snapped to page start
        (48, 50, 48),
        (1000, 50, 48),  # past the end lands on the last page
        (-5, 50, 0),
        (100, 0, 0),  # empty collection
        (36, 48, 36),
        (48, 48, 36),
    ],
)
def test_clamp_offset(offset: int, total: int, expected: int) -> None:
    assert clamp_offset(offset, total, 12) == expected


@pytest.mark.parametrize("func", [page_for_offset, offset_for_page, page_count])
def test_non_positive_page_size_is_rejected(func: Callable[[int, int], int]) -> None:
    with pytest.raises(ValueError):
        func(1, 0)


# ---------------------------------------------------------------------------
# PaginationState
# ---------------------------------------------------------------------------
def test_state_derived_fields_mid_collection() -> None:
    state = PaginationState(page_size=12, offset=24, total_records=50)

    assert state.current_page == 3
    assert state.page_count == 5
    assert state.first_row == 25
    assert state.last_row == 36
    assert state.has_previous
    assert state.has_next


def test_state_on_last_partial_page() -> None:
    state = PaginationState(page_size=12, offset=48, total_records=50)

    assert state.last_row == 50
    assert not state.has_next


def test_state_empty_collection() -> None:
    state = PaginationState(page_size=12)

    assert state.page_count == 0
    assert state.first_row == 0
    assert state.last_row == 0
    assert not state.has_previous
    assert not state.has_next


def test_state_at_clamps_against_known_total() -> None:
    state = PaginationState(page_size=12, total_records=50)

    assert state.at(500).offset == 48
    assert state.at(13).offset == 12


def test_state_with_smaller_total_reclamps_offset() -> None:
    state = PaginationState(page_size=12, offset=48, total_records=50)

    shrunk = state.with_total(20)

    assert shrunk.total_records == 20
    assert shrunk.offset == 12
    assert state.offset == 48
