"""Integration tests for the catalog HTTP API."""

import pytest
from httpx import AsyncClient

from catalog.exceptions import ParseError
from tests.factories import FakePageFetcher


@pytest.mark.asyncio
async def test_health(client: AsyncClient) -> None:
    resp = await client.get("/health")
    assert resp.status_code == 200
    assert resp.json() == {"status": "ok"}


@pytest.mark.asyncio
async def test_request_id_is_echoed(client: AsyncClient) -> None:
    resp = await client.get("/health", headers={"X-Request-ID": "abc-123"})
    assert resp.headers["X-Request-ID"] == "abc-123"


@pytest.mark.asyncio
async def test_request_id_is_generated(client: AsyncClient) -> None:
    resp = await client.get("/health")
    assert resp.headers["X-Request-ID"]


# ---------------------------------------------------------------------------
# Navigation
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_browse_first_page(client: AsyncClient) -> None:
    resp = await client.get("/catalog")
    assert resp.status_code == 200
    body = resp.json()
    assert body["total"] == 100
    assert body["page"] == 1
    assert body["page_count"] == 9
    assert body["first_row"] == 1
    assert body["last_row"] == 12
    assert body["has_previous"] is False
    assert body["has_next"] is True
    assert body["selected_count"] == 0
    assert body["page_selection"] == "none"
    assert body["busy"] is False
    assert len(body["items"]) == 12


@pytest.mark.asyncio
async def test_browse_rows_carry_display_columns(client: AsyncClient) -> None:
    item = (await client.get("/catalog")).json()["items"][0]
    assert item == {
        "id": 1,
        "api_link": "1",
        "title": "Artwork 1",
        "category": "Painting",
        "selected": False,
    }


@pytest.mark.asyncio
async def test_browse_negative_offset_returns_422(client: AsyncClient) -> None:
    resp = await client.get("/catalog", params={"offset": -1})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_go_to_last_page(client: AsyncClient) -> None:
    body = (await client.get("/catalog/pages/9")).json()
    assert len(body["items"]) == 4
    assert body["first_row"] == 97
    assert body["last_row"] == 100
    assert body["has_next"] is False


@pytest.mark.asyncio
async def test_view_before_any_fetch_is_empty(client: AsyncClient) -> None:
    body = (await client.get("/catalog/view")).json()
    assert body["items"] == []
    assert body["total"] == 0


@pytest.mark.asyncio
async def test_failed_navigation_returns_502_and_marks_view(
    client: AsyncClient, fetcher: FakePageFetcher
) -> None:
    await client.get("/catalog")
    fetcher.fail(2)

    resp = await client.get("/catalog", params={"offset": 12})
    assert resp.status_code == 502
    assert resp.json() == {
        "error": {"code": "upstream_unavailable", "message": "page 2: HTTP 503", "page": 2}
    }

    view = (await client.get("/catalog/view")).json()
    assert view["page"] == 1
    assert view["error"] == "page 2: HTTP 503"


# ---------------------------------------------------------------------------
# Manual selection
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_toggle_item(client: AsyncClient) -> None:
    await client.get("/catalog")

    resp = await client.put("/selection/5", json={"selected": True})
    assert resp.json() == {"id": 5, "selected": True, "count": 1}

    rows = (await client.get("/catalog/view")).json()["items"]
    assert [row["id"] for row in rows if row["selected"]] == [5]

    resp = await client.put("/selection/5", json={"selected": False})
    assert resp.json() == {"id": 5, "selected": False, "count": 0}


@pytest.mark.asyncio
async def test_toggle_requires_selected_flag(client: AsyncClient) -> None:
    resp = await client.put("/selection/5", json={})
    assert resp.status_code == 422


@pytest.mark.asyncio
async def test_select_and_deselect_loaded_page(client: AsyncClient) -> None:
    await client.put("/selection/99", json={"selected": True})
    await client.get("/catalog")

    body = (await client.post("/selection/page", json={"selected": True})).json()
    assert body["count"] == 13
    assert (await client.get("/catalog/view")).json()["page_selection"] == "all"

    body = (await client.post("/selection/page", json={"selected": False})).json()
    assert body["ids"] == [99]


@pytest.mark.asyncio
async def test_clear_selection(client: AsyncClient) -> None:
    await client.get("/catalog")
    await client.post("/selection/page", json={"selected": True})

    resp = await client.delete("/selection")
    assert resp.json() == {"count": 0, "ids": [], "busy": False}


# ---------------------------------------------------------------------------
# Bulk selection
# ---------------------------------------------------------------------------
@pytest.mark.asyncio
async def test_bulk_select(client: AsyncClient) -> None:
    resp = await client.post("/selection/bulk", json={"count": 20})
    assert resp.status_code == 200
    body = resp.json()
    assert body["applied"] is True
    assert body["requested"] == 20
    assert body["target"] == 20
    assert body["pages_fetched"] == 2
    assert body["selection"]["ids"] == list(range(1, 21))

    selection = (await client.get("/selection")).json()
    assert selection["count"] == 20


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "count, expected",
    [(-4, 0), ("abc", 0), (None, 0), ("15", 15), (5000, 100)],
    ids=["negative", "not_a_number", "null", "numeric_string", "above_total"],
)
async def test_bulk_select_coerces_count(
    client: AsyncClient, count: object, expected: int
) -> None:
    await client.put("/selection/42", json={"selected": True})

    body = (await client.post("/selection/bulk", json={"count": count})).json()

    assert body["target"] == expected
    assert body["selection"]["count"] == expected


@pytest.mark.asyncio
async def test_bulk_select_failure_keeps_selection(
    client: AsyncClient, fetcher: FakePageFetcher
) -> None:
    await client.get("/catalog")
    await client.put("/selection/42", json={"selected": True})
    fetcher.fail(3, ParseError(3, "unexpected response body"))

    resp = await client.post("/selection/bulk", json={"count": 40})
    assert resp.status_code == 502
    assert resp.json()["error"]["code"] == "upstream_malformed"
    assert resp.json()["error"]["page"] == 3

    selection = (await client.get("/selection")).json()
    assert selection == {"count": 1, "ids": [42], "busy": False}


@pytest.mark.asyncio
@pytest.mark.parametrize("count", [0, -5, "abc"], ids=["zero", "negative", "not_a_number"])
async def test_bulk_clear_before_any_page_needs_no_fetch(
    client: AsyncClient, fetcher: FakePageFetcher, count: object
) -> None:
    await client.put("/selection/42", json={"selected": True})
    fetcher.fail(1)

    resp = await client.post("/selection/bulk", json={"count": count})

    assert resp.status_code == 200
    assert resp.json()["selection"] == {"count": 0, "ids": [], "busy": False}
    assert fetcher.calls == []
