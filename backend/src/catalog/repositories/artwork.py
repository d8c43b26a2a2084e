"""Artwork data-access layer.

PageFetcher is the contract every page source satisfies; navigation and bulk
selection consume it identically. ArtworkPageFetcher implements it against
the remote artworks API with a shared httpx.AsyncClient. No retries and no
business logic live here.
"""

from typing import Protocol

import httpx
from pydantic import ValidationError

from catalog.exceptions import NetworkError, ParseError
from catalog.logging import get_logger
from catalog.models import MISSING_CATEGORY, Item, Page
from catalog.schemas.artwork import ArtworkPagePayload, ArtworkPayload

logger = get_logger(__name__)

# Fields requested from the API; the full record is much larger
ARTWORK_FIELDS = "id,title,artwork_type_title"


class PageFetcher(Protocol):
    """Retrieves one page of the collection plus its total size.

    A fetch is all-or-nothing: it returns a complete Page or raises
    NetworkError / ParseError.
    """

    page_size: int

    async def fetch_page(self, page: int) -> Page: ...


def to_item(payload: ArtworkPayload) -> Item:
    """Map a wire record to an Item; a null title becomes "", an empty category "N/A"."""
    return Item(
        id=payload.id,
        title=payload.title or "",
        category=payload.artwork_type_title or MISSING_CATEGORY,
    )


class ArtworkPageFetcher:
    """PageFetcher backed by the remote artworks HTTP API.

    The client is owned by the caller (created in the app lifespan), so
    connection pooling is shared between navigation and bulk fetches.
    """

    def __init__(self, client: httpx.AsyncClient, url: str, page_size: int) -> None:
        if page_size <= 0:
            raise ValueError(f"page_size must be positive, got {page_size}")
        self._client = client
        self._url = url
        self.page_size = page_size

    async def fetch_page(self, page: int) -> Page:
        params = {"page": page, "limit": self.page_size, "fields": ARTWORK_FIELDS}
        try:
            response = await self._client.get(self._url, params=params)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            logger.warning("page_fetch_failed", page=page, status=exc.response.status_code)
            raise NetworkError(page, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            logger.warning("page_fetch_failed", page=page, error=str(exc))
            raise NetworkError(page, f"{type(exc).__name__}: {exc}") from exc

        try:
            payload = ArtworkPagePayload.model_validate_json(response.content)
        except ValidationError as exc:
            logger.warning("page_parse_failed", page=page, errors=exc.error_count())
            raise ParseError(page, "unexpected response body") from exc

        items = tuple(to_item(record) for record in payload.data)
        logger.debug("page_fetched", page=page, items=len(items), total=payload.pagination.total)
        return Page(number=page, items=items, total=payload.pagination.total)
