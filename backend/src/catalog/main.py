from collections.abc import AsyncIterator
from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from catalog.config import settings
from catalog.exceptions import FetchError, NetworkError, ParseError
from catalog.logging import get_logger
from catalog.middleware import RequestIDMiddleware
from catalog.repositories.artwork import ArtworkPageFetcher
from catalog.routers.catalog import router as catalog_router
from catalog.routers.selection import router as selection_router
from catalog.schemas.error import ErrorDetail, ErrorResponse
from catalog.services.catalog import CatalogController

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Open the shared HTTP client and build the session controller.

    Shutdown: close pooled connections to the remote collection.
    """
    async with httpx.AsyncClient(timeout=settings.http_timeout) as client:
        fetcher = ArtworkPageFetcher(client, settings.catalog_api_url, settings.page_size)
        app.state.controller = CatalogController(
            fetcher,
            concurrency_limit=settings.bulk_concurrency_limit,
            selection_cap=settings.bulk_selection_cap,
        )
        logger.info(
            "catalog_started",
            url=settings.catalog_api_url,
            page_size=settings.page_size,
            bulk_concurrency_limit=settings.bulk_concurrency_limit,
        )
        yield


app = FastAPI(lifespan=lifespan)
app.add_middleware(RequestIDMiddleware)
app.include_router(catalog_router)
app.include_router(selection_router)


def _error_json(code: str, message: str, page: int | None = None) -> dict[str, object]:
    """Build the standard error envelope as a dict for JSONResponse."""
    return ErrorResponse(error=ErrorDetail(code=code, message=message, page=page)).model_dump()


@app.exception_handler(FetchError)
async def fetch_error_handler(request: Request, exc: FetchError) -> JSONResponse:
    """Return 502: the remote collection failed, not the client."""
    if isinstance(exc, ParseError):
        code = "upstream_malformed"
    elif isinstance(exc, NetworkError):
        code = "upstream_unavailable"
    else:
        code = "upstream_error"
    logger.warning("fetch_error", error=exc.message, page=exc.page, code=code)
    return JSONResponse(status_code=502, content=_error_json(code, exc.message, exc.page))


@app.exception_handler(Exception)
async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """Log unhandled exceptions and return a safe error response.

    - Logs full exception with traceback (includes request_id from context)
    - Returns generic error to client (no stack traces leaked)
    """
    logger.exception("unhandled_exception", path=request.url.path, method=request.method)
    return JSONResponse(
        status_code=500,
        content=_error_json("internal_error", "Internal server error"),
    )


@app.get("/health")
async def health() -> dict[str, str]:
    """Liveness check; does not touch the remote collection."""
    return {"status": "ok"}
