"""Domain exceptions raised by the catalog core and caught by routers.

Exception handlers in main.py translate them into the standard
error envelope: {"error": {"code": "...", "message": "..."}}.

Fetch failures are all-or-nothing: a page either arrives complete or one of
the FetchError subclasses is raised.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class FetchError(DomainError):
    """Raised when a page of the remote collection could not be obtained."""

    def __init__(self, page: int, message: str) -> None:
        self.page = page
        super().__init__(f"page {page}: {message}")


class NetworkError(FetchError):
    """Transport failure or non-success HTTP status from the remote collection."""


class ParseError(FetchError):
    """Response body is not JSON or does not have the expected shape."""
