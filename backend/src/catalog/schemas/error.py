"""Error response schemas.

All error responses use the same envelope: {"error": {"code": "...", "message": "..."}}.
Fetch failures also carry the remote page that failed.
"""

from pydantic import BaseModel


class ErrorDetail(BaseModel):
    """Machine-readable code, human-readable message, failing page if any."""

    code: str
    message: str
    page: int | None = None


class ErrorResponse(BaseModel):
    error: ErrorDetail
