"""Remote artworks API payload schemas.

Only the fields the catalog reads are declared; everything else in the
response is ignored. Validation failures surface as ParseError in the
fetcher, never as pydantic errors.
"""

from pydantic import BaseModel, ConfigDict, Field


class ArtworkPayload(BaseModel):
    """One element of ``data``."""

    model_config = ConfigDict(extra="ignore")

    id: int
    title: str | None = None
    artwork_type_title: str | None = None


class PaginationPayload(BaseModel):
    model_config = ConfigDict(extra="ignore")

    total: int = Field(ge=0)


class ArtworkPagePayload(BaseModel):
    """Top-level response body for one page."""

    model_config = ConfigDict(extra="ignore")

    data: list[ArtworkPayload]
    pagination: PaginationPayload
