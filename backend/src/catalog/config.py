from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Catalog session settings loaded from environment variables.

    Pydantic Settings reads env vars matching field names (case-insensitive).
    In development, it also reads from .env file if present.
    Invalid values (e.g. PAGE_SIZE=0) fail at startup, not mid-session.
    """

    # Remote collection endpoint. Must accept ?page=N&limit=S&fields=...
    # and answer with {"data": [...], "pagination": {"total": ...}}.
    catalog_api_url: str = "https://api.artic.edu/api/v1/artworks"

    # Fixed for the lifetime of a session; every fetch uses the same size
    page_size: int = Field(default=12, gt=0)

    bulk_concurrency_limit: int = Field(default=3, gt=0)  # Max page fetches in flight per batch
    bulk_selection_cap: int = Field(default=1000, gt=0)  # Upper bound for K before clamping

    http_timeout: float = Field(default=10.0, gt=0)  # Seconds, applied by the HTTP client

    model_config = SettingsConfigDict(
        env_file=".env",  # Load from .env in development
        env_file_encoding="utf-8",
        extra="ignore",  # Ignore unknown env vars
    )


settings = Settings()
