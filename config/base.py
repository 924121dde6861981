from __future__ import annotations

from pydantic_settings import BaseSettings


class AppSettings(BaseSettings):
    """Settings shared by every environment."""

    APP_ENV: str = "local"
    DEBUG: bool = False
    LOG_LEVEL: str = "INFO"

    # Client side: where the listing endpoints live
    API_BASE_URL: str = "http://localhost:8000/api/v1"
    HTTP_TIMEOUT_SECONDS: float = 10.0

    # Dashboard fetches a single page of each list
    DASHBOARD_PAGE_SIZE: int = 100

    # How long fetched bulk children stay valid
    BULK_CACHE_TTL_SECONDS: float = 300.0

    # Create tables on startup instead of relying on migrations
    AUTO_CREATE_TABLES: bool = False
