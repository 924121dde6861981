from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from config.base import AppSettings


class TestSettings(AppSettings):
    # Tests override get_session with their own engine; this one is never connected
    DATABASE_URL: str = "sqlite+aiosqlite:///:memory:"
    APP_ENV: str = "test"
    DEBUG: bool = False
    LOG_LEVEL: str = "WARNING"
    API_BASE_URL: str = "http://testserver/api/v1"

    model_config = SettingsConfigDict(env_file=None)
