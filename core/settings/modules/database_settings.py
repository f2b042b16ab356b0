from __future__ import annotations

from pydantic_settings import SettingsConfigDict

from core.settings.base_settings import TrucklineBaseSettings


class DatabaseSettings(TrucklineBaseSettings):
    """
    Database connection settings.
    Loaded from .env with prefix DB_* (DB_DATABASE_URL, DB_ECHO_SQL).
    """

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="DB_",
        extra="ignore",
    )

    database_url: str = "sqlite+aiosqlite:///./truckline.db"

    # Echo SQL (for debugging)
    echo_sql: bool = False
