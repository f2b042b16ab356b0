from __future__ import annotations

from functools import lru_cache

from pydantic import BaseModel, ConfigDict

from core.settings.modules.auth_settings import AuthSettings
from core.settings.modules.database_settings import DatabaseSettings
from core.settings.modules.google_places_settings import GooglePlacesSettings
from core.settings.modules.server_settings import ServerSettings


class AppSettings(BaseModel):
    """Application settings aggregator."""

    model_config = ConfigDict(arbitrary_types_allowed=True, extra="ignore")

    database: DatabaseSettings
    auth: AuthSettings
    google_places: GooglePlacesSettings
    server: ServerSettings


@lru_cache()
def get_app_settings() -> AppSettings:
    return AppSettings(
        database=DatabaseSettings(),
        auth=AuthSettings(),
        google_places=GooglePlacesSettings(),
        server=ServerSettings(),
    )
