from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import TrucklineBaseSettings


class ServerSettings(TrucklineBaseSettings):
    """HTTP server settings."""

    host: str = Field("0.0.0.0", alias="HOST")
    port: int = Field(3000, alias="PORT")
    log_level: str = Field("INFO", alias="LOG_LEVEL")
