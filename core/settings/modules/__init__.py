# Settings modules
from .app_settings import AppSettings, get_app_settings
from .auth_settings import AuthSettings
from .database_settings import DatabaseSettings
from .google_places_settings import GooglePlacesSettings
from .server_settings import ServerSettings

__all__ = [
    "AppSettings",
    "get_app_settings",
    "AuthSettings",
    "DatabaseSettings",
    "GooglePlacesSettings",
    "ServerSettings",
]
