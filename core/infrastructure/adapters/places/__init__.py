"""Place lookup adapters."""

from .google_places_client import GooglePlacesClient

__all__ = ["GooglePlacesClient"]
