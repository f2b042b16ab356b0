"""
Domain errors.

Every failure the services raise on purpose derives from DomainError.
The API layer maps each kind to an HTTP status.
"""
from typing import Optional


class DomainError(Exception):
    """Base class for domain errors."""

    name = "Domain error"

    def __init__(self, message: str, cause: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.cause = cause


class EntityNotFoundError(DomainError):
    """Raised when a record does not exist in its collection."""

    name = "Not found"

    def __init__(self, kind: str, entity_id: str):
        super().__init__(
            f"{kind} with '{entity_id}' not found",
            cause=f"The identifier must be valid - Received ID: {entity_id}",
        )
        self.kind = kind
        self.entity_id = entity_id


class ReferenceNotFoundError(EntityNotFoundError):
    """Raised when an order field references a record that does not exist."""

    name = "Reference not found"

    def __init__(self, field: str, kind: str, entity_id: str):
        super().__init__(kind, entity_id)
        self.field = field
        self.message = f"Invalid '{field}': {kind} with '{entity_id}' not found"
        self.args = (self.message,)


class ConflictError(DomainError):
    """Raised when a unique field value is already taken."""

    name = "Conflict"

    def __init__(self, kind: str, field: str, value: str):
        super().__init__(
            f"{kind} already exists",
            cause=f"The {kind.lower()} with the {field}: {value} already exists",
        )
        self.kind = kind
        self.field = field
        self.value = value


class AuthenticationError(DomainError):
    """Raised when credentials or tokens are invalid."""

    name = "Unauthorized"


class StoreUnavailableError(DomainError):
    """Raised when the entity store cannot complete an operation."""

    name = "Store unavailable"


class PlaceNotFoundError(EntityNotFoundError):
    """Raised when the place lookup has no result for a place id."""

    name = "Place not found"

    def __init__(self, place_id: str):
        super().__init__("Place", place_id)
        self.message = "The id doesn't match any location"
        self.args = (self.message,)


class PlaceLookupError(DomainError):
    """Raised when the place lookup service cannot be reached."""

    name = "Place lookup failed"
