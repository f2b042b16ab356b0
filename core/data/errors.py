"""Translation of SQLAlchemy failures into domain errors."""

from contextlib import contextmanager
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from core.domain.errors import ConflictError, StoreUnavailableError


logger = logging.getLogger(__name__)


@contextmanager
def store_errors(operation: str, kind: str = "Record"):
    """
    Re-raise store failures as domain errors.
    
    Unique-constraint violations become ConflictError (a concurrent writer
    took the value after the service-level check); every other SQLAlchemy
    error becomes StoreUnavailableError.
    """
    try:
        yield
    except IntegrityError as e:
        logger.warning(f"Integrity error during {operation}: {e.orig}")
        raise ConflictError(kind, "unique field", str(e.orig)) from e
    except SQLAlchemyError as e:
        logger.error(f"Store failure during {operation}: {e}")
        raise StoreUnavailableError(
            f"Could not complete {operation}",
            cause=type(e).__name__,
        ) from e
