"""
Relation validator for order references.

Confirms that the user, truck, pickup and dropoff an order points to exist
before the order is written. The check and the write are not atomic: a
record deleted in between is not detected.
"""
import asyncio
from typing import List, Optional, Tuple

from core.domain.errors import ReferenceNotFoundError
from core.domain.repositories import ExistenceLookup


class RelationValidator:
    """
    Concurrent existence checks for order references.

    Usage:
        validator = RelationValidator(users=..., trucks=..., locations=...)
        await validator.validate_order_references(user_id=uid, truck_id=tid)
    """

    def __init__(
        self,
        users: ExistenceLookup,
        trucks: ExistenceLookup,
        locations: ExistenceLookup,
    ) -> None:
        """
        Args:
            users: Lookup against the users collection
            trucks: Lookup against the trucks collection
            locations: Lookup against the locations collection (pickup and dropoff)
        """
        self._users = users
        self._trucks = trucks
        self._locations = locations

    async def validate_order_references(
        self,
        user_id: Optional[str] = None,
        truck_id: Optional[str] = None,
        pickup_id: Optional[str] = None,
        dropoff_id: Optional[str] = None,
    ) -> None:
        """
        Check every non-empty reference.

        All lookups run concurrently and every one of them is awaited, even
        after a miss. Empty ids are skipped.

        Raises:
            ReferenceNotFoundError: For the first missing reference, in the
                order user, truck, pickup, dropoff
            Exception: Any lookup failure (e.g. StoreUnavailableError) is
                re-raised as-is and takes precedence over missing references
        """
        checks: List[Tuple[str, ExistenceLookup, str]] = [
            (field, lookup, entity_id)
            for field, lookup, entity_id in (
                ("user", self._users, user_id),
                ("truck", self._trucks, truck_id),
                ("pickup", self._locations, pickup_id),
                ("dropoff", self._locations, dropoff_id),
            )
            if entity_id
        ]
        if not checks:
            return

        results = await asyncio.gather(
            *(lookup.exists(entity_id) for _, lookup, entity_id in checks),
            return_exceptions=True,
        )

        for result in results:
            if isinstance(result, BaseException):
                raise result

        for (field, lookup, entity_id), found in zip(checks, results):
            if not found:
                raise ReferenceNotFoundError(field, lookup.kind, entity_id)
