"""Static mappers for domain entities ↔ database models."""

from typing import Any, Dict

from core.domain.entities import Location, Order, Truck, User
from core.domain.enums import OrderStatus

from .models import LocationModel, OrderModel, TruckModel, UserModel


class EntityMapper:
    """
    Base mapper.

    `fields` maps domain field names to column names wherever they differ.
    """

    model = None
    fields: Dict[str, str] = {}

    @classmethod
    def column(cls, field: str) -> str:
        """Column name for a domain field."""
        return cls.fields.get(field, field)

    @classmethod
    def to_columns(cls, changes: Dict[str, Any]) -> Dict[str, Any]:
        """Translate domain field changes into column values."""
        return {cls.column(field): value for field, value in changes.items()}


class UserMapper(EntityMapper):
    """Static mapper for User ↔ UserModel transformation."""

    model = UserModel

    @staticmethod
    def to_domain(model: UserModel) -> User:
        return User(
            id=model.id,
            name=model.name,
            email=model.email,
            password=model.password,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            name=entity.name,
            email=entity.email,
            password=entity.password,
        )


class TruckMapper(EntityMapper):
    """Static mapper for Truck ↔ TruckModel transformation."""

    model = TruckModel
    fields = {"user": "user_id"}

    @staticmethod
    def to_domain(model: TruckModel) -> Truck:
        return Truck(
            id=model.id,
            user=model.user_id,
            year=model.year,
            color=model.color,
            plates=model.plates,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Truck) -> TruckModel:
        return TruckModel(
            id=entity.id,
            user_id=entity.user,
            year=entity.year,
            color=entity.color,
            plates=entity.plates,
        )


class LocationMapper(EntityMapper):
    """Static mapper for Location ↔ LocationModel transformation."""

    model = LocationModel

    @staticmethod
    def to_domain(model: LocationModel) -> Location:
        return Location(
            id=model.id,
            address=model.address,
            place_id=model.place_id,
            latitude=model.latitude,
            longitude=model.longitude,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Location) -> LocationModel:
        return LocationModel(
            id=entity.id,
            address=entity.address,
            place_id=entity.place_id,
            latitude=entity.latitude,
            longitude=entity.longitude,
        )


class OrderMapper(EntityMapper):
    """Static mapper for Order ↔ OrderModel transformation."""

    model = OrderModel
    fields = {
        "user": "user_id",
        "truck": "truck_id",
        "pickup": "pickup_id",
        "dropoff": "dropoff_id",
    }

    @staticmethod
    def to_domain(model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user=model.user_id,
            truck=model.truck_id,
            pickup=model.pickup_id,
            dropoff=model.dropoff_id,
            status=OrderStatus(model.status),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )

    @staticmethod
    def to_persistence(entity: Order) -> OrderModel:
        return OrderModel(
            id=entity.id,
            user_id=entity.user,
            truck_id=entity.truck,
            pickup_id=entity.pickup,
            dropoff_id=entity.dropoff,
            status=OrderStatus(entity.status).value,
        )

    @classmethod
    def to_columns(cls, changes: Dict[str, Any]) -> Dict[str, Any]:
        columns = super().to_columns(changes)
        if "status" in columns:
            columns["status"] = OrderStatus(columns["status"]).value
        return columns
