"""SQLAlchemy implementation of OrderRepository."""

from typing import Dict, List, Sequence, Tuple, Type
import logging

from sqlalchemy import select
from sqlalchemy.orm import aliased

from core.domain.entities import ExpandedOrder
from core.domain.queries import (
    ASCENDING,
    LimitStage,
    LookupStage,
    MatchStage,
    PipelineStage,
    SkipStage,
    SortStage,
)
from core.domain.repositories import OrderRepository

from ..errors import store_errors
from ..mappers import EntityMapper, LocationMapper, OrderMapper, TruckMapper, UserMapper
from .base_repository_impl import SqlAlchemyRepository


logger = logging.getLogger(__name__)


# Collection name -> mapper of the table it lives in
COLLECTIONS: Dict[str, Type[EntityMapper]] = {
    "users": UserMapper,
    "trucks": TruckMapper,
    "locations": LocationMapper,
    "orders": OrderMapper,
}


class SqlAlchemyOrderRepository(SqlAlchemyRepository, OrderRepository):
    """
    Concrete implementation of OrderRepository using SQLAlchemy.

    `aggregate` compiles a read pipeline into a single SELECT:

        SELECT page.*, user.*, truck.*, pickup.*, dropoff.*
        FROM (SELECT * FROM orders WHERE ... ORDER BY ... LIMIT ... OFFSET ...) AS page
        LEFT OUTER JOIN users AS user ON user.id = page.user_id
        ...
        ORDER BY <same keys on page>

    Filtering, sorting and the page window run on the orders table alone;
    lookups are joined onto the page afterwards.
    """

    mapper = OrderMapper
    kind = "Order"

    async def aggregate(self, stages: Sequence[PipelineStage]) -> List[ExpandedOrder]:
        page_query, sort_keys, lookups = self._compile_base(stages)

        page = page_query.subquery("page")
        order = aliased(self.model, page)

        statement = select(order)
        targets: List[Tuple[str, Type[EntityMapper]]] = []
        for lookup in lookups:
            mapper = self._collection(lookup.from_collection)
            target = aliased(mapper.model, name=lookup.target)
            statement = statement.add_columns(target).outerjoin(
                target,
                getattr(target, mapper.column(lookup.foreign_field))
                == getattr(order, self.mapper.column(lookup.local_field)),
            )
            targets.append((lookup.target, mapper))

        statement = statement.order_by(*self._order_by(order, sort_keys))

        with store_errors("order aggregation", self.kind):
            result = await self._session.execute(statement)
            rows = result.all()

        expanded = []
        for row in rows:
            order_model, joined = row[0], row[1:]
            references = {
                name: mapper.to_domain(model) if model is not None else None
                for (name, mapper), model in zip(targets, joined)
            }
            expanded.append(
                ExpandedOrder(order=self.mapper.to_domain(order_model), **references)
            )

        logger.debug(f"Order aggregation returned {len(expanded)} row(s)")
        return expanded

    def _compile_base(self, stages: Sequence[PipelineStage]):
        """Split stages into the base-table query and the trailing lookups."""
        query = select(self.model)
        sort_keys: Tuple[Tuple[str, int], ...] = ()
        lookups: List[LookupStage] = []

        for stage in stages:
            if isinstance(stage, LookupStage):
                lookups.append(stage)
                continue

            if lookups:
                raise ValueError(
                    f"{type(stage).__name__} must come before lookup stages"
                )

            if isinstance(stage, MatchStage):
                query = self._where(query, stage.conditions)
            elif isinstance(stage, SortStage):
                sort_keys = stage.keys
                query = query.order_by(*self._order_by(self.model, sort_keys))
            elif isinstance(stage, SkipStage):
                query = query.offset(stage.count)
            elif isinstance(stage, LimitStage):
                query = query.limit(stage.count)
            else:
                raise ValueError(f"Unsupported pipeline stage: {stage!r}")

        return query, sort_keys, lookups

    def _order_by(self, source, sort_keys):
        columns = []
        for field, direction in sort_keys:
            column = getattr(source, self.mapper.column(field))
            columns.append(column.asc() if direction == ASCENDING else column.desc())
        return columns

    @staticmethod
    def _collection(name: str) -> Type[EntityMapper]:
        try:
            return COLLECTIONS[name]
        except KeyError:
            raise ValueError(f"Unknown collection: {name}") from None
