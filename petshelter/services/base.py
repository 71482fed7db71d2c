"""Shared data-access helpers for model services."""

import logging
from collections.abc import Mapping
from contextlib import asynccontextmanager
from enum import Enum
from typing import Any, ClassVar

from sqlalchemy import func, or_, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from petshelter.schemas.common import ListQuery
from petshelter.utils.exceptions import DatabaseError, ValidationError
from petshelter.utils.timing import record_timing

logger = logging.getLogger(__name__)


def _plain(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class BaseService:
    """CRUD operations over one model with timing and error wrapping."""

    model: ClassVar[type]
    model_name: ClassVar[str] = "resource"
    search_fields: ClassVar[tuple[str, ...]] = ()
    order_fields: ClassVar[tuple[str, ...]] = ("id",)
    default_order: ClassVar[str] = "id"

    def __init__(self, db: AsyncSession):
        self.db = db

    @asynccontextmanager
    async def _operation(self, operation: str):
        """Time the operation and convert driver failures into DatabaseError."""
        async with record_timing(self.model_name, operation):
            try:
                yield
            except IntegrityError:
                await self.db.rollback()
                raise
            except SQLAlchemyError as e:
                await self.db.rollback()
                logger.error(
                    f"Database operation {self.model_name}.{operation} failed: {e}",
                    extra={"model": self.model_name, "operation": operation},
                )
                raise DatabaseError(operation, e) from e

    async def get_by_id(self, resource_id: str):
        async with self._operation("getById"):
            result = await self.db.execute(select(self.model).where(self.model.id == resource_id))
            return result.scalar_one_or_none()

    async def get_all(
        self, query: ListQuery, filters: Mapping[str, Any] | None = None, paginate: bool = True
    ) -> list:
        """
        List rows with pagination and ordering.

        ``query.search`` matches any of ``search_fields`` case-insensitively; every
        non-None entry of ``filters`` must match exactly. With ``paginate=False``
        every matching row is returned in order and the caller pages the result.
        """
        stmt = select(self.model)

        if query.search and self.search_fields:
            pattern = f"%{query.search.lower()}%"
            stmt = stmt.where(
                or_(*[func.lower(getattr(self.model, name)).like(pattern) for name in self.search_fields])
            )

        for name, value in (filters or {}).items():
            if value is not None:
                stmt = stmt.where(getattr(self.model, name) == _plain(value))

        if query.order_by and query.order_by not in self.order_fields:
            raise ValidationError(
                f"Cannot order by '{query.order_by}'; expected one of: {', '.join(self.order_fields)}",
                field="order_by",
            )
        order_name = query.order_by or self.default_order
        order_column = getattr(self.model, order_name)
        stmt = stmt.order_by(order_column.desc() if query.order_direction == "desc" else order_column.asc())
        if paginate:
            stmt = stmt.offset(query.offset).limit(query.page_size)

        async with self._operation("getAll"):
            result = await self.db.execute(stmt)
            return list(result.scalars().all())

    async def create(self, **data):
        instance = self.model(**{key: _plain(value) for key, value in data.items()})
        async with self._operation("create"):
            self.db.add(instance)
            await self.db.commit()
            await self.db.refresh(instance)
        return instance

    async def update(self, instance, data: Mapping[str, Any]):
        for key, value in data.items():
            setattr(instance, key, _plain(value))
        async with self._operation("update"):
            await self.db.commit()
            await self.db.refresh(instance)
        return instance

    async def delete(self, instance) -> bool:
        async with self._operation("delete"):
            await self.db.delete(instance)
            await self.db.commit()
        return True
