"""Generic SQLAlchemy implementation of the StoreAdapter port.

One adapter instance serves one ORM model / domain entity pair. Entity
dataclass field names must match the model's column attribute names; rows are
mapped field by field in both directions.

Every call opens its own session and transaction, so a write is committed by
the time the coroutine returns. Callers that layer a cache on top rely on
this to keep the cache behind the durable store.
"""

import logging
import uuid
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from dataclasses import fields
from typing import Any, Generic, TypeVar

from sqlalchemy import func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from blogrepo.application.interfaces import StoreAdapter
from blogrepo.domain.entities import Predicate, Query, QueryResult
from blogrepo.domain.exceptions import StoreError
from blogrepo.infrastructure.database.base import Base
from blogrepo.infrastructure.database.query_translator import (
    apply_filter,
    apply_query,
    column_for,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")


class SQLAlchemyStoreAdapter(StoreAdapter[T], Generic[T]):
    """Implements the StoreAdapter port using SQLAlchemy async sessions."""

    def __init__(
        self,
        session_factory: async_sessionmaker[AsyncSession],
        model: type[Base],
        entity: type[T],
    ):
        self._session_factory = session_factory
        self._model = model
        self._entity = entity
        self._field_names = [f.name for f in fields(entity)]

    def _to_entity(self, model: Any) -> T:
        """Map ORM model → domain entity."""
        return self._entity(**{name: getattr(model, name) for name in self._field_names})

    def _values(self, record: T) -> dict[str, Any]:
        return {name: getattr(record, name) for name in self._field_names}

    @asynccontextmanager
    async def _transaction(self, operation: str) -> AsyncIterator[AsyncSession]:
        """Yield a session inside a transaction; wrap engine errors as StoreError."""
        try:
            async with self._session_factory() as session:
                async with session.begin():
                    yield session
        except SQLAlchemyError as exc:
            logger.error(
                "Store %s on '%s' failed: %s",
                operation, self._model.__tablename__, exc,
            )
            raise StoreError(operation, str(exc)) from exc

    async def get(self, record_id: str) -> T | None:
        async with self._transaction("get") as session:
            model = await session.get(self._model, record_id)
            return self._to_entity(model) if model else None

    async def insert(self, record: T) -> str:
        if not getattr(record, "id", None):
            record.id = str(uuid.uuid4())

        async with self._transaction("insert") as session:
            session.add(self._model(**self._values(record)))
            await session.flush()
        return record.id

    async def update(self, record_id: str, record: T) -> bool:
        async with self._transaction("update") as session:
            model = await session.get(self._model, record_id)
            if model is None:
                return False
            for name, value in self._values(record).items():
                if name != "id":
                    setattr(model, name, value)
            await session.flush()
            return True

    async def delete(self, record_id: str) -> bool:
        async with self._transaction("delete") as session:
            model = await session.get(self._model, record_id)
            if model is None:
                return False
            await session.delete(model)
            await session.flush()
            return True

    async def count(self, predicate: Predicate | None = None) -> int:
        stmt = apply_filter(select(func.count()).select_from(self._model), self._model, predicate)
        async with self._transaction("count") as session:
            result = await session.execute(stmt)
            return result.scalar_one()

    async def run_query(self, query: Query) -> QueryResult[T]:
        stmt = apply_query(select(self._model), self._model, query)
        count_stmt = None
        if query.counts_total:
            count_stmt = apply_filter(
                select(func.count()).select_from(self._model), self._model, query.predicate
            )

        async with self._transaction("query") as session:
            result = await session.execute(stmt)
            rows = [self._to_entity(model) for model in result.scalars().all()]
            if count_stmt is None:
                return QueryResult(rows=rows, total_count=None, page_count=query.page_count)
            total = (await session.execute(count_stmt)).scalar_one()

        return QueryResult.counted(rows, total, query.page_size)

    async def run_projection(self, query: Query) -> list[dict[str, Any]]:
        if not query.projections:
            raise ValueError("run_projection requires at least one projected field")

        columns = [column_for(self._model, p.field).label(p.field) for p in query.projections]
        stmt = apply_query(select(*columns), self._model, query)
        async with self._transaction("projection") as session:
            result = await session.execute(stmt)
            return [dict(row) for row in result.mappings().all()]
