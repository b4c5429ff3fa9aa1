"""In-memory fakes shared by the unit and HTTP tests."""

import asyncio
import operator
import uuid
from dataclasses import replace
from typing import Any, Generic, TypeVar

from blogrepo.application.interfaces import StoreAdapter
from blogrepo.domain.entities import (
    Article,
    CompositeOperator,
    FilterOperator,
    Predicate,
    PropertyFilter,
    Query,
    QueryResult,
    SortDirection,
)
from blogrepo.domain.exceptions import StoreError

T = TypeVar("T")

_COMPARATORS = {
    FilterOperator.EQUAL: operator.eq,
    FilterOperator.NOT_EQUAL: operator.ne,
    FilterOperator.LESS_THAN: operator.lt,
    FilterOperator.LESS_THAN_OR_EQUAL: operator.le,
    FilterOperator.GREATER_THAN: operator.gt,
    FilterOperator.GREATER_THAN_OR_EQUAL: operator.ge,
    FilterOperator.IN: lambda value, options: value in options,
}


def matches(record: Any, predicate: Predicate | None) -> bool:
    """Evaluate a predicate tree against a record in Python."""
    if predicate is None:
        return True
    if isinstance(predicate, PropertyFilter):
        return _COMPARATORS[predicate.operator](getattr(record, predicate.field), predicate.value)
    results = (matches(record, child) for child in predicate.filters)
    return all(results) if predicate.operator is CompositeOperator.AND else any(results)


class InMemoryStoreAdapter(StoreAdapter[T], Generic[T]):
    """Dict-backed store that records every call and query it receives."""

    def __init__(self, records: list[T] | None = None):
        self._records: dict[str, T] = {}
        self.calls: list[str] = []
        self.queries: list[Query] = []
        for record in records or []:
            self._put(record)

    def _put(self, record: T) -> str:
        if not record.id:
            record.id = str(uuid.uuid4())
        self._records[record.id] = replace(record)
        return record.id

    def stored(self, record_id: str) -> T | None:
        """Direct peek at the stored record, bypassing call tracking."""
        record = self._records.get(record_id)
        return replace(record) if record is not None else None

    async def get(self, record_id: str) -> T | None:
        self.calls.append("get")
        return self.stored(record_id)

    async def insert(self, record: T) -> str:
        self.calls.append("insert")
        return self._put(record)

    async def update(self, record_id: str, record: T) -> bool:
        self.calls.append("update")
        if record_id not in self._records:
            return False
        self._records[record_id] = replace(record, id=record_id)
        return True

    async def delete(self, record_id: str) -> bool:
        self.calls.append("delete")
        return self._records.pop(record_id, None) is not None

    async def count(self, predicate: Predicate | None = None) -> int:
        self.calls.append("count")
        return sum(1 for r in self._records.values() if matches(r, predicate))

    def _select(self, query: Query) -> tuple[list[T], int]:
        rows = [r for r in self._records.values() if matches(r, query.predicate)]
        for sort in reversed(query.sorts):
            rows.sort(
                key=operator.attrgetter(sort.field),
                reverse=sort.direction is SortDirection.DESCENDING,
            )
        page = rows[query.offset:query.offset + query.page_size]
        return [replace(r) for r in page], len(rows)

    async def run_query(self, query: Query) -> QueryResult[T]:
        self.calls.append("run_query")
        self.queries.append(query)
        rows, total = self._select(query)
        if query.counts_total:
            return QueryResult.counted(rows, total, query.page_size)
        return QueryResult(rows=rows, total_count=None, page_count=query.page_count)

    async def run_projection(self, query: Query) -> list[dict[str, Any]]:
        self.calls.append("run_projection")
        self.queries.append(query)
        rows, _ = self._select(query)
        return [{p.field: getattr(r, p.field) for p in query.projections} for r in rows]


class FailingStoreAdapter(InMemoryStoreAdapter[T]):
    """In-memory store whose selected operations raise StoreError."""

    def __init__(self, records: list[T] | None = None, fail_on: set[str] | None = None):
        super().__init__(records)
        self.fail_on = fail_on or set()

    def _maybe_fail(self, operation: str) -> None:
        if operation in self.fail_on:
            raise StoreError(operation, "simulated outage")

    async def get(self, record_id: str) -> T | None:
        self._maybe_fail("get")
        return await super().get(record_id)

    async def update(self, record_id: str, record: T) -> bool:
        self._maybe_fail("update")
        return await super().update(record_id, record)

    async def delete(self, record_id: str) -> bool:
        self._maybe_fail("delete")
        return await super().delete(record_id)

    async def count(self, predicate: Predicate | None = None) -> int:
        self._maybe_fail("count")
        return await super().count(predicate)

    async def insert(self, record: T) -> str:
        self._maybe_fail("insert")
        return await super().insert(record)

    async def run_query(self, query: Query) -> QueryResult[T]:
        self._maybe_fail("run_query")
        return await super().run_query(query)

    async def run_projection(self, query: Query) -> list[dict[str, Any]]:
        self._maybe_fail("run_projection")
        return await super().run_projection(query)


class GatedStoreAdapter(InMemoryStoreAdapter[T]):
    """In-memory store whose ``get`` and ``run_query`` pause after reading.

    ``fetched`` is set once the rows have been read; the call then waits on
    ``release`` before returning them, letting a test run other operations
    in between.
    """

    def __init__(self, records: list[T] | None = None):
        super().__init__(records)
        self.fetched = asyncio.Event()
        self.release = asyncio.Event()

    async def _pause(self) -> None:
        self.fetched.set()
        await self.release.wait()

    async def get(self, record_id: str) -> T | None:
        record = await super().get(record_id)
        await self._pause()
        return record

    async def run_query(self, query: Query) -> QueryResult[T]:
        result = await super().run_query(query)
        await self._pause()
        return result


def make_article(
    n: int,
    *,
    published: bool = True,
    author_id: str = "author-1",
    **overrides: Any,
) -> Article:
    """Deterministic article #n: created/updated grow with n."""
    values: dict[str, Any] = dict(
        id=f"article-{n}",
        title=f"Title {n}",
        permalink=f"/articles/{n}",
        abstract=f"Abstract {n}",
        content=f"Content {n}",
        author_id=author_id,
        is_published=published,
        created=1_000 * n,
        updated=1_000 * n,
        random_double=(n % 10) / 10 + 0.05,
    )
    values.update(overrides)
    return Article(**values)
