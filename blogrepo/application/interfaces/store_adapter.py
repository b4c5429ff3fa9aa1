"""Abstract store adapter (port) — generic CRUD + query access to durable storage."""

from abc import ABC, abstractmethod
from typing import Any, Generic, TypeVar

from blogrepo.domain.entities import Predicate, Query, QueryResult

T = TypeVar("T")


class StoreAdapter(ABC, Generic[T]):
    """Port for a transactional record store — implemented in the infrastructure layer.

    Every method either returns normally or raises ``StoreError``; absence is
    reported as ``None`` / ``False``, never as an exception. Each write is
    durable once the coroutine returns. Retries, if any, belong to the
    implementation.
    """

    @abstractmethod
    async def get(self, record_id: str) -> T | None:
        """Retrieve a single record by its ID."""
        ...

    @abstractmethod
    async def insert(self, record: T) -> str:
        """Persist a new record and return its (possibly generated) ID."""
        ...

    @abstractmethod
    async def update(self, record_id: str, record: T) -> bool:
        """Overwrite the record stored under ``record_id``. Returns False if not found."""
        ...

    @abstractmethod
    async def delete(self, record_id: str) -> bool:
        """Delete a record. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def count(self, predicate: Predicate | None = None) -> int:
        """Count records, optionally restricted to those matching ``predicate``."""
        ...

    @abstractmethod
    async def run_query(self, query: Query) -> QueryResult[T]:
        """Execute ``query`` and return one page of full records."""
        ...

    @abstractmethod
    async def run_projection(self, query: Query) -> list[dict[str, Any]]:
        """Execute ``query`` returning only its projected fields, keyed by field name."""
        ...
