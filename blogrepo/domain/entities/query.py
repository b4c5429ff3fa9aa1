"""Domain entities for store queries — predicates, sort keys and pagination.

Everything here is immutable data. A ``Query`` is built fresh per call with
the chaining helpers (each returns a new instance) and handed to a
``StoreAdapter``, which is responsible for turning it into something its
engine understands.

Usage:
    query = (
        Query()
        .filter(and_(
            PropertyFilter("author_id", FilterOperator.EQUAL, author_id),
            PropertyFilter("is_published", FilterOperator.EQUAL, True),
        ))
        .sort("updated", SortDirection.DESCENDING)
        .page(1, 10)
        .with_page_count(1)
    )
"""

import math
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")


class FilterOperator(str, Enum):
    """Comparison operators available to a leaf predicate."""

    EQUAL = "eq"
    NOT_EQUAL = "ne"
    LESS_THAN = "lt"
    LESS_THAN_OR_EQUAL = "lte"
    GREATER_THAN = "gt"
    GREATER_THAN_OR_EQUAL = "gte"
    IN = "in"


class CompositeOperator(str, Enum):
    AND = "and"
    OR = "or"


class SortDirection(str, Enum):
    ASCENDING = "asc"
    DESCENDING = "desc"


@dataclass(frozen=True)
class PropertyFilter:
    """Leaf predicate: ``field <operator> value``."""

    field: str
    operator: FilterOperator
    value: Any


@dataclass(frozen=True)
class CompositeFilter:
    """AND/OR over a non-empty tuple of predicates."""

    operator: CompositeOperator
    filters: tuple["Predicate", ...]

    def __post_init__(self) -> None:
        if not self.filters:
            raise ValueError("A composite filter needs at least one sub-filter")


Predicate = Union[PropertyFilter, CompositeFilter]


def and_(*filters: Predicate) -> CompositeFilter:
    return CompositeFilter(CompositeOperator.AND, tuple(filters))


def or_(*filters: Predicate) -> CompositeFilter:
    return CompositeFilter(CompositeOperator.OR, tuple(filters))


@dataclass(frozen=True)
class Sort:
    field: str
    direction: SortDirection = SortDirection.ASCENDING


@dataclass(frozen=True)
class Projection:
    """A projected field plus the Python type its value is expected to have."""

    field: str
    value_type: type = str


@dataclass(frozen=True)
class Query:
    """Immutable request object: filter + sort keys + page window + projection.

    ``predicate=None`` matches every record. ``page_count`` is a hint: when
    set, the adapter skips computing the total and reports that value back
    (``1`` = single page).
    """

    predicate: Predicate | None = None
    sorts: tuple[Sort, ...] = ()
    current_page_num: int = 1
    page_size: int = 20
    page_count: int | None = None
    projections: tuple[Projection, ...] = ()

    def __post_init__(self) -> None:
        if self.current_page_num < 1:
            raise ValueError(f"current_page_num must be >= 1, got {self.current_page_num}")
        if self.page_size < 1:
            raise ValueError(f"page_size must be >= 1, got {self.page_size}")
        if self.page_count is not None and self.page_count < 1:
            raise ValueError(f"page_count must be >= 1, got {self.page_count}")

    # ── Builders ────────────────────────────────────────────────────

    def filter(self, predicate: Predicate | None) -> "Query":
        return replace(self, predicate=predicate)

    def sort(self, field_name: str, direction: SortDirection = SortDirection.ASCENDING) -> "Query":
        return replace(self, sorts=self.sorts + (Sort(field_name, direction),))

    def page(self, current_page_num: int, page_size: int) -> "Query":
        return replace(self, current_page_num=current_page_num, page_size=page_size)

    def with_page_count(self, page_count: int | None) -> "Query":
        return replace(self, page_count=page_count)

    def project(self, field_name: str, value_type: type = str) -> "Query":
        return replace(self, projections=self.projections + (Projection(field_name, value_type),))

    # ── Derived values ──────────────────────────────────────────────

    @property
    def offset(self) -> int:
        return (self.current_page_num - 1) * self.page_size

    @property
    def counts_total(self) -> bool:
        """True when the adapter must compute the total match count."""
        return self.page_count is None


@dataclass
class QueryResult(Generic[T]):
    """One page of results.

    ``total_count`` is ``None`` when the query carried a page-count hint.
    """

    rows: list[T] = field(default_factory=list)
    total_count: int | None = None
    page_count: int = 0

    @classmethod
    def counted(cls, rows: list[T], total_count: int, page_size: int) -> "QueryResult[T]":
        return cls(
            rows=rows,
            total_count=total_count,
            page_count=math.ceil(total_count / page_size),
        )
