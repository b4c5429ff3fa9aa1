"""Translate domain ``Query`` objects into SQLAlchemy Core/ORM clauses."""

from typing import Any

from sqlalchemy import Select, and_ as sql_and, inspect, or_ as sql_or
from sqlalchemy.orm import InstrumentedAttribute
from sqlalchemy.sql.elements import ColumnElement

from blogrepo.domain.entities import (
    CompositeOperator,
    FilterOperator,
    Predicate,
    PropertyFilter,
    Query,
    SortDirection,
)


def column_for(model: type, field_name: str) -> InstrumentedAttribute:
    """Resolve a domain field name to the mapped column attribute of ``model``."""
    if field_name not in inspect(model).column_attrs:
        raise ValueError(f"Unknown field '{field_name}' for {model.__name__}")
    return getattr(model, field_name)


def to_where_clause(model: type, predicate: Predicate) -> ColumnElement[bool]:
    """Recursively build a WHERE clause from a predicate tree."""
    if isinstance(predicate, PropertyFilter):
        return _compare(column_for(model, predicate.field), predicate.operator, predicate.value)

    clauses = [to_where_clause(model, child) for child in predicate.filters]
    if predicate.operator is CompositeOperator.AND:
        return sql_and(*clauses)
    return sql_or(*clauses)


def apply_filter(stmt: Select, model: type, predicate: Predicate | None) -> Select:
    if predicate is None:
        return stmt
    return stmt.where(to_where_clause(model, predicate))


def apply_query(stmt: Select, model: type, query: Query) -> Select:
    """Apply filter, sort keys and the page window of ``query`` to ``stmt``."""
    stmt = apply_filter(stmt, model, query.predicate)
    for sort in query.sorts:
        column = column_for(model, sort.field)
        stmt = stmt.order_by(column.desc() if sort.direction is SortDirection.DESCENDING else column.asc())
    return stmt.offset(query.offset).limit(query.page_size)


def _compare(column: InstrumentedAttribute, operator: FilterOperator, value: Any) -> ColumnElement[bool]:
    if operator is FilterOperator.EQUAL:
        return column == value
    if operator is FilterOperator.NOT_EQUAL:
        return column != value
    if operator is FilterOperator.LESS_THAN:
        return column < value
    if operator is FilterOperator.LESS_THAN_OR_EQUAL:
        return column <= value
    if operator is FilterOperator.GREATER_THAN:
        return column > value
    if operator is FilterOperator.GREATER_THAN_OR_EQUAL:
        return column >= value
    if operator is FilterOperator.IN:
        return column.in_(list(value))
    raise ValueError(f"Unsupported filter operator: {operator}")
