"""Unit tests for the predicate / sort / pagination model."""

import dataclasses

import pytest

from blogrepo.domain.entities import (
    CompositeFilter,
    CompositeOperator,
    FilterOperator,
    Projection,
    PropertyFilter,
    Query,
    QueryResult,
    Sort,
    SortDirection,
    and_,
    or_,
)


def test_builders_return_new_queries_and_leave_original_untouched():
    base = Query()
    published = PropertyFilter("is_published", FilterOperator.EQUAL, True)

    built = (
        base.filter(published)
        .sort("updated", SortDirection.DESCENDING)
        .sort("put_top", SortDirection.DESCENDING)
        .page(2, 5)
        .with_page_count(1)
        .project("title")
    )

    assert base == Query()
    assert built.predicate == published
    assert built.sorts == (
        Sort("updated", SortDirection.DESCENDING),
        Sort("put_top", SortDirection.DESCENDING),
    )
    assert (built.current_page_num, built.page_size, built.page_count) == (2, 5, 1)
    assert built.projections == (Projection("title", str),)


def test_query_is_frozen():
    query = Query()
    with pytest.raises(dataclasses.FrozenInstanceError):
        query.page_size = 3  # type: ignore[misc]


@pytest.mark.parametrize(
    "kwargs",
    [
        {"current_page_num": 0},
        {"page_size": 0},
        {"page_count": 0},
    ],
)
def test_invalid_pagination_is_rejected(kwargs):
    with pytest.raises(ValueError):
        Query(**kwargs)


def test_offset_follows_page_number():
    assert Query().page(1, 10).offset == 0
    assert Query().page(3, 10).offset == 20


def test_page_count_hint_disables_total_counting():
    assert Query().counts_total is True
    assert Query().with_page_count(1).counts_total is False


def test_composites_nest_and_keep_order():
    a = PropertyFilter("created", FilterOperator.GREATER_THAN, 10)
    b = PropertyFilter("created", FilterOperator.LESS_THAN, 20)
    c = PropertyFilter("is_published", FilterOperator.EQUAL, True)

    tree = or_(and_(a, b), c)

    assert isinstance(tree, CompositeFilter)
    assert tree.operator is CompositeOperator.OR
    assert tree.filters[0] == CompositeFilter(CompositeOperator.AND, (a, b))
    assert tree.filters[1] is c


def test_empty_composite_is_rejected():
    with pytest.raises(ValueError):
        and_()


def test_counted_result_exactly_one_full_page():
    result = QueryResult.counted(rows=[1, 2, 3], total_count=3, page_size=3)
    assert result.page_count == 1
    assert result.total_count == 3


@pytest.mark.parametrize(
    ("total", "page_size", "expected_pages"),
    [(0, 5, 0), (1, 5, 1), (5, 5, 1), (6, 5, 2), (11, 5, 3)],
)
def test_counted_result_page_count(total, page_size, expected_pages):
    assert QueryResult.counted([], total, page_size).page_count == expected_pages
