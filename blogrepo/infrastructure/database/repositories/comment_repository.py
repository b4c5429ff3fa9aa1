"""Comment repository over a StoreAdapter (uncached)."""

from blogrepo.application.interfaces import CommentRepository, StoreAdapter
from blogrepo.domain.entities import (
    Comment,
    FilterOperator,
    PropertyFilter,
    Query,
    QueryResult,
    SortDirection,
)


class StoreCommentRepository(CommentRepository):
    """Implements the CommentRepository port with plain store queries."""

    def __init__(self, store: StoreAdapter[Comment]):
        self._store = store

    async def get_by_article_id(
        self, article_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[Comment]:
        query = (
            Query()
            .filter(PropertyFilter("article_id", FilterOperator.EQUAL, article_id))
            .sort("created", SortDirection.ASCENDING)
            .page(current_page_num, page_size)
        )
        return await self._store.run_query(query)

    async def get_recent_comments(self, num: int) -> list[Comment]:
        if num <= 0:
            return []
        query = (
            Query()
            .sort("created", SortDirection.DESCENDING)
            .page(1, num)
            .with_page_count(1)
        )
        return (await self._store.run_query(query)).rows
