"""Tag and tag-article repositories over a StoreAdapter (uncached)."""

from blogrepo.application.interfaces import StoreAdapter, TagArticleRepository, TagRepository
from blogrepo.domain.entities import (
    FilterOperator,
    PropertyFilter,
    Query,
    QueryResult,
    SortDirection,
    Tag,
    TagArticle,
)


class StoreTagRepository(TagRepository):
    """Implements the TagRepository port with plain store queries."""

    def __init__(self, store: StoreAdapter[Tag]):
        self._store = store

    async def get_by_title(self, title: str) -> Tag | None:
        query = (
            Query()
            .filter(PropertyFilter("title", FilterOperator.EQUAL, title))
            .page(1, 1)
            .with_page_count(1)
        )
        result = await self._store.run_query(query)
        return result.rows[0] if result.rows else None

    async def get_most_used_tags(self, num: int) -> list[Tag]:
        if num <= 0:
            return []
        query = (
            Query()
            .sort("published_ref_count", SortDirection.DESCENDING)
            .sort("reference_count", SortDirection.DESCENDING)
            .page(1, num)
            .with_page_count(1)
        )
        return (await self._store.run_query(query)).rows


class StoreTagArticleRepository(TagArticleRepository):
    """Implements the TagArticleRepository port with plain store queries."""

    def __init__(self, store: StoreAdapter[TagArticle]):
        self._store = store

    async def get_by_article_id(self, article_id: str) -> list[TagArticle]:
        by_article = PropertyFilter("article_id", FilterOperator.EQUAL, article_id)
        total = await self._store.count(by_article)
        if total == 0:
            return []

        query = Query().filter(by_article).page(1, total).with_page_count(1)
        return (await self._store.run_query(query)).rows

    async def get_by_tag_id(
        self, tag_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[TagArticle]:
        query = (
            Query()
            .filter(PropertyFilter("tag_id", FilterOperator.EQUAL, tag_id))
            .sort("id", SortDirection.DESCENDING)
            .page(current_page_num, page_size)
        )
        return await self._store.run_query(query)
