"""Article repository: a StoreAdapter wrapped with the in-process ArticleCache.

Point lookups (id, permalink) are read-through. Writes go to the store first
and only touch the cache once the store call has returned; a failing store
call leaves the cache as it was. A read-through fill that overlaps a write
or removal of the same article is discarded rather than cached. Multi-row
queries always hit the store and never populate the cache.
"""

import logging
import random
from dataclasses import replace

from blogrepo.application.interfaces import ArticleRepository, StoreAdapter
from blogrepo.domain.entities import (
    Article,
    ArticleNeighbor,
    FilterOperator,
    PropertyFilter,
    Query,
    QueryResult,
    SortDirection,
    and_,
)
from blogrepo.infrastructure.cache import ArticleCache

logger = logging.getLogger(__name__)

DEFAULT_RANDOM_OFFSET = 0.1

_PUBLISHED = PropertyFilter("is_published", FilterOperator.EQUAL, True)


class CachedArticleRepository(ArticleRepository):
    """Implements the ArticleRepository port on top of a store adapter and a cache."""

    def __init__(
        self,
        store: StoreAdapter[Article],
        cache: ArticleCache,
        rng: random.Random | None = None,
        random_offset: float = DEFAULT_RANDOM_OFFSET,
    ):
        self._store = store
        self._cache = cache
        self._rng = rng or random.Random()
        self._random_offset = random_offset

    # ── Point operations (cache-aware) ──────────────────────────────

    async def add(self, article: Article) -> str:
        return await self._store.insert(article)

    async def get(self, article_id: str) -> Article | None:
        article = self._cache.get(article_id)
        if article is not None:
            return article

        with self._cache.fill_window() as since:
            article = await self._store.get(article_id)
            if article is None:
                return None
            self._cache.put_if_unchanged(article, since)
        return article

    async def update(self, article_id: str, article: Article) -> bool:
        updated = await self._store.update(article_id, article)
        if not updated:
            self._cache.remove(article_id)
            return False

        self._cache.put(replace(article, id=article_id))
        return True

    async def remove(self, article_id: str) -> bool:
        removed = await self._store.delete(article_id)
        self._cache.remove(article_id)
        return removed

    async def get_by_permalink(self, permalink: str) -> Article | None:
        article = self._cache.get_by_permalink(permalink)
        if article is not None:
            return article

        query = (
            Query()
            .filter(PropertyFilter("permalink", FilterOperator.EQUAL, permalink))
            .page(1, 1)
            .with_page_count(1)
        )
        with self._cache.fill_window() as since:
            result = await self._store.run_query(query)
            if not result.rows:
                return None
            article = result.rows[0]
            self._cache.put_if_unchanged(article, since)
        return article

    async def is_published(self, article_id: str) -> bool:
        article = await self.get(article_id)
        return article is not None and article.is_published

    async def count(self, published_only: bool = False) -> int:
        return await self._store.count(_PUBLISHED if published_only else None)

    # ── Listing queries (always hit the store) ──────────────────────

    async def get_by_author_id(
        self, author_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[Article]:
        query = (
            Query()
            .filter(and_(
                PropertyFilter("author_id", FilterOperator.EQUAL, author_id),
                _PUBLISHED,
            ))
            .sort("updated", SortDirection.DESCENDING)
            .sort("put_top", SortDirection.DESCENDING)
            .page(current_page_num, page_size)
            .with_page_count(1)
        )
        return await self._store.run_query(query)

    async def get_recent_articles(self, fetch_size: int) -> list[Article]:
        return await self._list_published(fetch_size, "updated")

    async def get_most_comment_articles(self, num: int) -> list[Article]:
        return await self._list_published(num, "comment_count", "updated")

    async def get_most_view_count_articles(self, num: int) -> list[Article]:
        return await self._list_published(num, "view_count", "updated")

    async def get_previous_article(self, article_id: str) -> ArticleNeighbor | None:
        return await self._neighbor(article_id, FilterOperator.LESS_THAN, SortDirection.DESCENDING)

    async def get_next_article(self, article_id: str) -> ArticleNeighbor | None:
        return await self._neighbor(article_id, FilterOperator.GREATER_THAN, SortDirection.ASCENDING)

    async def get_randomly(self, fetch_size: int) -> list[Article]:
        """Sample published articles by scanning ``random_double`` from a random pivot.

        The first scan takes coordinates >= pivot; if that falls short, a
        second scan wraps around and takes coordinates in [0, pivot]. Both
        ranges include the pivot itself, so an article sitting exactly on it
        could come back twice.
        """
        if fetch_size <= 0 or await self.count(published_only=True) == 0:
            return []

        mid = self._rng.random() + self._random_offset
        logger.debug("Random mid[%s]", mid)

        query = (
            Query()
            .filter(and_(
                PropertyFilter("random_double", FilterOperator.GREATER_THAN_OR_EQUAL, mid),
                _PUBLISHED,
            ))
            .sort("random_double", SortDirection.ASCENDING)
            .page(1, fetch_size)
            .with_page_count(1)
        )
        articles = list((await self._store.run_query(query)).rows)

        remaining = fetch_size - len(articles)
        if remaining > 0:
            query = (
                Query()
                .filter(and_(
                    PropertyFilter("random_double", FilterOperator.GREATER_THAN_OR_EQUAL, 0.0),
                    PropertyFilter("random_double", FilterOperator.LESS_THAN_OR_EQUAL, mid),
                    _PUBLISHED,
                ))
                .sort("random_double", SortDirection.ASCENDING)
                .page(1, remaining)
                .with_page_count(1)
            )
            articles.extend((await self._store.run_query(query)).rows)

        return articles

    # ── Helpers ─────────────────────────────────────────────────────

    async def _list_published(self, num: int, *sort_fields: str) -> list[Article]:
        if num <= 0:
            return []
        query = Query().filter(_PUBLISHED)
        for field_name in sort_fields:
            query = query.sort(field_name, SortDirection.DESCENDING)
        result = await self._store.run_query(query.page(1, num).with_page_count(1))
        return result.rows

    async def _neighbor(
        self,
        article_id: str,
        operator: FilterOperator,
        direction: SortDirection,
    ) -> ArticleNeighbor | None:
        current = await self.get(article_id)
        if current is None:
            return None

        query = (
            Query()
            .filter(and_(
                PropertyFilter("created", operator, current.created),
                _PUBLISHED,
            ))
            .sort("created", direction)
            .page(1, 1)
            .with_page_count(1)
        )
        for field_name in ArticleNeighbor.FIELDS:
            query = query.project(field_name, str)

        rows = await self._store.run_projection(query)
        if len(rows) != 1:
            return None

        row = rows[0]
        return ArticleNeighbor(**{name: row[name] for name in ArticleNeighbor.FIELDS})
