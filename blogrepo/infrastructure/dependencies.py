"""FastAPI dependency injection — wires infrastructure to application layer.

The article cache and store adapter are process-wide singletons; repositories
and services are cheap wrappers built per request around them.
"""

from collections.abc import AsyncGenerator
from functools import lru_cache

from fastapi import Depends

from blogrepo.application.interfaces import ArticleRepository, StoreAdapter
from blogrepo.application.services import ArticleService
from blogrepo.config import get_settings
from blogrepo.domain.entities import Article
from blogrepo.infrastructure.cache import ArticleCache
from blogrepo.infrastructure.database import ArticleModel, SQLAlchemyStoreAdapter, async_session_factory
from blogrepo.infrastructure.database.repositories import CachedArticleRepository


@lru_cache
def get_article_cache() -> ArticleCache:
    """Process-wide article cache."""
    return ArticleCache(capacity=get_settings().article_cache_capacity)


@lru_cache
def get_article_store() -> StoreAdapter[Article]:
    return SQLAlchemyStoreAdapter(async_session_factory, ArticleModel, Article)


def get_article_repository() -> ArticleRepository:
    return CachedArticleRepository(
        store=get_article_store(),
        cache=get_article_cache(),
        random_offset=get_settings().random_sampling_offset,
    )


async def get_article_service(
    repository: ArticleRepository = Depends(get_article_repository),
) -> AsyncGenerator[ArticleService, None]:
    """Provides an ArticleService instance with its repository wired up."""
    yield ArticleService(repository, default_page_size=get_settings().default_page_size)
