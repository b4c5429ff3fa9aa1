"""Application service (use case) for Article operations."""

import random

from blogrepo.application.interfaces import ArticleRepository
from blogrepo.application.schemas import ArticleCreate, ArticleUpdate
from blogrepo.domain.entities import Article, ArticleNeighbor, QueryResult, now_millis
from blogrepo.domain.exceptions import EntityNotFoundError


class ArticleService:
    """Orchestrates article business logic. Depends on the repository port (DI).

    Turns repository absence (``None``) into ``EntityNotFoundError`` for the
    presentation layer; ``StoreError`` passes through untouched.
    """

    def __init__(
        self,
        repository: ArticleRepository,
        rng: random.Random | None = None,
        default_page_size: int = 20,
    ):
        self._repository = repository
        self._rng = rng or random.Random()
        self._default_page_size = default_page_size

    async def get_article(self, article_id: str) -> Article:
        article = await self._repository.get(article_id)
        if article is None:
            raise EntityNotFoundError("Article", article_id)
        return article

    async def get_article_by_permalink(self, permalink: str) -> Article:
        article = await self._repository.get_by_permalink(permalink)
        if article is None:
            raise EntityNotFoundError("Article", permalink)
        return article

    async def create_article(self, data: ArticleCreate) -> Article:
        now = now_millis()
        article = Article(
            title=data.title,
            permalink=data.permalink,
            content=data.content,
            abstract=data.abstract,
            author_id=data.author_id,
            is_published=data.is_published,
            put_top=data.put_top,
            created=now,
            updated=now,
            random_double=self._rng.random(),
        )
        await self._repository.add(article)
        return article

    async def update_article(self, article_id: str, data: ArticleUpdate) -> Article:
        article = await self.get_article(article_id)
        for name, value in data.model_dump(exclude_unset=True).items():
            if value is not None:
                setattr(article, name, value)
        article.touch()

        if not await self._repository.update(article_id, article):
            raise EntityNotFoundError("Article", article_id)
        return article

    async def delete_article(self, article_id: str) -> bool:
        if not await self._repository.remove(article_id):
            raise EntityNotFoundError("Article", article_id)
        return True

    async def list_by_author(
        self, author_id: str, current_page_num: int = 1, page_size: int | None = None
    ) -> QueryResult[Article]:
        return await self._repository.get_by_author_id(
            author_id, current_page_num, page_size or self._default_page_size
        )

    async def list_recent(self, limit: int) -> list[Article]:
        return await self._repository.get_recent_articles(limit)

    async def list_most_commented(self, limit: int) -> list[Article]:
        return await self._repository.get_most_comment_articles(limit)

    async def list_most_viewed(self, limit: int) -> list[Article]:
        return await self._repository.get_most_view_count_articles(limit)

    async def list_random(self, limit: int) -> list[Article]:
        return await self._repository.get_randomly(limit)

    async def get_previous(self, article_id: str) -> ArticleNeighbor:
        neighbor = await self._repository.get_previous_article(article_id)
        if neighbor is None:
            raise EntityNotFoundError("Previous article", article_id)
        return neighbor

    async def get_next(self, article_id: str) -> ArticleNeighbor:
        neighbor = await self._repository.get_next_article(article_id)
        if neighbor is None:
            raise EntityNotFoundError("Next article", article_id)
        return neighbor
