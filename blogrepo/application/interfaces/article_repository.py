"""Abstract repository interfaces (ports) — define the contract, not the implementation."""

from abc import ABC, abstractmethod

from blogrepo.domain.entities import Article, ArticleNeighbor, QueryResult


class ArticleRepository(ABC):
    """Port for article persistence — implemented in the infrastructure layer.

    Absent articles are reported as ``None``; store failures surface as
    ``StoreError``.
    """

    @abstractmethod
    async def add(self, article: Article) -> str:
        """Persist a new article and return its ID."""
        ...

    @abstractmethod
    async def get(self, article_id: str) -> Article | None:
        """Retrieve a single article by its ID."""
        ...

    @abstractmethod
    async def update(self, article_id: str, article: Article) -> bool:
        """Update an existing article. Returns False if it does not exist."""
        ...

    @abstractmethod
    async def remove(self, article_id: str) -> bool:
        """Delete an article. Returns True if deleted, False if not found."""
        ...

    @abstractmethod
    async def get_by_permalink(self, permalink: str) -> Article | None:
        """Retrieve a single article by its permalink."""
        ...

    @abstractmethod
    async def get_by_author_id(
        self, author_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[Article]:
        """Published articles of an author, most recently updated first."""
        ...

    @abstractmethod
    async def get_recent_articles(self, fetch_size: int) -> list[Article]:
        ...

    @abstractmethod
    async def get_most_comment_articles(self, num: int) -> list[Article]:
        ...

    @abstractmethod
    async def get_most_view_count_articles(self, num: int) -> list[Article]:
        ...

    @abstractmethod
    async def get_previous_article(self, article_id: str) -> ArticleNeighbor | None:
        """The published article created right before ``article_id``."""
        ...

    @abstractmethod
    async def get_next_article(self, article_id: str) -> ArticleNeighbor | None:
        """The published article created right after ``article_id``."""
        ...

    @abstractmethod
    async def is_published(self, article_id: str) -> bool:
        """False when the article is missing or not published."""
        ...

    @abstractmethod
    async def get_randomly(self, fetch_size: int) -> list[Article]:
        """Up to ``fetch_size`` published articles, approximately uniformly sampled."""
        ...

    @abstractmethod
    async def count(self, published_only: bool = False) -> int:
        ...
