"""Abstract repository interfaces (ports) for tags and tag-article relations."""

from abc import ABC, abstractmethod

from blogrepo.domain.entities import QueryResult, Tag, TagArticle


class TagRepository(ABC):
    """Port for tag persistence."""

    @abstractmethod
    async def get_by_title(self, title: str) -> Tag | None:
        ...

    @abstractmethod
    async def get_most_used_tags(self, num: int) -> list[Tag]:
        """Tags ordered by published reference count, descending."""
        ...


class TagArticleRepository(ABC):
    """Port for tag ↔ article relation rows."""

    @abstractmethod
    async def get_by_article_id(self, article_id: str) -> list[TagArticle]:
        """All relations of an article; empty list if none."""
        ...

    @abstractmethod
    async def get_by_tag_id(
        self, tag_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[TagArticle]:
        """One page of relations for a tag, with the total page count computed."""
        ...
