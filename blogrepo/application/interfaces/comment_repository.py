"""Abstract repository interface (port) for comments."""

from abc import ABC, abstractmethod

from blogrepo.domain.entities import Comment, QueryResult


class CommentRepository(ABC):
    """Port for comment persistence."""

    @abstractmethod
    async def get_by_article_id(
        self, article_id: str, current_page_num: int, page_size: int
    ) -> QueryResult[Comment]:
        """One page of an article's comments, oldest first."""
        ...

    @abstractmethod
    async def get_recent_comments(self, num: int) -> list[Comment]:
        """The newest comments across all articles."""
        ...
