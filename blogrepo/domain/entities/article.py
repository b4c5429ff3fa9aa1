"""Domain entities — pure Python business objects, no framework dependencies."""

import time
from dataclasses import dataclass


def now_millis() -> int:
    """Current wall-clock time as epoch milliseconds."""
    return int(time.time() * 1000)


@dataclass
class Article:
    """Core domain entity representing a blog article.

    ``id`` and ``permalink`` are the two cache keys. ``random_double`` is the
    sampling coordinate in [0, 1), assigned once at creation and only read by
    the random sampling query.
    """

    title: str
    permalink: str
    content: str = ""
    abstract: str = ""
    author_id: str = ""
    id: str | None = None
    is_published: bool = False
    put_top: bool = False
    created: int = 0
    updated: int = 0
    random_double: float = 0.0
    view_count: int = 0
    comment_count: int = 0

    def touch(self) -> None:
        """Refresh the updated timestamp, never moving it backwards."""
        self.updated = max(now_millis(), self.updated + 1)


@dataclass(frozen=True)
class ArticleNeighbor:
    """Lightweight projection returned for previous/next navigation."""

    title: str
    permalink: str
    abstract: str

    FIELDS = ("title", "permalink", "abstract")
