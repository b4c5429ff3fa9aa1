"""Domain entity for reader comments on an article."""

from dataclasses import dataclass

from .article import now_millis


@dataclass
class Comment:
    """A comment attached to an article.

    ``original_comment_id`` points at the comment being replied to, if any.
    """

    article_id: str
    name: str
    content: str
    email: str = ""
    url: str = ""
    id: str | None = None
    original_comment_id: str | None = None
    created: int = 0

    def __post_init__(self) -> None:
        if not self.created:
            self.created = now_millis()
