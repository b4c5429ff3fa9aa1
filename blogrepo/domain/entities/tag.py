"""Domain entities for tags and the tag ↔ article relation."""

from dataclasses import dataclass


@dataclass
class Tag:
    """A tag with reference counters maintained by the article write path."""

    title: str
    id: str | None = None
    reference_count: int = 0
    published_ref_count: int = 0


@dataclass
class TagArticle:
    """Many-to-many relation row between a tag and an article."""

    tag_id: str
    article_id: str
    id: str | None = None
