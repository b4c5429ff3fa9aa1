"""SQLAlchemy ORM models for tags and tag-article relations."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from blogrepo.infrastructure.database.base import Base


class TagModel(Base):
    """ORM model — maps to the 'tags' table."""

    __tablename__ = "tags"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    reference_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    published_ref_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)


class TagArticleModel(Base):
    """ORM model — maps to the 'tag_article' relation table."""

    __tablename__ = "tag_article"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    tag_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("tags.id", ondelete="CASCADE"), nullable=False, index=True
    )
    article_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
