"""SQLAlchemy ORM model for the Article entity."""

from sqlalchemy import BigInteger, Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blogrepo.infrastructure.database.base import Base


class ArticleModel(Base):
    """ORM model — maps to the 'articles' table."""

    __tablename__ = "articles"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    permalink: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    abstract: Mapped[str] = mapped_column(Text, nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False, default="")
    author_id: Mapped[str] = mapped_column(String(36), nullable=False, default="", index=True)
    is_published: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    put_top: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    updated: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
    random_double: Mapped[float] = mapped_column(Float, nullable=False, index=True)
    view_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    comment_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<ArticleModel(id={self.id}, permalink='{self.permalink}')>"
