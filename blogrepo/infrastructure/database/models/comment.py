"""SQLAlchemy ORM model for the Comment entity."""

from sqlalchemy import BigInteger, ForeignKey, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from blogrepo.infrastructure.database.base import Base


class CommentModel(Base):
    """ORM model — maps to the 'comments' table."""

    __tablename__ = "comments"

    id: Mapped[str] = mapped_column(String(36), primary_key=True)
    article_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("articles.id", ondelete="CASCADE"), nullable=False, index=True
    )
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    email: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    url: Mapped[str] = mapped_column(String(255), nullable=False, default="")
    content: Mapped[str] = mapped_column(Text, nullable=False)
    original_comment_id: Mapped[str | None] = mapped_column(String(36), nullable=True)
    created: Mapped[int] = mapped_column(BigInteger, nullable=False, index=True)
