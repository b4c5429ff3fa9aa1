"""SQLAlchemy declarative base for the blog tables."""

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    """Registry for articles, tags, tag_article and comments."""
