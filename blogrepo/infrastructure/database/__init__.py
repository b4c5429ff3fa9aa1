from .base import Base
from .session import engine, async_session_factory, build_session_factory, get_async_url
from .store_adapter import SQLAlchemyStoreAdapter
from .models import ArticleModel, CommentModel, TagArticleModel, TagModel

__all__ = [
    "Base",
    "engine",
    "async_session_factory",
    "build_session_factory",
    "get_async_url",
    "SQLAlchemyStoreAdapter",
    "ArticleModel",
    "CommentModel",
    "TagArticleModel",
    "TagModel",
]
