from .article_repository import CachedArticleRepository
from .comment_repository import StoreCommentRepository
from .tag_repository import StoreTagArticleRepository, StoreTagRepository

__all__ = [
    "CachedArticleRepository",
    "StoreCommentRepository",
    "StoreTagArticleRepository",
    "StoreTagRepository",
]
