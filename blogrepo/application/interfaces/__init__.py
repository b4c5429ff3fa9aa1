from .article_repository import ArticleRepository
from .comment_repository import CommentRepository
from .store_adapter import StoreAdapter
from .tag_repository import TagArticleRepository, TagRepository

__all__ = [
    "ArticleRepository",
    "CommentRepository",
    "StoreAdapter",
    "TagArticleRepository",
    "TagRepository",
]
