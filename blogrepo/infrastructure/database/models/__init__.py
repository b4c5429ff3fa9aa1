from .article import ArticleModel
from .comment import CommentModel
from .tag import TagArticleModel, TagModel

__all__ = [
    "ArticleModel",
    "CommentModel",
    "TagArticleModel",
    "TagModel",
]
