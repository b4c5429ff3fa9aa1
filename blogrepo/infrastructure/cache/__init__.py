from .article_cache import ArticleCache

__all__ = ["ArticleCache"]
