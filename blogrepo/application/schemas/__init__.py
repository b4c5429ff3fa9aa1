from .article import (
    ArticleCreate,
    ArticleUpdate,
    ArticleResponse,
    ArticleNeighborResponse,
    ArticlePageResponse,
)

__all__ = [
    "ArticleCreate",
    "ArticleUpdate",
    "ArticleResponse",
    "ArticleNeighborResponse",
    "ArticlePageResponse",
]
