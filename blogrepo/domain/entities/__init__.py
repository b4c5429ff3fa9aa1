from .article import Article, ArticleNeighbor, now_millis
from .comment import Comment
from .query import (
    CompositeFilter,
    CompositeOperator,
    FilterOperator,
    Predicate,
    Projection,
    PropertyFilter,
    Query,
    QueryResult,
    Sort,
    SortDirection,
    and_,
    or_,
)
from .tag import Tag, TagArticle

__all__ = [
    "Article",
    "ArticleNeighbor",
    "now_millis",
    "Comment",
    "CompositeFilter",
    "CompositeOperator",
    "FilterOperator",
    "Predicate",
    "Projection",
    "PropertyFilter",
    "Query",
    "QueryResult",
    "Sort",
    "SortDirection",
    "and_",
    "or_",
    "Tag",
    "TagArticle",
]
