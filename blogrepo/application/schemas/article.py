"""Pydantic DTOs (Data Transfer Objects) for the Article feature."""

from pydantic import BaseModel, Field


class ArticleCreate(BaseModel):
    """Schema for creating a new article."""

    title: str = Field(..., min_length=1, max_length=255, examples=["Getting Started"])
    permalink: str = Field(..., min_length=1, max_length=255, examples=["/articles/getting-started"])
    content: str = Field("", examples=["This is a blog article."])
    abstract: str = ""
    author_id: str = ""
    is_published: bool = False
    put_top: bool = False


class ArticleUpdate(BaseModel):
    """Schema for updating an existing article — all fields optional."""

    title: str | None = Field(None, min_length=1, max_length=255)
    permalink: str | None = Field(None, min_length=1, max_length=255)
    content: str | None = None
    abstract: str | None = None
    is_published: bool | None = None
    put_top: bool | None = None


class ArticleResponse(BaseModel):
    """Schema returned to the client."""

    id: str
    title: str
    permalink: str
    abstract: str
    content: str
    author_id: str
    is_published: bool
    put_top: bool
    created: int
    updated: int
    view_count: int
    comment_count: int

    model_config = {"from_attributes": True}


class ArticleNeighborResponse(BaseModel):
    """Previous/next navigation entry."""

    title: str
    permalink: str
    abstract: str

    model_config = {"from_attributes": True}


class ArticlePageResponse(BaseModel):
    """One page of an author's published articles."""

    items: list[ArticleResponse]
    page_count: int
