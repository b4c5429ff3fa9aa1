"""Article endpoints — CRUD plus the listing and navigation queries."""

from fastapi import APIRouter, Depends, HTTPException, Query, status

from blogrepo.application.schemas import (
    ArticleCreate,
    ArticleNeighborResponse,
    ArticlePageResponse,
    ArticleResponse,
    ArticleUpdate,
)
from blogrepo.application.services import ArticleService
from blogrepo.domain.exceptions import EntityNotFoundError
from blogrepo.infrastructure.dependencies import get_article_service

router = APIRouter(prefix="/articles", tags=["Articles"])


def _to_responses(articles) -> list[ArticleResponse]:
    return [ArticleResponse.model_validate(a, from_attributes=True) for a in articles]


@router.get("/recent", response_model=list[ArticleResponse])
async def list_recent_articles(
    limit: int = Query(10, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """Most recently updated published articles."""
    return _to_responses(await service.list_recent(limit))


@router.get("/most-commented", response_model=list[ArticleResponse])
async def list_most_commented_articles(
    limit: int = Query(10, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    return _to_responses(await service.list_most_commented(limit))


@router.get("/most-viewed", response_model=list[ArticleResponse])
async def list_most_viewed_articles(
    limit: int = Query(10, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    return _to_responses(await service.list_most_viewed(limit))


@router.get("/random", response_model=list[ArticleResponse])
async def list_random_articles(
    limit: int = Query(10, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> list[ArticleResponse]:
    """A random sample of published articles."""
    return _to_responses(await service.list_random(limit))


@router.get("/by-author/{author_id}", response_model=ArticlePageResponse)
async def list_articles_by_author(
    author_id: str,
    page: int = Query(1, ge=1),
    page_size: int | None = Query(None, ge=1, le=100),
    service: ArticleService = Depends(get_article_service),
) -> ArticlePageResponse:
    """Published articles by one author, most recently updated first."""
    result = await service.list_by_author(author_id, page, page_size)
    return ArticlePageResponse(items=_to_responses(result.rows), page_count=result.page_count)


@router.get("/by-permalink", response_model=ArticleResponse)
async def get_article_by_permalink(
    permalink: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    try:
        article = await service.get_article_by_permalink(permalink)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}", response_model=ArticleResponse)
async def get_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Retrieve a single article by ID."""
    try:
        article = await service.get_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.get("/{article_id}/previous", response_model=ArticleNeighborResponse)
async def get_previous_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleNeighborResponse:
    try:
        neighbor = await service.get_previous(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleNeighborResponse.model_validate(neighbor, from_attributes=True)


@router.get("/{article_id}/next", response_model=ArticleNeighborResponse)
async def get_next_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> ArticleNeighborResponse:
    try:
        neighbor = await service.get_next(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleNeighborResponse.model_validate(neighbor, from_attributes=True)


@router.post("", response_model=ArticleResponse, status_code=status.HTTP_201_CREATED)
async def create_article(
    data: ArticleCreate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Create a new article."""
    article = await service.create_article(data)
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.put("/{article_id}", response_model=ArticleResponse)
async def update_article(
    article_id: str,
    data: ArticleUpdate,
    service: ArticleService = Depends(get_article_service),
) -> ArticleResponse:
    """Update an existing article."""
    try:
        article = await service.update_article(article_id, data)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    return ArticleResponse.model_validate(article, from_attributes=True)


@router.delete("/{article_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_article(
    article_id: str,
    service: ArticleService = Depends(get_article_service),
) -> None:
    """Delete an article by ID."""
    try:
        await service.delete_article(article_id)
    except EntityNotFoundError as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
