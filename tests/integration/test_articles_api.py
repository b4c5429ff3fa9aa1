"""HTTP tests for the article endpoints, wired to in-memory fakes."""

from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from blogrepo.infrastructure.cache import ArticleCache
from blogrepo.infrastructure.database.repositories import CachedArticleRepository
from blogrepo.infrastructure.dependencies import get_article_repository
from blogrepo.main import app
from tests.fakes import FailingStoreAdapter, make_article


@pytest.fixture
def store() -> FailingStoreAdapter:
    return FailingStoreAdapter([make_article(1), make_article(2), make_article(3, published=False)])


@pytest_asyncio.fixture
async def client(store) -> AsyncIterator[AsyncClient]:
    repository = CachedArticleRepository(store, ArticleCache())
    app.dependency_overrides[get_article_repository] = lambda: repository
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()


@pytest.mark.asyncio
async def test_get_article_by_id(client):
    response = await client.get("/api/v1/articles/article-1")
    assert response.status_code == 200
    assert response.json()["permalink"] == "/articles/1"


@pytest.mark.asyncio
async def test_missing_article_is_404(client):
    response = await client.get("/api/v1/articles/article-404")
    assert response.status_code == 404


@pytest.mark.asyncio
async def test_get_by_permalink(client):
    response = await client.get("/api/v1/articles/by-permalink", params={"permalink": "/articles/2"})
    assert response.status_code == 200
    assert response.json()["id"] == "article-2"


@pytest.mark.asyncio
async def test_recent_and_random_listings(client):
    recent = await client.get("/api/v1/articles/recent", params={"limit": 5})
    random_sample = await client.get("/api/v1/articles/random", params={"limit": 5})

    assert [a["id"] for a in recent.json()] == ["article-2", "article-1"]
    assert sorted(a["id"] for a in random_sample.json()) == ["article-1", "article-2"]


@pytest.mark.asyncio
async def test_list_by_author(client):
    response = await client.get("/api/v1/articles/by-author/author-1")
    paged = await client.get("/api/v1/articles/by-author/author-1", params={"page": 2, "page_size": 1})

    assert response.status_code == 200
    assert [a["id"] for a in response.json()["items"]] == ["article-2", "article-1"]
    assert [a["id"] for a in paged.json()["items"]] == ["article-1"]


@pytest.mark.asyncio
async def test_list_by_author_rejects_oversized_page(client):
    response = await client.get("/api/v1/articles/by-author/author-1", params={"page_size": 500})
    assert response.status_code == 422


@pytest.mark.asyncio
async def test_previous_and_next(client):
    previous = await client.get("/api/v1/articles/article-2/previous")
    missing_next = await client.get("/api/v1/articles/article-2/next")

    assert previous.status_code == 200
    assert previous.json() == {"title": "Title 1", "permalink": "/articles/1", "abstract": "Abstract 1"}
    assert missing_next.status_code == 404


@pytest.mark.asyncio
async def test_create_update_delete_roundtrip(client):
    created = await client.post(
        "/api/v1/articles",
        json={"title": "Fresh", "permalink": "/fresh", "is_published": True},
    )
    assert created.status_code == 201
    article_id = created.json()["id"]

    updated = await client.put(f"/api/v1/articles/{article_id}", json={"permalink": "/fresher"})
    assert updated.status_code == 200
    old = await client.get("/api/v1/articles/by-permalink", params={"permalink": "/fresh"})
    assert old.status_code == 404

    deleted = await client.delete(f"/api/v1/articles/{article_id}")
    assert deleted.status_code == 204
    assert (await client.get(f"/api/v1/articles/{article_id}")).status_code == 404


@pytest.mark.asyncio
async def test_store_failure_is_503(client, store):
    store.fail_on.add("get")
    response = await client.get("/api/v1/articles/article-1")
    assert response.status_code == 503
    assert response.json() == {"detail": "Content store unavailable"}
