"""
Integration tests for the public content API.

Seeds a small data set, then reads it back over HTTP. Access depends on
the permissions granted to the public role.

Run with: pytest tests/test_api_content.py -v
"""

from uuid import uuid4

import pytest
from httpx import ASGITransport, AsyncClient

from api.main import app
from api.routes.content import get_session_factory
from database.seeds.run_all_seeds import import_seed_data
from shared.config import get_settings


@pytest.fixture
async def client(session_factory):
    """Async test client reading from the test database."""
    app.dependency_overrides[get_session_factory] = lambda: session_factory

    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as ac:
        yield ac

    app.dependency_overrides.clear()


@pytest.fixture
async def seeded(session_factory, default_roles, media_resolver, minimal_seed):
    """Import the minimal seed with public permissions granted."""
    await import_seed_data(minimal_seed, session_factory, media_resolver)


@pytest.mark.integration
class TestPublicContentAPI:

    async def test_list_tags(self, client, seeded):
        response = await client.get("/api/tags")

        assert response.status_code == 200
        body = response.json()
        assert body["total"] == 2
        assert [t["slug"] for t in body["data"]] == ["python", "web"]

    async def test_get_tag(self, client, seeded):
        tags = (await client.get("/api/tags")).json()["data"]

        response = await client.get(f"/api/tags/{tags[0]['id']}")

        assert response.status_code == 200
        assert response.json()["name"] == "Python"

    async def test_list_authors(self, client, seeded):
        response = await client.get("/api/authors")

        assert response.status_code == 200
        author = response.json()["data"][0]
        assert author["name"] == "Ada"
        assert author["avatar"] is None

    async def test_blog_post_relations(self, client, seeded):
        tags = (await client.get("/api/tags")).json()["data"]
        authors = (await client.get("/api/authors")).json()["data"]

        response = await client.get("/api/blog-posts")

        assert response.status_code == 200
        post = response.json()["data"][0]
        assert post["slug"] == "hello"
        assert post["author_id"] == authors[0]["id"]
        assert post["tag_ids"] == [tags[0]["id"]]
        assert post["youtube_video_id"] == "abc123"

    async def test_get_blog_post(self, client, seeded):
        posts = (await client.get("/api/blog-posts")).json()["data"]

        response = await client.get(f"/api/blog-posts/{posts[0]['id']}")

        assert response.status_code == 200
        assert response.json()["title_fr"] == "Bonjour"

    async def test_unknown_id_returns_404(self, client, seeded):
        response = await client.get(f"/api/authors/{uuid4()}")

        assert response.status_code == 404
        body = response.json()
        assert body["success"] is False
        assert body["error_category"] == "not_found_error"
        assert body["log_ref"].startswith("err_")

    async def test_malformed_id_returns_422(self, client, seeded):
        response = await client.get("/api/tags/not-a-uuid")

        assert response.status_code == 422
        assert response.json()["error_code"] == "VALIDATION_ERROR"

    async def test_forbidden_without_permissions(
        self, client, session_factory, media_resolver, minimal_seed
    ):
        """No public role at import time means no permissions were granted."""
        await import_seed_data(minimal_seed, session_factory, media_resolver)

        for path in ("/api/tags", "/api/authors", "/api/blog-posts"):
            response = await client.get(path)
            assert response.status_code == 403
            assert response.json()["error_category"] == "permission_error"


@pytest.mark.integration
class TestMediaServing:

    @pytest.fixture(autouse=True)
    def serve_from_media_dir(self, media_dir, monkeypatch):
        """Point the media route at the directory the upload service writes to."""
        media_dir.mkdir(parents=True, exist_ok=True)
        monkeypatch.setattr(get_settings(), "MEDIA_UPLOAD_DIR", str(media_dir))

    async def test_serves_uploaded_file(self, client, upload_service, tmp_path):
        source = tmp_path / "notes.txt"
        source.write_bytes(b"seeded media")

        uploaded = await upload_service.upload(
            {
                "file_path": source,
                "original_filename": "notes.txt",
                "size": source.stat().st_size,
                "mime_type": "text/plain",
            },
            {"name": "notes", "alternative_text": "notes", "caption": "notes"},
        )

        response = await client.get(uploaded[0].url)

        assert response.status_code == 200
        assert response.content == b"seeded media"

    async def test_traversal_returns_400(self, client):
        response = await client.get("/uploads/%2E%2E")

        assert response.status_code == 400
        assert response.json()["error_code"] == "HTTP_400"

    async def test_missing_file_returns_404(self, client):
        response = await client.get("/uploads/does-not-exist.png")

        assert response.status_code == 404
