"""Tests for HTTP endpoints."""

import pytest
from httpx import AsyncClient, ASGITransport

from lib.database.memory import InMemoryLinkStore
from lib.service import LinkShortenerService
from web_app import create_app


class FailingStore(InMemoryLinkStore):
    """Store whose writes always fail."""

    async def save(self, links):
        raise OSError("disk full")


@pytest.mark.asyncio
class TestShortenEndpoint:
    """Test POST /shorten."""

    async def test_shorten_url(self, client, sample_urls):
        response = await client.post("/shorten", json={"url": sample_urls[0]})

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("application/json")
        data = response.json()
        assert data["success"] is True
        assert len(data["shortCode"]) == 8
        assert set(data) == {"success", "shortCode"}

    async def test_shorten_with_custom_code(self, client, service, sample_urls):
        response = await client.post(
            "/shorten",
            json={"url": sample_urls[0], "shortCode": "test123"}
        )

        assert response.status_code == 200
        assert response.json() == {"success": True, "shortCode": "test123"}
        assert await service.list_links() == {"test123": sample_urls[0]}

    async def test_shorten_missing_url(self, client):
        response = await client.post("/shorten", json={})

        assert response.status_code == 400
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "URL is required"

    async def test_shorten_empty_url(self, client):
        response = await client.post("/shorten", json={"url": ""})

        assert response.status_code == 400
        assert response.text == "URL is required"

    async def test_shorten_duplicate_code(self, config):
        store = InMemoryLinkStore({"abc": "http://x"})
        service = LinkShortenerService(store=store)
        app = create_app(store_instance=store, service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.post("/shorten", json={"url": "http://y", "shortCode": "abc"})

        assert response.status_code == 400
        assert response.text == "Short Code already exists"
        assert await store.load() == {"abc": "http://x"}
        assert store.save_count == 0

    @pytest.mark.parametrize("body", [b"{not json", b""])
    async def test_shorten_unparseable_body(self, client, body):
        response = await client.post(
            "/shorten",
            content=body,
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Internal Server Error"

    @pytest.mark.parametrize("body", [b"[]", b"null", b'"https://example.com"'])
    async def test_shorten_body_not_an_object(self, client, body):
        response = await client.post(
            "/shorten",
            content=body,
            headers={"content-type": "application/json"},
        )

        assert response.status_code == 400
        assert response.text.startswith("Invalid request body")

    async def test_shorten_non_string_fields(self, client):
        response = await client.post("/shorten", json={"url": 42})
        assert response.status_code == 400

        response = await client.post("/shorten", json={"url": "https://example.com", "shortCode": 7})
        assert response.status_code == 400

    async def test_shorten_ignores_content_type(self, client):
        response = await client.post(
            "/shorten",
            content=b'{"url": "https://example.com/plain"}',
            headers={"content-type": "text/plain"},
        )

        assert response.status_code == 200

    async def test_shorten_storage_failure(self, config):
        store = FailingStore()
        service = LinkShortenerService(store=store)
        app = create_app(store_instance=store, service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            response = await client.post("/shorten", json={"url": "https://example.com"})

        assert response.status_code == 500
        assert response.text == "Internal Server Error"


@pytest.mark.asyncio
class TestLookupEndpoints:
    """Test GET /links and GET /{code}."""

    async def test_list_links_empty(self, client):
        response = await client.get("/links")

        assert response.status_code == 200
        assert response.headers["content-type"] == "application/json"
        assert response.json() == {}

    async def test_list_links_after_shorten(self, client, sample_urls):
        await client.post("/shorten", json={"url": sample_urls[0], "shortCode": "one"})
        await client.post("/shorten", json={"url": sample_urls[1], "shortCode": "two"})

        response = await client.get("/links")

        assert response.json() == {"one": sample_urls[0], "two": sample_urls[1]}

    async def test_list_links_idempotent(self, client, sample_urls):
        await client.post("/shorten", json={"url": sample_urls[0]})

        first = await client.get("/links")
        second = await client.get("/links")

        assert first.content == second.content

    async def test_redirect(self, client, sample_urls):
        create = await client.post("/shorten", json={"url": sample_urls[0]})
        short_code = create.json()["shortCode"]

        response = await client.get(f"/{short_code}", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == sample_urls[0]

    async def test_redirect_code_with_slash(self, client, sample_urls):
        await client.post("/shorten", json={"url": sample_urls[0], "shortCode": "a/b"})

        response = await client.get("/a/b", follow_redirects=False)

        assert response.status_code == 302
        assert response.headers["location"] == sample_urls[0]

    async def test_unknown_code(self, client):
        response = await client.get("/doesnotexist", follow_redirects=False)

        assert response.status_code == 404
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Shortened URL not found"


@pytest.mark.asyncio
class TestStaticAndFallback:
    """Test static files and unmatched requests."""

    async def test_homepage(self, client):
        response = await client.get("/")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "Link Shortener" in response.text

    async def test_stylesheet(self, client):
        response = await client.get("/style.css")

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/css")

    async def test_missing_static_file(self, client, public_dir):
        (public_dir / "style.css").unlink()

        response = await client.get("/style.css")

        assert response.status_code == 404
        assert response.text == "404 Page not Found"

    @pytest.mark.parametrize("method,path", [
        ("POST", "/links"),
        ("DELETE", "/shorten"),
        ("PUT", "/abc"),
        ("POST", "/"),
    ])
    async def test_method_not_allowed(self, client, method, path):
        response = await client.request(method, path)

        assert response.status_code == 405
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "Method Not Allowed"

    async def test_docs_paths_are_short_codes(self, client, sample_urls):
        for code in ("api/docs", "api/redoc", "api/openapi.json", "docs", "openapi.json"):
            created = await client.post("/shorten", json={"url": sample_urls[0], "shortCode": code})
            assert created.status_code == 200

            response = await client.get(f"/{code}", follow_redirects=False)

            assert response.status_code == 302
            assert response.headers["location"] == sample_urls[0]

    async def test_non_string_stored_value_is_not_found(self, config):
        store = InMemoryLinkStore({"x": 1, "y": None})
        service = LinkShortenerService(store=store)
        app = create_app(store_instance=store, service_instance=service, config=config)

        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as client:
            for code in ("x", "y"):
                response = await client.get(f"/{code}", follow_redirects=False)

                assert response.status_code == 404
                assert response.text == "Shortened URL not found"

    async def test_cross_origin_requests_allowed(self, client):
        response = await client.get("/links", headers={"origin": "http://elsewhere.example"})

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.parametrize("method,path", [("DELETE", "/no/such/path"), ("PATCH", "/")])
    async def test_unmatched_methods_hit_the_lookup_path(self, client, method, path):
        """The GET lookup matches every path, so other methods get 405."""
        response = await client.request(method, path)

        assert response.status_code == 405
        assert "GET" in response.headers["allow"]
