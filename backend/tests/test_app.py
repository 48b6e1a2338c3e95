"""
Notes App Backend — Application Wiring Tests
==============================================

What:  Pieces around the API: rate limiting, front-end hosting, lifespan
       and settings validation.
"""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import ValidationError as SettingsValidationError

from app.config import Settings, settings
from app.main import create_app
from app.middleware.rate_limit import RateLimitMiddleware
from app.store import WELCOME_NOTE_TITLE, NoteStore


def client_for(app):
    return AsyncClient(transport=ASGITransport(app=app), base_url="http://test")


class TestRateLimit:

    def build_app(self):
        app = FastAPI()
        app.add_middleware(RateLimitMiddleware, max_requests=2, window=60)

        @app.get("/ping")
        async def ping():
            return {"ok": True}

        @app.get("/health")
        async def health():
            return {"status": "healthy"}

        return app

    @pytest.mark.asyncio
    async def test_requests_over_limit_get_429(self):
        async with client_for(self.build_app()) as client:
            assert (await client.get("/ping")).status_code == 200
            assert (await client.get("/ping")).status_code == 200

            response = await client.get("/ping")

        assert response.status_code == 429
        assert response.json()["error"] == "rate_limit_exceeded"
        assert 1 <= int(response.headers["Retry-After"]) <= 61

    @pytest.mark.asyncio
    async def test_rejection_carries_request_id_and_cors_headers(self, monkeypatch):
        monkeypatch.setattr(settings, "rate_limit_enabled", True)
        monkeypatch.setattr(settings, "rate_limit_requests", 10)
        monkeypatch.setattr(settings, "cors_origins", "http://ui.test")
        headers = {"Origin": "http://ui.test", "X-Request-ID": "rid1"}

        async with client_for(create_app()) as client:
            for _ in range(10):
                assert (await client.get("/api/notes", headers=headers)).status_code == 200
            response = await client.get("/api/notes", headers=headers)

        assert response.status_code == 429
        assert response.json()["request_id"] == "rid1"
        assert response.headers["X-Request-ID"] == "rid1"
        assert response.headers["Access-Control-Allow-Origin"] == "http://ui.test"
        assert "Retry-After" in response.headers

    @pytest.mark.asyncio
    async def test_health_is_never_limited(self):
        async with client_for(self.build_app()) as client:
            for _ in range(5):
                assert (await client.get("/health")).status_code == 200


class TestFrontendHosting:

    @pytest.fixture
    def build_dir(self, tmp_path, monkeypatch):
        (tmp_path / "index.html").write_text("<html>notes</html>")
        (tmp_path / "static").mkdir()
        (tmp_path / "static" / "main.js").write_text("console.log('notes')")
        monkeypatch.setattr(settings, "static_dir", str(tmp_path))
        return tmp_path

    @pytest.mark.asyncio
    async def test_serves_index_assets_and_client_routes(self, build_dir):
        async with client_for(create_app()) as client:
            root = await client.get("/")
            asset = await client.get("/static/main.js")
            client_route = await client.get("/notes/123/edit")
            api = await client.get("/api/notes")

        assert root.status_code == 200
        assert root.text == "<html>notes</html>"
        assert asset.text == "console.log('notes')"
        assert client_route.text == "<html>notes</html>"
        assert api.json() == []

    @pytest.mark.asyncio
    async def test_unknown_api_path_stays_json_404(self, build_dir):
        async with client_for(create_app()) as client:
            response = await client.get("/api/unknown")

        assert response.status_code == 404
        assert response.json()["error"] == "not_found"

    @pytest.mark.asyncio
    async def test_api_trailing_slash_redirects_with_build(self, build_dir):
        async with client_for(create_app()) as client:
            response = await client.get("/api/notes/?x=1")

        assert response.status_code == 307
        assert response.headers["location"] == "http://test/api/notes?x=1"

    @pytest.mark.asyncio
    async def test_api_trailing_slash_redirects_without_build(self, monkeypatch):
        monkeypatch.setattr(settings, "static_dir", None)

        async with client_for(create_app()) as client:
            response = await client.get("/api/notes/")

        assert response.status_code == 307
        assert response.headers["location"].endswith("/api/notes")

    @pytest.mark.asyncio
    async def test_missing_build_dir_serves_api_only(self, tmp_path, monkeypatch):
        monkeypatch.setattr(settings, "static_dir", str(tmp_path / "absent"))

        async with client_for(create_app()) as client:
            response = await client.get("/")

        assert response.status_code == 404


class TestLifespan:

    @pytest.mark.asyncio
    async def test_welcome_note_seeded_and_cleared(self, monkeypatch):
        monkeypatch.setattr(settings, "seed_welcome_note", True)
        store = NoteStore()
        app = create_app(store=store)

        async with app.router.lifespan_context(app):
            notes = store.list_notes()
            assert [n.title for n in notes] == [WELCOME_NOTE_TITLE]

        assert store.list_notes() == []

    @pytest.mark.asyncio
    async def test_no_seed_when_disabled(self, store, monkeypatch):
        monkeypatch.setattr(settings, "seed_welcome_note", False)
        app = create_app(store=store)

        async with app.router.lifespan_context(app):
            assert store.list_notes() == []


class TestSettings:

    def test_log_level_is_normalised(self):
        assert Settings(log_level="debug").log_level == "DEBUG"

    def test_invalid_log_level_rejected(self):
        with pytest.raises(SettingsValidationError):
            Settings(log_level="chatty")

    def test_cors_origins_list(self):
        configured = Settings(cors_origins="http://a.test, http://b.test,")
        assert configured.cors_origins_list == ["http://a.test", "http://b.test"]
