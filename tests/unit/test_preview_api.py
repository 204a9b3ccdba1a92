"""
Tests for the Preview API.

Fragments served by the preview routes match what the renderers emit.
"""

from __future__ import annotations

import json
import re

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from siteviews.adapters.rules_adapter import SiteRulesAdapter
from siteviews.api.deps import get_rules
from siteviews.api.routes.preview import router, wrap_page

# --- Test Client Setup ---


@pytest.fixture
def client(rules_adapter: SiteRulesAdapter) -> TestClient:
    """Test client with rules from the project root."""
    app = FastAPI()
    app.include_router(router, prefix="/api/preview")
    app.dependency_overrides[get_rules] = lambda: rules_adapter

    return TestClient(app)


@pytest.fixture
def post_payload() -> dict:
    return {
        "author": {
            "id": "https://pony.social/users/cadey",
            "name": "Cadey :verified:",
            "handle": "cadey",
            "url": "https://pony.social/@cadey",
            "avatar_url": "https://pony.social/avatars/cadey.png",
        },
        "post": {
            "id": "123",
            "body_html": "<p>hi</p>",
            "published": "2023-03-14T09:26:00Z",
            "attachments": [{"media_type": "application/pdf", "url": "https://x/doc.pdf"}],
        },
    }


class TestPostPreview:
    """POST /api/preview/post"""

    def test_preview_post(self, client: TestClient, post_payload: dict) -> None:
        response = client.post("/api/preview/post", json=post_payload)

        assert response.status_code == 200
        data = response.json()
        assert data["verified"] is True
        assert data["attachment_count"] == 1
        assert "@cadey" in data["html"]
        assert "M03 14 2023 09:26 (UTC)" in data["html"]
        assert '<a href="123">Link</a>' in data["html"]
        assert "<!DOCTYPE html>" not in data["html"]

    def test_preview_post_wrapped(self, client: TestClient, post_payload: dict) -> None:
        post_payload["wrap_in_page"] = True
        response = client.post("/api/preview/post", json=post_payload)

        html = response.json()["html"]
        assert html.startswith("<!DOCTYPE html>")
        assert "<title>Post by @cadey</title>" in html

    def test_preview_post_invalid(self, client: TestClient, post_payload: dict) -> None:
        del post_payload["post"]["published"]
        response = client.post("/api/preview/post", json=post_payload)
        assert response.status_code == 422


class TestMountPreview:
    """POST /api/preview/mount"""

    def test_preview_mount(self, client: TestClient) -> None:
        props = {"path": "talks/intro.mp4", "evil": "</script>"}
        response = client.post(
            "/api/preview/mount", json={"widget_name": "Video", "props": props}
        )

        assert response.status_code == 200
        data = response.json()
        assert re.fullmatch(r"[0-9a-f]{32}", data["mount_id"])
        assert data["module_url"] == f"/static/xeact/Video.js?cacheBuster={data['mount_id']}"
        assert f'<div id="{data["mount_id"]}">' in data["html"]

        start = data["html"].index("const props = ") + len("const props = ")
        embedded = data["html"][start : data["html"].index("\n", start)].rstrip(";")
        assert json.loads(embedded) == props

    def test_preview_mount_without_props(self, client: TestClient) -> None:
        response = client.post("/api/preview/mount", json={"widget_name": "NoFunAllowed"})
        assert response.status_code == 200
        assert "const props = null;" in response.json()["html"]

    def test_preview_mount_empty_name(self, client: TestClient) -> None:
        response = client.post("/api/preview/mount", json={"widget_name": ""})
        assert response.status_code == 422
        assert "Widget name is required" in response.json()["detail"]


class TestConversationPreview:
    """GET /api/preview/conversation/{name}/{mood}"""

    def test_preview_conversation(self, client: TestClient) -> None:
        response = client.get(
            "/api/preview/conversation/Aoi/wut", params={"message": "<is this safe?>"}
        )

        assert response.status_code == 200
        assert response.headers["content-type"].startswith("text/html")
        assert "<b>Aoi</b>" in response.text
        assert "&lt;is this safe?&gt;" in response.text


class TestWrapPage:
    """Minimal document wrapper."""

    def test_title_escaped(self) -> None:
        html = wrap_page("<x>", "<p>body</p>")
        assert "<title>&lt;x&gt;</title>" in html
        assert "<p>body</p>" in html


class TestApp:
    """Application wiring."""

    def test_health(self) -> None:
        from siteviews.api.main import app

        response = TestClient(app).get("/health")
        assert response.status_code == 200
        assert response.json() == {"status": "ok", "service": "preview"}

    def test_preview_routes_mounted(self, rules_adapter: SiteRulesAdapter) -> None:
        from siteviews.api.main import app

        client = TestClient(app)
        app.dependency_overrides[get_rules] = lambda: rules_adapter
        try:
            response = client.post("/api/preview/mount", json={"widget_name": "Video"})
            assert response.status_code == 200
            assert client.get("/api/preview/conversation/Aoi/wut").status_code == 200
        finally:
            app.dependency_overrides.clear()
