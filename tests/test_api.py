"""Tests for the stories HTTP API (momandme.main)."""

from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient

from momandme.errors import StoreUnavailableError
from momandme.main import app, get_story_service
from momandme.persistence import StoryStore
from momandme.services import StoryService

KIND_FOX = {
    "title": "The Kind Fox",
    "content": "...",
    "ageGroup": {"min": 4, "max": 6},
    "durationMinutes": 5,
    "tags": ["bedtime"],
    "moral": "Be kind",
}


@pytest.fixture
def client(service):
    app.dependency_overrides[get_story_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    store = MagicMock(spec=StoryStore)
    store.save.side_effect = StoreUnavailableError("Could not save story")
    store.find_all.side_effect = StoreUnavailableError("Could not load stories")
    app.dependency_overrides[get_story_service] = lambda: StoryService(store)
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestCreateStory:
    def test_kind_fox(self, client):
        resp = client.post("/api/stories", json=KIND_FOX)
        assert resp.status_code == 200
        body = resp.json()
        assert body["id"]
        assert body["language"] == "en"
        assert body["status"] == "published"
        assert body["createdBy"] == "system"
        assert body["source"] == {"type": "static", "referenceId": None}
        assert body["createdAt"] == body["updatedAt"]
        assert body["ageGroup"] == {"min": 4, "max": 6}
        assert body["tags"] == ["bedtime"]

    def test_source_and_author_forced(self, client):
        payload = {**KIND_FOX, "source": {"type": "user", "referenceId": "42"}, "createdBy": "mom"}
        body = client.post("/api/stories", json=payload).json()
        assert body["source"] == {"type": "static", "referenceId": None}
        assert body["createdBy"] == "system"

    def test_empty_title_is_400(self, client):
        resp = client.post(
            "/api/stories",
            json={"title": "", "content": "x", "ageGroup": {"min": 1, "max": 2}},
        )
        assert resp.status_code == 400
        assert resp.json()["error"] == "validation_error"
        assert resp.json()["field"] == "title"

    def test_inverted_age_group_is_400_and_not_stored(self, client):
        resp = client.post(
            "/api/stories",
            json={"title": "x", "content": "y", "ageGroup": {"min": 5, "max": 3}},
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "ageGroup"
        assert client.get("/api/stories").json() == []

    def test_wrong_type_is_400(self, client):
        resp = client.post("/api/stories", json={**KIND_FOX, "ageGroup": {"min": "four", "max": 6}})
        assert resp.status_code == 400
        assert resp.json()["field"] == "ageGroup"

    def test_invalid_json_is_400(self, client):
        resp = client.post(
            "/api/stories",
            content="{not json",
            headers={"Content-Type": "application/json"},
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "body"

    def test_blank_title_reported_before_bad_duration(self, client):
        resp = client.post(
            "/api/stories",
            json={"title": "", "content": "x", "ageGroup": {"min": 1, "max": 2}, "durationMinutes": "long"},
        )
        assert resp.status_code == 400
        assert resp.json()["field"] == "title"

    def test_boolean_age_is_400(self, client):
        resp = client.post("/api/stories", json={**KIND_FOX, "ageGroup": {"min": True, "max": 3}})
        assert resp.status_code == 400
        assert resp.json()["field"] == "ageGroup"
        assert client.get("/api/stories").json() == []

    def test_non_object_body_is_400(self, client):
        resp = client.post("/api/stories", json=["not", "a", "story"])
        assert resp.status_code == 400
        assert resp.json()["field"] == "body"

    def test_store_failure_is_500(self, failing_client):
        resp = failing_client.post("/api/stories", json=KIND_FOX)
        assert resp.status_code == 500
        assert resp.json()["error"] == "store_unavailable"


class TestListStories:
    def test_empty(self, client):
        resp = client.get("/api/stories")
        assert resp.status_code == 200
        assert resp.json() == []

    def test_lists_created_stories(self, client):
        first = client.post("/api/stories", json=KIND_FOX).json()
        second = client.post("/api/stories", json=KIND_FOX).json()
        ids = {s["id"] for s in client.get("/api/stories").json()}
        assert ids == {first["id"], second["id"]}

    def test_store_failure_is_500(self, failing_client):
        resp = failing_client.get("/api/stories")
        assert resp.status_code == 500


class TestCors:
    def test_frontend_origin_allowed(self, client):
        resp = client.get("/api/stories", headers={"Origin": "http://localhost:5173"})
        assert resp.headers["access-control-allow-origin"] == "http://localhost:5173"

    def test_other_origin_not_allowed(self, client):
        resp = client.get("/api/stories", headers={"Origin": "http://evil.example"})
        assert "access-control-allow-origin" not in resp.headers


class TestRoutes:
    """Only the two stories routes are served."""

    @pytest.mark.parametrize("path", ["/docs", "/redoc", "/openapi.json"])
    def test_generated_docs_disabled(self, client, path):
        assert client.get(path).status_code == 404


class TestStartup:
    """Lifespan wires the configured store and seeds static stories."""

    @pytest.fixture
    def seeded_env(self, monkeypatch, tmp_path):
        from momandme.config import get_settings

        seed = tmp_path / "seed.yaml"
        seed.write_text(
            "stories:\n"
            "  - title: Moon and the Sleepy Owl\n"
            "    content: The owl closed its eyes.\n"
            "    ageGroup: {min: 2, max: 4}\n"
        )
        for key in ("REDIS_URL", "MONGODB_URI"):
            monkeypatch.delenv(key, raising=False)
        monkeypatch.setenv("DATA_DIR", str(tmp_path / "data"))
        monkeypatch.setenv("SEED_FILE", str(seed))
        get_settings.cache_clear()
        yield
        get_settings.cache_clear()

    def test_seeds_file_store(self, seeded_env):
        with TestClient(app) as client:
            stories = client.get("/api/stories").json()
        assert [s["title"] for s in stories] == ["Moon and the Sleepy Owl"]
        assert stories[0]["source"]["type"] == "static"
