"""HTTP tests for the miter service."""
import inspect
import sqlite3

import pytest
from fastapi.testclient import TestClient

from miter_api.adapters.storage import SubmissionStore, get_store
from miter_api.main import app
from miter_api.routers import community


class FailingStore:
    def add_feedback(self, message, name=None, email=None):
        raise sqlite3.OperationalError("disk I/O error")

    def add_subscriber(self, email):
        raise sqlite3.OperationalError("database is locked")


@pytest.fixture
def submissions(tmp_path) -> SubmissionStore:
    return SubmissionStore(tmp_path / "submissions.db")


@pytest.fixture
def client(submissions):
    app.dependency_overrides[get_store] = lambda: submissions
    yield TestClient(app)
    app.dependency_overrides.clear()


@pytest.fixture
def failing_client():
    app.dependency_overrides[get_store] = FailingStore
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestFeedback:
    def test_stores_message(self, client, submissions) -> None:
        resp = client.post("/feedback", json={"message": "Great tool", "name": "Sam"})
        assert resp.status_code == 200
        assert resp.json() == {"message": "Feedback sent successfully!"}
        assert submissions.feedback_messages() == ["Great tool"]

    @pytest.mark.parametrize("body", [{"message": "   "}, {}])
    def test_blank_message(self, client, submissions, body) -> None:
        resp = client.post("/feedback", json=body)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Message cannot be empty"
        assert submissions.feedback_messages() == []

    def test_malformed_json(self, client) -> None:
        resp = client.post("/feedback", content="{not json", headers={"content-type": "application/json"})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid request body"

    def test_get_not_allowed(self, client) -> None:
        assert client.get("/feedback").status_code == 405

    def test_storage_failure(self, failing_client) -> None:
        resp = failing_client.post("/feedback", json={"message": "hello"})
        assert resp.status_code == 500
        assert resp.json()["detail"] == "Internal Server Error"


class TestSubscribe:
    def test_subscribe_twice_is_ok(self, client, submissions) -> None:
        for _ in range(2):
            resp = client.post("/subscribe", json={"email": " maker@example.com "})
            assert resp.status_code == 200
            assert resp.json()["message"] == "Subscribed successfully!"
        assert submissions.subscribers() == ["maker@example.com"]

    @pytest.mark.parametrize("email", ["", "maker.example.com"])
    def test_invalid_email(self, client, email) -> None:
        resp = client.post("/subscribe", json={"email": email})
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid email address"

    def test_put_not_allowed(self, client) -> None:
        assert client.put("/subscribe", json={"email": "a@b.c"}).status_code == 405

    def test_storage_failure(self, failing_client) -> None:
        assert failing_client.post("/subscribe", json={"email": "a@b.c"}).status_code == 500


class TestCutList:
    def _rectangle(self):
        corners = [(0, 0), (400, 0), (400, 300), (0, 300)]
        return [{"start": corners[i], "end": corners[(i + 1) % 4], "thickness": 12} for i in range(4)]

    def test_rectangle(self, client) -> None:
        resp = client.post("/boards/cutlist", json={"segments": self._rectangle()})
        assert resp.status_code == 200
        data = resp.json()
        assert len(data["boards"]) == 4
        assert {b["start_cut"] for b in data["boards"]} == {45.0}
        assert data["boards"][0]["inside"] == pytest.approx(17.6)
        assert data["total"] == "70 cm"

    def test_override_and_precision(self, client) -> None:
        segments = self._rectangle()
        segments[0]["overrides"] = {"end": 44.25}
        body = {"segments": segments, "config": {"precision": 2, "unit": "imperial"}}
        data = client.post("/boards/cutlist", json=body).json()
        assert data["boards"][0]["end_label"] == "44.25°"
        assert data["boards"][1]["start_label"] == "45.00°"
        assert data["boards"][0]["units"] == "in"

    @pytest.mark.parametrize(
        "segment",
        [
            {"start": [0, 0], "end": [10, 0], "side": "left"},
            {"start": [0, 0], "end": [10, 0], "thickness": 0},
            {"start": [0, 0]},
        ],
    )
    def test_rejects_bad_segments(self, client, segment) -> None:
        assert client.post("/boards/cutlist", json={"segments": [segment]}).status_code == 400


def test_version_and_index(client) -> None:
    assert client.get("/version").json()["status"] == "ok"
    paths = [r["path"] for r in client.get("/").json()["routes"]]
    assert "/boards/cutlist" in paths


@pytest.mark.parametrize("handler", [community.submit_feedback, community.subscribe])
def test_storage_handlers_are_sync(handler) -> None:
    assert not inspect.iscoroutinefunction(handler)
