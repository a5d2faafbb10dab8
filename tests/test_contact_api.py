"""
Tests for the contact message HTTP API.
"""
import inspect
import sys
from pathlib import Path
from unittest.mock import patch

import pytest
from fastapi.testclient import TestClient

sys.path.insert(0, str(Path(__file__).parent.parent))

from dependencies import get_message_store
from errors import PersistenceError
from routes import contact
from server import app
from storage.json_store import JsonMessageStore


def valid_form(**overrides) -> dict:
    form = {
        "fullName": "Jo",
        "email": "jo@x.com",
        "inquiryType": "general",
        "message": "Hello there, I am interested",
    }
    form.update(overrides)
    return form


class ContactApiTest:
    """Shared setup: app wired to a temporary message file."""

    @pytest.fixture(autouse=True)
    def setup(self, tmp_path):
        self.store = JsonMessageStore(tmp_path / "contacts.json")
        app.dependency_overrides[get_message_store] = lambda: self.store
        self.client = TestClient(app)
        yield
        app.dependency_overrides.clear()

    def create(self, **overrides) -> str:
        response = self.client.post("/contact-messages", json=valid_form(**overrides))
        assert response.status_code == 201
        return response.json()["data"]["id"]


# ============================================
# Create
# ============================================

class TestCreateMessage(ContactApiTest):
    """POST /contact-messages"""

    def test_short_message_rejected(self):
        response = self.client.post("/contact-messages", json=valid_form(message="short"))

        assert response.status_code == 400
        data = response.json()
        assert data["success"] is False
        assert len(data["errors"]) == 1
        assert "10 characters" in data["errors"][0]

    def test_create_then_list_shows_it_first(self):
        self.create(fullName="Earlier Sender")
        message_id = self.create()

        listing = self.client.get("/contact-messages").json()
        first = listing["data"][0]
        assert first["id"] == message_id
        assert first["status"] == "unread"
        assert first["replied"] is False
        assert first["fullName"] == "Jo"

    def test_create_returns_generated_id(self):
        response = self.client.post("/contact-messages", json=valid_form())

        assert response.status_code == 201
        body = response.json()
        assert body["success"] is True
        assert body["data"]["id"].startswith("msg_")

    def test_ids_are_unique(self):
        ids = {self.create() for _ in range(5)}
        assert len(ids) == 5

    def test_fields_are_sanitized(self):
        message_id = self.create(
            fullName="  <b>Jo</b>  ",
            message="<script>alert('hi')</script> please reply",
        )
        stored = self.client.get(f"/contact-messages/{message_id}").json()["data"]

        assert stored["fullName"] == "&lt;b&gt;Jo&lt;/b&gt;"
        assert "<script>" not in stored["message"]
        assert "&#x27;hi&#x27;" in stored["message"]

    def test_all_errors_reported(self):
        response = self.client.post("/contact-messages", json={})

        assert response.status_code == 400
        assert len(response.json()["errors"]) == 4

    def test_non_object_body_is_400(self):
        response = self.client.post("/contact-messages", json=["not", "an", "object"])
        assert response.status_code == 400

    def test_invalid_json_is_400(self):
        response = self.client.post(
            "/contact-messages",
            content="{broken",
            headers={"Content-Type": "application/json"}
        )
        assert response.status_code == 400

    def test_extra_fields_ignored(self):
        message_id = self.create(status="read", replied=True, id="msg_forged")
        stored = self.client.get(f"/contact-messages/{message_id}").json()["data"]

        assert message_id != "msg_forged"
        assert stored["status"] == "unread"
        assert stored["replied"] is False

    def test_write_failure_is_500_without_internals(self):
        with patch.object(self.store, "_write", side_effect=PersistenceError("disk full at /srv/data")):
            response = self.client.post("/contact-messages", json=valid_form())

        assert response.status_code == 500
        assert "/srv/data" not in response.text
        assert response.json()["success"] is False


# ============================================
# List / get
# ============================================

class TestListMessages(ContactApiTest):
    """GET /contact-messages"""

    def test_empty_store(self):
        body = self.client.get("/contact-messages").json()
        assert body["data"] == []
        assert body["meta"] == {"total": 0, "unread": 0}

    def test_meta_counts(self):
        first = self.create()
        self.create()
        self.create()
        self.client.patch(f"/contact-messages/{first}", json={"status": "read"})

        meta = self.client.get("/contact-messages").json()["meta"]
        assert meta == {"total": 3, "unread": 2}

    def test_status_filter(self):
        read_id = self.create()
        self.create()
        self.client.patch(f"/contact-messages/{read_id}", json={"status": "read"})

        body = self.client.get("/contact-messages", params={"status": "read"}).json()
        assert [m["id"] for m in body["data"]] == [read_id]
        assert body["meta"]["total"] == 2

    def test_bad_status_filter(self):
        response = self.client.get("/contact-messages", params={"status": "archived"})
        assert response.status_code == 400

    def test_get_single(self):
        message_id = self.create()
        response = self.client.get(f"/contact-messages/{message_id}")
        assert response.status_code == 200
        assert response.json()["data"]["email"] == "jo@x.com"

    def test_get_unknown(self):
        response = self.client.get("/contact-messages/msg_missing")
        assert response.status_code == 404
        assert response.json()["success"] is False

    def test_corrupt_file_lists_empty(self, tmp_path):
        (tmp_path / "contacts.json").write_text("[{oops")
        response = self.client.get("/contact-messages")
        assert response.status_code == 200
        assert response.json()["data"] == []


# ============================================
# Patch / delete
# ============================================

class TestUpdateMessage(ContactApiTest):
    """PATCH /contact-messages/{id}"""

    def test_mark_read(self):
        message_id = self.create()
        response = self.client.patch(f"/contact-messages/{message_id}", json={"status": "read"})

        assert response.status_code == 200
        assert response.json()["data"]["status"] == "read"
        assert self.client.get("/contact-messages").json()["data"][0]["status"] == "read"

    def test_mark_replied(self):
        message_id = self.create()
        response = self.client.patch(f"/contact-messages/{message_id}", json={"replied": True})

        assert response.json()["data"]["replied"] is True
        assert response.json()["data"]["status"] == "unread"

    def test_both_fields(self):
        message_id = self.create()
        data = self.client.patch(
            f"/contact-messages/{message_id}", json={"status": "read", "replied": True}
        ).json()["data"]
        assert data["status"] == "read"
        assert data["replied"] is True

    def test_immutable_fields_ignored(self):
        message_id = self.create()
        data = self.client.patch(
            f"/contact-messages/{message_id}", json={"message": "changed text here", "email": "x@y.com"}
        ).json()["data"]
        assert data["message"] == "Hello there, I am interested"
        assert data["email"] == "jo@x.com"

    def test_invalid_status(self):
        message_id = self.create()
        response = self.client.patch(f"/contact-messages/{message_id}", json={"status": "archived"})

        assert response.status_code == 400
        assert self.client.get(f"/contact-messages/{message_id}").json()["data"]["status"] == "unread"

    def test_non_boolean_replied(self):
        message_id = self.create()
        response = self.client.patch(f"/contact-messages/{message_id}", json={"replied": "yes"})
        assert response.status_code == 400

    def test_unknown_id(self):
        response = self.client.patch("/contact-messages/msg_missing", json={"status": "read"})
        assert response.status_code == 404


class TestDeleteMessage(ContactApiTest):
    """DELETE /contact-messages/{id}"""

    def test_delete(self):
        keep = self.create()
        gone = self.create()

        response = self.client.delete(f"/contact-messages/{gone}")

        assert response.status_code == 200
        assert response.json()["success"] is True
        ids = [m["id"] for m in self.client.get("/contact-messages").json()["data"]]
        assert ids == [keep]

    def test_delete_unknown_leaves_collection(self):
        self.create()
        response = self.client.delete("/contact-messages/msg_missing")

        assert response.status_code == 404
        assert self.client.get("/contact-messages").json()["meta"]["total"] == 1


class TestHandlersOffEventLoop:
    """Store-backed handlers are sync so FastAPI runs them in its threadpool."""

    @pytest.mark.parametrize("handler", [
        contact.create_message,
        contact.list_messages,
        contact.get_message,
        contact.update_message,
        contact.delete_message,
    ])
    def test_handler_is_not_a_coroutine(self, handler):
        assert not inspect.iscoroutinefunction(handler)

    def test_registered_endpoints_are_sync(self):
        endpoints = [
            route.endpoint for route in app.routes
            if getattr(route, "path", "").startswith("/contact-messages")
        ]
        assert len(endpoints) == 5
        assert not any(inspect.iscoroutinefunction(e) for e in endpoints)
