from datetime import datetime, timedelta, timezone

from bson import ObjectId

from app.core.database import GALLERY
from app.services.collections import EntityCollection
from tests.conftest import BrokenDatabase


def test_list_is_newest_first(db):
    gallery = EntityCollection(db[GALLERY])
    base = datetime(2024, 1, 1, tzinfo=timezone.utc)
    gallery.create({"title": "old"}, created_at=base)
    gallery.create({"title": "new"}, created_at=base + timedelta(days=2))
    gallery.create({"title": "middle"}, created_at=base + timedelta(days=1))

    result = gallery.list_all()
    assert result.status == "ok"
    assert [d["title"] for d in result.items] == ["new", "middle", "old"]


def test_empty_and_failed_lists_are_distinguished(db):
    assert EntityCollection(db[GALLERY]).list_all().status == "empty"

    failed = EntityCollection(BrokenDatabase()[GALLERY]).list_all()
    assert failed.status == "failed"
    assert failed.items == []


def test_create_assigns_id_and_timestamp(db):
    doc = EntityCollection(db[GALLERY]).create({"title": "a"})
    assert isinstance(doc["_id"], ObjectId)
    assert "created_at" in doc


def test_update_replaces_fields(db):
    gallery = EntityCollection(db[GALLERY])
    doc = gallery.create({"title": "a", "description": "first"})
    updated = gallery.update(str(doc["_id"]), {"title": "b", "description": "second"})
    assert updated["title"] == "b"
    assert updated["description"] == "second"
    assert updated["created_at"] is not None


def test_update_and_delete_unknown_ids(db):
    gallery = EntityCollection(db[GALLERY])
    missing = str(ObjectId())
    assert gallery.update(missing, {"title": "x"}) is None
    assert gallery.update("not-an-id", {"title": "x"}) is None
    assert gallery.delete(missing) is False
    assert gallery.delete("not-an-id") is False


def test_delete_removes_row(db):
    gallery = EntityCollection(db[GALLERY])
    doc = gallery.create({"title": "a"})
    assert gallery.delete(str(doc["_id"])) is True
    assert gallery.get(str(doc["_id"])) is None


def test_mark_read(db):
    messages = EntityCollection(db["messages"])
    doc = messages.create({"name": "n", "email": "e@example.com", "message": "m", "read": False})
    assert messages.mark_read(str(doc["_id"]))["read"] is True
