"""Snapshot models and their serialized form."""

from __future__ import annotations

import json

import pytest

from botbrain.brain import Brain
from botbrain.events import EventEmitter
from botbrain.exceptions import BrainSnapshotError
from botbrain.models import BrainData, User, dump_snapshot, load_snapshot


class TestUser:
    def test_extra_fields_are_kept(self) -> None:
        user = User(id="1", name="Alice", email="a@example.com")

        assert user.model_extra == {"email": "a@example.com"}

    def test_name_and_room_are_optional(self) -> None:
        user = User(id=5)

        assert user.id == 5
        assert user.name is None
        assert user.room is None

    def test_mutable(self) -> None:
        user = User(id="1")
        user.name = "Renamed"
        user.karma = 3  # type: ignore[attr-defined]

        assert user.name == "Renamed"
        assert user.model_extra == {"karma": 3}


class TestSnapshot:
    def test_empty_snapshot_shape(self) -> None:
        assert dump_snapshot(BrainData()) == {"users": {}, "_private": {}}

    def test_dump_uses_private_alias(self, brain: Brain) -> None:
        brain.set("greeting", "hello")
        brain.user_for_id("42", {"name": "Alice", "room": "general", "tz": "UTC"})

        assert dump_snapshot(brain.data) == {
            "users": {"42": {"id": "42", "name": "Alice", "room": "general", "tz": "UTC"}},
            "_private": {"greeting": "hello"},
        }

    def test_load_from_json_document(self) -> None:
        raw = json.dumps({"users": {"1": {"id": "1", "name": "Bob"}}, "_private": {"n": 2}})

        data = load_snapshot(raw)

        assert isinstance(data.users["1"], User)
        assert data.users["1"].name == "Bob"
        assert data.private == {"n": 2}

    def test_load_accepts_attribute_name(self) -> None:
        assert load_snapshot({"private": {"n": 1}}).private == {"n": 1}

    def test_dumped_snapshot_merges_back(self, brain: Brain, host: EventEmitter) -> None:
        brain.set("greeting", "hello")
        brain.user_for_id("42", name="Alice")
        stored = json.dumps(dump_snapshot(brain.data))

        restored = Brain(host)
        restored.merge_data(json.loads(stored))

        assert restored.get("greeting") == "hello"
        assert restored.user_for_name("alice") is restored.users()["42"]

    def test_load_fills_missing_user_id_from_key(self) -> None:
        data = load_snapshot('{"users": {"9": {"name": "Nine"}}}')

        assert data.users["9"].id == "9"

    def test_invalid_payload_raises(self) -> None:
        with pytest.raises(BrainSnapshotError) as exc_info:
            load_snapshot({"users": {"1": "not a user record"}})

        assert exc_info.value.__cause__ is not None

    def test_invalid_json_raises(self) -> None:
        with pytest.raises(BrainSnapshotError):
            load_snapshot("{not json")
