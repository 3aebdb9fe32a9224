"""Tests for the key-value stores and SelectionRepository."""

import json

import pytest

from pointpath.domain.common.value_objects.point_path import PointPath, SelectionPath
from pointpath.exceptions import PathRecordParseError
from pointpath.infrastructure.persistence.models import KeyValueRecord
from pointpath.infrastructure.persistence.repositories.key_value_store import (
    InMemoryKeyValueStore,
    SqlAlchemyKeyValueStore,
)
from pointpath.infrastructure.persistence.repositories.selection_repository import (
    SelectionRepository,
)


class TestSqlAlchemyKeyValueStore:
    def test_missing_key(self, db_session):
        assert SqlAlchemyKeyValueStore(db_session).get("editor:anchor") is None

    def test_set_then_get(self, db_session):
        store = SqlAlchemyKeyValueStore(db_session)
        store.set("editor:anchor", '{"rootIndex":0,"textOffset":1}')
        assert store.get("editor:anchor") == '{"rootIndex":0,"textOffset":1}'

    def test_last_write_wins(self, db_session):
        store = SqlAlchemyKeyValueStore(db_session)
        store.set("editor:snapshot", "first")
        store.set("editor:snapshot", "second")

        assert store.get("editor:snapshot") == "second"
        assert db_session.query(KeyValueRecord).count() == 1

    def test_delete(self, db_session):
        store = SqlAlchemyKeyValueStore(db_session)
        store.set("editor:anchor", "{}")

        store.delete("editor:anchor")
        store.delete("editor:missing")

        assert store.get("editor:anchor") is None
        assert db_session.query(KeyValueRecord).count() == 0


class TestSelectionRepository:
    @pytest.fixture
    def store(self) -> InMemoryKeyValueStore:
        return InMemoryKeyValueStore()

    def test_round_trip(self, store):
        repository = SelectionRepository(store)
        selection_path = SelectionPath(
            anchor=PointPath(block_index=0, char_offset=2),
            focus=PointPath(block_index=3, char_offset=0),
        )

        repository.save_selection(selection_path)

        assert repository.find_selection() == selection_path
        assert json.loads(store.get("editor:focus")) == {"rootIndex": 3, "textOffset": 0}

    def test_key_prefix(self, store):
        repository = SelectionRepository(store, key_prefix="notes")
        repository.save_snapshot("{}")
        assert store.get("notes:snapshot") == "{}"
        assert repository.find_snapshot() == "{}"

    def test_clear_selection_keeps_snapshot(self, store):
        repository = SelectionRepository(store)
        repository.save_selection(
            SelectionPath(
                anchor=PointPath(block_index=0, char_offset=1),
                focus=PointPath(block_index=0, char_offset=2),
            )
        )
        repository.save_snapshot("{}")

        repository.clear_selection()

        assert repository.find_selection() is None
        assert store.get("editor:anchor") is None
        assert repository.find_snapshot() == "{}"

    def test_half_saved_selection_is_absent(self, store):
        store.set("editor:anchor", json.dumps({"rootIndex": 0, "textOffset": 0}))
        assert SelectionRepository(store).find_selection() is None

    def test_corrupt_record_raises(self, store):
        store.set("editor:anchor", json.dumps({"rootIndex": -1, "textOffset": 0}))
        store.set("editor:focus", json.dumps({"rootIndex": 0, "textOffset": 0}))
        with pytest.raises(PathRecordParseError):
            SelectionRepository(store).find_selection()
