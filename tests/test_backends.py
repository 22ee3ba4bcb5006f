"""Tests for the key-value persistence backends."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from fixturestore.backends import JsonFileBackend, KeyValueBackend, MemoryBackend
from fixturestore.store import FixtureStore


@pytest.fixture
def file_backend(tmp_path: Path) -> JsonFileBackend:
    return JsonFileBackend(tmp_path / "data" / "store.json")


class TestMemoryBackend:
    def test_protocol(self):
        assert isinstance(MemoryBackend(), KeyValueBackend)

    def test_get_set_clear(self):
        backend = MemoryBackend()
        assert backend.get("k") is None
        backend.set("k", "[]")
        assert backend.get("k") == "[]"
        assert backend.keys() == ["k"]
        backend.clear()
        assert backend.get("k") is None


class TestJsonFileBackend:
    def test_protocol(self, file_backend: JsonFileBackend):
        assert isinstance(file_backend, KeyValueBackend)

    def test_creates_file(self, file_backend: JsonFileBackend):
        assert file_backend.path.exists()
        assert json.loads(file_backend.path.read_text(encoding="utf-8")) == {}

    def test_get_set(self, file_backend: JsonFileBackend):
        file_backend.set("posts", '[{"id": 1}]')
        assert file_backend.get("posts") == '[{"id": 1}]'
        assert file_backend.get("missing") is None

    def test_persists_across_instances(self, file_backend: JsonFileBackend):
        file_backend.set("posts", "[]")
        assert JsonFileBackend(file_backend.path).get("posts") == "[]"

    def test_clear(self, file_backend: JsonFileBackend):
        file_backend.set("posts", "[]")
        file_backend.clear()
        assert file_backend.keys() == []

    def test_corrupt_file_reads_empty(self, file_backend: JsonFileBackend):
        file_backend.path.write_text("{broken", encoding="utf-8")
        assert file_backend.get("posts") is None
        file_backend.set("posts", "[]")
        assert file_backend.keys() == ["posts"]

    def test_undecodable_file_reads_empty(self, file_backend: JsonFileBackend):
        file_backend.path.write_bytes(b"\xff\xfe{}")
        assert file_backend.get("posts") is None
        assert FixtureStore(file_backend).get("posts") == []

    def test_directory_in_place_of_file_reads_empty(self, tmp_path: Path):
        (tmp_path / "store.json").mkdir()
        backend = JsonFileBackend(tmp_path / "store.json")
        assert FixtureStore(backend).find_all("posts") == []

    def test_non_object_file_reads_empty(self, file_backend: JsonFileBackend):
        file_backend.path.write_text("[1, 2]", encoding="utf-8")
        assert file_backend.keys() == []

    def test_store_round_trip(self, file_backend: JsonFileBackend):
        FixtureStore(file_backend).create("posts", {"title": "Ünïcode"})
        reopened = FixtureStore(JsonFileBackend(file_backend.path))
        assert reopened.find_one("posts", {"id": 1}) == {"title": "Ünïcode", "id": 1}
