"""
Tests for the JSON-file preference store.
"""

import json

import pytest

from models.errors import PersistenceError
from services.preference_store import JsonPreferenceStore


class TestJsonPreferenceStore:

    def test_missing_file_reads_as_empty(self, tmp_path):
        store = JsonPreferenceStore(tmp_path / "prefs.json")
        assert store.get("theme") is None

    def test_set_creates_parent_dirs_and_roundtrips(self, tmp_path):
        path = tmp_path / "state" / "prefs.json"
        store = JsonPreferenceStore(path)

        store.set("theme", "dark")

        assert json.loads(path.read_text(encoding="utf-8")) == {"theme": "dark"}
        assert JsonPreferenceStore(path).get("theme") == "dark"

    def test_set_keeps_other_keys(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"lang": "en"}), encoding="utf-8")

        JsonPreferenceStore(path).set("theme", "light")

        assert json.loads(path.read_text(encoding="utf-8")) == {"lang": "en", "theme": "light"}

    def test_corrupt_file_raises_on_read(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("{not json", encoding="utf-8")

        with pytest.raises(PersistenceError):
            JsonPreferenceStore(path).get("theme")

    def test_undecodable_file_raises_persistence_error(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"theme": "\xff\xfe"}')

        with pytest.raises(PersistenceError):
            JsonPreferenceStore(path).get("theme")

    def test_undecodable_file_is_overwritten_on_write(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_bytes(b'{"theme": "\xff\xfe"}')

        JsonPreferenceStore(path).set("theme", "dark")

        assert JsonPreferenceStore(path).get("theme") == "dark"

    def test_corrupt_file_is_overwritten_on_write(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text("[1, 2, 3]", encoding="utf-8")

        JsonPreferenceStore(path).set("theme", "dark")

        assert JsonPreferenceStore(path).get("theme") == "dark"

    def test_non_string_values_ignored(self, tmp_path):
        path = tmp_path / "prefs.json"
        path.write_text(json.dumps({"theme": 1}), encoding="utf-8")

        assert JsonPreferenceStore(path).get("theme") is None
