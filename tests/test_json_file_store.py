"""Tests for the file-backed key-value store."""

from water_tracker.adapters.json_file_store import JsonFileKeyValueStore
from water_tracker.domain.tracking import TrackerSettings
from water_tracker.services.persistence import StatePersistence


def test_create_makes_directory(tmp_path) -> None:
    directory = tmp_path / "nested" / "data"

    store = JsonFileKeyValueStore.create(directory)

    assert store.directory == directory
    assert directory.is_dir()


def test_set_get_and_overwrite(tmp_path) -> None:
    store = JsonFileKeyValueStore.create(tmp_path)

    store.set("WaterTrack.TodayData", '{"a": 1}')
    store.set("WaterTrack.TodayData", '{"a": 2}')

    assert store.get("WaterTrack.TodayData") == '{"a": 2}'
    assert sorted(path.name for path in tmp_path.iterdir()) == [
        "WaterTrack.TodayData.json"
    ]


def test_missing_key_returns_none(tmp_path) -> None:
    store = JsonFileKeyValueStore.create(tmp_path)

    assert store.get("WaterTrack.History") is None


def test_delete_removes_document(tmp_path) -> None:
    store = JsonFileKeyValueStore.create(tmp_path)
    store.set("key/with/slashes", "{}")

    store.delete("key/with/slashes")
    store.delete("key/with/slashes")

    assert store.get("key/with/slashes") is None
    assert list(tmp_path.iterdir()) == []


def test_persistence_survives_new_store_instance(tmp_path) -> None:
    settings = TrackerSettings(default_target=1750)
    StatePersistence(JsonFileKeyValueStore.create(tmp_path)).save_settings(settings)

    reopened = StatePersistence(JsonFileKeyValueStore.create(tmp_path))

    assert reopened.load_settings().value == settings


def test_undecodable_bytes_load_as_corrupt(tmp_path) -> None:
    store = JsonFileKeyValueStore.create(tmp_path)
    (tmp_path / "WaterTrack.Settings.json").write_bytes(b"\xff\xfe\x00garbage")

    result = StatePersistence(store).load_settings()

    assert result.status.value == "corrupt"
