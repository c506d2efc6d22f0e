import json

import pytest

from vidnotes.storage import JsonFileStore, MemoryStore, StorageError


def test_memory_store_get_set_remove():
    s = MemoryStore()
    assert s.get("k") is None
    s.set("k", "v")
    assert s.get("k") == "v"
    s.remove("k")
    assert s.get("k") is None
    s.remove("k")  # removing a missing key is fine


def test_file_store_persists_across_instances(tmp_path):
    path = tmp_path / "data" / "storage.json"
    JsonFileStore(path).set("k", "v")
    assert JsonFileStore(path).get("k") == "v"
    assert json.loads(path.read_text(encoding="utf-8")) == {"k": "v"}


def test_file_store_keeps_other_keys(tmp_path):
    path = tmp_path / "storage.json"
    s = JsonFileStore(path)
    s.set("a", "1")
    s.set("b", "2")
    s.remove("a")
    assert s.get("a") is None
    assert s.get("b") == "2"


def test_file_store_missing_file(tmp_path):
    s = JsonFileStore(tmp_path / "nope.json")
    assert s.get("k") is None
    s.remove("k")
    assert not (tmp_path / "nope.json").exists()


def test_file_store_corrupt_file_raises_on_read(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("{oops", encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get("k")


def test_file_store_corrupt_file_is_replaced_on_write(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[1, 2, 3]", encoding="utf-8")
    s = JsonFileStore(path)
    s.set("k", "v")
    assert s.get("k") == "v"


def test_file_store_ignores_non_string_values(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text(json.dumps({"k": 42}), encoding="utf-8")
    assert JsonFileStore(path).get("k") is None


def test_file_store_deeply_nested_file_raises_storage_error(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    with pytest.raises(StorageError):
        JsonFileStore(path).get("k")


def test_file_store_deeply_nested_file_is_replaced_on_write(tmp_path):
    path = tmp_path / "storage.json"
    path.write_text("[" * 100000, encoding="utf-8")
    s = JsonFileStore(path)
    s.set("k", "v")
    assert s.get("k") == "v"
    s.remove("k")
    assert s.get("k") is None
