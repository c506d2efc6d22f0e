import json

import pytest

from vidnotes.models import VideoRecord
from vidnotes.storage import (
    STORAGE_KEY,
    JsonFileStore,
    MemoryStore,
    RecordFormatError,
    RecordStore,
    StorageError,
)
from vidnotes.storage.record_store import decode_records


def _record(i: int, **kw) -> VideoRecord:
    defaults = dict(
        id=f"id-{i}",
        title=f"Video {i}",
        url=f"https://youtu.be/v{i}",
        created_at="2024-05-01T08:30:00.000Z",
    )
    defaults.update(kw)
    return VideoRecord(**defaults)


def test_round_trip():
    records = [
        _record(2, note="watch 12:30 again", thumbnail_url="https://img.youtube.com/vi/v2/hqdefault.jpg"),
        _record(1),
    ]
    store = RecordStore(MemoryStore())
    store.save(records)
    assert store.load() == records


def test_round_trip_through_file(tmp_path):
    records = [_record(1, note="ไม่มีปก")]
    RecordStore(JsonFileStore(tmp_path / "s.json")).save(records)
    assert RecordStore(JsonFileStore(tmp_path / "s.json")).load() == records


def test_wire_format_uses_camel_case_and_omits_absent_fields():
    kv = MemoryStore()
    RecordStore(kv).save([_record(1)])
    data = json.loads(kv.get(STORAGE_KEY))
    assert data == [
        {
            "id": "id-1",
            "title": "Video 1",
            "url": "https://youtu.be/v1",
            "createdAt": "2024-05-01T08:30:00.000Z",
        }
    ]


def test_saving_empty_list_removes_key():
    kv = MemoryStore()
    store = RecordStore(kv)
    store.save([_record(1)])
    store.save([])
    assert STORAGE_KEY not in kv
    assert store.load() == []


def test_save_overwrites_previous_snapshot():
    kv = MemoryStore()
    store = RecordStore(kv)
    store.save([_record(1), _record(2)])
    store.save([_record(3)])
    assert [r.id for r in store.load()] == ["id-3"]


def test_load_missing_key():
    assert RecordStore(MemoryStore()).load() == []


@pytest.mark.parametrize(
    "raw",
    [
        "",
        "not json",
        "{}",
        '"a string"',
        "null",
        "[1, 2]",
        "[" * 100000 + "]" * 100000,
        "[" * 100000,
        '[{"id": "a"}]',
        '[{"id": "a", "title": "t", "url": "", "createdAt": "x"}]',
        '[{"id": "a", "title": "t", "url": "u", "createdAt": "x", "note": 5}]',
        '[{"id": "a", "title": "t", "url": "u", "createdAt": "x"},'
        ' {"id": "a", "title": "t", "url": "u", "createdAt": "x"}]',
    ],
)
def test_load_malformed_data_yields_empty(raw):
    assert RecordStore(MemoryStore({STORAGE_KEY: raw})).load() == []


def test_decode_raises_typed_error():
    with pytest.raises(RecordFormatError):
        decode_records("{}")


def test_decode_accepts_empty_array():
    assert decode_records("[]") == []


class _BrokenStore:
    def get(self, key):
        raise StorageError("disk on fire")

    def set(self, key, value):
        raise StorageError("read-only")

    def remove(self, key):
        raise StorageError("read-only")


def test_storage_failures_do_not_raise():
    store = RecordStore(_BrokenStore())
    assert store.load() == []
    store.save([_record(1)])
    store.save([])


def test_custom_key(tmp_path):
    kv = MemoryStore()
    RecordStore(kv, key="other").save([_record(1)])
    assert kv.get("other") is not None
    assert kv.get(STORAGE_KEY) is None


def test_load_deeply_nested_file_yields_empty(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[" * 100000, encoding="utf-8")
    assert RecordStore(JsonFileStore(path)).load() == []


def test_save_after_deeply_nested_file(tmp_path):
    path = tmp_path / "s.json"
    path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    store = RecordStore(JsonFileStore(path))
    store.save([_record(1)])
    assert store.load() == [_record(1)]
