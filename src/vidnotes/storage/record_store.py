"""
Saved video list persistence

The whole list lives under one well-known key as a JSON array and is
replaced wholesale on every save. Loading never fails: missing, unreadable
or malformed data all come back as an empty list.
"""

from __future__ import annotations

import json
from collections.abc import Sequence

from ..models.video_record import RecordFormatError, VideoRecord
from ..utils.logger import logger
from .kv_store import KeyValueStore, StorageError

STORAGE_KEY = "my-video-notes"


def decode_records(raw: str) -> list[VideoRecord]:
    """Parse the persisted JSON array. Raises RecordFormatError on any defect."""
    try:
        data = json.loads(raw)
    except (ValueError, RecursionError) as e:
        raise RecordFormatError(f"invalid JSON: {e}") from e

    if not isinstance(data, list):
        raise RecordFormatError(f"expected a JSON array, got {type(data).__name__}")

    records = [VideoRecord.from_dict(item) for item in data]

    seen: set[str] = set()
    for r in records:
        if r.id in seen:
            raise RecordFormatError(f"duplicate record id {r.id!r}")
        seen.add(r.id)
    return records


def encode_records(records: Sequence[VideoRecord]) -> str:
    return json.dumps([r.to_dict() for r in records], ensure_ascii=False)


class RecordStore:
    """Reads and writes the full record list against a key-value store."""

    def __init__(self, kv: KeyValueStore, key: str = STORAGE_KEY):
        self._kv = kv
        self.key = key

    def load(self) -> list[VideoRecord]:
        try:
            raw = self._kv.get(self.key)
        except StorageError as e:
            logger.warning(f"[RecordStore] Storage unreadable, starting empty: {e}")
            return []

        if not raw:
            return []

        try:
            records = decode_records(raw)
        except RecordFormatError as e:
            logger.warning(f"[RecordStore] Ignoring malformed data under {self.key!r}: {e}")
            return []

        logger.info(f"[RecordStore] Loaded {len(records)} saved videos")
        return records

    def save(self, records: Sequence[VideoRecord]) -> None:
        try:
            if records:
                self._kv.set(self.key, encode_records(records))
            else:
                self._kv.remove(self.key)
        except StorageError as e:
            logger.error(f"[RecordStore] Save failed: {e}")
            return
        logger.debug(f"[RecordStore] Saved {len(records)} videos")
