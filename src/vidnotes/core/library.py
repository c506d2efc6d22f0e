"""
Video library state

Owns the in-memory list of saved videos for one UI session. The list is
loaded from storage once, changed only through add/delete, and written
back in full after every change.
"""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime, timezone

from ..models.video_record import VideoRecord, new_record_id, utc_timestamp
from ..storage.record_store import RecordStore
from ..utils.logger import logger
from ..utils.thumbnails import build_thumbnail_url

ChangeCallback = Callable[[list[VideoRecord]], None]


class VideoLibrary:
    def __init__(
        self,
        store: RecordStore,
        *,
        clock: Callable[[], datetime] | None = None,
        id_factory: Callable[[], str] | None = None,
    ):
        self._store = store
        self._clock = clock or (lambda: datetime.now(timezone.utc))
        self._id_factory = id_factory or new_record_id
        self._records: list[VideoRecord] = []
        self._loaded = False
        self._callbacks: list[ChangeCallback] = []

    # ------ Load / persist ------

    def load(self) -> list[VideoRecord]:
        """Populate from storage. Only the first call reads storage."""
        if not self._loaded:
            self._records = self._store.load()
            self._loaded = True
        return self.records

    def _commit(self, records: list[VideoRecord]) -> None:
        self._records = records
        self._store.save(self._records)
        for cb in list(self._callbacks):
            cb(self.records)

    def subscribe(self, callback: ChangeCallback) -> None:
        """Register a listener called with the new list after every change."""
        self._callbacks.append(callback)

    # ------ Mutations ------

    def add(self, url: str, title: str = "", note: str = "") -> VideoRecord | None:
        """Save a new link. Blank links are ignored and return None."""
        link = (url or "").strip()
        if not link:
            return None

        record = VideoRecord(
            id=self._id_factory(),
            title=(title or "").strip() or link,
            url=link,
            note=(note or "").strip() or None,
            created_at=utc_timestamp(self._clock()),
            thumbnail_url=build_thumbnail_url(link),
        )
        self._commit([record, *self._records])
        logger.info(f"[Library] Saved: {record.title}")
        return record

    def delete(self, record_id: str) -> bool:
        remaining = [r for r in self._records if r.id != record_id]
        removed = len(remaining) != len(self._records)
        self._commit(remaining)
        if removed:
            logger.info(f"[Library] Deleted {record_id}")
        return removed

    # ------ Queries ------

    @staticmethod
    def query_matches(record: VideoRecord, query: str) -> bool:
        """A blank query matches everything."""
        if not (query or "").strip():
            return True
        return record.matches(query)

    def search(self, query: str) -> list[VideoRecord]:
        return [r for r in self._records if self.query_matches(r, query)]

    @property
    def records(self) -> list[VideoRecord]:
        """Newest first."""
        return list(self._records)

    @property
    def count(self) -> int:
        return len(self._records)
