"""
Saved video entry

One record per pasted link. Records are created once and never edited;
the only lifecycle events are "added" and "deleted".
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any


class RecordFormatError(ValueError):
    """Persisted data does not have the shape of a video record list."""


def new_record_id() -> str:
    return str(uuid.uuid4())


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision, e.g. 2024-05-01T08:30:00.123Z"""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class VideoRecord:
    """A single saved video"""

    id: str
    title: str
    url: str
    created_at: str
    note: str | None = None
    thumbnail_url: str | None = None

    def to_dict(self) -> dict[str, Any]:
        # Optional keys are omitted instead of written as null
        d: dict[str, Any] = {
            "id": self.id,
            "title": self.title,
            "url": self.url,
        }
        if self.note:
            d["note"] = self.note
        d["createdAt"] = self.created_at
        if self.thumbnail_url:
            d["thumbnailUrl"] = self.thumbnail_url
        return d

    @classmethod
    def from_dict(cls, data: Any) -> VideoRecord:
        if not isinstance(data, dict):
            raise RecordFormatError(f"record must be an object, got {type(data).__name__}")

        for key in ("id", "title", "url", "createdAt"):
            if not isinstance(data.get(key), str):
                raise RecordFormatError(f"record field {key!r} missing or not a string")
        if not data["id"] or not data["url"]:
            raise RecordFormatError("record id and url must not be empty")

        for key in ("note", "thumbnailUrl"):
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise RecordFormatError(f"record field {key!r} must be a string")

        return cls(
            id=data["id"],
            title=data["title"],
            url=data["url"],
            created_at=data["createdAt"],
            note=data.get("note") or None,
            thumbnail_url=data.get("thumbnailUrl") or None,
        )

    @property
    def created_datetime(self) -> datetime | None:
        """createdAt parsed as an aware datetime, or None if it is not ISO-8601."""
        try:
            return datetime.fromisoformat(self.created_at.replace("Z", "+00:00"))
        except ValueError:
            return None

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match against title, note and url."""
        q = query.lower()
        return q in self.title.lower() or q in (self.note or "").lower() or q in self.url.lower()
