"""
Persistence layer: a string key-value substrate and the record store on top.
"""

from ..models.video_record import RecordFormatError
from .kv_store import JsonFileStore, KeyValueStore, MemoryStore, StorageError
from .record_store import STORAGE_KEY, RecordStore

__all__ = [
    "STORAGE_KEY",
    "JsonFileStore",
    "KeyValueStore",
    "MemoryStore",
    "RecordFormatError",
    "RecordStore",
    "StorageError",
]
