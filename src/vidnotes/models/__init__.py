"""
VidNotes data models.
"""

from .video_record import RecordFormatError, VideoRecord

__all__ = [
    "RecordFormatError",
    "VideoRecord",
]
