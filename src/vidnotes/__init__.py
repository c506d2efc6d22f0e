"""VidNotes: save video links with a short note and find them again later."""

__version__ = "1.0.0"
