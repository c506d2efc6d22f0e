from __future__ import annotations

from urllib.parse import parse_qs, quote, unquote, urlsplit

YOUTUBE_SHORT_HOST = "youtu.be"
YOUTUBE_DOMAIN = "youtube.com"
THUMBNAIL_TEMPLATE = "https://img.youtube.com/vi/{video_id}/hqdefault.jpg"


def extract_youtube_id(raw_url: str) -> str | None:
    """Pull the video id out of a youtu.be, /watch?v= or /shorts/ link.

    Anything that is not an absolute URL, or not one of those three shapes,
    yields None.
    """
    try:
        parts = urlsplit(raw_url)
        host = parts.hostname or ""
    except ValueError:
        return None
    if not parts.scheme or not host:
        return None

    segments = parts.path.split("/")
    first = segments[1] if len(segments) > 1 else ""

    if host == YOUTUBE_SHORT_HOST:
        return first or None

    if YOUTUBE_DOMAIN in host:
        if parts.path == "/watch":
            values = parse_qs(parts.query).get("v")
            return values[0] if values and values[0] else None
        if first == "shorts":
            second = segments[2] if len(segments) > 2 else ""
            return second or None

    return None


def build_thumbnail_url(raw_url: str) -> str | None:
    video_id = extract_youtube_id(raw_url)
    if video_id:
        # Percent-encode once, the way a browser normalizes a pasted path
        return THUMBNAIL_TEMPLATE.format(video_id=quote(unquote(video_id), safe=""))
    return None
