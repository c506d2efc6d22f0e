import pytest

from vidnotes.utils.thumbnails import build_thumbnail_url, extract_youtube_id


@pytest.mark.parametrize(
    "url, expected",
    [
        ("https://youtu.be/abc123", "https://img.youtube.com/vi/abc123/hqdefault.jpg"),
        ("https://www.youtube.com/watch?v=xyz789", "https://img.youtube.com/vi/xyz789/hqdefault.jpg"),
        ("https://www.youtube.com/shorts/qq111", "https://img.youtube.com/vi/qq111/hqdefault.jpg"),
        ("https://example.com/video", None),
        ("not a url", None),
    ],
)
def test_build_thumbnail_url(url, expected):
    assert build_thumbnail_url(url) == expected


def test_watch_link_keeps_other_params():
    assert extract_youtube_id("https://m.youtube.com/watch?list=PL1&v=abc&t=30") == "abc"


def test_short_link_uses_first_segment_only():
    assert extract_youtube_id("https://youtu.be/abc123?si=share") == "abc123"
    assert extract_youtube_id("https://youtu.be/abc123/extra") == "abc123"


@pytest.mark.parametrize(
    "url",
    [
        "https://youtu.be/",
        "https://youtu.be",
        "https://www.youtube.com/watch",
        "https://www.youtube.com/watch?v=",
        "https://www.youtube.com/watch/abc",
        "https://www.youtube.com/shorts/",
        "https://www.youtube.com/shorts",
        "https://www.youtube.com/embed/abc",
        "https://www.youtube.com/",
        "https://notyoutu.be/abc",
        "youtu.be/abc123",
        "http://[::1",
        "",
    ],
)
def test_unrecognized_shapes_have_no_thumbnail(url):
    assert extract_youtube_id(url) is None
    assert build_thumbnail_url(url) is None


def test_derivation_is_deterministic():
    url = "https://www.youtube.com/watch?v=same"
    assert build_thumbnail_url(url) == build_thumbnail_url(url)


def test_id_is_percent_encoded():
    assert build_thumbnail_url("https://youtu.be/abc def") == "https://img.youtube.com/vi/abc%20def/hqdefault.jpg"
    assert build_thumbnail_url("https://youtu.be/abc%20def") == "https://img.youtube.com/vi/abc%20def/hqdefault.jpg"
    assert build_thumbnail_url("https://www.youtube.com/watch?v=a/b") == "https://img.youtube.com/vi/a%2Fb/hqdefault.jpg"
