"""
identifier.py — Turn whatever the user pasted into an 11-character video ID.
"""

from __future__ import annotations

from ytranscript.errors import InvalidVideoIdError
from ytranscript.patterns import RE_YOUTUBE

VIDEO_ID_LENGTH = 11


def extract_video_id(value: str) -> str:
    """
    Extract a YouTube video ID from a URL, or accept a raw 11-character ID.

    Any string of exactly 11 characters is taken as an ID without further
    checks.  Anything else must match one of the known URL shapes:
    watch?v=, /embed/, /v/, youtu.be/, or domain/anything/anything/ID.

    Args:
        value: A YouTube URL or a raw video ID.

    Returns:
        The 11-character video ID.

    Raises:
        InvalidVideoIdError: If the string doesn't match any known format.
    """
    if len(value) == VIDEO_ID_LENGTH:
        return value

    match = RE_YOUTUBE.search(value)
    if match:
        return match.group(1)

    raise InvalidVideoIdError(value)
