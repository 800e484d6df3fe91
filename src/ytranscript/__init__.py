"""
ytranscript — Fetch YouTube video transcripts by scraping the watch page.

Public API:
    fetch_transcript()   Async: URL or ID → list of CaptionEntry.
    get_transcript()     Blocking wrapper around fetch_transcript().
    extract()            One-call fetch + format (text, json, doc, xml).
    extract_video_id()   Parse a YouTube URL or accept a bare video ID.
    CaptionEntry         One caption line (text, duration, offset, lang).
    FetchConfig          Per-call options (lang).
    TrackDescriptor      One caption track advertised by a video.

Exception hierarchy (all importable from this package):
    TranscriptError                  Base exception for all errors.
    ├── InvalidVideoIdError          Input is not a video ID or known URL.
    ├── TooManyRequestsError         YouTube wants a captcha solved.
    ├── VideoUnavailableError        Video removed or private.
    ├── TranscriptDisabledError      Page has no caption renderer.
    ├── TranscriptNotAvailableError  No caption tracks found.
    ├── LanguageNotAvailableError    Requested language not offered.
    ├── TransportError               HTTP request failed.
    └── CaptionParseError            Caption document malformed.

Usage:
    from ytranscript import get_transcript, FetchConfig
    entries = get_transcript("https://youtu.be/dQw4w9WgXcQ", FetchConfig(lang="en"))

    # From async code, sharing one connection pool:
    async with httpx.AsyncClient() as client:
        entries = await fetch_transcript("dQw4w9WgXcQ", client=client)
"""

from ytranscript.errors import (
    CaptionParseError,
    InvalidVideoIdError,
    LanguageNotAvailableError,
    TooManyRequestsError,
    TranscriptDisabledError,
    TranscriptError,
    TranscriptNotAvailableError,
    TransportError,
    VideoUnavailableError,
)
from ytranscript.extractor import (
    extract,
    fetch_transcript,
    get_transcript,
)
from ytranscript.identifier import extract_video_id
from ytranscript.models import CaptionEntry, FetchConfig, TrackDescriptor

__all__ = [
    "fetch_transcript",
    "get_transcript",
    "extract",
    "extract_video_id",
    "CaptionEntry",
    "FetchConfig",
    "TrackDescriptor",
    "TranscriptError",
    "InvalidVideoIdError",
    "TooManyRequestsError",
    "VideoUnavailableError",
    "TranscriptDisabledError",
    "TranscriptNotAvailableError",
    "LanguageNotAvailableError",
    "TransportError",
    "CaptionParseError",
]
