"""
extractor.py — The transcript-fetching facade.

This is the heart of ytranscript.  It chains the pipeline stages:

    1. Parse the URL / ID              → identifier.extract_video_id()
    2. Fetch the watch page config     → page.fetch_page()
    3. Choose a caption track          → tracks.select_track()
    4. Download and parse the captions → captions.parse_transcript_xml()

and exposes them as:

    fetch_transcript()  async, safe to run many at once on a shared client
    get_transcript()    blocking wrapper around fetch_transcript()
    extract()           one-call fetch + format, used by the CLI and API

Each call makes at most two requests (watch page, caption document) and
keeps no state between calls.
"""

from __future__ import annotations

import asyncio
import html
import logging

import httpx

from ytranscript.captions import parse_transcript_xml
from ytranscript.identifier import extract_video_id
from ytranscript.models import CaptionEntry, FetchConfig
from ytranscript.page import build_headers, fetch_page, http_get
from ytranscript.tracks import select_track

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Constants
# ---------------------------------------------------------------------------

# Only used when the library opens its own client.  A caller-supplied client
# keeps whatever timeout it was built with.
DEFAULT_TIMEOUT_SECS = 30.0

FORMATS = ("text", "json", "doc", "xml")


# ---------------------------------------------------------------------------
# Transcript fetching
# ---------------------------------------------------------------------------

async def _fetch_with_client(
    client: httpx.AsyncClient,
    video_id: str,
    lang: str | None,
) -> list[CaptionEntry]:
    captions_json = await fetch_page(client, video_id, lang)
    track = select_track(captions_json, lang, video_id)
    logger.debug(
        "Using %s track %r for %s",
        track.language_code,
        track.display_name,
        video_id,
    )
    xml = await http_get(client, track.fetch_url, build_headers(lang))
    return parse_transcript_xml(xml, track.language_code)


async def fetch_transcript(
    video: str,
    config: FetchConfig | None = None,
    *,
    client: httpx.AsyncClient | None = None,
    timeout: float = DEFAULT_TIMEOUT_SECS,
) -> list[CaptionEntry]:
    """
    Fetch the transcript of a YouTube video.

    Args:
        video:   A YouTube URL or an 11-character video ID.
        config:  Optional FetchConfig; `config.lang` selects the track by
                 exact language code.  Without it the video's first
                 (default) track is used.
        client:  Optional shared httpx.AsyncClient.  When omitted a client is
                 opened for this call and closed afterwards.  Redirects are
                 followed on every request whatever the client's own
                 follow_redirects setting.
        timeout: Request timeout in seconds for a library-owned client.

    Returns:
        CaptionEntry objects in document (i.e. time) order.  Every entry's
        `lang` is the language code of the chosen track.

    Raises:
        InvalidVideoIdError, TooManyRequestsError, VideoUnavailableError,
        TranscriptDisabledError, TranscriptNotAvailableError,
        LanguageNotAvailableError: platform-level outcomes.
        TransportError:    A request failed or returned a non-2xx status.
        CaptionParseError: The caption document had a non-numeric timestamp.
    """
    video_id = extract_video_id(video)
    lang = config.lang if config else None

    if client is not None:
        return await _fetch_with_client(client, video_id, lang)

    async with httpx.AsyncClient(timeout=timeout, follow_redirects=True) as own_client:
        return await _fetch_with_client(own_client, video_id, lang)


def get_transcript(
    video: str,
    config: FetchConfig | None = None,
    *,
    timeout: float = DEFAULT_TIMEOUT_SECS,
) -> list[CaptionEntry]:
    """
    Blocking version of fetch_transcript() for scripts and the CLI.

    Runs on a fresh event loop, so it must not be called from inside a
    running loop; use `await fetch_transcript(...)` there instead.
    """
    return asyncio.run(fetch_transcript(video, config, timeout=timeout))


# ---------------------------------------------------------------------------
# Formatting helpers
# ---------------------------------------------------------------------------

def format_text(entries: list[CaptionEntry]) -> str:
    """One caption per line, no timestamps."""
    return "\n".join(entry.text for entry in entries)


def format_json(entries: list[CaptionEntry], video_id: str) -> dict:
    """
    Build a JSON-serialisable dict from caption entries.

    Returns:
        A dict with keys: video_id, lang, segment_count, segments.
        Each segment has: text, start, duration.  `lang` is None for an
        empty transcript.
    """
    segments = [entry.to_dict() for entry in entries]
    return {
        "video_id": video_id,
        "lang": entries[0].lang if entries else None,
        "segment_count": len(segments),
        "segments": segments,
    }


# A new paragraph starts once a caption's start time is this many seconds
# past the start of the current paragraph.
_DOC_PARAGRAPH_INTERVAL_SECS = 30


def _seconds_to_mmss(seconds: float) -> str:
    """
    Convert a timestamp in seconds to MM:SS.

    Values above 59:59 keep counting minutes (3661.0 → "61:01").
    """
    total = int(seconds)
    mins, secs = divmod(total, 60)
    return f"{mins:02d}:{secs:02d}"


def format_doc(entries: list[CaptionEntry]) -> str:
    """
    Convert caption entries into a readable markdown document.

    Captions are joined with spaces into paragraphs, a new one roughly
    every 30 seconds, each prefixed with a bold **[MM:SS]** marker.
    Paragraphs are separated by blank lines.

    Returns:
        The markdown text, or "" for an empty transcript.
    """
    paragraphs: list[str] = []
    current_texts: list[str] = []
    paragraph_start: float | None = None

    for entry in entries:
        if paragraph_start is None:
            paragraph_start = entry.offset
            current_texts.append(entry.text)
        elif entry.offset - paragraph_start >= _DOC_PARAGRAPH_INTERVAL_SECS:
            timestamp = _seconds_to_mmss(paragraph_start)
            paragraphs.append(f"**[{timestamp}]** {' '.join(current_texts)}")
            paragraph_start = entry.offset
            current_texts = [entry.text]
        else:
            current_texts.append(entry.text)

    if current_texts and paragraph_start is not None:
        timestamp = _seconds_to_mmss(paragraph_start)
        paragraphs.append(f"**[{timestamp}]** {' '.join(current_texts)}")

    return "\n\n".join(paragraphs)


def format_xml(entries: list[CaptionEntry]) -> str:
    """
    Re-serialise entries into YouTube's timed-text shape.

    The output parses back through captions.parse_transcript_xml() to the
    same offsets, durations and texts.
    """
    lines = ['<?xml version="1.0" encoding="utf-8" ?><transcript>']
    for entry in entries:
        lines.append(
            f'<text start="{entry.offset!r}" dur="{entry.duration!r}">'
            f"{html.escape(entry.text)}</text>"
        )
    lines.append("</transcript>")
    return "\n".join(lines)


# ---------------------------------------------------------------------------
# High-level convenience function
# ---------------------------------------------------------------------------

def extract(
    video: str,
    lang: str | None = None,
    fmt: str = "text",
) -> str | dict:
    """
    One-call interface: parse URL → fetch transcript → format output.

    Args:
        video: A YouTube URL or raw video ID.
        lang:  Optional exact language code (e.g. "de").
        fmt:   "text", "json" (returns a dict), "doc" (markdown) or "xml".

    Raises:
        ValueError:      If fmt is not one of FORMATS.
        TranscriptError: (or subclass) on any extraction failure.
    """
    if fmt not in FORMATS:
        raise ValueError(f"Unknown format {fmt!r}; expected one of {', '.join(FORMATS)}")

    video_id = extract_video_id(video)
    entries = get_transcript(video_id, FetchConfig(lang=lang))
    return render(entries, video_id, fmt)


def render(entries: list[CaptionEntry], video_id: str, fmt: str) -> str | dict:
    """Apply the formatter named by `fmt` to already-fetched entries."""
    if fmt == "json":
        return format_json(entries, video_id)
    if fmt == "doc":
        return format_doc(entries)
    if fmt == "xml":
        return format_xml(entries)
    return format_text(entries)
