"""
tracks.py — Pick a caption track out of the page's captions config.

The fragment returned by page.extract_captions_json() looks like:

    {"playerCaptionsTracklistRenderer": {
        "captionTracks": [
            {"baseUrl": "...", "name": {"simpleText": "English"},
             "languageCode": "en", "kind": "asr", ...},
            ...
        ], ...}}
"""

from __future__ import annotations

import json
import logging

from ytranscript.errors import (
    LanguageNotAvailableError,
    TranscriptDisabledError,
    TranscriptNotAvailableError,
)
from ytranscript.models import TrackDescriptor

logger = logging.getLogger(__name__)


def _display_name(name: object) -> str | None:
    # YouTube uses either {"simpleText": ...} or {"runs": [{"text": ...}, ...]}.
    if not isinstance(name, dict):
        return None
    if isinstance(name.get("simpleText"), str):
        return name["simpleText"]
    runs = name.get("runs")
    if isinstance(runs, list) and runs:
        texts = [run.get("text") if isinstance(run, dict) else None for run in runs]
        if all(isinstance(text, str) for text in texts):
            return "".join(texts)
    return None


def _to_descriptor(track: object) -> TrackDescriptor | None:
    """Build a TrackDescriptor, or None if a required field is missing."""
    if not isinstance(track, dict):
        return None

    language_code = track.get("languageCode")
    fetch_url = track.get("baseUrl")
    display_name = _display_name(track.get("name"))
    if not (isinstance(language_code, str) and isinstance(fetch_url, str) and display_name is not None):
        return None

    return TrackDescriptor(
        language_code=language_code,
        display_name=display_name,
        fetch_url=fetch_url,
        is_generated=track.get("kind") == "asr",
    )


def list_tracks(json_text: str, video_id: str) -> list[TrackDescriptor]:
    """
    Enumerate the caption tracks in a captions JSON fragment.

    Tracks missing a language code, display name or base URL are skipped.

    Returns:
        Descriptors in the page's order (never empty).

    Raises:
        TranscriptDisabledError:     The JSON is unparseable or has no
                                     playerCaptionsTracklistRenderer.
        TranscriptNotAvailableError: The renderer lists no usable tracks.
    """
    try:
        captions = json.loads(json_text)
    except ValueError as exc:
        raise TranscriptDisabledError(video_id) from exc

    renderer = captions.get("playerCaptionsTracklistRenderer") if isinstance(captions, dict) else None
    if not isinstance(renderer, dict):
        raise TranscriptDisabledError(video_id)

    raw_tracks = renderer.get("captionTracks")
    if not isinstance(raw_tracks, list):
        raise TranscriptNotAvailableError(video_id)

    tracks: list[TrackDescriptor] = []
    for raw in raw_tracks:
        descriptor = _to_descriptor(raw)
        if descriptor is None:
            logger.warning("Skipping malformed caption track for %s: %r", video_id, raw)
            continue
        tracks.append(descriptor)

    if not tracks:
        raise TranscriptNotAvailableError(video_id)

    logger.debug(
        "Video %s has tracks: %s",
        video_id,
        ", ".join(t.language_code for t in tracks),
    )
    return tracks


def select_track(
    json_text: str,
    requested_lang: str | None,
    video_id: str,
) -> TrackDescriptor:
    """
    Choose the caption track to download.

    With no requested language the first track wins (YouTube lists the
    original / default language first).  Otherwise the language code must
    match exactly: "en" and "en-US" are different tracks.

    Raises:
        LanguageNotAvailableError: No track has the requested code.
        Anything list_tracks() raises.
    """
    tracks = list_tracks(json_text, video_id)

    if requested_lang is None:
        return tracks[0]

    for track in tracks:
        if track.language_code == requested_lang:
            return track

    raise LanguageNotAvailableError(
        requested_lang,
        [t.language_code for t in tracks],
        video_id,
    )
