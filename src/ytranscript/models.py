"""
models.py — Plain data types passed in and out of the library.

    CaptionEntry     One caption line: text, start offset, duration, language.
    FetchConfig      Per-call options supplied by the caller.
    TrackDescriptor  One caption track advertised by the watch page.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class CaptionEntry:
    """
    A single caption line from a transcript.

    Attributes:
        text:     Caption text with HTML entities already decoded.
        duration: How long the line stays on screen, in seconds.
        offset:   When the line appears, in seconds from the start of the video.
        lang:     Language code of the track the line came from.
    """
    text: str
    duration: float
    offset: float
    lang: str

    def to_dict(self) -> dict:
        """Serialise in the {text, start, duration} shape used by the JSON formatter."""
        return {"text": self.text, "start": self.offset, "duration": self.duration}


@dataclass(frozen=True)
class FetchConfig:
    """Options for a single fetch.  `lang=None` means "the video's default track"."""
    lang: str | None = None


@dataclass(frozen=True)
class TrackDescriptor:
    """
    One caption track listed in the page's player config.

    Attributes:
        language_code: Exact code YouTube uses for the track (e.g. "en", "pt-BR").
        display_name:  Human-readable name (e.g. "English (auto-generated)").
        fetch_url:     Opaque URL of the XML caption document.
        is_generated:  True for automatic speech recognition ("asr") tracks.
    """
    language_code: str
    display_name: str
    fetch_url: str
    is_generated: bool = False
