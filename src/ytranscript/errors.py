"""
errors.py — Exception hierarchy for ytranscript.

Every failure the library can report is one of a closed set of exception
classes.  Each carries the context a caller needs to recover (the video ID,
the requested language, the list of languages that *are* available) as
plain attributes, plus an `http_status` so the FastAPI error handler can
translate library errors into HTTP responses without a mapping table.

Hierarchy:
    TranscriptError (base, 500)
    ├── InvalidVideoIdError (400)
    ├── TooManyRequestsError (429)
    ├── VideoUnavailableError (404)
    ├── TranscriptDisabledError (404)
    ├── TranscriptNotAvailableError (404)
    ├── LanguageNotAvailableError (400)
    ├── TransportError (502)
    └── CaptionParseError (502)

The first six are platform-level outcomes.  TransportError and
CaptionParseError describe failures of the plumbing (network, malformed
caption document) and are kept separate so callers never confuse a dropped
connection with "this video has no captions".
"""

from __future__ import annotations


# ---------------------------------------------------------------------------
# Base exception
# ---------------------------------------------------------------------------

class TranscriptError(Exception):
    """
    Root exception for all ytranscript errors.

    Attributes:
        message:     Human-readable description of what went wrong.
        http_status: Suggested HTTP status code for the API layer.
    """

    def __init__(self, message: str, http_status: int = 500) -> None:
        super().__init__(message)
        self.message = message
        self.http_status = http_status


# ---------------------------------------------------------------------------
# Platform-level outcomes
# ---------------------------------------------------------------------------

class InvalidVideoIdError(TranscriptError):
    """The input is neither an 11-character ID nor a recognised YouTube URL."""

    def __init__(self, value: str = "") -> None:
        super().__init__(
            message="Impossible to retrieve Youtube video ID.",
            http_status=400,
        )
        self.value = value


class TooManyRequestsError(TranscriptError):
    """
    YouTube answered with a captcha page instead of the watch page.

    The caller's IP is being rate-limited.  Nothing in this library retries;
    waiting a while (or switching IP) is up to the caller.
    """

    def __init__(self) -> None:
        super().__init__(
            message=(
                "YouTube is receiving too many requests from this IP and now "
                "requires solving a captcha to continue"
            ),
            http_status=429,
        )


class VideoUnavailableError(TranscriptError):
    """The video was removed, made private, or never existed."""

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"The video is no longer available ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class TranscriptDisabledError(TranscriptError):
    """The page loaded, but its player config has no caption renderer."""

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"Transcript is disabled on this video ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class TranscriptNotAvailableError(TranscriptError):
    """
    No caption track could be found for the video.

    Coarse on purpose: several upstream conditions land here because the
    page gives no way to tell them apart.
    """

    def __init__(self, video_id: str) -> None:
        super().__init__(
            message=f"No transcripts are available for this video ({video_id})",
            http_status=404,
        )
        self.video_id = video_id


class LanguageNotAvailableError(TranscriptError):
    """
    The video has captions, but none in the requested language.

    `available_languages` lists every language code the video does offer,
    in the platform's order, so callers can prompt for another choice.
    Maps to HTTP 400 because the resource exists, just not in that language.
    """

    def __init__(
        self,
        requested_language: str,
        available_languages: list[str],
        video_id: str,
    ) -> None:
        super().__init__(
            message=(
                f"No transcripts are available in {requested_language} for this "
                f"video ({video_id}). Available languages: {available_languages!r}"
            ),
            http_status=400,
        )
        self.requested_language = requested_language
        self.available_languages = list(available_languages)
        self.video_id = video_id


# ---------------------------------------------------------------------------
# Plumbing failures
# ---------------------------------------------------------------------------

class TransportError(TranscriptError):
    """
    An HTTP request failed: DNS, connection reset, timeout or a non-2xx status.

    The underlying httpx exception is chained as __cause__.
    """

    def __init__(self, url: str, reason: str = "", status_code: int | None = None) -> None:
        detail = f": {reason}" if reason else ""
        super().__init__(
            message=f"Request to {url} failed{detail}",
            http_status=502,
        )
        self.url = url
        self.status_code = status_code


class CaptionParseError(TranscriptError):
    """A caption element carried a start or duration that is not a number."""

    def __init__(self, field: str, value: str) -> None:
        super().__init__(
            message=f"Malformed caption document: {field}={value!r} is not a number",
            http_status=502,
        )
        self.field = field
        self.value = value
