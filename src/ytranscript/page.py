"""
page.py — Download a watch page and cut the captions config out of it.

The watch page is several hundred kilobytes of HTML with the player
configuration inlined as a JSON literal inside a <script> tag.  Instead of
parsing HTML or running JavaScript we search for fixed textual anchors.  The
`"captions":` object is always followed by `,"videoDetails` in the page
template, so everything between the two is the captions config.
"""

from __future__ import annotations

import logging

import httpx

from ytranscript.errors import (
    TooManyRequestsError,
    TranscriptNotAvailableError,
    TransportError,
    VideoUnavailableError,
)
from ytranscript.patterns import (
    CAPTCHA_MARKER,
    CAPTIONS_ANCHOR,
    CAPTIONS_TERMINATOR,
    PLAYABILITY_MARKER,
    RE_UNPLAYABLE,
    USER_AGENT,
    WATCH_URL,
)

logger = logging.getLogger(__name__)


def build_headers(lang: str | None = None) -> dict[str, str]:
    """Request headers for both the watch page and the caption document."""
    headers = {"User-Agent": USER_AGENT}
    if lang:
        headers["Accept-Language"] = lang
    return headers


async def http_get(client: httpx.AsyncClient, url: str, headers: dict[str, str]) -> str:
    """
    GET `url` and return the body as text.

    Raises:
        TransportError: On any httpx failure or a non-2xx response.
    """
    logger.debug("GET %s", url)
    try:
        response = await client.get(url, headers=headers, follow_redirects=True)
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        raise TransportError(
            url,
            reason=f"HTTP {exc.response.status_code}",
            status_code=exc.response.status_code,
        ) from exc
    except httpx.HTTPError as exc:
        raise TransportError(url, reason=str(exc) or type(exc).__name__) from exc
    return response.text


def extract_captions_json(html: str, video_id: str) -> str:
    """
    Cut the captions JSON fragment out of a watch page body.

    Checks run in a fixed order: the captcha marker wins over everything
    else, then the unavailable-video markers, then the captions anchor.

    Args:
        html:     Full watch page body.
        video_id: Used only for error context.

    Returns:
        The unparsed JSON text of the `"captions"` object, newlines removed.

    Raises:
        TooManyRequestsError:        The page is a captcha interstitial.
        VideoUnavailableError:       The video is removed or private.
        TranscriptNotAvailableError: The captions anchor is missing.
    """
    if CAPTCHA_MARKER in html:
        raise TooManyRequestsError()

    if PLAYABILITY_MARKER not in html or RE_UNPLAYABLE.search(html):
        raise VideoUnavailableError(video_id)

    _, anchor, rest = html.partition(CAPTIONS_ANCHOR)
    if not anchor:
        raise TranscriptNotAvailableError(video_id)

    fragment = rest.split(CAPTIONS_TERMINATOR, 1)[0]
    return fragment.replace("\n", "")


async def fetch_page(
    client: httpx.AsyncClient,
    video_id: str,
    lang: str | None = None,
) -> str:
    """
    Fetch the watch page for `video_id` and return its captions JSON text.

    Args:
        client:   An open httpx.AsyncClient (may be shared between calls).
        video_id: The 11-character video ID.
        lang:     Optional language code, sent as an Accept-Language hint.

    Raises:
        TransportError: The page request failed.
        Anything extract_captions_json() raises.
    """
    url = WATCH_URL.format(video_id=video_id)
    html = await http_get(client, url, build_headers(lang))
    logger.debug("Fetched watch page for %s (%d chars)", video_id, len(html))
    return extract_captions_json(html, video_id)
