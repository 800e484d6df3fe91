"""
patterns.py — Regular expressions, markers and request constants.

These strings mirror what YouTube currently emits and accepts.  Changing any
of them changes which inputs are recognised, so treat them as pinned.
"""

from __future__ import annotations

import re

# Desktop Chrome identification.  YouTube serves a different (script-only)
# page to unknown clients, so the watch page is always requested with this.
USER_AGENT = (
    "Mozilla/5.0 (Macintosh; Intel Mac OS X 10_15_4) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/85.0.4183.83 Safari/537.36,gzip(gfe)"
)

WATCH_URL = "https://www.youtube.com/watch?v={video_id}&hl=en"

# Matches watch?v=, /v/, /e/, /embed/, youtu.be/ and domain/a/b/ID shapes.
# Group 1 is the 11-character video ID.
RE_YOUTUBE = re.compile(
    r"(?:youtube\.com/(?:[^/]+/.+/|(?:v|e(?:mbed)?)/|.*[?&]v=)|youtu\.be/)"
    r"([^\"&?/\s]{11})"
)

# One <text> element of the caption document.  Groups: start, dur, content.
RE_XML_TRANSCRIPT = re.compile(r'<text start="([^"]*)" dur="([^"]*)">([^<]*)</text>')

# Present only on the captcha interstitial.
CAPTCHA_MARKER = 'class="g-recaptcha"'

# Every playable watch page embeds a playabilityStatus.  Removed videos omit
# it or report status ERROR; private videos report LOGIN_REQUIRED with a
# "This video is private" reason.  Other LOGIN_REQUIRED pages (age gates)
# are left to the captions checks.
PLAYABILITY_MARKER = '"playabilityStatus":'
RE_UNPLAYABLE = re.compile(
    r'"playabilityStatus":\s*\{\s*"status":\s*"(?:ERROR"'
    r'|LOGIN_REQUIRED",\s*"reason":\s*"This video is private")'
)

# The captions object sits between these two anchors in the player response.
CAPTIONS_ANCHOR = '"captions":'
CAPTIONS_TERMINATOR = ',"videoDetails'

# start / dur attribute values: decimal seconds, e.g. "0", "18.8", ".5".
RE_DECIMAL = re.compile(r"[+-]?(?:\d+(?:\.\d*)?|\.\d+)")
