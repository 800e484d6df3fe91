"""
captions.py — Parse YouTube's timed-text XML into CaptionEntry objects.

The caption document is a flat list of

    <text start="1.5" dur="2.25">Hello &amp; world</text>

elements.  A regular expression is enough for that shape, and it keeps the
failure modes simple: anything that doesn't look like a <text> element is
ignored.
"""

from __future__ import annotations

import html
import logging

from ytranscript.errors import CaptionParseError
from ytranscript.models import CaptionEntry
from ytranscript.patterns import RE_DECIMAL, RE_XML_TRANSCRIPT

logger = logging.getLogger(__name__)


def decode_entities(text: str) -> str:
    """Decode named (&amp;, &quot;, ...) and numeric (&#39;, &#x27;) entities."""
    return html.unescape(text)


def _seconds(field: str, value: str) -> float:
    # Plain decimal text only; float() alone would take "1_0", " 2 ", "nan", "inf".
    if not RE_DECIMAL.fullmatch(value):
        raise CaptionParseError(field, value)
    return float(value)


def parse_transcript_xml(xml: str, lang: str) -> list[CaptionEntry]:
    """
    Extract every <text> element of a caption document, in document order.

    Args:
        xml:  The caption document body.
        lang: Language code stamped on every entry.

    Returns:
        A list of CaptionEntry; empty if the document has no <text> elements.

    Raises:
        CaptionParseError: If any start or dur attribute is not a number.
            One bad element fails the whole document.
    """
    entries = [
        CaptionEntry(
            text=decode_entities(content),
            duration=_seconds("dur", dur),
            offset=_seconds("start", start),
            lang=lang,
        )
        for start, dur, content in RE_XML_TRANSCRIPT.findall(xml)
    ]
    logger.debug("Parsed %d caption entries (%s)", len(entries), lang)
    return entries
