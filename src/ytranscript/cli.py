"""
cli.py — Command-line wrapper around the ytranscript library.

Registered as the `ytranscript` console script in pyproject.toml.

Usage examples:
    ytranscript "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    ytranscript dQw4w9WgXcQ --lang de --format json
    ytranscript dQw4w9WgXcQ --format doc --output rick.md
"""

from __future__ import annotations

import json
import logging
import sys

import click

from ytranscript.errors import LanguageNotAvailableError, TranscriptError
from ytranscript.extractor import FORMATS, extract


@click.command()
@click.argument("video", metavar="URL_OR_ID")
@click.option(
    "--format", "-f",
    "fmt",                           # avoid shadowing the builtin "format"
    type=click.Choice(FORMATS, case_sensitive=False),
    default="text",
    show_default=True,
    help="Output format: plain text, JSON with timestamps, markdown document, or timed-text XML.",
)
@click.option(
    "--lang", "-l",
    default=None,
    help="Exact language code of the caption track (e.g. 'de'). Defaults to the video's first track.",
)
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write output to a file instead of stdout.",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Log each request and parsing step to stderr.",
)
def main(video: str, fmt: str, lang: str | None, output: str | None, verbose: bool) -> None:
    """
    Fetch the transcript of a YouTube video.

    URL_OR_ID can be a full YouTube URL or an 11-character video ID.
    """
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    try:
        result = extract(video, lang=lang, fmt=fmt.lower())
    except TranscriptError as exc:
        # No traceback: the message already says what went wrong.
        click.echo(f"Error: {exc.message}", err=True)
        if isinstance(exc, LanguageNotAvailableError) and exc.available_languages:
            click.echo(
                f"Try one of: {', '.join(exc.available_languages)}",
                err=True,
            )
        sys.exit(1)

    if isinstance(result, dict):
        text = json.dumps(result, indent=2, ensure_ascii=False)
    else:
        text = result

    if output:
        with open(output, "w", encoding="utf-8") as fh:
            fh.write(text)
            fh.write("\n")
        click.echo(f"Transcript written to {output}", err=True)
    else:
        click.echo(text)


if __name__ == "__main__":
    main()
