"""
api.py — FastAPI REST API for ytranscript.

Endpoints:
    GET /transcript/{video_id}  — Fetch a transcript as text, JSON, markdown or XML.
    GET /health                 — Simple health-check for load balancers / monitoring.

Run with:
    uvicorn ytranscript.api:app

A single exception handler turns any TranscriptError into an HTTP response
using the status code stored on the exception.  All requests share one
httpx.AsyncClient for connection pooling; it is opened and closed by the
application lifespan.
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncIterator

import httpx
from fastapi import FastAPI, Query, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response

from ytranscript.errors import LanguageNotAvailableError, TranscriptError
from ytranscript.extractor import DEFAULT_TIMEOUT_SECS, fetch_transcript, render
from ytranscript.identifier import extract_video_id
from ytranscript.models import FetchConfig


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    async with httpx.AsyncClient(timeout=DEFAULT_TIMEOUT_SECS, follow_redirects=True) as client:
        app.state.http_client = client
        yield


app = FastAPI(
    title="ytranscript API",
    description="Fetch YouTube video transcripts as plain text, JSON, markdown or timed-text XML.",
    version="0.1.0",
    lifespan=lifespan,
)


# ---------------------------------------------------------------------------
# Global error handler
# ---------------------------------------------------------------------------

@app.exception_handler(TranscriptError)
async def transcript_error_handler(request: Request, exc: TranscriptError) -> JSONResponse:
    """
    Translate any TranscriptError (or subclass) into an HTTP error response.

    LanguageNotAvailableError also returns the codes the video does offer.
    """
    content: dict = {"error": exc.message}
    if isinstance(exc, LanguageNotAvailableError):
        content["available_languages"] = exc.available_languages
    return JSONResponse(status_code=exc.http_status, content=content)


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

# response_model=None because the return type depends on `format`.
@app.get("/transcript/{video_id}", response_model=None)
async def get_transcript(
    request: Request,
    video_id: str,
    format: str = Query(
        default="text",
        description="Output format: 'text', 'json' (timestamps), 'doc' (markdown) or 'xml'.",
        pattern="^(text|json|doc|xml)$",
    ),
    lang: str | None = Query(
        default=None,
        description="Exact language code of the caption track (e.g. 'de').",
    ),
) -> Response:
    """
    Fetch the transcript for a single YouTube video.

    **video_id** is the 11-character YouTube video identifier
    (e.g. `dQw4w9WgXcQ`).
    """
    video_id = extract_video_id(video_id)
    entries = await fetch_transcript(
        video_id,
        FetchConfig(lang=lang or None),
        client=request.app.state.http_client,
    )

    result = render(entries, video_id, format)
    if isinstance(result, dict):
        return JSONResponse(content=result)
    if format == "xml":
        return Response(content=result, media_type="application/xml")
    return PlainTextResponse(content=result)


@app.get("/health")
async def health() -> dict:
    """Returns HTTP 200 with {"status": "ok"}."""
    return {"status": "ok"}
