"""
test_api.py — Tests for the FastAPI web API endpoints.

Uses FastAPI's TestClient (backed by httpx) so tests run in-process without
a live server.  fetch_transcript() is mocked so nothing touches the network.
"""

from __future__ import annotations

from typing import Iterator
from unittest.mock import AsyncMock, patch

import httpx
import pytest
from fastapi.testclient import TestClient

from ytranscript.api import app
from ytranscript.errors import (
    LanguageNotAvailableError,
    TooManyRequestsError,
    TranscriptDisabledError,
    TransportError,
)
from ytranscript.models import CaptionEntry, FetchConfig


@pytest.fixture()
def client() -> Iterator[TestClient]:
    """A TestClient with the app lifespan (and its shared httpx client) running."""
    with TestClient(app) as test_client:
        yield test_client


_ENTRIES = [
    CaptionEntry(text="Hello world", duration=1.5, offset=0.0, lang="en"),
    CaptionEntry(text="Second line", duration=2.0, offset=1.5, lang="en"),
]


class TestHealth:
    """Tests for GET /health."""

    def test_health_returns_ok(self, client: TestClient) -> None:
        resp = client.get("/health")
        assert resp.status_code == 200
        assert resp.json() == {"status": "ok"}


class TestTranscriptEndpoint:
    """Tests for GET /transcript/{video_id} with mocked fetching."""

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_text_format(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.return_value = _ENTRIES

        resp = client.get("/transcript/dQw4w9WgXcQ")

        assert resp.status_code == 200
        assert resp.text == "Hello world\nSecond line"
        assert mock_fetch.await_args.args == ("dQw4w9WgXcQ", FetchConfig(lang=None))

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_json_format(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.return_value = _ENTRIES

        resp = client.get("/transcript/dQw4w9WgXcQ?format=json")

        assert resp.status_code == 200
        data = resp.json()
        assert data["video_id"] == "dQw4w9WgXcQ"
        assert data["lang"] == "en"
        assert data["segment_count"] == 2
        assert data["segments"][1] == {"text": "Second line", "start": 1.5, "duration": 2.0}

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_xml_format(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.return_value = _ENTRIES

        resp = client.get("/transcript/dQw4w9WgXcQ?format=xml")

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/xml")
        assert '<text start="0.0" dur="1.5">Hello world</text>' in resp.text

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_language_param(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.return_value = _ENTRIES

        resp = client.get("/transcript/dQw4w9WgXcQ?lang=fr")

        assert resp.status_code == 200
        assert mock_fetch.await_args.args == ("dQw4w9WgXcQ", FetchConfig(lang="fr"))

    def test_invalid_format_returns_422(self, client: TestClient) -> None:
        resp = client.get("/transcript/dQw4w9WgXcQ?format=srt")
        assert resp.status_code == 422

    def test_invalid_video_id_returns_400(self, client: TestClient) -> None:
        resp = client.get("/transcript/short")
        assert resp.status_code == 400
        assert "error" in resp.json()


class TestSharedHttpClient:
    """All requests reuse the httpx client opened by the lifespan."""

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_client_passed_to_fetch(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.return_value = _ENTRIES

        client.get("/transcript/dQw4w9WgXcQ")
        client.get("/transcript/dQw4w9WgXcQ?format=json")

        shared = app.state.http_client
        assert isinstance(shared, httpx.AsyncClient)
        assert not shared.is_closed
        assert [call.kwargs["client"] for call in mock_fetch.await_args_list] == [shared, shared]

    def test_client_closed_on_shutdown(self) -> None:
        with TestClient(app):
            shared = app.state.http_client
        assert shared.is_closed


class TestTranscriptErrors:
    """TranscriptError subclasses produce the status stored on them."""

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_language_not_available(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.side_effect = LanguageNotAvailableError("de", ["en", "fr"], "dQw4w9WgXcQ")

        resp = client.get("/transcript/dQw4w9WgXcQ?lang=de")

        assert resp.status_code == 400
        assert resp.json()["available_languages"] == ["en", "fr"]

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_transcript_disabled(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.side_effect = TranscriptDisabledError("dQw4w9WgXcQ")

        resp = client.get("/transcript/dQw4w9WgXcQ")

        assert resp.status_code == 404
        assert "disabled" in resp.json()["error"]

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_too_many_requests(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.side_effect = TooManyRequestsError()
        assert client.get("/transcript/dQw4w9WgXcQ").status_code == 429

    @patch("ytranscript.api.fetch_transcript", new_callable=AsyncMock)
    def test_transport_error(self, mock_fetch: AsyncMock, client: TestClient) -> None:
        mock_fetch.side_effect = TransportError("https://www.youtube.com/watch", status_code=503)
        assert client.get("/transcript/dQw4w9WgXcQ").status_code == 502
