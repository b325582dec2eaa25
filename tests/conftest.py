"""Pytest configuration and fixtures for haricot tests."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any

import pytest

from haricot.document import Document


def _name_values(pairs: list[tuple[str, str]] | None) -> list[dict[str, str]]:
    return [{"name": name, "value": value} for name, value in pairs or []]


@pytest.fixture
def sample_har_entry():
    """Create a complete HAR entry dict for testing."""

    def _create_entry(
        method: str = "GET",
        url: str = "http://example.com/",
        status: int = 200,
        status_text: str = "OK",
        content: str = "",
        mime_type: str = "text/html",
        size: int | None = None,
        headers: list[tuple[str, str]] | None = None,
        response_headers: list[tuple[str, str]] | None = None,
        query_string: list[tuple[str, str]] | None = None,
        post_data: dict[str, Any] | None = None,
    ) -> dict[str, Any]:
        entry: dict[str, Any] = {
            "startedDateTime": "2018-03-01T10:00:00.000Z",
            "time": 12.5,
            "request": {
                "method": method,
                "url": url,
                "httpVersion": "HTTP/1.1",
                "headers": _name_values(headers),
                "queryString": _name_values(query_string),
                "cookies": [],
                "headersSize": -1,
                "bodySize": 0,
            },
            "response": {
                "status": status,
                "statusText": status_text,
                "httpVersion": "HTTP/1.1",
                "headers": _name_values(response_headers),
                "cookies": [],
                "content": {
                    "size": len(content.encode("utf-8")) if size is None else size,
                    "mimeType": mime_type,
                    "compression": 0,
                    "text": content,
                },
                "redirectURL": "",
                "headersSize": -1,
                "bodySize": -1,
                "_transferSize": 0,
            },
            "cache": {},
            "timings": {"send": 0, "wait": 10, "receive": 2.5},
            "serverIPAddress": "192.0.2.1",
            "connection": "443",
        }
        if post_data is not None:
            entry["request"]["postData"] = post_data
        return entry

    return _create_entry


@pytest.fixture
def har_data():
    """Wrap entries in a complete HAR document dict."""

    def _create_har(entries: list[dict[str, Any]] | None = None) -> dict[str, Any]:
        return {
            "log": {
                "version": "1.2",
                "creator": {"name": "WebInspector", "version": "537.36"},
                "pages": [],
                "entries": entries or [],
            }
        }

    return _create_har


@pytest.fixture
def make_doc(har_data):
    """Build a decoded Document from entry dicts."""

    def _create_doc(entries: list[dict[str, Any]] | None = None) -> Document:
        return Document.from_dict(har_data(entries))

    return _create_doc


@pytest.fixture
def temp_har_file(tmp_path: Path, har_data):
    """Write a HAR document to a temporary file."""

    def _create_file(entries: list[dict[str, Any]] | None = None, name: str = "capture.har") -> Path:
        path = tmp_path / name
        path.write_text(json.dumps(har_data(entries)), encoding="utf-8")
        return path

    return _create_file
