"""Typed model of a HAR document.

All classes are frozen dataclasses built once by ``Document.from_dict`` and
never modified afterwards. Decoding is strict: every field is required and
must carry the expected JSON type, except ``request.postData`` which may be
absent. Fields the analysis never interprets (cookies, cache, timings, ...)
are kept as plain JSON values and accept anything, including ``null``.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from haricot.errors import ParseError

# Marker distinguishing "key absent" from a JSON null
_MISSING = object()


def _get(obj: dict[str, Any], key: str, path: str) -> Any:
    value = obj.get(key, _MISSING)
    if value is _MISSING:
        raise ParseError(f"Missing required field '{key}'", path)
    return value


def _object(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise ParseError(f"Expected object, got {_json_type(value)}", path)
    return value


def _json_type(value: Any) -> str:
    """Name a Python value by its JSON type, for error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, list):
        return "array"
    return "object"


def _str_field(obj: dict[str, Any], key: str, path: str) -> str:
    value = _get(obj, key, path)
    if not isinstance(value, str):
        raise ParseError(f"Expected string, got {_json_type(value)}", f"{path}.{key}")
    return value


def _int_field(obj: dict[str, Any], key: str, path: str) -> int:
    value = _get(obj, key, path)
    # bool is a subclass of int but never a valid JSON number
    if isinstance(value, bool) or not isinstance(value, int):
        raise ParseError(f"Expected integer, got {_json_type(value)}", f"{path}.{key}")
    return value


def _float_field(obj: dict[str, Any], key: str, path: str) -> float:
    value = _get(obj, key, path)
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise ParseError(f"Expected number, got {_json_type(value)}", f"{path}.{key}")
    return float(value)


def _list_field(obj: dict[str, Any], key: str, path: str) -> list[Any]:
    value = _get(obj, key, path)
    if not isinstance(value, list):
        raise ParseError(f"Expected array, got {_json_type(value)}", f"{path}.{key}")
    return value


def _passthrough(obj: dict[str, Any], key: str, path: str) -> Any:
    return _get(obj, key, path)


@dataclass(frozen=True)
class NameValue:
    """A header or query-string pair. Names are not unique."""

    name: str
    value: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> NameValue:
        obj = _object(data, path)
        return cls(name=_str_field(obj, "name", path), value=_str_field(obj, "value", path))


def _name_values(obj: dict[str, Any], key: str, path: str) -> tuple[NameValue, ...]:
    items = _list_field(obj, key, path)
    return tuple(NameValue.from_dict(item, f"{path}.{key}[{i}]") for i, item in enumerate(items))


@dataclass(frozen=True)
class Creator:
    """Name and version of the tool that produced the capture."""

    name: str
    version: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Creator:
        obj = _object(data, path)
        return cls(name=_str_field(obj, "name", path), version=_str_field(obj, "version", path))


@dataclass(frozen=True)
class PostData:
    """Body sent with a request."""

    mime_type: str
    text: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> PostData:
        obj = _object(data, path)
        return cls(
            mime_type=_str_field(obj, "mimeType", path),
            text=_str_field(obj, "text", path),
        )


@dataclass(frozen=True)
class Request:
    """Recorded HTTP request.

    Attributes:
        method: HTTP method
        url: Request URL as captured (URL grammar is checked by the overview)
        http_version: Protocol version string
        headers: Request headers in capture order
        query_string: Query parameters in capture order
        cookies: Untyped passthrough
        headers_size: Header byte count (informational)
        body_size: Body byte count (informational)
        post_data: Request body, or None when the request carried no body
    """

    method: str
    url: str
    http_version: str
    headers: tuple[NameValue, ...]
    query_string: tuple[NameValue, ...]
    cookies: Any
    headers_size: int
    body_size: int
    post_data: PostData | None = None

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Request:
        obj = _object(data, path)
        post_data = None
        if "postData" in obj:
            post_data = PostData.from_dict(obj["postData"], f"{path}.postData")
        return cls(
            method=_str_field(obj, "method", path),
            url=_str_field(obj, "url", path),
            http_version=_str_field(obj, "httpVersion", path),
            headers=_name_values(obj, "headers", path),
            query_string=_name_values(obj, "queryString", path),
            cookies=_passthrough(obj, "cookies", path),
            headers_size=_int_field(obj, "headersSize", path),
            body_size=_int_field(obj, "bodySize", path),
            post_data=post_data,
        )


@dataclass(frozen=True)
class Content:
    """Response body as recorded by the capture tool."""

    size: int
    mime_type: str
    compression: int
    text: str

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Content:
        obj = _object(data, path)
        return cls(
            size=_int_field(obj, "size", path),
            mime_type=_str_field(obj, "mimeType", path),
            compression=_int_field(obj, "compression", path),
            text=_str_field(obj, "text", path),
        )


@dataclass(frozen=True)
class Response:
    """Recorded HTTP response."""

    status: int
    status_text: str
    http_version: str
    headers: tuple[NameValue, ...]
    cookies: Any
    content: Content
    redirect_url: str
    headers_size: int
    body_size: int
    transfer_size: Any

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Response:
        obj = _object(data, path)
        return cls(
            status=_int_field(obj, "status", path),
            status_text=_str_field(obj, "statusText", path),
            http_version=_str_field(obj, "httpVersion", path),
            headers=_name_values(obj, "headers", path),
            cookies=_passthrough(obj, "cookies", path),
            content=Content.from_dict(_get(obj, "content", path), f"{path}.content"),
            redirect_url=_str_field(obj, "redirectURL", path),
            headers_size=_int_field(obj, "headersSize", path),
            body_size=_int_field(obj, "bodySize", path),
            transfer_size=_passthrough(obj, "_transferSize", path),
        )


@dataclass(frozen=True)
class Entry:
    """One request/response exchange."""

    started_date_time: str
    time: float
    request: Request
    response: Response
    cache: Any
    timings: Any
    server_ip_address: Any
    connection: Any

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Entry:
        obj = _object(data, path)
        return cls(
            started_date_time=_str_field(obj, "startedDateTime", path),
            time=_float_field(obj, "time", path),
            request=Request.from_dict(_get(obj, "request", path), f"{path}.request"),
            response=Response.from_dict(_get(obj, "response", path), f"{path}.response"),
            cache=_passthrough(obj, "cache", path),
            timings=_passthrough(obj, "timings", path),
            server_ip_address=_passthrough(obj, "serverIPAddress", path),
            connection=_passthrough(obj, "connection", path),
        )


@dataclass(frozen=True)
class Log:
    """The ``log`` object. Entry order is capture order."""

    version: str
    creator: Creator
    pages: tuple[Any, ...]
    entries: tuple[Entry, ...]

    @classmethod
    def from_dict(cls, data: Any, path: str) -> Log:
        obj = _object(data, path)
        entries = _list_field(obj, "entries", path)
        return cls(
            version=_str_field(obj, "version", path),
            creator=Creator.from_dict(_get(obj, "creator", path), f"{path}.creator"),
            pages=tuple(_list_field(obj, "pages", path)),
            entries=tuple(
                Entry.from_dict(entry, f"{path}.entries[{i}]") for i, entry in enumerate(entries)
            ),
        )


@dataclass(frozen=True)
class Document:
    """Root of a decoded HAR file."""

    log: Log

    @classmethod
    def from_dict(cls, data: Any) -> Document:
        """Build a document from parsed JSON.

        Raises:
            ParseError: If a required field is missing or has the wrong type
        """
        obj = _object(data, "root")
        return cls(log=Log.from_dict(_get(obj, "log", "root"), "log"))
