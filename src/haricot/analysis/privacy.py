"""Expansion of percent-encoded private data embedded in JSON bodies.

Some device management APIs send a JSON body in which one field holds
another JSON document, percent-encoded into a string. Only a fixed set of
field paths is searched, in order; the first one holding a non-null value
is expanded and the rest are ignored.
"""

from __future__ import annotations

import copy
import json
import logging
from typing import Any
from urllib.parse import unquote_to_bytes

from haricot.document.loader import find_unencodable, reject_constant
from haricot.errors import ExpansionError

_LOGGER = logging.getLogger(__name__)

# Known locations of private data, tried in order
PRIVATE_DATA_PATHS: tuple[tuple[str, ...], ...] = (
    ("AddDevice", "DevicePrivateData"),
    ("Resource", "Device", "DevicePrivateData"),
)


def _lookup(data: Any, path: tuple[str, ...]) -> Any:
    """Follow ``path`` through nested objects; None if any step is missing."""
    for key in path:
        if not isinstance(data, dict):
            return None
        data = data.get(key)
    return data


def _replace(data: dict[str, Any], path: tuple[str, ...], value: Any) -> None:
    for key in path[:-1]:
        data = data[key]
    data[path[-1]] = value


def _check_encodable(value: Any, prefix: str = "") -> None:
    bad_path = find_unencodable(value, prefix)
    if bad_path is not None:
        raise ExpansionError("string contains a lone surrogate", bad_path)


def decode_private_value(value: str, path: str = "") -> Any:
    """Percent-decode a string, then decode it as UTF-8 JSON.

    Raises:
        ExpansionError: If the bytes are not UTF-8, the text is not strict JSON,
            or a decoded string is not valid Unicode
    """
    raw = unquote_to_bytes(value)
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as e:
        raise ExpansionError(f"invalid UTF-8 after percent-decoding: {e.reason}", path) from e
    try:
        decoded = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise ExpansionError(f"invalid nested JSON: {e.msg}", path) from e
    except ValueError as e:
        raise ExpansionError(f"invalid nested JSON: {e}", path) from e
    _check_encodable(decoded, path)
    return decoded


def expand_private_data(text: str) -> Any:
    """Parse a JSON body and expand its private data field.

    Args:
        text: Raw body text

    Returns:
        Parsed body, with the private data string replaced by the JSON value
        it encodes. Returned unchanged when no known path holds a value.

    Raises:
        ExpansionError: If the body or the private data is not strict JSON

    Example:
        >>> expand_private_data('{"AddDevice":{"DevicePrivateData":"%7B%22k%22%3A1%7D"}}')
        {'AddDevice': {'DevicePrivateData': {'k': 1}}}
    """
    try:
        doc = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise ExpansionError(f"body is not valid JSON: {e.msg} at line {e.lineno} column {e.colno}") from e
    except ValueError as e:
        raise ExpansionError(f"body is not valid JSON: {e}") from e
    _check_encodable(doc)

    for path in PRIVATE_DATA_PATHS:
        value = _lookup(doc, path)
        if value is None:
            continue
        dotted = ".".join(path)
        if not isinstance(value, str):
            _LOGGER.debug("Private data at %s is already structured, leaving as-is", dotted)
            return doc
        expanded = copy.deepcopy(doc)
        _replace(expanded, path, decode_private_value(value, dotted))
        _LOGGER.debug("Expanded private data at %s", dotted)
        return expanded

    _LOGGER.debug("No private data found")
    return doc


def render_json(value: Any) -> str:
    """Format a JSON value for display."""
    return json.dumps(value, indent=2, ensure_ascii=False)
