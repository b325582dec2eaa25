"""Reading HAR files into the typed document model."""

from __future__ import annotations

import gzip
import json
import logging
from pathlib import Path
from typing import Any

from haricot.document.model import Document
from haricot.errors import ParseError

_LOGGER = logging.getLogger(__name__)


def reject_constant(name: str) -> Any:
    """Refuse the non-standard literals NaN, Infinity and -Infinity."""
    raise ValueError(f"{name} is not a valid JSON value")


def find_unencodable(value: Any, path: str = "") -> str | None:
    """Return the path of the first string that cannot be encoded as UTF-8.

    JSON escapes such as ``"\\ud800"`` decode to lone surrogates, which are
    not valid Unicode text. A bad object key is reported at the object holding it.
    """
    if isinstance(value, str):
        try:
            value.encode("utf-8")
        except UnicodeEncodeError:
            return path or "<root>"
    elif isinstance(value, dict):
        for key, item in value.items():
            if find_unencodable(key) is not None:
                return path or "<root>"
            found = find_unencodable(item, f"{path}.{key}" if path else key)
            if found is not None:
                return found
    elif isinstance(value, list):
        for i, item in enumerate(value):
            found = find_unencodable(item, f"{path}[{i}]")
            if found is not None:
                return found
    return None


def _read_text(path: Path) -> str:
    """Read a HAR file as UTF-8 text, gunzipping ``.gz`` files.

    Raises:
        ParseError: If the file cannot be read or is not valid UTF-8
    """
    path_str = str(path)
    try:
        if path_str.endswith(".gz"):
            with gzip.open(path, "rt", encoding="utf-8") as f:
                return f.read()
        with open(path, encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        raise ParseError("File not found", path_str) from e
    except PermissionError as e:
        raise ParseError("Permission denied", path_str) from e
    except UnicodeDecodeError as e:
        raise ParseError(f"File is not valid UTF-8: {e.reason}", path_str) from e
    except (OSError, EOFError) as e:
        raise ParseError(f"Cannot read file: {e}", path_str) from e


def decode_text(text: str, source: str = "<string>") -> Document:
    """Decode HAR JSON text.

    Args:
        text: HAR document as JSON text
        source: Name used in error messages

    Returns:
        Decoded document

    Raises:
        ParseError: If the text is not valid JSON or not a valid HAR structure
    """
    try:
        data = json.loads(text, parse_constant=reject_constant)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON: {e.msg} at line {e.lineno} column {e.colno}", source) from e
    except ValueError as e:
        raise ParseError(f"Invalid JSON: {e}", source) from e

    bad_path = find_unencodable(data)
    if bad_path is not None:
        raise ParseError("Invalid JSON: string contains a lone surrogate", bad_path)
    return Document.from_dict(data)


def decode(path: Path | str) -> Document:
    """Read and decode a HAR file.

    The whole file is read into memory. Files ending in ``.gz`` are
    decompressed first.

    Args:
        path: Path to a ``.har`` or ``.har.gz`` file

    Returns:
        Decoded document

    Raises:
        ParseError: If the file is unreadable, malformed, or structurally invalid

    Example:
        >>> # doc = decode("capture.har")
        >>> # len(doc.log.entries)
    """
    path = Path(path)
    _LOGGER.debug("Decoding HAR file: %s", path)
    doc = decode_text(_read_text(path), str(path))
    _LOGGER.info("Loaded %s with %d entries", path, len(doc.log.entries))
    return doc
