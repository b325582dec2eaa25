"""HAR file analysis library.

This library provides tools for:
- Decoding HAR files into an immutable, typed document model
- Summarizing every request/response exchange of a capture
- Extracting request and response bodies, expanding percent-encoded
  private data nested in JSON bodies

The analysis core has ZERO dependencies (only stdlib).
Optional features require: typer (cli).

Example usage:
    from haricot import decode, overview, extract_body

    doc = decode("capture.har")
    for line in overview(doc):
        print(line)
    print(extract_body(doc, 0, "resp", expand_private=True))
"""

from __future__ import annotations

__version__ = "0.3.0"

# Re-export public API for convenience
from haricot.analysis import (
    BodyKind,
    NoPostData,
    count_entries,
    expand_private_data,
    extract_body,
    overview,
)
from haricot.document import Document, decode, decode_text
from haricot.errors import (
    EntryIndexError,
    ExpansionError,
    HaricotError,
    ParseError,
    SettingsError,
    UrlError,
)

__all__ = [
    "__version__",
    "BodyKind",
    "Document",
    "NoPostData",
    "count_entries",
    "decode",
    "decode_text",
    "expand_private_data",
    "extract_body",
    "overview",
    "EntryIndexError",
    "ExpansionError",
    "HaricotError",
    "ParseError",
    "SettingsError",
    "UrlError",
]
