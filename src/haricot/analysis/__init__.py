"""Analysis operations over a decoded HAR document.

Exports:
    - count_entries: Number of entries in the document
    - overview: Per-entry human-readable summary
    - extract_body: Raw or expanded body of one entry
    - expand_private_data: Decode percent-encoded private data in a JSON body
"""

from __future__ import annotations

from haricot.analysis.body import BodyKind, NoPostData, extract_body, get_entry
from haricot.analysis.formatting import cut_text, display_url, escape_controls, format_name_values, parse_url
from haricot.analysis.overview import overview
from haricot.analysis.privacy import PRIVATE_DATA_PATHS, expand_private_data, render_json
from haricot.document.model import Document


def count_entries(doc: Document) -> int:
    """Return the number of entries in a document."""
    return len(doc.log.entries)


__all__ = [
    "count_entries",
    "overview",
    "extract_body",
    "get_entry",
    "BodyKind",
    "NoPostData",
    "expand_private_data",
    "render_json",
    "PRIVATE_DATA_PATHS",
    "cut_text",
    "display_url",
    "escape_controls",
    "format_name_values",
    "parse_url",
]
