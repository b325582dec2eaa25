"""Human-readable summary of every entry in a HAR document."""

from __future__ import annotations

import logging
from collections.abc import Collection

from haricot.analysis.formatting import (
    cut_text,
    display_url,
    format_name_values,
    label_line,
    parse_url,
)
from haricot.document.model import Document, Entry
from haricot.errors import UrlError

_LOGGER = logging.getLogger(__name__)

# Blank lines printed after each entry block
ENTRY_GAP = 3


def _format_entry(
    ix: int,
    entry: Entry,
    short_url: bool,
    query_string_excludes: Collection[str] | None,
    header_excludes: Collection[str] | None,
) -> list[str]:
    req = entry.request
    try:
        url = parse_url(req.url)
    except UrlError as e:
        raise UrlError(e.url, e.reason, entry_index=ix) from e

    lines = [f"{ix}/ {req.method} {display_url(url, short_url)}"]

    if req.query_string:
        lines.append("    Query String:")
        lines.extend(format_name_values(req.query_string, query_string_excludes))
    if req.headers:
        lines.append("    Headers:")
        lines.extend(format_name_values(req.headers, header_excludes))
    if req.post_data is not None:
        pd = req.post_data
        lines.append("    Post Data:")
        lines.append(label_line("Mime-Type", pd.mime_type))
        lines.append(label_line("Length", len(pd.text.encode("utf-8"))))
        lines.append(label_line("Text", cut_text(pd.text)))

    resp = entry.response
    lines.append(f"{ix}/ RESPONSE:                 {resp.status} {resp.status_text}")
    if resp.headers:
        lines.append("    Headers:")
        lines.extend(format_name_values(resp.headers, header_excludes))
    lines.append("    Content:")
    lines.append(label_line("Mime-Type", resp.content.mime_type))
    lines.append(label_line("Size", resp.content.size))
    lines.append(label_line("Text", cut_text(resp.content.text)))

    lines.extend([""] * ENTRY_GAP)
    return lines


def overview(
    doc: Document,
    short_url: bool = True,
    query_string_excludes: Collection[str] | None = None,
    header_excludes: Collection[str] | None = None,
) -> list[str]:
    """Summarize all entries of a document.

    The first line reports the entry count, followed by one block per entry
    in capture order. Nothing is returned if any entry fails: a request URL
    that cannot be parsed aborts the whole overview.

    Args:
        doc: Decoded HAR document
        short_url: Show request URLs without their query component. Query
            parameters are still listed separately.
        query_string_excludes: Query parameter names to hide from listings
        header_excludes: Header names to hide from request and response listings

    Returns:
        Output lines, without trailing newlines

    Raises:
        UrlError: If a request URL cannot be parsed
    """
    entries = doc.log.entries
    lines = [f"{len(entries)} entries"]
    for ix, entry in enumerate(entries):
        lines.extend(_format_entry(ix, entry, short_url, query_string_excludes, header_excludes))
        _LOGGER.debug("Formatted entry %d: %s %s", ix, entry.request.method, entry.request.url)
    return lines
