"""Extraction of a single request or response body."""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass

from haricot.analysis.privacy import expand_private_data, render_json
from haricot.document.model import Document, Entry
from haricot.errors import EntryIndexError

_LOGGER = logging.getLogger(__name__)


class BodyKind(str, enum.Enum):
    """Which side of an exchange to extract."""

    REQUEST = "req"
    RESPONSE = "resp"


@dataclass(frozen=True)
class NoPostData:
    """Outcome for a request that carried no body.

    This is a normal result, distinct from an empty body and from errors.
    """

    entry_index: int

    @property
    def message(self) -> str:
        return f"Request {self.entry_index} has no post data"

    def __str__(self) -> str:
        return self.message


def get_entry(doc: Document, entry_index: int) -> Entry:
    """Return the entry at a 0-based position.

    Raises:
        EntryIndexError: If the position is negative or past the end
    """
    entries = doc.log.entries
    if not 0 <= entry_index < len(entries):
        raise EntryIndexError(entry_index, len(entries))
    return entries[entry_index]


def extract_body(
    doc: Document,
    entry_index: int,
    which: BodyKind | str,
    expand_private: bool = False,
) -> str | NoPostData:
    """Get the raw or expanded body of one entry.

    Args:
        doc: Decoded HAR document
        entry_index: 0-based entry number
        which: ``BodyKind.REQUEST`` or ``BodyKind.RESPONSE`` (or "req"/"resp")
        expand_private: Expand percent-encoded private data and return
            formatted JSON instead of the raw text

    Returns:
        Body text, or ``NoPostData`` for a request without a body

    Raises:
        EntryIndexError: If ``entry_index`` is out of range
        ExpansionError: If expansion was requested and failed
        ValueError: If ``which`` is not a known body kind
    """
    which = BodyKind(which)
    entry = get_entry(doc, entry_index)

    if which is BodyKind.REQUEST:
        if entry.request.post_data is None:
            _LOGGER.info("Request %d has no post data", entry_index)
            return NoPostData(entry_index)
        text = entry.request.post_data.text
    else:
        text = entry.response.content.text

    if not expand_private:
        return text
    return render_json(expand_private_data(text))
