"""Typed HAR document model and decoder.

Exports:
    - decode: Read a HAR file into a Document
    - decode_text: Decode HAR JSON text into a Document
    - Document and its parts (Log, Entry, Request, Response, ...)
"""

from __future__ import annotations

from haricot.document.loader import decode, decode_text
from haricot.document.model import (
    Content,
    Creator,
    Document,
    Entry,
    Log,
    NameValue,
    PostData,
    Request,
    Response,
)

__all__ = [
    "decode",
    "decode_text",
    "Content",
    "Creator",
    "Document",
    "Entry",
    "Log",
    "NameValue",
    "PostData",
    "Request",
    "Response",
]
