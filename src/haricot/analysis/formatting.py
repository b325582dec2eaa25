"""Text helpers shared by the overview: previews, pair listings and URLs."""

from __future__ import annotations

from collections.abc import Collection, Iterable
from typing import NamedTuple
from urllib.parse import SplitResult, urlsplit, urlunsplit

from haricot.document.model import NameValue
from haricot.errors import UrlError

PREVIEW_LENGTH = 80
ELLIPSIS = "…"

# Indentation and label column width used by every listing line
INDENT = "        "
LABEL_WIDTH = 20

# Schemes that always carry a host
SPECIAL_SCHEMES = frozenset({"http", "https", "ws", "wss", "ftp"})

_FORBIDDEN_HOST_CHARS = frozenset(" <>^|\\\"`{}")

_ESCAPES = (("\n", "\\n"), ("\r", "\\r"), ("\t", "\\t"))


class ParsedUrl(NamedTuple):
    """A split URL and whether its query and fragment delimiters were present.

    ``urlsplit`` cannot tell ``http://h/p?`` from ``http://h/p``, so the
    delimiters are recorded separately.
    """

    parts: SplitResult
    has_query: bool
    has_fragment: bool


def escape_controls(text: str) -> str:
    """Render newline, carriage return and tab as two-character escapes."""
    for raw, escaped in _ESCAPES:
        text = text.replace(raw, escaped)
    return text


def cut_text(text: str, max_len: int = PREVIEW_LENGTH) -> str:
    """Build a one-line preview of a body.

    Control characters are escaped first, then the result is cut to
    ``max_len`` characters, stripped, and an ellipsis is appended.
    """
    return escape_controls(text)[:max_len].strip() + ELLIPSIS


def label_line(label: str, value: object) -> str:
    """Format an aligned ``label: value`` line."""
    return f"{INDENT}{label + ':':<{LABEL_WIDTH}} {value}"


def format_name_values(
    pairs: Iterable[NameValue],
    excludes: Collection[str] | None = None,
) -> list[str]:
    """List pairs sorted by name, hiding excluded names.

    The sort is stable, so pairs sharing a name keep their capture order.
    Exclusion is an exact, case-sensitive name match.

    Args:
        pairs: Headers or query-string parameters
        excludes: Names to hide, or None to show everything

    Returns:
        One formatted line per visible pair
    """
    lines = []
    for pair in sorted(pairs, key=lambda p: p.name):
        if excludes is not None and pair.name in excludes:
            continue
        lines.append(label_line(pair.name, pair.value))
    return lines


def parse_url(url: str) -> ParsedUrl:
    """Parse an absolute URL, rejecting anything a browser would not load.

    Raises:
        UrlError: If the URL has no scheme, a special scheme without host,
            an invalid port, or a malformed host
    """
    try:
        parts = urlsplit(url)
    except ValueError as e:
        raise UrlError(url, str(e)) from e

    if not parts.scheme:
        raise UrlError(url, "relative URL without a base")

    hostname = parts.hostname or ""
    if parts.scheme in SPECIAL_SCHEMES and not hostname:
        raise UrlError(url, "empty host")
    if any(ch in _FORBIDDEN_HOST_CHARS for ch in hostname):
        raise UrlError(url, "invalid character in host")

    try:
        parts.port
    except ValueError as e:
        raise UrlError(url, f"invalid port: {e}") from e

    before_fragment, hash_mark, _ = url.partition("#")
    return ParsedUrl(parts, "?" in before_fragment, bool(hash_mark))


def display_url(url: ParsedUrl, short_url: bool = True) -> str:
    """Render a parsed URL for display.

    Args:
        url: Result of ``parse_url``
        short_url: Drop the query component (the fragment is kept)

    Returns:
        URL with lower-cased host and ``/`` for an empty path on special schemes
    """
    parts = url.parts
    userinfo, sep, hostport = parts.netloc.rpartition("@")
    netloc = userinfo + sep + hostport.lower()
    path = parts.path
    if not path and parts.scheme in SPECIAL_SCHEMES:
        path = "/"
    text = urlunsplit((parts.scheme, netloc, path, "", ""))
    if url.has_query and not short_url:
        text += "?" + parts.query
    if url.has_fragment:
        text += "#" + parts.fragment
    return text
