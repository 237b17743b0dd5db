#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/wpreadme/utils/sanitize.py
"""Sanitization and format validation primitives.

Every string that enters a :class:`~wpreadme.document.ReadmeDocument` or is
interpolated into generated readme text passes through :func:`sanitize` with
the cap for its field. :func:`validate` implements the small set of format
checks used for usernames, tags, version strings, URLs and e-mail addresses.

Sanitization steps, in order:

1. Non-string input yields ``""``.
2. Trim, then truncate to ``max_length`` characters.
3. Replace ``< > " ' &`` with HTML entities. An ``&`` that already starts one
   of those entities is left alone, so sanitizing twice is a no-op.
4. Turn whitespace control characters into spaces and drop all other C0/C1
   control characters.
5. Collapse runs of whitespace to a single space and trim again.
6. If entity expansion pushed the result past ``max_length``, cut it back
   without splitting an entity.

Examples
--------
    >>> sanitize("  <b>Tom & Jerry</b>  ")
    '&lt;b&gt;Tom &amp; Jerry&lt;/b&gt;'
    >>> sanitize("line one\\nline two", 12)
    'line one lin'
    >>> validate("1.2.3", "version")
    True

"""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import urlsplit

from wpreadme.constants import DEFAULT_SANITIZE_MAX_LENGTH

_ENTITY_MAP = {
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#x27;",
    "&": "&amp;",
}

# An ampersand that does not already begin one of the entities above
_UNSAFE_PATTERN = re.compile(r"[<>\"']|&(?!(?:lt|gt|quot|amp|#x27);)|[\x00-\x1f\x7f-\x9f]")
_WHITESPACE_CONTROLS = frozenset("\t\n\r\x0b\x0c")
_WHITESPACE_RUN = re.compile(r"\s+")

_VALIDATION_PATTERNS: dict[str, re.Pattern[str]] = {
    "username": re.compile(r"[a-zA-Z0-9_-]{1,50}"),
    "version": re.compile(r"[0-9]+\.[0-9]+\.[0-9]+"),
    "tag": re.compile(r"[a-zA-Z0-9_-]{1,30}"),
    "email": re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+"),
}

_URL_SCHEME = re.compile(r"[a-zA-Z][a-zA-Z0-9+.-]*")
_NETWORK_SCHEMES = frozenset({"http", "https", "ftp", "ftps", "ws", "wss"})


def _replace_unsafe(match: re.Match[str]) -> str:
    char = match.group(0)
    if char in _ENTITY_MAP:
        return _ENTITY_MAP[char]
    if char in _WHITESPACE_CONTROLS:
        return " "
    return ""


def _escape_and_normalize(text: str) -> str:
    escaped = _UNSAFE_PATTERN.sub(_replace_unsafe, text)
    return _WHITESPACE_RUN.sub(" ", escaped).strip()


def sanitize(value: Any, max_length: int = DEFAULT_SANITIZE_MAX_LENGTH) -> str:
    """Sanitize a single field value.

    Parameters
    ----------
    value : Any
        Value to sanitize. Anything other than ``str`` yields an empty string.
    max_length : int, default 1000
        Maximum length of the result. The source text is truncated to this
        length before escaping.

    Returns
    -------
    str
        Escaped, whitespace-normalized text no longer than ``max_length``.

    """
    if not isinstance(value, str) or max_length <= 0:
        return ""

    result = _escape_and_normalize(value.strip()[:max_length])
    if len(result) <= max_length:
        return result

    clipped = result[:max_length]
    amp_index = clipped.rfind("&")
    if amp_index != -1 and ";" not in clipped[amp_index:]:
        clipped = clipped[:amp_index]
    return clipped.rstrip()


def _is_absolute_url(value: str) -> bool:
    if not value or any(ch.isspace() for ch in value):
        return False
    try:
        parts = urlsplit(value)
    except ValueError:
        return False
    if not parts.scheme or not _URL_SCHEME.fullmatch(parts.scheme):
        return False
    if parts.scheme.lower() in _NETWORK_SCHEMES:
        # "http:example.com" names a host even without the slashes
        return bool(parts.netloc or parts.path.strip("/"))
    return bool(parts.netloc or parts.path)


def validate(value: Any, kind: str) -> bool:
    """Check a value against one of the known formats.

    Parameters
    ----------
    value : Any
        Value to check. Non-string values fail every known format.
    kind : str
        One of ``username``, ``version``, ``tag``, ``url`` or ``email``.
        Unknown kinds always validate.

    Returns
    -------
    bool
        True if the value matches the format, or if ``kind`` is unknown.

    """
    if kind == "url":
        return isinstance(value, str) and _is_absolute_url(value)

    pattern = _VALIDATION_PATTERNS.get(kind)
    if pattern is None:
        return True
    return isinstance(value, str) and pattern.fullmatch(value) is not None
