"""Sanitization primitives for untrusted message content.

Every piece of token-derived text goes through these before it reaches an
output node:

- escape_html: entity-escape markup-significant characters
- sanitize_url: allow only http(s) hrefs, reject smuggled dangerous schemes
- sanitize_text: strip control characters

Example:
    >>> from charla.sanitize import escape_html, sanitize_url
    >>> escape_html("<b>hi</b>")
    '&lt;b&gt;hi&lt;&#x2F;b&gt;'
    >>> sanitize_url("javascript:alert(1)") is None
    True
    >>> sanitize_url("https://example.com")
    'https://example.com/'

Thread Safety:
    All functions are pure. Safe to call from any thread.

"""

import re
from urllib.parse import unquote

from charla.utils.urls import split_url

_HTML_ENTITIES = str.maketrans(
    {
        "&": "&amp;",
        "<": "&lt;",
        ">": "&gt;",
        '"': "&quot;",
        "'": "&#x27;",
        "/": "&#x2F;",
        "`": "&#x60;",
        "=": "&#x3D;",
    }
)

# C0 controls except tab (\x09), newline (\x0a) and carriage return (\x0d), plus DEL
_CONTROL_CHARS_PATTERN = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\x7f]")

# Any C0 control or space; never valid inside an href we hand out
_URL_FORBIDDEN_PATTERN = re.compile("[\x00-\x20\x7f]")

_DANGEROUS_SCHEMES = frozenset(("javascript:", "data:", "vbscript:"))

_ALLOWED_SCHEMES = frozenset(("http", "https"))

# Rounds of percent-decoding applied when looking for smuggled schemes
_MAX_DECODE_ROUNDS = 4


def escape_html(text: str) -> str:
    """Escape ``& < > " ' / ` =`` as HTML entities.

    Args:
        text: Untrusted text

    Returns:
        Text safe to place in element content or quoted attributes

    Examples:
        >>> escape_html("a=b & 'c'")
        'a&#x3D;b &amp; &#x27;c&#x27;'
    """
    if not text:
        return ""
    return text.translate(_HTML_ENTITIES)


def _contains_dangerous_scheme(href: str) -> bool:
    """Check href and its percent-decoded forms for dangerous schemes."""
    candidate = href.lower()
    for _ in range(_MAX_DECODE_ROUNDS):
        if any(scheme in candidate for scheme in _DANGEROUS_SCHEMES):
            return True
        decoded = unquote(candidate).lower()
        if decoded == candidate:
            return False
        candidate = decoded
    # Still changing after the last round: treat as hostile
    return True


def sanitize_url(url: str) -> str | None:
    """Validate a URL for use as a link target.

    The URL must parse, use exactly the http or https scheme and name a host.
    Hrefs that contain ``javascript:``, ``data:`` or ``vbscript:`` anywhere
    (case-insensitive, also after percent-decoding) are rejected.

    Args:
        url: Candidate URL

    Returns:
        Normalized href, or None if the URL is not safe to link to.
    """
    if not url:
        return None

    url = url.strip(" ")
    if _URL_FORBIDDEN_PATTERN.search(url):
        return None

    try:
        parts = split_url(url)
    except ValueError:
        return None

    if parts.protocol not in _ALLOWED_SCHEMES or not parts.domain:
        return None

    if _contains_dangerous_scheme(parts.href):
        return None

    return parts.href


def sanitize_text(text: str) -> str:
    """Strip control characters, keeping tab, newline and carriage return.

    Args:
        text: Untrusted text

    Returns:
        Text without NUL, BEL, ESC, DEL and the other C0 controls.
    """
    if not text:
        return ""
    return _CONTROL_CHARS_PATTERN.sub("", text)


__all__ = [
    "escape_html",
    "sanitize_text",
    "sanitize_url",
]
