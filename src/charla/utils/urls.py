"""URL decomposition and normalization.

Turns a matched URL candidate into the absolute ``href`` form a browser
would produce: lowercase scheme and host, "/" for an empty path, and
percent-encoding for characters that are not allowed in a URL.

Example:
    >>> from charla.utils.urls import split_url
    >>> split_url("HTTPS://Example.com")
    SplitUrl(href='https://example.com/', protocol='https', domain='example.com', path='/')
"""

from __future__ import annotations

from typing import NamedTuple
from urllib.parse import quote, urlsplit, urlunsplit

# RFC 3986 reserved + unreserved characters, plus "%" for already-encoded input
_URL_SAFE = "/:?#[]@!$&'()*+,;=-_.~%"


class SplitUrl(NamedTuple):
    """Normalized URL and its parts."""

    href: str
    protocol: str
    domain: str
    path: str


def split_url(url: str) -> SplitUrl:
    """Decompose and normalize an absolute URL.

    Args:
        url: Absolute URL text (scheme included)

    Returns:
        SplitUrl with ``path`` holding path + query + fragment.

    Raises:
        ValueError: If the URL cannot be decomposed (bad IPv6 literal,
            invalid port, ...).
    """
    parts = urlsplit(url)
    hostname = parts.hostname or ""
    # Accessing .port validates it (raises ValueError when out of range)
    port = parts.port

    netloc = hostname
    if ":" in hostname:
        netloc = f"[{hostname}]"
    if parts.username is not None:
        userinfo = parts.username
        if parts.password is not None:
            userinfo = f"{userinfo}:{parts.password}"
        netloc = f"{userinfo}@{netloc}"
    if port is not None:
        netloc = f"{netloc}:{port}"

    path = quote(parts.path, safe=_URL_SAFE) or ("/" if netloc else "")
    query = quote(parts.query, safe=_URL_SAFE)
    fragment = quote(parts.fragment, safe=_URL_SAFE)

    href = urlunsplit((parts.scheme, netloc, path, query, fragment))

    tail = path
    if query:
        tail += f"?{query}"
    if fragment:
        tail += f"#{fragment}"

    return SplitUrl(href=href, protocol=parts.scheme, domain=hostname, path=tail)
