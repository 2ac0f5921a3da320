"""Display-text helpers for Charla.

Shortening rules shared by the renderers: long URLs and bech32 identifiers
are cut to a fixed width with a trailing ellipsis.

Example:
    >>> from charla.utils.text import truncate, abbreviate
    >>> truncate("https://example.com/a/very/long/path", 20)
    'https://example.c...'
    >>> abbreviate("npub1abcdefghijklmnop", head=8, tail=4)
    'npub1abc...mnop'
"""

from __future__ import annotations

ELLIPSIS = "..."


def truncate(text: str, limit: int) -> str:
    """Cut text to at most ``limit`` characters, ellipsis included.

    Args:
        text: Text to shorten
        limit: Maximum length of the result

    Returns:
        ``text`` unchanged when it fits, otherwise its head plus "..."

    Examples:
        >>> truncate("short", 50)
        'short'
        >>> len(truncate("x" * 80, 50))
        50
    """
    if len(text) <= limit:
        return text
    return text[: max(limit - len(ELLIPSIS), 0)] + ELLIPSIS


def abbreviate(text: str, head: int, tail: int = 0) -> str:
    """Keep the first ``head`` and last ``tail`` characters around "...".

    Args:
        text: Identifier to shorten
        head: Characters kept from the start
        tail: Characters kept from the end (0 = none)

    Returns:
        Abbreviated identifier. Short input is returned unchanged.
    """
    if len(text) <= head + tail:
        return text
    suffix = text[-tail:] if tail else ""
    return f"{text[:head]}{ELLIPSIS}{suffix}"
