"""Recognizer mixins for the Charla lexer.

Each scanner is a mixin providing pure ``_match_*(pos)`` recognizers for
one family of syntax. A recognizer returns a token or None and never moves
the lexer position.
"""

from __future__ import annotations

from charla.lexer.scanners.code import CodeScannerMixin
from charla.lexer.scanners.nostr import NostrScannerMixin
from charla.lexer.scanners.tags import TagScannerMixin
from charla.lexer.scanners.url import UrlScannerMixin

__all__ = [
    "CodeScannerMixin",
    "NostrScannerMixin",
    "TagScannerMixin",
    "UrlScannerMixin",
]
