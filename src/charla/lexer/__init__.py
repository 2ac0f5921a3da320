"""Single-pass lexer for chat message text.

Architecture:
lexer/
├── __init__.py          # Re-exports Lexer
├── core.py              # Lexer class (mixin composition + dispatch)
├── charsets.py          # Character classes used by the scanners
└── scanners/            # Recognizer mixins
    ├── code.py          # Fenced code blocks, inline code
    ├── url.py           # http(s):// and www. links
    ├── nostr.py         # @mentions, bare bech32 entities
    └── tags.py          # #hashtags, :emoji:

Usage:
    >>> from charla.lexer import Lexer
    >>> [token.kind.value for token in Lexer("see https://a.com").tokenize()]
    ['text', 'url']

"""

from charla.lexer.core import Lexer

__all__ = ["Lexer"]
