"""Message parser: text in, ParseResult out.

Example:
    >>> from charla.parser import parse
    >>> result = parse("gm @" + "ab" * 32 + " #nostr")
    >>> result.has_mentions, result.hashtags
    (True, ('nostr',))

Thread Safety:
    parse() creates a fresh Lexer per call and reads options from a
    ContextVar. Safe to call concurrently from any number of threads.

"""

from __future__ import annotations

from charla.config import ParserOptions
from charla.lexer import Lexer
from charla.result import ParseResult
from charla.tokens import Newline, Text


def parse(source: str, options: ParserOptions | None = None) -> ParseResult:
    """Tokenize a message body.

    Never raises for any string input: whatever is not recognized stays
    in Text tokens. Empty input yields a result with no tokens.

    Args:
        source: Message text
        options: Categories to recognize (None = context-local default,
            see ``parser_options_context``)

    Returns:
        ParseResult with ordered tokens covering the whole source.

    """
    tokens = Lexer(source, options).tokenize()
    return ParseResult.from_tokens(tokens, len(source))


def contains_formattable_content(source: str, options: ParserOptions | None = None) -> bool:
    """Check whether a message has anything beyond plain text.

    Stops scanning at the first token that is neither Text nor Newline.

    Args:
        source: Message text
        options: Categories to recognize (None = context-local default)

    Returns:
        True if rendering would produce at least one formatted node.

    """
    return any(
        not isinstance(token, (Text, Newline)) for token in Lexer(source, options).tokenize()
    )
