"""Plain-text reconstruction from Charla tokens.

Example:
    >>> from charla import parse, tokens_to_plain_text
    >>> tokens_to_plain_text(parse("ship it :rocket: `now`").tokens)
    'ship it 🚀 now'
"""

from collections.abc import Iterable

from charla.tokens import CodeBlock, Emoji, InlineCode, Newline, Token


def token_to_plain_text(token: Token) -> str:
    """Plain text contributed by a single token."""
    match token:
        case Emoji():
            return token.emoji
        case CodeBlock() | InlineCode():
            return token.code
        case Newline():
            return "\n"
        case _:
            return token.raw


def tokens_to_plain_text(tokens: Iterable[Token]) -> str:
    """Concatenate the plain-text form of every token, in order.

    Emoji become their glyph, code spans contribute their code without
    delimiters, newlines contribute ``\\n`` and everything else its raw text.

    Args:
        tokens: Token stream (e.g. ``ParseResult.tokens``)

    Returns:
        Plain text of the message.

    """
    return "".join(token_to_plain_text(token) for token in tokens)
