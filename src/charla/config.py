"""ContextVar-based parser configuration for Charla.

ParserOptions selects which syntax categories the tokenizer recognizes.
Pass options explicitly to ``parse()``, or set a context-local default that
every ``parse()`` call without explicit options picks up.

Thread Safety:
    ContextVars are thread-local by design. Each thread has independent storage,
    so no locks are needed and race conditions are impossible.

Usage:
    # Explicit options
    result = parse(text, ParserOptions(parse_urls=False))

    # Context-local default
    with parser_options_context(ParserOptions(preserve_newlines=False)):
        result = parse(text)

"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, fields
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from charla.emoji import EmojiDictionary

# camelCase option names accepted by from_dict (wire/JS-style configs)
_CAMEL_CASE_ALIASES: dict[str, str] = {
    "parseUrls": "parse_urls",
    "parseMentions": "parse_mentions",
    "parseHashtags": "parse_hashtags",
    "parseNostrEntities": "parse_nostr_entities",
    "parseEmojis": "parse_emojis",
    "parseCode": "parse_code",
    "preserveNewlines": "preserve_newlines",
    "emojiDictionary": "emoji_dictionary",
}


@dataclass(frozen=True, slots=True)
class ParserOptions:
    """Immutable tokenizer configuration.

    Every category is enabled by default. Disabling a category means its
    syntax is never tokenized and its characters stay in Text runs. With
    ``parse_code`` off no code span is recognized at all, so entities that
    code would otherwise shield become visible to the scanner.

    Attributes:
        parse_urls: Recognize http(s):// and www. links
        parse_mentions: Recognize @hex and @npub mentions
        parse_hashtags: Recognize #tags
        parse_nostr_entities: Recognize bare npub1/note1/nevent1/nprofile1/naddr1
        parse_emojis: Recognize :shortcode: emoji
        parse_code: Recognize fenced code blocks and inline code
        preserve_newlines: Emit a Newline token per line break
        emoji_dictionary: Dictionary used to validate shortcodes
            (None = built-in dictionary)

    """

    parse_urls: bool = True
    parse_mentions: bool = True
    parse_hashtags: bool = True
    parse_nostr_entities: bool = True
    parse_emojis: bool = True
    parse_code: bool = True
    preserve_newlines: bool = True
    emoji_dictionary: EmojiDictionary | None = None

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> "ParserOptions":
        """Create ParserOptions from a dictionary.

        Keys may be attribute names (``parse_urls``) or their camelCase
        spelling (``parseUrls``). Unknown keys are silently ignored, and so
        are None values (the default applies).

        Args:
            config_dict: Dictionary with option values.

        Returns:
            New ParserOptions instance.

        Example:
            >>> options = ParserOptions.from_dict({"parseUrls": False, "x": 1})
            >>> options.parse_urls
            False

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _CAMEL_CASE_ALIASES.get(key, key)
            if name in valid_fields and value is not None:
                filtered[name] = value
        return cls(**filtered)

    @property
    def everything_disabled(self) -> bool:
        """True when no category would ever produce a non-Text token."""
        return not (
            self.parse_urls
            or self.parse_mentions
            or self.parse_hashtags
            or self.parse_nostr_entities
            or self.parse_emojis
            or self.parse_code
            or self.preserve_newlines
        )


# Module-level default options (reused, never recreated)
_DEFAULT_OPTIONS: ParserOptions = ParserOptions()

# Thread-local configuration via ContextVar
_parser_options: ContextVar[ParserOptions] = ContextVar(
    "parser_options",
    default=_DEFAULT_OPTIONS,
)


def get_parser_options() -> ParserOptions:
    """Get the parser options active in this context.

    Thread Safety:
        ContextVars are thread-local by design. Safe to call from any thread.

    """
    return _parser_options.get()


def set_parser_options(options: ParserOptions) -> None:
    """Set the default parser options for the current context.

    Args:
        options: ParserOptions used by parse() calls without explicit options.

    """
    _parser_options.set(options)


def reset_parser_options() -> None:
    """Reset to the all-enabled default options.

    Reuses the module-level _DEFAULT_OPTIONS singleton, avoiding allocation.

    """
    _parser_options.set(_DEFAULT_OPTIONS)


@contextmanager
def parser_options_context(options: ParserOptions) -> Iterator[None]:
    """Context manager for temporary parser options.

    Args:
        options: ParserOptions to use within the context.

    Example:
        >>> with parser_options_context(ParserOptions(parse_emojis=False)):
        ...     result = parse(":smile:")
        >>> # Previous options restored here

    Thread Safety:
        Only affects the current thread's context. Restores the previous
        options even if an exception is raised.

    """
    previous = _parser_options.get()
    _parser_options.set(options)
    try:
        yield
    finally:
        _parser_options.set(previous)


__all__ = [
    "ParserOptions",
    "get_parser_options",
    "parser_options_context",
    "reset_parser_options",
    "set_parser_options",
]
