"""Single-pass message lexer with O(n) performance.

Scans left to right with a cursor and a pending Text-run start. At each
position the character under the cursor selects the recognizers that can
possibly match there; the first one that returns a token wins. Recognizers
are pure (they never move the cursor); the core commits the position.

No regex in the hot path. Zero ReDoS vulnerability by construction.

Thread Safety:
Lexer instances are single-use. Create one per source string.
All state is instance-local; no shared mutable state.

"""

from __future__ import annotations

from collections.abc import Callable, Iterator

from charla.config import ParserOptions, get_parser_options
from charla.emoji import DEFAULT_EMOJI, EmojiDictionary
from charla.lexer.scanners import (
    CodeScannerMixin,
    NostrScannerMixin,
    TagScannerMixin,
    UrlScannerMixin,
)
from charla.tokens import Newline, Text, Token

Recognizer = Callable[[int], Token | None]


class Lexer(
    CodeScannerMixin,
    UrlScannerMixin,
    NostrScannerMixin,
    TagScannerMixin,
):
    """Single-pass lexer for chat message text.

    Recognizer priority: fenced code, inline code, URL, mention, bare Nostr
    entity, hashtag, emoji shortcode, newline. Every character that no
    recognizer claims lands in a Text run, so the token stream always covers
    the source exactly.

    Usage:
            >>> lexer = Lexer("hi #nostr")
            >>> for token in lexer.tokenize():
            ...     print(token.kind.value, repr(token.raw))
        text 'hi '
        hashtag '#nostr'

    Thread Safety:
        Lexer instances are single-use. Create one per source string.
        All state is instance-local; no shared mutable state.

    """

    __slots__ = (
        "_source",
        "_source_len",  # Cached len(source) to avoid repeated calls
        "_pos",
        "_text_start",  # Start of the pending Text run
        "_options",
        "_emoji",
        "_dispatch",  # First character -> recognizers, in priority order
    )

    def __init__(self, source: str, options: ParserOptions | None = None) -> None:
        """Initialize lexer with source text.

        Args:
            source: Message text
            options: Categories to recognize (None = context-local default)
        """
        self._source = source
        self._source_len = len(source)
        self._pos = 0
        self._text_start = 0
        self._options = options if options is not None else get_parser_options()
        emoji = self._options.emoji_dictionary
        self._emoji: EmojiDictionary = emoji if emoji is not None else DEFAULT_EMOJI
        self._dispatch = self._build_dispatch()

    def _build_dispatch(self) -> dict[str, tuple[Recognizer, ...]]:
        """Map each trigger character to the enabled recognizers.

        Registration order is priority order.
        """
        options = self._options
        table: dict[str, list[Recognizer]] = {}

        def register(chars: str, recognizer: Recognizer) -> None:
            for char in chars:
                table.setdefault(char, []).append(recognizer)

        if options.parse_code:
            register("`", self._match_code)
        if options.parse_urls:
            register("hHwW", self._match_url)
        if options.parse_mentions:
            register("@", self._match_mention)
        if options.parse_nostr_entities:
            register("nN", self._match_nostr_entity)
        if options.parse_hashtags:
            register("#", self._match_hashtag)
        if options.parse_emojis:
            register(":", self._match_emoji)
        if options.preserve_newlines:
            register("\n", self._match_newline)

        return {char: tuple(recognizers) for char, recognizers in table.items()}

    def tokenize(self) -> Iterator[Token]:
        """Tokenize source into token stream.

        Yields:
            Token objects one at a time, ordered and non-overlapping

        Complexity: O(n) where n = len(source)
        """
        source = self._source
        source_len = self._source_len  # Local var for faster access
        dispatch = self._dispatch

        while self._pos < source_len:
            token = None
            recognizers = dispatch.get(source[self._pos])
            if recognizers:
                for recognizer in recognizers:
                    token = recognizer(self._pos)
                    if token is not None:
                        break

            if token is None:
                self._pos += 1
                continue

            if self._text_start < token.start:
                yield self._make_text(token.start)
            yield token
            self._commit_to(token.end)

        if self._text_start < source_len:
            yield self._make_text(source_len)

    def _commit_to(self, end: int) -> None:
        """Move the cursor past a matched token and restart the Text run."""
        self._pos = end
        self._text_start = end

    def _make_text(self, end: int) -> Text:
        """Create a Text token for the pending run ending at ``end``."""
        start = self._text_start
        return Text(raw=self._source[start:end], start=start, end=end)

    def _match_newline(self, pos: int) -> Newline:
        return Newline(raw="\n", start=pos, end=pos + 1)
