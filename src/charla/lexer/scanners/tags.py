"""Hashtag and emoji shortcode scanner mixin."""

from charla.emoji import EmojiDictionary
from charla.lexer.charsets import ASCII_WORD, SHORTCODE_CHARS
from charla.tokens import Emoji, Hashtag


class TagScannerMixin:
    """Mixin recognizing ``#tags`` and ``:shortcode:`` emoji."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int
    _emoji: EmojiDictionary

    def _match_hashtag(self, pos: int) -> Hashtag | None:
        """Match ``#`` + ASCII letter or underscore + ASCII word characters.

        Purely numeric tags (``#123``) are not hashtags. A non-ASCII letter
        ends the tag: ``#café`` is ``#caf`` followed by text.
        """
        source = self._source
        source_len = self._source_len
        start = pos + 1
        if start >= source_len:
            return None
        first = source[start]
        if first not in ASCII_WORD or first.isdigit():
            return None

        end = start + 1
        while end < source_len and source[end] in ASCII_WORD:
            end += 1

        raw = source[pos:end]
        return Hashtag(raw=raw, start=pos, end=end, tag=raw[1:])

    def _match_emoji(self, pos: int) -> Emoji | None:
        """Match ``:shortcode:`` when the shortcode is in the dictionary.

        An unknown shortcode is not consumed, so its closing colon can still
        open the next candidate (``:notreal:smile:``).
        """
        source = self._source
        source_len = self._source_len
        end = pos + 1
        while end < source_len and source[end] in SHORTCODE_CHARS:
            end += 1
        if end == pos + 1 or end >= source_len or source[end] != ":":
            return None

        shortcode = source[pos : end + 1]
        glyph = self._emoji.lookup(shortcode)
        if glyph is None:
            return None
        return Emoji(raw=shortcode, start=pos, end=end + 1, shortcode=shortcode, emoji=glyph)
