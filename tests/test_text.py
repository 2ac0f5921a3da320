"""Tests for plain-text reconstruction."""

from charla import parse, tokens_to_plain_text
from charla.text import token_to_plain_text
from charla.tokens import Emoji, Newline, Text


class TestTokensToPlainText:
    def test_plain_text_unchanged(self) -> None:
        source = "hi #nostr see https://example.com."
        assert tokens_to_plain_text(parse(source).tokens) == source

    def test_emoji_becomes_glyph(self) -> None:
        assert tokens_to_plain_text(parse("ship it :rocket:").tokens) == "ship it \U0001F680"

    def test_code_delimiters_dropped(self) -> None:
        assert tokens_to_plain_text(parse("run `ls` now").tokens) == "run ls now"
        assert tokens_to_plain_text(parse("```sh\nls -la\n```").tokens) == "ls -la"

    def test_unknown_shortcode_kept(self) -> None:
        assert tokens_to_plain_text(parse(":notreal:").tokens) == ":notreal:"

    def test_empty(self) -> None:
        assert tokens_to_plain_text(()) == ""


class TestTokenToPlainText:
    def test_single_tokens(self) -> None:
        assert token_to_plain_text(Text(raw="a", start=0, end=1)) == "a"
        assert token_to_plain_text(Newline(raw="\n", start=0, end=1)) == "\n"
        emoji = Emoji(raw=":fire:", start=0, end=6, shortcode=":fire:", emoji="\U0001F525")
        assert token_to_plain_text(emoji) == "\U0001F525"
