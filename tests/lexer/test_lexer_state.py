"""Tests for Lexer configuration and per-instance state."""

from charla.config import ParserOptions, parser_options_context
from charla.emoji import EmojiDictionary
from charla.lexer import Lexer
from charla.tokens import Emoji, Hashtag, Mention, Newline, NostrNpub, Text, TokenKind

HEX64 = "0123456789abcdef" * 4


class TestOptionsSelectRecognizers:
    """Disabled categories are never attempted."""

    def test_mentions_disabled_leaves_bare_npub(self) -> None:
        npub = "npub1" + "q" * 58
        options = ParserOptions(parse_mentions=False)
        tokens = list(Lexer("@" + npub, options).tokenize())

        assert [type(t) for t in tokens] == [Text, NostrNpub]
        assert tokens[0].raw == "@"

    def test_code_disabled_exposes_content(self) -> None:
        options = ParserOptions(parse_code=False)
        tokens = list(Lexer("`#tag`", options).tokenize())

        assert [type(t) for t in tokens] == [Text, Hashtag, Text]

    def test_newlines_fold_into_text(self) -> None:
        options = ParserOptions(preserve_newlines=False)
        tokens = list(Lexer("a\nb", options).tokenize())

        assert len(tokens) == 1
        assert tokens[0].raw == "a\nb"

    def test_newlines_preserved_by_default(self) -> None:
        tokens = list(Lexer("a\n\nb").tokenize())

        assert [type(t) for t in tokens] == [Text, Newline, Newline, Text]

    def test_context_options_used_when_none_given(self) -> None:
        with parser_options_context(ParserOptions(parse_hashtags=False)):
            tokens = list(Lexer("#tag").tokenize())

        assert [t.kind for t in tokens] == [TokenKind.TEXT]

    def test_explicit_options_override_context(self) -> None:
        with parser_options_context(ParserOptions(parse_hashtags=False)):
            tokens = list(Lexer("#tag", ParserOptions()).tokenize())

        assert isinstance(tokens[0], Hashtag)


class TestEmojiDictionaryOption:
    """A custom dictionary replaces the default one."""

    def test_custom_dictionary(self) -> None:
        custom = EmojiDictionary({"team": {":ship:": "\U0001F6A2"}})
        options = ParserOptions(emoji_dictionary=custom)
        tokens = list(Lexer(":ship: :smile:", options).tokenize())

        assert isinstance(tokens[0], Emoji)
        assert tokens[0].emoji == "\U0001F6A2"
        assert [type(t) for t in tokens] == [Emoji, Text]

    def test_empty_dictionary_matches_nothing(self) -> None:
        options = ParserOptions(emoji_dictionary=EmojiDictionary({}))
        tokens = list(Lexer(":smile:", options).tokenize())

        assert [type(t) for t in tokens] == [Text]


class TestLexerInstances:
    """Lexers are single-use and independent."""

    def test_exhausted_after_one_pass(self) -> None:
        lexer = Lexer("hi #tag")

        first = list(lexer.tokenize())
        second = list(lexer.tokenize())

        assert len(first) == 2
        assert second == []

    def test_interleaved_lexers(self) -> None:
        a = Lexer("@" + HEX64 + " x").tokenize()
        b = Lexer("#one #two").tokenize()

        assert isinstance(next(a), Mention)
        assert isinstance(next(b), Hashtag)
        assert next(a).raw == " x"
        assert next(b).raw == " "
        assert next(b).tag == "two"

    def test_empty_source(self) -> None:
        assert list(Lexer("").tokenize()) == []
