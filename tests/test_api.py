"""Tests for the high-level Charla API."""

from charla.tokens import TokenKind

HEX64 = "0123456789abcdef" * 4


class TestParseFunction:
    """Tests for the parse() function."""

    def test_mixed_message(self) -> None:
        """Every category in one message, in source order."""
        from charla import parse

        result = parse(f"hey @{HEX64} check https://example.com #nostr :fire:")

        assert [t.kind for t in result.tokens] == [
            TokenKind.TEXT,
            TokenKind.MENTION,
            TokenKind.TEXT,
            TokenKind.URL,
            TokenKind.TEXT,
            TokenKind.HASHTAG,
            TokenKind.TEXT,
            TokenKind.EMOJI,
        ]
        assert result.has_mentions is True
        assert result.has_urls is True
        assert result.has_hashtags is True
        assert result.has_emoji is True
        assert result.has_code is False
        assert result.has_nostr_entities is False
        assert result.mentioned_pubkeys == (HEX64,)
        assert result.urls == ("https://example.com/",)
        assert result.hashtags == ("nostr",)

    def test_empty_input(self) -> None:
        from charla import parse

        result = parse("")
        assert result.tokens == ()
        assert result.source_length == 0
        assert len(result) == 0
        assert result.has_urls is False

    def test_repeats_kept_in_order(self) -> None:
        from charla import parse

        result = parse("#b #a #b")
        assert result.hashtags == ("b", "a", "b")

    def test_disabled_category(self) -> None:
        from charla import ParserOptions, parse

        result = parse("#nostr https://example.com", ParserOptions(parse_hashtags=False))
        assert result.has_hashtags is False
        assert result.hashtags == ()
        assert result.tokens[0].raw == "#nostr "
        assert result.has_urls is True

    def test_code_and_entity_flags(self) -> None:
        from charla import parse

        result = parse("`x` nevent1abc")
        assert result.has_code is True
        assert result.has_nostr_entities is True

    def test_result_is_iterable(self) -> None:
        from charla import parse

        result = parse("a #b")
        assert [t.raw for t in result] == ["a ", "#b"]
        assert result.source_length == 4


class TestContainsFormattableContent:
    """Tests for contains_formattable_content()."""

    def test_plain(self) -> None:
        from charla import contains_formattable_content

        assert contains_formattable_content("just words\nand lines") is False
        assert contains_formattable_content("") is False

    def test_formatted(self) -> None:
        from charla import contains_formattable_content

        assert contains_formattable_content("see #nostr") is True
        assert contains_formattable_content("`x`") is True

    def test_respects_options(self) -> None:
        from charla import ParserOptions, contains_formattable_content

        assert contains_formattable_content(":fire:", ParserOptions(parse_emojis=False)) is False


class TestRenderFunctions:
    """Tests for render_message() and friends."""

    def test_render_message(self) -> None:
        from charla import NodeRole, render_message

        nodes = render_message("hi #nostr")
        assert [node.role for node in nodes] == [NodeRole.TEXT, NodeRole.HASHTAG]

    def test_render_message_with_metadata(self) -> None:
        from charla import render_message_with_metadata

        rendered = render_message_with_metadata("read https://example.com/a and https://b.org")
        assert len(rendered.nodes) == len(rendered.parse_result.tokens)
        assert rendered.parse_result.urls == ("https://example.com/a", "https://b.org/")

    def test_render_html(self) -> None:
        from charla import render_html

        assert render_html("gm <script>") == "gm &lt;script&gt;"


class TestMessageFormatter:
    """Tests for the MessageFormatter class."""

    def test_basic_usage(self) -> None:
        from charla import MessageFormatter

        fmt = MessageFormatter()
        html = fmt("gm :wave:")
        assert html == (
            'gm <span class="inline" title=":wave:" role="img" aria-label="wave">'
            "\U0001F44B</span>"
        )

    def test_options(self) -> None:
        from charla import MessageFormatter, ParserOptions

        fmt = MessageFormatter(options=ParserOptions(parse_emojis=False))
        assert fmt("gm :wave:") == "gm :wave:"
        assert fmt.parse(":wave:").has_emoji is False

    def test_context(self) -> None:
        from charla import MessageFormatter, RenderContext

        fmt = MessageFormatter(context=RenderContext(get_peer_name=lambda _: "alice"))
        assert ">alice</span>" in fmt("@" + HEX64)

    def test_plain_text_builder(self) -> None:
        from charla import MessageFormatter, PlainTextBuilder

        fmt = MessageFormatter(builder=PlainTextBuilder())
        assert fmt("a & b :fire:") == "a & b \U0001F525"

    def test_render_keeps_parse_result(self) -> None:
        from charla import MessageFormatter

        rendered = MessageFormatter().render("#one #two")
        assert rendered.parse_result.hashtags == ("one", "two")
        assert len(rendered.nodes) == 3

    def test_reusable(self) -> None:
        from charla import MessageFormatter

        fmt = MessageFormatter()
        assert fmt("#a") == fmt("#a")


class TestScenarios:
    """End-to-end scenarios for parse() and rendering."""

    def test_mixed_content(self) -> None:
        from charla import parse

        result = parse(f"Hello @{HEX64}! See https://a.com #nostr :rocket:")

        assert [t.kind for t in result.tokens] == [
            TokenKind.TEXT,
            TokenKind.MENTION,
            TokenKind.TEXT,
            TokenKind.URL,
            TokenKind.TEXT,
            TokenKind.HASHTAG,
            TokenKind.TEXT,
            TokenKind.EMOJI,
        ]
        assert result.tokens[2].raw == "! See "
        assert all((result.has_mentions, result.has_urls, result.has_hashtags, result.has_emoji))

    def test_emoji_validity_gate(self) -> None:
        from charla import parse

        assert parse(":notarealshortcode:").has_emoji is False
        (token,) = parse(":smile:").tokens
        assert token.emoji == "\U0001F604"

    def test_numeric_hashtag(self) -> None:
        from charla import parse

        assert parse("Issue #123").has_hashtags is False

    def test_trailing_period(self) -> None:
        from charla import parse

        result = parse("Check https://example.com.")
        assert result.tokens[1].raw == "https://example.com"
        assert result.tokens[2].raw == "."

    def test_url_disabled(self) -> None:
        from charla import ParserOptions, parse

        result = parse("https://example.com", ParserOptions(parse_urls=False))
        assert len(result.tokens) == 1
        assert result.tokens[0].raw == "https://example.com"
        assert result.has_urls is False

    def test_closing_paren_then_period(self) -> None:
        """Unbalanced ")." is stripped; a balanced pair stays in the URL."""
        from charla import parse

        assert parse("(see https://a.com/x).").urls == ("https://a.com/x",)
        assert parse("https://a.com/f(x)).").urls == ("https://a.com/f(x)",)
