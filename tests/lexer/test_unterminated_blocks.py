"""Test unterminated code at end of input - ensures content isn't silently lost.

An opening fence without a closing fence consumes the rest of the message
as a single code block; an unclosed inline backtick is plain text.
"""

import pytest

from charla.lexer import Lexer
from charla.tokens import CodeBlock, InlineCode, Newline, Text


class TestUnterminatedFences:
    """Fenced blocks that aren't closed before end of input."""

    def test_fence_consumes_to_end(self) -> None:
        source = "before ```python\nprint('hi')\n#tag @someone"
        tokens = list(Lexer(source).tokenize())

        assert [type(t) for t in tokens] == [Text, CodeBlock]
        block = tokens[1]
        assert block.language == "python"
        assert block.code == "print('hi')\n#tag @someone"
        assert block.end == len(source)

    def test_bare_fence(self) -> None:
        tokens = list(Lexer("```").tokenize())

        assert len(tokens) == 1
        assert isinstance(tokens[0], CodeBlock)
        assert tokens[0].code == ""
        assert tokens[0].language is None

    def test_fence_with_language_only(self) -> None:
        tokens = list(Lexer("```rust").tokenize())

        assert len(tokens) == 1
        assert tokens[0].language == "rust"
        assert tokens[0].code == ""

    def test_unterminated_keeps_trailing_newline(self) -> None:
        tokens = list(Lexer("```\ncode\n").tokenize())

        assert tokens[0].code == "code\n"

    @pytest.mark.parametrize("source", ["````", "`````", "``````x"])
    def test_runs_of_backticks(self, source: str) -> None:
        tokens = list(Lexer(source).tokenize())

        assert "".join(t.raw for t in tokens) == source
        assert isinstance(tokens[0], CodeBlock)


class TestUnterminatedInlineCode:
    """Inline code needs a closing backtick on the same line."""

    def test_single_backtick_is_text(self) -> None:
        tokens = list(Lexer("it`s fine").tokenize())

        assert len(tokens) == 1
        assert isinstance(tokens[0], Text)

    def test_newline_breaks_inline_code(self) -> None:
        tokens = list(Lexer("`a\nb`").tokenize())

        assert [type(t) for t in tokens] == [Text, Newline, Text]
        assert tokens[0].raw == "`a"
        assert tokens[2].raw == "b`"

    def test_empty_backtick_pair_is_text(self) -> None:
        tokens = list(Lexer("``").tokenize())

        assert len(tokens) == 1
        assert isinstance(tokens[0], Text)
        assert tokens[0].raw == "``"

    def test_closed_span_after_stray_backtick(self) -> None:
        tokens = list(Lexer("it`s `x`").tokenize())

        assert [type(t) for t in tokens] == [Text, InlineCode, Text]
        assert tokens[1].code == "s "
        assert tokens[2].raw == "x`"
