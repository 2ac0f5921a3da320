"""Code span scanner mixin: fenced code blocks and inline code."""

from charla.lexer.charsets import ASCII_WORD
from charla.tokens import CodeBlock, InlineCode, Token

FENCE = "```"


class CodeScannerMixin:
    """Mixin recognizing fenced code blocks and inline code at a backtick.

    Code spans are consumed atomically: their content is stored verbatim and
    never scanned for other syntax.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _match_code(self, pos: int) -> Token | None:
        """Fenced block when three backticks start here, else inline code."""
        if self._source.startswith(FENCE, pos):
            return self._match_fenced_code(pos)
        return self._match_inline_code(pos)

    def _match_fenced_code(self, pos: int) -> CodeBlock:
        """Match a fenced block starting at ``pos``.

        Always succeeds: an unterminated fence runs to end of input. The
        language is whatever word follows the fence, so ``python print(1)``
        on one line yields language ``python`` and the code after it.
        """
        source = self._source
        source_len = self._source_len
        body_start = pos + len(FENCE)

        # Word characters directly after the fence name the language
        language: str | None = None
        word_end = body_start
        while word_end < source_len and source[word_end] in ASCII_WORD:
            word_end += 1
        if word_end > body_start:
            language = source[body_start:word_end]
            body_start = word_end

        if body_start < source_len and source[body_start] == "\n":
            body_start += 1

        close = source.find(FENCE, body_start)
        if close == -1:
            code = source[body_start:]
            end = source_len
        else:
            code = source[body_start:close]
            if code.endswith("\n"):
                code = code[:-1]
            end = close + len(FENCE)

        return CodeBlock(
            raw=source[pos:end],
            start=pos,
            end=end,
            code=code,
            language=language,
        )

    def _match_inline_code(self, pos: int) -> InlineCode | None:
        """Match a single-backtick span closed on the same line."""
        source = self._source
        close = source.find("`", pos + 1)
        # No closing backtick, or nothing between the two
        if close <= pos + 1:
            return None
        code = source[pos + 1 : close]
        if "\n" in code:
            return None
        return InlineCode(raw=source[pos : close + 1], start=pos, end=close + 1, code=code)
