"""
Charla: chat message formatting for Python

Tokenizes untrusted chat-message text (links, @mentions, #hashtags, bare
Nostr identifiers, :emoji: shortcodes, code) and renders it into
framework-agnostic, injection-safe output nodes. O(n) single-pass scanning,
typed tokens, and zero runtime dependencies.

Quick Start:
    >>> from charla import parse, render_html
    >>> result = parse("gm #nostr :coffee:")
    >>> result.hashtags
    ('nostr',)
    >>> html = render_html("see https://example.com")

    >>> # Or use the high-level MessageFormatter class
    >>> from charla import MessageFormatter, RenderContext
    >>> fmt = MessageFormatter(context=RenderContext(get_peer_name=peers.get))
    >>> html = fmt("hi @" + pubkey)

Installation:
    pip install charla
"""

from dataclasses import dataclass

from charla.config import (
    ParserOptions,
    get_parser_options,
    parser_options_context,
    reset_parser_options,
    set_parser_options,
)
from charla.emoji import (
    DEFAULT_EMOJI,
    EmojiDictionary,
    EmojiMatch,
    get_emoji_shortcodes,
    lookup_emoji,
    search_emojis,
)
from charla.errors import CharlaError, RenderError
from charla.lexer import Lexer
from charla.parser import contains_formattable_content, parse
from charla.renderers import (
    DEFAULT_CLASS_NAMES,
    Activation,
    ClassNames,
    HtmlBuilder,
    NodeBuilder,
    NodeRole,
    OutputNode,
    PlainTextBuilder,
    RenderContext,
    TokenRenderer,
    render_tokens,
)
from charla.result import ParseResult
from charla.sanitize import escape_html, sanitize_text, sanitize_url
from charla.serialization import from_dict, from_json, to_dict, to_json
from charla.text import tokens_to_plain_text
from charla.tokens import (
    CodeBlock,
    Emoji,
    Hashtag,
    InlineCode,
    Mention,
    Newline,
    NostrEntity,
    NostrNaddr,
    NostrNevent,
    NostrNote,
    NostrNprofile,
    NostrNpub,
    Text,
    Token,
    TokenKind,
    Url,
)

__version__ = "0.1.0"


@dataclass(frozen=True, slots=True)
class RenderedMessage:
    """Rendered nodes together with the parse result they came from.

    Hosts use ``parse_result.urls`` to fetch link previews out of band and
    ``parse_result.mentioned_pubkeys`` for notifications.
    """

    nodes: tuple[OutputNode, ...]
    parse_result: ParseResult


def render_message(
    content: str,
    options: ParserOptions | None = None,
    context: RenderContext | None = None,
) -> tuple[OutputNode, ...]:
    """Parse and render a message in one call.

    Args:
        content: Message text
        options: Parser options (None = context-local default)
        context: Render policy (None = no callbacks, default classes)

    Returns:
        Output nodes, one per token.

    Example:
        >>> nodes = render_message("hi #nostr")
        >>> [node.role.value for node in nodes]
        ['text', 'hashtag']
    """
    return render_tokens(parse(content, options).tokens, context)


def render_message_with_metadata(
    content: str,
    options: ParserOptions | None = None,
    context: RenderContext | None = None,
) -> RenderedMessage:
    """Parse and render a message, keeping the parse result.

    Args:
        content: Message text
        options: Parser options (None = context-local default)
        context: Render policy (None = no callbacks, default classes)

    Returns:
        RenderedMessage with the nodes and the ParseResult.
    """
    result = parse(content, options)
    return RenderedMessage(nodes=render_tokens(result.tokens, context), parse_result=result)


def render_html(
    content: str,
    options: ParserOptions | None = None,
    context: RenderContext | None = None,
) -> str:
    """Parse, render and build a message as an HTML fragment.

    Example:
        >>> render_html("a <b>")
        'a &lt;b&gt;'
    """
    return HtmlBuilder().build(render_message(content, options, context))


class MessageFormatter:
    """High-level formatter combining parser, renderer and builder.

    Usage:
        >>> fmt = MessageFormatter()
        >>> fmt("gm :wave:")
        'gm <span class="inline" title=":wave:" role="img" aria-label="wave">👋</span>'

        >>> # Terminal output, links followed by their target
        >>> fmt = MessageFormatter(builder=PlainTextBuilder(show_hrefs=True))

        >>> # Access the tokens
        >>> fmt.parse("#nostr").hashtags
        ('nostr',)

    Thread Safety:
        Holds only immutable configuration. Safe to share one instance
        across threads.

    """

    __slots__ = ("_builder", "_options", "_renderer")

    def __init__(
        self,
        *,
        options: ParserOptions | None = None,
        context: RenderContext | None = None,
        builder: NodeBuilder | None = None,
    ) -> None:
        """Initialize formatter.

        Args:
            options: Parser options (None = context-local default at call time)
            context: Render policy shared by every call
            builder: Node builder (default: HtmlBuilder)
        """
        self._options = options
        self._renderer = TokenRenderer(context)
        self._builder: NodeBuilder = builder if builder is not None else HtmlBuilder()

    def __call__(self, content: str) -> str:
        """Parse, render and build a message.

        Args:
            content: Message text

        Returns:
            Builder output (HTML by default)
        """
        return self._builder.build(self.render(content).nodes)

    def parse(self, content: str) -> ParseResult:
        """Tokenize a message with this formatter's options."""
        return parse(content, self._options)

    def render(self, content: str) -> RenderedMessage:
        """Parse and render a message without building it."""
        result = self.parse(content)
        return RenderedMessage(nodes=self._renderer.render(result.tokens), parse_result=result)


__all__ = [
    # Version
    "__version__",
    # High-level API
    "MessageFormatter",
    "RenderedMessage",
    "contains_formattable_content",
    "parse",
    "render_html",
    "render_message",
    "render_message_with_metadata",
    "render_tokens",
    "tokens_to_plain_text",
    # Configuration
    "ParserOptions",
    "get_parser_options",
    "parser_options_context",
    "reset_parser_options",
    "set_parser_options",
    # Emoji
    "DEFAULT_EMOJI",
    "EmojiDictionary",
    "EmojiMatch",
    "get_emoji_shortcodes",
    "lookup_emoji",
    "search_emojis",
    # Sanitization
    "escape_html",
    "sanitize_text",
    "sanitize_url",
    # Lexer and tokens
    "Lexer",
    "ParseResult",
    "CodeBlock",
    "Emoji",
    "Hashtag",
    "InlineCode",
    "Mention",
    "Newline",
    "NostrEntity",
    "NostrNaddr",
    "NostrNevent",
    "NostrNote",
    "NostrNprofile",
    "NostrNpub",
    "Text",
    "Token",
    "TokenKind",
    "Url",
    # Rendering
    "DEFAULT_CLASS_NAMES",
    "Activation",
    "ClassNames",
    "HtmlBuilder",
    "NodeBuilder",
    "NodeRole",
    "OutputNode",
    "PlainTextBuilder",
    "RenderContext",
    "TokenRenderer",
    # Serialization
    "from_dict",
    "from_json",
    "to_dict",
    "to_json",
    # Errors
    "CharlaError",
    "RenderError",
]
