"""Token renderer: tokens in, output nodes out.

Maps every token kind to an OutputNode under the host's RenderContext and
applies all sanitization on the way: text is stripped of control
characters and HTML-escaped, links are validated with ``sanitize_url`` and
degrade to flagged, non-interactive text when rejected.

Thread Safety:
TokenRenderer holds only its (frozen) context. A single instance can be
shared across threads; each render() call builds fresh nodes.

"""

from __future__ import annotations

from collections.abc import Callable, Iterable
from functools import partial

from charla.renderers.context import DEFAULT_RENDER_CONTEXT, RenderContext
from charla.renderers.nodes import NodeRole, OutputNode
from charla.sanitize import escape_html, sanitize_text, sanitize_url
from charla.tokens import (
    CodeBlock,
    Emoji,
    Hashtag,
    InlineCode,
    Mention,
    Newline,
    NostrEntity,
    NostrNote,
    NostrNpub,
    Text,
    Token,
    Url,
)
from charla.utils.logger import get_logger
from charla.utils.text import abbreviate, truncate

logger = get_logger(__name__)

# Display width of a link before it is cut with "..."
URL_DISPLAY_LIMIT = 50

_LINE_BREAK = OutputNode(role=NodeRole.LINE_BREAK)


def _escaped(text: str) -> str:
    return escape_html(sanitize_text(text))


class TokenRenderer:
    """Render tokens to framework-agnostic output nodes.

    Usage:
        >>> from charla import parse
        >>> renderer = TokenRenderer(RenderContext(on_hashtag_click=print))
        >>> nodes = renderer.render(parse("#nostr").tokens)
        >>> nodes[0].text
        '#nostr'
        >>> nodes[0].activate()
        nostr
        <Activation.HANDLED: 'handled'>

    Thread Safety:
        Stateless apart from the frozen context. Safe to share.

    """

    __slots__ = ("_context",)

    def __init__(self, context: RenderContext | None = None) -> None:
        self._context = context if context is not None else DEFAULT_RENDER_CONTEXT

    @property
    def context(self) -> RenderContext:
        return self._context

    def render(self, tokens: Iterable[Token]) -> tuple[OutputNode, ...]:
        """Render tokens in order, one node per token."""
        return tuple(self.render_token(token) for token in tokens)

    def render_token(self, token: Token) -> OutputNode:
        """Render a single token."""
        match token:
            case Text():
                return self._render_text(token)
            case Url():
                return self._render_url(token)
            case Mention():
                return self._render_mention(token)
            case Hashtag():
                return self._render_hashtag(token)
            case NostrEntity():
                return self._render_nostr_entity(token)
            case Emoji():
                return self._render_emoji(token)
            case CodeBlock():
                return self._render_code_block(token)
            case InlineCode():
                return self._render_inline_code(token)
            case Newline():
                return _LINE_BREAK
            case _:
                # Unknown token subclass: show its source text, inert
                return OutputNode(role=NodeRole.TEXT, text=_escaped(token.raw))

    # =========================================================================
    # Per-kind rendering
    # =========================================================================

    def _render_text(self, token: Text) -> OutputNode:
        return OutputNode(
            role=NodeRole.TEXT,
            text=_escaped(token.raw),
            class_name=self._context.class_names.text,
        )

    def _render_url(self, token: Url) -> OutputNode:
        class_names = self._context.class_names
        href = sanitize_url(token.url)
        if href is None:
            logger.debug("Rejected unsafe URL %r", token.url)
            return OutputNode(
                role=NodeRole.FLAGGED_TEXT,
                text=_escaped(token.raw),
                class_name=class_names.unsafe_url,
            )

        return OutputNode(
            role=NodeRole.LINK,
            text=_escaped(truncate(token.raw, URL_DISPLAY_LIMIT)),
            href=href,
            title=_escaped(token.url),
            class_name=class_names.url,
            preview=self._context.show_link_previews,
            on_activate=self._bind(self._context.on_url_click, href),
        )

    def _render_mention(self, token: Mention) -> OutputNode:
        pubkey = token.pubkey
        display = self._context.resolve_peer_name(pubkey) or f"@{abbreviate(pubkey, 8)}"
        return OutputNode(
            role=NodeRole.MENTION,
            text=_escaped(display),
            title=_escaped(pubkey),
            class_name=self._context.class_names.mention,
            data=(("pubkey", pubkey),),
            on_activate=self._bind(self._context.on_mention_click, pubkey),
        )

    def _render_hashtag(self, token: Hashtag) -> OutputNode:
        tag = token.tag
        return OutputNode(
            role=NodeRole.HASHTAG,
            text=_escaped(f"#{tag}"),
            class_name=self._context.class_names.hashtag,
            data=(("hashtag", tag),),
            on_activate=self._bind(self._context.on_hashtag_click, tag),
        )

    def _render_nostr_entity(self, token: NostrEntity) -> OutputNode:
        value = token.bech32
        match token:
            case NostrNpub():
                display = self._context.resolve_peer_name(value) or abbreviate(value, 8, 4)
            case NostrNote():
                display = abbreviate(value, 8, 4)
            case _:
                display = abbreviate(value, 12)

        callback = self._context.on_nostr_entity_click
        on_activate = partial(callback, token.entity, value) if callback is not None else None

        return OutputNode(
            role=NodeRole.NOSTR_ENTITY,
            text=_escaped(display),
            title=_escaped(value),
            class_name=self._context.class_names.nostr_entity,
            data=((token.entity, value),),
            on_activate=on_activate,
        )

    def _render_emoji(self, token: Emoji) -> OutputNode:
        return OutputNode(
            role=NodeRole.EMOJI,
            text=_escaped(token.emoji),
            title=_escaped(token.shortcode),
            label=_escaped(token.shortcode.replace(":", "")),
            class_name=self._context.class_names.emoji,
        )

    def _render_code_block(self, token: CodeBlock) -> OutputNode:
        class_names = self._context.class_names
        code = sanitize_text(token.code)

        header = OutputNode(
            role=NodeRole.CODE_HEADER,
            text=escape_html(sanitize_text(token.language or "")) or "code",
            class_name=class_names.code_block_header,
            copy_text=code,
        )
        lines = tuple(
            OutputNode(
                role=NodeRole.CODE_LINE,
                text=escape_html(line),
                class_name=class_names.code_line_number,
                data=(("line", str(number)),),
            )
            for number, line in enumerate(code.split("\n"), start=1)
        )
        body = OutputNode(
            role=NodeRole.CODE_BODY,
            class_name=class_names.code_block_content,
            children=lines,
        )
        return OutputNode(
            role=NodeRole.CODE_BLOCK,
            class_name=class_names.code_block,
            children=(header, body),
            data=(("language", token.language),) if token.language else (),
        )

    def _render_inline_code(self, token: InlineCode) -> OutputNode:
        return OutputNode(
            role=NodeRole.INLINE_CODE,
            text=_escaped(token.code),
            class_name=self._context.class_names.inline_code,
        )

    @staticmethod
    def _bind(callback: Callable[[str], None] | None, value: str) -> Callable[[], None] | None:
        """Bind a host callback to its argument, or None when absent."""
        if callback is None:
            return None
        return partial(callback, value)


def render_tokens(
    tokens: Iterable[Token],
    context: RenderContext | None = None,
) -> tuple[OutputNode, ...]:
    """Render tokens to output nodes.

    Args:
        tokens: Token stream (e.g. ``ParseResult.tokens``)
        context: Host policy (None = no callbacks, default classes)

    Returns:
        One OutputNode per token, in order.

    """
    return TokenRenderer(context).render(tokens)
