"""Plain-text builder for terminal output.

Turns output nodes back into readable text: entities in node text are
unescaped, links show their display text, code blocks get a language
header and numbered lines.

Example:
    >>> from charla import parse, render_tokens
    >>> nodes = render_tokens(parse("see `x` #nostr").tokens)
    >>> PlainTextBuilder().build(nodes)
    'see `x` #nostr'
"""

import html
from collections.abc import Sequence

from charla.errors import RenderError
from charla.renderers.nodes import NodeRole, OutputNode
from charla.stringbuilder import StringBuilder


class PlainTextBuilder:
    """Build terminal text from output nodes."""

    __slots__ = ("_show_hrefs",)

    def __init__(self, *, show_hrefs: bool = False) -> None:
        """Initialize builder.

        Args:
            show_hrefs: Append the full link target after each link's text
        """
        self._show_hrefs = show_hrefs

    def build(self, nodes: Sequence[OutputNode]) -> str:
        sb = StringBuilder()
        for node in nodes:
            self._build_node(node, sb)
        return sb.build()

    def _build_node(self, node: OutputNode, sb: StringBuilder) -> None:
        text = html.unescape(node.text)
        match node.role:
            case (
                NodeRole.TEXT
                | NodeRole.FLAGGED_TEXT
                | NodeRole.MENTION
                | NodeRole.HASHTAG
                | NodeRole.NOSTR_ENTITY
                | NodeRole.EMOJI
            ):
                sb.append(text)
            case NodeRole.LINK:
                sb.append(text)
                if self._show_hrefs and node.href:
                    sb.append(f" <{node.href}>")
            case NodeRole.INLINE_CODE:
                sb.append(f"`{text}`")
            case NodeRole.CODE_BLOCK | NodeRole.CODE_BODY:
                for child in node.children:
                    self._build_node(child, sb)
            case NodeRole.CODE_HEADER:
                sb.append(f"[{text}]\n")
            case NodeRole.CODE_LINE:
                number = node.get_data("line") or ""
                sb.append(f"{number:>4}  {text}\n")
            case NodeRole.LINE_BREAK:
                sb.append("\n")
            case _:
                raise RenderError("PlainTextBuilder cannot build this node", role=str(node.role))
