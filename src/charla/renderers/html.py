"""HTML builder using StringBuilder pattern.

Materializes output nodes as an HTML fragment. Node text arrives already
escaped and is written as-is; attribute values are escaped here.

Links open in a new browsing context with ``rel="noopener noreferrer"``.
Flagged text (a rejected URL) is a plain span and never an anchor.

Thread Safety:
HtmlBuilder holds only configuration. Each build() call uses its own
StringBuilder, so one instance can be shared across threads.

"""

import html
from collections.abc import Sequence

from charla.errors import RenderError
from charla.renderers.nodes import NodeRole, OutputNode
from charla.stringbuilder import StringBuilder

_COPY_BUTTON_CLASS = "text-terminal-green/50 hover:text-terminal-green transition-colors"


def attr_escape(s: str) -> str:
    """Escape a value for a double-quoted attribute."""
    return html.escape(s, quote=True)


def _attrs(*pairs: tuple[str, str | None]) -> str:
    """Serialize attributes, skipping None and empty values."""
    return "".join(f' {name}="{attr_escape(value)}"' for name, value in pairs if value)


def _data_attrs(node: OutputNode) -> str:
    return "".join(f' data-{name}="{attr_escape(value)}"' for name, value in node.data)


class HtmlBuilder:
    """Build an HTML fragment from output nodes.

    Usage:
        >>> from charla import RenderContext, parse, render_tokens
        >>> ctx = RenderContext(class_names={"hashtag": "tag"})
        >>> nodes = render_tokens(parse("hi #nostr").tokens, ctx)
        >>> HtmlBuilder().build(nodes)
        'hi <span class="tag" data-hashtag="nostr">#nostr</span>'

    Thread Safety:
        Safe to share; build() keeps all state local.

    """

    __slots__ = ("_copy_button_class",)

    def __init__(self, *, copy_button_class: str = _COPY_BUTTON_CLASS) -> None:
        """Initialize builder.

        Args:
            copy_button_class: Classes for the copy button in code block headers
        """
        self._copy_button_class = copy_button_class

    def build(self, nodes: Sequence[OutputNode]) -> str:
        """Build HTML for nodes in order.

        Raises:
            RenderError: If a node has a role this builder does not know.
        """
        sb = StringBuilder()
        for node in nodes:
            self._build_node(node, sb)
        return sb.build()

    def _build_node(self, node: OutputNode, sb: StringBuilder) -> None:
        match node.role:
            case NodeRole.TEXT:
                if node.class_name:
                    sb.append(f'<span{_attrs(("class", node.class_name))}>')
                    sb.append(node.text).append("</span>")
                else:
                    sb.append(node.text)
            case NodeRole.LINK:
                sb.append("<a")
                sb.append(_attrs(("href", node.href)))
                sb.append(' target="_blank" rel="noopener noreferrer"')
                sb.append(_attrs(("class", node.class_name)))
                # Already escaped; written as-is
                if node.title:
                    sb.append(f' title="{node.title}"')
                if node.preview:
                    sb.append(' data-preview="true"')
                sb.append(">").append(node.text).append("</a>")
            case NodeRole.FLAGGED_TEXT:
                sb.append(f'<span{_attrs(("class", node.class_name))}>')
                sb.append(node.text).append("</span>")
            case NodeRole.MENTION | NodeRole.HASHTAG | NodeRole.NOSTR_ENTITY:
                sb.append(f"<span{_attrs(('class', node.class_name))}")
                if node.title:
                    sb.append(f' title="{node.title}"')
                sb.append(_data_attrs(node)).append(">")
                sb.append(node.text).append("</span>")
            case NodeRole.EMOJI:
                sb.append(f"<span{_attrs(('class', node.class_name))}")
                if node.title:
                    sb.append(f' title="{node.title}"')
                sb.append(' role="img"')
                if node.label:
                    sb.append(f' aria-label="{node.label}"')
                sb.append(">").append(node.text).append("</span>")
            case NodeRole.CODE_BLOCK:
                sb.append(f"<div{_attrs(('class', node.class_name))}{_data_attrs(node)}>")
                for child in node.children:
                    self._build_node(child, sb)
                sb.append("</div>")
            case NodeRole.CODE_HEADER:
                sb.append(f"<div{_attrs(('class', node.class_name))}>")
                sb.append("<span>").append(node.text).append("</span>")
                sb.append(
                    f'<button type="button"{_attrs(("class", self._copy_button_class))}'
                    ' title="Copy code"'
                    f' data-code="{attr_escape(node.copy_text or "")}">copy</button>'
                )
                sb.append("</div>")
            case NodeRole.CODE_BODY:
                sb.append(f"<div{_attrs(('class', node.class_name))}>")
                for child in node.children:
                    self._build_node(child, sb)
                sb.append("</div>")
            case NodeRole.CODE_LINE:
                number = node.get_data("line") or ""
                sb.append(f'<div class="flex"{_data_attrs(node)}>')
                sb.append(f"<span{_attrs(('class', node.class_name))}>{attr_escape(number)}</span>")
                sb.append('<span class="flex-1">').append(node.text).append("</span>")
                sb.append("</div>")
            case NodeRole.INLINE_CODE:
                sb.append(f"<code{_attrs(('class', node.class_name))}>")
                sb.append(node.text).append("</code>")
            case NodeRole.LINE_BREAK:
                sb.append("<br>")
            case _:
                raise RenderError("HtmlBuilder cannot build this node", role=str(node.role))
