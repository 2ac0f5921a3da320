"""Charla renderers.

The token renderer turns tokens into framework-agnostic output nodes;
builders materialize those nodes.

Available Builders:
- HtmlBuilder: Builds an HTML fragment using the StringBuilder pattern
- PlainTextBuilder: Builds readable terminal text

Thread Safety:
Renderers and builders keep per-call state local.
Safe for concurrent use from multiple threads.

"""

from charla.renderers.context import DEFAULT_CLASS_NAMES, ClassNames, RenderContext
from charla.renderers.core import TokenRenderer, render_tokens
from charla.renderers.html import HtmlBuilder
from charla.renderers.nodes import Activation, NodeRole, OutputNode
from charla.renderers.protocol import NodeBuilder
from charla.renderers.text import PlainTextBuilder

__all__ = [
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
    "render_tokens",
]
