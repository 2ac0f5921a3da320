"""NodeBuilder protocol: stable interface for output node materializers.

Any builder that implements ``build(nodes) -> str`` conforms to this
protocol. ``HtmlBuilder`` and ``PlainTextBuilder`` are the built-in
implementations; hosts with a UI toolkit walk the nodes themselves.

Example:
    from charla.renderers.protocol import NodeBuilder

    def show(builder: NodeBuilder, nodes: tuple[OutputNode, ...]) -> str:
        return builder.build(nodes)

"""

from collections.abc import Sequence
from typing import Protocol

from charla.renderers.nodes import OutputNode


class NodeBuilder(Protocol):
    """Protocol for output node builders."""

    def build(self, nodes: Sequence[OutputNode]) -> str:
        """Materialize rendered nodes as a string.

        Args:
            nodes: Output nodes, in message order.

        Returns:
            Materialized output.

        Raises:
            RenderError: If a node has a role the builder cannot handle.

        """
        ...
