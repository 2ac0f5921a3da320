"""Framework-agnostic output nodes.

The token renderer decides what each piece of a message is (its role,
display text, link target and activation behavior); a NodeBuilder decides
how to materialize it (HTML string, terminal text, a UI toolkit's widgets).

Node text is already sanitized and HTML-escaped. Builders must not escape
it again; builders targeting non-HTML output unescape it.

Thread Safety:
    Nodes are frozen. ``on_activate`` runs host callbacks and is as
    thread-safe as those callbacks are.

"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum


class NodeRole(Enum):
    """What an output node represents."""

    TEXT = "text"
    LINK = "link"
    FLAGGED_TEXT = "flagged_text"  # Rejected URL: displayed, never interactive
    MENTION = "mention"
    HASHTAG = "hashtag"
    NOSTR_ENTITY = "nostr_entity"
    EMOJI = "emoji"
    CODE_BLOCK = "code_block"
    CODE_HEADER = "code_header"
    CODE_BODY = "code_body"
    CODE_LINE = "code_line"
    INLINE_CODE = "inline_code"
    LINE_BREAK = "line_break"


class Activation(Enum):
    """Outcome of activating (clicking) a node."""

    NONE = "none"
    HANDLED = "handled"  # A host callback ran
    OPEN_EXTERNAL = "open_external"  # Follow href in a new context, no referrer/opener


@dataclass(frozen=True, slots=True)
class OutputNode:
    """One rendered piece of a message.

    Attributes:
        role: What the node represents
        text: Display text, sanitized and HTML-escaped
        href: Sanitized link target (LINK only)
        title: Tooltip text, escaped
        class_name: Style classes for the node
        label: Accessible label (EMOJI)
        data: Data attribute pairs, e.g. (("pubkey", "ab12..."),)
        children: Nested nodes (CODE_BLOCK, CODE_BODY)
        copy_text: Raw text for a copy affordance (CODE_HEADER), not escaped
        preview: Host should fetch a link preview for ``href``
        on_activate: Host callback bound to this node, or None

    """

    role: NodeRole
    text: str = ""
    href: str | None = None
    title: str | None = None
    class_name: str = ""
    label: str | None = None
    data: tuple[tuple[str, str], ...] = ()
    children: tuple[OutputNode, ...] = ()
    copy_text: str | None = None
    preview: bool = False
    on_activate: Callable[[], None] | None = field(default=None, compare=False, repr=False)

    @property
    def interactive(self) -> bool:
        """True when activating the node does something."""
        return self.on_activate is not None or (self.role is NodeRole.LINK and bool(self.href))

    def activate(self) -> Activation:
        """Activate the node (the host's click handler calls this).

        Returns:
            HANDLED when a bound callback ran, OPEN_EXTERNAL for a link with
            no callback, NONE otherwise.

        """
        if self.on_activate is not None:
            self.on_activate()
            return Activation.HANDLED
        if self.role is NodeRole.LINK and self.href:
            return Activation.OPEN_EXTERNAL
        return Activation.NONE

    def get_data(self, key: str) -> str | None:
        """Look up a data attribute value by key."""
        for name, value in self.data:
            if name == key:
                return value
        return None
