"""Render-time policy: host callbacks, peer names and style classes.

RenderContext carries everything the host contributes to rendering. Every
callback is optional; a missing callback makes activation of the affected
nodes a no-op without changing what is rendered.

Example:
    >>> ctx = RenderContext.from_dict({
    ...     "getPeerName": directory.get,
    ...     "classNames": {"mention": "font-bold"},
    ... })
    >>> ctx.class_names.mention
    'font-bold'

"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, fields, replace
from typing import Any

from charla.utils.logger import get_logger

logger = get_logger(__name__)

_CLASS_NAME_ALIASES: dict[str, str] = {
    "unsafeUrl": "unsafe_url",
    "nostrEntity": "nostr_entity",
    "codeBlock": "code_block",
    "codeBlockHeader": "code_block_header",
    "codeBlockContent": "code_block_content",
    "codeLineNumber": "code_line_number",
    "inlineCode": "inline_code",
}

_CONTEXT_ALIASES: dict[str, str] = {
    "getPeerName": "get_peer_name",
    "onMentionClick": "on_mention_click",
    "onHashtagClick": "on_hashtag_click",
    "onNostrEntityClick": "on_nostr_entity_click",
    "onUrlClick": "on_url_click",
    "showLinkPreviews": "show_link_previews",
    "classNames": "class_names",
}


@dataclass(frozen=True, slots=True)
class ClassNames:
    """Style classes per node category.

    Defaults target the terminal-themed chat UI. Override any subset with
    ``merge``.

    """

    text: str = ""
    url: str = "text-terminal-cyan underline hover:text-terminal-cyan/80 cursor-pointer break-all"
    unsafe_url: str = "text-terminal-red"
    mention: str = "text-terminal-yellow hover:text-terminal-yellow/80 cursor-pointer font-semibold"
    hashtag: str = "text-terminal-magenta hover:text-terminal-magenta/80 cursor-pointer"
    nostr_entity: str = "text-terminal-cyan hover:text-terminal-cyan/80 cursor-pointer font-mono text-sm"
    emoji: str = "inline"
    code_block: str = (
        "my-2 border border-terminal-green/30 rounded overflow-hidden bg-terminal-bg/50"
    )
    code_block_header: str = (
        "px-3 py-1 bg-terminal-green/10 text-terminal-green/70 text-xs font-mono "
        "border-b border-terminal-green/30 flex justify-between items-center"
    )
    code_block_content: str = (
        "p-3 font-mono text-sm overflow-x-auto whitespace-pre text-terminal-green/90"
    )
    code_line_number: str = "select-none text-terminal-green/30 w-8 text-right pr-3 flex-shrink-0"
    inline_code: str = (
        "px-1.5 py-0.5 bg-terminal-green/10 border border-terminal-green/30 rounded "
        "font-mono text-sm text-terminal-green/90"
    )

    def merge(self, overrides: ClassNames | Mapping[str, str | None] | None) -> ClassNames:
        """Return a copy with ``overrides`` applied.

        A ClassNames replaces this one outright. A mapping may use attribute
        names or their camelCase spelling; unknown keys and None values are
        ignored.

        """
        if overrides is None:
            return self
        if isinstance(overrides, ClassNames):
            return overrides

        valid_fields = {f.name for f in fields(self)}
        changes: dict[str, str] = {}
        for key, value in overrides.items():
            name = _CLASS_NAME_ALIASES.get(key, key)
            if name in valid_fields and value is not None:
                changes[name] = value
        return replace(self, **changes) if changes else self


DEFAULT_CLASS_NAMES = ClassNames()


@dataclass(frozen=True, slots=True)
class RenderContext:
    """Host-supplied rendering policy.

    Attributes:
        get_peer_name: pubkey -> display name, or None when unknown
        on_mention_click: Called with the mention's pubkey
        on_hashtag_click: Called with the tag (without ``#``)
        on_nostr_entity_click: Called with (entity, value), entity being
            npub/note/nevent/nprofile/naddr
        on_url_click: Called with the sanitized href; when absent a link
            activation means "open externally"
        show_link_previews: Mark links for out-of-band preview fetching
        class_names: ClassNames, or a mapping of overrides merged over the
            defaults

    """

    get_peer_name: Callable[[str], str | None] | None = None
    on_mention_click: Callable[[str], None] | None = None
    on_hashtag_click: Callable[[str], None] | None = None
    on_nostr_entity_click: Callable[[str, str], None] | None = None
    on_url_click: Callable[[str], None] | None = None
    show_link_previews: bool = False
    class_names: ClassNames = field(default_factory=ClassNames)

    def __post_init__(self) -> None:
        if not isinstance(self.class_names, ClassNames):
            object.__setattr__(self, "class_names", DEFAULT_CLASS_NAMES.merge(self.class_names))

    @classmethod
    def from_dict(cls, config_dict: Mapping[str, Any]) -> RenderContext:
        """Create a RenderContext from a dictionary.

        Keys may be attribute names or their camelCase spelling. Unknown keys
        and None values are ignored.

        """
        valid_fields = {f.name for f in fields(cls)}
        filtered: dict[str, Any] = {}
        for key, value in config_dict.items():
            name = _CONTEXT_ALIASES.get(key, key)
            if name in valid_fields and value is not None:
                filtered[name] = value
        return cls(**filtered)

    def resolve_peer_name(self, pubkey: str) -> str | None:
        """Look up a display name, treating lookup failures as unknown."""
        if self.get_peer_name is None:
            return None
        try:
            name = self.get_peer_name(pubkey)
        except Exception:
            logger.debug("Peer name lookup failed for %s", pubkey, exc_info=True)
            return None
        return name or None


DEFAULT_RENDER_CONTEXT = RenderContext()
