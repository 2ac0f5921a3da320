"""Token definitions for the Charla tokenizer.

The lexer turns a message body into a stream of Token objects. Every token
carries the exact source substring it covers (``raw``) and its half-open
character span (``start``, ``end``); each kind adds its own payload.

Token Hierarchy:
Token (base)
├── Text
├── Url
├── Mention
├── Hashtag
├── NostrEntity
│   ├── NostrNpub
│   ├── NostrNote
│   ├── NostrNevent
│   ├── NostrNprofile
│   └── NostrNaddr
├── Emoji
├── CodeBlock
├── InlineCode
└── Newline

Thread Safety:
All tokens are frozen (immutable) and safe to share across threads.
TokenKind is an enum (inherently immutable).

"""

from dataclasses import dataclass
from enum import Enum
from typing import ClassVar


class TokenKind(Enum):
    """Token kinds produced by the lexer.

    Values are the stable wire names used by serialization.

    """

    TEXT = "text"
    URL = "url"
    MENTION = "mention"
    HASHTAG = "hashtag"

    # Bare bech32 entity references (no sigil)
    NOSTR_NPUB = "nostr_npub"
    NOSTR_NOTE = "nostr_note"
    NOSTR_NEVENT = "nostr_nevent"
    NOSTR_NPROFILE = "nostr_nprofile"
    NOSTR_NADDR = "nostr_naddr"

    EMOJI = "emoji"
    CODE_BLOCK = "code_block"
    INLINE_CODE = "inline_code"
    NEWLINE = "newline"


NOSTR_KINDS: frozenset[TokenKind] = frozenset(
    {
        TokenKind.NOSTR_NPUB,
        TokenKind.NOSTR_NOTE,
        TokenKind.NOSTR_NEVENT,
        TokenKind.NOSTR_NPROFILE,
        TokenKind.NOSTR_NADDR,
    }
)

CODE_KINDS: frozenset[TokenKind] = frozenset({TokenKind.CODE_BLOCK, TokenKind.INLINE_CODE})


@dataclass(frozen=True, slots=True)
class Token:
    """Base class for all tokens.

    Attributes:
        raw: Exact source substring covered by the token
        start: Start offset in the source (inclusive)
        end: End offset in the source (exclusive)

    """

    kind: ClassVar[TokenKind]

    raw: str
    start: int
    end: int


@dataclass(frozen=True, slots=True)
class Text(Token):
    """Run of plain, unrecognized text."""

    kind: ClassVar[TokenKind] = TokenKind.TEXT


@dataclass(frozen=True, slots=True)
class Url(Token):
    """Web link.

    ``raw`` is the text as written (trailing punctuation excluded);
    ``url`` is the normalized absolute form, with ``https://`` synthesized
    for bare ``www.`` links.

    """

    kind: ClassVar[TokenKind] = TokenKind.URL

    url: str
    domain: str
    path: str
    protocol: str


@dataclass(frozen=True, slots=True)
class Mention(Token):
    """``@`` reference to a peer by hex pubkey or npub.

    ``pubkey`` is the payload without the leading ``@``.

    """

    kind: ClassVar[TokenKind] = TokenKind.MENTION

    pubkey: str
    is_npub: bool


@dataclass(frozen=True, slots=True)
class Hashtag(Token):
    """``#tag``; ``tag`` excludes the ``#``."""

    kind: ClassVar[TokenKind] = TokenKind.HASHTAG

    tag: str


@dataclass(frozen=True, slots=True)
class NostrEntity(Token):
    """Bare bech32 entity reference (``npub1…``, ``note1…``, ...).

    ``entity`` names the bech32 prefix without its separator.

    """

    kind: ClassVar[TokenKind]
    entity: ClassVar[str]

    bech32: str


@dataclass(frozen=True, slots=True)
class NostrNpub(NostrEntity):
    """Public key reference."""

    kind: ClassVar[TokenKind] = TokenKind.NOSTR_NPUB
    entity: ClassVar[str] = "npub"


@dataclass(frozen=True, slots=True)
class NostrNote(NostrEntity):
    """Event (note) id reference."""

    kind: ClassVar[TokenKind] = TokenKind.NOSTR_NOTE
    entity: ClassVar[str] = "note"


@dataclass(frozen=True, slots=True)
class NostrNevent(NostrEntity):
    """Event reference with relay hints."""

    kind: ClassVar[TokenKind] = TokenKind.NOSTR_NEVENT
    entity: ClassVar[str] = "nevent"


@dataclass(frozen=True, slots=True)
class NostrNprofile(NostrEntity):
    """Profile reference with relay hints."""

    kind: ClassVar[TokenKind] = TokenKind.NOSTR_NPROFILE
    entity: ClassVar[str] = "nprofile"


@dataclass(frozen=True, slots=True)
class NostrNaddr(NostrEntity):
    """Parameterized replaceable event address."""

    kind: ClassVar[TokenKind] = TokenKind.NOSTR_NADDR
    entity: ClassVar[str] = "naddr"


@dataclass(frozen=True, slots=True)
class Emoji(Token):
    """Known emoji shortcode.

    ``shortcode`` is kept as written (``:SMILE:``); ``emoji`` is the glyph.

    """

    kind: ClassVar[TokenKind] = TokenKind.EMOJI

    shortcode: str
    emoji: str


@dataclass(frozen=True, slots=True)
class CodeBlock(Token):
    """Fenced code block.

    Markdown-ish: ```lang\\ncode\\n```
    ``code`` excludes the fences; ``language`` is None when not given.

    """

    kind: ClassVar[TokenKind] = TokenKind.CODE_BLOCK

    code: str
    language: str | None = None


@dataclass(frozen=True, slots=True)
class InlineCode(Token):
    """Inline code span; ``code`` excludes the backticks."""

    kind: ClassVar[TokenKind] = TokenKind.INLINE_CODE

    code: str


@dataclass(frozen=True, slots=True)
class Newline(Token):
    """Line break (emitted only when newlines are preserved)."""

    kind: ClassVar[TokenKind] = TokenKind.NEWLINE


__all__ = [
    "CODE_KINDS",
    "NOSTR_KINDS",
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
]
