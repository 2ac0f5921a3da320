"""Parse result container.

ParseResult bundles the token stream of one message with summary data
derived from it in a single pass: presence flags per category plus the
URLs, mentioned pubkeys and hashtags in token order (repeats kept).

Thread Safety:
    ParseResult is frozen and holds only tuples of frozen tokens.

"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from charla.tokens import (
    CODE_KINDS,
    NOSTR_KINDS,
    Hashtag,
    Mention,
    Token,
    TokenKind,
    Url,
)


@dataclass(frozen=True, slots=True)
class ParseResult:
    """Tokens of one message plus derived summary data.

    Attributes:
        tokens: Ordered, non-overlapping tokens covering the whole source
        source_length: Length of the parsed source
        has_urls: At least one Url token
        has_mentions: At least one Mention token
        has_hashtags: At least one Hashtag token
        has_nostr_entities: At least one bare Nostr entity token
        has_code: At least one CodeBlock or InlineCode token
        has_emoji: At least one Emoji token
        urls: Normalized ``url`` of every Url token
        mentioned_pubkeys: ``pubkey`` of every Mention token
        hashtags: ``tag`` of every Hashtag token

    """

    tokens: tuple[Token, ...] = ()
    source_length: int = 0
    has_urls: bool = False
    has_mentions: bool = False
    has_hashtags: bool = False
    has_nostr_entities: bool = False
    has_code: bool = False
    has_emoji: bool = False
    urls: tuple[str, ...] = ()
    mentioned_pubkeys: tuple[str, ...] = ()
    hashtags: tuple[str, ...] = ()

    @classmethod
    def from_tokens(cls, tokens: Iterable[Token], source_length: int) -> ParseResult:
        """Build a result, deriving the summary data from the tokens."""
        tokens = tuple(tokens)
        urls: list[str] = []
        pubkeys: list[str] = []
        tags: list[str] = []
        kinds: set[TokenKind] = set()

        for token in tokens:
            kinds.add(token.kind)
            match token:
                case Url():
                    urls.append(token.url)
                case Mention():
                    pubkeys.append(token.pubkey)
                case Hashtag():
                    tags.append(token.tag)

        return cls(
            tokens=tokens,
            source_length=source_length,
            has_urls=bool(urls),
            has_mentions=bool(pubkeys),
            has_hashtags=bool(tags),
            has_nostr_entities=not kinds.isdisjoint(NOSTR_KINDS),
            has_code=not kinds.isdisjoint(CODE_KINDS),
            has_emoji=TokenKind.EMOJI in kinds,
            urls=tuple(urls),
            mentioned_pubkeys=tuple(pubkeys),
            hashtags=tuple(tags),
        )

    def __iter__(self) -> Iterator[Token]:
        return iter(self.tokens)

    def __len__(self) -> int:
        return len(self.tokens)
