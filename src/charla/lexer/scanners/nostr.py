"""Nostr identifier scanner mixin: ``@`` mentions and bare bech32 entities."""

from charla.lexer.charsets import ASCII_ALNUM, BECH32_CHARS, HEX_DIGITS
from charla.tokens import (
    Mention,
    NostrEntity,
    NostrNaddr,
    NostrNevent,
    NostrNote,
    NostrNprofile,
    NostrNpub,
)

# Fixed payload length of npub/note identifiers after the "1" separator
_KEY_PAYLOAD_MIN = 58
_KEY_PAYLOAD_MAX = 59

_HEX_PUBKEY_LEN = 64

# (prefix, token class, min payload, max payload or None for unbounded)
_ENTITY_PREFIXES: tuple[tuple[str, type[NostrEntity], int, int | None], ...] = (
    ("npub1", NostrNpub, _KEY_PAYLOAD_MIN, _KEY_PAYLOAD_MAX),
    ("note1", NostrNote, _KEY_PAYLOAD_MIN, _KEY_PAYLOAD_MAX),
    ("nevent1", NostrNevent, 1, None),
    ("nprofile1", NostrNprofile, 1, None),
    ("naddr1", NostrNaddr, 1, None),
)

_LONGEST_PREFIX = max(len(prefix) for prefix, *_ in _ENTITY_PREFIXES)


class NostrScannerMixin:
    """Mixin recognizing mentions at ``@`` and bare entities at ``n``/``N``.

    Payloads are matched case-insensitively and kept as written. A payload
    must not run straight into another ASCII letter or digit.

    """

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _scan_identifier(
        self,
        pos: int,
        charset: frozenset[str],
        min_len: int,
        max_len: int | None,
    ) -> int | None:
        """Scan an identifier payload starting at ``pos``.

        Returns:
            End offset of the payload, or None when it is too short or
            continues past ``max_len`` into more letters/digits.
        """
        source = self._source
        limit = self._source_len if max_len is None else min(self._source_len, pos + max_len)
        end = pos
        while end < limit and source[end].lower() in charset:
            end += 1
        if end - pos < min_len:
            return None
        if end < self._source_len and source[end] in ASCII_ALNUM:
            return None
        return end

    def _match_mention(self, pos: int) -> Mention | None:
        source = self._source
        start = pos + 1

        if source[start : start + 5].lower() == "npub1":
            end = self._scan_identifier(start + 5, BECH32_CHARS, _KEY_PAYLOAD_MIN, _KEY_PAYLOAD_MAX)
            is_npub = True
        else:
            end = self._scan_identifier(start, HEX_DIGITS, _HEX_PUBKEY_LEN, _HEX_PUBKEY_LEN)
            is_npub = False

        if end is None:
            return None

        return Mention(
            raw=source[pos:end],
            start=pos,
            end=end,
            pubkey=source[start:end],
            is_npub=is_npub,
        )

    def _match_nostr_entity(self, pos: int) -> NostrEntity | None:
        source = self._source
        if pos > 0 and source[pos - 1] in ASCII_ALNUM:
            return None

        head = source[pos : pos + _LONGEST_PREFIX].lower()
        for prefix, token_class, min_len, max_len in _ENTITY_PREFIXES:
            if not head.startswith(prefix):
                continue
            end = self._scan_identifier(pos + len(prefix), BECH32_CHARS, min_len, max_len)
            if end is None:
                return None
            raw = source[pos:end]
            return token_class(raw=raw, start=pos, end=end, bech32=raw)
        return None
