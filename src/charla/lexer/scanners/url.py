"""URL scanner mixin.

Recognizes ``http://`` and ``https://`` links (scheme case-insensitive)
and bare ``www.`` links. The match is a greedy run of URL characters with
trailing sentence punctuation trimmed off.
"""

from charla.lexer.charsets import (
    ASCII_ALNUM,
    URL_STOP_CHARS,
    URL_TRAILING_PUNCTUATION,
)
from charla.tokens import Url
from charla.utils.logger import get_logger
from charla.utils.urls import split_url

logger = get_logger(__name__)

_SCHEME_PREFIXES = ("https://", "http://")
_WWW_PREFIX = "www."


def trim_url_punctuation(candidate: str) -> str:
    """Strip trailing punctuation that belongs to the sentence, not the URL.

    ``. , ! ? ; :`` are always stripped from the end. A closing ``)`` is
    stripped only while the URL has more ``)`` than ``(``, so balanced
    Wikipedia-style paths keep their parenthesis.

    Examples:
        >>> trim_url_punctuation("https://example.com.")
        'https://example.com'
        >>> trim_url_punctuation("https://en.wikipedia.org/wiki/Foo_(bar).")
        'https://en.wikipedia.org/wiki/Foo_(bar)'
        >>> trim_url_punctuation("https://example.com/path)")
        'https://example.com/path'
    """
    opens = candidate.count("(")
    closes = candidate.count(")")
    end = len(candidate)
    while end > 0:
        char = candidate[end - 1]
        if char not in URL_TRAILING_PUNCTUATION:
            break
        if char == ")":
            if closes <= opens:
                break
            closes -= 1
        end -= 1
    return candidate[:end]


class UrlScannerMixin:
    """Mixin recognizing web links at ``h``/``H``/``w``/``W``."""

    # These will be set by the Lexer class
    _source: str
    _source_len: int

    def _match_url(self, pos: int) -> Url | None:
        source = self._source
        head = source[pos : pos + 8].lower()

        bare = False
        for prefix in _SCHEME_PREFIXES:
            if head.startswith(prefix):
                prefix_len = len(prefix)
                break
        else:
            if not head.startswith(_WWW_PREFIX):
                return None
            # "awww." or "x.www." is not the start of a link
            if pos > 0 and (source[pos - 1] in ASCII_ALNUM or source[pos - 1] == "."):
                return None
            prefix_len = len(_WWW_PREFIX)
            bare = True

        end = self._scan_url_run(pos + prefix_len)
        raw = trim_url_punctuation(source[pos:end])
        if len(raw) <= prefix_len:
            return None

        return self._make_url(raw, pos, bare)

    def _scan_url_run(self, pos: int) -> int:
        """Return the end of the URL character run starting at ``pos``."""
        source = self._source
        source_len = self._source_len
        while pos < source_len:
            char = source[pos]
            if char in URL_STOP_CHARS or char.isspace():
                break
            pos += 1
        return pos

    def _make_url(self, raw: str, pos: int, bare: bool) -> Url:
        absolute = f"https://{raw}" if bare else raw
        end = pos + len(raw)
        try:
            parts = split_url(absolute)
        except ValueError:
            logger.debug("URL decomposition failed for %r", absolute, exc_info=True)
            protocol = "https" if bare else absolute.partition(":")[0].lower()
            return Url(
                raw=raw,
                start=pos,
                end=end,
                url=absolute,
                domain=absolute,
                path="",
                protocol=protocol,
            )
        return Url(
            raw=raw,
            start=pos,
            end=end,
            url=parts.href,
            domain=parts.domain,
            path=parts.path,
            protocol=parts.protocol,
        )
