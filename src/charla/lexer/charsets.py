"""Character sets for O(1) classification in the scanners.

All sets are frozensets: immutable, module-level, never reallocated.
"""

from string import ascii_letters, ascii_lowercase, digits

# Boundary class for identifiers: a match must not touch one of these
ASCII_ALNUM: frozenset[str] = frozenset(ascii_letters + digits)

# Lowercase bech32 alphabet as matched (callers lowercase before testing)
BECH32_CHARS: frozenset[str] = frozenset(ascii_lowercase + digits)

HEX_DIGITS: frozenset[str] = frozenset("0123456789abcdefABCDEF")

# Hashtag and fence-language characters
ASCII_WORD: frozenset[str] = frozenset(ascii_letters + digits + "_")

# Characters allowed between the colons of an emoji shortcode
SHORTCODE_CHARS: frozenset[str] = frozenset(ascii_letters + digits + "_+-")

# Characters that end a URL run (whitespace is checked separately)
URL_STOP_CHARS: frozenset[str] = frozenset("<>[]{}|\\^`")

# Characters trimmed from the end of a URL match
URL_TRAILING_PUNCTUATION: frozenset[str] = frozenset(".,!?;:)")