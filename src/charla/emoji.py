"""Emoji shortcode dictionary.

Maps colon-delimited shortcodes (``:smile:``) to single Unicode glyphs.
Lookups are case-insensitive; search is substring-based with exact-prefix
matches ranked first.

Example:
    >>> from charla.emoji import lookup_emoji, search_emojis
    >>> lookup_emoji("smile")
    '😄'
    >>> search_emojis("rock")[0].shortcode
    ':rocket:'

Thread Safety:
    EmojiDictionary is immutable after construction. ``all_shortcodes()``
    returns a fresh dict on every call, so callers can mutate it freely.

"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import NamedTuple

# Grouped by category, in display order. Insertion order is significant:
# it breaks ties in search() results.
_EMOJI_DATA: tuple[tuple[str, tuple[tuple[str, str], ...]], ...] = (
    (
        "smileys",
        (
            (":smile:", "\U0001F604"),
            (":grin:", "\U0001F601"),
            (":joy:", "\U0001F602"),
            (":rofl:", "\U0001F923"),
            (":wink:", "\U0001F609"),
            (":blush:", "\U0001F60A"),
            (":innocent:", "\U0001F607"),
            (":heart_eyes:", "\U0001F60D"),
            (":kissing_heart:", "\U0001F618"),
            (":stuck_out_tongue:", "\U0001F61B"),
            (":stuck_out_tongue_winking_eye:", "\U0001F61C"),
            (":sunglasses:", "\U0001F60E"),
            (":thinking:", "\U0001F914"),
            (":unamused:", "\U0001F612"),
            (":disappointed:", "\U0001F61E"),
            (":worried:", "\U0001F61F"),
            (":angry:", "\U0001F620"),
            (":rage:", "\U0001F621"),
            (":cry:", "\U0001F622"),
            (":sob:", "\U0001F62D"),
            (":scream:", "\U0001F631"),
            (":fearful:", "\U0001F628"),
            (":cold_sweat:", "\U0001F630"),
            (":sweat:", "\U0001F613"),
            (":sleeping:", "\U0001F634"),
            (":mask:", "\U0001F637"),
            (":skull:", "\U0001F480"),
            (":ghost:", "\U0001F47B"),
            (":alien:", "\U0001F47D"),
            (":robot:", "\U0001F916"),
            (":smiling_imp:", "\U0001F608"),
            (":poop:", "\U0001F4A9"),
            (":clown:", "\U0001F921"),
        ),
    ),
    (
        "gestures",
        (
            (":+1:", "\U0001F44D"),
            (":thumbsup:", "\U0001F44D"),
            (":-1:", "\U0001F44E"),
            (":thumbsdown:", "\U0001F44E"),
            (":ok_hand:", "\U0001F44C"),
            (":punch:", "\U0001F44A"),
            (":fist:", "✊"),
            (":wave:", "\U0001F44B"),
            (":raised_hand:", "✋"),
            (":clap:", "\U0001F44F"),
            (":pray:", "\U0001F64F"),
            (":muscle:", "\U0001F4AA"),
            (":point_up:", "☝"),
            (":point_down:", "\U0001F447"),
            (":point_left:", "\U0001F448"),
            (":point_right:", "\U0001F449"),
            (":middle_finger:", "\U0001F595"),
            (":writing_hand:", "✍"),
        ),
    ),
    (
        "hearts",
        (
            (":heart:", "❤"),
            (":red_heart:", "❤"),
            (":orange_heart:", "\U0001F9E1"),
            (":yellow_heart:", "\U0001F49B"),
            (":green_heart:", "\U0001F49A"),
            (":blue_heart:", "\U0001F499"),
            (":purple_heart:", "\U0001F49C"),
            (":black_heart:", "\U0001F5A4"),
            (":broken_heart:", "\U0001F494"),
            (":sparkling_heart:", "\U0001F496"),
            (":two_hearts:", "\U0001F495"),
            (":revolving_hearts:", "\U0001F49E"),
            (":heartbeat:", "\U0001F493"),
            (":heartpulse:", "\U0001F497"),
        ),
    ),
    (
        "symbols",
        (
            (":fire:", "\U0001F525"),
            (":100:", "\U0001F4AF"),
            (":star:", "⭐"),
            (":sparkles:", "✨"),
            (":zap:", "⚡"),
            (":boom:", "\U0001F4A5"),
            (":collision:", "\U0001F4A5"),
            (":lightning:", "\U0001F329"),
            (":rainbow:", "\U0001F308"),
            (":sun:", "☀"),
            (":moon:", "\U0001F319"),
            (":cloud:", "☁"),
            (":snowflake:", "❄"),
            (":droplet:", "\U0001F4A7"),
            (":ocean:", "\U0001F30A"),
            (":warning:", "⚠"),
            (":x:", "❌"),
            (":check:", "✔"),
            (":white_check_mark:", "✅"),
            (":question:", "❓"),
            (":exclamation:", "❗"),
        ),
    ),
    (
        "objects",
        (
            (":key:", "\U0001F511"),
            (":lock:", "\U0001F512"),
            (":unlock:", "\U0001F513"),
            (":bell:", "\U0001F514"),
            (":no_bell:", "\U0001F515"),
            (":bookmark:", "\U0001F516"),
            (":link:", "\U0001F517"),
            (":paperclip:", "\U0001F4CE"),
            (":scissors:", "✂"),
            (":pencil:", "✏"),
            (":pen:", "\U0001F58A"),
            (":memo:", "\U0001F4DD"),
            (":bulb:", "\U0001F4A1"),
            (":gear:", "⚙"),
            (":wrench:", "\U0001F527"),
            (":hammer:", "\U0001F528"),
            (":computer:", "\U0001F4BB"),
            (":phone:", "\U0001F4F1"),
            (":camera:", "\U0001F4F7"),
            (":tv:", "\U0001F4FA"),
            (":radio:", "\U0001F4FB"),
            (":speaker:", "\U0001F50A"),
            (":mute:", "\U0001F507"),
            (":microphone:", "\U0001F3A4"),
            (":movie_camera:", "\U0001F3A5"),
            (":bitcoin:", "₿"),
            (":rocket:", "\U0001F680"),
            (":satellite:", "\U0001F6F0"),
            (":flying_saucer:", "\U0001F6F8"),
        ),
    ),
    (
        "animals",
        (
            (":dog:", "\U0001F436"),
            (":cat:", "\U0001F431"),
            (":mouse:", "\U0001F42D"),
            (":hamster:", "\U0001F439"),
            (":rabbit:", "\U0001F430"),
            (":fox:", "\U0001F98A"),
            (":bear:", "\U0001F43B"),
            (":panda:", "\U0001F43C"),
            (":koala:", "\U0001F428"),
            (":tiger:", "\U0001F42F"),
            (":lion:", "\U0001F981"),
            (":cow:", "\U0001F42E"),
            (":pig:", "\U0001F437"),
            (":frog:", "\U0001F438"),
            (":monkey:", "\U0001F435"),
            (":chicken:", "\U0001F414"),
            (":penguin:", "\U0001F427"),
            (":bird:", "\U0001F426"),
            (":eagle:", "\U0001F985"),
            (":owl:", "\U0001F989"),
            (":bat:", "\U0001F987"),
            (":wolf:", "\U0001F43A"),
            (":unicorn:", "\U0001F984"),
            (":bee:", "\U0001F41D"),
            (":bug:", "\U0001F41B"),
            (":butterfly:", "\U0001F98B"),
            (":snail:", "\U0001F40C"),
            (":turtle:", "\U0001F422"),
            (":snake:", "\U0001F40D"),
            (":dragon:", "\U0001F409"),
            (":whale:", "\U0001F433"),
            (":dolphin:", "\U0001F42C"),
            (":fish:", "\U0001F41F"),
            (":octopus:", "\U0001F419"),
            (":crab:", "\U0001F980"),
        ),
    ),
    (
        "food",
        (
            (":apple:", "\U0001F34E"),
            (":banana:", "\U0001F34C"),
            (":orange:", "\U0001F34A"),
            (":lemon:", "\U0001F34B"),
            (":watermelon:", "\U0001F349"),
            (":grapes:", "\U0001F347"),
            (":strawberry:", "\U0001F353"),
            (":peach:", "\U0001F351"),
            (":cherries:", "\U0001F352"),
            (":pizza:", "\U0001F355"),
            (":burger:", "\U0001F354"),
            (":fries:", "\U0001F35F"),
            (":hotdog:", "\U0001F32D"),
            (":taco:", "\U0001F32E"),
            (":burrito:", "\U0001F32F"),
            (":popcorn:", "\U0001F37F"),
            (":cake:", "\U0001F370"),
            (":cookie:", "\U0001F36A"),
            (":chocolate:", "\U0001F36B"),
            (":candy:", "\U0001F36C"),
            (":lollipop:", "\U0001F36D"),
            (":donut:", "\U0001F369"),
            (":icecream:", "\U0001F368"),
            (":coffee:", "☕"),
            (":tea:", "\U0001F375"),
            (":beer:", "\U0001F37A"),
            (":wine:", "\U0001F377"),
            (":cocktail:", "\U0001F378"),
            (":champagne:", "\U0001F37E"),
        ),
    ),
    (
        "activities",
        (
            (":soccer:", "⚽"),
            (":basketball:", "\U0001F3C0"),
            (":football:", "\U0001F3C8"),
            (":baseball:", "⚾"),
            (":tennis:", "\U0001F3BE"),
            (":golf:", "⛳"),
            (":trophy:", "\U0001F3C6"),
            (":medal:", "\U0001F3C5"),
            (":gamepad:", "\U0001F3AE"),
            (":joystick:", "\U0001F579"),
            (":dice:", "\U0001F3B2"),
            (":chess:", "♟"),
            (":dart:", "\U0001F3AF"),
            (":bowling:", "\U0001F3B3"),
            (":guitar:", "\U0001F3B8"),
            (":piano:", "\U0001F3B9"),
            (":drum:", "\U0001F941"),
            (":art:", "\U0001F3A8"),
        ),
    ),
)


class EmojiMatch(NamedTuple):
    """A search hit: the glyph and the shortcode that produced it."""

    emoji: str
    shortcode: str


def _normalize_shortcode(shortcode: str) -> str:
    """Lowercase and wrap in colons (``Smile`` -> ``:smile:``)."""
    return f":{shortcode.strip(':').lower()}:"


class EmojiDictionary:
    """Immutable shortcode -> glyph mapping with category metadata.

    Usage:
        >>> emoji = EmojiDictionary({"faces": {":smile:": "😄"}})
        >>> emoji.lookup(":SMILE:")
        '😄'
        >>> emoji.category_of("smile")
        'faces'

    Thread Safety:
        All state is built in __init__ and never mutated afterwards.

    """

    __slots__ = ("_glyphs", "_categories", "_by_category")

    def __init__(
        self,
        entries: Mapping[str, Mapping[str, str]]
        | Iterable[tuple[str, Iterable[tuple[str, str]]]],
    ) -> None:
        """Build the dictionary.

        Args:
            entries: Category name -> {shortcode: glyph}, either as a mapping
                or as an ordered sequence of ``(category, pairs)``. Shortcodes
                are normalized to lowercase with surrounding colons. The first
                occurrence of a duplicated shortcode wins.
        """
        groups = entries.items() if isinstance(entries, Mapping) else entries

        self._glyphs: dict[str, str] = {}
        self._categories: dict[str, str] = {}
        self._by_category: dict[str, tuple[str, ...]] = {}

        for category, pairs in groups:
            items = pairs.items() if isinstance(pairs, Mapping) else pairs
            members: list[str] = []
            for shortcode, glyph in items:
                key = _normalize_shortcode(shortcode)
                if key in self._glyphs:
                    continue
                self._glyphs[key] = glyph
                self._categories[key] = category
                members.append(key)
            self._by_category[category] = self._by_category.get(category, ()) + tuple(members)

    def __len__(self) -> int:
        return len(self._glyphs)

    def __contains__(self, shortcode: object) -> bool:
        return isinstance(shortcode, str) and self.lookup(shortcode) is not None

    def lookup(self, shortcode: str) -> str | None:
        """Return the glyph for a shortcode, or None when unknown.

        Case-insensitive; surrounding colons are optional.
        """
        if not shortcode:
            return None
        return self._glyphs.get(_normalize_shortcode(shortcode))

    def search(self, query: str) -> list[EmojiMatch]:
        """Find shortcodes containing ``query``.

        Colons are stripped from the query. Shortcodes that start with the
        query come first; within each group, dictionary order is kept.
        An empty query returns every entry.
        """
        needle = query.replace(":", "").lower()
        prefix: list[EmojiMatch] = []
        rest: list[EmojiMatch] = []

        for shortcode, glyph in self._glyphs.items():
            name = shortcode[1:-1]
            if needle not in name:
                continue
            if name.startswith(needle):
                prefix.append(EmojiMatch(glyph, shortcode))
            else:
                rest.append(EmojiMatch(glyph, shortcode))

        return prefix + rest

    def all_shortcodes(self) -> dict[str, str]:
        """Return a copy of the full shortcode -> glyph mapping."""
        return dict(self._glyphs)

    def categories(self) -> tuple[str, ...]:
        """Category names in display order."""
        return tuple(self._by_category)

    def category_of(self, shortcode: str) -> str | None:
        """Return the category a shortcode belongs to, if known."""
        if not shortcode:
            return None
        return self._categories.get(_normalize_shortcode(shortcode))

    def by_category(self, category: str) -> list[EmojiMatch]:
        """Entries of one category, in dictionary order."""
        return [
            EmojiMatch(self._glyphs[shortcode], shortcode)
            for shortcode in self._by_category.get(category, ())
        ]


# Module-level default dictionary (built once, shared read-only)
DEFAULT_EMOJI: EmojiDictionary = EmojiDictionary(_EMOJI_DATA)


def lookup_emoji(shortcode: str) -> str | None:
    """Look up a shortcode in the default dictionary."""
    return DEFAULT_EMOJI.lookup(shortcode)


def search_emojis(query: str) -> list[EmojiMatch]:
    """Search the default dictionary."""
    return DEFAULT_EMOJI.search(query)


def get_emoji_shortcodes() -> dict[str, str]:
    """Return a copy of the default shortcode map."""
    return DEFAULT_EMOJI.all_shortcodes()


__all__ = [
    "DEFAULT_EMOJI",
    "EmojiDictionary",
    "EmojiMatch",
    "get_emoji_shortcodes",
    "lookup_emoji",
    "search_emojis",
]
