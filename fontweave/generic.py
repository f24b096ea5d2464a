"""Generic font families."""

from __future__ import annotations

from enum import Enum
from typing import Hashable, Iterable


class GenericFamily(Enum):
    """Describes a generic font family."""

    #: Glyphs have finishing strokes, flared or tapering ends, or serifs.
    SERIF = 0
    #: Glyphs have plain stroke endings.
    SANS_SERIF = 1
    #: All glyphs have the same fixed width.
    MONOSPACE = 2
    #: Glyphs have joining strokes or other cursive characteristics.
    CURSIVE = 3
    #: Primarily decorative fonts.
    FANTASY = 4
    #: The default user interface font of the platform.
    SYSTEM_UI = 5
    #: The default user interface serif font.
    UI_SERIF = 6
    #: The default user interface sans-serif font.
    UI_SANS_SERIF = 7
    #: The default user interface monospace font.
    UI_MONOSPACE = 8
    #: The default user interface font with rounded features.
    UI_ROUNDED = 9
    #: Fonts designed to render emoji.
    EMOJI = 10
    #: Fonts for representing mathematics.
    MATH = 11
    #: Chinese characters between Song and Kai forms.
    FANG_SONG = 12

    @classmethod
    def parse(cls, s: str) -> GenericFamily | None:
        """Parse a CSS generic family name, returning None if it is not one."""
        return _BY_CSS_NAME.get(s.strip())

    @classmethod
    def all(cls) -> tuple[GenericFamily, ...]:
        """Return every generic family variant."""
        return _ALL

    @property
    def css_name(self) -> str:
        """The CSS name of the family."""
        return _CSS_NAMES[self]

    def __str__(self) -> str:
        return self.css_name


_CSS_NAMES: dict[GenericFamily, str] = {
    GenericFamily.SERIF: "serif",
    GenericFamily.SANS_SERIF: "sans-serif",
    GenericFamily.MONOSPACE: "monospace",
    GenericFamily.CURSIVE: "cursive",
    GenericFamily.FANTASY: "fantasy",
    GenericFamily.SYSTEM_UI: "system-ui",
    GenericFamily.UI_SERIF: "ui-serif",
    GenericFamily.UI_SANS_SERIF: "ui-sans-serif",
    GenericFamily.UI_MONOSPACE: "ui-monospace",
    GenericFamily.UI_ROUNDED: "ui-rounded",
    GenericFamily.EMOJI: "emoji",
    GenericFamily.MATH: "math",
    GenericFamily.FANG_SONG: "fangsong",
}

_BY_CSS_NAME: dict[str, GenericFamily] = {name: fam for fam, name in _CSS_NAMES.items()}

_ALL: tuple[GenericFamily, ...] = (
    GenericFamily.SANS_SERIF,
    GenericFamily.SERIF,
    GenericFamily.MONOSPACE,
    GenericFamily.CURSIVE,
    GenericFamily.FANTASY,
    GenericFamily.SYSTEM_UI,
    GenericFamily.UI_SERIF,
    GenericFamily.UI_SANS_SERIF,
    GenericFamily.UI_MONOSPACE,
    GenericFamily.UI_ROUNDED,
    GenericFamily.EMOJI,
    GenericFamily.MATH,
    GenericFamily.FANG_SONG,
)


class GenericFamilyMap:
    """Maps generic families to family identifiers."""

    def __init__(self) -> None:
        self._map: dict[GenericFamily, list[Hashable]] = {fam: [] for fam in GenericFamily}

    def get(self, generic: GenericFamily) -> tuple[Hashable, ...]:
        """Return the family identifiers associated with a generic family."""
        return tuple(self._map[generic])

    def set(self, generic: GenericFamily, families: Iterable[Hashable]) -> None:
        """Replace the family identifiers for a generic family."""
        self._map[generic] = list(families)

    def append(self, generic: GenericFamily, families: Iterable[Hashable]) -> None:
        """Append family identifiers to the list for a generic family."""
        self._map[generic].extend(families)

    def __repr__(self) -> str:
        entries = {str(fam): ids for fam, ids in self._map.items() if ids}
        return f"GenericFamilyMap({entries!r})"