"""Bidirectional character classes, bracket pairs and level helpers."""

from __future__ import annotations

import unicodedata
from dataclasses import dataclass
from enum import Enum
from itertools import groupby
from typing import ClassVar, Sequence

#: Type alias for a bidirectional embedding level.
BidiLevel = int


class BidiClass(Enum):
    """Unicode Bidi_Class property values."""

    L = "L"
    R = "R"
    AL = "AL"
    EN = "EN"
    ES = "ES"
    ET = "ET"
    AN = "AN"
    CS = "CS"
    NSM = "NSM"
    BN = "BN"
    B = "B"
    S = "S"
    WS = "WS"
    ON = "ON"
    LRE = "LRE"
    LRO = "LRO"
    RLE = "RLE"
    RLO = "RLO"
    PDF = "PDF"
    LRI = "LRI"
    RLI = "RLI"
    FSI = "FSI"
    PDI = "PDI"

    def __str__(self) -> str:
        return self.value


_C = BidiClass

#: Embedding and override initiators.
OVERRIDES = frozenset({_C.RLE, _C.LRE, _C.RLO, _C.LRO})
#: Isolate initiators.
ISOLATE_INITIATORS = frozenset({_C.RLI, _C.LRI, _C.FSI})
#: Every explicit initiator.
EXPLICIT = OVERRIDES | ISOLATE_INITIATORS
#: Explicit initiators that open a right-to-left level.
RTL_EXPLICIT = frozenset({_C.RLE, _C.RLO, _C.RLI})
#: Classes that rule X9 removes from further processing.
REMOVED_BY_X9 = OVERRIDES | {_C.PDF, _C.BN}
#: Classes whose presence means the full algorithm has to run.
NEEDS_RESOLUTION = EXPLICIT | {_C.R, _C.AL, _C.AN}


# Default classes of unassigned code points (DerivedBidiClass.txt).
_DEFAULT_RANGES: tuple[tuple[int, int, BidiClass], ...] = (
    (0x0590, 0x05FF, _C.R),
    (0x0600, 0x07BF, _C.AL),
    (0x07C0, 0x085F, _C.R),
    (0x0860, 0x08FF, _C.AL),
    (0x20A0, 0x20CF, _C.ET),
    (0x2060, 0x206F, _C.BN),
    (0xFB1D, 0xFB4F, _C.R),
    (0xFB50, 0xFDCF, _C.AL),
    (0xFDF0, 0xFDFF, _C.AL),
    (0xFE70, 0xFEFF, _C.AL),
    (0xFFF0, 0xFFF8, _C.BN),
    (0x10800, 0x10CFF, _C.R),
    (0x10D00, 0x10D3F, _C.AL),
    (0x10D40, 0x10EBF, _C.R),
    (0x10EC0, 0x10EFF, _C.AL),
    (0x10F00, 0x10F2F, _C.R),
    (0x10F30, 0x10F6F, _C.AL),
    (0x10F70, 0x10FFF, _C.R),
    (0x1E800, 0x1EC6F, _C.R),
    (0x1EC70, 0x1ECBF, _C.AL),
    (0x1ECC0, 0x1ECFF, _C.R),
    (0x1ED00, 0x1ED4F, _C.AL),
    (0x1ED50, 0x1EDFF, _C.R),
    (0x1EE00, 0x1EEFF, _C.AL),
    (0x1EF00, 0x1EFFF, _C.R),
    (0xE0000, 0xE0FFF, _C.BN),
)


def _is_noncharacter(cp: int) -> bool:
    return 0xFDD0 <= cp <= 0xFDEF or (cp & 0xFFFE) == 0xFFFE


def _default_class(cp: int) -> BidiClass:
    if _is_noncharacter(cp):
        return _C.BN
    for start, end, cls in _DEFAULT_RANGES:
        if start <= cp <= end:
            return cls
    return _C.L


def bidi_class(ch: str) -> BidiClass:
    """Return the bidirectional class of a single character."""
    name = unicodedata.bidirectional(ch)
    if not name:
        return _default_class(ord(ch))
    return BidiClass(name)


class BracketKind(Enum):
    """Bidi_Paired_Bracket_Type values."""

    NONE = "n"
    OPEN = "o"
    CLOSE = "c"


@dataclass(frozen=True)
class BracketType:
    """Paired bracket type of a character and the bracket it pairs with.

    For an opening bracket ``pair`` is its closer; for a closing bracket it
    is its opener; for anything else it is empty.
    """

    kind: BracketKind
    pair: str = ""

    NONE: ClassVar[BracketType]

    @property
    def is_open(self) -> bool:
        return self.kind is BracketKind.OPEN

    @property
    def is_close(self) -> bool:
        return self.kind is BracketKind.CLOSE


BracketType.NONE = BracketType(BracketKind.NONE)


_BRACKET_PAIRS: tuple[tuple[int, int], ...] = (
    (0x0028, 0x0029), (0x005B, 0x005D), (0x007B, 0x007D), (0x0F3A, 0x0F3B),
    (0x0F3C, 0x0F3D), (0x169B, 0x169C), (0x2045, 0x2046), (0x207D, 0x207E),
    (0x208D, 0x208E), (0x2308, 0x2309), (0x230A, 0x230B), (0x2329, 0x232A),
    (0x2768, 0x2769), (0x276A, 0x276B), (0x276C, 0x276D), (0x276E, 0x276F),
    (0x2770, 0x2771), (0x2772, 0x2773), (0x2774, 0x2775), (0x27C5, 0x27C6),
    (0x27E6, 0x27E7), (0x27E8, 0x27E9), (0x27EA, 0x27EB), (0x27EC, 0x27ED),
    (0x27EE, 0x27EF), (0x2983, 0x2984), (0x2985, 0x2986), (0x2987, 0x2988),
    (0x2989, 0x298A), (0x298B, 0x298C), (0x298D, 0x2990), (0x298F, 0x298E),
    (0x2991, 0x2992), (0x2993, 0x2994), (0x2995, 0x2996), (0x2997, 0x2998),
    (0x29D8, 0x29D9), (0x29DA, 0x29DB), (0x29FC, 0x29FD), (0x2E22, 0x2E23),
    (0x2E24, 0x2E25), (0x2E26, 0x2E27), (0x2E28, 0x2E29), (0x2E55, 0x2E56),
    (0x2E57, 0x2E58), (0x2E59, 0x2E5A), (0x2E5B, 0x2E5C), (0x3008, 0x3009),
    (0x300A, 0x300B), (0x300C, 0x300D), (0x300E, 0x300F), (0x3010, 0x3011),
    (0x3014, 0x3015), (0x3016, 0x3017), (0x3018, 0x3019), (0x301A, 0x301B),
    (0xFE59, 0xFE5A), (0xFE5B, 0xFE5C), (0xFE5D, 0xFE5E), (0xFF08, 0xFF09),
    (0xFF3B, 0xFF3D), (0xFF5B, 0xFF5D), (0xFF5F, 0xFF60), (0xFF62, 0xFF63),
)

_BRACKETS: dict[str, BracketType] = {}
for _open, _close in _BRACKET_PAIRS:
    _BRACKETS[chr(_open)] = BracketType(BracketKind.OPEN, chr(_close))
    _BRACKETS[chr(_close)] = BracketType(BracketKind.CLOSE, chr(_open))


def bracket_type(ch: str) -> BracketType:
    """Return the paired bracket type of a single character."""
    if len(ch) != 1:
        raise ValueError(f"expected a single character, got {len(ch)}")
    return _BRACKETS.get(ch, BracketType.NONE)


def type_from_level(level: BidiLevel) -> BidiClass:
    """Return the strong class that goes with a level: L if even, R if odd."""
    return _C.R if level & 1 else _C.L


def is_removed_by_x9(ty: BidiClass) -> bool:
    """True for embedding, override, PDF and boundary-neutral classes."""
    return ty in REMOVED_BY_X9


def is_isolate_initiator(ty: BidiClass) -> bool:
    """True for LRI, RLI and FSI."""
    return ty in ISOLATE_INITIATORS


def reorder(levels: Sequence[BidiLevel]) -> list[int]:
    """Return the visual order of runs, given the level of each run.

    From the highest level down to the lowest odd level, every maximal
    sequence of runs at that level or above is reversed.
    """
    order = list(range(len(levels)))
    if not levels:
        return order
    max_level = max(levels)
    lowest_odd = min((level for level in levels if level & 1), default=255)
    for level in range(max_level, lowest_odd - 1, -1):
        pos = 0
        for high, group in groupby(levels, key=lambda lv, lim=level: lv >= lim):
            size = sum(1 for _ in group)
            if high:
                order[pos:pos + size] = order[pos:pos + size][::-1]
            pos += size
    return order