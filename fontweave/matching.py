"""CSS font matching: choose the closest font in a family for a request."""

from __future__ import annotations

import math
import struct
from dataclasses import dataclass
from enum import Enum
from typing import Callable, ClassVar, Iterable, NamedTuple, Sequence, TypeVar

DEFAULT_OBLIQUE_ANGLE = 14.0
# The spec now says 20deg; 14deg is kept here on purpose (csswg-drafts #2295).
_OBLIQUE_THRESHOLD = DEFAULT_OBLIQUE_ANGLE

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def _f32(value: float) -> float:
    """Round a float to single precision."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return math.copysign(math.inf, value)


def _to_i32(value: float) -> int:
    """Truncate toward zero, saturating at the 32-bit bounds; NaN becomes 0."""
    if math.isnan(value):
        return 0
    if value >= _I32_MAX:
        return _I32_MAX
    if value <= _I32_MIN:
        return _I32_MIN
    return int(value)


class StyleKind(Enum):
    """The three forms of the CSS font-style property."""

    NORMAL = "normal"
    ITALIC = "italic"
    OBLIQUE = "oblique"


@dataclass(frozen=True)
class FontStyle:
    """A font style: normal, italic, or oblique with an optional angle."""

    kind: StyleKind = StyleKind.NORMAL
    angle: float | None = None

    NORMAL: ClassVar[FontStyle]
    ITALIC: ClassVar[FontStyle]

    def __post_init__(self) -> None:
        if self.kind is not StyleKind.OBLIQUE and self.angle is not None:
            raise ValueError(f"{self.kind.value} style cannot carry an angle")

    @classmethod
    def oblique(cls, angle: float | None = None) -> FontStyle:
        """An oblique style; without an angle the default of 14 degrees applies."""
        return cls(StyleKind.OBLIQUE, None if angle is None else float(angle))

    @property
    def oblique_angle(self) -> float | None:
        """The effective angle of an oblique style, None for other styles."""
        if self.kind is not StyleKind.OBLIQUE:
            return None
        return DEFAULT_OBLIQUE_ANGLE if self.angle is None else _f32(self.angle)

    def __str__(self) -> str:
        if self.kind is StyleKind.OBLIQUE and self.angle is not None:
            return f"oblique {self.angle}deg"
        return self.kind.value


FontStyle.NORMAL = FontStyle(StyleKind.NORMAL)
FontStyle.ITALIC = FontStyle(StyleKind.ITALIC)


@dataclass(frozen=True)
class MatchCandidate:
    """The attributes of one font in a family that take part in matching.

    ``stretch`` is a width ratio where 1.0 is normal; ``weight`` is on the
    CSS scale where 400 is regular.
    """

    stretch: float = 1.0
    style: FontStyle = FontStyle.NORMAL
    weight: float = 400.0
    has_slant_axis: bool = False


class _Candidate(NamedTuple):
    index: int
    stretch: int
    style: FontStyle
    weight: float
    has_slnt: bool


_T = TypeVar("_T")


def _lowest(items: Iterable[_T], key: Callable[[_T], float]) -> _T | None:
    """The first item with the smallest key."""
    best: _T | None = None
    for item in items:
        if best is None or key(best) > key(item):
            best = item
    return best


def _highest(items: Iterable[_T], key: Callable[[_T], float]) -> _T | None:
    """The last item with the largest key."""
    best: _T | None = None
    for item in items:
        if best is None or not key(best) > key(item):
            best = item
    return best


def _stretch_key(ratio: float) -> int:
    return _to_i32(_f32(_f32(ratio) * 100.0))


def _select_stretch(cands: Sequence[_Candidate], target: int) -> int:
    values = [c.stretch for c in cands]
    if target in values:
        return target
    below = [v for v in values if v < target]
    above = [v for v in values if v > target]
    if target <= 100:
        if below:
            return max(below)
        if above:
            return min(above)
    else:
        if above:
            return min(above)
        if below:
            return max(below)
    return values[0]


_Oblique = tuple[FontStyle, float]


def _angle(pair: _Oblique) -> float:
    return pair[1]


def _low_style(obliques: Sequence[_Oblique], pred: Callable[[float], bool]) -> FontStyle | None:
    found = _lowest((p for p in obliques if pred(p[1])), _angle)
    return None if found is None else found[0]


def _high_style(obliques: Sequence[_Oblique], pred: Callable[[float], bool]) -> FontStyle | None:
    found = _highest((p for p in obliques if pred(p[1])), _angle)
    return None if found is None else found[0]


def _select_style(
    cands: Sequence[_Candidate], style: FontStyle, synthesize_style: bool
) -> FontStyle:
    if any(c.style == style for c in cands):
        return style
    first = cands[0].style
    obliques: list[_Oblique] = [
        (c.style, c.style.oblique_angle) for c in cands if c.style.oblique_angle is not None
    ]
    t = _OBLIQUE_THRESHOLD

    if style.kind is StyleKind.ITALIC:
        return (
            _low_style(obliques, lambda a: a >= t)
            or _high_style(obliques, lambda a: 0.0 < a < t)
            or _high_style(obliques, lambda a: a < 0.0)
            or first
        )

    angle = style.oblique_angle
    if angle is None:
        return (
            _low_style(obliques, lambda a: a >= 0.0)
            or next((c.style for c in cands if c.style == FontStyle.ITALIC), None)
            or _high_style(obliques, lambda a: a < 0.0)
            or first
        )

    if angle >= t:
        found = _low_style(obliques, lambda a: a >= angle) or _high_style(
            obliques, lambda a: 0.0 < a < angle
        )
        positive = True
    elif angle >= 0.0:
        found = _high_style(obliques, lambda a: 0.0 < a < angle) or _low_style(
            obliques, lambda a: a >= angle
        )
        positive = True
    elif angle > -t:
        found = _low_style(obliques, lambda a: angle < a < 0.0) or _high_style(
            obliques, lambda a: a <= angle
        )
        positive = False
    else:
        found = _high_style(obliques, lambda a: a <= angle) or _low_style(
            obliques, lambda a: angle < a < 0.0
        )
        positive = False
    if found is not None:
        return found

    if synthesize_style:
        # A variable font with a slnt axis can produce the requested angle
        # itself, so the requested style is kept.
        if any(c.has_slnt for c in cands):
            return style
        if any(c.style == FontStyle.NORMAL for c in cands):
            return FontStyle.NORMAL
        return first
    if any(c.style == FontStyle.ITALIC for c in cands):
        return FontStyle.ITALIC
    if positive:
        fallback = _high_style(obliques, lambda a: a <= 0.0)
    else:
        fallback = _low_style(obliques, lambda a: a >= 0.0)
    return fallback or first


def _weight_of(c: _Candidate) -> float:
    return c.weight


def _select_weight(cands: Sequence[_Candidate], weight: float) -> _Candidate | None:
    exact = next((c for c in cands if c.weight == weight), None)
    if exact is not None:
        return exact
    if 400.0 <= weight <= 500.0:
        searches = (
            (_lowest, lambda w: weight <= w <= 500.0),
            (_highest, lambda w: w < weight),
            (_lowest, lambda w: w > 500.0),
        )
    elif weight < 400.0:
        searches = (
            (_highest, lambda w: w <= weight),
            (_lowest, lambda w: w > weight),
        )
    else:
        searches = (
            (_lowest, lambda w: w >= weight),
            (_highest, lambda w: w < weight),
        )
    for pick, pred in searches:
        found = pick((c for c in cands if pred(c.weight)), _weight_of)
        if found is not None:
            return found
    return None


def match_font(
    fonts: Sequence[MatchCandidate],
    stretch: float,
    style: FontStyle,
    weight: float,
    synthesize_style: bool,
) -> int | None:
    """Return the index of the font that best matches the request.

    Stretch is narrowed first, then style, then weight, following the CSS
    font matching algorithm. Returns None if no font matches.
    """
    if not fonts:
        return None
    if len(fonts) == 1:
        return 0
    cands = [
        _Candidate(i, _stretch_key(f.stretch), f.style, _f32(f.weight), f.has_slant_axis)
        for i, f in enumerate(fonts)
    ]
    use_stretch = _select_stretch(cands, _stretch_key(stretch))
    cands = [c for c in cands if c.stretch == use_stretch]
    use_style = _select_style(cands, style, synthesize_style)
    cands = [c for c in cands if c.style == use_style]
    found = _select_weight(cands, _f32(weight))
    return None if found is None else found.index