"""Resolution of embedding levels with the Unicode bidirectional algorithm."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, NamedTuple, Sequence, Tuple, Union

from .bidi_types import (
    EXPLICIT,
    ISOLATE_INITIATORS,
    NEEDS_RESOLUTION,
    RTL_EXPLICIT,
    BidiClass,
    BidiLevel,
    BracketType,
    bidi_class,
    bracket_type,
    is_isolate_initiator,
    is_removed_by_x9,
    type_from_level,
)

_C = BidiClass

_MAX_DEPTH = 125
_MAX_BRACKET_STACK = 63

_W1_SET = frozenset({_C.LRI, _C.RLI, _C.FSI, _C.PDI})
_STRONG_SET = frozenset({_C.L, _C.R, _C.AL})
_SEPARATOR_SET = frozenset({_C.ES, _C.CS})
_W6_SET = frozenset({_C.ES, _C.ET, _C.CS})
_NEUTRAL_SET = frozenset(
    {_C.B, _C.S, _C.WS, _C.ON, _C.RLI, _C.LRI, _C.FSI, _C.PDI}
)
_RESET_BEFORE_SEPARATOR = frozenset({_C.WS, _C.PDI}) | ISOLATE_INITIATORS

CharInput = Union[str, Tuple[str, BidiClass]]


class _StackEntry(NamedTuple):
    level: int
    override: BidiClass
    isolate: bool


@dataclass
class _Run:
    level: int
    start: int
    end: int
    ends_with_isolate: bool = False
    starts_with_pdi: bool = False
    sos: BidiClass = _C.ON
    eos: BidiClass = _C.ON
    in_sequence: bool = False
    next: int | None = None


def _strong_direction(ty: BidiClass) -> BidiClass:
    if ty in (_C.EN, _C.AN, _C.AL, _C.R):
        return _C.R
    if ty is _C.L:
        return _C.L
    return _C.ON


def _run_end(types: Sequence[BidiClass], offset: int, members: frozenset) -> int:
    end = offset
    while end < len(types) and types[end] in members:
        end += 1
    return end


def _default_level(types: Iterable[BidiClass], stop_at_pdi: bool = False) -> int:
    isolates = 0
    for ty in types:
        if ty in ISOLATE_INITIATORS:
            isolates += 1
        elif ty is _C.PDI:
            if isolates > 0:
                isolates -= 1
            elif stop_at_pdi:
                return 0
        elif ty in _STRONG_SET and isolates == 0:
            return 0 if ty is _C.L else 1
    return 0


class BidiResolver:
    """Resolves the embedding levels of one paragraph of text."""

    def __init__(self) -> None:
        self._base_level: BidiLevel = 0
        self._levels: list[BidiLevel] = []
        self._initial_types: list[BidiClass] = []
        self._types: list[BidiClass] = []
        self._brackets: dict[int, tuple[str, BracketType]] = {}
        self._bracket_pairs: list[tuple[int, int]] = []
        self._runs: list[_Run] = []

    @property
    def base_level(self) -> BidiLevel:
        """The base level of the paragraph."""
        return self._base_level

    @property
    def levels(self) -> tuple[BidiLevel, ...]:
        """The level of every character in the paragraph."""
        return tuple(self._levels)

    def clear(self) -> None:
        """Reset the resolver to its empty state."""
        self._initial_types = []
        self._levels = []
        self._types = []
        self._brackets = {}
        self._bracket_pairs = []
        self._runs = []
        self._base_level = 0

    def resolve(
        self, chars: Iterable[CharInput], base_level: int | None = None
    ) -> tuple[BidiLevel, ...]:
        """Resolve the levels of a paragraph and return them.

        ``chars`` holds characters, or pairs of a character and its
        precomputed class. Without ``base_level`` the paragraph direction
        comes from its first strong character outside any isolate.
        """
        self.clear()
        needs_bidi = False
        for i, item in enumerate(chars):
            if isinstance(item, str):
                ch, ty = item, bidi_class(item)
            else:
                ch, ty = item
            self._initial_types.append(ty)
            bracket = bracket_type(ch)
            if bracket != BracketType.NONE:
                self._brackets[i] = (ch, bracket)
            needs_bidi = needs_bidi or ty in NEEDS_RESOLUTION
        length = len(self._initial_types)
        if base_level is not None:
            self._base_level = base_level & 1
        else:
            self._base_level = _default_level(self._initial_types)
        if not needs_bidi and self._base_level == 0:
            self._levels = [self._base_level] * length
            return self.levels

        self._types = list(self._initial_types)
        self._resolve_levels()
        self._resolve_runs()
        for run in self._runs:
            if run.in_sequence:
                continue
            seq_types: list[BidiClass] = []
            indices: list[int] = []
            current = run
            while True:
                for i in range(current.start, current.end):
                    ty = self._types[i]
                    if not is_removed_by_x9(ty):
                        seq_types.append(ty)
                        indices.append(i)
                eos = current.eos
                if current.next is None:
                    break
                current = self._runs[current.next]
            self._resolve_sequence(run.level, run.sos, eos, seq_types, indices)

        base = self._base_level
        for i, ty in enumerate(self._initial_types):
            if ty in (_C.S, _C.B):
                self._levels[i] = base
                for j in range(i - 1, -1, -1):
                    prior = self._initial_types[j]
                    if is_removed_by_x9(prior):
                        continue
                    if prior in _RESET_BEFORE_SEPARATOR:
                        self._levels[j] = base
                    else:
                        break
            elif is_removed_by_x9(ty):
                self._levels[i] = base if i == 0 else self._levels[i - 1]
        return self.levels

    def _resolve_levels(self) -> None:
        base = self._base_level
        types = self._types
        length = len(types)
        levels = [0] * length
        stack = [_StackEntry(base, _C.ON, False)]
        overflow_isolates = 0
        overflow_embedding = 0
        valid_isolates = 0
        for i in range(length):
            ty = types[i]
            top = stack[-1]
            if ty in EXPLICIT:
                is_isolate = ty in ISOLATE_INITIATORS
                if ty is _C.FSI and i + 1 < length:
                    is_rtl = _default_level(types[i + 1:], stop_at_pdi=True) == 1
                else:
                    is_rtl = ty in RTL_EXPLICIT
                if is_isolate:
                    levels[i] = top.level
                    if top.override is not _C.ON:
                        types[i] = top.override
                new_level = (top.level + 1) | 1 if is_rtl else (top.level + 2) & ~1
                if (
                    new_level <= _MAX_DEPTH
                    and overflow_isolates == 0
                    and overflow_embedding == 0
                ):
                    if is_isolate:
                        valid_isolates += 1
                    if ty is _C.LRO:
                        override = _C.L
                    elif ty is _C.RLO:
                        override = _C.R
                    else:
                        override = _C.ON
                    stack.append(_StackEntry(new_level, override, is_isolate))
                elif is_isolate:
                    overflow_isolates += 1
                elif overflow_isolates == 0:
                    overflow_embedding += 1
            elif ty is _C.PDI:
                if overflow_isolates > 0:
                    overflow_isolates -= 1
                elif valid_isolates > 0:
                    overflow_embedding = 0
                    while not stack[-1].isolate and len(stack) > 1:
                        stack.pop()
                    if len(stack) > 1:
                        stack.pop()
                    valid_isolates -= 1
                top = stack[-1]
                levels[i] = top.level
                if top.override is not _C.ON:
                    types[i] = top.override
            elif ty is _C.PDF:
                levels[i] = top.level
                if overflow_isolates > 0:
                    pass
                elif overflow_embedding > 0:
                    overflow_embedding -= 1
                elif not top.isolate and len(stack) >= 2:
                    stack.pop()
            elif ty is _C.B:
                del stack[1:]
                overflow_isolates = 0
                overflow_embedding = 0
                valid_isolates = 0
                levels[i] = base
            elif ty is not _C.BN:
                levels[i] = top.level
                if top.override is not _C.ON:
                    types[i] = top.override
        self._levels = levels

    def _resolve_runs(self) -> None:
        types = self._types
        levels = self._levels
        base = self._base_level
        length = len(types)
        self._runs = []
        start = next((i for i, ty in enumerate(types) if not is_removed_by_x9(ty)), length)
        if start == length:
            return
        level = levels[start]
        offset = 0
        for i in range(start + 1, length):
            if is_removed_by_x9(types[i]):
                continue
            if levels[i] != level:
                self._runs.append(_Run(level, offset, i))
                offset = i
                level = levels[i]
        if offset < length:
            self._runs.append(_Run(level, offset, length))

        for run in self._runs:
            while run.start < run.end and is_removed_by_x9(types[run.start]):
                run.start += 1
            while run.end > run.start and is_removed_by_x9(types[run.end - 1]):
                run.end -= 1
            if run.start == run.end:
                continue
            if types[run.start] is _C.PDI:
                run.starts_with_pdi = True
            prev_level = next(
                (
                    levels[i]
                    for i in range(run.start - 1, -1, -1)
                    if not is_removed_by_x9(types[i])
                ),
                base,
            )
            run.sos = type_from_level(max(prev_level, run.level))
            if is_isolate_initiator(self._initial_types[run.end - 1]):
                run.ends_with_isolate = True
                run.eos = type_from_level(max(base, run.level))
            else:
                next_level = next(
                    (
                        levels[i]
                        for i in range(run.end, length)
                        if not is_removed_by_x9(types[i])
                    ),
                    base,
                )
                run.eos = type_from_level(max(next_level, run.level))

        for i, run in enumerate(self._runs):
            if not run.ends_with_isolate:
                continue
            for j in range(i + 1, len(self._runs)):
                other = self._runs[j]
                if other.starts_with_pdi and other.level == run.level:
                    run.next = j
                    other.in_sequence = True
                    break

    def _resolve_sequence(
        self,
        level: int,
        sos: BidiClass,
        eos: BidiClass,
        types: list[BidiClass],
        indices: list[int],
    ) -> None:
        length = len(types)
        if length == 0:
            return

        # W1 to W4
        prev = sos
        prev_strong = prev
        for i in range(length):
            ty = types[i]
            if ty is _C.NSM:
                types[i] = prev
                continue
            if ty in _W1_SET:
                prev = _C.ON
                continue
            if ty is _C.EN:
                if prev_strong is _C.AL:
                    ty = _C.AN
                    types[i] = ty
            elif ty in _STRONG_SET:
                prev_strong = ty
                if ty is _C.AL:
                    ty = _C.R
                    types[i] = ty
            elif ty in _SEPARATOR_SET and i < length - 1:
                following = types[i + 1]
                if following is _C.EN and prev_strong is _C.AL:
                    following = _C.AN
                if prev is _C.EN and following is _C.EN:
                    ty = _C.EN
                    types[i] = ty
                elif ty is _C.CS and prev is _C.AN and following is _C.AN:
                    ty = _C.AN
                    types[i] = ty
            prev = ty

        # W5
        i = 0
        while i < length:
            if types[i] is _C.ET:
                limit = _run_end(types, i, frozenset({_C.ET}))
                neighbour = sos if i == 0 else types[i - 1]
                if neighbour is not _C.EN:
                    neighbour = eos if limit == length else types[limit]
                if neighbour is _C.EN:
                    types[i:limit] = [_C.EN] * (limit - i)
                i = limit
            i += 1

        # W6, W7
        prev_strong = sos
        for i, ty in enumerate(types):
            if ty in _W6_SET:
                types[i] = _C.ON
            elif ty is _C.EN:
                if prev_strong is _C.L:
                    types[i] = _C.L
            elif ty in (_C.L, _C.R):
                prev_strong = ty

        # N0
        if self._brackets:
            self._resolve_brackets(level, sos, types, indices)

        # N1, N2
        embed_dir = _C.R if level & 1 else _C.L
        i = 0
        while i < length:
            if types[i] in _NEUTRAL_SET:
                offset = i
                limit = _run_end(types, offset, _NEUTRAL_SET)
                if offset == 0:
                    leading = sos
                else:
                    leading = types[offset - 1]
                    if leading in (_C.AN, _C.EN):
                        leading = _C.R
                if limit == length:
                    trailing = eos
                else:
                    trailing = types[limit]
                    if trailing in (_C.AN, _C.EN):
                        trailing = _C.R
                resolved = leading if leading is trailing else embed_dir
                types[offset:limit] = [resolved] * (limit - offset)
                i = limit - 1
            i += 1

        # I1, I2
        for index, ty in zip(indices, types):
            if level & 1 == 0:
                if ty is _C.R:
                    self._levels[index] = level + 1
                elif ty is not _C.L:
                    self._levels[index] = level + 2
                else:
                    self._levels[index] = level
            elif ty is not _C.R:
                self._levels[index] = level + 1
            else:
                self._levels[index] = level

    def _resolve_brackets(
        self,
        level: int,
        sos: BidiClass,
        types: list[BidiClass],
        indices: list[int],
    ) -> None:
        length = len(types)
        openers: list[tuple[int, str]] = []
        pairs: list[tuple[int, int]] = []
        for i in range(length):
            if types[i] is not _C.ON:
                continue
            entry = self._brackets.get(indices[i])
            if entry is None:
                continue
            ch, bracket = entry
            if bracket.is_open:
                if len(openers) == _MAX_BRACKET_STACK:
                    break
                openers.append((i, bracket.pair))
            elif bracket.is_close:
                opener = _find_and_pop(openers, ch)
                if opener is not None:
                    pairs.append((opener, i))
        if not pairs:
            return

        embed_dir = _C.R if level & 1 else _C.L
        pairs.sort(key=lambda pair: pair[0])
        for open_at, close_at in pairs:
            pair_dir = _C.ON
            for k in range(open_at + 1, close_at):
                direction = _strong_direction(types[k])
                if direction is _C.ON:
                    continue
                pair_dir = direction
                if direction is embed_dir:
                    break
            if pair_dir is _C.ON:
                self._bracket_pairs.append((indices[open_at], indices[close_at]))
                continue
            if pair_dir is not embed_dir:
                pair_dir = sos
                for k in range(open_at - 1, -1, -1):
                    direction = _strong_direction(types[k])
                    if direction is not _C.ON:
                        pair_dir = direction
                        break
                if pair_dir is embed_dir or pair_dir is _C.ON:
                    pair_dir = embed_dir
            types[open_at] = pair_dir
            types[close_at] = pair_dir
            for span in (range(open_at + 1, close_at), range(close_at + 1, length)):
                for k in span:
                    if self._initial_types[indices[k]] is _C.NSM:
                        types[k] = pair_dir
                    else:
                        break
            self._bracket_pairs.append((indices[open_at], indices[close_at]))


def _find_and_pop(openers: list[tuple[int, str]], closer: str) -> int | None:
    for k in range(len(openers) - 1, -1, -1):
        offset, expected = openers[k]
        if (
            expected == closer
            or (expected == "\u232a" and closer == "\u3009")
            or (expected == "\u3009" and closer == "\u232a")
        ):
            del openers[k:]
            return offset
    return None