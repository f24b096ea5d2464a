import pytest
from hypothesis import given
from hypothesis import strategies as st

from fontweave.bidi_types import (
    BidiClass,
    BracketKind,
    BracketType,
    bidi_class,
    bracket_type,
    is_isolate_initiator,
    is_removed_by_x9,
    reorder,
    type_from_level,
)


@pytest.mark.parametrize(
    "ch, expected",
    [
        ("a", BidiClass.L),
        ("\u05d0", BidiClass.R),
        ("\u0628", BidiClass.AL),
        ("1", BidiClass.EN),
        (" ", BidiClass.WS),
        ("\n", BidiClass.B),
        ("\t", BidiClass.S),
        ("\u202b", BidiClass.RLE),
        ("\u2067", BidiClass.RLI),
        ("\u2069", BidiClass.PDI),
    ],
)
def test_bidi_class_of_known_characters(ch, expected):
    assert bidi_class(ch) is expected


def test_bidi_class_defaults_for_unassigned():
    assert bidi_class(chr(0x0378)) is BidiClass.L
    assert bidi_class("\ufffe") is BidiClass.BN


def test_bidi_class_rejects_strings():
    with pytest.raises(TypeError):
        bidi_class("ab")


def test_bracket_type_of_parentheses():
    assert bracket_type("(") == BracketType(BracketKind.OPEN, ")")
    assert bracket_type(")") == BracketType(BracketKind.CLOSE, "(")
    assert bracket_type("a") == BracketType.NONE


def test_bracket_type_unusual_pair():
    assert bracket_type("\u298f").pair == "\u298e"
    assert bracket_type("\u298e").is_close


@given(st.characters())
def test_bracket_pairs_round_trip(ch):
    bt = bracket_type(ch)
    if bt.is_open:
        back = bracket_type(bt.pair)
        assert back.is_close and back.pair == ch
    elif bt.is_close:
        back = bracket_type(bt.pair)
        assert back.is_open and back.pair == ch
    else:
        assert bt.pair == ""


def test_bracket_type_rejects_strings():
    with pytest.raises(ValueError):
        bracket_type("()")


@given(st.integers(min_value=0, max_value=125))
def test_type_from_level_parity(level):
    expected = BidiClass.R if level % 2 else BidiClass.L
    assert type_from_level(level) is expected


def test_removed_by_x9():
    for ty in (BidiClass.LRE, BidiClass.RLE, BidiClass.LRO, BidiClass.RLO, BidiClass.PDF, BidiClass.BN):
        assert is_removed_by_x9(ty)
    for ty in (BidiClass.L, BidiClass.R, BidiClass.PDI, BidiClass.LRI):
        assert not is_removed_by_x9(ty)


def test_isolate_initiators():
    assert {t for t in BidiClass if is_isolate_initiator(t)} == {
        BidiClass.LRI,
        BidiClass.RLI,
        BidiClass.FSI,
    }


def test_reorder_all_even_is_identity():
    assert reorder([0, 0, 2, 0]) == [0, 1, 2, 3]


def test_reorder_odd_run_is_reversed():
    assert reorder([0, 1, 1, 1, 0]) == [0, 3, 2, 1, 4]


def test_reorder_empty():
    assert reorder([]) == []


@given(st.lists(st.integers(min_value=0, max_value=6), max_size=20))
def test_reorder_is_permutation(levels):
    assert sorted(reorder(levels)) == list(range(len(levels)))


@given(st.integers(min_value=1, max_value=20), st.integers(min_value=0, max_value=60))
def test_reorder_uniform_odd_reverses(n, half):
    level = 2 * half + 1
    assert reorder([level] * n) == list(range(n))[::-1]