from hypothesis import given
from hypothesis import strategies as st

from fontweave.bidi import BidiResolver
from fontweave.bidi_types import BidiClass, bidi_class

HEBREW = "\u05d0\u05d1\u05d2"
ALPHABET = "ab1 \t(),.-+$\u05d0\u05d1\u0627\u0661\u0300\u202a\u202b\u202c\u202d\u202e\u2066\u2067\u2068\u2069\u2029"


def test_left_to_right_text_is_level_zero():
    resolver = BidiResolver()
    levels = resolver.resolve("hello world")
    assert levels == tuple([0] * len("hello world"))
    assert resolver.base_level == 0


def test_hebrew_sets_rtl_base():
    resolver = BidiResolver()
    levels = resolver.resolve(HEBREW)
    assert resolver.base_level == 1
    assert levels == (1, 1, 1)


def test_mixed_text_levels():
    resolver = BidiResolver()
    assert resolver.resolve("ab \u05d0\u05d1") == (0, 0, 0, 1, 1)


def test_explicit_base_level_is_masked():
    resolver = BidiResolver()
    resolver.resolve("abc", 3)
    assert resolver.base_level == 1
    assert all(level >= 1 for level in resolver.levels)


def test_base_level_skips_isolates():
    resolver = BidiResolver()
    resolver.resolve("\u2067\u05d0\u2069b")
    assert resolver.base_level == 0
    resolver.resolve("\u2067a\u2069\u05d0")
    assert resolver.base_level == 1


def test_rlo_override_makes_letters_rtl():
    resolver = BidiResolver()
    levels = resolver.resolve("\u202eabc\u202c", 0)
    assert levels[1:4] == (1, 1, 1)


def test_segment_separator_takes_base_level():
    resolver = BidiResolver()
    text = "\u05d0\u05d1 \t\u05d2"
    levels = resolver.resolve(text, 0)
    assert levels[3] == resolver.base_level
    assert levels[2] == resolver.base_level


def test_paired_brackets_share_level():
    resolver = BidiResolver()
    text = "\u05d0\u05d1(c)\u05d3"
    levels = resolver.resolve(text, 1)
    assert levels[2] == levels[4]
    assert levels[3] > levels[2]


def test_precomputed_classes_are_used():
    resolver = BidiResolver()
    from_pairs = resolver.resolve([("a", BidiClass.R), ("b", BidiClass.R)])
    base_from_pairs = resolver.base_level
    from_text = resolver.resolve("\u05d0\u05d1")
    assert from_pairs == from_text
    assert base_from_pairs == resolver.base_level


def test_clear_resets_state():
    resolver = BidiResolver()
    resolver.resolve(HEBREW)
    resolver.clear()
    assert resolver.levels == ()
    assert resolver.base_level == 0


def test_resolver_reuse_is_consistent():
    resolver = BidiResolver()
    text = "abc \u05d0\u05d1 (12) \u0627\u0661"
    first = resolver.resolve(text)
    resolver.resolve(HEBREW)
    assert resolver.resolve(text) == first
    assert BidiResolver().resolve(text) == first


def test_deep_nesting_stays_bounded():
    resolver = BidiResolver()
    text = "\u202b\u202a" * 80 + "x" + "\u202c" * 160
    levels = resolver.resolve(text, 0)
    assert len(levels) == len(text)
    assert max(levels) <= 127


def test_empty_input():
    resolver = BidiResolver()
    assert resolver.resolve("") == ()
    assert resolver.resolve("", 1) == ()
    assert resolver.base_level == 1


@given(st.text(alphabet=ALPHABET, max_size=40), st.sampled_from([None, 0, 1]))
def test_levels_invariants(text, base):
    resolver = BidiResolver()
    levels = resolver.resolve(text, base)
    assert len(levels) == len(text)
    assert all(resolver.base_level <= level <= 127 for level in levels)
    for ch, level in zip(text, levels):
        if bidi_class(ch) in (BidiClass.S, BidiClass.B):
            assert level == resolver.base_level


@given(st.text(alphabet=ALPHABET, max_size=40))
def test_resolution_is_deterministic(text):
    resolver = BidiResolver()
    first = resolver.resolve(text)
    assert resolver.resolve(list(text)) == first
    pairs = [(ch, bidi_class(ch)) for ch in text]
    assert resolver.resolve(pairs) == first