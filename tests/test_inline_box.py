from dataclasses import asdict, replace

from fontweave.inline_box import InlineBox


def test_fields_round_trip():
    box = InlineBox(id=7, index=3, width=10.5, height=4.0)
    assert InlineBox(**asdict(box)) == box


def test_replace_changes_only_given_field():
    box = InlineBox(id=1, index=0, width=2.0, height=3.0)
    moved = replace(box, index=5)
    assert moved.index == 5
    assert (moved.id, moved.width, moved.height) == (box.id, box.width, box.height)
    assert box.index == 0


def test_stable_sort_by_index_keeps_insertion_order():
    boxes = [
        InlineBox(id=1, index=4, width=1.0, height=1.0),
        InlineBox(id=2, index=0, width=1.0, height=1.0),
        InlineBox(id=3, index=4, width=1.0, height=1.0),
    ]
    ordered = sorted(boxes, key=lambda b: b.index)
    assert [b.id for b in ordered] == [2, 1, 3]


def test_boxes_are_mutable():
    box = InlineBox(id=1, index=0, width=2.0, height=3.0)
    box.width = 8.0
    assert box == InlineBox(id=1, index=0, width=8.0, height=3.0)