"""Boxes laid out inline with text."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class InlineBox:
    """A box to be laid out inline with text.

    ``id`` lets the caller match output boxes to input boxes; ``index`` is the
    byte offset into the text at which the box is placed and must not fall
    inside a code point. ``width`` and ``height`` are in pixels.
    """

    id: int
    index: int
    width: float
    height: float