"""Font scanning and sources, CSS font matching, script samples and bidirectional level resolution."""

__version__ = "0.1.0"

__all__ = [
    "bidi",
    "bidi_types",
    "generic",
    "inline_box",
    "matching",
    "scan",
    "script",
    "source",
    "source_cache",
]