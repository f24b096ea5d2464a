# fontweave

Building blocks for font selection and text layout, in pure Python with no
third-party dependencies.

| Module | What it provides |
| --- | --- |
| `fontweave.generic` | `GenericFamily` parses CSS generic family names (`serif`, `sans-serif`, `monospace`, `system-ui`, `emoji`, `fangsong`, …); `GenericFamilyMap` maps each generic family to a list of family identifiers. |
| `fontweave.source` | `Blob` (shared in-memory data), `SourceId` (unique ids from `SourceId.new()`), `SourceInfo` (an id plus either a `Blob` or a `Path`) and `SourcePathMap`, which hands out one source per path. |
| `fontweave.source_cache` | `SourceCache` loads font files lazily (memory-mapped via `load_blob`), remembers failures, and drops entries not used in the last `max_age` calls to `prune`. `SourceCache.new_shared()` (or `SourceCacheOptions(shared=True)`) gives a cache whose backing store is shared by every `clone()`. |
| `fontweave.scan` | `scan_memory` and `scan_paths` are generators yielding a `ScannedFont` for every font in OpenType/TrueType files and `ttcf` collections. The `name` table is exposed through `NameTable`, `NameRecord`, `NameId`, `english_or_first` and `all_names`. |
| `fontweave.script` | `Script`, a four-byte Unicode script tag, with sample text for each known script (`Script("Latn").sample()`, `Script.all_samples()`). |
| `fontweave.matching` | `match_font` follows the CSS font matching algorithm over stretch, style and weight for a sequence of `MatchCandidate`s; `FontStyle` covers normal, italic and oblique (with an optional angle, 14° by default). |
| `fontweave.bidi_types` | `BidiClass`, `bidi_class`, `BracketType`, `bracket_type`, `type_from_level`, `is_removed_by_x9`, `is_isolate_initiator`, and `reorder`, which turns run levels into visual order. |
| `fontweave.bidi` | `BidiResolver` runs the Unicode bidirectional algorithm over one paragraph and gives the embedding level of every character. |
| `fontweave.inline_box` | `InlineBox`, a record of a box to be placed inline with text (id, byte index, width, height). |

## Installation

```
pip install fontweave
```

## Examples

Generic families:

```python
from fontweave.generic import GenericFamily

assert GenericFamily.parse("sans-serif") is GenericFamily.SANS_SERIF
assert GenericFamily.parse("Arial") is None
assert str(GenericFamily.UI_MONOSPACE) == "ui-monospace"
```

Script samples:

```python
from fontweave.script import Script

print(Script("Grek").sample())
```

Bidirectional levels and visual order:

```python
from fontweave.bidi import BidiResolver
from fontweave.bidi_types import reorder

resolver = BidiResolver()
levels = resolver.resolve("abc \u05d0\u05d1\u05d2", base_level=0)
print(levels)                  # (0, 0, 0, 0, 1, 1, 1)
print(reorder([0, 1, 1, 0]))   # [0, 2, 1, 3]
```

Font matching:

```python
from fontweave.matching import FontStyle, MatchCandidate, match_font

fonts = [
    MatchCandidate(weight=400),
    MatchCandidate(weight=700),
    MatchCandidate(style=FontStyle.ITALIC),
]
print(match_font(fonts, 1.0, FontStyle.NORMAL, 600, False))   # 1
```

Scanning and loading font files:

```python
from fontweave.scan import NameId, scan_paths
from fontweave.source import SourcePathMap
from fontweave.source_cache import SourceCache

for font in scan_paths(["/usr/share/fonts"], max_depth=4):
    print(font.path, font.index, font.english_or_first_name(NameId.FAMILY_NAME))

paths = SourcePathMap()
source = paths.get_or_insert("/usr/share/fonts/DejaVuSans.ttf")
cache = SourceCache()
blob = cache.get(source)   # None if the file could not be read
cache.prune(max_age=128, prune_failed=False)
```

## What it does not do

- Scanning yields individual fonts; it does not group them into families or
  build a queryable font collection with fallback.
- There is no text shaping or line layout. `BidiResolver` gives levels only,
  and `InlineBox` is a plain record for a layout engine to consume.
- There is no command-line program.

## Running the tests

```
pip install -e ".[test]"
pytest
```