import struct

import pytest

from fontweave.scan import (
    NameId,
    NameTable,
    all_names,
    english_or_first,
    scan_memory,
    scan_paths,
)


def win(language, name_id, text):
    return (3, 1, language, name_id, text.encode("utf-16-be"))


def build_name_table(records):
    storage = b""
    directory = b""
    for platform, encoding, language, name_id, raw in records:
        directory += struct.pack(">6H", platform, encoding, language, name_id, len(raw), len(storage))
        storage += raw
    header = struct.pack(">3H", 0, len(records), 6 + 12 * len(records))
    return header + directory + storage


def build_sfnt(tables, base=0):
    count = len(tables)
    header = struct.pack(">IHHHH", 0x00010000, count, 0, 0, 0)
    offset = base + 12 + 16 * count
    directory = b""
    body = b""
    for tag, data in tables.items():
        directory += struct.pack(">4sIII", tag, 0, offset + len(body), len(data))
        body += data
    return header + directory + body


def font_named(family):
    return build_sfnt({b"name": build_name_table([win(0x0409, 1, family)])})


def build_ttc(families):
    header_len = 12 + 4 * len(families)
    lengths = [len(font_named(f)) for f in families]
    offsets = []
    position = header_len
    for length in lengths:
        offsets.append(position)
        position += length
    header = b"ttcf" + struct.pack(">HHI", 1, 0, len(families))
    header += b"".join(struct.pack(">I", o) for o in offsets)
    fonts = b"".join(
        build_sfnt({b"name": build_name_table([win(0x0409, 1, f)])}, base=o)
        for f, o in zip(families, offsets)
    )
    return header + fonts


def table(records):
    return NameTable.parse(build_name_table(records))


def test_english_preferred_even_when_later():
    names = table([win(0x0407, 1, "Deutsch"), win(0x0409, 1, "English")])
    assert english_or_first(names, NameId.FAMILY_NAME) == "English"


def test_language_neutral_beats_first_record():
    names = table([win(0x0407, 1, "Deutsch"), (1, 0, 0, 1, "Café".encode("mac_roman"))])
    assert english_or_first(names, 1) == "Café"


def test_first_record_used_as_fallback():
    names = table([win(0x0407, 1, "First"), win(0x040C, 1, "Second")])
    assert english_or_first(names, 1) == "First"


def test_no_rank_when_first_record_is_other_id():
    names = table([win(0x0409, 6, "PostScript"), win(0x0407, 1, "Deutsch")])
    assert english_or_first(names, 1) is None
    assert english_or_first(names, NameId.POSTSCRIPT_NAME) == "PostScript"


def test_all_names_puts_preferred_first():
    names = table(
        [win(0x0407, 1, "Deutsch"), win(0x0409, 1, "English"), win(0x040C, 1, "Francais")]
    )
    assert all_names(names, 1) == ["English", "Deutsch", "Francais"]


def test_all_names_skips_empty_strings():
    names = table([win(0x0409, 1, ""), win(0x0407, 1, "Other")])
    assert all_names(names, 1) == ["Other"]


def test_all_names_missing_id_is_empty():
    names = table([win(0x0409, 1, "Family")])
    assert all_names(names, NameId.TYPOGRAPHIC_FAMILY_NAME) == []


def test_record_outside_storage_has_no_string():
    data = struct.pack(">3H", 0, 1, 18) + struct.pack(">6H", 3, 1, 0x0409, 1, 40, 0)
    names = NameTable.parse(data)
    assert english_or_first(names, 1) is None
    assert all_names(names, 1) == []


def test_unknown_encoding_decodes_empty():
    names = table([(3, 5, 0x0409, 1, b"\x00\x41")])
    assert english_or_first(names, 1) == ""


def test_parse_rejects_truncated_tables():
    with pytest.raises(ValueError):
        NameTable.parse(b"\x00\x00")
    with pytest.raises(ValueError):
        NameTable.parse(struct.pack(">3H", 0, 3, 42))


def test_parse_reads_records():
    names = table([win(0x0409, 4, "Full")])
    assert len(names.records) == 1
    assert names.records[0].name_id == NameId.FULL_NAME
    assert names.records[0].language_id == 0x0409


def test_scan_memory_single_font():
    fonts = list(scan_memory(font_named("Test")))
    assert [f.index for f in fonts] == [0]
    assert fonts[0].english_or_first_name(NameId.FAMILY_NAME) == "Test"
    assert fonts[0].path is None


def test_scan_memory_collection():
    fonts = list(scan_memory(build_ttc(["One", "Two"])))
    assert [f.index for f in fonts] == [0, 1]
    assert [f.english_or_first_name(1) for f in fonts] == ["One", "Two"]


def test_scan_memory_table_lookup():
    font = next(scan_memory(build_sfnt({b"name": build_name_table([]), b"abcd": b"xyz"})))
    assert font.table(b"abcd") == b"xyz"
    assert font.table(b"none") is None


def test_scan_memory_ignores_garbage():
    assert list(scan_memory(b"not a font at all")) == []
    assert list(scan_memory(b"")) == []


def test_scan_memory_skips_font_without_name_table():
    assert list(scan_memory(build_sfnt({b"head": b"\0" * 8}))) == []


def test_scan_memory_skips_truncated_collection():
    data = b"ttcf" + struct.pack(">HHI", 1, 0, 5)
    assert list(scan_memory(data)) == []


def test_scan_paths_respects_depth(tmp_path):
    (tmp_path / "top.ttf").write_bytes(font_named("Top"))
    sub = tmp_path / "sub"
    sub.mkdir()
    (sub / "deep.ttf").write_bytes(font_named("Deep"))
    (tmp_path / "junk.txt").write_text("hello")

    shallow = list(scan_paths([tmp_path], 0))
    assert [f.english_or_first_name(1) for f in shallow] == ["Top"]
    assert shallow[0].path == tmp_path / "top.ttf"

    deep = {f.english_or_first_name(1) for f in scan_paths([tmp_path], 1)}
    assert deep == {"Top", "Deep"}


def test_scan_paths_accepts_files_and_missing_paths(tmp_path):
    font_file = tmp_path / "one.otf"
    font_file.write_bytes(font_named("Single"))
    found = list(scan_paths([str(font_file), tmp_path / "missing"], 0))
    assert [f.english_or_first_name(1) for f in found] == ["Single"]