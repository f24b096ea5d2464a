from pathlib import Path

from fontweave.source import Blob, SourceId, SourceInfo, SourcePathMap


def test_source_ids_are_unique_and_increasing():
    ids = [SourceId.new() for _ in range(5)]
    assert len(set(ids)) == len(ids)
    assert ids == sorted(ids)
    assert all(a < b for a, b in zip(ids, ids[1:]))


def test_source_id_int_conversion():
    sid = SourceId.new()
    assert int(sid) == sid.value
    assert SourceId(sid.value) == sid


def test_blob_exposes_data():
    blob = Blob(b"font")
    assert bytes(blob) == b"font"
    assert len(blob) == len(b"font")


def test_blobs_have_distinct_ids_and_identity_equality():
    a = Blob(b"x")
    b = Blob(b"x")
    assert a.id != b.id
    assert not (a == b)
    assert a == a


def test_source_info_memory_kind():
    blob = Blob(b"abc")
    info = SourceInfo(SourceId.new(), blob)
    assert info.blob is blob
    assert info.path is None


def test_path_map_deduplicates():
    m = SourcePathMap()
    first = m.get_or_insert("fonts/a.ttf")
    again = m.get_or_insert(Path("fonts/a.ttf"))
    assert first is again
    assert first.path == Path("fonts/a.ttf")
    assert first.blob is None
    assert len(m) == 1


def test_path_map_distinct_paths_get_distinct_ids():
    m = SourcePathMap()
    a = m.get_or_insert("a.ttf")
    b = m.get_or_insert("b.ttf")
    assert a.id != b.id
    assert b.path == Path("b.ttf")
    assert len(m) == 2