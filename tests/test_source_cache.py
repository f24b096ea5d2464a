import copy
import gc

from fontweave.source import Blob, SourceId, SourceInfo
from fontweave.source_cache import SourceCache, SourceCacheOptions, load_blob


def _path_source(tmp_path, name="font.ttf", content=b"font-data"):
    path = tmp_path / name
    if content is not None:
        path.write_bytes(content)
    return SourceInfo(SourceId.new(), path)


def test_load_blob_reads_file(tmp_path):
    path = tmp_path / "a.bin"
    path.write_bytes(b"abc")
    blob = load_blob(path)
    assert bytes(blob) == b"abc"


def test_load_blob_empty_file(tmp_path):
    path = tmp_path / "empty.bin"
    path.write_bytes(b"")
    blob = load_blob(path)
    assert len(blob) == 0


def test_load_blob_missing_file(tmp_path):
    assert load_blob(tmp_path / "missing.bin") is None


def test_memory_source_returned_directly():
    blob = Blob(b"in-memory")
    cache = SourceCache()
    assert cache.get(SourceInfo(SourceId.new(), blob)) is blob
    assert len(cache) == 0


def test_get_loads_and_caches(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache()
    first = cache.get(src)
    assert bytes(first) == b"font-data"
    assert cache.get(src) is first


def test_failure_is_cached_until_pruned(tmp_path):
    src = _path_source(tmp_path, content=None)
    cache = SourceCache()
    assert cache.get(src) is None
    src.kind.write_bytes(b"now-here")
    assert cache.get(src) is None
    cache.prune(10, prune_failed=False)
    assert cache.get(src) is None
    cache.prune(10, prune_failed=True)
    assert bytes(cache.get(src)) == b"now-here"


def test_prune_by_age(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache()
    first = cache.get(src)
    cache.prune(1, prune_failed=False)
    assert cache.get(src) is first
    cache.prune(1, prune_failed=False)
    cache.prune(1, prune_failed=False)
    second = cache.get(src)
    assert second is not first
    assert bytes(second) == bytes(first)


def test_access_refreshes_age(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache()
    first = cache.get(src)
    for _ in range(4):
        cache.prune(2, prune_failed=False)
        assert cache.get(src) is first


def test_prune_zero_age_drops_everything(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache()
    cache.get(src)
    cache.prune(0, prune_failed=False)
    assert len(cache) == 0


def test_unshared_clones_load_separately(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache(SourceCacheOptions())
    other = cache.clone()
    a = cache.get(src)
    b = other.get(src)
    assert a is not b
    assert bytes(a) == bytes(b)
    assert not cache.is_shared


def test_clone_copies_entries(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache()
    blob = cache.get(src)
    other = copy.copy(cache)
    assert other.get(src) is blob


def test_shared_clones_share_data(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache.new_shared()
    other = cache.clone()
    a = cache.get(src)
    b = other.get(src)
    assert a is b
    assert other.is_shared


def test_shared_reloads_after_release(tmp_path):
    src = _path_source(tmp_path)
    cache = SourceCache.new_shared()
    blob = cache.get(src)
    old_id = blob.id
    cache.prune(0, prune_failed=False)
    del blob
    gc.collect()
    fresh = cache.get(src)
    assert fresh.id != old_id
    assert bytes(fresh) == b"font-data"