"""Cache for font data loaded from the file system."""

from __future__ import annotations

import mmap
import threading
import weakref
from dataclasses import dataclass, replace
from os import PathLike
from typing import Union

from .source import Blob, SourceId, SourceInfo


@dataclass(frozen=True)
class SourceCacheOptions:
    """Options for a source cache.

    If ``shared`` is true, all clones of the cache use one backing store,
    so that only one copy of each font file is loaded into memory.
    """

    shared: bool = False


def load_blob(path: str | PathLike[str]) -> Blob | None:
    """Map a file into memory, returning None if it can't be opened."""
    try:
        with open(path, "rb") as file:
            try:
                data: object = mmap.mmap(file.fileno(), 0, access=mmap.ACCESS_READ)
            except ValueError:
                # Empty files cannot be mapped.
                data = b""
    except OSError:
        return None
    return Blob(data)


class _Failed:
    def __repr__(self) -> str:
        return "Failed"


_FAILED = _Failed()


@dataclass
class _Loaded:
    blob: Blob
    serial: int


@dataclass
class _WeakLoaded:
    ref: weakref.ref[Blob]


class _Shared:
    """Backing store shared between clones of a cache."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._cache: dict[SourceId, Union[_WeakLoaded, _Failed]] = {}

    def get(self, source_id: SourceId, path: str | PathLike[str]) -> Blob | None:
        with self._lock:
            entry = self._cache.get(source_id)
            if entry is None:
                blob = load_blob(path)
                self._cache[source_id] = _FAILED if blob is None else _WeakLoaded(weakref.ref(blob))
                return blob
            if isinstance(entry, _Failed):
                return None
            blob = entry.ref()
            if blob is not None:
                return blob
            blob = load_blob(path)
            if blob is None:
                # Failed for some reason; don't try again.
                self._cache[source_id] = _FAILED
                return None
            entry.ref = weakref.ref(blob)
            return blob


class SourceCache:
    """Cache for font data loaded from the file system."""

    def __init__(self, options: SourceCacheOptions | None = None) -> None:
        self._cache: dict[SourceId, Union[_Loaded, _Failed]] = {}
        self._serial = 0
        shared = options is not None and options.shared
        self._shared: _Shared | None = _Shared() if shared else None

    @classmethod
    def new_shared(cls) -> SourceCache:
        """Create a cache whose backing store is shared among all clones."""
        return cls(SourceCacheOptions(shared=True))

    @property
    def is_shared(self) -> bool:
        return self._shared is not None

    def get(self, source: SourceInfo) -> Blob | None:
        """Return the data for a source, loading it from disk if needed.

        Returns None if loading failed.
        """
        if isinstance(source.kind, Blob):
            return source.kind
        entry = self._cache.get(source.id)
        if entry is None:
            if self._shared is not None:
                blob = self._shared.get(source.id, source.kind)
            else:
                blob = load_blob(source.kind)
            self._cache[source.id] = _FAILED if blob is None else _Loaded(blob, self._serial)
            return blob
        if isinstance(entry, _Failed):
            return None
        entry.serial = self._serial
        return entry.blob

    def prune(self, max_age: int, prune_failed: bool) -> None:
        """Drop blobs not accessed in the last ``max_age`` calls to prune."""
        serial = self._serial
        self._cache = {
            key: entry
            for key, entry in self._cache.items()
            if (not prune_failed if isinstance(entry, _Failed) else max(serial - entry.serial, 0) < max_age)
        }
        self._serial = serial + 1

    def clone(self) -> SourceCache:
        """Return a copy that shares the backing store, if any."""
        other = SourceCache()
        other._cache = {
            key: entry if isinstance(entry, _Failed) else replace(entry)
            for key, entry in self._cache.items()
        }
        other._serial = self._serial
        other._shared = self._shared
        return other

    __copy__ = clone

    def __len__(self) -> int:
        return len(self._cache)