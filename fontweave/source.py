"""Model for font data."""

from __future__ import annotations

import itertools
import threading
from dataclasses import dataclass, field
from os import PathLike
from pathlib import Path
from typing import Union

_blob_ids = itertools.count(1)
_blob_lock = threading.Lock()


def _next_blob_id() -> int:
    with _blob_lock:
        return next(_blob_ids)


@dataclass(frozen=True, eq=False)
class Blob:
    """Shared, immutable font data with a unique identifier.

    Two blobs compare equal only if they are the same object.
    """

    data: object
    id: int = field(default_factory=_next_blob_id)

    def __len__(self) -> int:
        return len(self.data)  # type: ignore[arg-type]

    def __bytes__(self) -> bytes:
        return bytes(self.data)  # type: ignore[call-overload]


_source_ids = itertools.count(1)
_source_lock = threading.Lock()


@dataclass(frozen=True, order=True)
class SourceId:
    """Unique identifier for a font source."""

    value: int

    @classmethod
    def new(cls) -> SourceId:
        """Create a new unique identifier."""
        with _source_lock:
            return cls(next(_source_ids))

    def __int__(self) -> int:
        return self.value


#: Font data is either shared bytes in memory or a path to a font file.
SourceKind = Union[Blob, Path]


@dataclass(frozen=True)
class SourceInfo:
    """Associates font data with a unique identifier."""

    id: SourceId
    kind: SourceKind

    @property
    def path(self) -> Path | None:
        """The file path, if the source lives on disk."""
        return self.kind if isinstance(self.kind, Path) else None

    @property
    def blob(self) -> Blob | None:
        """The in-memory data, if the source lives in memory."""
        return self.kind if isinstance(self.kind, Blob) else None


class SourcePathMap:
    """Deduplicates font file paths into sources."""

    def __init__(self) -> None:
        self._map: dict[Path, SourceInfo] = {}

    def get_or_insert(self, path: str | PathLike[str]) -> SourceInfo:
        """Return the source for a path, creating it if it doesn't exist."""
        key = Path(path)
        source = self._map.get(key)
        if source is None:
            source = SourceInfo(SourceId.new(), key)
            self._map[key] = source
        return source

    def __len__(self) -> int:
        return len(self._map)