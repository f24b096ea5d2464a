"""Scanning files and memory for fonts."""

from __future__ import annotations

import os
import struct
from dataclasses import dataclass, field
from enum import IntEnum
from os import PathLike
from pathlib import Path
from typing import Iterable, Iterator, Mapping

_SFNT_VERSIONS = frozenset({0x00010000, 0x4F54544F, 0x74727565})
_COLLECTION_TAG = b"ttcf"
_NAME_TAG = b"name"
_ENGLISH_US = 0x0409


class NameId(IntEnum):
    """Well known identifiers of entries in the name table."""

    COPYRIGHT_NOTICE = 0
    FAMILY_NAME = 1
    SUBFAMILY_NAME = 2
    UNIQUE_ID = 3
    FULL_NAME = 4
    VERSION_STRING = 5
    POSTSCRIPT_NAME = 6
    TRADEMARK = 7
    MANUFACTURER = 8
    DESIGNER = 9
    DESCRIPTION = 10
    VENDOR_URL = 11
    DESIGNER_URL = 12
    LICENSE_DESCRIPTION = 13
    LICENSE_URL = 14
    TYPOGRAPHIC_FAMILY_NAME = 16
    TYPOGRAPHIC_SUBFAMILY_NAME = 17


def _encoding_for(platform_id: int, encoding_id: int) -> str | None:
    if platform_id == 0:
        return "utf-16-be"
    if platform_id == 1 and encoding_id == 0:
        return "mac_roman"
    if platform_id == 3 and encoding_id in (0, 1, 10):
        return "utf-16-be"
    return None


@dataclass(frozen=True)
class NameRecord:
    """One entry of a font's name table."""

    platform_id: int
    encoding_id: int
    language_id: int
    name_id: int
    length: int
    offset: int

    def string(self, string_data: bytes) -> str | None:
        """Decode this record's string, or None if it lies outside the data.

        Strings in an unsupported encoding decode to the empty string.
        """
        end = self.offset + self.length
        if end > len(string_data):
            return None
        encoding = _encoding_for(self.platform_id, self.encoding_id)
        if encoding is None:
            return ""
        raw = string_data[self.offset:end]
        if encoding == "utf-16-be" and len(raw) % 2:
            raw = raw[:-1]
        return raw.decode(encoding, errors="replace")


@dataclass(frozen=True)
class NameTable:
    """The records and string storage of a font's name table."""

    records: tuple[NameRecord, ...]
    string_data: bytes

    @classmethod
    def parse(cls, data: bytes) -> NameTable:
        """Parse a name table, raising ValueError if it is truncated."""
        data = bytes(data)
        if len(data) < 6:
            raise ValueError("name table header is truncated")
        _version, count, storage_offset = struct.unpack_from(">3H", data, 0)
        records_end = 6 + 12 * count
        if records_end > len(data):
            raise ValueError("name table records are truncated")
        records = tuple(
            NameRecord(*fields) for fields in struct.iter_unpack(">6H", data[6:records_end])
        )
        return cls(records, data[storage_offset:])


@dataclass(frozen=True)
class ScannedFont:
    """A font found by scanning the file system or a memory buffer."""

    data: bytes = field(repr=False)
    tables: Mapping[bytes, tuple[int, int]] = field(repr=False)
    index: int
    name_table: NameTable = field(repr=False)
    path: Path | None = None

    def table(self, tag: bytes) -> bytes | None:
        """Return the raw data of a table, or None if absent or out of range."""
        location = self.tables.get(tag)
        if location is None:
            return None
        offset, length = location
        if offset + length > len(self.data):
            return None
        return self.data[offset:offset + length]

    def english_or_first_name(self, name_id: int) -> str | None:
        """Return the name string for the given identifier."""
        return english_or_first(self.name_table, name_id)


def _candidates(name_table: NameTable, name_id: int) -> Iterator[tuple[int, NameRecord]]:
    return ((i, rec) for i, rec in enumerate(name_table.records) if rec.name_id == name_id)


def _best_record(name_table: NameTable, name_id: int) -> tuple[int, NameRecord] | None:
    best: tuple[int, NameRecord] | None = None
    best_rank = -1
    for i, record in _candidates(name_table, name_id):
        if record.language_id == _ENGLISH_US:
            return i, record
        if record.language_id == 0:
            rank = 2
        elif i == 0:
            rank = 1
        else:
            continue
        if rank > best_rank:
            best_rank = rank
            best = (i, record)
    return best


def english_or_first(name_table: NameTable, name_id: int) -> str | None:
    """Return the US English name, else a language-neutral one, else the first."""
    best = _best_record(name_table, name_id)
    if best is None:
        return None
    return best[1].string(name_table.string_data)


def all_names(name_table: NameTable, name_id: int) -> list[str]:
    """Return every non-empty name for the identifier, the preferred one first."""
    best = _best_record(name_table, name_id)
    names: list[str] = []
    if best is not None:
        preferred = best[1].string(name_table.string_data)
        if preferred:
            names.append(preferred)
    for i, record in _candidates(name_table, name_id):
        if best is not None and i == best[0]:
            continue
        text = record.string(name_table.string_data)
        if text:
            names.append(text)
    return names


def _table_directory(data: bytes, offset: int) -> dict[bytes, tuple[int, int]] | None:
    if offset + 12 > len(data):
        return None
    version, num_tables = struct.unpack_from(">IH", data, offset)
    if version not in _SFNT_VERSIONS:
        return None
    start = offset + 12
    end = start + 16 * num_tables
    if end > len(data):
        return None
    tables: dict[bytes, tuple[int, int]] = {}
    for tag, _checksum, table_offset, length in struct.iter_unpack(">4sIII", data[start:end]):
        tables.setdefault(tag, (table_offset, length))
    return tables


def _font_offsets(data: bytes) -> list[int] | None:
    if data[:4] != _COLLECTION_TAG:
        return [0]
    if len(data) < 12:
        return None
    (num_fonts,) = struct.unpack_from(">I", data, 8)
    end = 12 + 4 * num_fonts
    if end > len(data):
        return None
    return [offset for (offset,) in struct.iter_unpack(">I", data[12:end])]


def _scan_font(data: bytes, offset: int, index: int, path: Path | None) -> ScannedFont | None:
    tables = _table_directory(data, offset)
    if tables is None:
        return None
    font = ScannedFont(data, tables, index, NameTable((), b""), path)
    raw_name = font.table(_NAME_TAG)
    if raw_name is None:
        return None
    try:
        name_table = NameTable.parse(raw_name)
    except ValueError:
        return None
    return ScannedFont(data, tables, index, name_table, path)


def _scan_data(data: bytes, path: Path | None) -> Iterator[ScannedFont]:
    offsets = _font_offsets(data)
    if offsets is None:
        return
    for index, offset in enumerate(offsets):
        font = _scan_font(data, offset, index, path)
        if font is not None:
            yield font


def scan_memory(data: bytes) -> Iterator[ScannedFont]:
    """Yield every font found in a memory buffer."""
    yield from _scan_data(bytes(data), None)


def _scan_path(path: Path, max_depth: int, depth: int) -> Iterator[ScannedFont]:
    try:
        is_dir = path.is_dir()
        if not is_dir:
            path.stat()
    except OSError:
        return
    if is_dir:
        if depth > max_depth:
            return
        try:
            entries = sorted(os.scandir(path), key=lambda entry: entry.name)
        except OSError:
            return
        for entry in entries:
            yield from _scan_path(Path(entry.path), max_depth, depth + 1)
        return
    try:
        data = path.read_bytes()
    except OSError:
        return
    yield from _scan_data(data, path)


def scan_paths(paths: Iterable[str | PathLike[str]], max_depth: int) -> Iterator[ScannedFont]:
    """Yield every font found under the given files and directories.

    Directories nested deeper than ``max_depth`` below a given path are skipped.
    """
    for path in paths:
        yield from _scan_path(Path(path), max_depth, 0)