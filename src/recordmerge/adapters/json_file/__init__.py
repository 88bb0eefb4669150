"""Public interface for the JSON record file adapter."""

from __future__ import annotations

from .schema import RecordListAdapter, RecordPayload
from .store import (
    DEFAULT_INDENT,
    RecordFileError,
    RecordParseError,
    RecordWriteError,
    dump_collection,
    parse_collection,
    read_collection,
    write_collection,
)
from .translator import to_payload, to_record

__all__ = [
    "DEFAULT_INDENT",
    "RecordFileError",
    "RecordListAdapter",
    "RecordParseError",
    "RecordPayload",
    "RecordWriteError",
    "dump_collection",
    "parse_collection",
    "read_collection",
    "to_payload",
    "to_record",
    "write_collection",
]
