"""Read and write record collections stored as JSON arrays."""

from __future__ import annotations

import os
import shutil
import tempfile
from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING, Final

from pydantic import ValidationError

from recordmerge.domain.model import RecordCollection

from .schema import RecordListAdapter
from .translator import to_payload, to_record

if TYPE_CHECKING:
    from recordmerge.domain.model import Record

DEFAULT_INDENT: Final[int] = 4

log = getLogger(__name__)


class RecordFileError(Exception):
    """Base error for record file access."""

    def __init__(self, message: str, *, source: str | os.PathLike[str] | None = None) -> None:
        self.source = None if source is None else str(source)
        super().__init__(message)


class RecordParseError(RecordFileError, ValueError):
    """Raised when a record file cannot be read or does not match the wire format."""


class RecordWriteError(RecordFileError):
    """Raised when a merged collection cannot be written."""


def parse_collection(text: str | bytes, *, source: str = "<string>") -> RecordCollection:
    """Parse a JSON array of records into a collection."""

    try:
        payloads = RecordListAdapter.validate_json(text)
    except ValidationError as exc:
        raise RecordParseError(
            f"Failed parsing records from {source}: {exc}", source=source
        ) from exc
    return RecordCollection.from_records(to_record(payload) for payload in payloads)


def read_collection(path: str | os.PathLike[str]) -> RecordCollection:
    file_path = Path(path)
    try:
        raw = file_path.read_bytes()
    except OSError as exc:
        raise RecordParseError(
            f"Failed opening record file {file_path}: {exc}", source=path
        ) from exc

    collection = parse_collection(raw, source=str(file_path))
    log.info(
        "Read %s records (%s ids) from %s",
        len(collection),
        len(collection.identities),
        file_path,
    )
    return collection


def dump_collection(
    records: RecordCollection | list[Record], *, indent: int = DEFAULT_INDENT
) -> str:
    """Serialize records as a pretty-printed JSON array with a trailing newline."""

    payloads = [to_payload(record) for record in records]
    return RecordListAdapter.dump_json(payloads, indent=indent, by_alias=True).decode() + "\n"


def write_collection(
    collection: RecordCollection,
    path: str | os.PathLike[str],
    *,
    indent: int = DEFAULT_INDENT,
) -> None:
    """Replace ``path`` with the serialized collection.

    The content goes to a temporary file in the destination directory first, so
    ``path`` is either fully replaced or left untouched.
    """

    file_path = Path(path)
    try:
        content = dump_collection(collection, indent=indent).encode("utf-8")
    except (UnicodeError, ValueError) as exc:
        raise RecordWriteError(
            f"Failed encoding records for {file_path}: {exc}", source=path
        ) from exc

    tmp_name: str | None = None
    try:
        with tempfile.NamedTemporaryFile(
            "wb",
            dir=file_path.parent,
            prefix=f".{file_path.name}.",
            suffix=".tmp",
            delete=False,
        ) as handle:
            tmp_name = handle.name
            handle.write(content)
        if file_path.exists():
            shutil.copymode(file_path, tmp_name)
        Path(tmp_name).replace(file_path)
    except OSError as exc:
        if tmp_name is not None:
            Path(tmp_name).unlink(missing_ok=True)
        raise RecordWriteError(
            f"Failed writing record file {file_path}: {exc}", source=path
        ) from exc

    log.info("Wrote %s records to %s", len(collection), file_path)
