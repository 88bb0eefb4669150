"""Record value objects and the comparison primitives used by the differ.

Records are immutable. Data and meta blocks keep their wire order as tuples;
keyed views are built fresh per call with last-wins insertion, so a repeated
``name`` (data) or ``kind`` (meta) is represented by its final occurrence.
"""

from __future__ import annotations

from collections.abc import Hashable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Final, TypeVar

if TYPE_CHECKING:
    from collections.abc import Iterable

DEFAULT_FORMAT_VERSION: Final[str] = "1.0"

T = TypeVar("T", bound=Hashable)


def unique_in_order(values: Iterable[T]) -> list[T]:
    """Drop repeated values, keeping the first occurrence of each."""

    return list(dict.fromkeys(values))


@dataclass(frozen=True, slots=True)
class DataEntry:
    name: str = ""
    type: str = ""
    value: str = ""


@dataclass(frozen=True, slots=True)
class MetaEntry:
    kind: str = ""
    value: str = ""


@dataclass(frozen=True, slots=True)
class RecordDomain:
    category: str = ""
    kind: str = ""


@dataclass(frozen=True, slots=True, kw_only=True)
class Record:
    """One entity of a record collection.

    ``present`` is not part of the wire format: it is ``False`` only for the
    zero-value record handed out for an identity a collection does not hold.
    """

    identity: str = ""
    name: str = ""
    data: tuple[DataEntry, ...] = ()
    meta: tuple[MetaEntry, ...] = ()
    selectors: tuple[str, ...] = ()
    domain: RecordDomain = field(default_factory=RecordDomain)
    tags: tuple[str, ...] = ()
    format_version: str = DEFAULT_FORMAT_VERSION
    present: bool = True

    @classmethod
    def missing(cls) -> Record:
        return cls(format_version="", present=False)

    @property
    def effective_format_version(self) -> str:
        return self.format_version or DEFAULT_FORMAT_VERSION


def data_by_name(record: Record) -> dict[str, DataEntry]:
    return {entry.name: entry for entry in record.data}


def meta_by_kind(record: Record) -> dict[str, str]:
    return {entry.kind: entry.value for entry in record.meta}


def union_keys(first: Iterable[str], second: Iterable[str]) -> list[str]:
    """Keys of both sides in first-seen order, left side first."""

    return unique_in_order([*first, *second])


def data_equal(first: Record, second: Record) -> bool:
    left = data_by_name(first)
    right = data_by_name(second)
    return all(left.get(key) == right.get(key) for key in union_keys(left, right))


def meta_equal(first: Record, second: Record) -> bool:
    left = meta_by_kind(first)
    right = meta_by_kind(second)
    return all(left.get(key) == right.get(key) for key in union_keys(left, right))


def set_equal(first: Iterable[str], second: Iterable[str]) -> bool:
    """Order-independent comparison; repeated labels collapse."""

    return set(first) == set(second)
