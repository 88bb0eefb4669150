"""Ordered record collections indexed by identity."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from .record import Record, unique_in_order

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator


@dataclass(slots=True)
class RecordCollection:
    """Records of one storage unit plus their derived identity indexes.

    ``by_identity`` keeps the last record seen for a repeated identity while
    ``identities`` keeps first-seen order. Both are rebuilt only on construction
    and by :meth:`set_records`.
    """

    _records: list[Record] = field(default_factory=list["Record"], repr=False)
    _by_identity: dict[str, Record] = field(
        default_factory=dict["str", "Record"], init=False, repr=False
    )
    _identities: list[str] = field(default_factory=list["str"], init=False, repr=False)

    def __post_init__(self) -> None:
        self._reindex()

    @classmethod
    def from_records(cls, records: Iterable[Record]) -> RecordCollection:
        return cls(list(records))

    @property
    def records(self) -> tuple[Record, ...]:
        return tuple(self._records)

    @property
    def by_identity(self) -> dict[str, Record]:
        return dict(self._by_identity)

    @property
    def identities(self) -> tuple[str, ...]:
        return tuple(self._identities)

    def get(self, identity: str) -> Record:
        """Return the record for ``identity`` or the zero-value missing record."""

        record = self._by_identity.get(identity)
        if record is None:
            return Record.missing()
        return record

    def set_records(self, records: Iterable[Record]) -> None:
        self._records = list(records)
        self._reindex()

    def _reindex(self) -> None:
        self._by_identity = {record.identity: record for record in self._records}
        self._identities = unique_in_order(record.identity for record in self._records)

    def __contains__(self, identity: object) -> bool:
        return identity in self._by_identity

    def __iter__(self) -> Iterator[Record]:
        return iter(self._records)

    def __len__(self) -> int:
        return len(self._records)
