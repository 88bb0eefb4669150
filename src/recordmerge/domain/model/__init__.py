"""Public record model surface."""

from __future__ import annotations

from recordmerge.domain.model.collection import RecordCollection
from recordmerge.domain.model.record import (
    DEFAULT_FORMAT_VERSION,
    DataEntry,
    MetaEntry,
    Record,
    RecordDomain,
    data_by_name,
    data_equal,
    meta_by_kind,
    meta_equal,
    set_equal,
    union_keys,
    unique_in_order,
)

__all__ = [
    "DEFAULT_FORMAT_VERSION",
    "DataEntry",
    "MetaEntry",
    "Record",
    "RecordCollection",
    "RecordDomain",
    "data_by_name",
    "data_equal",
    "meta_by_kind",
    "meta_equal",
    "set_equal",
    "union_keys",
    "unique_in_order",
]
