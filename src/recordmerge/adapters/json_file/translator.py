"""Translate wire payloads into domain records and back."""

from __future__ import annotations

from recordmerge.domain.model import (
    DEFAULT_FORMAT_VERSION,
    DataEntry,
    MetaEntry,
    Record,
    RecordDomain,
)

from .schema import (
    DataEntryPayload,
    DomainPayload,
    MetaEntryPayload,
    RecordPayload,
)


def to_record(payload: RecordPayload) -> Record:
    """Build a present record; a blank format version becomes the default."""

    return Record(
        identity=payload.id,
        name=payload.name,
        data=tuple(
            DataEntry(name=entry.name, type=entry.type, value=entry.value)
            for entry in payload.data
        ),
        meta=tuple(MetaEntry(kind=entry.kind, value=entry.value) for entry in payload.meta),
        selectors=tuple(payload.selectors),
        domain=RecordDomain(category=payload.domain.category, kind=payload.domain.kind),
        tags=tuple(payload.tags),
        format_version=payload.format_version or DEFAULT_FORMAT_VERSION,
    )


def to_payload(record: Record) -> RecordPayload:
    if not record.present:
        raise ValueError("Cannot serialize a missing record")
    return RecordPayload(
        id=record.identity,
        name=record.name,
        data=[
            DataEntryPayload(name=entry.name, type=entry.type, value=entry.value)
            for entry in record.data
        ],
        meta=[MetaEntryPayload(kind=entry.kind, value=entry.value) for entry in record.meta],
        selectors=list(record.selectors),
        domain=DomainPayload(category=record.domain.category, kind=record.domain.kind),
        tags=list(record.tags),
        format_version=record.effective_format_version,
    )
