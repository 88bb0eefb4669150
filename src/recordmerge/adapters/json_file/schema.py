"""Pydantic models describing the JSON record wire format."""

from __future__ import annotations

from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def _none_to_blank(value: object) -> object:
    return "" if value is None else value


def _none_to_empty(value: object) -> object:
    return [] if value is None else value


class WireBaseModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class DataEntryPayload(WireBaseModel):
    name: str = ""
    type: str = ""
    value: str = ""

    _normalize_strings = field_validator("name", "type", "value", mode="before")(_none_to_blank)


class MetaEntryPayload(WireBaseModel):
    kind: str = ""
    value: str = ""

    _normalize_strings = field_validator("kind", "value", mode="before")(_none_to_blank)


class DomainPayload(WireBaseModel):
    category: str = ""
    kind: str = ""

    _normalize_strings = field_validator("category", "kind", mode="before")(_none_to_blank)


class RecordPayload(WireBaseModel):
    id: str = ""
    name: str = ""
    data: list[DataEntryPayload] = Field(default_factory=list["DataEntryPayload"])
    meta: list[MetaEntryPayload] = Field(default_factory=list["MetaEntryPayload"])
    selectors: list[str] = Field(default_factory=list)
    domain: DomainPayload = Field(default_factory=DomainPayload)
    tags: list[str] = Field(default_factory=list)
    format_version: str = Field(default="", alias="formatVersion")

    _normalize_strings = field_validator("id", "name", "format_version", mode="before")(
        _none_to_blank
    )
    _normalize_lists = field_validator("meta", "selectors", "tags", mode="before")(
        _none_to_empty
    )

    @field_validator("data", mode="before")
    @classmethod
    def _normalize_data_block(cls, value: object) -> object:
        # a bare entry object is shorthand for a one-element data block
        if value is None:
            return []
        if isinstance(value, Mapping):
            return [value]
        return value

    @field_validator("domain", mode="before")
    @classmethod
    def _normalize_domain(cls, value: object) -> object:
        return {} if value is None else value


RecordListAdapter = TypeAdapter(list[RecordPayload])
