"""Structural comparison of two records sharing an identity.

All seven sections are evaluated on every comparison so a diff can report each
differing section. Data and meta blocks are itemized per key; the remaining
sections are reported as a single line each.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Final

from recordmerge.domain.model import (
    Record,
    data_by_name,
    data_equal,
    meta_by_kind,
    meta_equal,
    set_equal,
    union_keys,
)

if TYPE_CHECKING:
    from recordmerge.domain.model import DataEntry

MISSING_LABEL: Final[str] = "- missing -"


def format_difference(label: str, left: str, right: str) -> str:
    """Render ``label``, ``left`` and ``right`` as one aligned report line."""

    return f"{label:>20}: {left:>38} ≠ {right:<38}".rstrip()


def _entry_fields(entry: DataEntry | None) -> tuple[str, str]:
    if entry is None:
        return MISSING_LABEL, MISSING_LABEL
    return entry.type, entry.value


@dataclass(frozen=True, slots=True, kw_only=True)
class RecordDiff:
    left: Record
    right: Record
    name_is_different: bool
    data_is_different: bool
    meta_is_different: bool
    selectors_is_different: bool
    domain_is_different: bool
    tags_is_different: bool
    format_version_is_different: bool

    @property
    def has_differences(self) -> bool:
        return any(self.differing_sections)

    @property
    def differing_sections(self) -> tuple[str, ...]:
        flags = {
            "name": self.name_is_different,
            "data": self.data_is_different,
            "meta": self.meta_is_different,
            "selectors": self.selectors_is_different,
            "domain": self.domain_is_different,
            "tags": self.tags_is_different,
            "formatVersion": self.format_version_is_different,
        }
        return tuple(section for section, differs in flags.items() if differs)

    def data_differences(self) -> list[str]:
        left = data_by_name(self.left)
        right = data_by_name(self.right)
        lines: list[str] = []
        for key in union_keys(left, right):
            first = left.get(key)
            second = right.get(key)
            if first == second:
                continue
            left_type, left_value = _entry_fields(first)
            right_type, right_value = _entry_fields(second)
            one_sided = first is None or second is None
            if one_sided or left_type != right_type:
                lines.append(format_difference(f"data.{key}.type", left_type, right_type))
            if one_sided or left_value != right_value:
                lines.append(format_difference(f"data.{key}.value", left_value, right_value))
        return lines

    def meta_differences(self) -> list[str]:
        left = meta_by_kind(self.left)
        right = meta_by_kind(self.right)
        lines: list[str] = []
        for key in union_keys(left, right):
            first = left.get(key)
            second = right.get(key)
            if first != second:
                lines.append(
                    format_difference(
                        f"meta.{key}",
                        MISSING_LABEL if first is None else first,
                        MISSING_LABEL if second is None else second,
                    )
                )
        return lines

    def render(self) -> list[str]:
        """Return one or more report lines for every differing section."""

        lines: list[str] = []
        if self.name_is_different:
            lines.append(format_difference("name", self.left.name, self.right.name))
        if self.data_is_different:
            lines.extend(self.data_differences())
        if self.meta_is_different:
            lines.extend(self.meta_differences())
        if self.selectors_is_different:
            lines.append("selectors differ")
        if self.domain_is_different:
            lines.append("domain differs")
        if self.tags_is_different:
            lines.append("tags differ")
        if self.format_version_is_different:
            lines.append(
                format_difference(
                    "formatVersion",
                    self.left.effective_format_version,
                    self.right.effective_format_version,
                )
            )
        return lines


def compare(a: Record, b: Record) -> RecordDiff:
    """Compare ``a`` with ``b``; neither record is modified."""

    return RecordDiff(
        left=a,
        right=b,
        name_is_different=a.name != b.name,
        data_is_different=not data_equal(a, b),
        meta_is_different=not meta_equal(a, b),
        selectors_is_different=not set_equal(a.selectors, b.selectors),
        domain_is_different=a.domain != b.domain,
        tags_is_different=not set_equal(a.tags, b.tags),
        format_version_is_different=(
            a.effective_format_version != b.effective_format_version
        ),
    )


def describe_pair(a: Record, b: Record) -> list[str]:
    """Report lines for the current/other pair of one identity.

    A one-sided pair yields only the identity header; a pair missing on both
    sides or without differences yields nothing.
    """

    if not a.present and not b.present:
        return []
    if not a.present:
        return [format_difference("id", MISSING_LABEL, b.identity)]
    if not b.present:
        return [format_difference("id", a.identity, MISSING_LABEL)]

    diff = compare(a, b)
    if not diff.has_differences:
        return []
    return [format_difference("id", a.identity, b.identity), *diff.render()]
