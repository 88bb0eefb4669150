"""Record-level merge policy.

The policy is last-writer-wins at record granularity: when both sides hold a
record and they differ in any section, the "other" record survives wholesale.
"""

from __future__ import annotations

from enum import StrEnum
from typing import TYPE_CHECKING

from .diff import compare

if TYPE_CHECKING:
    from recordmerge.domain.model import Record


class BothMissingError(LookupError):
    """Raised when neither side of a merge holds a record for an identity."""

    def __init__(self, identity: str | None = None) -> None:
        self.identity = identity
        if identity is None:
            message = "Cannot merge records: both sides are missing"
        else:
            message = f"Cannot merge records for id {identity!r}: both sides are missing"
        super().__init__(message)


class MergeDecision(StrEnum):
    """Which side survives a merge."""

    TAKE_CURRENT = "take_current"
    TAKE_OTHER = "take_other"
    UNCHANGED = "unchanged"


def decide(a: Record, b: Record, *, identity: str | None = None) -> MergeDecision:
    if not a.present and not b.present:
        raise BothMissingError(identity)
    if not a.present:
        return MergeDecision.TAKE_OTHER
    if not b.present:
        return MergeDecision.TAKE_CURRENT
    if compare(a, b).has_differences:
        return MergeDecision.TAKE_OTHER
    return MergeDecision.UNCHANGED


def merge_records(a: Record, b: Record, *, identity: str | None = None) -> Record:
    """Return the record that survives for one identity.

    ``a`` is the current side and ``b`` the other side. Raises
    :class:`BothMissingError` instead of inventing an empty record.
    """

    if decide(a, b, identity=identity) is MergeDecision.TAKE_OTHER:
        return b
    return a
