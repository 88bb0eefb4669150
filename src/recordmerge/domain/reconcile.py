"""Three-way reconciliation of record collections.

One linear pass over the identity union:
1) union the identities of ancestor, current and other (first-seen order)
2) fetch current and other records per identity (absence is allowed)
3) report differences and merge the pair
4) emit merged records in union order

Ancestor content does not take part in any decision; the ancestor collection
only contributes identities to the union.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum
from logging import getLogger

from recordmerge.domain.model import Record, RecordCollection, unique_in_order

from .diff import describe_pair
from .merge import MergeDecision, decide, merge_records

log = getLogger(__name__)


class AncestorOnlyPolicy(StrEnum):
    """Handling of identities that were deleted on both current and other."""

    FAIL = "fail"
    SKIP = "skip"


@dataclass(slots=True)
class ReconciliationResult:
    merged: RecordCollection
    report: list[str] = field(default_factory=list["str"])
    decisions: dict[str, MergeDecision] = field(default_factory=dict["str", "MergeDecision"])
    skipped: list[str] = field(default_factory=list["str"])
    conflicts: list[str] = field(default_factory=list["str"])


def union_identities(*collections: RecordCollection) -> list[str]:
    """Identities of all ``collections`` without repeats, in argument order."""

    return unique_in_order(
        identity for collection in collections for identity in collection.identities
    )


def reconcile(
    ancestor: RecordCollection,
    current: RecordCollection,
    other: RecordCollection,
    *,
    ancestor_only: AncestorOnlyPolicy = AncestorOnlyPolicy.FAIL,
) -> ReconciliationResult:
    """Merge ``current`` and ``other`` into one collection.

    Raises :class:`BothMissingError` for an identity known only to the ancestor
    unless ``ancestor_only`` is :attr:`AncestorOnlyPolicy.SKIP`.
    """

    result = ReconciliationResult(merged=RecordCollection())
    merged: list[Record] = []

    for identity in union_identities(ancestor, current, other):
        current_record = current.get(identity)
        other_record = other.get(identity)

        if (
            not current_record.present
            and not other_record.present
            and ancestor_only is AncestorOnlyPolicy.SKIP
        ):
            log.warning("Skipping id %r: deleted on both sides", identity)
            result.skipped.append(identity)
            continue

        result.report.extend(describe_pair(current_record, other_record))
        decision = decide(current_record, other_record, identity=identity)
        record = merge_records(current_record, other_record, identity=identity)

        if decision is MergeDecision.TAKE_OTHER and current_record.present:
            result.conflicts.append(identity)
        result.decisions[identity] = decision
        merged.append(record)
        log.debug("Id %r: %s", identity, decision)

    result.merged.set_records(merged)
    log.info(
        "Reconciled %s ids: merged=%s, conflicts=%s, skipped=%s",
        len(result.decisions) + len(result.skipped),
        len(merged),
        len(result.conflicts),
        len(result.skipped),
    )
    return result
