"""Application orchestration entry points."""

from __future__ import annotations

from logging import getLogger
from pathlib import Path
from typing import TYPE_CHECKING

from recordmerge.adapters.json_file import read_collection, write_collection
from recordmerge.config import MergeConfig
from recordmerge.domain.reconcile import AncestorOnlyPolicy, ReconciliationResult, reconcile

if TYPE_CHECKING:
    import os

log = getLogger(__name__)


def merge_files(
    ancestor: str | os.PathLike[str],
    current: str | os.PathLike[str],
    other: str | os.PathLike[str],
    *,
    output: str | os.PathLike[str] | None = None,
    config: MergeConfig | None = None,
    dry_run: bool = False,
) -> ReconciliationResult:
    """Three-way merge the record files and write the merged collection.

    The merged collection replaces ``current`` unless ``output`` is given, which
    is what git expects from a merge driver. All three inputs are read and
    reconciled before anything is written.
    """

    effective_config = config or MergeConfig()
    destination = Path(output) if output is not None else Path(current)
    log.info(
        "Starting merge: ancestor=%s, current=%s, other=%s, output=%s",
        ancestor,
        current,
        other,
        destination,
    )

    result = reconcile(
        read_collection(ancestor),
        read_collection(current),
        read_collection(other),
        ancestor_only=AncestorOnlyPolicy(effective_config.ancestor_only),
    )

    if dry_run:
        log.info("Dry run: not writing %s", destination)
    else:
        write_collection(result.merged, destination, indent=effective_config.indent)

    log.info(
        f"Finished merge: records={len(result.merged)}, conflicts={len(result.conflicts)}, "
        f"skipped={len(result.skipped)}, report_lines={len(result.report)}"
    )
    return result
