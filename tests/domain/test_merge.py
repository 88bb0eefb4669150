from __future__ import annotations

from dataclasses import replace

import pytest

from recordmerge.domain.merge import BothMissingError, MergeDecision, decide, merge_records
from recordmerge.domain.model import Record
from tests.helpers.records import make_record


def test_merge_takes_other_when_current_is_missing() -> None:
    other = make_record("1", name="Other")

    assert merge_records(Record.missing(), other) is other
    assert decide(Record.missing(), other) is MergeDecision.TAKE_OTHER


def test_merge_takes_current_when_other_is_missing() -> None:
    current = make_record("1", name="Current")

    assert merge_records(current, Record.missing()) is current
    assert decide(current, Record.missing()) is MergeDecision.TAKE_CURRENT


def test_merge_faults_when_both_sides_are_missing() -> None:
    with pytest.raises(BothMissingError, match="'42'") as excinfo:
        merge_records(Record.missing(), Record.missing(), identity="42")

    assert excinfo.value.identity == "42"


def test_merge_fault_without_identity() -> None:
    with pytest.raises(BothMissingError, match="both sides are missing"):
        merge_records(Record.missing(), Record.missing())


def test_merge_keeps_current_when_equivalent() -> None:
    current = make_record("1", tags=["a", "b"])
    other = replace(current, tags=("b", "a"))

    assert merge_records(current, other) is current
    assert decide(current, other) is MergeDecision.UNCHANGED


@pytest.mark.parametrize(
    "changes",
    [
        {"name": "Renamed"},
        {"tags": ("c",)},
        {"format_version": "2.0"},
    ],
)
def test_merge_other_wins_any_difference(changes: dict[str, object]) -> None:
    current = make_record("1", data=[("x", "string", "foo")], tags=["a"])
    other = replace(current, **changes)

    assert merge_records(current, other) is other
    assert merge_records(current, other) == other


def test_merge_other_wins_data_conflict() -> None:
    current = make_record("1", data=[("x", "string", "foo")])
    other = make_record("1", data=[("x", "string", "bar")])

    merged = merge_records(current, other)

    assert merged.data[0].value == "bar"
