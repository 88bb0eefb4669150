from __future__ import annotations

import pytest

from recordmerge.domain.model import (
    DEFAULT_FORMAT_VERSION,
    Record,
    data_by_name,
    data_equal,
    meta_by_kind,
    meta_equal,
    set_equal,
    union_keys,
    unique_in_order,
)
from tests.helpers.records import make_record


def test_unique_in_order_keeps_first_occurrence() -> None:
    assert unique_in_order(["b", "a", "b", "c", "a"]) == ["b", "a", "c"]


def test_union_keys_lists_left_side_first() -> None:
    assert union_keys(["x", "y"], ["z", "x"]) == ["x", "y", "z"]


def test_missing_record_is_zero_value() -> None:
    missing = Record.missing()

    assert missing.present is False
    assert missing.identity == ""
    assert missing.data == ()
    assert missing.effective_format_version == DEFAULT_FORMAT_VERSION


def test_records_are_immutable() -> None:
    record = make_record()

    with pytest.raises(AttributeError):
        record.name = "Changed"  # type: ignore[misc]


def test_data_by_name_is_last_wins() -> None:
    record = make_record(
        data=[("x", "string", "first"), ("y", "int", "1"), ("x", "string", "last")]
    )

    mapping = data_by_name(record)

    assert list(mapping) == ["x", "y"]
    assert mapping["x"].value == "last"


def test_data_equal_ignores_earlier_duplicate_names() -> None:
    duplicated = make_record(data=[("x", "string", "old"), ("x", "string", "new")])
    single = make_record(data=[("x", "string", "new")])

    assert data_equal(duplicated, single)
    assert data_equal(single, duplicated)


def test_data_equal_requires_type_and_value_match() -> None:
    base = make_record(data=[("x", "string", "1")])

    assert not data_equal(base, make_record(data=[("x", "int", "1")]))
    assert not data_equal(base, make_record(data=[("x", "string", "2")]))


def test_data_equal_treats_missing_entry_as_different() -> None:
    base = make_record(data=[("x", "", "")])

    assert not data_equal(base, make_record())


def test_data_equal_is_order_independent() -> None:
    left = make_record(data=[("x", "string", "1"), ("y", "string", "2")])
    right = make_record(data=[("y", "string", "2"), ("x", "string", "1")])

    assert data_equal(left, right)


def test_meta_by_kind_is_last_wins() -> None:
    record = make_record(meta=[("author", "ann"), ("author", "bob")])

    assert meta_by_kind(record) == {"author": "bob"}


def test_meta_equal_compares_values_by_kind() -> None:
    left = make_record(meta=[("author", "ann"), ("author", "bob")])

    assert meta_equal(left, make_record(meta=[("author", "bob")]))
    assert not meta_equal(left, make_record(meta=[("author", "ann")]))
    assert not meta_equal(left, make_record(meta=[("author", "bob"), ("owner", "bob")]))


@pytest.mark.parametrize(
    ("first", "second", "expected"),
    [
        (["a", "b"], ["b", "a"], True),
        (["a", "a"], ["a"], True),
        ([], [], True),
        (["a"], ["a", "b"], False),
        (["a", "c"], ["a", "b"], False),
    ],
)
def test_set_equal(first: list[str], second: list[str], *, expected: bool) -> None:
    assert set_equal(first, second) is expected
