from __future__ import annotations

from recordmerge.domain.model import RecordCollection
from tests.helpers.records import make_collection, make_record


def test_collection_indexes_identities_in_first_seen_order() -> None:
    collection = make_collection(
        make_record("b"),
        make_record("a"),
        make_record("b", name="Later"),
    )

    assert collection.identities == ("b", "a")
    assert len(collection) == 3
    assert collection.by_identity["b"].name == "Later"


def test_collection_get_returns_missing_record_for_unknown_identity() -> None:
    collection = make_collection(make_record("1"))

    assert collection.get("1").present is True
    assert "1" in collection
    missing = collection.get("2")
    assert missing.present is False
    assert "2" not in collection


def test_empty_collection() -> None:
    collection = RecordCollection()

    assert collection.identities == ()
    assert list(collection) == []


def test_set_records_rebuilds_indexes() -> None:
    collection = make_collection(make_record("1"))

    collection.set_records([make_record("2"), make_record("3")])

    assert collection.identities == ("2", "3")
    assert "1" not in collection
    assert [record.identity for record in collection] == ["2", "3"]


def test_exposed_views_do_not_leak_internal_state() -> None:
    collection = make_collection(make_record("1"))

    collection.by_identity.clear()

    assert "1" in collection
