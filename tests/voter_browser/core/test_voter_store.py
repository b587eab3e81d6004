from __future__ import annotations

import pytest

from voter_browser.core.exceptions import NoValidRecordsError, ParseError
from voter_browser.core.store import VoterStore
from voter_browser.core.voter import Voter


def _make_voters() -> list[Voter]:
    return [
        Voter(voter_id="KV1-000001", name="Ram Shrestha", age=35, gender="Male", municipality="Kirtipur"),
        Voter(voter_id="KV1-000002", name="Sita Sharma", age=29, gender="Female", municipality="Lalitpur"),
    ]


def test_new_store_is_empty():
    store = VoterStore()

    assert len(store) == 0
    assert store.version == 0
    assert store.source == "empty"
    assert store.records() == []


def test_load_replaces_collection_and_bumps_version():
    store = VoterStore()

    assert store.load(_make_voters()) == 2
    assert store.version == 1
    assert store.source == "records"
    assert [v.voter_id for v in store.records()] == ["KV1-000001", "KV1-000002"]

    store.load(_make_voters()[:1])
    assert len(store) == 1
    assert store.version == 2


def test_import_single_row_defaults_unspecified_fields():
    store = VoterStore()
    text = "voter_id,name,age,gender\nKV1-000001,Ram Shrestha,35,Male\n"

    assert store.import_from_text(text) == 1

    (voter,) = store.records()
    assert voter.voter_id == "KV1-000001"
    assert voter.name == "Ram Shrestha"
    assert voter.age == 35
    assert voter.gender == "Male"
    assert voter.parent_name == ""
    assert voter.spouse == ""
    assert voter.municipality == ""
    assert voter.ward == ""
    assert voter.booth == ""
    assert store.is_using_csv_data


@pytest.mark.parametrize(
    "text",
    [
        "voter_id,name,age,gender\n",
        "",
        "voter_id,name\n,Nameless\nKV1-9,\n",
    ],
)
def test_failed_import_leaves_previous_dataset(text):
    store = VoterStore(_make_voters())
    before = store.records()
    version = store.version

    with pytest.raises(NoValidRecordsError):
        store.import_from_text(text)

    assert store.records() == before
    assert store.version == version
    assert not store.is_using_csv_data


def test_no_valid_records_reports_dropped_rows():
    store = VoterStore()

    with pytest.raises(ParseError) as excinfo:
        store.import_from_text("voter_id,name\n,Nameless\nKV1-9,\n")

    assert excinfo.value.dropped == 2


def test_listeners_run_after_each_replacement():
    store = VoterStore()
    seen = []
    store.subscribe(lambda s: seen.append((s.version, len(s))))

    store.load(_make_voters())
    store.load_sample(5, seed=1)

    assert seen == [(1, 2), (2, 5)]
    assert store.source == "sample"


def test_sample_does_not_load():
    store = VoterStore()
    voters = store.sample(4, seed=2)

    assert len(voters) == 4
    assert len(store) == 0
