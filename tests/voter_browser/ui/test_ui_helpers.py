from __future__ import annotations

import base64

import pytest

from voter_browser.core.engine import VoterEngine
from voter_browser.core.exceptions import ParseError
from voter_browser.core.store import VoterStore
from voter_browser.core.voter import Voter
from voter_browser.ui.callbacks.callbacks_voters import _table_sort_key
from voter_browser.ui.helpers import (
    active_filters_text,
    dataset_status_text,
    decode_upload,
    filter_dropdown_options,
    frame_table,
    kpi_cards,
    selected_voter_id,
    voter_card,
)


def _make_engine() -> VoterEngine:
    voters = [
        Voter("A", "Ram", 30, "Male", municipality="Kirtipur", ward="Ward 2", booth="Booth 1"),
        Voter("B", "Sita", 40, "Female", municipality="Kirtipur", ward="Ward 10", booth="Booth 1"),
    ]
    return VoterEngine(VoterStore(voters))


def _data_url(text: str) -> str:
    return "data:text/csv;base64," + base64.b64encode(text.encode("utf-8")).decode("ascii")


def test_decode_upload_roundtrip():
    assert decode_upload(_data_url("voter_id,name\nA,Ram\n"), max_bytes=1000) == "voter_id,name\nA,Ram\n"


def test_decode_upload_strips_bom():
    url = "data:text/csv;base64," + base64.b64encode("\ufeffvoter_id".encode("utf-8")).decode("ascii")
    assert decode_upload(url, max_bytes=1000) == "voter_id"


@pytest.mark.parametrize(
    "contents, max_bytes",
    [
        ("no-comma-here", 1000),
        ("data:text/csv;base64,%%%", 1000),
        (_data_url("x" * 50), 10),
        ("data:text/csv;base64," + base64.b64encode(b"\xff\xfe\xfa").decode("ascii"), 1000),
    ],
)
def test_decode_upload_errors(contents, max_bytes):
    with pytest.raises(ParseError):
        decode_upload(contents, max_bytes=max_bytes)


def test_filter_text_helpers():
    engine = _make_engine()

    assert active_filters_text(engine) == "No filters applied"
    engine.update_criteria("gender", "Female")
    assert active_filters_text(engine) == "Gender: Female"
    assert dataset_status_text(engine) == "2 voters · loaded records"


def test_dropdown_options_follow_facets():
    municipalities, wards, booths = filter_dropdown_options(_make_engine())

    assert municipalities == [{"label": "Kirtipur", "value": "Kirtipur"}]
    assert [o["value"] for o in wards] == ["Ward 2", "Ward 10"]
    assert [o["value"] for o in booths] == ["Booth 1"]


def test_kpi_cards_and_table_build():
    engine = _make_engine()

    row = kpi_cards(engine.kpis())
    assert len(row.children) == 4

    table = frame_table(engine.ward_stats(), table_id="wards")
    assert table.id == "wards"
    assert [c["id"] for c in table.columns][:2] == ["municipality", "ward"]
    assert table.data[0]["male_female_ratio"] == "N/A"


@pytest.mark.parametrize(
    "sort_by, expected",
    [
        (None, ("name", False)),
        ([], ("name", False)),
        ([{"column_id": "age", "direction": "desc"}], ("age", True)),
        ([{"column_id": "booth", "direction": "asc"}], ("booth", False)),
        ([{"column_id": "picture", "direction": "asc"}], ("name", False)),
    ],
)
def test_table_sort_key(sort_by, expected):
    assert _table_sort_key(sort_by) == expected


@pytest.mark.parametrize(
    "active_cell, expected",
    [
        ({"row": 1, "column": 0, "column_id": "voter_id"}, "B"),
        ({"row": 0, "column": 3, "column_id": "gender"}, "A"),
        ({"row": 5, "column": 0}, None),
        (None, None),
    ],
)
def test_selected_voter_id(active_cell, expected):
    rows = [{"voter_id": "A", "name": "Ram"}, {"voter_id": "B", "name": "Sita"}]

    assert selected_voter_id(active_cell, rows) == expected
    assert selected_voter_id(active_cell, []) is None


def test_selected_voter_id_prefers_row_id():
    # row_id wins over the page-relative row index
    cell = {"row": 0, "column": 0, "row_id": "KV1-42"}

    assert selected_voter_id(cell, [{"voter_id": "A"}]) == "KV1-42"
    assert selected_voter_id(cell, None) == "KV1-42"


def _card_text(component) -> list:
    if isinstance(component, str):
        return [component]
    if isinstance(component, (list, tuple)):
        return [text for child in component for text in _card_text(child)]
    children = getattr(component, "children", None)
    return [] if children is None else _card_text(children)


def test_voter_card_shows_profile_fields():
    voter = Voter(
        "KV1-9", "Gita Karki", 52, "Female", "Ram Karki", "", "https://example.org/p.jpg",
        "Lalitpur", "Ward 10", "Booth 4",
    )

    card = voter_card(voter)
    text = _card_text(card)

    assert "Gita Karki" in text
    assert "KV1-9" in text
    assert "52 / Female" in text
    # empty spouse shows a placeholder
    assert text[text.index("Spouse") + 1] == "N/A"
    assert "Booth 4" in text
    img = card.children.children[0].children[0]
    assert img.src == "https://example.org/p.jpg"


def test_voter_card_placeholder():
    assert _card_text(voter_card(None)) == ["Select a voter to see their profile."]
