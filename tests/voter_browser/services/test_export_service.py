from __future__ import annotations

import pytest

from voter_browser.core.engine import VoterEngine
from voter_browser.core.exceptions import UnknownReportTypeError
from voter_browser.core.store import VoterStore
from voter_browser.core.voter import Voter, voters_to_frame
from voter_browser.services import EXPORT_COLUMNS, ReportService, export_filename, voters_to_csv


def _make_engine() -> VoterEngine:
    voters = [
        Voter("KV1-1", "Ram Shrestha", 35, "Male", "Hari Shrestha", "", "", "Kirtipur", "Ward 1", "Booth 1"),
        Voter("KV1-2", "Sita Sharma", 29, "Female", "Gopal Sharma", "Ram Sharma", "", "Kirtipur", "Ward 2", "Booth 1"),
        Voter("KV1-3", "Gita Karki", 52, "Female", "Ram Karki", "", "", "Lalitpur", "Ward 1", "Booth 4"),
    ]
    return VoterEngine(VoterStore(voters))


def test_csv_has_header_and_one_line_per_voter():
    frame = voters_to_frame([Voter("A", "One", 30, "Male"), Voter("B", "Two", 40, "Female")])

    lines = voters_to_csv(frame).split("\n")

    assert lines[0] == ",".join(EXPORT_COLUMNS)
    assert "picture" not in lines[0]
    assert lines[1] == "A,One,30,Male,,,,,"
    assert len(lines) == 3


def test_values_with_delimiter_or_quotes_are_quoted():
    frame = voters_to_frame([Voter("A", "Shrestha, Ram", 30, "Male", parent_name='Hari "Dai"')])

    line = voters_to_csv(frame).split("\n")[1]

    assert line.startswith('A,"Shrestha, Ram",30,Male,"Hari ""Dai"""')


def test_quoting_follows_the_delimiter():
    frame = voters_to_frame([Voter("A", "Shrestha, Ram", 30, "Male")])

    line = voters_to_csv(frame, delimiter=";").split("\n")[1]

    assert line.startswith("A;Shrestha, Ram;30;Male")


def test_export_filename():
    assert export_filename("ward", now=1_700_000_000.0) == "voter-report-ward-1700000000000.csv"
    assert export_filename("age").startswith("voter-report-age-")


def test_build_every_report_type():
    service = ReportService(_make_engine())

    for report_type in service.report_types:
        report = service.build(report_type)
        assert report.report_type == report_type
        assert report.title
        assert report.summary.total == 3


def test_report_reflects_active_filters():
    engine = _make_engine()
    engine.update_criteria("municipality", "Kirtipur")
    service = ReportService(engine)

    report = service.build("ward")

    assert report.filters == ["Municipality: Kirtipur"]
    assert report.table["ward"].tolist() == ["Ward 1", "Ward 2"]
    assert "male_female_ratio" in report.table.columns


def test_ward_report_lists_busiest_wards_first():
    voters = [
        Voter("KV1-1", "Ram Shrestha", 35, "Male", municipality="Kirtipur", ward="Ward 1", booth="Booth 1"),
        Voter("KV1-2", "Sita Sharma", 29, "Female", municipality="Kirtipur", ward="Ward 10", booth="Booth 1"),
        Voter("KV1-3", "Gita Karki", 52, "Female", municipality="Kirtipur", ward="Ward 10", booth="Booth 2"),
        Voter("KV1-4", "Hari Thapa", 41, "Male", municipality="Lalitpur", ward="Ward 2", booth="Booth 1"),
        Voter("KV1-5", "Bikash Rai", 60, "Male", municipality="Lalitpur", ward="Ward 3", booth="Booth 1"),
    ]

    table = ReportService(VoterEngine(VoterStore(voters))).build("ward").table

    assert table["total"].tolist() == [2, 1, 1, 1]
    # equal totals stay in municipality/ward label order
    assert list(zip(table["municipality"], table["ward"])) == [
        ("Kirtipur", "Ward 10"),
        ("Kirtipur", "Ward 1"),
        ("Lalitpur", "Ward 2"),
        ("Lalitpur", "Ward 3"),
    ]


def test_demographic_report_rows():
    report = ReportService(_make_engine()).build("demographic")

    table = report.table.set_index("metric")
    assert table.loc["Total voters", "value"] == 3
    assert table.loc["Female", "value"] == 2
    assert table.loc["Youngest", "value"] == 29
    assert table.loc["Oldest", "value"] == 52


def test_unknown_report_type():
    service = ReportService(_make_engine())

    with pytest.raises(UnknownReportTypeError):
        service.build("booth")


def test_export_csv_uses_filtered_subset():
    engine = _make_engine()
    engine.update_criteria("gender", "Female")

    text = ReportService(engine).export_csv()

    assert text.split("\n")[1:] == [
        "KV1-2,Sita Sharma,29,Female,Gopal Sharma,Ram Sharma,Kirtipur,Ward 2,Booth 1",
        "KV1-3,Gita Karki,52,Female,Ram Karki,,Lalitpur,Ward 1,Booth 4",
    ]
