from __future__ import annotations

import pytest

from voter_browser.core import aggregates
from voter_browser.core.voter import Voter, empty_voter_frame, voters_to_frame


def _make_frame(rows):
    """rows: (age, gender, municipality, ward, booth)"""
    return voters_to_frame(
        [
            Voter(f"V{i}", f"Voter {i}", age, gender, municipality=m, ward=w, booth=b)
            for i, (age, gender, m, w, b) in enumerate(rows)
        ]
    )


def test_percentage_guards_zero_total():
    assert aggregates.percentage(3, 0) == 0.0
    assert aggregates.percentage(1, 4) == 25.0


def test_round_half_up():
    assert aggregates.round_half_up(2.5) == 3
    assert aggregates.round_half_up(39.75) == 40
    assert aggregates.round_half_up(39.49) == 39


def test_age_bucket_bounds_are_inclusive():
    frame = _make_frame(
        [
            (17, "Male", "M", "Ward 1", "Booth 1"),
            (18, "Male", "M", "Ward 1", "Booth 1"),
            (25, "Female", "M", "Ward 1", "Booth 1"),
            (26, "Female", "M", "Ward 1", "Booth 1"),
            (80, "Other", "M", "Ward 1", "Booth 1"),
            (81, "Male", "M", "Ward 1", "Booth 1"),
        ]
    )

    stats = aggregates.age_bucket_stats(frame).set_index("label")
    assert stats.loc["18-25", "total"] == 2
    assert stats.loc["18-25", "male"] == 1
    assert stats.loc["26-35", "total"] == 1
    assert stats.loc["66+", "other"] == 1


@pytest.mark.parametrize(
    "age, group",
    [
        (18, "Youth (18-29)"),
        (29, "Youth (18-29)"),
        (30, "Adult (30-44)"),
        (44, "Adult (30-44)"),
        (45, "Middle (45-59)"),
        (59, "Middle (45-59)"),
        (60, "Senior (60+)"),
        (99, "Senior (60+)"),
    ],
)
def test_coarse_age_groups(age, group):
    assert aggregates.coarse_age_group(age) == group


def test_age_group_gender_keeps_fixed_order_with_zero_rows():
    frame = _make_frame([(65, "Female", "M", "Ward 1", "Booth 1"), (20, "Male", "M", "Ward 1", "Booth 1")])

    out = aggregates.age_group_gender(frame)
    assert out["group"].tolist() == [label for label, _ in aggregates.COARSE_AGE_GROUPS]
    assert out["total"].tolist() == [1, 0, 0, 1]
    assert out["female"].tolist() == [0, 0, 0, 1]

    empty = aggregates.age_group_gender(empty_voter_frame())
    assert empty["total"].tolist() == [0, 0, 0, 0]


def test_gender_stats_keeps_canonical_rows_and_extras():
    frame = _make_frame(
        [
            (30, "Male", "M", "Ward 1", "Booth 1"),
            (30, "Unknown", "M", "Ward 1", "Booth 1"),
        ]
    )

    stats = aggregates.gender_stats(frame)
    assert stats["gender"].tolist() == ["Male", "Female", "Other", "Unknown"]
    assert stats["count"].tolist() == [1, 0, 0, 1]
    assert stats["percent"].sum() == pytest.approx(100.0)


def test_ward_ratio_is_none_without_female_voters():
    frame = _make_frame(
        [
            (30, "Male", "M", "Ward 1", "Booth 1"),
            (30, "Male", "M", "Ward 1", "Booth 1"),
            (30, "Female", "M", "Ward 1", "Booth 2"),
            (30, "Male", "M", "Ward 2", "Booth 1"),
        ]
    )

    stats = aggregates.ward_stats(frame).set_index("ward")
    assert stats.loc["Ward 1", "male_female_ratio"] == 2.0
    assert stats.loc["Ward 1", "booths"] == 2
    assert stats.loc["Ward 2", "male_female_ratio"] is None


def test_ward_stats_can_narrow_to_one_municipality():
    frame = _make_frame(
        [
            (30, "Male", "A", "Ward 1", "Booth 1"),
            (30, "Male", "B", "Ward 1", "Booth 1"),
        ]
    )

    stats = aggregates.ward_stats(frame, municipality="B")
    assert stats["municipality"].tolist() == ["B"]
    assert stats["percent"].tolist() == [100.0]


def test_municipality_counts_largest_first():
    frame = _make_frame(
        [
            (30, "Male", "Small", "Ward 1", "Booth 1"),
            (30, "Male", "Big", "Ward 1", "Booth 1"),
            (30, "Male", "Big", "Ward 2", "Booth 1"),
        ]
    )

    out = aggregates.municipality_counts(frame)
    assert out["municipality"].tolist() == ["Big", "Small"]
    assert out["count"].tolist() == [2, 1]


def test_municipality_stats_average_age():
    frame = _make_frame(
        [
            (30, "Male", "A", "Ward 1", "Booth 1"),
            (31, "Female", "A", "Ward 2", "Booth 2"),
        ]
    )

    row = aggregates.municipality_stats(frame).iloc[0]
    assert row["average_age"] == 31
    assert row["wards"] == 2
    assert row["percent"] == 100.0


def test_distinct_labels_are_numeric_aware():
    frame = _make_frame(
        [
            (30, "Male", "A", "Ward 10", "Booth 1"),
            (30, "Male", "A", "Ward 9", "Booth 1"),
            (30, "Male", "A", "Ward 9", "Booth 1"),
        ]
    )

    assert aggregates.distinct_labels(frame, "ward") == ["Ward 9", "Ward 10"]
    assert aggregates.distinct_labels(empty_voter_frame(), "ward") == []


def test_sort_voters_rejects_unknown_key():
    with pytest.raises(ValueError):
        aggregates.sort_voters(empty_voter_frame(), "picture")


def test_sort_voters_is_stable():
    frame = _make_frame(
        [
            (40, "Male", "A", "Ward 1", "Booth 1"),
            (30, "Male", "A", "Ward 1", "Booth 1"),
            (40, "Male", "A", "Ward 1", "Booth 1"),
        ]
    )

    out = aggregates.sort_voters(frame, "age")
    assert out["voter_id"].tolist() == ["V1", "V0", "V2"]


def test_page_of_requires_positive_page_size():
    with pytest.raises(ValueError):
        aggregates.page_of(empty_voter_frame(), 0, 0)

    assert aggregates.page_of(empty_voter_frame(), 3, 10).empty
