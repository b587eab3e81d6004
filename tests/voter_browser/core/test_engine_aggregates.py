from __future__ import annotations

import pytest

from voter_browser.core.aggregates import REPORT_AGE_BUCKETS
from voter_browser.core.engine import VoterEngine
from voter_browser.core.filter_state import AGE_LIMITS
from voter_browser.core.store import VoterStore
from voter_browser.core.voter import Voter
from voter_browser.services import ReportService
from voter_browser.ui.layout.build_filter_panel import AGE_SLIDER_MAX, AGE_SLIDER_MIN


def _make_engine() -> VoterEngine:
    voters = [
        Voter("KV1-000001", "Ram Shrestha", 18, "Male", municipality="Kirtipur", ward="Ward 1", booth="Booth 1"),
        Voter("KV1-000002", "Sita Sharma", 81, "Female", municipality="Kirtipur", ward="Ward 2", booth="Booth 2"),
        Voter("KV1-000003", "Gita Karki", 45, "Female", municipality="Lalitpur", ward="Ward 10", booth="Booth 1"),
        Voter("KV1-000004", "Hari Thapa", 30, "Other", municipality="Lalitpur", ward="Ward 2", booth="Booth 3"),
        Voter("KV1-000005", "Bikash Rai", 66, "Male", municipality="Kirtipur", ward="Ward 1", booth="Booth 12"),
    ]
    return VoterEngine(VoterStore(voters))


def test_kpis_over_filtered_subset():
    kpis = _make_engine().kpis()

    assert kpis.total == 4
    assert kpis.dataset_total == 5
    assert (kpis.male, kpis.female, kpis.other) == (2, 1, 1)
    assert kpis.female_pct == pytest.approx(25.0)
    assert kpis.municipalities == 2
    # (Kirtipur, Ward 1), (Lalitpur, Ward 10), (Lalitpur, Ward 2)
    assert kpis.wards == 3
    # (18 + 45 + 30 + 66) / 4 = 39.75
    assert kpis.average_age == 40


def test_empty_subset_gives_zeroes_not_errors():
    engine = _make_engine()
    engine.update_criteria("search", "nobody")

    kpis = engine.kpis()
    assert kpis.total == 0
    assert kpis.female_pct == 0.0
    assert kpis.average_age == 0

    gender = engine.gender_stats()
    assert gender["count"].sum() == 0
    assert gender["percent"].sum() == 0.0

    summary = engine.report_summary()
    assert (summary.min_age, summary.max_age) == (0, 0)
    assert engine.municipality_stats().empty
    assert engine.ward_stats().empty


@pytest.mark.parametrize("age_range", [(18, 80), (30, 70), (18, 120)])
def test_gender_percentages_sum_to_hundred(age_range):
    engine = _make_engine()
    engine.update_criteria("age_range", age_range)

    assert engine.gender_stats()["percent"].sum() == pytest.approx(100.0)


def test_age_bucket_percentages_sum_to_hundred():
    engine = _make_engine()

    stats = engine.age_bucket_stats()
    assert stats["label"].tolist() == ["18-25", "26-35", "36-45", "46-55", "56-65", "66+"]
    assert stats["total"].tolist() == [1, 1, 1, 0, 0, 1]
    assert stats["percent"].sum() == pytest.approx(100.0)

@pytest.mark.parametrize("age_range", [AGE_LIMITS, (18, 120)])
def test_age_buckets_cover_every_filtered_voter(age_range):
    engine = VoterEngine(
        VoterStore(
            [
                Voter("KV1-000001", "Ram Shrestha", 30, "Male", municipality="Kirtipur", ward="Ward 1"),
                Voter("KV1-000002", "Sita Sharma", 85, "Female", municipality="Kirtipur", ward="Ward 1"),
            ]
        )
    )
    engine.update_criteria("age_range", age_range)

    subset = engine.filtered_subset()
    stats = engine.age_bucket_stats()
    assert stats["total"].sum() == len(subset)
    assert stats["percent"].sum() == pytest.approx(100.0)

    report = ReportService(engine).build("age")
    assert report.table["total"].sum() == len(subset)


def test_age_slider_bounds_match_bucket_span():
    assert (REPORT_AGE_BUCKETS[0].min_age, AGE_SLIDER_MAX) == AGE_LIMITS
    assert AGE_SLIDER_MIN == AGE_LIMITS[0]
    assert REPORT_AGE_BUCKETS[-1].max_age >= AGE_SLIDER_MAX


def test_municipality_and_ward_stats():
    engine = _make_engine()
    engine.update_criteria("age_range", (18, 90))

    muni = engine.municipality_stats().set_index("municipality")
    assert muni.loc["Kirtipur", "total"] == 3
    assert muni.loc["Kirtipur", "wards"] == 2
    assert muni.loc["Lalitpur", "booths"] == 2

    wards = engine.ward_stats()
    assert wards[["municipality", "ward"]].values.tolist() == [
        ["Kirtipur", "Ward 1"],
        ["Kirtipur", "Ward 2"],
        ["Lalitpur", "Ward 2"],
        ["Lalitpur", "Ward 10"],
    ]
    ratios = dict(zip(wards["ward"] + "@" + wards["municipality"], wards["male_female_ratio"]))
    assert ratios["Ward 1@Kirtipur"] is None
    assert ratios["Ward 2@Kirtipur"] == 0.0


def test_pooled_booth_and_ward_series_are_label_sorted():
    engine = _make_engine()

    assert engine.booth_stats()["booth"].tolist() == ["Booth 1", "Booth 3", "Booth 12"]
    assert engine.ward_gender_trend()["ward"].tolist() == ["Ward 1", "Ward 2", "Ward 10"]


def test_sorted_subset_and_paging():
    engine = _make_engine()

    by_age = engine.sorted_subset("age", descending=True)
    assert by_age["age"].tolist() == [66, 45, 30, 18]

    assert engine.page(by_age, 1, 3)["age"].tolist() == [18]
    # Past the end clamps to the last page
    assert engine.page(by_age, 9, 3)["age"].tolist() == [18]

    by_name = engine.sorted_subset("name")
    assert by_name["name"].tolist() == ["Bikash Rai", "Gita Karki", "Hari Thapa", "Ram Shrestha"]


def test_map_reads_ignore_filters():
    engine = _make_engine()
    engine.update_criteria("gender", "Female")

    assert engine.map_municipality_stats()["total"].sum() == 5
    assert engine.map_ward_stats("Kirtipur")["ward"].tolist() == ["Ward 1", "Ward 2"]
    assert engine.ward_voters("Kirtipur", "Ward 1")["voter_id"].tolist() == ["KV1-000001", "KV1-000005"]
