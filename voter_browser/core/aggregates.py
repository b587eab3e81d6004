"""
Pure reductions over a voter DataFrame.

Every function takes a frame with VOTER_COLUMNS (usually the engine's filtered
subset) and returns plain values or a small DataFrame. Nothing here reads
engine state, so each reduction can be tested on a hand-built frame.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Tuple

import pandas as pd

from voter_browser.core.labels import label_sort_key, sort_labels
from voter_browser.core.voter import CANONICAL_GENDERS, FEMALE, MALE


@dataclass(frozen=True)
class AgeBucket:
    label: str
    min_age: int
    max_age: int

    def contains(self, ages: pd.Series) -> pd.Series:
        return (ages >= self.min_age) & (ages <= self.max_age)


# Report / overview scheme
REPORT_AGE_BUCKETS: Tuple[AgeBucket, ...] = (
    AgeBucket("18-25", 18, 25),
    AgeBucket("26-35", 26, 35),
    AgeBucket("36-45", 36, 45),
    AgeBucket("46-55", 46, 55),
    AgeBucket("56-65", 56, 65),
    AgeBucket("66+", 66, 200),
)

# Analytics "age group by gender" scheme, upper bounds exclusive
COARSE_AGE_GROUPS: Tuple[Tuple[str, Optional[int]], ...] = (
    ("Youth (18-29)", 30),
    ("Adult (30-44)", 45),
    ("Middle (45-59)", 60),
    ("Senior (60+)", None),
)


@dataclass(frozen=True)
class KpiSummary:
    total: int
    dataset_total: int
    male: int
    female: int
    other: int
    female_pct: float
    municipalities: int
    wards: int
    average_age: int


@dataclass(frozen=True)
class ReportSummary:
    total: int
    male: int
    female: int
    other: int
    average_age: int
    min_age: int
    max_age: int


# -----------------------------------------------------------------------------
# Scalar helpers
# -----------------------------------------------------------------------------
def percentage(count: float, total: float) -> float:
    """count / total * 100, or 0.0 when total is 0."""
    if not total:
        return 0.0
    return float(count) / float(total) * 100.0


def round_half_up(value: float) -> int:
    return int(Decimal(str(value)).quantize(Decimal(1), rounding=ROUND_HALF_UP))


def mean_age(frame: pd.DataFrame) -> int:
    if frame.empty:
        return 0
    return round_half_up(float(frame["age"].mean()))


def _gender_counts(frame: pd.DataFrame) -> Tuple[int, int, int]:
    genders = frame["gender"]
    male = int((genders == MALE).sum())
    female = int((genders == FEMALE).sum())
    return male, female, len(frame) - male - female


def _gender_columns(frame: pd.DataFrame, by: List[str]) -> pd.DataFrame:
    """total/male/female/other counts per group in `by`."""
    genders = frame["gender"]
    work = frame[by].copy()
    work["total"] = 1
    work["male"] = (genders == MALE).astype("int64")
    work["female"] = (genders == FEMALE).astype("int64")
    work["other"] = 1 - work["male"] - work["female"]
    return work.groupby(by, sort=False)[["total", "male", "female", "other"]].sum().reset_index()


def _label_sorted(df: pd.DataFrame, by: List[str]) -> pd.DataFrame:
    if df.empty:
        return df.reset_index(drop=True)
    keys = [tuple(label_sort_key(v) for v in row) for row in df[by].itertuples(index=False)]
    order = sorted(range(len(df)), key=keys.__getitem__)
    return df.iloc[order].reset_index(drop=True)


# -----------------------------------------------------------------------------
# Facets
# -----------------------------------------------------------------------------
def distinct_labels(frame: pd.DataFrame, column: str) -> List[str]:
    if frame.empty:
        return []
    return sort_labels(frame[column].unique())


# -----------------------------------------------------------------------------
# KPIs and summaries
# -----------------------------------------------------------------------------
def kpi_summary(frame: pd.DataFrame, dataset_total: int) -> KpiSummary:
    total = len(frame)
    male, female, other = _gender_counts(frame)
    municipalities = int(frame["municipality"].nunique()) if total else 0
    wards = len(frame[["municipality", "ward"]].drop_duplicates()) if total else 0

    return KpiSummary(
        total=total,
        dataset_total=int(dataset_total),
        male=male,
        female=female,
        other=other,
        female_pct=percentage(female, total),
        municipalities=municipalities,
        wards=wards,
        average_age=mean_age(frame),
    )


def report_summary(frame: pd.DataFrame) -> ReportSummary:
    total = len(frame)
    male, female, other = _gender_counts(frame)
    return ReportSummary(
        total=total,
        male=male,
        female=female,
        other=other,
        average_age=mean_age(frame),
        min_age=int(frame["age"].min()) if total else 0,
        max_age=int(frame["age"].max()) if total else 0,
    )


# -----------------------------------------------------------------------------
# Gender
# -----------------------------------------------------------------------------
def gender_stats(frame: pd.DataFrame) -> pd.DataFrame:
    """
    Count and percent per gender.

    Male, Female and Other always appear (count 0 if absent), followed by any
    unexpected values in label order.
    """
    counts = frame["gender"].value_counts()
    extra = [g for g in sort_labels(counts.index) if g not in CANONICAL_GENDERS]
    order = list(CANONICAL_GENDERS) + extra

    total = len(frame)
    rows = [
        {"gender": g, "count": int(counts.get(g, 0)), "percent": percentage(counts.get(g, 0), total)}
        for g in order
    ]
    return pd.DataFrame(rows, columns=["gender", "count", "percent"])


# -----------------------------------------------------------------------------
# Age
# -----------------------------------------------------------------------------
def age_bucket_stats(frame: pd.DataFrame, buckets: Tuple[AgeBucket, ...] = REPORT_AGE_BUCKETS) -> pd.DataFrame:
    total = len(frame)
    ages = frame["age"]
    genders = frame["gender"]

    rows = []
    for bucket in buckets:
        in_bucket = bucket.contains(ages)
        n = int(in_bucket.sum())
        male = int((in_bucket & (genders == MALE)).sum())
        female = int((in_bucket & (genders == FEMALE)).sum())
        rows.append(
            {
                "label": bucket.label,
                "min_age": bucket.min_age,
                "max_age": bucket.max_age,
                "total": n,
                "male": male,
                "female": female,
                "other": n - male - female,
                "percent": percentage(n, total),
            }
        )
    return pd.DataFrame(
        rows,
        columns=["label", "min_age", "max_age", "total", "male", "female", "other", "percent"],
    )


def coarse_age_group(age: int) -> str:
    for label, upper in COARSE_AGE_GROUPS:
        if upper is None or age < upper:
            return label
    return COARSE_AGE_GROUPS[-1][0]


def age_group_gender(frame: pd.DataFrame) -> pd.DataFrame:
    """Male/female/other counts per coarse age group, in fixed group order."""
    labels = [label for label, _ in COARSE_AGE_GROUPS]
    columns = ["group", "total", "male", "female", "other"]
    if frame.empty:
        return pd.DataFrame(
            [{"group": g, "total": 0, "male": 0, "female": 0, "other": 0} for g in labels],
            columns=columns,
        )

    work = frame.assign(group=frame["age"].map(coarse_age_group))
    counts = _gender_columns(work, ["group"]).set_index("group")
    counts = counts.reindex(labels, fill_value=0).reset_index()
    return counts[columns]


# -----------------------------------------------------------------------------
# Geography
# -----------------------------------------------------------------------------
def municipality_stats(frame: pd.DataFrame) -> pd.DataFrame:
    columns = ["municipality", "total", "male", "female", "other", "wards", "booths", "average_age", "percent"]
    if frame.empty:
        return pd.DataFrame(columns=columns)

    counts = _gender_columns(frame, ["municipality"])
    grouped = frame.groupby("municipality", sort=False)
    extra = pd.DataFrame(
        {
            "wards": grouped["ward"].nunique(),
            "booths": grouped["booth"].nunique(),
            "average_age": grouped["age"].mean().map(round_half_up),
        }
    ).reset_index()

    out = counts.merge(extra, on="municipality")
    out["percent"] = out["total"].map(lambda n: percentage(n, len(frame)))
    return _label_sorted(out[columns], ["municipality"])


def ward_stats(frame: pd.DataFrame, municipality: Optional[str] = None) -> pd.DataFrame:
    """
    Per (municipality, ward) counts, distinct booths, average age and the
    male/female ratio (None when a ward has no female voters).
    """
    columns = [
        "municipality", "ward", "total", "male", "female", "other",
        "booths", "average_age", "percent", "male_female_ratio",
    ]
    if municipality is not None:
        frame = frame[frame["municipality"] == municipality]
    if frame.empty:
        return pd.DataFrame(columns=columns)

    keys = ["municipality", "ward"]
    counts = _gender_columns(frame, keys)
    grouped = frame.groupby(keys, sort=False)
    extra = pd.DataFrame(
        {
            "booths": grouped["booth"].nunique(),
            "average_age": grouped["age"].mean().map(round_half_up),
        }
    ).reset_index()

    out = counts.merge(extra, on=keys)
    out["percent"] = out["total"].map(lambda n: percentage(n, len(frame)))
    out["male_female_ratio"] = pd.Series(
        [(m / f) if f else None for m, f in zip(out["male"], out["female"])],
        index=out.index,
        dtype=object,
    )
    return _label_sorted(out[columns], keys)


def _per_label_gender(frame: pd.DataFrame, column: str) -> pd.DataFrame:
    columns = [column, "total", "male", "female", "other"]
    if frame.empty:
        return pd.DataFrame(columns=columns)
    return _label_sorted(_gender_columns(frame, [column])[columns], [column])


def booth_stats(frame: pd.DataFrame) -> pd.DataFrame:
    """Gender breakdown per booth label, pooled across municipalities and wards."""
    return _per_label_gender(frame, "booth")


def ward_gender_trend(frame: pd.DataFrame) -> pd.DataFrame:
    """Gender breakdown per ward label, pooled across municipalities."""
    return _per_label_gender(frame, "ward")


def municipality_counts(frame: pd.DataFrame) -> pd.DataFrame:
    """Voter count per municipality, largest first."""
    if frame.empty:
        return pd.DataFrame(columns=["municipality", "count"])
    counts = frame["municipality"].value_counts()
    out = counts.rename_axis("municipality").reset_index(name="count")
    return out.sort_values("count", ascending=False, kind="stable").reset_index(drop=True)


# -----------------------------------------------------------------------------
# Table helpers
# -----------------------------------------------------------------------------
SORTABLE_COLUMNS = ("name", "age", "gender", "municipality", "ward", "booth", "voter_id")


def sort_voters(frame: pd.DataFrame, key: str = "name", descending: bool = False) -> pd.DataFrame:
    """
    Stable sort for the voter table: age numerically, everything else
    case-insensitively.
    """
    if key not in SORTABLE_COLUMNS:
        raise ValueError(f"Cannot sort voters by '{key}'")
    lower = None if key == "age" else (lambda s: s.astype(str).str.lower())
    return frame.sort_values(key, ascending=not descending, kind="stable", key=lower).reset_index(drop=True)


def page_of(frame: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
    """Slice page `page` (0-based), clamped to the valid range."""
    if page_size <= 0:
        raise ValueError("page_size must be positive")
    n_pages = max(1, -(-len(frame) // page_size))
    page = min(max(0, int(page)), n_pages - 1)
    return frame.iloc[page * page_size:(page + 1) * page_size].reset_index(drop=True)
