from __future__ import annotations

import logging
from typing import Any, Callable, Dict, Hashable, List, Optional, Tuple

import numpy as np
import pandas as pd

from voter_browser.core import aggregates
from voter_browser.core.aggregates import KpiSummary, ReportSummary
from voter_browser.core.exceptions import UnknownCriteriaFieldError
from voter_browser.core.filter_state import FilterState
from voter_browser.core.store import VoterStore
from voter_browser.core.voter import Voter, frame_to_voters

logger = logging.getLogger(__name__)

SEARCH_COLUMNS = ("name", "voter_id", "parent_name")


class VoterEngine:
    """
    Filter & derived-view engine over a VoterStore.

    Includes:
    - Ownership of the current FilterState (mutated only via update/reset/set)
    - Filtered subset and facet lists
    - Every aggregate the presentation layer reads (KPIs, chart groupings,
      map stats, report tables)

    Derived values are memoised per (dataset version, criteria). A dataset
    replacement resets the criteria to defaults and drops the cache, so a read
    after any mutation never observes stale values.
    Frames and lists handed to callers are copies of the cached values.
    """

    MAX_CACHE = 256

    def __init__(self, store: VoterStore) -> None:
        self.store = store
        self._criteria = FilterState()
        self._cache: Dict[Tuple[Hashable, ...], Any] = {}
        store.subscribe(self._on_dataset_replaced)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def update_criteria(self, field: str, value: Any) -> FilterState:
        """
        Set one criteria field. Selecting a municipality clears ward and booth;
        selecting a ward clears booth.

        Raises:
            UnknownCriteriaFieldError: if `field` is not a FilterState field
        """
        if field not in FilterState.field_names():
            raise UnknownCriteriaFieldError(f"Unknown filter field '{field}'")

        with self.store.lock:
            self._criteria = self._criteria.with_update(field, value)
            logger.debug(
                "Filter criteria updated",
                extra={"field": field, "criteria": self._criteria.to_dict()},
            )
            return self._criteria

    def reset_criteria(self) -> FilterState:
        with self.store.lock:
            self._criteria = FilterState()
            logger.debug("Filter criteria reset")
            return self._criteria

    def set_criteria(self, state: FilterState) -> FilterState:
        """Restore a complete FilterState as-is (no cascading reset)."""
        with self.store.lock:
            self._criteria = state
            return self._criteria

    def _on_dataset_replaced(self, store: VoterStore) -> None:
        self._criteria = FilterState()
        self._cache.clear()

    # -------------------------------------------------------------------------
    # Snapshot reads
    # -------------------------------------------------------------------------
    @property
    def criteria(self) -> FilterState:
        return self._criteria

    @property
    def dataset(self) -> pd.DataFrame:
        return self.store.frame

    @property
    def version(self) -> int:
        return self.store.version

    def _memo(self, name: str, compute: Callable[[], Any], *args: Hashable, use_criteria: bool = True) -> Any:
        """Cached value, copied when mutable so callers never edit the cache."""
        value = self._cached(name, compute, *args, use_criteria=use_criteria)
        if isinstance(value, pd.DataFrame):
            return value.copy()
        if isinstance(value, list):
            return list(value)
        return value

    def _cached(self, name: str, compute: Callable[[], Any], *args: Hashable, use_criteria: bool = True) -> Any:
        with self.store.lock:
            key = (self.store.version, self._criteria if use_criteria else None, name, args)
            cached = self._cache.get(key)
            if cached is not None:
                return cached

            value = compute()
            if len(self._cache) >= self.MAX_CACHE:
                self._cache.clear()
            self._cache[key] = value
            return value

    def filtered_subset(self) -> pd.DataFrame:
        """
        Records matching every active criterion (AND across dimensions).

        Search is a case-insensitive substring OR'ed across name, voter_id and
        parent_name; categoricals are exact matches; age bounds are inclusive.
        """
        return self._memo("filtered_subset", lambda: self._apply(self._criteria))

    def _subset(self) -> pd.DataFrame:
        # shared cached frame for internal reductions; never handed out
        return self._cached("filtered_subset", lambda: self._apply(self._criteria))

    def filtered_records(self) -> List[Voter]:
        return frame_to_voters(self._subset())

    def _apply(self, state: FilterState) -> pd.DataFrame:
        frame = self.store.frame
        mask = np.ones(len(frame), dtype=bool)

        if state.search:
            query = state.search.lower()
            hit = np.zeros(len(frame), dtype=bool)
            for col in SEARCH_COLUMNS:
                hit |= frame[col].str.lower().str.contains(query, regex=False).to_numpy()
            mask &= hit

        for col in ("gender", "municipality", "ward", "booth"):
            value = getattr(state, col)
            if value is not None:
                mask &= (frame[col] == value).to_numpy()

        lo, hi = state.age_range
        mask &= ((frame["age"] >= lo) & (frame["age"] <= hi)).to_numpy()

        return frame[mask]

    # -------------------------------------------------------------------------
    # Facets
    # -------------------------------------------------------------------------
    def available_municipalities(self) -> List[str]:
        """Distinct municipalities over the full, unfiltered dataset."""
        return self._memo(
            "municipalities",
            lambda: aggregates.distinct_labels(self.store.frame, "municipality"),
            use_criteria=False,
        )

    def available_wards(self) -> List[str]:
        """Distinct wards narrowed only by the selected municipality."""
        municipality = self._criteria.municipality
        return self._memo(
            "wards",
            lambda: aggregates.distinct_labels(self._geography(municipality), "ward"),
            municipality,
            use_criteria=False,
        )

    def available_booths(self) -> List[str]:
        """Distinct booths narrowed only by the selected municipality and ward."""
        municipality, ward = self._criteria.municipality, self._criteria.ward
        return self._memo(
            "booths",
            lambda: aggregates.distinct_labels(self._geography(municipality, ward), "booth"),
            municipality,
            ward,
            use_criteria=False,
        )

    def _geography(self, municipality: Optional[str], ward: Optional[str] = None) -> pd.DataFrame:
        frame = self.store.frame
        if municipality is not None:
            frame = frame[frame["municipality"] == municipality]
        if ward is not None:
            frame = frame[frame["ward"] == ward]
        return frame

    # -------------------------------------------------------------------------
    # Aggregates over the filtered subset
    # -------------------------------------------------------------------------
    def kpis(self) -> KpiSummary:
        return self._memo(
            "kpis",
            lambda: aggregates.kpi_summary(self._subset(), len(self.store)),
        )

    def report_summary(self) -> ReportSummary:
        return self._memo("report_summary", lambda: aggregates.report_summary(self._subset()))

    def gender_stats(self) -> pd.DataFrame:
        return self._memo("gender_stats", lambda: aggregates.gender_stats(self._subset()))

    def age_bucket_stats(self) -> pd.DataFrame:
        return self._memo("age_bucket_stats", lambda: aggregates.age_bucket_stats(self._subset()))

    def age_group_gender(self) -> pd.DataFrame:
        return self._memo("age_group_gender", lambda: aggregates.age_group_gender(self._subset()))

    def municipality_stats(self) -> pd.DataFrame:
        return self._memo("municipality_stats", lambda: aggregates.municipality_stats(self._subset()))

    def municipality_counts(self) -> pd.DataFrame:
        return self._memo("municipality_counts", lambda: aggregates.municipality_counts(self._subset()))

    def ward_stats(self) -> pd.DataFrame:
        return self._memo("ward_stats", lambda: aggregates.ward_stats(self._subset()))

    def booth_stats(self) -> pd.DataFrame:
        return self._memo("booth_stats", lambda: aggregates.booth_stats(self._subset()))

    def ward_gender_trend(self) -> pd.DataFrame:
        return self._memo("ward_gender_trend", lambda: aggregates.ward_gender_trend(self._subset()))

    def sorted_subset(self, key: str = "name", descending: bool = False) -> pd.DataFrame:
        return self._memo(
            "sorted_subset",
            lambda: aggregates.sort_voters(self._subset(), key, descending),
            key,
            descending,
        )

    @staticmethod
    def page(frame: pd.DataFrame, page: int, page_size: int) -> pd.DataFrame:
        return aggregates.page_of(frame, page, page_size)

    # -------------------------------------------------------------------------
    # Map reads (full dataset, filters ignored)
    # -------------------------------------------------------------------------
    def map_municipality_stats(self) -> pd.DataFrame:
        return self._memo(
            "map_municipality_stats",
            lambda: aggregates.municipality_stats(self.store.frame),
            use_criteria=False,
        )

    def map_ward_stats(self, municipality: str) -> pd.DataFrame:
        return self._memo(
            "map_ward_stats",
            lambda: aggregates.ward_stats(self.store.frame, municipality=municipality),
            municipality,
            use_criteria=False,
        )

    def ward_voters(self, municipality: str, ward: str) -> pd.DataFrame:
        return self._memo(
            "ward_voters",
            lambda: self._geography(municipality, ward).reset_index(drop=True),
            municipality,
            ward,
            use_criteria=False,
        )

    def voter(self, voter_id: str) -> Optional[Voter]:
        """One voter from the full dataset by id, or None when the id is unknown."""
        frame = self.store.frame
        hit = frame[frame["voter_id"] == voter_id]
        if hit.empty:
            return None
        return frame_to_voters(hit.head(1))[0]
