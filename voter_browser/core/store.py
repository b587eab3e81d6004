from __future__ import annotations

import logging
import threading
from typing import Callable, List, Optional, Sequence, Union

import pandas as pd

from voter_browser.core.exceptions import NoValidRecordsError
from voter_browser.core.sample_data import generate_sample_voters
from voter_browser.core.voter import (
    Voter,
    empty_voter_frame,
    frame_to_voters,
    normalise_voter_frame,
    voters_to_frame,
)

logger = logging.getLogger(__name__)

DatasetListener = Callable[["VoterStore"], None]

SOURCE_EMPTY = "empty"
SOURCE_SAMPLE = "sample"
SOURCE_CSV = "csv"
SOURCE_RECORDS = "records"


class VoterStore:
    """
    Owner of the canonical, ordered voter collection.

    Includes:
    - Atomic wholesale replacement (load / import_from_text)
    - A monotonically increasing `version`, bumped on every replacement
    - Listener callbacks so dependants (the engine) can reset filter state

    The collection is held as a pandas DataFrame with VOTER_COLUMNS. Callers
    must treat `frame` as read-only; records are never mutated individually.
    """

    def __init__(self, records: Optional[Union[Sequence[Voter], pd.DataFrame]] = None) -> None:
        self._lock = threading.RLock()
        self._frame: pd.DataFrame = empty_voter_frame()
        self._version = 0
        self._source = SOURCE_EMPTY
        self._listeners: List[DatasetListener] = []

        if records is not None:
            self._replace(records, SOURCE_RECORDS)

    # -------------------------------------------------------------------------
    # Read side
    # -------------------------------------------------------------------------
    @property
    def frame(self) -> pd.DataFrame:
        return self._frame

    @property
    def version(self) -> int:
        return self._version

    @property
    def source(self) -> str:
        """Where the current collection came from: empty, sample, csv or records."""
        return self._source

    @property
    def is_using_csv_data(self) -> bool:
        return self._source == SOURCE_CSV

    def records(self) -> List[Voter]:
        return frame_to_voters(self._frame)

    def __len__(self) -> int:
        return len(self._frame)

    @property
    def lock(self) -> threading.RLock:
        return self._lock

    def subscribe(self, listener: DatasetListener) -> None:
        """Register a callback invoked (under the store lock) after each replacement."""
        with self._lock:
            self._listeners.append(listener)

    # -------------------------------------------------------------------------
    # Mutations
    # -------------------------------------------------------------------------
    def load(self, records: Union[Sequence[Voter], pd.DataFrame]) -> int:
        """
        Replace the entire collection. Returns the new record count.
        """
        return self._replace(records, SOURCE_RECORDS)

    def import_from_text(self, csv_text: str, delimiter: str = ",") -> int:
        """
        Parse delimited text and, if at least one usable row results, load it.

        Raises:
            NoValidRecordsError: if no row carries both voter_id and name.
                                 The current dataset is left untouched.
        """
        # importing.csv_import reads constants from this package
        from voter_browser.importing.csv_import import parse_voter_csv

        parsed = parse_voter_csv(csv_text, delimiter=delimiter)
        if parsed.count == 0:
            logger.warning(
                "CSV import produced no valid voter records",
                extra={"dropped": parsed.dropped},
            )
            raise NoValidRecordsError(
                "No valid voter records found. Each row needs a voter_id and a name.",
                dropped=parsed.dropped,
            )

        count = self._replace(parsed.frame, SOURCE_CSV)
        logger.info(
            "Imported voters from CSV",
            extra={"n_voters": count, "dropped": parsed.dropped, "version": self._version},
        )
        return count

    def sample(self, count: int, seed: Optional[int] = None) -> List[Voter]:
        """Generate synthetic voters. Does not load them."""
        return generate_sample_voters(count, seed=seed)

    def load_sample(self, count: int, seed: Optional[int] = None) -> int:
        return self._replace(self.sample(count, seed=seed), SOURCE_SAMPLE)

    # -------------------------------------------------------------------------
    # Internal
    # -------------------------------------------------------------------------
    def _replace(self, records: Union[Sequence[Voter], pd.DataFrame], source: str) -> int:
        if isinstance(records, pd.DataFrame):
            frame = normalise_voter_frame(records)
        else:
            frame = voters_to_frame(list(records))

        with self._lock:
            self._frame = frame
            self._version += 1
            self._source = source

            logger.info(
                "Voter dataset replaced",
                extra={"n_voters": len(frame), "source": source, "version": self._version},
            )

            for listener in list(self._listeners):
                listener(self)

        return len(frame)
