from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional, Sequence

import pandas as pd

from voter_browser.core.aggregates import ReportSummary, percentage
from voter_browser.core.engine import VoterEngine
from voter_browser.core.exceptions import UnknownReportTypeError

logger = logging.getLogger(__name__)

EXPORT_COLUMNS: List[str] = [
    "voter_id",
    "name",
    "age",
    "gender",
    "parent_name",
    "spouse",
    "municipality",
    "ward",
    "booth",
]

REPORT_TITLES: Dict[str, str] = {
    "demographic": "Demographic Summary Report",
    "municipality": "Municipality-wise Voter Report",
    "ward": "Ward-wise Voter Report",
    "age": "Age Distribution Analysis Report",
    "gender": "Gender Analysis Report",
}


def _quote(value: object, delimiter: str) -> str:
    text = str(value)
    if delimiter in text or '"' in text or "\n" in text:
        return '"' + text.replace('"', '""') + '"'
    return text


def voters_to_csv(
    frame: pd.DataFrame,
    delimiter: str = ",",
    columns: Sequence[str] = EXPORT_COLUMNS,
) -> str:
    """
    Serialise voters to delimited text, header first.

    Values containing the delimiter (or a quote/newline) are wrapped in double
    quotes. The importer does not understand quoting, so an exported file with
    such values does not re-import cleanly.
    """
    lines = [delimiter.join(columns)]
    for row in frame[list(columns)].itertuples(index=False):
        lines.append(delimiter.join(_quote(v, delimiter) for v in row))
    return "\n".join(lines)


def export_filename(report_type: str, now: Optional[float] = None) -> str:
    millis = int((time.time() if now is None else now) * 1000)
    return f"voter-report-{report_type}-{millis}.csv"


@dataclass
class Report:
    """
    Printable report: a title, the active filter labels, headline numbers and
    one table whose columns depend on the report type.
    """
    report_type: str
    title: str
    filters: List[str]
    summary: ReportSummary
    table: pd.DataFrame
    notes: List[str] = field(default_factory=list)


class ReportService:
    """
    Builds report tables from the engine's filtered subset.
    """

    def __init__(self, engine: VoterEngine):
        self.engine = engine
        self._builders: Dict[str, Callable[[], pd.DataFrame]] = {
            "demographic": self._demographic_table,
            "municipality": self._municipality_table,
            "ward": self._ward_table,
            "age": self._age_table,
            "gender": self._gender_table,
        }

    @property
    def report_types(self) -> List[str]:
        return list(self._builders)

    def build(self, report_type: str) -> Report:
        """
        Raises:
            UnknownReportTypeError: if report_type is not one of report_types
        """
        builder = self._builders.get(report_type)
        if builder is None:
            raise UnknownReportTypeError(f"Unknown report type '{report_type}'")

        report = Report(
            report_type=report_type,
            title=REPORT_TITLES[report_type],
            filters=self.engine.criteria.active_filter_labels(),
            summary=self.engine.report_summary(),
            table=builder(),
        )
        logger.info(
            "Report built",
            extra={"report_type": report_type, "n_voters": report.summary.total, "n_rows": len(report.table)},
        )
        return report

    def export_csv(self, delimiter: str = ",") -> str:
        return voters_to_csv(self.engine.filtered_subset(), delimiter=delimiter)

    # -------------------------------------------------------------------------
    # Table builders
    # -------------------------------------------------------------------------
    def _demographic_table(self) -> pd.DataFrame:
        s = self.engine.report_summary()
        rows = [
            ("Total voters", s.total, 100.0 if s.total else 0.0),
            ("Male", s.male, percentage(s.male, s.total)),
            ("Female", s.female, percentage(s.female, s.total)),
            ("Other", s.other, percentage(s.other, s.total)),
        ]
        table = pd.DataFrame(rows, columns=["metric", "value", "percent"])
        ages = pd.DataFrame(
            [
                ("Average age", s.average_age, None),
                ("Youngest", s.min_age, None),
                ("Oldest", s.max_age, None),
            ],
            columns=["metric", "value", "percent"],
        )
        return pd.concat([table, ages], ignore_index=True)

    def _municipality_table(self) -> pd.DataFrame:
        stats = self.engine.municipality_stats()
        return stats[["municipality", "total", "male", "female", "wards", "percent"]].reset_index(drop=True)

    def _ward_table(self) -> pd.DataFrame:
        # busiest wards first; ties keep label order
        stats = self.engine.ward_stats().sort_values("total", ascending=False, kind="stable")
        return stats[
            ["municipality", "ward", "total", "male", "female", "booths", "male_female_ratio"]
        ].reset_index(drop=True)

    def _age_table(self) -> pd.DataFrame:
        stats = self.engine.age_bucket_stats()
        return stats[["label", "total", "male", "female", "percent"]].reset_index(drop=True)

    def _gender_table(self) -> pd.DataFrame:
        return self.engine.gender_stats().reset_index(drop=True)
