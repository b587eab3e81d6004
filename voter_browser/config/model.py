from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class GlobalConfig:
    """
    App-wide settings read from global.json (plus environment overrides).

    - ui_title / subtitle: navbar text
    - sample_size: number of synthetic voters loaded at start-up
    - sample_seed: seed for the synthetic batch, None for a fresh batch per run
    - csv_delimiter: delimiter used for CSV import and export
    - page_size: rows per page in the voter table
    - max_upload_bytes: largest accepted CSV upload
    """
    ui_title: str = "Voter Browser"
    subtitle: str = "Constituency voter dashboard"
    sample_size: int = 500
    sample_seed: Optional[int] = None
    csv_delimiter: str = ","
    page_size: int = 20
    max_upload_bytes: int = 20_000_000
