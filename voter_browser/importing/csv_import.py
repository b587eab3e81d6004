from __future__ import annotations

import logging
import re
from dataclasses import dataclass
from typing import Dict, List
from urllib.parse import quote

import pandas as pd

from voter_browser.core.sample_data import PICTURE_TEMPLATE
from voter_browser.core.voter import STRING_COLUMNS, VOTER_COLUMNS, empty_voter_frame

logger = logging.getLogger(__name__)

_WHITESPACE = re.compile(r"\s+")
_LEADING_INT = r"^\s*(\d+)"

# Characters encodeURIComponent leaves alone
_URI_SAFE = "-_.!~*'()"


@dataclass(frozen=True)
class ParsedVoters:
    """
    Result of parsing delimited voter text.

    frame: rows carrying both voter_id and name, in VOTER_COLUMNS order
    dropped: number of data rows discarded for a missing voter_id or name
    """
    frame: pd.DataFrame
    dropped: int = 0

    @property
    def count(self) -> int:
        return len(self.frame)


def normalise_header(token: str) -> str:
    return _WHITESPACE.sub("_", token.strip().lower())


def placeholder_picture(name: str) -> str:
    return PICTURE_TEMPLATE.format(seed=quote(name or "V", safe=_URI_SAFE))


def parse_voter_csv(text: str, delimiter: str = ",") -> ParsedVoters:
    """
    Parse delimited voter text. The first non-empty line is the header.

    There is no quoting support: every line is split on `delimiter` as-is, so a
    value containing the delimiter shifts the remaining columns. Missing
    columns become "", age takes the leading integer of its value or 0.
    Rows without voter_id or name are dropped.
    """
    lines = [line for line in (text or "").strip().splitlines() if line.strip()]
    if len(lines) < 2:
        return ParsedVoters(frame=empty_voter_frame(), dropped=0)

    headers = [normalise_header(h) for h in lines[0].split(delimiter)]

    rows: List[Dict[str, str]] = []
    for line in lines[1:]:
        values = [v.strip() for v in line.split(delimiter)]
        row = {h: (values[i] if i < len(values) else "") for i, h in enumerate(headers)}
        rows.append(row)

    # Repeated header tokens: the right-most column wins
    raw = pd.DataFrame(rows, columns=list(dict.fromkeys(headers)))

    frame = pd.DataFrame(index=raw.index)
    for col in STRING_COLUMNS:
        frame[col] = raw[col].fillna("").astype(str) if col in raw.columns else ""

    if "age" in raw.columns:
        ages = raw["age"].fillna("").astype(str).str.extract(_LEADING_INT, expand=False)
        frame["age"] = pd.to_numeric(ages, errors="coerce").fillna(0).astype("int64")
    else:
        frame["age"] = 0

    missing_picture = frame["picture"] == ""
    if missing_picture.any():
        frame.loc[missing_picture, "picture"] = frame.loc[missing_picture, "name"].map(placeholder_picture)

    valid = (frame["voter_id"] != "") & (frame["name"] != "")
    dropped = int((~valid).sum())
    if dropped:
        logger.warning(
            "Dropped voter rows missing voter_id or name",
            extra={"dropped": dropped, "rows": len(frame)},
        )

    frame = frame.loc[valid, VOTER_COLUMNS].reset_index(drop=True)
    return ParsedVoters(frame=frame, dropped=dropped)
