from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Dict, List

import pandas as pd

VOTER_COLUMNS: List[str] = [
    "voter_id",
    "name",
    "age",
    "gender",
    "parent_name",
    "spouse",
    "picture",
    "municipality",
    "ward",
    "booth",
]

STRING_COLUMNS: List[str] = [c for c in VOTER_COLUMNS if c != "age"]

MALE = "Male"
FEMALE = "Female"
OTHER = "Other"
CANONICAL_GENDERS = (MALE, FEMALE, OTHER)


@dataclass(frozen=True)
class Voter:
    """
    A single voter record. Immutable once ingested.

    Geography fields (municipality/ward/booth) are free-text labels, not keys
    into a separate table. Gender is an open string: Male/Female/Other are the
    expected values but anything else is carried through unchanged.
    """

    voter_id: str
    name: str
    age: int = 0
    gender: str = ""
    parent_name: str = ""
    spouse: str = ""
    picture: str = ""
    municipality: str = ""
    ward: str = ""
    booth: str = ""

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> Voter:
        return cls(
            voter_id=str(data.get("voter_id", "")),
            name=str(data.get("name", "")),
            age=int(data.get("age", 0) or 0),
            gender=str(data.get("gender", "")),
            parent_name=str(data.get("parent_name", "")),
            spouse=str(data.get("spouse", "") or ""),
            picture=str(data.get("picture", "")),
            municipality=str(data.get("municipality", "")),
            ward=str(data.get("ward", "")),
            booth=str(data.get("booth", "")),
        )


def empty_voter_frame() -> pd.DataFrame:
    frame = pd.DataFrame({c: pd.Series(dtype=object) for c in VOTER_COLUMNS})
    frame["age"] = frame["age"].astype("int64")
    return frame


def normalise_voter_frame(df: pd.DataFrame) -> pd.DataFrame:
    """
    Return a copy of df with exactly VOTER_COLUMNS in canonical order.

    Missing string columns become "", missing/non-numeric ages become 0.
    """
    if df.empty and not len(df.columns):
        return empty_voter_frame()

    out = pd.DataFrame(index=pd.RangeIndex(len(df)))
    for col in STRING_COLUMNS:
        if col in df.columns:
            out[col] = df[col].fillna("").astype(str).to_numpy()
        else:
            out[col] = ""

    if "age" in df.columns:
        ages = pd.to_numeric(df["age"], errors="coerce").fillna(0)
        out["age"] = ages.clip(lower=0).astype("int64").to_numpy()
    else:
        out["age"] = 0

    return out[VOTER_COLUMNS]


def voters_to_frame(voters: List[Voter]) -> pd.DataFrame:
    if not voters:
        return empty_voter_frame()
    return normalise_voter_frame(pd.DataFrame([v.to_dict() for v in voters]))


def frame_to_voters(df: pd.DataFrame) -> List[Voter]:
    return [Voter.from_dict(row) for row in df.to_dict("records")]
