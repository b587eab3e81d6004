from __future__ import annotations

from dataclasses import asdict, dataclass, fields, replace
from typing import Any, Dict, List, Optional, Tuple

# Widest age range the sidebar slider offers; the report age buckets cover exactly this span
AGE_LIMITS: Tuple[int, int] = (18, 80)
DEFAULT_AGE_RANGE: Tuple[int, int] = AGE_LIMITS

CATEGORICAL_FIELDS = ("gender", "municipality", "ward", "booth")

# Narrower geography fields cleared when a broader one changes
CASCADE_RESETS: Dict[str, Tuple[str, ...]] = {
    "municipality": ("ward", "booth"),
    "ward": ("booth",),
}


def _categorical(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text != "" else None


def _age_range(value: Any) -> Tuple[int, int]:
    if value is None:
        return DEFAULT_AGE_RANGE
    lo, hi = (int(v) for v in value)
    return (lo, hi) if lo <= hi else (hi, lo)


@dataclass(frozen=True)
class FilterState:
    """
    Represents the current user filter criteria.

    Fields:

    - search: case-insensitive substring matched against name, voter_id and parent_name
    - gender / municipality / ward / booth: exact match, None means no constraint
    - age_range: inclusive (lower, upper) bound on age

    Instances are immutable; the engine swaps in a new one per mutation.
    """

    search: str = ""
    gender: Optional[str] = None
    municipality: Optional[str] = None
    ward: Optional[str] = None
    booth: Optional[str] = None
    age_range: Tuple[int, int] = DEFAULT_AGE_RANGE

    @classmethod
    def field_names(cls) -> Tuple[str, ...]:
        return tuple(f.name for f in fields(cls))

    def with_update(self, field: str, value: Any) -> FilterState:
        """
        Return a copy with one field set, applying the cascading geography reset.
        """
        if field == "search":
            coerced: Any = "" if value is None else str(value).strip()
        elif field == "age_range":
            coerced = _age_range(value)
        else:
            coerced = _categorical(value)

        changes: Dict[str, Any] = {field: coerced}
        for narrower in CASCADE_RESETS.get(field, ()):
            changes[narrower] = None
        return replace(self, **changes)

    def is_default(self) -> bool:
        return self == FilterState()

    def active_filter_labels(self) -> List[str]:
        labels: List[str] = []
        if self.search:
            labels.append(f"Search: {self.search}")
        if self.gender is not None:
            labels.append(f"Gender: {self.gender}")
        if self.municipality is not None:
            labels.append(f"Municipality: {self.municipality}")
        if self.ward is not None:
            labels.append(f"Ward: {self.ward}")
        if self.booth is not None:
            labels.append(f"Booth: {self.booth}")
        if self.age_range != DEFAULT_AGE_RANGE:
            labels.append(f"Age: {self.age_range[0]}-{self.age_range[1]}")
        return labels

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["age_range"] = list(self.age_range)
        return data

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> FilterState:
        return cls(
            search=str(data.get("search") or "").strip(),
            gender=_categorical(data.get("gender")),
            municipality=_categorical(data.get("municipality")),
            ward=_categorical(data.get("ward")),
            booth=_categorical(data.get("booth")),
            age_range=_age_range(data.get("age_range")),
        )
