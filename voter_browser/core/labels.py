from __future__ import annotations

import re
from typing import Iterable, List, Tuple

_TRAILING_NUMBER = re.compile(r"^(.*?)(\d+)\s*$")


def label_sort_key(label: object) -> Tuple[str, int, str]:
    """
    Sort key for geography labels such as "Ward 9" / "Booth 12".

    Labels ending in an integer sort by (stem, integer) so "Ward 2" comes
    before "Ward 10". Labels without a trailing number sort by their text.
    A bare stem ("Ward") sorts ahead of its numbered siblings.
    """
    text = "" if label is None else str(label)
    match = _TRAILING_NUMBER.match(text)
    if match is None:
        return text.strip().casefold(), -1, text
    stem, number = match.groups()
    return stem.strip().casefold(), int(number), text


def sort_labels(labels: Iterable[object]) -> List[str]:
    return sorted((str(v) for v in labels), key=label_sort_key)
