"""Stage 4: column aggregation."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def aggregate_columns(rows: Iterable[Any]) -> tuple[str, ...]:
    """Return the union of row keys in first-appearance order.

    Rows are scanned in order and each row's keys in its own key order, so
    ``[{"a": 1, "b": 2}, {"b": 3, "c": 4}]`` yields ``("a", "b", "c")``.
    Rows that are not mappings contribute nothing.
    """
    # dict preserves insertion order and rejects duplicates: an ordered set
    seen: dict[str, None] = {}
    for row in rows:
        if isinstance(row, Mapping):
            seen.update(dict.fromkeys(row))
    return tuple(seen)
