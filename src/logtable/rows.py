"""Stage 3: row extraction.

Each `ResponseShape` maps to one pure extractor that turns the decoded value
into an ordered list of rows. Extractors never raise; anything they cannot
interpret yields no rows.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
import logging
from typing import Any

from logtable.config import MatrixMode
from logtable.shapes import ResponseShape
from logtable.types import Row

log = logging.getLogger(__name__)

RowExtractor = Callable[[Any, MatrixMode], list[Row]]

#: Synthetic column names added to Prometheus series rows.
TIMESTAMP_COLUMN = "timestamp"
VALUE_COLUMN = "value"
SAMPLES_COLUMN = "samples"


# --- Utility Functions ---


def _labels(series: Any) -> dict[str, Any]:
    """Return a copy of the series' ``metric`` labels, or an empty mapping."""
    if isinstance(series, Mapping):
        metric = series.get("metric")
        if isinstance(metric, Mapping):
            return dict(metric)
    return {}


def _sample(pair: Any) -> tuple[Any, Any]:
    """Split a ``[timestamp, value]`` pair; malformed pairs yield ``(None, None)``."""
    if isinstance(pair, list | tuple):
        timestamp = pair[0] if len(pair) > 0 else None
        value = pair[1] if len(pair) > 1 else None
        return timestamp, value
    return None, None


def _series_field(series: Any, key: str) -> Any:
    return series.get(key) if isinstance(series, Mapping) else None


def _result(value: Any) -> list[Any]:
    match value:
        case {"data": {"result": list() as result}}:
            return result
        case _:
            return []


# --- Shape Extractors ---


def _raw_rows(value: Any, _mode: MatrixMode) -> list[Row]:
    if isinstance(value, list):
        return value
    if not isinstance(value, Mapping):
        return []
    for key in ("data", "result"):
        items = value.get(key)
        if isinstance(items, list):
            return items
    return [dict(value)]


def _vector_rows(value: Any, _mode: MatrixMode) -> list[Row]:
    rows: list[Row] = []
    for series in _result(value):
        timestamp, sample_value = _sample(_series_field(series, "value"))
        row = _labels(series)
        row[TIMESTAMP_COLUMN] = timestamp
        row[VALUE_COLUMN] = sample_value
        rows.append(row)
    return rows


def _matrix_rows(value: Any, mode: MatrixMode) -> list[Row]:
    rows: list[Row] = []
    for series in _result(value):
        samples = _series_field(series, "values")
        if not isinstance(samples, list):
            samples = []

        if mode == "expand":
            for pair in samples:
                timestamp, sample_value = _sample(pair)
                row = _labels(series)
                row[TIMESTAMP_COLUMN] = timestamp
                row[VALUE_COLUMN] = sample_value
                rows.append(row)
            continue

        timestamp, sample_value = _sample(samples[-1]) if samples else (None, None)
        row = _labels(series)
        row[TIMESTAMP_COLUMN] = timestamp
        row[VALUE_COLUMN] = sample_value
        row[SAMPLES_COLUMN] = len(samples)
        rows.append(row)
    return rows


def _passthrough_rows(value: Any, _mode: MatrixMode) -> list[Row]:
    # Prometheus family with an unknown resultType: show the raw items.
    return _result(value)


_EXTRACTORS: dict[ResponseShape, RowExtractor] = {
    ResponseShape.RAW_OBJECT_OR_ARRAY: _raw_rows,
    ResponseShape.PROMETHEUS_VECTOR: _vector_rows,
    ResponseShape.PROMETHEUS_MATRIX: _matrix_rows,
    ResponseShape.UNRECOGNIZED: _passthrough_rows,
}


def extract_rows(
    value: Any, shape: ResponseShape, *, matrix_mode: MatrixMode = "last"
) -> list[Row]:
    """Extract ordered rows from a decoded value and its classified shape.

    Args:
        value: Decoded payload (``None`` when decoding failed).
        shape: Tag produced by `classify` for the same value.
        matrix_mode: ``"last"`` summarizes each matrix series as one row with
            its latest sample and a ``samples`` count; ``"expand"`` emits one
            row per sample.

    Returns:
        Rows in payload order. Raw arrays are returned as-is, so elements that
        are not mappings pass through and contribute no columns. A plain
        mapping becomes a single row.
    """
    if not value:
        return []
    rows = _EXTRACTORS[shape](value, matrix_mode)
    log.debug("Extracted %d rows from %s payload", len(rows), shape.value)
    return rows
