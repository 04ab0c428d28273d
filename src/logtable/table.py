"""Table composition: decode → classify → extract → aggregate.

`build_table` is the single entry point hosts call with whatever the backend
returned. It never raises; payloads that cannot be projected produce an empty
`Table`, which hosts display as `EMPTY_MESSAGE`.
"""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
import logging
from typing import TYPE_CHECKING, Any

from logtable.columns import aggregate_columns
from logtable.config import Config
from logtable.decode import decode
from logtable.render import EMPTY_CELL, DisplayCell, render_cell
from logtable.rows import extract_rows
from logtable.shapes import ResponseShape, classify

if TYPE_CHECKING:
    from logtable.types import RawPayload, Row

log = logging.getLogger(__name__)

EMPTY_MESSAGE = "No tabular rows to display."


@dataclass(frozen=True)
class Table:
    """Ordered column names paired with ordered rows.

    Rows keep only the keys the payload supplied; a column missing from a row
    renders as an empty cell. Tables compare by value but are not hashable,
    since rows are plain dicts.

    Attributes:
        columns: Unique column names in first-seen order.
        rows: Rows in payload order.
        shape: The shape the payload was classified as.
        indent: Indentation used when rendering nested cells.
    """

    columns: tuple[str, ...] = ()
    rows: tuple[Row, ...] = ()
    shape: ResponseShape = ResponseShape.UNRECOGNIZED
    indent: int = 2

    __hash__ = None  # type: ignore[assignment]

    @property
    def is_empty(self) -> bool:
        """True when there are no rows to display."""
        return not self.rows

    def __len__(self) -> int:
        return len(self.rows)

    def cell(self, row_index: int, column: str) -> DisplayCell:
        """Render the cell at ``(row_index, column)``."""
        row = self.rows[row_index]
        if not isinstance(row, Mapping) or column not in row:
            return EMPTY_CELL
        return render_cell(row[column], indent=self.indent)

    def display_rows(self) -> Iterator[tuple[DisplayCell, ...]]:
        """Yield each row rendered as one `DisplayCell` per column."""
        for index in range(len(self.rows)):
            yield tuple(self.cell(index, column) for column in self.columns)

    def records(self) -> list[dict[str, Any]]:
        """Return rows densified over `columns`, with ``None`` for missing cells."""
        return [
            {
                column: row.get(column) if isinstance(row, Mapping) else None
                for column in self.columns
            }
            for row in self.rows
        ]


def build_table(payload: RawPayload, *, config: Config | None = None) -> Table:
    """Project a backend payload into a `Table`.

    Args:
        payload: Response text, body bytes, or an already-decoded value.
        config: Optional `Config`; defaults are resolved from the environment.

    Returns:
        The projected `Table`. Check `Table.is_empty` for the no-rows case.

    Example:
        table = build_table('{"a":1}\\n{"b":2}')
        assert table.columns == ("a", "b")
    """
    cfg = config or Config()
    value = decode(payload)
    shape = classify(value)
    rows = extract_rows(value, shape, matrix_mode=cfg.matrix_mode)
    if cfg.max_rows is not None and len(rows) > cfg.max_rows:
        log.debug("Truncating %d rows to max_rows=%d", len(rows), cfg.max_rows)
        rows = rows[: cfg.max_rows]
    columns = aggregate_columns(rows)
    log.debug("Built table: %d rows, %d columns", len(rows), len(columns))
    return Table(columns=columns, rows=tuple(rows), shape=shape, indent=cfg.indent)


class TableProjector:
    """Memoize `build_table` on payload identity.

    Rebuilds only when handed a different payload object, mirroring how a
    view recomputes its table when the response reference changes.
    """

    _UNSET: Any = object()

    def __init__(self, config: Config | None = None) -> None:
        self.config = config or Config()
        self._payload: Any = self._UNSET
        self._table: Table | None = None

    def project(self, payload: RawPayload) -> Table:
        """Return the table for ``payload``, reusing the last one when identical."""
        if payload is self._payload and self._table is not None:
            return self._table
        self._table = build_table(payload, config=self.config)
        self._payload = payload
        return self._table
