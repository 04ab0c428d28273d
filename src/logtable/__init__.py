"""logtable: project log and metrics query responses into tables.

Public API:
    - build_table(): Decode, classify and tabulate any backend payload
    - Table: Ordered columns plus rows, with render helpers
    - TableProjector: Identity-memoized build_table for views
    - Config: Configuration dataclass
    - table_from_response(): Project the ``data`` of a translate/query envelope
"""

from __future__ import annotations

import logging

from logtable.columns import aggregate_columns
from logtable.config import Config
from logtable.decode import decode
from logtable.envelope import (
    QueryRequest,
    QueryResponse,
    parse_response,
    table_from_response,
)
from logtable.errors import ConfigurationError, LogtableError, ResponseError
from logtable.render import DisplayCell, render_cell
from logtable.rows import extract_rows
from logtable.shapes import ResponseShape, classify
from logtable.table import EMPTY_MESSAGE, Table, TableProjector, build_table

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("logtable")
except PackageNotFoundError:
    __version__ = "0.0.0+unknown"

# Library-level NullHandler: stay silent unless the consumer configures logging.
logging.getLogger("logtable").addHandler(logging.NullHandler())

__all__ = [
    "EMPTY_MESSAGE",
    "Config",
    "ConfigurationError",
    "DisplayCell",
    "LogtableError",
    "QueryRequest",
    "QueryResponse",
    "ResponseError",
    "ResponseShape",
    "Table",
    "TableProjector",
    "aggregate_columns",
    "build_table",
    "classify",
    "decode",
    "extract_rows",
    "parse_response",
    "render_cell",
    "table_from_response",
]
