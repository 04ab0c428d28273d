"""Stage 5: cell rendering.

Converts one cell value into a display-safe `DisplayCell`. Scalars become
their literal text; nested mappings and sequences become indented JSON
flagged as preformatted so the presentation layer keeps their whitespace.
"""

from __future__ import annotations

from dataclasses import dataclass
import json
import reprlib
from typing import Any


@dataclass(frozen=True, slots=True)
class DisplayCell:
    """Render-ready cell content."""

    text: str = ""
    preformatted: bool = False

    def __str__(self) -> str:
        return self.text


EMPTY_CELL = DisplayCell()

# Integral floats below this print without a fractional part or exponent.
_PLAIN_FLOAT_LIMIT = 1e21


def render_cell(value: Any, *, indent: int = 2) -> DisplayCell:
    """Render a single cell value.

    Args:
        value: Any JSON-like value; ``None`` renders as an empty cell.
        indent: Indentation for nested values.

    Returns:
        A `DisplayCell`. Only nested values are ``preformatted``.
    """
    match value:
        case None:
            return EMPTY_CELL
        case bool():
            return DisplayCell("true" if value else "false")
        case str():
            return DisplayCell(value)
        case float() if value.is_integer() and abs(value) < _PLAIN_FLOAT_LIMIT:
            return DisplayCell(str(int(value)))
        case int() | float():
            return DisplayCell(str(value))
        case _:
            return DisplayCell(_dump(value, indent), preformatted=True)


def _dump(value: Any, indent: int) -> str:
    try:
        return json.dumps(value, indent=indent, ensure_ascii=False, default=str)
    except (ValueError, RecursionError):
        # Too deep or circular: reprlib caps nesting depth and item counts.
        return reprlib.repr(value)
