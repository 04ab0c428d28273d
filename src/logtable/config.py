"""Configuration: frozen Config with environment fallbacks."""

from __future__ import annotations

from dataclasses import dataclass
import os
from typing import Literal, get_args

from dotenv import load_dotenv

from logtable.errors import ConfigurationError

load_dotenv()

MatrixMode = Literal["last", "expand"]

_MATRIX_MODES: tuple[str, ...] = get_args(MatrixMode)

# Environment variable names, one per tunable field
_ENV_INDENT = "LOGTABLE_INDENT"
_ENV_MATRIX_MODE = "LOGTABLE_MATRIX_MODE"
_ENV_MAX_ROWS = "LOGTABLE_MAX_ROWS"


def _env_int(name: str) -> int | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw.strip())
    except ValueError:
        raise ConfigurationError(
            f"{name} must be an integer, got {raw!r}",
            hint=f"Unset {name} or set it to a whole number.",
        ) from None


@dataclass(frozen=True)
class Config:
    """Immutable configuration for table projection.

    Unset fields are auto-resolved from ``LOGTABLE_*`` environment variables;
    explicit values always win.

    Example:
        config = Config(matrix_mode="expand")
        table = build_table(payload, config=config)
    """

    #: Indentation used when pretty-printing nested cell values.
    #: Auto-resolved from ``LOGTABLE_INDENT`` when *None*.
    indent: int | None = None
    #: ``"last"`` keeps one row per matrix series; ``"expand"`` emits one row
    #: per sample. Auto-resolved from ``LOGTABLE_MATRIX_MODE`` when *None*.
    matrix_mode: MatrixMode | None = None
    #: Keep at most this many rows. Auto-resolved from ``LOGTABLE_MAX_ROWS``.
    max_rows: int | None = None

    def __post_init__(self) -> None:
        """Resolve environment fallbacks and validate."""
        if self.indent is None:
            env_indent = _env_int(_ENV_INDENT)
            object.__setattr__(self, "indent", 2 if env_indent is None else env_indent)

        if self.matrix_mode is None:
            raw_mode = os.environ.get(_ENV_MATRIX_MODE, "").strip().lower()
            object.__setattr__(self, "matrix_mode", raw_mode or "last")

        if self.max_rows is None:
            object.__setattr__(self, "max_rows", _env_int(_ENV_MAX_ROWS))

        if self.indent < 0:
            raise ConfigurationError(
                f"indent must be ≥ 0, got {self.indent}",
                hint=f"Pass indent=... or set {_ENV_INDENT} to 0 or more.",
            )
        if self.matrix_mode not in _MATRIX_MODES:
            raise ConfigurationError(
                f"Unknown matrix_mode: {self.matrix_mode!r}",
                hint=f"Supported modes: 'last', 'expand' (see {_ENV_MATRIX_MODE}).",
            )
        if self.max_rows is not None and self.max_rows < 1:
            raise ConfigurationError(
                f"max_rows must be ≥ 1, got {self.max_rows}",
                hint=f"Unset {_ENV_MAX_ROWS} to keep every row.",
            )
