"""Exception hierarchy for logtable.

The normalization pipeline itself never raises for any payload; these
exceptions cover construction-time configuration and boundary envelopes.
"""

from __future__ import annotations


class LogtableError(Exception):
    """Base exception for all logtable errors."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint = hint


class ConfigurationError(LogtableError):
    """Configuration validation or resolution failed."""


class ResponseError(LogtableError):
    """A translate/query response envelope could not be validated.

    Carries the offending field locations so hosts can report precisely
    which part of the envelope was malformed.
    """

    def __init__(
        self,
        message: str,
        *,
        hint: str | None = None,
        fields: tuple[str, ...] = (),
    ) -> None:
        super().__init__(message, hint=hint)
        self.fields = fields
