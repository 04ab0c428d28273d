"""Public type aliases shared by the projection stages."""

from __future__ import annotations

from typing import Any, TypeAlias

#: The universal JSON value model produced by ``json.loads``.
JSONValue: TypeAlias = (
    None | bool | int | float | str | list["JSONValue"] | dict[str, "JSONValue"]
)

#: Anything a backend reader can hand over: text, raw body bytes, or an
#: already-decoded JSON value.
RawPayload: TypeAlias = str | bytes | bytearray | JSONValue

#: One table row. Keys are column names; missing columns are simply absent.
Row: TypeAlias = dict[str, Any]

__all__ = ["JSONValue", "RawPayload", "Row"]
