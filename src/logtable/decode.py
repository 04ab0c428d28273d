"""Stage 1: payload decoding.

Turns raw response text into a structured value. Backends answer either with
a single JSON document (stats endpoints) or with one JSON object per line
(streaming log queries), so decoding tries the whole document first and only
then falls back to newline-delimited JSON.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from logtable.types import JSONValue, RawPayload

log = logging.getLogger(__name__)

# Nesting deeper than the interpreter stack surfaces as RecursionError.
_DECODE_ERRORS = (ValueError, RecursionError)


def _reject_constant(token: str) -> float:
    raise ValueError(f"{token} is not valid JSON")


def _loads(text: str) -> JSONValue:
    return json.loads(text, parse_constant=_reject_constant)


def decode(payload: RawPayload) -> JSONValue:
    """Decode a raw payload into a structured value.

    Args:
        payload: Response text, response body bytes, or an already-decoded
            JSON value.

    Returns:
        The decoded value, or ``None`` when the payload is empty or cannot be
        decoded. Already-structured payloads are returned unchanged.
    """
    if isinstance(payload, bytes | bytearray):
        payload = bytes(payload).decode("utf-8", errors="replace")
    if not isinstance(payload, str):
        return payload

    text = payload.strip()
    if not text:
        return None

    try:
        return _loads(text)
    except _DECODE_ERRORS:
        pass

    return _decode_lines(text)


def _decode_lines(text: str) -> list[JSONValue] | None:
    """Parse newline-delimited JSON; any bad line voids the whole payload."""
    values: list[JSONValue] = []
    for lineno, line in enumerate(text.split("\n"), start=1):
        stripped = line.strip()
        if not stripped:
            continue
        try:
            values.append(_loads(stripped))
        except _DECODE_ERRORS as e:
            log.debug("NDJSON decode failed at line %d: %s", lineno, e)
            return None
    log.debug("Decoded %d NDJSON values", len(values))
    return values
