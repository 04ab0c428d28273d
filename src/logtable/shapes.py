"""Stage 2: response shape classification.

Inspects a decoded value once and tags it with a `ResponseShape`, so row
extraction can dispatch on the tag instead of re-testing the payload.
"""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
import logging
from typing import Any

log = logging.getLogger(__name__)


class ResponseShape(str, Enum):
    """Known backend response shapes."""

    RAW_OBJECT_OR_ARRAY = "raw"
    PROMETHEUS_VECTOR = "vector"
    PROMETHEUS_MATRIX = "matrix"
    UNRECOGNIZED = "unrecognized"


def is_prometheus_response(value: Any) -> bool:
    """Return True for ``{"data": {"resultType": str, "result": list}}`` mappings."""
    match value:
        case {"data": {"resultType": str(), "result": list()}}:
            return True
        case _:
            return False


def classify(value: Any) -> ResponseShape:
    """Classify a decoded value. Total and side-effect free; never raises.

    Prometheus-style payloads are recognized first; a plain mapping without a
    ``data``/``result`` sequence is a single raw row. An unknown ``resultType``
    is tagged `UNRECOGNIZED`; the extractor still passes its ``result``
    through unchanged.
    """
    if is_prometheus_response(value):
        result_type = value["data"]["resultType"]
        if result_type == "matrix":
            shape = ResponseShape.PROMETHEUS_MATRIX
        elif result_type == "vector":
            shape = ResponseShape.PROMETHEUS_VECTOR
        else:
            shape = ResponseShape.UNRECOGNIZED
    else:
        match value:
            case list():
                shape = ResponseShape.RAW_OBJECT_OR_ARRAY
            case {"data": list()} | {"result": list()}:
                shape = ResponseShape.RAW_OBJECT_OR_ARRAY
            case Mapping():
                # A lone object (stats response, one NDJSON line) is one row.
                shape = ResponseShape.RAW_OBJECT_OR_ARRAY
            case _:
                shape = ResponseShape.UNRECOGNIZED

    log.debug("Classified %s payload as %s", type(value).__name__, shape.value)
    return shape
