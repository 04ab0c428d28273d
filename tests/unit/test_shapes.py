"""Shape classifier tests: totality and priority order."""

from __future__ import annotations

from typing import Any

import pytest

from logtable.shapes import ResponseShape, classify, is_prometheus_response

pytestmark = pytest.mark.unit


def test_vector_and_matrix_are_recognized(
    vector_response: dict[str, Any], matrix_response: dict[str, Any]
) -> None:
    assert classify(vector_response) is ResponseShape.PROMETHEUS_VECTOR
    assert classify(matrix_response) is ResponseShape.PROMETHEUS_MATRIX


def test_unknown_result_type_is_unrecognized() -> None:
    value = {"data": {"resultType": "scalar", "result": [1, "2"]}}
    assert is_prometheus_response(value) is True
    assert classify(value) is ResponseShape.UNRECOGNIZED


@pytest.mark.parametrize(
    "value",
    [
        [],
        [{"a": 1}],
        {"data": [{"a": 1}]},
        {"result": [{"a": 1}]},
        {"data": [], "result": "ignored"},
        {"foo": "bar"},
        {"data": "x", "result": None},
        {"data": {"resultType": 1, "result": []}},
    ],
)
def test_raw_object_or_array(value: Any) -> None:
    assert classify(value) is ResponseShape.RAW_OBJECT_OR_ARRAY


@pytest.mark.parametrize(
    "value",
    [
        None,
        0,
        "text",
        True,
        1.5,
        ("tuple", "not", "json"),
    ],
)
def test_everything_else_is_unrecognized(value: Any) -> None:
    assert classify(value) is ResponseShape.UNRECOGNIZED


def test_prometheus_detection_wins_over_raw_data() -> None:
    value = {"data": {"resultType": "vector", "result": []}, "result": [{"a": 1}]}
    assert classify(value) is ResponseShape.PROMETHEUS_VECTOR
