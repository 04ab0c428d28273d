"""Column aggregation tests: first-seen order, duplicates rejected."""

from __future__ import annotations

from hypothesis import given, settings
from hypothesis import strategies as st
import pytest

from logtable.columns import aggregate_columns

pytestmark = pytest.mark.unit


def test_first_appearance_order_across_rows() -> None:
    assert aggregate_columns([{"a": 1, "b": 2}, {"b": 3, "c": 4}]) == ("a", "b", "c")


def test_row_key_order_is_kept_not_sorted() -> None:
    assert aggregate_columns([{"z": 1, "a": 2}, {"m": 3}]) == ("z", "a", "m")


def test_empty_and_non_mapping_rows_contribute_nothing() -> None:
    assert aggregate_columns([{}, 1, "x", None, [("k", 1)], {"k": 1}]) == ("k",)


def test_no_rows() -> None:
    assert aggregate_columns([]) == ()


@given(
    rows=st.lists(
        st.dictionaries(st.sampled_from("abcdefg"), st.integers(), max_size=5),
        max_size=8,
    )
)
@settings(max_examples=40, deadline=None, derandomize=True)
def test_columns_are_union_in_first_seen_order(rows: list[dict]) -> None:
    """Property: columns are unique, cover every key, and follow first sight."""
    columns = aggregate_columns(rows)
    flat = [key for row in rows for key in row]

    assert len(columns) == len(set(columns))
    assert set(columns) == set(flat)
    assert list(columns) == sorted(set(flat), key=flat.index)
