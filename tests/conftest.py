"""Pytest configuration and fixtures.

Provides environment isolation and shared backend payloads. Isolation
fixtures are autouse unless noted.
"""

from __future__ import annotations

from contextlib import suppress
import os
from typing import Any

import pytest

# =============================================================================
# Environment Isolation (Autouse)
# =============================================================================


@pytest.fixture(autouse=True)
def block_dotenv(request, monkeypatch):
    """Prevent python-dotenv from loading project .env files during tests.

    Opt-out: @pytest.mark.allow_dotenv
    """
    if request.node.get_closest_marker("allow_dotenv"):
        return
    with suppress(Exception):
        monkeypatch.setattr(
            "dotenv.load_dotenv", lambda *_args, **_kwargs: False, raising=False
        )


@pytest.fixture(autouse=True)
def isolate_logtable_env(request, monkeypatch):
    """Clear LOGTABLE_* env vars so Config defaults are deterministic.

    Opt-out: @pytest.mark.allow_env_pollution
    """
    if request.node.get_closest_marker("allow_env_pollution"):
        return
    for key in list(os.environ.keys()):
        if key.startswith("LOGTABLE_"):
            monkeypatch.delenv(key, raising=False)


# =============================================================================
# Backend Payloads
# =============================================================================


@pytest.fixture
def vector_response() -> dict[str, Any]:
    """Instant query response with two series."""
    return {
        "status": "success",
        "data": {
            "resultType": "vector",
            "result": [
                {"metric": {"job": "api", "severity": "error"}, "value": [1000, "5"]},
                {"metric": {"job": "db"}, "value": [1000, "7"]},
            ],
        },
    }


@pytest.fixture
def matrix_response() -> dict[str, Any]:
    """Range query response with one populated and one empty series."""
    return {
        "status": "success",
        "data": {
            "resultType": "matrix",
            "result": [
                {"metric": {"job": "x"}, "values": [[1, "1"], [2, "2"], [3, "3"]]},
                {"metric": {"job": "y"}, "values": []},
            ],
        },
    }


@pytest.fixture
def ndjson_logs() -> str:
    """Streaming log query body: one JSON object per line."""
    return (
        '{"_time":"2024-01-01T00:00:00Z","_msg":"started","app":"api"}\n'
        "\n"
        '{"_time":"2024-01-01T00:00:01Z","_msg":"failed","level":"error"}\n'
    )
