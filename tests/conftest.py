# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Jeff Culverhouse
import argparse
from datetime import datetime, timedelta, timezone
from typing import Any, Callable
from unittest.mock import MagicMock

import pytest


def _iso_ago(seconds: int) -> str:
    return (datetime.now(timezone.utc) - timedelta(seconds=seconds)).isoformat()


@pytest.fixture
def iso_ago() -> Callable[[int], str]:
    """Return a helper that builds a Home Assistant style timestamp `seconds` in the past."""
    return _iso_ago


@pytest.fixture
def make_args() -> Callable[..., argparse.Namespace]:
    """Return a factory for a parsed-arguments namespace with sane defaults."""

    def _make(**overrides: Any) -> argparse.Namespace:
        values: dict[str, Any] = {
            "config": None,
            "url": "http://ha.local:8123",
            "token": "test-token-12345",
            "entity": "sensor.outside_temperature",
            "last_updated_age": 0,
            "last_changed_age": 0,
            "timeout": 15.0,
            "debug": False,
        }
        values.update(overrides)
        return argparse.Namespace(**values)

    return _make


@pytest.fixture
def make_response() -> Callable[..., MagicMock]:
    """Return a factory for a fake requests.Response."""

    def _make(status_code: int = 200, reason: str = "OK", text: str = "", headers: dict[str, str] | None = None) -> MagicMock:
        r = MagicMock()
        r.status_code = status_code
        r.reason = reason
        r.text = text
        r.headers = headers or {"Content-Type": "application/json"}
        return r

    return _make


@pytest.fixture
def sample_state() -> dict[str, Any]:
    """Return a fresh, healthy entity as the states API would send it."""
    return {
        "entity_id": "sensor.outside_temperature",
        "state": "on",
        "attributes": {"friendly_name": "Outside temperature"},
        "last_changed": _iso_ago(30),
        "last_updated": _iso_ago(10),
    }
