"""Pytest configuration and shared fixtures."""

from __future__ import annotations

from typing import Any

import pytest

from tests.fakes import FakePingdomApi


@pytest.fixture
def fake_api() -> FakePingdomApi:
    return FakePingdomApi()


@pytest.fixture
def tcp_check() -> dict[str, Any]:
    return {"name": "A", "type": "tcp", "host": "h", "port": 80}


@pytest.fixture
def tms_check() -> dict[str, Any]:
    return {
        "name": "login-flow",
        "interval": 10,
        "region": "eu",
        "steps": [
            {"fn": "go_to", "args": {"url": "https://example.com/login"}},
            {"fn": "fill", "args": {"input": "#user", "value": "bot"}},
        ],
    }
