"""Shared fixtures and utilities for scpsl tests.

This module provides:
- Sample serverinfo payloads shaped like real API responses
- A helper for building mocked httpx responses
- The `requires_credentials` decorator to skip live API tests
- Custom markers for test categorization
"""

import json
import os
from typing import Any
from unittest.mock import MagicMock

import pytest
from httpx import Response


def pytest_configure(config: pytest.Config) -> None:
    """Register custom markers for test categorization."""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests against the live API"
    )


LIVE_ACCOUNT_ID = os.environ.get("SCPSL_ACCOUNT_ID")
LIVE_API_KEY = os.environ.get("SCPSL_API_KEY")

# Skip decorator for tests that need real API credentials
requires_credentials = pytest.mark.skipif(
    not (LIVE_ACCOUNT_ID and LIVE_API_KEY),
    reason="Integration test requires SCPSL_ACCOUNT_ID and SCPSL_API_KEY",
)


def mock_http_response(
    payload: Any = None,
    *,
    status_code: int = 200,
    text: str | None = None,
) -> MagicMock:
    """Build a MagicMock standing in for an httpx.Response.

    Args:
        payload: JSON-serialisable body. Ignored when `text` is given.
        status_code: HTTP status code.
        text: Raw body text.

    Returns:
        A MagicMock with status_code, text and content populated.
    """
    body = text if text is not None else json.dumps(payload)
    response = MagicMock(spec=Response)
    response.status_code = status_code
    response.text = body
    response.content = body.encode("utf-8")
    return response


@pytest.fixture
def two_servers_payload() -> dict:
    """Success payload with two servers holding 5 and 7 players."""
    return {
        "Success": True,
        "Cooldown": 25,
        "Servers": [
            {"ID": 1001, "Port": 7777, "Players": "5/20"},
            {"ID": 1002, "Port": 7778, "Players": "7/30"},
        ],
    }


@pytest.fixture
def full_server_payload() -> dict:
    """Success payload with every server field populated."""
    return {
        "Success": True,
        "Cooldown": 10,
        "Servers": [
            {
                "ID": 4242,
                "Port": 7777,
                "LastOnline": "2024-03-15",
                "Players": "2/25",
                "PlayersList": [
                    "76561198000000001@steam",
                    {"ID": "76561198000000002@steam", "Nickname": "Dr. Bright"},
                ],
                "Info": "V2VsY29tZSB0byB0aGUgRmFjaWxpdHk=",
                "Pastebin": "abc123",
                "Version": "13.5.1",
                "Online": True,
                "FF": False,
                "WL": True,
                "Modded": True,
                "Mods": 3,
                "Suppress": False,
                "AutoSuppress": False,
            }
        ],
    }


@pytest.fixture
def error_payload() -> dict:
    """API-level failure payload."""
    return {"Success": False, "Error": "Invalid API key"}
