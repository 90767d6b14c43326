"""Shared test fixtures.

Settings are built explicitly (never read from the environment) and the
time-tracking port is a MagicMock with AsyncMock methods.
"""

import pytest
from unittest.mock import AsyncMock, MagicMock

from keyhole_timesheet.config import Settings
from keyhole_timesheet.ports.identity_port import SherpaIdentity


@pytest.fixture
def settings():
    """Settings pointing at fake Sherpa hosts with a short timeout."""
    return Settings(
        SHERPA_API_URL="https://sherpa.test/sherpa",
        SHERPA_ENTRIES_API_URL="https://sherpa.test/api",
        SHERPA_TIMEOUT_SECONDS=0.5,
    )


@pytest.fixture
def identity():
    """A signed-in Sherpa identity."""
    return SherpaIdentity(token="tok-123", account_id="jdoe", session_id="sess-1")


@pytest.fixture
def time_tracking():
    """A TimeTrackingPort double with no clients by default."""
    port = MagicMock()
    port.list_clients = AsyncMock(return_value=[])
    port.list_weekly_entries = AsyncMock(return_value=[])
    port.list_daily_entries = AsyncMock(return_value=[])
    return port
