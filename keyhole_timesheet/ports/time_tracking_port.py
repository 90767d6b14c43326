"""Time-tracking port — abstract interface to the upstream Sherpa system.

Core modules depend on this protocol, never on a specific HTTP client.
Implementations return decoded JSON payloads; shape validation happens once,
in the entry aggregator.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from keyhole_timesheet.ports.identity_port import SherpaIdentity


class TimeTrackingError(Exception):
    """Raised when any time-tracking provider operation fails."""


class UpstreamError(TimeTrackingError):
    """Non-success status, transport failure or structurally invalid payload."""


class UpstreamTimeout(TimeTrackingError):
    """An upstream call exceeded its deadline. Safe for the caller to retry."""


class TimeTrackingPort(Protocol):
    """Abstract time-tracking interface used by core modules.

    Dates are yyyy-mm-dd strings produced by format_date_param.
    """

    async def list_clients(self, identity: SherpaIdentity) -> Any: ...

    async def list_weekly_entries(
        self, identity: SherpaIdentity, client_id: int, start_date: str, end_date: str
    ) -> Any: ...

    async def list_daily_entries(
        self, identity: SherpaIdentity, client_id: int, start_date: str, end_date: str
    ) -> Any: ...
