"""
Keyhole Timesheet — Timesheet Assembly.

Resolves a reference date to its pay period, fans out to Sherpa for every
client's weekly summaries and (best-effort) daily detail, and fans back in
to a TimesheetView.

Failure policy:
- client list or any client's weekly summary fails -> the whole build fails,
  so totals are never understated;
- a client's daily detail fails -> that client just loses drill-down.

Provider-agnostic: depends on TimeTrackingPort, not on a specific client.
"""

from __future__ import annotations

import asyncio
import logging
from datetime import date
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from keyhole_timesheet.config import Settings
from keyhole_timesheet.core.calendar_dates import format_date_param, parse_date_param
from keyhole_timesheet.core.entry_aggregator import (
    merge_and_filter_weeks,
    parse_clients,
    parse_daily_entries,
    total_hours,
)
from keyhole_timesheet.core.pay_period import (
    PayPeriod,
    get_pay_period,
    get_period_navigation,
)
from keyhole_timesheet.data.models import ClientEntries, SherpaClient, SherpaEntry, TimesheetView
from keyhole_timesheet.ports.identity_port import require_sherpa_identity
from keyhole_timesheet.ports.time_tracking_port import UpstreamTimeout

if TYPE_CHECKING:
    from keyhole_timesheet.ports.identity_port import SherpaIdentity
    from keyhole_timesheet.ports.time_tracking_port import TimeTrackingPort

logger = logging.getLogger(__name__)


class TimesheetService:
    """Builds per-period timesheets from a time-tracking provider."""

    def __init__(
        self,
        time_tracking: TimeTrackingPort,
        settings: Settings | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._time_tracking = time_tracking
        self._settings = settings or Settings()
        self._today = today

    def resolve_pay_period(self, reference_date: str | None = None) -> PayPeriod:
        """Pay period for a yyyy-mm-dd reference date, or for today if omitted.

        Raises MalformedDateError for an unparseable reference date.
        """
        reference = parse_date_param(reference_date) if reference_date else self._today()
        return get_pay_period(reference)

    async def build_timesheet(
        self,
        identity: SherpaIdentity | None,
        reference_date: str | None = None,
    ) -> TimesheetView:
        """Assemble the timesheet for the period containing *reference_date*."""
        identity = require_sherpa_identity(identity)
        pay_period = self.resolve_pay_period(reference_date)
        start = format_date_param(pay_period.start)
        end = format_date_param(pay_period.end)
        logger.info("Building timesheet for %s..%s", start, end)

        clients = parse_clients(
            await self._call("clients", self._time_tracking.list_clients(identity))
        )

        all_client_entries = await asyncio.gather(*(
            self._fetch_client_entries(identity, client, pay_period, start, end)
            for client in clients
        ))

        client_entries = [ce for ce in all_client_entries if ce.entries]
        grand_total = sum((ce.total_hours for ce in client_entries), 0.0)

        logger.info(
            "Timesheet %s..%s: %d of %d clients with entries, %.2f hours",
            start, end, len(client_entries), len(clients), grand_total,
        )
        return TimesheetView(
            client_entries=client_entries,
            pay_period=pay_period,
            grand_total=grand_total,
            navigation=get_period_navigation(pay_period, self._today()),
        )

    # -----------------------------------------------------------------------
    # Per-client fetches
    # -----------------------------------------------------------------------

    async def _fetch_client_entries(
        self,
        identity: SherpaIdentity,
        client: SherpaClient,
        pay_period: PayPeriod,
        start: str,
        end: str,
    ) -> ClientEntries:
        weekly_payload, daily_entries = await asyncio.gather(
            self._call(
                f"weekly entries for client {client.id}",
                self._time_tracking.list_weekly_entries(identity, client.id, start, end),
            ),
            self._fetch_daily_entries(identity, client, start, end),
        )

        entries = merge_and_filter_weeks(weekly_payload, pay_period.start, pay_period.end)
        return ClientEntries(
            client=client,
            entries=entries,
            daily_entries=daily_entries,
            total_hours=total_hours(entries),
        )

    async def _fetch_daily_entries(
        self,
        identity: SherpaIdentity,
        client: SherpaClient,
        start: str,
        end: str,
    ) -> list[SherpaEntry] | None:
        """Best-effort drill-down: any failure yields None for this client only."""
        try:
            payload = await self._call(
                f"daily entries for client {client.id}",
                self._time_tracking.list_daily_entries(identity, client.id, start, end),
            )
            return parse_daily_entries(payload)
        except Exception as exc:
            logger.warning(
                "Daily entries unavailable for client %s (%s): %s",
                client.id, client.name, exc,
            )
            return None

    async def _call(self, what: str, request: Awaitable[Any]) -> Any:
        """Await one upstream request under the configured deadline."""
        timeout = self._settings.SHERPA_TIMEOUT_SECONDS
        try:
            return await asyncio.wait_for(request, timeout=timeout)
        except asyncio.TimeoutError as exc:
            logger.error("Sherpa request for %s timed out after %ss", what, timeout)
            raise UpstreamTimeout(f"Sherpa API request timed out ({what})") from exc
