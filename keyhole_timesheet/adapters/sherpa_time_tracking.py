"""Sherpa time-tracking adapter — implements TimeTrackingPort over HTTP.

All Sherpa-specific URLs, headers and status handling live here. Core
modules never import this directly; they depend on the TimeTrackingPort
protocol.

Returns decoded JSON untouched; payload validation belongs to the entry
aggregator. No retries: a failure surfaces as UpstreamError/UpstreamTimeout.
"""

from __future__ import annotations

import logging
from typing import Any

import httpx

from keyhole_timesheet.config import Settings
from keyhole_timesheet.ports.identity_port import SherpaIdentity
from keyhole_timesheet.ports.time_tracking_port import UpstreamError, UpstreamTimeout

logger = logging.getLogger(__name__)

_ACCEPT = "application/json, text/javascript, */*; q=0.01"


def _build_headers(identity: SherpaIdentity, with_token: bool = True) -> dict[str, str]:
    """Sherpa's XHR-style headers, plus token/userid and the session cookie."""
    headers = {
        "Accept": _ACCEPT,
        "X-Requested-With": "XMLHttpRequest",
    }
    if with_token:
        headers["token"] = identity.token
        headers["userid"] = identity.account_id
    if identity.session_id:
        headers["Cookie"] = f"JSESSIONID={identity.session_id}"
    return headers


class SherpaTimeTrackingAdapter:
    """Sherpa implementation of TimeTrackingPort."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def list_clients(self, identity: SherpaIdentity) -> Any:
        url = f"{self._settings.SHERPA_API_URL}/service/my/clients"
        return await self._get_json(url, _build_headers(identity))

    async def list_weekly_entries(
        self, identity: SherpaIdentity, client_id: int, start_date: str, end_date: str
    ) -> Any:
        # The week endpoint returns every week for the client; the
        # aggregator applies the start_date..end_date window.
        url = f"{self._settings.SHERPA_ENTRIES_API_URL}/service/my/week/client/{client_id}"
        logger.debug("Weekly entries for client %s (%s..%s)", client_id, start_date, end_date)
        return await self._get_json(url, _build_headers(identity, with_token=False))

    async def list_daily_entries(
        self, identity: SherpaIdentity, client_id: int, start_date: str, end_date: str
    ) -> Any:
        url = (
            f"{self._settings.SHERPA_API_URL}/service/my/week/client/{client_id}"
            f"/times/start/{start_date}/end/{end_date}"
        )
        return await self._get_json(url, _build_headers(identity))

    async def _get_json(self, url: str, headers: dict[str, str]) -> Any:
        try:
            async with httpx.AsyncClient(timeout=self._settings.SHERPA_TIMEOUT_SECONDS) as client:
                resp = await client.get(url, headers=headers)
        except httpx.TimeoutException as exc:
            logger.error("Sherpa API timeout GET %s", url)
            raise UpstreamTimeout("Sherpa API request timed out") from exc
        except httpx.HTTPError as exc:
            logger.error("Sherpa API transport error GET %s: %s", url, exc)
            raise UpstreamError(f"Sherpa API unreachable: {exc}") from exc

        if not resp.is_success:
            logger.error("Sherpa API error [%d] GET %s: %s", resp.status_code, url, resp.text)
            raise UpstreamError(f"Sherpa API error: {resp.status_code} {resp.reason_phrase}")

        try:
            return resp.json()
        except ValueError as exc:
            logger.error("Sherpa API returned non-JSON body for GET %s", url)
            raise UpstreamError("Sherpa API returned an invalid JSON body") from exc
