"""Identity adapter backed by configured credentials — implements IdentityPort.

Used by the command-line entry point, where there is no browser session:
SHERPA_TOKEN / SHERPA_USER_ID / SHERPA_JSESSIONID come from .env.
"""

from __future__ import annotations

import logging

from keyhole_timesheet.config import Settings
from keyhole_timesheet.ports.identity_port import SherpaIdentity

logger = logging.getLogger(__name__)


class EnvIdentityProvider:
    """Settings-backed implementation of IdentityPort."""

    def __init__(self, settings: Settings) -> None:
        self._settings = settings

    async def current_identity(self) -> SherpaIdentity | None:
        if not self._settings.SHERPA_TOKEN or not self._settings.SHERPA_USER_ID:
            logger.info("No Sherpa credentials configured")
            return None
        return SherpaIdentity(
            token=self._settings.SHERPA_TOKEN,
            account_id=self._settings.SHERPA_USER_ID,
            session_id=self._settings.SHERPA_JSESSIONID or None,
        )
