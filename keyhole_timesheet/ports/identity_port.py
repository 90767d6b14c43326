"""Identity port — who is asking for a timesheet.

Sign-in and session issuance live outside the engine; it only consumes the
resulting credential.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

SHERPA_PROVIDER = "keyhole"


class UnauthenticatedError(Exception):
    """No valid Sherpa identity. Callers should redirect to sign-in, not retry."""


@dataclass(frozen=True)
class SherpaIdentity:
    """Opaque bearer credential plus account id for the Sherpa API."""

    token: str
    account_id: str
    session_id: str | None = None
    provider: str = SHERPA_PROVIDER

    @property
    def is_sherpa(self) -> bool:
        return self.provider == SHERPA_PROVIDER and bool(self.token and self.account_id)


def require_sherpa_identity(identity: SherpaIdentity | None) -> SherpaIdentity:
    """Return *identity* if it can call Sherpa, else raise UnauthenticatedError."""
    if identity is None or not identity.is_sherpa:
        raise UnauthenticatedError("A signed-in Keyhole (Sherpa) identity is required")
    return identity


class IdentityPort(Protocol):
    """Abstract source of the current caller's identity."""

    async def current_identity(self) -> SherpaIdentity | None: ...
