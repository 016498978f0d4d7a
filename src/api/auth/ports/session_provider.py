"""Session provider protocol (port)."""

from __future__ import annotations

from typing import Any, Protocol, runtime_checkable

from shared_kernel.auth import AuthIdentity


@runtime_checkable
class ISessionProvider(Protocol):
    """Hosted auth operations needed to validate and refresh a session."""

    async def get_user(self, access_token: str) -> AuthIdentity:
        """Return the identity owning ``access_token``.

        Raises:
            SessionRejectedError: If the token is not accepted.
            SessionProviderError: If the provider is unavailable.
        """
        ...

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        """Exchange ``refresh_token`` for a new session payload.

        Returns:
            The full session payload to store in the session cookie.

        Raises:
            SessionRejectedError: If the refresh token is not accepted.
            SessionProviderError: If the provider is unavailable.
        """
        ...
