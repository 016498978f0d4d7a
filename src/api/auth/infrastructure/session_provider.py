"""Session provider backed by the hosted auth REST API."""

from __future__ import annotations

from typing import Any

from auth.ports.exceptions import SessionProviderError, SessionRejectedError
from infrastructure.supabase import (
    SupabaseAuthError,
    SupabaseClient,
    SupabaseError,
)
from shared_kernel.auth import AuthIdentity


class SupabaseSessionProvider:
    """Implements ISessionProvider on top of SupabaseClient."""

    def __init__(self, client: SupabaseClient):
        self._client = client

    async def get_user(self, access_token: str) -> AuthIdentity:
        try:
            user = await self._client.get_user(access_token)
        except SupabaseAuthError as e:
            raise SessionRejectedError(str(e)) from e
        except SupabaseError as e:
            raise SessionProviderError(str(e)) from e

        user_id = user.get("id") if isinstance(user, dict) else None
        if not user_id:
            raise SessionRejectedError("Provider returned a user without id")

        claims = {key: value for key, value in user.items() if key not in ("id", "email")}
        return AuthIdentity(id=str(user_id), email=user.get("email"), claims=claims)

    async def refresh(self, refresh_token: str) -> dict[str, Any]:
        try:
            session = await self._client.refresh_session(refresh_token)
        except SupabaseAuthError as e:
            raise SessionRejectedError(str(e)) from e
        except SupabaseError as e:
            # The token endpoint answers 400 for invalid/used refresh tokens
            if e.status_code == 400:
                raise SessionRejectedError(str(e)) from e
            raise SessionProviderError(str(e)) from e

        if not isinstance(session, dict):
            raise SessionProviderError("Provider returned a malformed session")
        return session
