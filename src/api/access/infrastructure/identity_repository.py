"""Identity repository backed by the ``profiles`` and ``business_users`` tables."""

from __future__ import annotations

from typing import Any

from access.domain.value_objects import (
    BusinessAccountStatus,
    BusinessUser,
    Profile,
    ProfileRole,
    ProfileStatus,
)
from access.ports.exceptions import IdentityLookupError
from infrastructure.supabase import SupabaseClient, SupabaseError

PROFILE_COLUMNS = "role,status"
BUSINESS_USER_COLUMNS = (
    "id,business_account_id,is_active,"
    "business_accounts(id,status,subdomain,custom_domain)"
)


class SupabaseIdentityRepository:
    """Implements IIdentityRepository with REST table reads.

    Reads run with the visitor's access token so row-level security
    limits them to the visitor's own rows.
    """

    def __init__(self, client: SupabaseClient):
        self._client = client

    async def get_profile(
        self, user_id: str, access_token: str | None = None
    ) -> Profile | None:
        row = await self._single_row(
            "profiles", PROFILE_COLUMNS, {"id": user_id}, access_token
        )
        if row is None:
            return None

        try:
            role = ProfileRole(row.get("role"))
            status = ProfileStatus(row.get("status") or ProfileStatus.ACTIVE)
        except ValueError as e:
            raise IdentityLookupError(f"Unrecognised profile for {user_id}: {e}") from e
        return Profile(id=user_id, role=role, status=status)

    async def get_business_user(
        self, user_id: str, access_token: str | None = None
    ) -> BusinessUser | None:
        row = await self._single_row(
            "business_users",
            BUSINESS_USER_COLUMNS,
            {"auth_user_id": user_id},
            access_token,
        )
        if row is None:
            return None
        if not row.get("id") or not row.get("business_account_id"):
            raise IdentityLookupError(f"Malformed business user row for {user_id}")

        account = row.get("business_accounts") or {}
        if isinstance(account, list):
            account = account[0] if account else {}

        try:
            status = (
                BusinessAccountStatus(account["status"]) if account.get("status") else None
            )
        except ValueError as e:
            raise IdentityLookupError(
                f"Unrecognised business account status for {user_id}: {e}"
            ) from e

        return BusinessUser(
            id=str(row["id"]),
            business_account_id=str(row["business_account_id"]),
            is_active=bool(row.get("is_active")),
            account_status=status,
            account_subdomain=account.get("subdomain"),
            account_custom_domain=account.get("custom_domain"),
        )

    async def _single_row(
        self,
        table: str,
        columns: str,
        filters: dict[str, str],
        access_token: str | None,
    ) -> dict[str, Any] | None:
        """Fetch at most one row; more than one is treated as a lookup error."""
        try:
            rows = await self._client.select(
                table, columns, filters, access_token=access_token, limit=2
            )
        except SupabaseError as e:
            raise IdentityLookupError(f"Lookup in {table} failed: {e}") from e

        if not rows:
            return None
        if len(rows) > 1:
            raise IdentityLookupError(f"Lookup in {table} matched more than one row")
        if not isinstance(rows[0], dict):
            raise IdentityLookupError(f"Malformed row returned from {table}")
        return rows[0]
