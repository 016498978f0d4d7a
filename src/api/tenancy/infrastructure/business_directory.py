"""Business directory backed by the ``get_business_by_custom_domain`` function."""

from __future__ import annotations

from typing import Any

from infrastructure.supabase import SupabaseClient, SupabaseError
from shared_kernel.middleware.tenant_context import TenantContext
from tenancy.domain.branding import theme_colors_from_config
from tenancy.ports.exceptions import BusinessLookupError

LOOKUP_FUNCTION = "get_business_by_custom_domain"


class SupabaseBusinessDirectory:
    """Implements IBusinessDirectory with a single RPC call.

    The database function only returns active businesses whose subdomain
    or verified custom domain matches the host.
    """

    def __init__(self, client: SupabaseClient):
        self._client = client

    async def find_by_domain(self, hostname: str) -> TenantContext | None:
        try:
            rows = await self._client.rpc(LOOKUP_FUNCTION, {"p_domain": hostname})
        except SupabaseError as e:
            raise BusinessLookupError(f"Business lookup failed for {hostname}: {e}") from e

        if not isinstance(rows, list) or not rows:
            return None
        if not isinstance(rows[0], dict) or not rows[0].get("id"):
            raise BusinessLookupError(f"Malformed business row for {hostname}")
        return _to_tenant_context(rows[0])


def _to_tenant_context(row: dict[str, Any]) -> TenantContext:
    business_name = row.get("business_name") or ""
    return TenantContext(
        business_id=str(row["id"]),
        business_name=business_name,
        brand_name=row.get("brand_name") or business_name,
        logo_url=row.get("logo_url") or "",
        colors=theme_colors_from_config(row.get("theme_config")),
        subdomain=row.get("subdomain"),
        custom_domain=row.get("custom_domain"),
    )
