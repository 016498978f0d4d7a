"""Unit test fixtures with mocked dependencies."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest
from pydantic import SecretStr

from infrastructure.settings import SupabaseSettings
from infrastructure.supabase import SupabaseClient
from infrastructure.supabase.observability import SupabaseClientProbe
from shared_kernel.middleware.tenant_context import TenantContext, ThemeColors

Handler = Callable[[httpx.Request], httpx.Response]


@pytest.fixture
def supabase_settings() -> SupabaseSettings:
    """Provide test provider settings."""
    return SupabaseSettings(
        url="https://abcd.supabase.co",
        anon_key=SecretStr("anon-key"),
        timeout_seconds=2.0,
    )


@pytest.fixture
def make_supabase_client(
    supabase_settings: SupabaseSettings,
) -> Callable[[Handler], SupabaseClient]:
    """Build a SupabaseClient whose HTTP calls are answered by ``handler``."""

    def _make(handler: Handler) -> SupabaseClient:
        http_client = httpx.AsyncClient(transport=httpx.MockTransport(handler))
        return SupabaseClient(
            supabase_settings,
            http_client=http_client,
            probe=MagicMock(spec=SupabaseClientProbe),
        )

    return _make


@pytest.fixture
def acme_tenant() -> TenantContext:
    """Provide the tenant owning acme.example.test."""
    return TenantContext(
        business_id="biz-acme",
        business_name="Acme Hotels",
        brand_name="Acme",
        logo_url="https://cdn.example.test/acme.png",
        colors=ThemeColors(primary="#112233", secondary="#445566", accent="#778899"),
        subdomain="acme",
        custom_domain="book.acme.test",
    )
