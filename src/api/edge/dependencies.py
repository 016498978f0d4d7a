"""Wiring of the edge pipeline from application settings."""

from __future__ import annotations

import httpx

from access.application import RoleGuard
from access.infrastructure import SupabaseIdentityRepository
from auth.application import SessionRefresher
from auth.infrastructure import SupabaseSessionProvider
from currency.application import CurrencyPreferenceResolver
from edge.pipeline import EdgePipeline
from infrastructure.settings import (
    get_currency_settings,
    get_site_settings,
    get_supabase_settings,
    get_tenancy_settings,
)
from infrastructure.supabase import SupabaseClient
from tenancy.application import RouteIsolationGuard, TenantResolver
from tenancy.infrastructure import SupabaseBusinessDirectory


def build_edge_pipeline(http_client: httpx.AsyncClient | None = None) -> EdgePipeline:
    """Build an EdgePipeline backed by the hosted provider.

    Args:
        http_client: Shared connection pool. When omitted each provider
            call opens its own short-lived client.
    """
    site = get_site_settings()
    currency = get_currency_settings()
    tenancy = get_tenancy_settings()
    supabase = get_supabase_settings()

    client = SupabaseClient(supabase, http_client=http_client)

    return EdgePipeline(
        currency=CurrencyPreferenceResolver(
            cookie_name=currency.cookie_name,
            cookie_max_age=currency.cookie_max_age,
            enabled_codes=currency.enabled_codes,
            default_code=currency.default_code,
            secure_cookie=site.is_production,
        ),
        session=SessionRefresher(
            provider=SupabaseSessionProvider(client),
            cookie_name=supabase.session_cookie_name,
            secure_cookie=site.is_production,
        ),
        tenants=TenantResolver(
            platform_hostname=site.platform_hostname,
            directory=SupabaseBusinessDirectory(client),
        ),
        isolation=RouteIsolationGuard(
            allowed_path_prefixes=tenancy.allowed_path_prefixes,
            development_hosts=tenancy.development_hosts,
            is_production=site.is_production,
            business_not_found_path=tenancy.business_not_found_path,
        ),
        role_guard=RoleGuard(SupabaseIdentityRepository(client)),
    )
