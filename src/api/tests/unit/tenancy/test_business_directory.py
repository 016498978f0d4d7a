"""Unit tests for SupabaseBusinessDirectory."""

from __future__ import annotations

import json

import httpx
import pytest

from tenancy.domain.branding import DEFAULT_THEME_COLORS
from tenancy.infrastructure import SupabaseBusinessDirectory
from tenancy.ports.exceptions import BusinessLookupError


class TestFindByDomain:
    """Tests for the domain lookup RPC adapter."""

    @pytest.mark.asyncio
    async def test_maps_row_to_tenant_context(self, make_supabase_client):
        seen: list[httpx.Request] = []
        row = {
            "id": "biz-1",
            "business_name": "Acme Hotels",
            "brand_name": "Acme",
            "logo_url": "https://cdn.example.test/logo.png",
            "subdomain": "acme",
            "custom_domain": "book.acme.test",
            "theme_config": {
                "accent": {"primary": "#111111", "secondary": "#222222", "tertiary": "#333333"}
            },
        }

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[row])

        directory = SupabaseBusinessDirectory(make_supabase_client(handler))
        tenant = await directory.find_by_domain("book.acme.test")

        assert json.loads(seen[0].content) == {"p_domain": "book.acme.test"}
        assert tenant is not None
        assert tenant.business_id == "biz-1"
        assert tenant.brand_name == "Acme"
        assert tenant.colors.primary == "#111111"
        assert tenant.colors.accent == "#333333"
        assert tenant.custom_domain == "book.acme.test"

    @pytest.mark.asyncio
    async def test_missing_branding_falls_back(self, make_supabase_client):
        row = {"id": "biz-1", "business_name": "Acme Hotels", "theme_config": None}
        directory = SupabaseBusinessDirectory(
            make_supabase_client(lambda request: httpx.Response(200, json=[row]))
        )

        tenant = await directory.find_by_domain("acme.test")

        assert tenant is not None
        assert tenant.brand_name == "Acme Hotels"
        assert tenant.logo_url == ""
        assert tenant.colors == DEFAULT_THEME_COLORS

    @pytest.mark.asyncio
    async def test_no_rows_is_not_found(self, make_supabase_client):
        directory = SupabaseBusinessDirectory(
            make_supabase_client(lambda request: httpx.Response(200, json=[]))
        )

        assert await directory.find_by_domain("unknown.test") is None

    @pytest.mark.asyncio
    async def test_provider_error_is_lookup_error(self, make_supabase_client):
        directory = SupabaseBusinessDirectory(
            make_supabase_client(lambda request: httpx.Response(500))
        )

        with pytest.raises(BusinessLookupError):
            await directory.find_by_domain("acme.test")

    @pytest.mark.asyncio
    async def test_row_without_id_is_lookup_error(self, make_supabase_client):
        directory = SupabaseBusinessDirectory(
            make_supabase_client(lambda request: httpx.Response(200, json=[{"name": "x"}]))
        )

        with pytest.raises(BusinessLookupError):
            await directory.find_by_domain("acme.test")

    @pytest.mark.asyncio
    async def test_non_json_body_is_lookup_error(self, make_supabase_client):
        directory = SupabaseBusinessDirectory(
            make_supabase_client(
                lambda request: httpx.Response(200, text="<html>gateway</html>")
            )
        )

        with pytest.raises(BusinessLookupError):
            await directory.find_by_domain("book.acme.test")
