"""Unit tests for SupabaseIdentityRepository."""

from __future__ import annotations

import httpx
import pytest

from access.domain import BusinessAccountStatus, ProfileRole, ProfileStatus
from access.infrastructure import SupabaseIdentityRepository
from access.ports import IdentityLookupError


def _rows(rows):
    return lambda request: httpx.Response(200, json=rows)


class TestGetProfile:
    """Tests for profile lookups."""

    @pytest.mark.asyncio
    async def test_reads_profile_with_user_token(self, make_supabase_client):
        seen: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[{"role": "vendor", "status": "active"}])

        repository = SupabaseIdentityRepository(make_supabase_client(handler))
        profile = await repository.get_profile("user-1", "user-token")

        assert profile is not None
        assert profile.id == "user-1"
        assert profile.role == ProfileRole.VENDOR
        assert profile.status == ProfileStatus.ACTIVE
        assert seen[0].url.path == "/rest/v1/profiles"
        assert seen[0].url.params["id"] == "eq.user-1"
        assert seen[0].headers["authorization"] == "Bearer user-token"

    @pytest.mark.asyncio
    async def test_missing_status_counts_as_active(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(_rows([{"role": "admin", "status": None}]))
        )

        profile = await repository.get_profile("user-1")

        assert profile is not None
        assert profile.is_active is True

    @pytest.mark.asyncio
    async def test_no_row_is_none(self, make_supabase_client):
        repository = SupabaseIdentityRepository(make_supabase_client(_rows([])))
        assert await repository.get_profile("user-1") is None

    @pytest.mark.asyncio
    async def test_unknown_role_is_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(_rows([{"role": "superuser"}]))
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_profile("user-1")

    @pytest.mark.asyncio
    async def test_duplicate_rows_are_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(_rows([{"role": "admin"}, {"role": "customer"}]))
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_profile("user-1")

    @pytest.mark.asyncio
    async def test_provider_error_is_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(lambda request: httpx.Response(500))
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_profile("user-1")


    @pytest.mark.asyncio
    async def test_non_json_body_is_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(
                lambda request: httpx.Response(200, text="<html>gateway</html>")
            )
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_profile("user-1")


class TestGetBusinessUser:
    """Tests for business user lookups."""

    @pytest.mark.asyncio
    async def test_reads_business_user_with_account(self, make_supabase_client):
        seen: list[httpx.Request] = []
        row = {
            "id": "bu-1",
            "business_account_id": "biz-1",
            "is_active": True,
            "business_accounts": {
                "id": "biz-1",
                "status": "active",
                "subdomain": "acme",
                "custom_domain": None,
            },
        }

        def handler(request: httpx.Request) -> httpx.Response:
            seen.append(request)
            return httpx.Response(200, json=[row])

        repository = SupabaseIdentityRepository(make_supabase_client(handler))
        business_user = await repository.get_business_user("user-1")

        assert business_user is not None
        assert business_user.business_account_id == "biz-1"
        assert business_user.account_status == BusinessAccountStatus.ACTIVE
        assert business_user.account_is_active is True
        assert business_user.account_subdomain == "acme"
        assert seen[0].url.path == "/rest/v1/business_users"
        assert seen[0].url.params["auth_user_id"] == "eq.user-1"

    @pytest.mark.asyncio
    async def test_missing_account_is_not_active(self, make_supabase_client):
        row = {"id": "bu-1", "business_account_id": "biz-1", "is_active": True}
        repository = SupabaseIdentityRepository(make_supabase_client(_rows([row])))

        business_user = await repository.get_business_user("user-1")

        assert business_user is not None
        assert business_user.account_status is None
        assert business_user.account_is_active is False

    @pytest.mark.asyncio
    async def test_no_row_is_none(self, make_supabase_client):
        repository = SupabaseIdentityRepository(make_supabase_client(_rows([])))
        assert await repository.get_business_user("user-1") is None

    @pytest.mark.asyncio
    async def test_malformed_row_is_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(_rows([{"id": "bu-1"}]))
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_business_user("user-1")

    @pytest.mark.asyncio
    async def test_non_json_body_is_lookup_error(self, make_supabase_client):
        repository = SupabaseIdentityRepository(
            make_supabase_client(lambda request: httpx.Response(200, text=""))
        )

        with pytest.raises(IdentityLookupError):
            await repository.get_business_user("user-1")
