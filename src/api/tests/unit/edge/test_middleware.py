"""Unit tests for EdgeMiddleware.

Runs the full edge pipeline in front of a minimal FastAPI app, with the
hosted provider replaced by mocks.
"""

from __future__ import annotations

import base64
from collections.abc import Callable
from unittest.mock import AsyncMock

import pytest
from fastapi import FastAPI, Request
from fastapi.testclient import TestClient
from starlette.requests import Request as StarletteRequest

from access.application import RoleGuard
from access.domain import BusinessAccountStatus, BusinessUser, Profile, ProfileRole
from access.ports import IIdentityRepository
from auth.application import SessionRefresher
from auth.domain import encode_session
from auth.ports.exceptions import SessionProviderError
from auth.ports.session_provider import ISessionProvider
from currency.application import CurrencyPreferenceResolver
from currency.domain.value_objects import SUPPORTED_CURRENCY_CODES
from edge.middleware import EdgeMiddleware, request_hostname
from edge.pipeline import EdgePipeline
from shared_kernel.auth import AuthIdentity
from tenancy.application import RouteIsolationGuard, TenantResolver
from tenancy.ports.repositories import IBusinessDirectory

PLATFORM = "infinia.example"
SESSION_COOKIE = "sb-abcd-auth-token"
SESSION = encode_session({"access_token": "access-1", "expires_at": 4102444800})


@pytest.fixture
def mock_directory(acme_tenant) -> AsyncMock:
    directory = AsyncMock(spec=IBusinessDirectory)

    async def find_by_domain(hostname: str):
        return acme_tenant if hostname == "book.acme.test" else None

    directory.find_by_domain.side_effect = find_by_domain
    return directory


@pytest.fixture
def mock_identities() -> AsyncMock:
    repository = AsyncMock(spec=IIdentityRepository)
    repository.get_profile.return_value = None
    repository.get_business_user.return_value = None
    return repository


@pytest.fixture
def mock_sessions() -> AsyncMock:
    provider = AsyncMock(spec=ISessionProvider)
    provider.get_user.return_value = AuthIdentity(id="user-1")
    return provider


def _pipeline(
    directory, identities, sessions, is_production: bool, platform: str
) -> EdgePipeline:
    return EdgePipeline(
        currency=CurrencyPreferenceResolver(
            cookie_name="preferred-currency",
            cookie_max_age=31536000,
            enabled_codes=list(SUPPORTED_CURRENCY_CODES),
            default_code="AED",
            secure_cookie=is_production,
        ),
        session=SessionRefresher(
            provider=sessions,
            cookie_name=SESSION_COOKIE,
            secure_cookie=is_production,
        ),
        tenants=TenantResolver(platform_hostname=platform, directory=directory),
        isolation=RouteIsolationGuard(
            allowed_path_prefixes=["/business", "/api/business", "/business-not-found"],
            development_hosts=["localhost", "127.0.0.1"],
            is_production=is_production,
            business_not_found_path="/business-not-found",
        ),
        role_guard=RoleGuard(identities),
    )


@pytest.fixture
def make_client(
    mock_directory, mock_identities, mock_sessions
) -> Callable[..., TestClient]:
    """Build a TestClient for ``host`` with optional session and cookies."""

    def _make(
        host: str = PLATFORM,
        signed_in: bool = False,
        cookies: dict[str, str] | None = None,
        is_production: bool = True,
        platform: str = PLATFORM,
    ) -> TestClient:
        app = FastAPI()
        app.add_middleware(
            EdgeMiddleware,
            pipeline=_pipeline(
                mock_directory, mock_identities, mock_sessions, is_production, platform
            ),
        )

        @app.get("/{path:path}")
        def page(path: str, request: Request) -> dict:
            edge = getattr(request.state, "edge", None)
            if edge is None:
                return {"classification": None}
            tenant = request.state.tenant_context
            return {
                "classification": str(edge.classification),
                "currency": edge.currency,
                "user": edge.identity.id if edge.identity else None,
                "business_id": tenant.business_id if tenant else None,
            }

        jar = dict(cookies or {})
        if signed_in:
            jar[SESSION_COOKIE] = SESSION
        return TestClient(app, base_url=f"http://{host}", cookies=jar, follow_redirects=False)

    return _make


class TestPlatformRequests:
    """Tests for requests on the platform hostname."""

    def test_public_page_is_forwarded(self, make_client, mock_directory):
        response = make_client(cookies={"preferred-currency": "USD"}).get("/vehicles")

        assert response.status_code == 200
        assert response.json()["classification"] == "platform"
        assert "x-business-id" not in response.headers
        mock_directory.find_by_domain.assert_not_called()

    def test_platform_with_port_is_platform(self, make_client, mock_directory):
        response = make_client(host=f"{PLATFORM}:3001").get("/vehicles")

        assert response.json()["classification"] == "platform"
        mock_directory.find_by_domain.assert_not_called()

    def test_currency_cookie_set_from_accept_language(self, make_client):
        response = make_client(is_production=False).get(
            "/vehicles", headers={"accept-language": "fr-FR"}
        )

        assert response.json()["currency"] == "EUR"
        assert response.cookies.get("preferred-currency") == "EUR"
        set_cookie = response.headers["set-cookie"].lower()
        assert "max-age=31536000" in set_cookie
        assert "samesite=lax" in set_cookie
        assert "httponly" not in set_cookie
        assert "secure" not in set_cookie

    def test_valid_currency_cookie_is_not_rewritten(self, make_client):
        response = make_client(cookies={"preferred-currency": "GBP"}).get(
            "/vehicles", headers={"accept-language": "fr-FR"}
        )

        assert response.json()["currency"] == "GBP"
        assert "set-cookie" not in response.headers

    def test_anonymous_admin_goes_to_admin_login(self, make_client):
        response = make_client().get("/admin/dashboard")

        assert response.status_code == 307
        assert response.headers["location"] == f"http://{PLATFORM}/admin/login"

    def test_redirect_still_sets_currency_cookie(self, make_client):
        response = make_client(is_production=False).get(
            "/admin/dashboard", headers={"accept-language": "en-GB"}
        )

        assert response.status_code == 307
        assert response.cookies.get("preferred-currency") == "GBP"

    def test_non_admin_goes_to_unauthorized(self, make_client, mock_identities):
        mock_identities.get_profile.return_value = Profile(id="user-1", role=ProfileRole.CUSTOMER)

        response = make_client(signed_in=True).get("/admin/dashboard")

        assert response.status_code == 307
        assert response.headers["location"].endswith("/unauthorized")
        mock_identities.get_profile.assert_awaited_once_with("user-1", "access-1")

    def test_account_redirect_remembers_path(self, make_client):
        response = make_client().get("/account/bookings")

        assert response.headers["location"] == (
            f"http://{PLATFORM}/login?redirect=%2Faccount%2Fbookings"
        )

    def test_signed_in_identity_reaches_page(self, make_client):
        response = make_client(signed_in=True).get("/account")

        assert response.status_code == 200
        assert response.json()["user"] == "user-1"

    def test_non_finite_session_expiry_does_not_fail_the_request(self, make_client):
        text = '{"access_token":"access-1","expires_at":1e400}'
        value = "base64-" + base64.urlsafe_b64encode(text.encode()).decode().rstrip("=")

        response = make_client(cookies={SESSION_COOKIE: value}).get("/account")

        assert response.status_code == 200
        assert response.json()["user"] == "user-1"

    def test_auth_outage_degrades_to_anonymous(self, make_client, mock_sessions):
        mock_sessions.get_user.side_effect = SessionProviderError("timeout")

        response = make_client(signed_in=True).get("/account")

        assert response.status_code == 307
        assert "/login" in response.headers["location"]

    def test_static_assets_skip_the_edge(self, make_client, mock_sessions):
        client = make_client(signed_in=True)

        response = client.get("/static/app.css")

        assert response.json() == {"classification": None}

        mock_sessions.get_user.assert_not_called()


class TestTenantRequests:
    """Tests for requests on tenant-owned hostnames."""

    def test_branding_headers_on_forwarded_response(self, make_client, acme_tenant):
        response = make_client(host="book.acme.test").get("/business/login")

        assert response.status_code == 200
        assert response.json()["classification"] == "custom-domain"
        assert response.json()["business_id"] == "biz-acme"
        for name, value in acme_tenant.as_headers().items():
            assert response.headers[name] == value

    def test_root_goes_to_login_when_anonymous(self, make_client):
        response = make_client(host="book.acme.test").get("/")

        assert response.status_code == 307
        assert response.headers["location"] == "http://book.acme.test/business/login"
        assert "x-business-id" not in response.headers

    def test_root_goes_to_dashboard_when_signed_in(self, make_client):
        response = make_client(host="book.acme.test", signed_in=True).get("/")

        assert response.headers["location"] == "http://book.acme.test/business/dashboard"

    @pytest.mark.parametrize("signed_in", [True, False])
    def test_signup_goes_to_login(self, make_client, signed_in):
        response = make_client(host="book.acme.test", signed_in=signed_in).get(
            "/business/signup"
        )

        assert response.headers["location"] == "http://book.acme.test/business/login"

    def test_platform_pages_are_isolated(self, make_client):
        response = make_client(host="book.acme.test").get("/admin/dashboard")

        assert response.headers["location"] == "http://book.acme.test/business/login"

    def test_own_business_user_reaches_dashboard(self, make_client, mock_identities):
        mock_identities.get_business_user.return_value = BusinessUser(
            id="bu-1",
            business_account_id="biz-acme",
            is_active=True,
            account_status=BusinessAccountStatus.ACTIVE,
        )

        response = make_client(host="book.acme.test", signed_in=True).get("/business/dashboard")

        assert response.status_code == 200

    def test_other_business_user_is_unauthorized(self, make_client, mock_identities):
        mock_identities.get_business_user.return_value = BusinessUser(
            id="bu-2",
            business_account_id="biz-other",
            is_active=True,
            account_status=BusinessAccountStatus.ACTIVE,
        )

        response = make_client(host="book.acme.test", signed_in=True).get("/business/dashboard")

        assert response.headers["location"] == "http://book.acme.test/unauthorized"

    def test_unknown_subdomain_in_production_is_not_found(self, make_client):
        response = make_client(host=f"ghost.{PLATFORM}").get("/business/login")

        assert response.headers["location"] == f"http://ghost.{PLATFORM}/business-not-found"

    def test_not_found_page_is_served(self, make_client):
        response = make_client(host=f"ghost.{PLATFORM}").get("/business-not-found")

        assert response.status_code == 200

    def test_unknown_local_subdomain_allowed_in_development(self, make_client):
        client = make_client(
            host="ghost.localhost:3001", is_production=False, platform="localhost"
        )

        response = client.get("/business/login")

        assert response.status_code == 200

    def test_identical_requests_get_identical_decisions(self, make_client):
        client = make_client(host="book.acme.test")

        first = client.get("/vehicles")
        second = client.get("/vehicles")

        assert first.status_code == second.status_code == 307
        assert first.headers["location"] == second.headers["location"]


def _request(headers: list[tuple[bytes, bytes]], server: tuple[str, int]) -> StarletteRequest:
    return StarletteRequest(
        {
            "type": "http",
            "method": "GET",
            "scheme": "http",
            "path": "/business/login",
            "query_string": b"",
            "headers": headers,
            "server": server,
        }
    )


class TestRequestHostname:
    """Tests for reading the hostname a request was addressed to."""

    def test_uses_host_header(self):
        request = _request([(b"host", b"book.acme.test:8080")], ("10.0.0.1", 8000))

        assert request_hostname(request) == "book.acme.test:8080"

    def test_falls_back_to_server_address_without_host_header(self):
        request = _request([], ("book.acme.test", 80))

        assert request_hostname(request) == "book.acme.test"

    def test_fallback_keeps_non_default_port(self):
        request = _request([], ("book.acme.test", 3001))

        assert request_hostname(request) == "book.acme.test:3001"
