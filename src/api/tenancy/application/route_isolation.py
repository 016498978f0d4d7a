"""Route isolation for tenant-owned hostnames.

A tenant's branded hostname may only render that tenant's business
portal. Everything else is redirected to the portal entry point; signup
is only offered on the platform's own domain.
"""

from __future__ import annotations

from shared_kernel.middleware.decisions import RouteDecision
from tenancy.application.observability import (
    DefaultRouteIsolationProbe,
    RouteIsolationProbe,
)
from tenancy.application.tenant_resolver import TenantResolution
from tenancy.domain.hostnames import is_development_host
from tenancy.domain.routing import (
    BUSINESS_LOGIN_PATH,
    BUSINESS_SIGNUP_PREFIX,
    is_allowed_on_tenant_domain,
    path_has_prefix,
    tenant_entry_path,
)


class RouteIsolationGuard:
    """Applies the tenant hostname rules, first match wins:

    1. No business resolved: let local development hosts through (outside
       production only), serve the not-found page itself, otherwise
       redirect to the not-found page.
    2. ``/``: redirect to the portal entry point.
    3. Signup paths: redirect to the business login.
    4. Paths outside the allow-list: redirect to the portal entry point.
    5. Anything else continues to the role guard.
    """

    def __init__(
        self,
        allowed_path_prefixes: list[str],
        development_hosts: list[str],
        is_production: bool,
        business_not_found_path: str,
        probe: RouteIsolationProbe | None = None,
    ):
        self._allowed_path_prefixes = list(allowed_path_prefixes)
        self._development_hosts = list(development_hosts)
        self._is_production = is_production
        self._business_not_found_path = business_not_found_path
        self._probe = probe or DefaultRouteIsolationProbe()

    def evaluate(
        self,
        resolution: TenantResolution,
        hostname: str,
        path: str,
        is_authenticated: bool,
        probe: RouteIsolationProbe | None = None,
    ) -> RouteDecision:
        """Decide whether a request on ``hostname`` may reach ``path``."""
        if not resolution.requires_isolation:
            return RouteDecision.allow()

        probe = probe or self._probe

        if resolution.tenant is None:
            if not self._is_production and is_development_host(
                hostname, self._development_hosts
            ):
                probe.unknown_tenant_allowed_in_development(hostname=hostname)
            elif path_has_prefix(path, self._business_not_found_path):
                return RouteDecision.allow()
            else:
                probe.unknown_tenant_redirected(hostname=hostname)
                return RouteDecision.redirect(
                    self._business_not_found_path, reason="business_not_found"
                )

        if path == "/":
            return RouteDecision.redirect(
                tenant_entry_path(is_authenticated), reason="tenant_root"
            )

        if path.startswith(BUSINESS_SIGNUP_PREFIX):
            probe.signup_blocked(hostname=hostname, path=path)
            return RouteDecision.redirect(BUSINESS_LOGIN_PATH, reason="tenant_signup_blocked")

        if not is_allowed_on_tenant_domain(path, self._allowed_path_prefixes):
            probe.path_not_allowed(hostname=hostname, path=path)
            return RouteDecision.redirect(
                tenant_entry_path(is_authenticated), reason="tenant_path_not_allowed"
            )

        return RouteDecision.allow()
