"""Tenancy application layer."""

from tenancy.application.observability import (
    DefaultRouteIsolationProbe,
    DefaultTenantResolutionProbe,
    RouteIsolationProbe,
    TenantResolutionProbe,
)
from tenancy.application.route_isolation import RouteIsolationGuard
from tenancy.application.tenant_resolver import TenantResolution, TenantResolver

__all__ = [
    "DefaultRouteIsolationProbe",
    "DefaultTenantResolutionProbe",
    "RouteIsolationGuard",
    "RouteIsolationProbe",
    "TenantResolution",
    "TenantResolutionProbe",
    "TenantResolver",
]
