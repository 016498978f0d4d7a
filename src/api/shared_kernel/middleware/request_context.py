"""Per-request edge context.

A RequestContext is built fresh for every inbound request as the edge
middleware runs, attached to ``request.state.edge`` and discarded with the
response. It is never shared between requests.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from shared_kernel.auth import AuthIdentity
from shared_kernel.middleware.tenant_context import HostClassification, TenantContext


@dataclass(frozen=True)
class RequestContext:
    """What the edge learned about a request.

    Attributes:
        hostname: Raw Host header value (port included when present).
        path: Request path.
        currency: Resolved currency code.
        classification: Hostname classification.
        tenant: Resolved tenant, or None.
        identity: Authenticated identity, or None for anonymous visitors.
    """

    hostname: str
    path: str
    currency: str | None = None
    classification: HostClassification = HostClassification.PLATFORM
    tenant: TenantContext | None = None
    identity: AuthIdentity | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.identity is not None

    def with_currency(self, currency: str) -> RequestContext:
        return replace(self, currency=currency)

    def with_identity(self, identity: AuthIdentity | None) -> RequestContext:
        return replace(self, identity=identity)

    def with_tenant(
        self,
        classification: HostClassification,
        tenant: TenantContext | None,
    ) -> RequestContext:
        return replace(self, classification=classification, tenant=tenant)
