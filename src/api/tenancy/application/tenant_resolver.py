"""Tenant resolution from the request hostname."""

from __future__ import annotations

from dataclasses import dataclass

from shared_kernel.middleware.tenant_context import HostClassification, TenantContext
from tenancy.application.observability import (
    DefaultTenantResolutionProbe,
    TenantResolutionProbe,
)
from tenancy.domain.hostnames import is_platform_host, is_subdomain_pattern
from tenancy.ports.exceptions import BusinessLookupError
from tenancy.ports.repositories import IBusinessDirectory


@dataclass(frozen=True)
class TenantResolution:
    """Result of classifying one hostname.

    Attributes:
        classification: How the hostname relates to the platform.
        tenant: The owning business, when the directory found one.
        subdomain_pattern: Whether the host has the ``<label>.<platform>``
            shape, independently of whether a business was found.
    """

    classification: HostClassification
    tenant: TenantContext | None = None
    subdomain_pattern: bool = False

    @property
    def requires_isolation(self) -> bool:
        """Whether the hostname looks tenant-owned and must be isolated."""
        return self.tenant is not None or self.subdomain_pattern


class TenantResolver:
    """Classifies hostnames and looks up the business that owns them.

    The platform hostname is injected so tests and deployments can
    substitute it freely.
    """

    def __init__(
        self,
        platform_hostname: str,
        directory: IBusinessDirectory,
        probe: TenantResolutionProbe | None = None,
    ):
        self._platform_hostname = platform_hostname.lower()
        self._directory = directory
        self._probe = probe or DefaultTenantResolutionProbe()

    @property
    def platform_hostname(self) -> str:
        return self._platform_hostname

    async def resolve(
        self,
        hostname: str,
        probe: TenantResolutionProbe | None = None,
    ) -> TenantResolution:
        """Classify ``hostname`` and resolve its tenant.

        Platform hostnames never hit the directory. Any other hostname is
        looked up as-is; a failed lookup counts as "not found".

        Args:
            hostname: Raw Host header value, port included when present.
            probe: Request-scoped probe overriding the default one.
        """
        probe = probe or self._probe
        hostname = hostname.lower()

        if is_platform_host(hostname, self._platform_hostname):
            probe.platform_host(hostname=hostname)
            return TenantResolution(classification=HostClassification.PLATFORM)

        tenant: TenantContext | None = None
        try:
            tenant = await self._directory.find_by_domain(hostname)
        except BusinessLookupError as e:
            probe.tenant_lookup_failed(hostname=hostname, error=e)

        if tenant is not None:
            probe.tenant_identified(
                hostname=hostname,
                business_id=tenant.business_id,
                business_name=tenant.business_name,
            )
        else:
            probe.tenant_not_found(hostname=hostname)

        subdomain_pattern = is_subdomain_pattern(hostname, self._platform_hostname)
        if subdomain_pattern:
            classification = HostClassification.SUBDOMAIN
        elif tenant is not None:
            classification = HostClassification.CUSTOM_DOMAIN
        else:
            classification = HostClassification.UNKNOWN

        return TenantResolution(
            classification=classification,
            tenant=tenant,
            subdomain_pattern=subdomain_pattern,
        )
