"""Repository protocols (ports) for the tenancy bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from shared_kernel.middleware.tenant_context import TenantContext


@runtime_checkable
class IBusinessDirectory(Protocol):
    """Read access to white-label business accounts by hostname."""

    async def find_by_domain(self, hostname: str) -> TenantContext | None:
        """Find the active business serving ``hostname``.

        The hostname is passed through unmodified (port included); the
        database decides which subdomains and verified custom domains match.

        Args:
            hostname: Raw Host header value.

        Returns:
            The tenant context, or None if no active business owns the host.

        Raises:
            BusinessLookupError: If the directory cannot be queried.
        """
        ...
