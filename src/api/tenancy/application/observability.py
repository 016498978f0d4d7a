"""Domain probes for tenant resolution and route isolation.

Following Domain-Oriented Observability patterns, these probes capture
domain-significant events for white-label hostname handling.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class TenantResolutionProbe(Protocol):
    """Domain probe for tenant resolution operations."""

    def platform_host(self, hostname: str) -> None:
        """Record that the request targets the platform domain."""
        ...

    def tenant_identified(self, hostname: str, business_id: str, business_name: str) -> None:
        """Record that a business owns the request hostname."""
        ...

    def tenant_not_found(self, hostname: str) -> None:
        """Record that no active business owns the request hostname."""
        ...

    def tenant_lookup_failed(self, hostname: str, error: Exception) -> None:
        """Record that the business lookup could not be performed."""
        ...

    def with_context(self, context: ObservationContext) -> TenantResolutionProbe:
        """Create a new probe with observation context bound."""
        ...


class RouteIsolationProbe(Protocol):
    """Domain probe for tenant route isolation decisions."""

    def unknown_tenant_allowed_in_development(self, hostname: str) -> None:
        """Record that a tenant-less hostname was let through locally."""
        ...

    def unknown_tenant_redirected(self, hostname: str) -> None:
        """Record that a tenant-less hostname was sent to the not-found page."""
        ...

    def signup_blocked(self, hostname: str, path: str) -> None:
        """Record that signup was attempted on a tenant hostname."""
        ...

    def path_not_allowed(self, hostname: str, path: str) -> None:
        """Record that a non-portal path was requested on a tenant hostname."""
        ...

    def with_context(self, context: ObservationContext) -> RouteIsolationProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultTenantResolutionProbe:
    """Default implementation of TenantResolutionProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultTenantResolutionProbe:
        """Create a new probe with observation context bound."""
        return DefaultTenantResolutionProbe(logger=self._logger, context=context)

    def platform_host(self, hostname: str) -> None:
        self._logger.debug(
            "tenant_platform_host",
            host=hostname,
            **self._get_context_kwargs(),
        )

    def tenant_identified(self, hostname: str, business_id: str, business_name: str) -> None:
        self._logger.info(
            "tenant_identified",
            host=hostname,
            tenant_business_id=business_id,
            business_name=business_name,
            **self._get_context_kwargs(),
        )

    def tenant_not_found(self, hostname: str) -> None:
        self._logger.warning(
            "tenant_not_found",
            host=hostname,
            **self._get_context_kwargs(),
        )

    def tenant_lookup_failed(self, hostname: str, error: Exception) -> None:
        self._logger.error(
            "tenant_lookup_failed",
            host=hostname,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )


class DefaultRouteIsolationProbe:
    """Default implementation of RouteIsolationProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(self, context: ObservationContext) -> DefaultRouteIsolationProbe:
        """Create a new probe with observation context bound."""
        return DefaultRouteIsolationProbe(logger=self._logger, context=context)

    def unknown_tenant_allowed_in_development(self, hostname: str) -> None:
        self._logger.warning(
            "tenant_unknown_allowed_in_development",
            host=hostname,
            message="No business owns this host; allowed because the host is local "
            "and the environment is not production",
            **self._get_context_kwargs(),
        )

    def unknown_tenant_redirected(self, hostname: str) -> None:
        self._logger.warning(
            "tenant_unknown_redirected",
            host=hostname,
            **self._get_context_kwargs(),
        )

    def signup_blocked(self, hostname: str, path: str) -> None:
        self._logger.info(
            "tenant_signup_blocked",
            host=hostname,
            requested_path=path,
            **self._get_context_kwargs(),
        )

    def path_not_allowed(self, hostname: str, path: str) -> None:
        self._logger.info(
            "tenant_path_not_allowed",
            host=hostname,
            requested_path=path,
            **self._get_context_kwargs(),
        )
