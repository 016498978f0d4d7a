"""Domain probe for application startup and lifecycle events.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events during application initialization and shutdown.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class StartupProbe(Protocol):
    """Domain probe for application startup operations."""

    def edge_pipeline_ready(self, platform_hostname: str, environment: str) -> None:
        """Record that the edge pipeline was built and is serving requests."""
        ...

    def http_client_closed(self) -> None:
        """Record that the shared provider connection pool was closed."""
        ...

    def with_context(self, context: ObservationContext) -> StartupProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultStartupProbe:
    """Default implementation of StartupProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultStartupProbe:
        """Create a new probe with observation context bound."""
        return DefaultStartupProbe(logger=self._logger, context=context)

    def edge_pipeline_ready(self, platform_hostname: str, environment: str) -> None:
        """Record that the edge pipeline was built and is serving requests."""
        self._logger.info(
            "edge_pipeline_ready",
            platform_hostname=platform_hostname,
            environment=environment,
            **self._get_context_kwargs(),
        )

    def http_client_closed(self) -> None:
        """Record that the shared provider connection pool was closed."""
        self._logger.info(
            "http_client_closed",
            **self._get_context_kwargs(),
        )
