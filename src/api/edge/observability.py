"""Domain probe for edge request outcomes.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class EdgeProbe(Protocol):
    """Domain probe for the outcome of each edge request."""

    def request_redirected(self, redirect_to: str, reason: str) -> None:
        """Record that the request was terminated with a redirect."""
        ...

    def request_forwarded(self, classification: str, currency: str | None) -> None:
        """Record that the request continues to the application."""
        ...

    def with_context(self, context: ObservationContext) -> EdgeProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultEdgeProbe:
    """Default implementation of EdgeProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultEdgeProbe:
        """Create a new probe with observation context bound."""
        return DefaultEdgeProbe(logger=self._logger, context=context)

    def request_redirected(self, redirect_to: str, reason: str) -> None:
        self._logger.info(
            "edge_request_redirected",
            redirect_to=redirect_to,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def request_forwarded(self, classification: str, currency: str | None) -> None:
        self._logger.debug(
            "edge_request_forwarded",
            classification=classification,
            currency=currency,
            **self._get_context_kwargs(),
        )
