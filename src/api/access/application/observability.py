"""Domain probes for role-based access checks.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class AccessGuardProbe(Protocol):
    """Domain probe for role guard decisions."""

    def login_required(self, path: str, redirect_to: str) -> None:
        """Record that an anonymous visitor hit a protected path."""
        ...

    def access_denied(self, path: str, user_id: str, reason: str) -> None:
        """Record that an authenticated visitor lacks the required role."""
        ...

    def identity_lookup_failed(self, path: str, user_id: str, error: Exception) -> None:
        """Record that the profile or business user lookup failed."""
        ...

    def login_forwarded(self, path: str, user_id: str, redirect_to: str) -> None:
        """Record that a signed-in visitor was sent past a login page."""
        ...

    def with_context(self, context: ObservationContext) -> AccessGuardProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultAccessGuardProbe:
    """Default implementation of AccessGuardProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultAccessGuardProbe:
        """Create a new probe with observation context bound."""
        return DefaultAccessGuardProbe(logger=self._logger, context=context)

    def login_required(self, path: str, redirect_to: str) -> None:
        self._logger.info(
            "access_login_required",
            requested_path=path,
            redirect_to=redirect_to,
            **self._get_context_kwargs(),
        )

    def access_denied(self, path: str, user_id: str, reason: str) -> None:
        self._logger.warning(
            "access_denied",
            requested_path=path,
            identity=user_id,
            reason=reason,
            **self._get_context_kwargs(),
        )

    def identity_lookup_failed(self, path: str, user_id: str, error: Exception) -> None:
        self._logger.error(
            "access_identity_lookup_failed",
            requested_path=path,
            identity=user_id,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def login_forwarded(self, path: str, user_id: str, redirect_to: str) -> None:
        self._logger.debug(
            "access_login_forwarded",
            requested_path=path,
            identity=user_id,
            redirect_to=redirect_to,
            **self._get_context_kwargs(),
        )
