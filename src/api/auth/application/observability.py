"""Domain probe for session refresh operations.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to resolving the visitor's session.
Every failure event is a degrade-to-anonymous, never an error response.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SessionRefresherProbe(Protocol):
    """Domain probe for session refresh operations."""

    def session_absent(self) -> None:
        """Record that the request carried no session cookie."""
        ...

    def session_cookie_unreadable(self, error: Exception) -> None:
        """Record that the session cookie could not be decoded."""
        ...

    def session_expired_without_refresh_token(self) -> None:
        """Record that an expired session could not be refreshed."""
        ...

    def session_refreshed(self) -> None:
        """Record that an expired access token was refreshed."""
        ...

    def session_rejected(self, reason: str) -> None:
        """Record that the provider rejected the session."""
        ...

    def provider_unavailable(self, error: Exception) -> None:
        """Record that the auth provider could not be reached."""
        ...

    def user_resolved(self, user_id: str) -> None:
        """Record that the session resolved to an identity."""
        ...

    def with_context(self, context: ObservationContext) -> SessionRefresherProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSessionRefresherProbe:
    """Default implementation of SessionRefresherProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSessionRefresherProbe:
        """Create a new probe with observation context bound."""
        return DefaultSessionRefresherProbe(logger=self._logger, context=context)

    def session_absent(self) -> None:
        self._logger.debug("session_absent", **self._get_context_kwargs())

    def session_cookie_unreadable(self, error: Exception) -> None:
        self._logger.warning(
            "session_cookie_unreadable",
            error=str(error),
            **self._get_context_kwargs(),
        )

    def session_expired_without_refresh_token(self) -> None:
        self._logger.warning(
            "session_expired_without_refresh_token",
            **self._get_context_kwargs(),
        )

    def session_refreshed(self) -> None:
        self._logger.info("session_refreshed", **self._get_context_kwargs())

    def session_rejected(self, reason: str) -> None:
        self._logger.warning(
            "session_rejected",
            reason=reason,
            **self._get_context_kwargs(),
        )

    def provider_unavailable(self, error: Exception) -> None:
        self._logger.error(
            "session_provider_unavailable",
            error=str(error),
            error_type=type(error).__name__,
            message="Treating visitor as anonymous",
            **self._get_context_kwargs(),
        )

    def user_resolved(self, user_id: str) -> None:
        self._logger.debug(
            "session_user_resolved",
            user_id=user_id,
            **self._get_context_kwargs(),
        )
