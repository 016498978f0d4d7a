"""Domain probe for hosted provider HTTP calls."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class SupabaseClientProbe(Protocol):
    """Domain probe for calls to the hosted database and auth provider."""

    def request_completed(self, method: str, path: str, status_code: int) -> None:
        """Record that a provider call returned successfully."""
        ...

    def request_rejected(self, method: str, path: str, status_code: int, message: str) -> None:
        """Record that the provider answered with an error status."""
        ...

    def request_failed(self, method: str, path: str, error: Exception) -> None:
        """Record that a provider call failed at the transport level."""
        ...

    def response_malformed(self, path: str, status_code: int) -> None:
        """Record that a successful response did not carry JSON."""
        ...

    def with_context(self, context: ObservationContext) -> SupabaseClientProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultSupabaseClientProbe:
    """Default implementation of SupabaseClientProbe using structlog."""

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

    def with_context(self, context: ObservationContext) -> DefaultSupabaseClientProbe:
        """Create a new probe with observation context bound."""
        return DefaultSupabaseClientProbe(logger=self._logger, context=context)

    def request_completed(self, method: str, path: str, status_code: int) -> None:
        self._logger.debug(
            "supabase_request_completed",
            method=method,
            path=path,
            status_code=status_code,
            **self._get_context_kwargs(),
        )

    def request_rejected(self, method: str, path: str, status_code: int, message: str) -> None:
        self._logger.warning(
            "supabase_request_rejected",
            method=method,
            path=path,
            status_code=status_code,
            message=message,
            **self._get_context_kwargs(),
        )

    def request_failed(self, method: str, path: str, error: Exception) -> None:
        self._logger.error(
            "supabase_request_failed",
            method=method,
            path=path,
            error=str(error),
            error_type=type(error).__name__,
            **self._get_context_kwargs(),
        )

    def response_malformed(self, path: str, status_code: int) -> None:
        self._logger.error(
            "supabase_response_malformed",
            path=path,
            status_code=status_code,
            **self._get_context_kwargs(),
        )
