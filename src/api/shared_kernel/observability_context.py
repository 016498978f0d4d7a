"""Observation context for domain-oriented observability.

Observation contexts collect and manage contextual metadata for instrumentation,
following the Domain Oriented Observability pattern.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class ObservationContext:
    """Immutable context containing metadata for observability.

    Captures request-scoped metadata that should be included with all
    instrumentation events emitted while handling a single edge request.

    Attributes:
        request_id: Unique identifier for the current request.
        hostname: The Host header the request arrived on.
        path: The request path.
        user_id: Authenticated identity (if resolved).
        business_id: Resolved tenant business account (if any).
        extra: Additional contextual metadata.

    Example:
        context = ObservationContext(
            request_id="req-123",
            hostname="acme.infinia.example",
            path="/business/dashboard",
        )
        probe = DefaultTenantResolutionProbe().with_context(context)
    """

    request_id: str | None = None
    hostname: str | None = None
    path: str | None = None
    user_id: str | None = None
    business_id: str | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def as_dict(self) -> dict[str, Any]:
        """Convert context to a dictionary for logging.

        Only includes non-None values to keep logs clean.
        """
        result: dict[str, Any] = {}
        if self.request_id is not None:
            result["request_id"] = self.request_id
        if self.hostname is not None:
            result["hostname"] = self.hostname
        if self.path is not None:
            result["path"] = self.path
        if self.user_id is not None:
            result["user_id"] = self.user_id
        if self.business_id is not None:
            result["business_id"] = self.business_id
        result.update(self.extra)
        return result

    def with_user(self, user_id: str) -> ObservationContext:
        """Create a new context with the authenticated user set."""
        return ObservationContext(
            request_id=self.request_id,
            hostname=self.hostname,
            path=self.path,
            user_id=user_id,
            business_id=self.business_id,
            extra=self.extra,
        )

    def with_business(self, business_id: str) -> ObservationContext:
        """Create a new context with the resolved tenant set."""
        return ObservationContext(
            request_id=self.request_id,
            hostname=self.hostname,
            path=self.path,
            user_id=self.user_id,
            business_id=business_id,
            extra=self.extra,
        )

    def with_extra(self, **kwargs: Any) -> ObservationContext:
        """Create a new context with additional metadata."""
        new_extra = {**self.extra, **kwargs}
        return ObservationContext(
            request_id=self.request_id,
            hostname=self.hostname,
            path=self.path,
            user_id=self.user_id,
            business_id=self.business_id,
            extra=new_extra,
        )
