"""Routing decisions produced by the edge guards."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class RouteDecision:
    """Outcome of a single guard evaluation.

    A decision either allows the request to continue (``redirect_to`` is
    None) or terminates it with a redirect to a same-origin path.

    Attributes:
        redirect_to: Target path for a redirect, or None to continue.
        reason: Short machine-readable reason, used for logging.
        query: Query parameters to put on the redirect target.
    """

    redirect_to: str | None = None
    reason: str = "allowed"
    query: dict[str, str] = field(default_factory=dict)

    @property
    def is_redirect(self) -> bool:
        return self.redirect_to is not None

    @classmethod
    def allow(cls) -> RouteDecision:
        return cls()

    @classmethod
    def redirect(
        cls,
        path: str,
        reason: str,
        query: dict[str, str] | None = None,
    ) -> RouteDecision:
        return cls(redirect_to=path, reason=reason, query=dict(query or {}))
