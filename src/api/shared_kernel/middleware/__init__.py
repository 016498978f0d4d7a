"""Shared middleware value objects for cross-cutting concerns.

This module contains the framework-agnostic types the edge middleware
passes between bounded contexts: the resolved tenant context, the
per-request context, and the routing decision returned by each guard.
"""

from shared_kernel.middleware.decisions import RouteDecision
from shared_kernel.middleware.request_context import RequestContext
from shared_kernel.middleware.tenant_context import (
    HostClassification,
    TenantContext,
    ThemeColors,
)

__all__ = [
    "HostClassification",
    "RequestContext",
    "RouteDecision",
    "TenantContext",
    "ThemeColors",
]
