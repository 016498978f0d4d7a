"""Paths servable on tenant hostnames and the tenant entry points."""

from __future__ import annotations

from shared_kernel.middleware.paths import BUSINESS_DASHBOARD_PATH, BUSINESS_LOGIN_PATH

BUSINESS_SIGNUP_PREFIX = "/business/signup"


def path_has_prefix(path: str, prefix: str) -> bool:
    """Segment-aware prefix match: "/business" matches "/business/x", not "/businessx"."""
    prefix = prefix.rstrip("/") or "/"
    if prefix == "/":
        return path == "/"
    return path == prefix or path.startswith(f"{prefix}/")


def is_allowed_on_tenant_domain(path: str, allowed_prefixes: list[str]) -> bool:
    return any(path_has_prefix(path, prefix) for prefix in allowed_prefixes)


def tenant_entry_path(is_authenticated: bool) -> str:
    """Where a tenant hostname sends visitors who land outside the portal."""
    return BUSINESS_DASHBOARD_PATH if is_authenticated else BUSINESS_LOGIN_PATH
