"""Protected path prefixes and role landing pages.

Prefix checks match the raw path, so "/admin" protects "/admin-tools"
as well as "/admin/users".
"""

from __future__ import annotations

from access.domain.value_objects import ProfileRole
from shared_kernel.middleware.paths import (
    BUSINESS_DASHBOARD_PATH,
    BUSINESS_LOGIN_PATH,
    UNAUTHORIZED_PATH,
)

ADMIN_PREFIX = "/admin"
ADMIN_LOGIN_PATH = "/admin/login"
ADMIN_DASHBOARD_PATH = "/admin/dashboard"

LOGIN_PATH = "/login"
LOGIN_REDIRECT_PARAM = "redirect"

ACCOUNT_PREFIXES = ("/account", "/become-vendor", "/vendor-application")
BECOME_VENDOR_PREFIX = "/become-vendor"

VENDOR_PREFIX = "/vendor"
VENDOR_APPLICATION_PREFIX = "/vendor-application"

BUSINESS_PREFIX = "/business"
PUBLIC_BUSINESS_PATHS = (
    "/business-not-found",
    "/business/login",
    "/business/signup",
    "/business/signup/success",
    "/business/forgot-password",
    "/business/reset-password",
)

ROLE_DASHBOARDS: dict[ProfileRole, str] = {
    ProfileRole.CUSTOMER: "/account",
    ProfileRole.VENDOR: "/vendor/dashboard",
    ProfileRole.ADMIN: ADMIN_DASHBOARD_PATH,
}

__all__ = [
    "ACCOUNT_PREFIXES",
    "ADMIN_DASHBOARD_PATH",
    "ADMIN_LOGIN_PATH",
    "BUSINESS_DASHBOARD_PATH",
    "BUSINESS_LOGIN_PATH",
    "LOGIN_PATH",
    "LOGIN_REDIRECT_PARAM",
    "ROLE_DASHBOARDS",
    "UNAUTHORIZED_PATH",
    "is_account_area",
    "is_admin_area",
    "is_become_vendor",
    "is_business_portal",
    "is_vendor_area",
]


def is_admin_area(path: str) -> bool:
    return path.startswith(ADMIN_PREFIX) and not path.startswith(ADMIN_LOGIN_PATH)


def is_account_area(path: str) -> bool:
    return path.startswith(ACCOUNT_PREFIXES)


def is_become_vendor(path: str) -> bool:
    return path.startswith(BECOME_VENDOR_PREFIX)


def is_vendor_area(path: str) -> bool:
    return path.startswith(VENDOR_PREFIX) and not path.startswith(VENDOR_APPLICATION_PREFIX)


def is_business_portal(path: str) -> bool:
    """Business paths that need a signed-in business user."""
    return path.startswith(BUSINESS_PREFIX) and not path.startswith(PUBLIC_BUSINESS_PATHS)
