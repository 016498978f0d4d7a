"""Tenant context value objects for resolved tenant identification.

This module contains the pure value objects that represent a resolved
tenant (white-label business account) for the current request. They are
framework-agnostic and contain no lookup logic, making them safe for the
shared kernel.

The actual resolution logic (hostname classification, database lookup,
theme extraction) lives in the tenancy bounded context.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

BUSINESS_ID_HEADER = "x-business-id"
BUSINESS_NAME_HEADER = "x-business-name"
BRAND_NAME_HEADER = "x-brand-name"
LOGO_URL_HEADER = "x-logo-url"
PRIMARY_COLOR_HEADER = "x-primary-color"
SECONDARY_COLOR_HEADER = "x-secondary-color"
ACCENT_COLOR_HEADER = "x-accent-color"
CUSTOM_DOMAIN_HEADER = "x-custom-domain"

TENANT_HEADERS = (
    BUSINESS_ID_HEADER,
    BUSINESS_NAME_HEADER,
    BRAND_NAME_HEADER,
    LOGO_URL_HEADER,
    PRIMARY_COLOR_HEADER,
    SECONDARY_COLOR_HEADER,
    ACCENT_COLOR_HEADER,
    CUSTOM_DOMAIN_HEADER,
)


class HostClassification(StrEnum):
    """How the request hostname relates to the platform.

    PLATFORM: the operator's own canonical hostname.
    SUBDOMAIN: ``<label>.<platform-hostname>``, tenant-owned by pattern.
    CUSTOM_DOMAIN: a foreign hostname that resolved to a business account.
    UNKNOWN: a foreign hostname with no matching business account.
    """

    PLATFORM = "platform"
    SUBDOMAIN = "subdomain"
    CUSTOM_DOMAIN = "custom-domain"
    UNKNOWN = "unknown"

    @property
    def is_tenant_owned(self) -> bool:
        """Whether the hostname looks like it belongs to a tenant."""
        return self in (HostClassification.SUBDOMAIN, HostClassification.CUSTOM_DOMAIN)


@dataclass(frozen=True)
class ThemeColors:
    """The three accent colors of a tenant theme, as ``#RRGGBB`` strings."""

    primary: str
    secondary: str
    accent: str


@dataclass(frozen=True)
class TenantContext:
    """Resolved tenant context for the current request.

    This is a shared kernel value object carried on ``request.state`` so
    downstream rendering can read tenant branding by attribute instead of
    by raw header name.

    Attributes:
        business_id: The owning business account identifier.
        business_name: Legal/display name of the business.
        brand_name: White-label brand name (falls back to business_name).
        logo_url: Brand logo URL, empty when unset.
        colors: Theme accent colors with defaults applied.
        subdomain: Platform-assigned subdomain label, if known.
        custom_domain: Verified custom domain, if any.
    """

    business_id: str
    business_name: str
    brand_name: str
    logo_url: str
    colors: ThemeColors
    subdomain: str | None = None
    custom_domain: str | None = None

    def as_headers(self) -> dict[str, str]:
        """Render the branding as response headers for external consumers."""
        return {
            BUSINESS_ID_HEADER: self.business_id,
            BUSINESS_NAME_HEADER: self.business_name,
            BRAND_NAME_HEADER: self.brand_name,
            LOGO_URL_HEADER: self.logo_url,
            PRIMARY_COLOR_HEADER: self.colors.primary,
            SECONDARY_COLOR_HEADER: self.colors.secondary,
            ACCENT_COLOR_HEADER: self.colors.accent,
            CUSTOM_DOMAIN_HEADER: "true",
        }
