"""Tenancy domain layer: hostname, branding and routing rules."""

from tenancy.domain.branding import (
    DEFAULT_THEME_COLORS,
    css_variables,
    hex_to_hsl,
    is_valid_hex_color,
    theme_colors_from_config,
)
from tenancy.domain.hostnames import (
    build_subdomain_url,
    extract_subdomain,
    generate_subdomain,
    is_development_host,
    is_platform_host,
    is_reserved_subdomain,
    is_subdomain_pattern,
    is_valid_domain,
    is_valid_subdomain,
    strip_port,
)
from tenancy.domain.routing import (
    BUSINESS_DASHBOARD_PATH,
    BUSINESS_LOGIN_PATH,
    BUSINESS_SIGNUP_PREFIX,
    is_allowed_on_tenant_domain,
    path_has_prefix,
    tenant_entry_path,
)

__all__ = [
    "BUSINESS_DASHBOARD_PATH",
    "BUSINESS_LOGIN_PATH",
    "BUSINESS_SIGNUP_PREFIX",
    "DEFAULT_THEME_COLORS",
    "build_subdomain_url",
    "css_variables",
    "extract_subdomain",
    "generate_subdomain",
    "hex_to_hsl",
    "is_allowed_on_tenant_domain",
    "is_development_host",
    "is_platform_host",
    "is_reserved_subdomain",
    "is_subdomain_pattern",
    "is_valid_domain",
    "is_valid_hex_color",
    "is_valid_subdomain",
    "path_has_prefix",
    "strip_port",
    "tenant_entry_path",
    "theme_colors_from_config",
]
