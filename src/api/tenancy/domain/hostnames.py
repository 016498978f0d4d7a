"""Hostname rules for platform, subdomain and custom-domain requests.

Also carries the subdomain/domain utilities used when businesses are
provisioned, so every hostname rule lives in one place.
"""

from __future__ import annotations

import re

_SUBDOMAIN_PATTERN = re.compile(r"^[a-z0-9]([a-z0-9-]{0,61}[a-z0-9])?$", re.IGNORECASE)
_DOMAIN_PATTERN = re.compile(
    r"^(?:[a-z0-9](?:[a-z0-9-]{0,61}[a-z0-9])?\.)+[a-z0-9][a-z0-9-]{0,61}[a-z0-9]$",
    re.IGNORECASE,
)
_NON_ALPHANUMERIC = re.compile(r"[^a-z0-9]+")

RESERVED_SUBDOMAINS = frozenset(
    {
        "www",
        "api",
        "app",
        "admin",
        "customer",
        "vendor",
        "mail",
        "ftp",
        "localhost",
        "staging",
        "dev",
        "test",
        "demo",
    }
)


def strip_port(hostname: str) -> str:
    """Drop a ``:port`` suffix ("acme.localhost:3001" -> "acme.localhost")."""
    return hostname.split(":")[0]


def is_platform_host(hostname: str, platform_hostname: str) -> bool:
    """Whether ``hostname`` is the platform itself, with or without a port."""
    return hostname == platform_hostname or hostname.startswith(f"{platform_hostname}:")


def is_subdomain_pattern(hostname: str, platform_hostname: str) -> bool:
    """Whether ``hostname`` has the ``<label>.<platform>`` shape.

    Purely syntactic; the label may not belong to any business.
    """
    bare = strip_port(hostname)
    return bare != platform_hostname and bare.endswith(f".{platform_hostname}")


def is_development_host(hostname: str, development_hosts: list[str]) -> bool:
    """Whether ``hostname`` is a local development host or a subdomain of one."""
    bare = strip_port(hostname)
    return any(bare == host or bare.endswith(f".{host}") for host in development_hosts)


def generate_subdomain(business_name: str) -> str:
    """Derive a DNS-safe subdomain label from a business name.

    Example:
        >>> generate_subdomain("Acme Hotel & Resort")
        'acme-hotel-resort'
    """
    label = _NON_ALPHANUMERIC.sub("-", business_name.lower().strip()).strip("-")
    return label[:63].rstrip("-")


def is_valid_domain(domain: str) -> bool:
    return bool(_DOMAIN_PATTERN.match(domain))


def extract_subdomain(domain: str) -> str:
    """Return the first label of ``domain``."""
    return domain.split(".")[0]


def is_reserved_subdomain(subdomain: str) -> bool:
    return subdomain.lower() in RESERVED_SUBDOMAINS


def is_valid_subdomain(subdomain: str) -> bool:
    return bool(_SUBDOMAIN_PATTERN.match(subdomain)) and not is_reserved_subdomain(subdomain)


def build_subdomain_url(subdomain: str, platform_hostname: str, is_production: bool) -> str:
    """Public URL of a tenant subdomain ("https://acme.example.com")."""
    scheme = "https" if is_production else "http"
    return f"{scheme}://{subdomain}.{platform_hostname}"
