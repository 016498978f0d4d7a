"""Unit tests for hostname classification and subdomain utilities."""

from __future__ import annotations

import pytest

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

PLATFORM = "infinia.example"


class TestHostClassificationRules:
    """Tests for platform, subdomain and development host checks."""

    @pytest.mark.parametrize("host", [PLATFORM, f"{PLATFORM}:3001"])
    def test_platform_host_with_or_without_port(self, host):
        assert is_platform_host(host, PLATFORM) is True

    def test_lookalike_is_not_platform(self):
        assert is_platform_host(f"{PLATFORM}.evil.test", PLATFORM) is False

    @pytest.mark.parametrize("host", [f"acme.{PLATFORM}", f"acme.{PLATFORM}:3001"])
    def test_subdomain_pattern(self, host):
        assert is_subdomain_pattern(host, PLATFORM) is True

    @pytest.mark.parametrize("host", [PLATFORM, f"acme{PLATFORM}", "book.acme.test"])
    def test_not_subdomain_pattern(self, host):
        assert is_subdomain_pattern(host, PLATFORM) is False

    @pytest.mark.parametrize(
        ("host", "expected"),
        [
            ("localhost:3001", True),
            ("acme.localhost:3001", True),
            ("127.0.0.1", True),
            ("acme.example.test", False),
        ],
    )
    def test_development_hosts(self, host, expected):
        assert is_development_host(host, ["localhost", "127.0.0.1"]) is expected

    def test_strip_port(self):
        assert strip_port("acme.localhost:3001") == "acme.localhost"


class TestSubdomainUtilities:
    """Tests for the subdomain provisioning helpers."""

    def test_generate_subdomain(self):
        assert generate_subdomain("  Acme Hotel & Resort!  ") == "acme-hotel-resort"

    def test_generate_subdomain_caps_length(self):
        label = generate_subdomain("a" * 100)
        assert len(label) == 63

    def test_reserved_subdomains(self):
        assert is_reserved_subdomain("Admin") is True
        assert is_valid_subdomain("admin") is False

    @pytest.mark.parametrize("label", ["acme", "acme-hotels", "a1"])
    def test_valid_subdomains(self, label):
        assert is_valid_subdomain(label) is True

    @pytest.mark.parametrize("label", ["-acme", "acme-", "acme_hotels", ""])
    def test_invalid_subdomains(self, label):
        assert is_valid_subdomain(label) is False

    @pytest.mark.parametrize(
        ("domain", "expected"),
        [("book.acme.com", True), ("acme", False), ("acme..com", False)],
    )
    def test_is_valid_domain(self, domain, expected):
        assert is_valid_domain(domain) is expected

    def test_extract_subdomain(self):
        assert extract_subdomain("acme.infinia.example") == "acme"

    def test_build_subdomain_url(self):
        assert build_subdomain_url("acme", PLATFORM, True) == f"https://acme.{PLATFORM}"
        assert build_subdomain_url("acme", "localhost:3001", False) == (
            "http://acme.localhost:3001"
        )
