"""Unit tests for CurrencyPreferenceResolver."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from currency.application import CurrencyPreferenceProbe, CurrencyPreferenceResolver
from currency.domain import CurrencySource
from currency.domain.value_objects import SUPPORTED_CURRENCY_CODES


@pytest.fixture
def mock_probe() -> MagicMock:
    return MagicMock(spec=CurrencyPreferenceProbe)


@pytest.fixture
def resolver(mock_probe: MagicMock) -> CurrencyPreferenceResolver:
    return CurrencyPreferenceResolver(
        cookie_name="preferred-currency",
        cookie_max_age=31536000,
        enabled_codes=list(SUPPORTED_CURRENCY_CODES),
        default_code="AED",
        secure_cookie=False,
        probe=mock_probe,
    )


class TestCurrencyPreferenceResolver:
    """Tests for the preference cookie lifecycle."""

    def test_missing_cookie_is_written_from_accept_language(
        self, resolver: CurrencyPreferenceResolver, mock_probe: MagicMock
    ):
        """fr-FR without a cookie should set the cookie to EUR."""
        preference = resolver.resolve(None, "fr-FR")

        assert preference.code == "EUR"
        assert preference.cookie is not None
        assert preference.cookie.name == "preferred-currency"
        assert preference.cookie.value == "EUR"
        assert preference.cookie.max_age == 31536000
        assert preference.cookie.path == "/"
        assert preference.cookie.same_site == "lax"
        assert preference.cookie.http_only is False
        mock_probe.cookie_missing.assert_called_once()
        mock_probe.currency_detected.assert_called_once_with(
            code="EUR", source=CurrencySource.BROWSER
        )

    def test_valid_cookie_is_left_untouched(
        self, resolver: CurrencyPreferenceResolver, mock_probe: MagicMock
    ):
        preference = resolver.resolve("USD", "fr-FR")

        assert preference.code == "USD"
        assert preference.source == CurrencySource.COOKIE
        assert preference.cookie is None
        mock_probe.cookie_missing.assert_not_called()

    def test_invalid_cookie_is_replaced(
        self, resolver: CurrencyPreferenceResolver, mock_probe: MagicMock
    ):
        preference = resolver.resolve("BTC", "en-GB")

        assert preference.cookie is not None
        assert preference.cookie.value == "GBP"
        mock_probe.cookie_rejected.assert_called_once_with(value="BTC")

    def test_unparseable_header_falls_back_to_default(
        self, resolver: CurrencyPreferenceResolver, mock_probe: MagicMock
    ):
        preference = resolver.resolve(None, ";;;q=,")

        assert preference.code == "AED"
        assert preference.source == CurrencySource.DEFAULT
        mock_probe.fell_back_to_default.assert_called_once()

    def test_secure_flag_follows_configuration(self, mock_probe: MagicMock):
        resolver = CurrencyPreferenceResolver(
            cookie_name="preferred-currency",
            cookie_max_age=60,
            enabled_codes=["AED"],
            default_code="AED",
            secure_cookie=True,
            probe=mock_probe,
        )

        preference = resolver.resolve(None, None)

        assert preference.cookie is not None
        assert preference.cookie.secure is True

    def test_resolution_is_idempotent(self, resolver: CurrencyPreferenceResolver):
        assert resolver.resolve(None, "de-DE") == resolver.resolve(None, "de-DE")
