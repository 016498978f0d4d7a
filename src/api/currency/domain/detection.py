"""Currency detection from browser locales.

Maps the regions and languages of an Accept-Language header onto the
platform's supported currencies. All functions are pure and never raise on
malformed input.
"""

from __future__ import annotations

import re

from currency.domain.value_objects import (
    DEFAULT_CURRENCY_CODE,
    SUPPORTED_CURRENCY_CODES,
    CurrencySource,
    ResolvedCurrency,
)

_LOCALE_SEPARATOR = re.compile(r"[-_]")

COUNTRY_TO_CURRENCY: dict[str, str] = {
    # USD and dollarised territories
    "US": "USD",
    "AS": "USD",
    "EC": "USD",
    "SV": "USD",
    "GU": "USD",
    "MH": "USD",
    "FM": "USD",
    "MP": "USD",
    "PW": "USD",
    "PA": "USD",
    "PR": "USD",
    "TC": "USD",
    "VG": "USD",
    "VI": "USD",
    # Eurozone and euro users
    "AT": "EUR",
    "BE": "EUR",
    "HR": "EUR",
    "CY": "EUR",
    "EE": "EUR",
    "FI": "EUR",
    "FR": "EUR",
    "DE": "EUR",
    "GR": "EUR",
    "IE": "EUR",
    "IT": "EUR",
    "LV": "EUR",
    "LT": "EUR",
    "LU": "EUR",
    "MT": "EUR",
    "NL": "EUR",
    "PT": "EUR",
    "SK": "EUR",
    "SI": "EUR",
    "ES": "EUR",
    "AD": "EUR",
    "MC": "EUR",
    "SM": "EUR",
    "VA": "EUR",
    # Sterling
    "GB": "GBP",
    "UK": "GBP",
    "IM": "GBP",
    "JE": "GBP",
    "GG": "GBP",
    "AE": "AED",
    # Australian dollar
    "AU": "AUD",
    "CX": "AUD",
    "CC": "AUD",
    "HM": "AUD",
    "NF": "AUD",
    "KI": "AUD",
    "NR": "AUD",
    "TV": "AUD",
    "CA": "CAD",
    "CH": "CHF",
    "LI": "CHF",
    "SA": "SAR",
    "SG": "SGD",
    "IN": "INR",
    "JP": "JPY",
}

# Used when a locale carries no region, e.g. "fr" or "ar"
LANGUAGE_TO_CURRENCY: dict[str, str] = {
    "en": "USD",
    "de": "EUR",
    "fr": "EUR",
    "es": "EUR",
    "it": "EUR",
    "pt": "EUR",
    "nl": "EUR",
    "ar": "AED",
    "ja": "JPY",
    "hi": "INR",
    "zh": "USD",
}


def _parse_quality(raw: str | None) -> float:
    if raw is None:
        return 1.0
    try:
        return float(raw)
    except ValueError:
        return 0.0


def parse_accept_language(accept_language: str | None) -> list[str]:
    """Parse an Accept-Language header into locales ordered by quality.

    Entries without a ``q`` weight count as 1.0; entries with an unreadable
    weight sink to the bottom. Ties keep header order.

    Example:
        >>> parse_accept_language("fr-CH, fr;q=0.9, en;q=0.8")
        ['fr-CH', 'fr', 'en']
    """
    if not accept_language:
        return []

    weighted: list[tuple[str, float]] = []
    for part in accept_language.split(","):
        locale, _, params = part.strip().partition(";")
        locale = locale.strip()
        if not locale:
            continue
        quality: str | None = None
        for param in params.split(";"):
            key, _, value = param.strip().partition("=")
            if key == "q":
                quality = value.strip()
        weighted.append((locale, _parse_quality(quality)))

    weighted.sort(key=lambda item: item[1], reverse=True)
    return [locale for locale, _ in weighted]


def extract_country_code(locale: str) -> str | None:
    """Return the upper-cased region of a locale ("en-US" -> "US"), if any."""
    parts = _LOCALE_SEPARATOR.split(locale)
    if len(parts) >= 2 and parts[1]:
        return parts[1].upper()
    return None


def extract_language_code(locale: str) -> str:
    """Return the lower-cased language of a locale ("de-DE" -> "de")."""
    return _LOCALE_SEPARATOR.split(locale)[0].lower()


def detect_currency_from_locale(locale: str) -> str | None:
    """Map a single locale onto a currency, region first then language."""
    country_code = extract_country_code(locale)
    if country_code and country_code in COUNTRY_TO_CURRENCY:
        return COUNTRY_TO_CURRENCY[country_code]

    return LANGUAGE_TO_CURRENCY.get(extract_language_code(locale))


def detect_currency_from_accept_language(
    accept_language: str | None,
    default: str = DEFAULT_CURRENCY_CODE,
) -> str:
    """Return the currency of the first recognisable locale, else ``default``."""
    for locale in parse_accept_language(accept_language):
        currency = detect_currency_from_locale(locale)
        if currency:
            return currency
    return default


def is_valid_currency_code(code: str | None) -> bool:
    return code in SUPPORTED_CURRENCY_CODES


def resolve_user_currency(
    cookie_value: str | None,
    accept_language: str | None,
    enabled_codes: list[str] | tuple[str, ...],
    default: str = DEFAULT_CURRENCY_CODE,
) -> ResolvedCurrency:
    """Pick the visitor's currency.

    Priority:
        1. The preference cookie, when supported and enabled.
        2. The Accept-Language detection, when enabled.
        3. The default currency when enabled, else the first enabled one.
    """
    if cookie_value and is_valid_currency_code(cookie_value) and cookie_value in enabled_codes:
        return ResolvedCurrency(code=cookie_value, source=CurrencySource.COOKIE)

    detected = detect_currency_from_accept_language(accept_language, default=default)
    if detected in enabled_codes:
        source = (
            CurrencySource.BROWSER
            if _detects_from_header(accept_language)
            else CurrencySource.DEFAULT
        )
        return ResolvedCurrency(code=detected, source=source)

    if default in enabled_codes or not enabled_codes:
        return ResolvedCurrency(code=default, source=CurrencySource.DEFAULT)
    return ResolvedCurrency(code=enabled_codes[0], source=CurrencySource.DEFAULT)


def _detects_from_header(accept_language: str | None) -> bool:
    return any(
        detect_currency_from_locale(locale) is not None
        for locale in parse_accept_language(accept_language)
    )
