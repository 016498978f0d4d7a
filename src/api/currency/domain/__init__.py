"""Currency domain layer: supported codes and locale detection rules."""

from currency.domain.detection import (
    detect_currency_from_accept_language,
    detect_currency_from_locale,
    extract_country_code,
    extract_language_code,
    is_valid_currency_code,
    parse_accept_language,
    resolve_user_currency,
)
from currency.domain.value_objects import (
    DEFAULT_CURRENCY_CODE,
    SUPPORTED_CURRENCY_CODES,
    CurrencySource,
    ResolvedCurrency,
)

__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "SUPPORTED_CURRENCY_CODES",
    "CurrencySource",
    "ResolvedCurrency",
    "detect_currency_from_accept_language",
    "detect_currency_from_locale",
    "extract_country_code",
    "extract_language_code",
    "is_valid_currency_code",
    "parse_accept_language",
    "resolve_user_currency",
]
