"""Currencies the platform can price in.

Shared between the currency context and application configuration.
"""

SUPPORTED_CURRENCY_CODES: tuple[str, ...] = (
    "USD",
    "EUR",
    "GBP",
    "AED",
    "AUD",
    "CAD",
    "CHF",
    "SAR",
    "SGD",
    "INR",
    "JPY",
)

DEFAULT_CURRENCY_CODE = "AED"
