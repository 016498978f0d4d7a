"""Value objects for the currency domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from shared_kernel.currencies import DEFAULT_CURRENCY_CODE, SUPPORTED_CURRENCY_CODES

__all__ = [
    "DEFAULT_CURRENCY_CODE",
    "SUPPORTED_CURRENCY_CODES",
    "CurrencySource",
    "ResolvedCurrency",
]


class CurrencySource(StrEnum):
    """Where a resolved currency came from."""

    COOKIE = "cookie"
    BROWSER = "browser"
    DEFAULT = "default"


@dataclass(frozen=True)
class ResolvedCurrency:
    """A currency code together with how it was chosen."""

    code: str
    source: CurrencySource
