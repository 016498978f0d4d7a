"""Currency application layer."""

from currency.application.observability import (
    CurrencyPreferenceProbe,
    DefaultCurrencyPreferenceProbe,
)
from currency.application.preference import (
    CurrencyPreference,
    CurrencyPreferenceResolver,
)

__all__ = [
    "CurrencyPreference",
    "CurrencyPreferenceProbe",
    "CurrencyPreferenceResolver",
    "DefaultCurrencyPreferenceProbe",
]
