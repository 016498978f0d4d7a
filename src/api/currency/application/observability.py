"""Domain probe for currency preference resolution.

Following Domain-Oriented Observability patterns, this probe captures
domain-significant events related to the currency preference cookie.

See: https://martinfowler.com/articles/domain-oriented-observability.html
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

import structlog

if TYPE_CHECKING:
    from shared_kernel.observability_context import ObservationContext


class CurrencyPreferenceProbe(Protocol):
    """Domain probe for currency preference operations."""

    def cookie_missing(self) -> None:
        """Record that no currency preference cookie was sent."""
        ...

    def cookie_rejected(self, value: str) -> None:
        """Record that the cookie held an unsupported or disabled currency."""
        ...

    def currency_detected(self, code: str, source: str) -> None:
        """Record the currency chosen when the cookie had to be (re)written."""
        ...

    def fell_back_to_default(self, accept_language: str | None, code: str) -> None:
        """Record that Accept-Language yielded no usable currency."""
        ...

    def with_context(self, context: ObservationContext) -> CurrencyPreferenceProbe:
        """Create a new probe with observation context bound."""
        ...


class DefaultCurrencyPreferenceProbe:
    """Default implementation of CurrencyPreferenceProbe using structlog."""

    def __init__(
        self,
        logger: structlog.stdlib.BoundLogger | None = None,
        context: ObservationContext | None = None,
    ):
        self._logger = logger or structlog.get_logger()
        self._context = context

    def _get_context_kwargs(self) -> dict[str, Any]:
        """Get context metadata as kwargs for logging."""
        if self._context is None:
            return {}
        return self._context.as_dict()

    def with_context(
        self, context: ObservationContext
    ) -> DefaultCurrencyPreferenceProbe:
        """Create a new probe with observation context bound."""
        return DefaultCurrencyPreferenceProbe(logger=self._logger, context=context)

    def cookie_missing(self) -> None:
        self._logger.debug(
            "currency_cookie_missing",
            **self._get_context_kwargs(),
        )

    def cookie_rejected(self, value: str) -> None:
        self._logger.info(
            "currency_cookie_rejected",
            value=value,
            **self._get_context_kwargs(),
        )

    def currency_detected(self, code: str, source: str) -> None:
        self._logger.debug(
            "currency_detected",
            currency=code,
            source=source,
            **self._get_context_kwargs(),
        )

    def fell_back_to_default(self, accept_language: str | None, code: str) -> None:
        self._logger.warning(
            "currency_fell_back_to_default",
            accept_language=accept_language,
            currency=code,
            **self._get_context_kwargs(),
        )
