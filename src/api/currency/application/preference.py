"""Currency preference resolution for inbound requests."""

from __future__ import annotations

from dataclasses import dataclass

from currency.application.observability import (
    CurrencyPreferenceProbe,
    DefaultCurrencyPreferenceProbe,
)
from currency.domain import CurrencySource, resolve_user_currency
from shared_kernel.middleware.cookies import CookieToSet


@dataclass(frozen=True)
class CurrencyPreference:
    """The visitor's currency and the cookie to write, if any."""

    code: str
    source: CurrencySource
    cookie: CookieToSet | None = None


class CurrencyPreferenceResolver:
    """Keeps the currency preference cookie valid.

    A valid cookie is left untouched. A missing cookie, or one holding a
    currency that is unsupported or not enabled, is replaced with the
    currency detected from Accept-Language (or the default). Resolution
    never blocks or fails the request.
    """

    def __init__(
        self,
        cookie_name: str,
        cookie_max_age: int,
        enabled_codes: list[str],
        default_code: str,
        secure_cookie: bool,
        probe: CurrencyPreferenceProbe | None = None,
    ):
        self._cookie_name = cookie_name
        self._cookie_max_age = cookie_max_age
        self._enabled_codes = list(enabled_codes)
        self._default_code = default_code
        self._secure_cookie = secure_cookie
        self._probe = probe or DefaultCurrencyPreferenceProbe()

    @property
    def cookie_name(self) -> str:
        return self._cookie_name

    def resolve(
        self,
        cookie_value: str | None,
        accept_language: str | None,
        probe: CurrencyPreferenceProbe | None = None,
    ) -> CurrencyPreference:
        """Resolve the currency for one request.

        Args:
            cookie_value: Current value of the preference cookie, if sent.
            accept_language: Raw Accept-Language header, if sent.
            probe: Request-scoped probe overriding the default one.

        Returns:
            CurrencyPreference whose ``cookie`` is set when the response
            must (re)write the preference cookie.
        """
        probe = probe or self._probe
        resolved = resolve_user_currency(
            cookie_value,
            accept_language,
            self._enabled_codes,
            default=self._default_code,
        )

        if resolved.source == CurrencySource.COOKIE:
            return CurrencyPreference(code=resolved.code, source=resolved.source)

        if not cookie_value:
            probe.cookie_missing()
        else:
            probe.cookie_rejected(value=cookie_value)

        if resolved.source == CurrencySource.DEFAULT:
            probe.fell_back_to_default(
                accept_language=accept_language, code=resolved.code
            )
        else:
            probe.currency_detected(code=resolved.code, source=resolved.source)

        return CurrencyPreference(
            code=resolved.code,
            source=resolved.source,
            cookie=CookieToSet(
                name=self._cookie_name,
                value=resolved.code,
                max_age=self._cookie_max_age,
                path="/",
                same_site="lax",
                secure=self._secure_cookie,
                http_only=False,
            ),
        )
