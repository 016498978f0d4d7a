"""Session refresh for inbound requests.

Resolves the hosted-auth session carried by the request cookies into an
identity. Expired access tokens are refreshed and the new session is
handed back as cookies for the response. Any failure degrades to an
anonymous visitor; nothing here raises to the caller.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from datetime import datetime, timezone

from auth.application.observability import (
    DefaultSessionRefresherProbe,
    SessionRefresherProbe,
)
from auth.domain.session import (
    SessionCookieError,
    SessionTokens,
    chunk_cookie_value,
    decode_session,
    encode_session,
    read_session_cookie,
    session_cookie_names,
)
from auth.ports.exceptions import SessionProviderError, SessionRejectedError
from auth.ports.session_provider import ISessionProvider
from shared_kernel.auth import AuthIdentity
from shared_kernel.middleware.cookies import CookieToSet

SESSION_COOKIE_MAX_AGE = 400 * 24 * 60 * 60


@dataclass(frozen=True)
class SessionResult:
    """Outcome of session resolution for one request.

    Attributes:
        identity: The authenticated identity, or None for anonymous visitors.
        access_token: Token to forward to row-level-secured lookups.
        cookies: Session cookies to write (refresh) or expire (rejection).
    """

    identity: AuthIdentity | None = None
    access_token: str | None = None
    cookies: list[CookieToSet] = field(default_factory=list)


def _utcnow() -> datetime:
    return datetime.now(tz=timezone.utc)


class SessionRefresher:
    """Resolves and refreshes the visitor's session from request cookies."""

    def __init__(
        self,
        provider: ISessionProvider,
        cookie_name: str,
        secure_cookie: bool,
        probe: SessionRefresherProbe | None = None,
        clock: Callable[[], datetime] = _utcnow,
    ):
        self._provider = provider
        self._cookie_name = cookie_name
        self._secure_cookie = secure_cookie
        self._probe = probe or DefaultSessionRefresherProbe()
        self._clock = clock

    async def refresh(
        self,
        cookies: Mapping[str, str],
        probe: SessionRefresherProbe | None = None,
    ) -> SessionResult:
        """Resolve the session carried by ``cookies``.

        Args:
            cookies: Request cookies.
            probe: Request-scoped probe overriding the default one.

        Returns:
            SessionResult; ``identity`` is None whenever the session is
            missing, unreadable, rejected, or the provider is unavailable.
        """
        probe = probe or self._probe

        raw = read_session_cookie(cookies, self._cookie_name)
        if raw is None:
            probe.session_absent()
            return SessionResult()

        try:
            tokens = decode_session(raw)
        except SessionCookieError as e:
            probe.session_cookie_unreadable(error=e)
            return SessionResult()

        response_cookies: list[CookieToSet] = []
        if tokens.is_expired(self._clock()):
            if not tokens.refresh_token:
                probe.session_expired_without_refresh_token()
                return SessionResult()

            try:
                payload = await self._provider.refresh(tokens.refresh_token)
                tokens = SessionTokens.from_payload(payload)
            except SessionRejectedError as e:
                probe.session_rejected(reason=str(e))
                return SessionResult(cookies=self._expire_cookies(cookies))
            except SessionCookieError as e:
                probe.session_rejected(reason=str(e))
                return SessionResult()
            except SessionProviderError as e:
                probe.provider_unavailable(error=e)
                return SessionResult()

            probe.session_refreshed()
            response_cookies = self._session_cookies(cookies, encode_session(payload))

        try:
            identity = await self._provider.get_user(tokens.access_token)
        except SessionRejectedError as e:
            probe.session_rejected(reason=str(e))
            return SessionResult(cookies=response_cookies)
        except SessionProviderError as e:
            probe.provider_unavailable(error=e)
            return SessionResult(cookies=response_cookies)

        probe.user_resolved(user_id=identity.id)
        return SessionResult(
            identity=identity,
            access_token=tokens.access_token,
            cookies=response_cookies,
        )

    def _session_cookies(
        self,
        request_cookies: Mapping[str, str],
        value: str,
    ) -> list[CookieToSet]:
        """Cookies storing ``value``, expiring chunks the new value no longer uses."""
        chunks = chunk_cookie_value(self._cookie_name, value)
        written = {name for name, _ in chunks}

        result = [
            CookieToSet(
                name=name,
                value=chunk,
                max_age=SESSION_COOKIE_MAX_AGE,
                path="/",
                same_site="lax",
                secure=self._secure_cookie,
                http_only=False,
            )
            for name, chunk in chunks
        ]
        result.extend(
            CookieToSet.expire(name)
            for name in session_cookie_names(request_cookies, self._cookie_name)
            if name not in written
        )
        return result

    def _expire_cookies(self, request_cookies: Mapping[str, str]) -> list[CookieToSet]:
        return [
            CookieToSet.expire(name)
            for name in session_cookie_names(request_cookies, self._cookie_name)
        ]
