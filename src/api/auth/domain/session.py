"""Hosted-auth session cookie format.

The browser client stores the whole session as JSON in one cookie named
``sb-<project-ref>-auth-token``. Values larger than a single cookie are
split into ``<name>.0``, ``<name>.1``, ... chunks. A ``base64-`` prefix
marks a base64url encoded payload; older clients wrote raw JSON.
"""

from __future__ import annotations

import base64
import json
import math
from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from typing import Any

from jose import JWTError, jwt

BASE64_PREFIX = "base64-"
MAX_CHUNK_SIZE = 3180
MAX_CHUNKS = 32


class SessionCookieError(ValueError):
    """Raised when a session cookie cannot be decoded."""

    pass


@dataclass(frozen=True)
class SessionTokens:
    """Tokens carried by a session cookie.

    Attributes:
        access_token: Short-lived JWT presented to the provider.
        refresh_token: Token exchangeable for a new session, if present.
        expires_at: Access token expiry as a unix timestamp, if recorded.
    """

    access_token: str
    refresh_token: str | None = None
    expires_at: int | None = None

    def expiry(self) -> int | None:
        """Expiry from the cookie, else from the token's unverified ``exp``."""
        if self.expires_at is not None:
            return self.expires_at
        try:
            claims = jwt.get_unverified_claims(self.access_token)
        except JWTError:
            return None
        return _timestamp(claims.get("exp"))

    def is_expired(self, now: datetime, leeway_seconds: int = 10) -> bool:
        """Whether the access token is expired (or about to be) at ``now``.

        Tokens whose expiry cannot be determined are not considered
        expired; the provider is the final judge.
        """
        expiry = self.expiry()
        if expiry is None:
            return False
        return now.timestamp() + leeway_seconds >= expiry

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> SessionTokens:
        access_token = payload.get("access_token")
        if not isinstance(access_token, str) or not access_token:
            raise SessionCookieError("Session has no access_token")

        refresh_token = payload.get("refresh_token")
        expires_at = payload.get("expires_at")
        return cls(
            access_token=access_token,
            refresh_token=refresh_token if isinstance(refresh_token, str) else None,
            expires_at=_timestamp(expires_at),
        )


def _timestamp(value: object) -> int | None:
    """Whole-second timestamp, or None for non-numbers and non-finite floats."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    return int(value)


def session_cookie_names(cookies: Mapping[str, str], name: str) -> list[str]:
    """Return the names of every cookie that belongs to session ``name``."""
    prefix = f"{name}."
    return [
        cookie
        for cookie in cookies
        if cookie == name or (cookie.startswith(prefix) and cookie[len(prefix):].isdigit())
    ]


def read_session_cookie(cookies: Mapping[str, str], name: str) -> str | None:
    """Return the session cookie value, joining chunks in index order."""
    if cookies.get(name):
        return cookies[name]

    parts: list[str] = []
    for index in range(MAX_CHUNKS):
        chunk = cookies.get(f"{name}.{index}")
        if chunk is None:
            break
        parts.append(chunk)

    return "".join(parts) or None


def _b64url_decode(value: str) -> bytes:
    padding = "=" * (-len(value) % 4)
    return base64.urlsafe_b64decode(value + padding)


def decode_session(raw: str) -> SessionTokens:
    """Decode a (joined) session cookie value into tokens.

    Raises:
        SessionCookieError: If the value is not a readable session.
    """
    try:
        if raw.startswith(BASE64_PREFIX):
            text = _b64url_decode(raw[len(BASE64_PREFIX):]).decode("utf-8")
        else:
            text = raw
        payload = json.loads(text)
    except (ValueError, UnicodeDecodeError) as e:
        raise SessionCookieError(f"Unreadable session cookie: {e}") from e

    if not isinstance(payload, dict):
        raise SessionCookieError("Session cookie is not a JSON object")
    return SessionTokens.from_payload(payload)


def encode_session(payload: Mapping[str, Any]) -> str:
    """Encode a session payload the way the browser client does."""
    text = json.dumps(dict(payload), separators=(",", ":"))
    encoded = base64.urlsafe_b64encode(text.encode("utf-8")).decode("ascii").rstrip("=")
    return f"{BASE64_PREFIX}{encoded}"


def chunk_cookie_value(
    name: str,
    value: str,
    chunk_size: int = MAX_CHUNK_SIZE,
) -> list[tuple[str, str]]:
    """Split a cookie value into ``(name, value)`` pairs that fit a cookie."""
    if len(value) <= chunk_size:
        return [(name, value)]
    return [
        (f"{name}.{index}", value[start:start + chunk_size])
        for index, start in enumerate(range(0, len(value), chunk_size))
    ]
