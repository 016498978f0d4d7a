"""Auth domain layer: session cookie format and token expiry rules."""

from auth.domain.session import (
    SessionCookieError,
    SessionTokens,
    chunk_cookie_value,
    decode_session,
    encode_session,
    read_session_cookie,
    session_cookie_names,
)

__all__ = [
    "SessionCookieError",
    "SessionTokens",
    "chunk_cookie_value",
    "decode_session",
    "encode_session",
    "read_session_cookie",
    "session_cookie_names",
]
