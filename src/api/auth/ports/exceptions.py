"""Exceptions raised by session provider implementations."""


class SessionProviderError(Exception):
    """Raised when the auth provider cannot be reached or answers with an error.

    Transient by nature; the caller degrades to an anonymous visitor.
    """

    pass


class SessionRejectedError(SessionProviderError):
    """Raised when the provider rejects a token as expired, revoked or invalid."""

    pass
