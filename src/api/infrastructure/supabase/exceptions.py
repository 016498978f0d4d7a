"""Exceptions raised by the hosted database/auth adapter."""


class SupabaseError(Exception):
    """Base exception for hosted provider calls."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.status_code = status_code


class SupabaseAuthError(SupabaseError):
    """Raised when the provider rejects the presented credentials (401/403)."""

    pass


class SupabaseRequestError(SupabaseError):
    """Raised on transport failures and any other non-2xx response."""

    pass
