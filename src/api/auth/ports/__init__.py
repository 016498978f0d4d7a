"""Ports for the auth bounded context."""

from auth.ports.exceptions import SessionProviderError, SessionRejectedError
from auth.ports.session_provider import ISessionProvider

__all__ = [
    "ISessionProvider",
    "SessionProviderError",
    "SessionRejectedError",
]
