"""Auth application layer."""

from auth.application.observability import (
    DefaultSessionRefresherProbe,
    SessionRefresherProbe,
)
from auth.application.session_refresher import SessionRefresher, SessionResult

__all__ = [
    "DefaultSessionRefresherProbe",
    "SessionRefresher",
    "SessionRefresherProbe",
    "SessionResult",
]
