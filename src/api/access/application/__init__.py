"""Access application layer."""

from access.application.observability import AccessGuardProbe, DefaultAccessGuardProbe
from access.application.role_guard import RoleGuard

__all__ = [
    "AccessGuardProbe",
    "DefaultAccessGuardProbe",
    "RoleGuard",
]
