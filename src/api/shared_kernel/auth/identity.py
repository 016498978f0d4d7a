"""Authenticated identity value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any


@dataclass(frozen=True)
class AuthIdentity:
    """The user behind a valid hosted-auth session.

    Attributes:
        id: Auth identity; equals ``profiles.id`` and
            ``business_users.auth_user_id``.
        email: Email address, if the provider returned one.
        claims: Remaining user attributes returned by the provider.
    """

    id: str
    email: str | None = None
    claims: dict[str, Any] = field(default_factory=dict)
