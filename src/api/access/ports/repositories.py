"""Repository protocols (ports) for the access bounded context."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from access.domain.value_objects import BusinessUser, Profile


@runtime_checkable
class IIdentityRepository(Protocol):
    """Read access to the role records of an authenticated identity.

    ``access_token`` is the visitor's token so row-level security applies.
    """

    async def get_profile(
        self, user_id: str, access_token: str | None = None
    ) -> Profile | None:
        """Retrieve the profile of ``user_id``.

        Returns:
            The Profile, or None if the identity has no profile.

        Raises:
            IdentityLookupError: If the lookup fails.
        """
        ...

    async def get_business_user(
        self, user_id: str, access_token: str | None = None
    ) -> BusinessUser | None:
        """Retrieve the business user linked to ``user_id``.

        Returns:
            The BusinessUser with its account status, or None.

        Raises:
            IdentityLookupError: If the lookup fails or is ambiguous.
        """
        ...
