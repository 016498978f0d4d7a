"""Access domain layer."""

from access.domain.value_objects import (
    BusinessAccountStatus,
    BusinessUser,
    Profile,
    ProfileRole,
    ProfileStatus,
)

__all__ = [
    "BusinessAccountStatus",
    "BusinessUser",
    "Profile",
    "ProfileRole",
    "ProfileStatus",
]
