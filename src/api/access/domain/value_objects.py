"""Value objects for the access domain."""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum


class ProfileRole(StrEnum):
    """Role of a platform user profile."""

    CUSTOMER = "customer"
    VENDOR = "vendor"
    ADMIN = "admin"
    DRIVER = "driver"


class ProfileStatus(StrEnum):
    ACTIVE = "active"
    INACTIVE = "inactive"


class BusinessAccountStatus(StrEnum):
    """Lifecycle state of a business account.

    Only ACTIVE accounts may use the business portal.
    """

    PENDING = "pending"
    ACTIVE = "active"
    SUSPENDED = "suspended"
    REJECTED = "rejected"
    INACTIVE = "inactive"


@dataclass(frozen=True)
class Profile:
    """A platform user's profile row.

    Attributes:
        id: Equals the auth identity.
        role: The single role the profile holds.
        status: Only ACTIVE profiles pass role requirements.
    """

    id: str
    role: ProfileRole
    status: ProfileStatus = ProfileStatus.ACTIVE

    @property
    def is_active(self) -> bool:
        return self.status == ProfileStatus.ACTIVE

    def has_role(self, *roles: ProfileRole) -> bool:
        """Whether the profile is active and holds one of ``roles``."""
        return self.is_active and self.role in roles


@dataclass(frozen=True)
class BusinessUser:
    """Link between an auth identity and exactly one business account.

    Attributes:
        id: Business user row identifier.
        business_account_id: The owning business account.
        is_active: Whether this user may sign in.
        account_status: Status of the owning business account.
        account_subdomain: Subdomain of the owning account, if loaded.
        account_custom_domain: Custom domain of the owning account, if any.
    """

    id: str
    business_account_id: str
    is_active: bool
    account_status: BusinessAccountStatus | None
    account_subdomain: str | None = None
    account_custom_domain: str | None = None

    @property
    def account_is_active(self) -> bool:
        return self.account_status == BusinessAccountStatus.ACTIVE

    def belongs_to(self, business_id: str) -> bool:
        return self.business_account_id == business_id
