"""Access infrastructure layer."""

from access.infrastructure.identity_repository import SupabaseIdentityRepository

__all__ = ["SupabaseIdentityRepository"]
