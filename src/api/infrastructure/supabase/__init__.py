"""Hosted database and auth provider adapter."""

from infrastructure.supabase.client import SupabaseClient
from infrastructure.supabase.exceptions import (
    SupabaseAuthError,
    SupabaseError,
    SupabaseRequestError,
)

__all__ = [
    "SupabaseAuthError",
    "SupabaseClient",
    "SupabaseError",
    "SupabaseRequestError",
]
