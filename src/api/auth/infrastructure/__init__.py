"""Auth infrastructure adapters."""

from auth.infrastructure.session_provider import SupabaseSessionProvider

__all__ = ["SupabaseSessionProvider"]
