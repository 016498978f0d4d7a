"""Authentication shared kernel module."""

from shared_kernel.auth.identity import AuthIdentity

__all__ = [
    "AuthIdentity",
]
