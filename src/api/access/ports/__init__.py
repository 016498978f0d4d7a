"""Ports for the access bounded context."""

from access.ports.exceptions import IdentityLookupError
from access.ports.repositories import IIdentityRepository

__all__ = [
    "IIdentityRepository",
    "IdentityLookupError",
]
