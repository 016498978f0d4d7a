"""Ports for the tenancy bounded context."""

from tenancy.ports.exceptions import BusinessLookupError
from tenancy.ports.repositories import IBusinessDirectory

__all__ = [
    "BusinessLookupError",
    "IBusinessDirectory",
]
