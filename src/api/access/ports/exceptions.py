"""Exceptions for identity lookups."""


class IdentityLookupError(Exception):
    """Raised when a profile or business user lookup cannot be completed.

    Includes provider errors and rows that cannot be interpreted. Access
    checks treat it as a hard failure.
    """

    pass
