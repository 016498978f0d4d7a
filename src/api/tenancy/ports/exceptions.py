"""Exceptions for tenancy lookups."""


class BusinessLookupError(Exception):
    """Raised when the business directory cannot answer a lookup.

    Covers transport failures and provider errors alike. Callers treat it
    as "no business found" and never surface it to the visitor.
    """

    pass
