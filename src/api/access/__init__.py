"""Access bounded context.

Role-based protection of the platform's admin, vendor, account and
business portal path prefixes.
"""
