"""Edge bounded context.

Composes the currency, session, tenancy and access components into the
per-request middleware that runs in front of every page.
"""
