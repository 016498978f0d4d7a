"""Currency bounded context.

Resolves the visitor's display currency from the preference cookie or the
Accept-Language header.
"""
