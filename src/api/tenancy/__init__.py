"""Tenancy bounded context.

Identifies the white-label business account (tenant) that owns the
request hostname and confines tenant hostnames to the business portal.
"""
