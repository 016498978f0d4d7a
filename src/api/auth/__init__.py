"""Auth bounded context.

Turns the hosted-auth session cookies of a request into an authenticated
identity, refreshing expired access tokens on the way.
"""
