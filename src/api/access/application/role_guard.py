"""Role-based protection of platform path prefixes.

Checks run in a fixed order and the first redirect wins:

1. ``/admin`` (except the admin login) needs an active admin profile.
2. Account pages need a session; ``/become-vendor`` also needs an active
   customer profile.
3. ``/vendor`` (except ``/vendor-application``) needs an active vendor.
4. The business portal (except its public pages) needs a business user
   that is active, belongs to an active account and, on a tenant
   hostname, belongs to that tenant.
5. Signed-in visitors are forwarded from login pages to their dashboard.

Lookup failures during protection deny access. Lookup failures while
forwarding from a login page only skip the forward.
"""

from __future__ import annotations

from access.application.observability import AccessGuardProbe, DefaultAccessGuardProbe
from access.domain import rules
from access.domain.value_objects import ProfileRole
from access.ports.exceptions import IdentityLookupError
from access.ports.repositories import IIdentityRepository
from shared_kernel.auth import AuthIdentity
from shared_kernel.middleware.decisions import RouteDecision
from shared_kernel.middleware.tenant_context import TenantContext


class RoleGuard:
    """Evaluates the role requirements of a request path."""

    def __init__(
        self,
        repository: IIdentityRepository,
        probe: AccessGuardProbe | None = None,
    ):
        self._repository = repository
        self._probe = probe or DefaultAccessGuardProbe()

    async def evaluate(
        self,
        path: str,
        identity: AuthIdentity | None,
        access_token: str | None = None,
        tenant: TenantContext | None = None,
        probe: AccessGuardProbe | None = None,
    ) -> RouteDecision:
        """Decide whether ``identity`` may reach ``path``.

        Args:
            path: Request path.
            identity: Authenticated identity, or None for anonymous visitors.
            access_token: The visitor's token, forwarded to lookups.
            tenant: The business owning the request hostname, if any.
            probe: Request-scoped probe overriding the default one.
        """
        probe = probe or self._probe

        if rules.is_admin_area(path):
            return await self._require_profile(
                path,
                identity,
                access_token,
                probe,
                login_path=rules.ADMIN_LOGIN_PATH,
                roles=(ProfileRole.ADMIN,),
            )

        if rules.is_account_area(path):
            if identity is None:
                return self._login_required(
                    path,
                    probe,
                    rules.LOGIN_PATH,
                    query={rules.LOGIN_REDIRECT_PARAM: path},
                )
            if rules.is_become_vendor(path):
                return await self._require_profile(
                    path,
                    identity,
                    access_token,
                    probe,
                    login_path=rules.LOGIN_PATH,
                    roles=(ProfileRole.CUSTOMER,),
                )
            return RouteDecision.allow()

        if rules.is_vendor_area(path):
            return await self._require_profile(
                path,
                identity,
                access_token,
                probe,
                login_path=rules.LOGIN_PATH,
                roles=(ProfileRole.VENDOR,),
            )

        if rules.is_business_portal(path):
            return await self._require_business_user(
                path, identity, access_token, tenant, probe
            )

        if identity is not None:
            return await self._forward_from_login(path, identity, access_token, probe)

        return RouteDecision.allow()

    def _login_required(
        self,
        path: str,
        probe: AccessGuardProbe,
        login_path: str,
        query: dict[str, str] | None = None,
    ) -> RouteDecision:
        probe.login_required(path=path, redirect_to=login_path)
        return RouteDecision.redirect(login_path, reason="login_required", query=query)

    def _deny(
        self, path: str, identity: AuthIdentity, probe: AccessGuardProbe, reason: str
    ) -> RouteDecision:
        probe.access_denied(path=path, user_id=identity.id, reason=reason)
        return RouteDecision.redirect(rules.UNAUTHORIZED_PATH, reason=reason)

    async def _require_profile(
        self,
        path: str,
        identity: AuthIdentity | None,
        access_token: str | None,
        probe: AccessGuardProbe,
        login_path: str,
        roles: tuple[ProfileRole, ...],
    ) -> RouteDecision:
        if identity is None:
            return self._login_required(path, probe, login_path)

        try:
            profile = await self._repository.get_profile(identity.id, access_token)
        except IdentityLookupError as e:
            probe.identity_lookup_failed(path=path, user_id=identity.id, error=e)
            return RouteDecision.redirect(rules.UNAUTHORIZED_PATH, reason="lookup_failed")

        if profile is None:
            return self._deny(path, identity, probe, reason="profile_missing")
        if not profile.has_role(*roles):
            return self._deny(path, identity, probe, reason="role_mismatch")
        return RouteDecision.allow()

    async def _require_business_user(
        self,
        path: str,
        identity: AuthIdentity | None,
        access_token: str | None,
        tenant: TenantContext | None,
        probe: AccessGuardProbe,
    ) -> RouteDecision:
        if identity is None:
            return self._login_required(path, probe, rules.BUSINESS_LOGIN_PATH)

        try:
            business_user = await self._repository.get_business_user(identity.id, access_token)
        except IdentityLookupError as e:
            probe.identity_lookup_failed(path=path, user_id=identity.id, error=e)
            return RouteDecision.redirect(rules.UNAUTHORIZED_PATH, reason="lookup_failed")

        if business_user is None:
            probe.access_denied(path=path, user_id=identity.id, reason="not_a_business_user")
            return RouteDecision.redirect(
                rules.BUSINESS_LOGIN_PATH, reason="not_a_business_user"
            )
        if not business_user.is_active:
            return self._deny(path, identity, probe, reason="business_user_inactive")
        if not business_user.account_is_active:
            return self._deny(path, identity, probe, reason="business_account_inactive")
        if tenant is not None and not business_user.belongs_to(tenant.business_id):
            return self._deny(path, identity, probe, reason="business_tenant_mismatch")
        return RouteDecision.allow()

    async def _forward_from_login(
        self,
        path: str,
        identity: AuthIdentity,
        access_token: str | None,
        probe: AccessGuardProbe,
    ) -> RouteDecision:
        target: str | None = None
        try:
            if path == rules.ADMIN_LOGIN_PATH:
                profile = await self._repository.get_profile(identity.id, access_token)
                if profile is not None and profile.has_role(ProfileRole.ADMIN):
                    target = rules.ADMIN_DASHBOARD_PATH
            elif path == rules.BUSINESS_LOGIN_PATH:
                business_user = await self._repository.get_business_user(
                    identity.id, access_token
                )
                if business_user is not None:
                    target = rules.BUSINESS_DASHBOARD_PATH
            elif path == rules.LOGIN_PATH:
                profile = await self._repository.get_profile(identity.id, access_token)
                if profile is not None and profile.is_active:
                    target = rules.ROLE_DASHBOARDS.get(profile.role)
        except IdentityLookupError as e:
            probe.identity_lookup_failed(path=path, user_id=identity.id, error=e)
            return RouteDecision.allow()

        if target is None:
            return RouteDecision.allow()
        probe.login_forwarded(path=path, user_id=identity.id, redirect_to=target)
        return RouteDecision.redirect(target, reason="already_signed_in")
