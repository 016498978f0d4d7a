"""Ordered composition of the edge components.

For every request the pipeline resolves, in order: the currency
preference, the session, the tenant owning the hostname, the tenant
route isolation decision and the role guard decision. The first
redirect ends the evaluation; cookies collected along the way are
returned with the outcome whatever it is.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field

from access.application import AccessGuardProbe, DefaultAccessGuardProbe, RoleGuard
from auth.application import (
    DefaultSessionRefresherProbe,
    SessionRefresher,
    SessionRefresherProbe,
)
from currency.application import (
    CurrencyPreferenceProbe,
    CurrencyPreferenceResolver,
    DefaultCurrencyPreferenceProbe,
)
from edge.observability import DefaultEdgeProbe, EdgeProbe
from shared_kernel.middleware.cookies import CookieToSet
from shared_kernel.middleware.decisions import RouteDecision
from shared_kernel.middleware.request_context import RequestContext
from shared_kernel.observability_context import ObservationContext
from tenancy.application import (
    DefaultRouteIsolationProbe,
    DefaultTenantResolutionProbe,
    RouteIsolationGuard,
    RouteIsolationProbe,
    TenantResolutionProbe,
    TenantResolver,
)


@dataclass(frozen=True)
class EdgeProbes:
    """The probes used by one pipeline run."""

    currency: CurrencyPreferenceProbe = field(default_factory=DefaultCurrencyPreferenceProbe)
    session: SessionRefresherProbe = field(default_factory=DefaultSessionRefresherProbe)
    tenant: TenantResolutionProbe = field(default_factory=DefaultTenantResolutionProbe)
    isolation: RouteIsolationProbe = field(default_factory=DefaultRouteIsolationProbe)
    access: AccessGuardProbe = field(default_factory=DefaultAccessGuardProbe)
    edge: EdgeProbe = field(default_factory=DefaultEdgeProbe)

    def with_context(self, context: ObservationContext) -> EdgeProbes:
        return EdgeProbes(
            currency=self.currency.with_context(context),
            session=self.session.with_context(context),
            tenant=self.tenant.with_context(context),
            isolation=self.isolation.with_context(context),
            access=self.access.with_context(context),
            edge=self.edge.with_context(context),
        )


@dataclass(frozen=True)
class EdgeOutcome:
    """Result of running the pipeline for one request.

    Attributes:
        context: Everything learned about the request.
        decision: Forward (no redirect) or redirect.
        cookies: Cookies to apply to the response, redirects included.
    """

    context: RequestContext
    decision: RouteDecision
    cookies: list[CookieToSet] = field(default_factory=list)

    @property
    def response_headers(self) -> dict[str, str]:
        """Tenant branding headers for a forwarded response."""
        if self.decision.is_redirect or self.context.tenant is None:
            return {}
        return self.context.tenant.as_headers()


class EdgePipeline:
    """Runs the edge components for one request at a time.

    The pipeline holds no per-request state and can be shared by all
    requests.
    """

    def __init__(
        self,
        currency: CurrencyPreferenceResolver,
        session: SessionRefresher,
        tenants: TenantResolver,
        isolation: RouteIsolationGuard,
        role_guard: RoleGuard,
        probes: EdgeProbes | None = None,
    ):
        self._currency = currency
        self._session = session
        self._tenants = tenants
        self._isolation = isolation
        self._role_guard = role_guard
        self._probes = probes or EdgeProbes()

    @property
    def platform_hostname(self) -> str:
        return self._tenants.platform_hostname

    async def run(
        self,
        hostname: str,
        path: str,
        cookies: Mapping[str, str],
        accept_language: str | None = None,
        observation: ObservationContext | None = None,
    ) -> EdgeOutcome:
        """Evaluate one request.

        Args:
            hostname: Host header value, port included when present.
            path: Request path.
            cookies: Request cookies.
            accept_language: Accept-Language header value.
            observation: Request-scoped metadata bound to every log event.

        Returns:
            The outcome; never raises for collaborator failures.
        """
        observation = observation or ObservationContext(hostname=hostname, path=path)
        probes = self._probes.with_context(observation)
        context = RequestContext(hostname=hostname, path=path)
        response_cookies: list[CookieToSet] = []

        preference = self._currency.resolve(
            cookies.get(self._currency.cookie_name),
            accept_language,
            probe=probes.currency,
        )
        context = context.with_currency(preference.code)
        if preference.cookie is not None:
            response_cookies.append(preference.cookie)

        session = await self._session.refresh(cookies, probe=probes.session)
        response_cookies.extend(session.cookies)
        context = context.with_identity(session.identity)
        if session.identity is not None:
            observation = observation.with_user(session.identity.id)
            probes = self._probes.with_context(observation)

        resolution = await self._tenants.resolve(hostname, probe=probes.tenant)
        context = context.with_tenant(resolution.classification, resolution.tenant)
        if resolution.tenant is not None:
            observation = observation.with_business(resolution.tenant.business_id)
            probes = self._probes.with_context(observation)

        decision = self._isolation.evaluate(
            resolution,
            hostname,
            path,
            context.is_authenticated,
            probe=probes.isolation,
        )
        if not decision.is_redirect:
            decision = await self._role_guard.evaluate(
                path,
                session.identity,
                access_token=session.access_token,
                tenant=resolution.tenant,
                probe=probes.access,
            )

        if decision.is_redirect:
            probes.edge.request_redirected(
                redirect_to=decision.redirect_to or "", reason=decision.reason
            )
        else:
            probes.edge.request_forwarded(
                classification=str(context.classification), currency=context.currency
            )
        return EdgeOutcome(context=context, decision=decision, cookies=response_cookies)
