"""ASGI middleware running the edge pipeline in front of every page."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING
from urllib.parse import quote, urlencode

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from edge.matcher import is_static_asset
from edge.pipeline import EdgeOutcome, EdgePipeline
from shared_kernel.middleware.cookies import CookieToSet
from shared_kernel.observability_context import ObservationContext

if TYPE_CHECKING:
    from collections.abc import Callable

    from starlette.requests import Request
    from starlette.responses import Response
    from starlette.types import ASGIApp

REQUEST_ID_HEADER = "x-request-id"


class EdgeMiddleware(BaseHTTPMiddleware):
    """Resolve currency, session and tenant, then forward or redirect.

    Attributes set on request.state:
        edge (RequestContext): What the edge learned about the request.
        tenant_context (TenantContext | None): The business owning the host.

    The pipeline is taken from ``app.state.edge_pipeline`` (built in the
    application lifespan) unless one is passed explicitly.
    """

    def __init__(self, app: ASGIApp, pipeline: EdgePipeline | None = None):
        super().__init__(app)
        self._pipeline = pipeline

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        if is_static_asset(request.url.path):
            return await call_next(request)

        pipeline = self._pipeline or request.app.state.edge_pipeline
        hostname = request_hostname(request)
        observation = ObservationContext(
            request_id=request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex,
            hostname=hostname,
            path=request.url.path,
        )

        outcome = await pipeline.run(
            hostname=hostname,
            path=request.url.path,
            cookies=request.cookies,
            accept_language=request.headers.get("accept-language"),
            observation=observation,
        )

        request.state.edge = outcome.context
        request.state.tenant_context = outcome.context.tenant

        if outcome.decision.is_redirect:
            response: Response = _redirect(request, outcome)
        else:
            response = await call_next(request)
            for name, value in outcome.response_headers.items():
                response.headers[name] = _header_value(value)

        for cookie in outcome.cookies:
            _apply_cookie(response, cookie)
        return response


def request_hostname(request: Request) -> str:
    """The Host header, else the host the server was addressed on."""
    return request.headers.get("host") or request.url.netloc


def _redirect(request: Request, outcome: EdgeOutcome) -> RedirectResponse:
    """Same-origin temporary redirect to the decision's target."""
    decision = outcome.decision
    url = request.url.replace(
        path=decision.redirect_to,
        query=urlencode(decision.query) if decision.query else "",
        fragment="",
    )
    return RedirectResponse(str(url), status_code=307)


def _header_value(value: str) -> str:
    """Percent-encode values that cannot travel as latin-1 header bytes."""
    return value if value.isascii() else quote(value, safe=" /:#.,-_")


def _apply_cookie(response: Response, cookie: CookieToSet) -> None:
    if cookie.max_age == 0:
        response.delete_cookie(
            cookie.name,
            path=cookie.path,
            secure=cookie.secure,
            httponly=cookie.http_only,
            samesite=cookie.same_site,
        )
        return
    response.set_cookie(
        cookie.name,
        cookie.value,
        max_age=cookie.max_age,
        path=cookie.path,
        secure=cookie.secure,
        httponly=cookie.http_only,
        samesite=cookie.same_site,
    )
