"""Main FastAPI application entry point."""

from contextlib import asynccontextmanager

import httpx
from fastapi import FastAPI, Request

from edge.dependencies import build_edge_pipeline
from edge.middleware import EdgeMiddleware
from infrastructure.logging import configure_logging
from infrastructure.observability import DefaultStartupProbe
from infrastructure.settings import get_settings, get_site_settings, get_supabase_settings
from infrastructure.version import __version__


@asynccontextmanager
async def edge_lifespan(app: FastAPI):
    """Application lifespan context.

    Manages:
    - Logging configuration
    - Shared HTTP connection pool for the hosted provider (closed on shutdown)
    - Edge pipeline construction
    """
    configure_logging(debug=get_settings().debug)
    probe = DefaultStartupProbe()
    site = get_site_settings()

    async with httpx.AsyncClient(
        timeout=get_supabase_settings().timeout_seconds
    ) as http_client:
        app.state.edge_pipeline = build_edge_pipeline(http_client)
        probe.edge_pipeline_ready(
            platform_hostname=site.platform_hostname,
            environment=site.environment,
        )
        yield

    probe.http_client_closed()


app = FastAPI(
    title=get_settings().app_name,
    description="Tenant resolution and route isolation at the request edge",
    version=__version__,
    lifespan=edge_lifespan,
)

app.add_middleware(EdgeMiddleware)


@app.get("/health")
def health():
    """Basic health check endpoint."""
    return {"status": "ok"}


@app.get("/health/edge")
def health_edge(request: Request) -> dict:
    """Report the edge configuration and what it learned about this request."""
    site = get_site_settings()
    edge = getattr(request.state, "edge", None)
    return {
        "status": "ok",
        "platform_hostname": site.platform_hostname,
        "environment": site.environment,
        "classification": str(edge.classification) if edge else None,
        "currency": edge.currency if edge else None,
    }
