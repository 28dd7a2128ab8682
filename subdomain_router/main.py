# Entrypoint: uvicorn subdomain_router.main:app
"""Subdomain router FastAPI application."""

# NOTE: dotenv loading is handled in config.py before the Config class is defined

from fastapi import FastAPI, HTTPException, Request, Response
from prometheus_client import CONTENT_TYPE_LATEST
from pydantic import BaseModel
from typing import Optional
import os
import time

from .config import Config, config as default_config
from .hostnames import get_root_domain
from .logging_config import setup_logging, get_logger
from .middleware import SubdomainMiddleware
from .monitoring.metrics import MetricsCollector, metrics as default_metrics
from .tenancy import get_request_subdomain

__version__ = "0.1.0"

logger = get_logger(__name__)


class HealthResponse(BaseModel):
    ok: bool = True
    status: str
    version: str
    uptime_seconds: int
    root_domain: str


class VersionResponse(BaseModel):
    version: str
    git_sha: str


class TenantPageResponse(BaseModel):
    subdomain: str
    path: str
    original_path: Optional[str] = None


def create_app(cfg: Optional[Config] = None, metrics: Optional[MetricsCollector] = None) -> FastAPI:
    """Build the application with subdomain routing installed."""
    cfg = cfg or default_config
    metrics = metrics or default_metrics

    setup_logging(cfg)

    warnings = cfg.validate()
    for warning in warnings:
        logger.warning(f"Configuration warning: {warning}")

    app = FastAPI(
        title="Subdomain Router",
        version=__version__,
        description="Hostname-based multi-tenant routing",
    )
    app.state.start_time = time.time()
    app.state.config = cfg

    # Subdomain routing runs before route dispatch
    app.add_middleware(SubdomainMiddleware, cfg=cfg, metrics=metrics)

    # Request ID + security headers middleware
    @app.middleware("http")
    async def request_id_and_security_headers(request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or os.urandom(8).hex()
        request.state.request_id = request_id
        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Content-Type-Options"] = "nosniff"
        response.headers["X-Frame-Options"] = "DENY"
        response.headers["Referrer-Policy"] = "no-referrer"
        return response

    @app.get("/health", response_model=HealthResponse)
    @app.get("/healthz", response_model=HealthResponse)
    async def health(request: Request):
        host = request.headers.get("host", "")
        return HealthResponse(
            ok=True,
            status="healthy",
            version=app.version,
            uptime_seconds=int(time.time() - app.state.start_time),
            root_domain=get_root_domain(host, cfg),
        )

    @app.get("/version", response_model=VersionResponse)
    def version():
        """Return app version and optional git SHA (set GIT_SHA at build time)."""
        git_sha = os.getenv("GIT_SHA", "unknown")
        return VersionResponse(version=app.version, git_sha=git_sha)

    if cfg.METRICS_ENABLED:
        @app.get("/metrics", include_in_schema=False)
        def prometheus_metrics():
            return Response(content=metrics.render(), media_type=CONTENT_TYPE_LATEST)

    @app.get(f"{cfg.TENANT_PATH_PREFIX}/{{subdomain}}", response_model=TenantPageResponse)
    async def tenant_page(subdomain: str, request: Request):
        """Tenant landing page target for rewritten requests."""
        subdomain = subdomain.strip()
        if not subdomain:
            raise HTTPException(status_code=404, detail="Tenant not found")
        return TenantPageResponse(
            subdomain=subdomain,
            path=request.url.path,
            original_path=getattr(request.state, "original_path", None),
        )

    @app.get("/")
    async def root(request: Request):
        return {"page": "root", "subdomain": get_request_subdomain(request, cfg)}

    @app.get(cfg.ADMIN_PATH_PREFIX)
    async def admin(request: Request):
        return {"page": "admin", "subdomain": get_request_subdomain(request, cfg)}

    return app


def run(cfg: Optional[Config] = None):
    """Serve the application with uvicorn."""
    import uvicorn

    cfg = cfg or default_config
    uvicorn.run(
        "subdomain_router.main:app",
        host=cfg.HOST,
        port=cfg.PORT,
        workers=cfg.WORKERS,
        log_level=cfg.LOG_LEVEL.lower(),
    )


app = create_app()


if __name__ == "__main__":
    run()
