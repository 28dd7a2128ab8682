"""Tenant subdomain routing middleware."""

import logging
from typing import Optional

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import RedirectResponse

from ..config import Config, config as default_config
from ..monitoring.metrics import MetricsCollector, metrics as default_metrics
from ..routing import decide_action
from ..schemas import RoutingActionKind
from ..tenancy import extract_subdomain

logger = logging.getLogger(__name__)


def is_excluded_path(path: str, cfg: Optional[Config] = None) -> bool:
    """True for paths the router never evaluates.

    API routes, framework internals and static assets (the last path segment
    contains a dot, e.g. ``/favicon.ico``) bypass subdomain routing.
    """
    cfg = cfg or default_config
    if any(path.startswith(prefix) for prefix in cfg.EXCLUDED_PREFIXES):
        return True
    return "." in path.rsplit("/", 1)[-1]


class SubdomainMiddleware(BaseHTTPMiddleware):
    """Rewrite or redirect requests that arrive on a tenant subdomain."""

    def __init__(self, app, cfg: Optional[Config] = None, metrics: Optional[MetricsCollector] = None):
        """Initialize subdomain middleware.

        Args:
            app: ASGI application
            cfg: Router configuration (defaults to the process config)
            metrics: Metrics collector (defaults to the global collector)
        """
        super().__init__(app)
        self.config = cfg or default_config
        self.metrics = metrics or default_metrics

    def _record(self, name: str, labels: Optional[dict] = None):
        if self.config.METRICS_ENABLED:
            self.metrics.increment_counter(name, labels)

    async def dispatch(self, request: Request, call_next):
        path = request.url.path

        if is_excluded_path(path, self.config):
            self._record("subdomain_routing_excluded_total")
            return await call_next(request)

        host = request.headers.get("host", "")
        subdomain = extract_subdomain(str(request.url), host, self.config)
        request.state.subdomain = subdomain

        action = decide_action(subdomain, path, self.config)
        self._record("subdomain_routing_decisions_total", {"action": action.kind.value})
        logger.debug(
            "Routing %s%s -> %s",
            host,
            path,
            action.kind.value,
            extra={
                "request_id": getattr(request.state, "request_id", None),
                "host": host,
                "path": path,
                "subdomain": subdomain,
                "action": action.kind.value,
                "target": action.path,
            },
        )

        if action.kind == RoutingActionKind.REDIRECT:
            location = request.url.replace(path=action.path, query="", fragment="")
            return RedirectResponse(url=str(location), status_code=self.config.REDIRECT_STATUS_CODE)

        if action.kind == RoutingActionKind.REWRITE:
            # Internal rewrite: the client-visible URL stays the same
            request.state.original_path = path
            request.scope["path"] = action.path
            request.scope["raw_path"] = action.path.encode("utf-8")

        return await call_next(request)
