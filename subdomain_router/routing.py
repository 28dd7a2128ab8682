"""Per-request routing decision for tenant subdomains."""

from typing import Optional

from .config import Config, config as default_config
from .schemas import CONTINUE, RoutingAction

ROOT_PATH = "/"


def tenant_path(subdomain: str, cfg: Optional[Config] = None) -> str:
    """Internal path that serves a tenant's landing page (``/s/<label>``)."""
    cfg = cfg or default_config
    return f"{cfg.TENANT_PATH_PREFIX}/{subdomain}"


def decide_action(subdomain: Optional[str], path: str, cfg: Optional[Config] = None) -> RoutingAction:
    """Decide what to do with a request given its tenant label and path.

    Root-domain requests (no label) always continue. On a tenant subdomain the
    admin area redirects to ``/`` and the root path is rewritten to the tenant
    page; every other path continues unchanged.
    """
    cfg = cfg or default_config

    if not subdomain:
        return CONTINUE

    # Tenant subdomains never expose the admin area
    if path.startswith(cfg.ADMIN_PATH_PREFIX):
        return RoutingAction.redirect_to(ROOT_PATH)

    if path == ROOT_PATH:
        return RoutingAction.rewrite_to(tenant_path(subdomain, cfg))

    return CONTINUE
