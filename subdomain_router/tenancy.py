"""Single source of truth for tenant subdomain extraction."""

import re
from typing import Optional

from starlette.requests import Request

from .config import Config, config as default_config
from .hostnames import get_root_domain, is_local_host, is_preview_host, strip_port

LOCAL_SUBDOMAIN_RE = re.compile(r"http://([^.]+)\.localhost")

_UNSET = object()


def _label(value: Optional[str]) -> Optional[str]:
    # An empty label means the request targets the root domain
    return value or None


def _local_subdomain(url: str, hostname: str) -> Optional[str]:
    match = LOCAL_SUBDOMAIN_RE.search(url)
    if match and match.group(1):
        return match.group(1)

    if ".localhost" in hostname:
        return _label(hostname.split(".")[0])

    return None


def extract_subdomain(url: str, host: str, cfg: Optional[Config] = None) -> Optional[str]:
    """Return the tenant label encoded in the request host, or None for the root domain.

    Args:
        url: Full request URL
        host: Host header value (may include a port)
        cfg: Router configuration (defaults to the process config)

    Returns:
        Subdomain label, never ``www`` and never empty
    """
    cfg = cfg or default_config
    url = url or ""
    hostname = strip_port(host)

    # Local development (acme.localhost:3000)
    if is_local_host(url):
        return _local_subdomain(url, hostname)

    root_domain = get_root_domain(hostname, cfg)

    # Preview deployments (tenant---branch.vercel.app)
    if is_preview_host(hostname, cfg):
        return _label(hostname.split(cfg.PREVIEW_SEPARATOR)[0])

    # Custom domain (acme.coffeenchat.me)
    if hostname.endswith(cfg.CUSTOM_DOMAIN_SUFFIX):
        if hostname in (cfg.CUSTOM_DOMAIN, f"www.{cfg.CUSTOM_DOMAIN}"):
            return None
        candidate = hostname.replace(cfg.CUSTOM_DOMAIN_SUFFIX, "", 1)
        if candidate and candidate != "www":
            return candidate

    # Any other domain relative to the resolved root
    suffix = f".{root_domain}"
    is_subdomain = (
        hostname != root_domain
        and hostname != f"www.{root_domain}"
        and hostname.endswith(suffix)
    )
    if is_subdomain:
        return _label(hostname.replace(suffix, "", 1))

    return None


def get_request_subdomain(request: Request, cfg: Optional[Config] = None) -> Optional[str]:
    """
    Tenant label for a request.

    Priority:
      1) request.state.subdomain (set by SubdomainMiddleware)
      2) computed from the request URL and Host header
    """
    subdomain = getattr(request.state, "subdomain", _UNSET)
    if subdomain is not _UNSET:
        return subdomain

    return extract_subdomain(str(request.url), request.headers.get("host", ""), cfg)
