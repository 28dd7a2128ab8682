"""Root domain resolution for the known deployment hostname shapes."""

from typing import Callable, List, Optional, Tuple

from .config import Config, config as default_config

LOCAL_HOST_MARKERS = ("localhost", "127.0.0.1")

# (predicate, resolver) pairs; both take (hostname, config)
RootDomainRule = Tuple[Callable[[str, Config], bool], Callable[[str, Config], Optional[str]]]


def strip_port(host: str) -> str:
    """Drop a ``:port`` suffix (everything from the first colon)."""
    return (host or "").split(":")[0]


def is_local_host(value: str) -> bool:
    return any(marker in value for marker in LOCAL_HOST_MARKERS)


def is_preview_host(hostname: str, cfg: Config) -> bool:
    """``tenant---branch.vercel.app`` style preview deployment hostname."""
    sep = cfg.PREVIEW_SEPARATOR
    return bool(sep) and sep in hostname and hostname.endswith(cfg.PLATFORM_SUFFIX)


def is_platform_host(hostname: str, cfg: Config) -> bool:
    """Platform production hostname (no preview separator)."""
    sep = cfg.PREVIEW_SEPARATOR
    return hostname.endswith(cfg.PLATFORM_SUFFIX) and not (sep and sep in hostname)


def _preview_root(hostname: str, cfg: Config) -> str:
    parts = hostname.split(cfg.PREVIEW_SEPARATOR)
    return parts[-1] if len(parts) > 1 else hostname


def _env_root(hostname: str, cfg: Config) -> Optional[str]:
    return strip_port(cfg.ROOT_DOMAIN) if cfg.ROOT_DOMAIN else None


ROOT_DOMAIN_RULES: List[RootDomainRule] = [
    # Local development
    (lambda h, cfg: is_local_host(h), lambda h, cfg: cfg.LOCAL_ROOT_DOMAIN),
    # Preview deployments: the branch segment is the root
    (is_preview_host, _preview_root),
    # Platform production: each platform subdomain is its own root
    (is_platform_host, lambda h, cfg: h),
    # Custom domain
    (lambda h, cfg: h.endswith(cfg.CUSTOM_DOMAIN_SUFFIX), lambda h, cfg: cfg.CUSTOM_DOMAIN),
    # Configured fallback
    (lambda h, cfg: bool(cfg.ROOT_DOMAIN), _env_root),
]


def get_root_domain(hostname: str, cfg: Optional[Config] = None) -> str:
    """Return the tenant-less base domain for ``hostname``.

    Rules are tried in order and the first matching predicate wins. When nothing
    matches the hostname is its own root domain. Never raises.
    """
    cfg = cfg or default_config
    hostname = strip_port(hostname)

    for matches, resolve in ROOT_DOMAIN_RULES:
        if matches(hostname, cfg):
            root = resolve(hostname, cfg)
            if root is not None:
                return root

    return hostname
