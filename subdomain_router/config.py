"""Centralized configuration management for the subdomain router."""

# Load the router .env FIRST, before the Config class reads os.getenv()
from pathlib import Path
from dotenv import load_dotenv
import os

ENV_PATH = Path(__file__).resolve().parent / ".env"
if ENV_PATH.exists():
    load_dotenv(dotenv_path=ENV_PATH, override=False, encoding="utf-8")

from typing import Optional, List


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


class Config:
    """Subdomain router configuration.

    Reads environment variables at instance creation time so that .env is loaded first.
    Instances are read-only; build a new one to pick up changed environment values.
    """

    def __init__(self):
        # =========================
        # Environment
        # =========================
        self._ENVIRONMENT = os.getenv("ENVIRONMENT") or os.getenv("SUBDOMAIN_ROUTER_ENV") or "development"

        # =========================
        # Domains
        # =========================
        # Fallback root domain (may carry a :port suffix, stripped at lookup time)
        self._ROOT_DOMAIN = os.getenv("ROOT_DOMAIN") or os.getenv("NEXT_PUBLIC_ROOT_DOMAIN") or None
        self._CUSTOM_DOMAIN = os.getenv("SUBDOMAIN_ROUTER_CUSTOM_DOMAIN", "coffeenchat.me").strip().lstrip(".")
        self._PLATFORM_SUFFIX = os.getenv("SUBDOMAIN_ROUTER_PLATFORM_SUFFIX", ".vercel.app").strip()
        self._PREVIEW_SEPARATOR = os.getenv("SUBDOMAIN_ROUTER_PREVIEW_SEPARATOR", "---")
        self._LOCAL_ROOT_DOMAIN = os.getenv("SUBDOMAIN_ROUTER_LOCAL_ROOT", "localhost:3000")

        # =========================
        # Routing
        # =========================
        tenant_prefix = os.getenv("SUBDOMAIN_ROUTER_TENANT_PREFIX", "/s").strip().strip("/")
        # Always absolute so rewrite targets are valid paths
        self._TENANT_PATH_PREFIX = f"/{tenant_prefix}" if tenant_prefix else ""
        self._ADMIN_PATH_PREFIX = os.getenv("SUBDOMAIN_ROUTER_ADMIN_PREFIX", "/admin")
        excluded = os.getenv("SUBDOMAIN_ROUTER_EXCLUDED_PREFIXES", "/api,/_next")
        self._EXCLUDED_PREFIXES = [p.strip() for p in excluded.split(",") if p.strip()]
        self._REDIRECT_STATUS_CODE = int(os.getenv("SUBDOMAIN_ROUTER_REDIRECT_STATUS", "307"))

        # =========================
        # Logging
        # =========================
        self._LOG_LEVEL = os.getenv("SUBDOMAIN_ROUTER_LOG_LEVEL", "INFO").upper()
        self._JSON_LOGGING = _env_bool("SUBDOMAIN_ROUTER_JSON_LOGGING", "false")

        # =========================
        # Monitoring
        # =========================
        self._METRICS_ENABLED = _env_bool("SUBDOMAIN_ROUTER_METRICS_ENABLED", "true")

        # =========================
        # Server
        # =========================
        self._HOST = os.getenv("SUBDOMAIN_ROUTER_HOST", "0.0.0.0")
        self._PORT = int(os.getenv("SUBDOMAIN_ROUTER_PORT", "3000"))
        self._WORKERS = int(os.getenv("SUBDOMAIN_ROUTER_WORKERS", "1"))

    # ===== Properties =====
    @property
    def ENVIRONMENT(self) -> str:
        return self._ENVIRONMENT

    @property
    def ROOT_DOMAIN(self) -> Optional[str]:
        return self._ROOT_DOMAIN

    @property
    def CUSTOM_DOMAIN(self) -> str:
        return self._CUSTOM_DOMAIN

    @property
    def CUSTOM_DOMAIN_SUFFIX(self) -> str:
        return f".{self._CUSTOM_DOMAIN}"

    @property
    def PLATFORM_SUFFIX(self) -> str:
        return self._PLATFORM_SUFFIX

    @property
    def PREVIEW_SEPARATOR(self) -> str:
        return self._PREVIEW_SEPARATOR

    @property
    def LOCAL_ROOT_DOMAIN(self) -> str:
        return self._LOCAL_ROOT_DOMAIN

    @property
    def TENANT_PATH_PREFIX(self) -> str:
        return self._TENANT_PATH_PREFIX

    @property
    def ADMIN_PATH_PREFIX(self) -> str:
        return self._ADMIN_PATH_PREFIX

    @property
    def EXCLUDED_PREFIXES(self) -> List[str]:
        return list(self._EXCLUDED_PREFIXES)

    @property
    def REDIRECT_STATUS_CODE(self) -> int:
        return self._REDIRECT_STATUS_CODE

    @property
    def LOG_LEVEL(self) -> str:
        return self._LOG_LEVEL

    @property
    def JSON_LOGGING(self) -> bool:
        return self._JSON_LOGGING

    @property
    def METRICS_ENABLED(self) -> bool:
        return self._METRICS_ENABLED

    @property
    def HOST(self) -> str:
        return self._HOST

    @property
    def PORT(self) -> int:
        return self._PORT

    @property
    def WORKERS(self) -> int:
        return self._WORKERS

    def validate(self) -> List[str]:
        """Validate configuration and return list of warnings."""
        warnings = []

        if self.is_production() and not self.ROOT_DOMAIN:
            warnings.append(
                "ROOT_DOMAIN is not set in production. Hostnames outside the custom and "
                "platform domains will be treated as their own root domain"
            )

        if not self.PLATFORM_SUFFIX.startswith("."):
            warnings.append(
                f"SUBDOMAIN_ROUTER_PLATFORM_SUFFIX={self.PLATFORM_SUFFIX!r} should start with '.'"
            )

        if not self.PREVIEW_SEPARATOR:
            warnings.append("SUBDOMAIN_ROUTER_PREVIEW_SEPARATOR is empty; preview hostnames cannot be parsed")

        if not 300 <= self.REDIRECT_STATUS_CODE <= 399:
            warnings.append(
                f"SUBDOMAIN_ROUTER_REDIRECT_STATUS={self.REDIRECT_STATUS_CODE} is not a redirect status code"
            )

        return warnings

    def is_production(self) -> bool:
        """Check if running in production mode."""
        return self._ENVIRONMENT == "production"


# Global config instance (created AFTER .env is loaded)
config = Config()
