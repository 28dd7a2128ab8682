import logging

import pytest

from subdomain_router.config import Config
from subdomain_router.monitoring.metrics import MetricsCollector

ROUTER_ENV_VARS = (
    "ENVIRONMENT",
    "ROOT_DOMAIN",
    "NEXT_PUBLIC_ROOT_DOMAIN",
    "SUBDOMAIN_ROUTER_ENV",
    "SUBDOMAIN_ROUTER_CUSTOM_DOMAIN",
    "SUBDOMAIN_ROUTER_PLATFORM_SUFFIX",
    "SUBDOMAIN_ROUTER_PREVIEW_SEPARATOR",
    "SUBDOMAIN_ROUTER_LOCAL_ROOT",
    "SUBDOMAIN_ROUTER_TENANT_PREFIX",
    "SUBDOMAIN_ROUTER_ADMIN_PREFIX",
    "SUBDOMAIN_ROUTER_EXCLUDED_PREFIXES",
    "SUBDOMAIN_ROUTER_REDIRECT_STATUS",
    "SUBDOMAIN_ROUTER_METRICS_ENABLED",
    "SUBDOMAIN_ROUTER_LOG_LEVEL",
    "SUBDOMAIN_ROUTER_JSON_LOGGING",
    "SUBDOMAIN_ROUTER_HOST",
    "SUBDOMAIN_ROUTER_PORT",
    "SUBDOMAIN_ROUTER_WORKERS",
)


@pytest.fixture
def clean_env(monkeypatch):
    for name in ROUTER_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


@pytest.fixture
def cfg(clean_env):
    """Default configuration with no ROOT_DOMAIN fallback."""
    return Config()


@pytest.fixture
def cfg_with_root(clean_env):
    """Configuration with a ROOT_DOMAIN fallback (port included)."""
    clean_env.setenv("ROOT_DOMAIN", "example.org:8080")
    return Config()


@pytest.fixture
def collector():
    return MetricsCollector()


@pytest.fixture(autouse=True)
def restore_root_logger():
    """create_app() reconfigures the root logger; put it back after each test."""
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)
