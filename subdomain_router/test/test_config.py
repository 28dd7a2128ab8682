"""Unit tests for router configuration."""

import pytest

from subdomain_router.config import Config


def test_defaults(cfg):
    assert cfg.ROOT_DOMAIN is None
    assert cfg.CUSTOM_DOMAIN == "coffeenchat.me"
    assert cfg.CUSTOM_DOMAIN_SUFFIX == ".coffeenchat.me"
    assert cfg.PLATFORM_SUFFIX == ".vercel.app"
    assert cfg.PREVIEW_SEPARATOR == "---"
    assert cfg.LOCAL_ROOT_DOMAIN == "localhost:3000"
    assert cfg.TENANT_PATH_PREFIX == "/s"
    assert cfg.ADMIN_PATH_PREFIX == "/admin"
    assert cfg.EXCLUDED_PREFIXES == ["/api", "/_next"]
    assert cfg.REDIRECT_STATUS_CODE == 307
    assert cfg.validate() == []
    assert not cfg.is_production()


def test_next_public_root_domain_is_accepted(clean_env):
    clean_env.setenv("NEXT_PUBLIC_ROOT_DOMAIN", "example.org:3000")
    assert Config().ROOT_DOMAIN == "example.org:3000"


def test_excluded_prefixes_parsed_from_list(clean_env):
    clean_env.setenv("SUBDOMAIN_ROUTER_EXCLUDED_PREFIXES", " /api, /static ,,")
    assert Config().EXCLUDED_PREFIXES == ["/api", "/static"]


def test_validate_reports_misconfiguration(clean_env):
    clean_env.setenv("ENVIRONMENT", "production")
    clean_env.setenv("SUBDOMAIN_ROUTER_PLATFORM_SUFFIX", "vercel.app")
    clean_env.setenv("SUBDOMAIN_ROUTER_PREVIEW_SEPARATOR", "")
    clean_env.setenv("SUBDOMAIN_ROUTER_REDIRECT_STATUS", "200")

    cfg = Config()
    warnings = cfg.validate()

    assert cfg.is_production()
    assert len(warnings) == 4
    assert any("ROOT_DOMAIN" in w for w in warnings)
    assert any("PLATFORM_SUFFIX" in w for w in warnings)


def test_invalid_integer_raises(clean_env):
    clean_env.setenv("SUBDOMAIN_ROUTER_REDIRECT_STATUS", "soon")
    with pytest.raises(ValueError):
        Config()


@pytest.mark.parametrize("raw, expected", [("s", "/s"), ("/s/", "/s"), ("tenants", "/tenants"), ("/", "")])
def test_tenant_prefix_is_always_absolute(clean_env, raw, expected):
    clean_env.setenv("SUBDOMAIN_ROUTER_TENANT_PREFIX", raw)
    assert Config().TENANT_PATH_PREFIX == expected
