"""Unit tests for the per-request routing decision."""

import pytest

from subdomain_router.routing import decide_action, tenant_path
from subdomain_router.schemas import CONTINUE, RoutingAction, RoutingActionKind


def test_root_path_on_tenant_is_rewritten(cfg):
    action = decide_action("acme", "/", cfg)
    assert action == RoutingAction(RoutingActionKind.REWRITE, "/s/acme")


@pytest.mark.parametrize("label", ["acme", "tenant", "a.b"])
@pytest.mark.parametrize("path", ["/admin", "/admin/", "/admin/users", "/administrator"])
def test_admin_on_tenant_redirects_to_root(cfg, label, path):
    assert decide_action(label, path, cfg) == RoutingAction.redirect_to("/")


@pytest.mark.parametrize("path", ["/about", "/s/acme", "/dashboard/settings", ""])
def test_other_tenant_paths_continue(cfg, path):
    assert decide_action("acme", path, cfg) is CONTINUE


@pytest.mark.parametrize("path", ["/", "/admin", "/admin/users", "/about"])
@pytest.mark.parametrize("subdomain", [None, ""])
def test_root_domain_always_continues(cfg, subdomain, path):
    assert decide_action(subdomain, path, cfg).kind == RoutingActionKind.CONTINUE


def test_tenant_prefix_is_configurable(clean_env):
    from subdomain_router.config import Config

    clean_env.setenv("SUBDOMAIN_ROUTER_TENANT_PREFIX", "/tenants/")
    cfg = Config()
    assert tenant_path("acme", cfg) == "/tenants/acme"
    assert decide_action("acme", "/", cfg).path == "/tenants/acme"


def test_routing_action_rejects_bad_shapes():
    with pytest.raises(ValueError):
        RoutingAction(RoutingActionKind.REWRITE, "s/acme")
    with pytest.raises(ValueError):
        RoutingAction(RoutingActionKind.REDIRECT)
    with pytest.raises(ValueError):
        RoutingAction(RoutingActionKind.CONTINUE, "/")


def test_routing_action_to_dict():
    assert RoutingAction.rewrite_to("/s/acme").to_dict() == {"action": "rewrite", "path": "/s/acme"}
    assert CONTINUE.to_dict() == {"action": "continue", "path": None}
