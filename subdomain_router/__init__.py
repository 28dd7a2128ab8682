"""Hostname-based multi-tenant routing."""

from .hostnames import get_root_domain, strip_port
from .routing import decide_action
from .schemas import RoutingAction, RoutingActionKind
from .tenancy import extract_subdomain, get_request_subdomain

__all__ = [
    "get_root_domain",
    "strip_port",
    "extract_subdomain",
    "get_request_subdomain",
    "decide_action",
    "RoutingAction",
    "RoutingActionKind",
]
