"""Subdomain router middleware package."""

from .subdomain import SubdomainMiddleware, is_excluded_path

__all__ = [
    "SubdomainMiddleware",
    "is_excluded_path",
]
