"""Sandbox helpers for external build-tool processes."""

from scriptdist.sandbox.limits import apply_resource_limits, resource_limiter

__all__ = ["apply_resource_limits", "resource_limiter"]
