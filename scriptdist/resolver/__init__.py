"""Dependency resolution for staged bundles.

Public API:
    DependencyResolver (protocol), MavenInvoker
"""

from scriptdist.resolver.maven import MavenInvoker
from scriptdist.resolver.types import DependencyResolver

__all__ = ["DependencyResolver", "MavenInvoker"]
