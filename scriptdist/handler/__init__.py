"""Script handlers: applicability, collection, path mapping, materialization.

Public API:
    HandlerRegistry, default_registry(repository) -> HandlerRegistry
    GroovyMavenProjectHandler, GroovyScriptHandler
    DistributionBundle, ScaffoldError, DistributionError, NoHandlerError
"""

from scriptdist.handler.base import ScriptHandler, strip_base_path
from scriptdist.handler.groovy import GroovyScriptHandler
from scriptdist.handler.groovy_maven import GroovyMavenProjectHandler
from scriptdist.handler.registry import HandlerRegistry, default_registry
from scriptdist.handler.types import (
    DistributionBundle,
    DistributionError,
    NoHandlerError,
    ScaffoldError,
)

__all__ = [
    "ScriptHandler",
    "strip_base_path",
    "GroovyScriptHandler",
    "GroovyMavenProjectHandler",
    "HandlerRegistry",
    "default_registry",
    "DistributionBundle",
    "DistributionError",
    "NoHandlerError",
    "ScaffoldError",
]
