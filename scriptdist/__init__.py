"""Script distribution packaging.

Public API:
    default_registry(repository) -> HandlerRegistry
    GroovyMavenProjectHandler.materialize(...) -> DistributionBundle
    GroovyMavenProjectHandler.create_project(...) -> bool
"""

__version__ = "0.1.0"
