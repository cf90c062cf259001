"""Handler registry: picks the packaging strategy for a script.

Handlers are tried in ascending `order`; the first whose can_handle()
accepts the script wins. The Maven project handler is ordered before the
plain Groovy handler because every Maven project script is also a plain
.groovy file.
"""

import logging
from pathlib import Path
from typing import Iterable, Optional

from scriptdist.handler.base import ScriptHandler
from scriptdist.handler.groovy import GroovyScriptHandler
from scriptdist.handler.groovy_maven import GroovyMavenProjectHandler
from scriptdist.handler.types import NoHandlerError
from scriptdist.repository.protocol import FileEntryRepository
from scriptdist.repository.types import FileEntry
from scriptdist.templates.source import default_template_source

logger = logging.getLogger(__name__)


class HandlerRegistry:
    def __init__(self, handlers: Iterable[ScriptHandler]):
        self._handlers = sorted(handlers, key=lambda h: h.order)

    @property
    def handlers(self) -> list[ScriptHandler]:
        return list(self._handlers)

    def handlers_for_display(self) -> list[ScriptHandler]:
        return sorted(self._handlers, key=lambda h: h.display_order)

    def get_handler(self, entry: FileEntry) -> ScriptHandler:
        """Return the highest-priority handler accepting entry.

        Raises:
            NoHandlerError: If no handler accepts entry.
        """
        for handler in self._handlers:
            if handler.can_handle(entry):
                logger.debug("%s handled by %s", entry.path, handler.key)
                return handler
        raise NoHandlerError(f"No script handler can handle '{entry.path}'")

    def get_handler_by_key(self, key: str) -> ScriptHandler:
        for handler in self._handlers:
            if handler.key == key:
                return handler
        raise NoHandlerError(f"No script handler registered under '{key}'")

    def project_handlers(self) -> list[ScriptHandler]:
        """Handlers that can scaffold a new project, in display order."""
        return [h for h in self.handlers_for_display() if h.is_project_handler()]

    def get_project_handler(self, key: str) -> ScriptHandler:
        """Return the handler registered under key if it scaffolds projects.

        Raises:
            NoHandlerError: If key is unknown or names a plain script handler.
        """
        handler = self.get_handler_by_key(key)
        if not handler.is_project_handler():
            raise NoHandlerError(f"Script handler '{key}' does not create projects")
        return handler


def default_registry(
    repository: FileEntryRepository,
    template_dir: Optional[Path] = None,
) -> HandlerRegistry:
    """Registry with the Groovy Maven project and plain Groovy handlers."""
    return HandlerRegistry([
        GroovyMavenProjectHandler(repository, default_template_source(template_dir)),
        GroovyScriptHandler(repository),
    ])
