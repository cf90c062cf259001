"""Standalone Groovy script handler.

A plain script ships with the libraries in a sibling `lib/` folder and the
data files in a sibling `resources/` folder:

    perf/login.groovy
    perf/lib/commons-lang.jar        -> /lib/commons-lang.jar
    perf/resources/users.csv         -> /resources/users.csv
"""

import logging
import posixpath

from scriptdist.handler.base import ScriptHandler
from scriptdist.repository.types import FileEntry, join_path

logger = logging.getLogger(__name__)


class GroovyScriptHandler(ScriptHandler):
    key = "groovy"
    title = "Groovy Script"
    extension = "groovy"
    order = 300
    display_order = 300

    def can_handle(self, entry: FileEntry) -> bool:
        _, ext = posixpath.splitext(entry.path)
        return ext.lower() == f".{self.extension}"

    def collect(self, owner: str, script: FileEntry, revision: int) -> list[FileEntry]:
        base_path = self.get_base_path(script)
        entries: list[FileEntry] = []

        for each in self.repository.find_all(owner, join_path(base_path, "lib"), revision, True):
            if each.file_type.is_lib_distributable:
                entries.append(each)

        for each in self.repository.find_all(owner, join_path(base_path, "resources"), revision, True):
            if each.file_type.is_resource_distributable:
                entries.append(each)

        logger.debug("Collected %d entries for %s", len(entries), script.path)
        return entries
