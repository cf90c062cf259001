"""Groovy Maven project handler.

A Groovy Maven project is a directory holding a pom.xml and the usual
Maven source layout:

    proj/pom.xml
    proj/src/main/java/TestRunner.groovy
    proj/src/main/resources/...
    proj/lib/...

Packaging flattens src/main/java and src/main/resources into the bundle
root, ships lib/ as is, then lets Maven copy the declared dependencies
into lib/. The pom.xml is only needed for that step and is removed again.
"""

import logging
import posixpath
from pathlib import Path
from typing import Callable, Optional
from urllib.parse import urlsplit

from scriptdist.handler.base import ScriptHandler, strip_base_path
from scriptdist.handler.types import DistributionBundle, ScaffoldError
from scriptdist.repository.protocol import FileEntryRepository
from scriptdist.repository.types import (
    FileCategory,
    FileEntry,
    FileType,
    join_path,
)
from scriptdist.resolver.maven import MavenInvoker
from scriptdist.resolver.types import DependencyResolver
from scriptdist.templates.source import TemplateSource, default_template_source

logger = logging.getLogger(__name__)

RESOURCES = "/src/main/resources/"
JAVA = "/src/main/java/"
LIB = "/lib/"
POM = "pom.xml"

COPY_DEPENDENCIES_GOAL = "dependency:copy-dependencies"
COPY_DEPENDENCIES_ARGS = [
    "-DoutputDirectory=./lib",  # into the bundle's lib folder
    "-DexcludeScope=provided",  # the agent already has provided libraries
]

# IDE metadata and build output kept out of version control
IGNORED_PATHS = [".project", ".classpath", ".settings", "target"]

PLACEHOLDER_USER = "${userName}"
PLACEHOLDER_NAME = "${name}"
PLACEHOLDER_URL = "${url}"

TARGET_HOSTS_PROPERTY = "targetHosts"
SCAFFOLD_DESCRIPTION = "create groovy maven project"


class GroovyMavenProjectHandler(ScriptHandler):
    key = "groovy_maven"
    title = "Groovy Maven Project"
    extension = "groovy"
    order = 200
    display_order = 400

    def __init__(
        self,
        repository: FileEntryRepository,
        template_source: Optional[TemplateSource] = None,
        resolver_factory: Callable[[], DependencyResolver] = MavenInvoker,
    ):
        super().__init__(repository)
        self._template_source = template_source
        self.resolver_factory = resolver_factory

    @property
    def template_source(self) -> TemplateSource:
        if self._template_source is None:
            self._template_source = default_template_source()
        return self._template_source

    def is_project_handler(self) -> bool:
        return True

    # ------------------------------------------------------------------
    # Packaging
    # ------------------------------------------------------------------

    def can_handle(self, entry: FileEntry) -> bool:
        if entry.created_user is None:
            return False
        path = "/" + entry.path
        _, ext = posixpath.splitext(path)
        if JAVA not in path or ext.lower() != f".{self.extension}":
            return False
        return self.repository.has_file_entry(
            entry.created_user,
            join_path(self.get_base_path(entry), POM),
            entry.revision,
        )

    def get_base_path(self, script: FileEntry) -> str:
        path = "/" + script.path
        return path[:path.rindex(JAVA)].lstrip("/")

    def collect(self, owner: str, script: FileEntry, revision: int) -> list[FileEntry]:
        base_path = self.get_base_path(script)
        entries: list[FileEntry] = []

        for each in self.repository.find_all(owner, base_path + RESOURCES, revision, True):
            if each.file_type.is_resource_distributable:
                entries.append(each)

        for each in self.repository.find_all(owner, base_path + JAVA, revision, True):
            if each.file_type.is_lib_distributable and each.path != script.path:
                entries.append(each)

        for each in self.repository.find_all(owner, base_path + LIB, revision):
            if each.file_type.is_lib_distributable:
                entries.append(each)

        entries.append(self.repository.find_one(owner, join_path(base_path, POM), revision))
        return entries

    def remap(self, base_path: str, entry: FileEntry) -> str:
        sub_path = strip_base_path(base_path, entry.path)
        if sub_path.startswith(JAVA):
            return sub_path[len(JAVA) - 1:]
        if sub_path.startswith(RESOURCES):
            return sub_path[len(RESOURCES) - 1:]
        return sub_path

    def prepare_dist_more(
        self,
        test_id: int,
        owner: str,
        script: FileEntry,
        target_dir: Path,
        bundle: DistributionBundle,
    ) -> None:
        pom_path = join_path(self.get_base_path(script), POM)
        resolver = self.resolver_factory()
        bundle.println()
        bundle.println(
            f"Copy dependencies by running 'mvn {COPY_DEPENDENCIES_GOAL} "
            f"{' '.join(COPY_DEPENDENCIES_ARGS)}'"
        )

        try:
            result = resolver.run(
                COPY_DEPENDENCIES_GOAL,
                list(COPY_DEPENDENCIES_ARGS),
                target_dir,
                bundle,
                bundle,
            )
        finally:
            bundle.flush()
            # The pom.xml is not needed on the agent.
            (target_dir / POM).unlink(missing_ok=True)

        success = result == 0
        bundle.println()
        if success:
            bundle.println(f"Dependencies in {pom_path} was copied.")
            logger.info("Dependencies in %s is copied into %s/lib folder", pom_path, target_dir)
        else:
            bundle.println(f"Dependencies copy in {pom_path} is failed.")
            logger.info("Dependencies copy in %s is failed (exit=%d)", pom_path, result)

        bundle.success = success

    def default_quick_test_entry(self, path: str) -> FileEntry:
        return FileEntry(path=join_path(path, "src/main/java/TestRunner.groovy"))

    # ------------------------------------------------------------------
    # Scaffolding
    # ------------------------------------------------------------------

    def create_project(
        self,
        owner: str,
        base_path: str,
        file_name: str,
        project_name: str,
        target_url: str,
        include_lib_dir: bool,
    ) -> bool:
        """Create a Groovy Maven project at base_path/file_name from templates.

        Returns True once every entry has been saved.

        Raises:
            ScaffoldError: Naming the template that could not be read or
                saved. Entries saved before the failure are kept.
        """
        path = join_path(base_path, file_name)
        self._create_base_directory(owner, path)
        self._create_file_entries(owner, path, project_name, target_url)
        if include_lib_dir:
            self._create_library_directory(owner, path)
        logger.info("Created %s project %s for %s", self.key, path, owner)
        return True

    def _create_base_directory(self, owner: str, path: str) -> None:
        entry = FileEntry(
            path=path,
            file_type=FileType.DIR,
            properties={"svn:ignore": "\n".join(IGNORED_PATHS)},
            description=SCAFFOLD_DESCRIPTION,
        )
        self.repository.save(owner, entry, None)

    def _create_file_entries(self, owner: str, path: str, name: str, url: str) -> None:
        try:
            templates = list(self.template_source.iter_templates(self.key))
        except OSError as exc:
            raise ScaffoldError(
                f"script_template/{self.key}",
                f"Error while patching script_template/{self.key}",
            ) from exc

        host = _get_host(url)
        for each in templates:
            try:
                content = each.read_text()
                content = content.replace(PLACEHOLDER_USER, owner)
                content = content.replace(PLACEHOLDER_NAME, name)
                content = content.replace(PLACEHOLDER_URL, url)
                entry = FileEntry(
                    path=join_path(path, each.relative_path),
                    content=content,
                    description=SCAFFOLD_DESCRIPTION,
                )
                if host and entry.file_type.category == FileCategory.SCRIPT:
                    entry.properties = {TARGET_HOSTS_PROPERTY: host}
                self.repository.save(owner, entry, "UTF-8")
            except Exception as exc:
                # Read, decode and repository save failures all name the template.
                raise ScaffoldError(each.name) from exc

    def _create_library_directory(self, owner: str, path: str) -> None:
        entry = FileEntry(
            path=join_path(path, "lib"),
            file_type=FileType.DIR,
            description="put private libraries here",
        )
        try:
            self.repository.save(owner, entry, None)
        except Exception as exc:
            raise ScaffoldError(entry.file_name) from exc


def _get_host(url: str) -> str:
    """Return the host of url, or '' when it has none or cannot be parsed."""
    try:
        return urlsplit(url).hostname or ""
    except ValueError:
        return ""
