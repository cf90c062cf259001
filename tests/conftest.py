"""Shared fixtures for the scriptdist test suite.

Repositories are in-memory and every test gets a fresh one. The Maven
resolver is replaced by FakeResolver so no external process is started.
"""

from pathlib import Path

import pytest

from scriptdist.handler.groovy_maven import GroovyMavenProjectHandler
from scriptdist.repository.memory import InMemoryFileEntryRepository
from scriptdist.repository.types import FileEntry, FileType
from scriptdist.templates.source import PACKAGED_TEMPLATE_DIR, DirectoryTemplateSource

OWNER = "alice"


class FakeResolver:
    """Records calls and writes canned output instead of running Maven."""

    instances: list["FakeResolver"] = []

    def __init__(self, exit_code: int = 0, stdout: str = "", stderr: str = ""):
        self.exit_code = exit_code
        self.stdout_text = stdout
        self.stderr_text = stderr
        self.calls: list[dict] = []
        FakeResolver.instances.append(self)

    def run(self, goal, args, working_dir, stdout, stderr) -> int:
        self.calls.append({
            "goal": goal,
            "args": list(args),
            "working_dir": Path(working_dir),
            "pom_present": (Path(working_dir) / "pom.xml").exists(),
        })
        if self.stdout_text:
            stdout.write(self.stdout_text)
        if self.stderr_text:
            stderr.write(self.stderr_text)
        return self.exit_code


@pytest.fixture
def resolvers():
    """Every FakeResolver constructed during the test, in creation order."""
    FakeResolver.instances.clear()
    yield FakeResolver.instances
    FakeResolver.instances.clear()


@pytest.fixture
def owner():
    return OWNER


@pytest.fixture
def repository():
    return InMemoryFileEntryRepository()


@pytest.fixture
def template_source():
    return DirectoryTemplateSource(PACKAGED_TEMPLATE_DIR)


@pytest.fixture
def maven_project(repository):
    """A Groovy Maven project 'perf/proj' with sources, resources and libs."""
    files = [
        FileEntry(path="perf/proj/pom.xml", content="<project/>"),
        FileEntry(path="perf/proj/src/main/java/TestRunner.groovy", content="class TestRunner {}"),
        FileEntry(path="perf/proj/src/main/java/util/Helper.groovy", content="class Helper {}"),
        FileEntry(path="perf/proj/src/main/java/notes.txt", content="not shipped"),
        FileEntry(path="perf/proj/src/main/resources/users.csv", content="id,name\n1,bob\n"),
        FileEntry(path="perf/proj/src/main/resources/conf/app.properties", content="a=1"),
        FileEntry(path="perf/proj/src/main/resources/data", file_type=FileType.DIR),
        FileEntry(path="perf/proj/lib/private.jar", content_bytes=b"PK\x03\x04jar"),
        FileEntry(path="perf/proj/lib/readme.txt", content="not shipped"),
    ]
    for each in files:
        repository.save(OWNER, each)
    return repository.find_one(OWNER, "perf/proj/src/main/java/TestRunner.groovy")


@pytest.fixture
def make_handler(repository, template_source, resolvers):
    def _make(exit_code: int = 0, stdout: str = "", stderr: str = ""):
        return GroovyMavenProjectHandler(
            repository,
            template_source,
            resolver_factory=lambda: FakeResolver(exit_code, stdout, stderr),
        )
    return _make
