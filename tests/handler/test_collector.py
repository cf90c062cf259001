"""Tests for GroovyMavenProjectHandler.collect()."""

import pytest

from scriptdist.handler.groovy_maven import GroovyMavenProjectHandler
from scriptdist.repository.protocol import FileEntryNotFoundError
from scriptdist.repository.types import LATEST, FileEntry


@pytest.fixture
def handler(repository, template_source):
    return GroovyMavenProjectHandler(repository, template_source)


class TestCollect:
    def test_order_is_resources_sources_lib_pom(self, handler, owner, maven_project):
        entries = handler.collect(owner, maven_project, LATEST)
        assert [e.path for e in entries] == [
            "perf/proj/src/main/resources/conf/app.properties",
            "perf/proj/src/main/resources/users.csv",
            "perf/proj/src/main/java/util/Helper.groovy",
            "perf/proj/lib/private.jar",
            "perf/proj/pom.xml",
        ]

    def test_excludes_the_script_itself(self, handler, owner, maven_project):
        paths = [e.path for e in handler.collect(owner, maven_project, LATEST)]
        assert maven_project.path not in paths

    def test_skips_non_distributable_files(self, handler, owner, maven_project):
        paths = [e.path for e in handler.collect(owner, maven_project, LATEST)]
        assert "perf/proj/src/main/java/notes.txt" not in paths
        assert "perf/proj/lib/readme.txt" not in paths
        assert "perf/proj/src/main/resources/data" not in paths

    def test_lib_folder_is_not_recursive(self, handler, repository, owner, maven_project):
        repository.save(owner, FileEntry(path="perf/proj/lib/nested/deep.jar"))
        paths = [e.path for e in handler.collect(owner, maven_project, LATEST)]
        assert "perf/proj/lib/nested/deep.jar" not in paths

    def test_pom_is_last_and_present_once(self, handler, owner, maven_project):
        entries = handler.collect(owner, maven_project, LATEST)
        assert entries[-1].path == "perf/proj/pom.xml"
        assert sum(1 for e in entries if e.path.endswith("pom.xml")) == 1

    def test_empty_subtrees_contribute_nothing(self, handler, repository, owner):
        repository.save(owner, FileEntry(path="bare/pom.xml"))
        repository.save(owner, FileEntry(path="bare/src/main/java/T.groovy"))
        script = repository.find_one(owner, "bare/src/main/java/T.groovy")

        entries = handler.collect(owner, script, LATEST)
        assert [e.path for e in entries] == ["bare/pom.xml"]

    def test_missing_pom_fails_collection(self, handler, repository, owner, maven_project):
        repository.delete(owner, "perf/proj/pom.xml")
        with pytest.raises(FileEntryNotFoundError):
            handler.collect(owner, maven_project, LATEST)

    def test_reads_use_the_given_revision(self, handler, repository, owner, maven_project):
        pinned = repository.latest_revision(owner)
        repository.save(owner, FileEntry(path="perf/proj/src/main/resources/new.csv"))
        repository.save(owner, FileEntry(path="perf/proj/pom.xml", content="<project>v2</project>"))

        entries = handler.collect(owner, maven_project, pinned)

        assert "perf/proj/src/main/resources/new.csv" not in [e.path for e in entries]
        assert entries[-1].content == "<project/>"

    def test_is_restartable(self, handler, owner, maven_project):
        first = handler.collect(owner, maven_project, LATEST)
        second = handler.collect(owner, maven_project, LATEST)
        assert [e.path for e in first] == [e.path for e in second]
