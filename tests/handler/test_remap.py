"""Tests for repository-to-bundle path mapping."""

import pytest

from scriptdist.handler.base import strip_base_path
from scriptdist.handler.groovy_maven import GroovyMavenProjectHandler
from scriptdist.repository.types import FileEntry


@pytest.fixture
def handler(repository, template_source):
    return GroovyMavenProjectHandler(repository, template_source)


class TestStripBasePath:
    def test_strips_prefix(self):
        assert strip_base_path("perf/proj", "perf/proj/lib/a.jar") == "/lib/a.jar"

    def test_respects_directory_boundary(self):
        assert strip_base_path("perf/proj", "perf/proj2/a.txt") == "/perf/proj2/a.txt"

    def test_empty_base(self):
        assert strip_base_path("", "a/b.txt") == "/a/b.txt"

    def test_idempotent(self):
        once = strip_base_path("perf/proj", "perf/proj/lib/a.jar")
        assert strip_base_path("perf/proj", once) == once


class TestMavenRemap:
    @pytest.mark.parametrize("path,expected", [
        ("perf/proj/src/main/java/TestRunner.groovy", "/TestRunner.groovy"),
        ("perf/proj/src/main/java/util/Helper.groovy", "/util/Helper.groovy"),
        ("perf/proj/src/main/resources/users.csv", "/users.csv"),
        ("perf/proj/src/main/resources/conf/app.properties", "/conf/app.properties"),
        ("perf/proj/lib/private.jar", "/lib/private.jar"),
        ("perf/proj/pom.xml", "/pom.xml"),
    ])
    def test_flattens_source_and_resource_trees(self, handler, path, expected):
        assert handler.remap("perf/proj", FileEntry(path=path)) == expected

    def test_is_pure(self, handler):
        entry = FileEntry(path="perf/proj/src/main/resources/users.csv")
        assert handler.remap("perf/proj", entry) == handler.remap("perf/proj", entry)

    def test_flattened_path_is_unchanged(self, handler):
        flattened = handler.remap("perf/proj", FileEntry(path="perf/proj/src/main/java/A.groovy"))
        assert handler.remap("perf/proj", FileEntry(path=flattened)) == flattened

    def test_results_stay_relative_to_bundle_root(self, handler):
        for path in ("perf/proj/src/main/java/A.groovy", "perf/proj/lib/x.jar", "other/z.txt"):
            result = handler.remap("perf/proj", FileEntry(path=path))
            assert result.startswith("/")
            assert ".." not in result.split("/")
