"""Types for the versioned file repository.

FileEntry is the unit every handler reads and writes. Its FileType is
derived from the file name, and the type decides which bundle stage
(resources, libraries) an entry is shipped by.
"""

import posixpath
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Optional

# Sentinel revision meaning "whatever is newest at read time"
LATEST = -1


class FileCategory(StrEnum):
    """Coarse classification of a repository file."""

    SCRIPT = "script"
    LIB = "lib"
    RESOURCE = "resource"
    DESCRIPTOR = "descriptor"
    DIR = "dir"


class FileType(StrEnum):
    """Concrete file type, keyed by extension (or file name for descriptors)."""

    GROOVY_SCRIPT = "groovy"
    PYTHON_SCRIPT = "py"
    MAVEN_POM = "pom.xml"
    XML = "xml"
    TEXT = "txt"
    CSV = "csv"
    JSON = "json"
    PROPERTIES = "properties"
    CLASS = "class"
    JAR = "jar"
    DLL = "dll"
    SO = "so"
    UNKNOWN = "unknown"
    DIR = "dir"

    @classmethod
    def from_path(cls, path: str) -> "FileType":
        name = posixpath.basename(path).lower()
        if name == cls.MAVEN_POM.value:
            return cls.MAVEN_POM
        _, ext = posixpath.splitext(name)
        ext = ext.lstrip(".")
        if not ext or ext in (cls.UNKNOWN.value, cls.DIR.value):
            return cls.UNKNOWN
        try:
            return cls(ext)
        except ValueError:
            return cls.UNKNOWN

    @property
    def category(self) -> FileCategory:
        return _FILE_TYPE_TRAITS[self][0]

    @property
    def is_resource_distributable(self) -> bool:
        return _FILE_TYPE_TRAITS[self][1]

    @property
    def is_lib_distributable(self) -> bool:
        return _FILE_TYPE_TRAITS[self][2]


# (category, resource-distributable, lib-distributable)
_FILE_TYPE_TRAITS: dict[FileType, tuple[FileCategory, bool, bool]] = {
    FileType.GROOVY_SCRIPT: (FileCategory.SCRIPT, False, True),
    FileType.PYTHON_SCRIPT: (FileCategory.SCRIPT, False, True),
    FileType.MAVEN_POM: (FileCategory.DESCRIPTOR, False, False),
    FileType.XML: (FileCategory.RESOURCE, True, False),
    FileType.TEXT: (FileCategory.RESOURCE, True, False),
    FileType.CSV: (FileCategory.RESOURCE, True, False),
    FileType.JSON: (FileCategory.RESOURCE, True, False),
    FileType.PROPERTIES: (FileCategory.RESOURCE, True, False),
    FileType.CLASS: (FileCategory.LIB, False, True),
    FileType.JAR: (FileCategory.LIB, False, True),
    FileType.DLL: (FileCategory.LIB, False, True),
    FileType.SO: (FileCategory.LIB, False, True),
    FileType.UNKNOWN: (FileCategory.RESOURCE, True, False),
    FileType.DIR: (FileCategory.DIR, False, False),
}


def normalize_path(path: str) -> str:
    """Normalize a repository path: POSIX separators, no leading slash, no '..'.

    Raises ValueError for paths that climb above the repository root.
    """
    cleaned = posixpath.normpath(path.replace("\\", "/")).lstrip("/")
    if cleaned == ".":
        return ""
    if cleaned == ".." or cleaned.startswith("../"):
        raise ValueError(f"Path escapes the repository root: {path!r}")
    return cleaned


def join_path(*parts: str) -> str:
    """Join repository path fragments, tolerating stray slashes."""
    return normalize_path("/".join(p.strip("/") for p in parts if p and p.strip("/")))


@dataclass
class FileEntry:
    """A single file (or directory) in the versioned repository.

    file_type defaults to the type derived from path; pass FileType.DIR
    explicitly for directories. revision is the revision the entry was
    read at (LATEST for entries that have not been saved yet).
    """

    path: str
    created_user: Optional[str] = None
    file_type: Optional[FileType] = None
    properties: dict[str, str] = field(default_factory=dict)
    content: Optional[str] = None
    content_bytes: Optional[bytes] = None
    encoding: Optional[str] = None
    description: str = ""
    revision: int = LATEST

    def __post_init__(self) -> None:
        self.path = normalize_path(self.path)
        if self.file_type is None:
            self.file_type = FileType.from_path(self.path)

    @property
    def file_name(self) -> str:
        return posixpath.basename(self.path)

    @property
    def is_dir(self) -> bool:
        return self.file_type == FileType.DIR

    def to_bytes(self) -> bytes:
        """Return the payload to write into a bundle."""
        if self.content_bytes is not None:
            return self.content_bytes
        return (self.content or "").encode(self.encoding or "utf-8")
