"""Versioned file repository facade.

Public API:
    FileEntryRepository (protocol), InMemoryFileEntryRepository
    FileEntry, FileType, FileCategory, LATEST
"""

from scriptdist.repository.memory import InMemoryFileEntryRepository
from scriptdist.repository.protocol import FileEntryNotFoundError, FileEntryRepository
from scriptdist.repository.types import (
    LATEST,
    FileCategory,
    FileEntry,
    FileType,
    join_path,
    normalize_path,
)

__all__ = [
    "FileEntryRepository",
    "FileEntryNotFoundError",
    "InMemoryFileEntryRepository",
    "FileCategory",
    "FileEntry",
    "FileType",
    "LATEST",
    "join_path",
    "normalize_path",
]
