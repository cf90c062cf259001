"""FileEntryRepository protocol.

Handlers only ever talk to the repository through this interface, so a
Subversion-backed store, a database, or the in-memory implementation used
in tests can be swapped freely.
"""

from typing import Optional, Protocol, runtime_checkable

from scriptdist.repository.types import LATEST, FileEntry


@runtime_checkable
class FileEntryRepository(Protocol):
    """Read and write access to one owner's versioned file tree."""

    def find_all(
        self,
        owner: str,
        path_prefix: str,
        revision: int = LATEST,
        recursive: bool = False,
    ) -> list[FileEntry]:
        """List entries below path_prefix at the given revision.

        A missing prefix yields an empty list, not an error.
        """
        ...  # noqa: PLR6301

    def has_file_entry(self, owner: str, path: str, revision: int = LATEST) -> bool:
        ...  # noqa: PLR6301

    def find_one(self, owner: str, path: str, revision: int = LATEST) -> FileEntry:
        """Fetch a single entry.

        Raises:
            FileEntryNotFoundError: If no entry exists at path.
        """
        ...  # noqa: PLR6301

    def save(self, owner: str, entry: FileEntry, encoding: Optional[str] = None) -> None:
        """Store entry as a new revision."""
        ...  # noqa: PLR6301

    def latest_revision(self, owner: str) -> int:
        ...  # noqa: PLR6301


class FileEntryNotFoundError(LookupError):
    """Raised when a required repository path is absent."""

    def __init__(self, path: str, revision: int = LATEST):
        self.path = path
        self.revision = revision
        at = "latest revision" if revision == LATEST else f"revision {revision}"
        super().__init__(f"File entry '{path}' does not exist at {at}")
