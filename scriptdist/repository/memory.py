"""In-memory versioned repository.

Every save() produces a new revision per owner, and every revision is kept
as a full snapshot, so reads at an old revision never observe later
writes. Revision 0 is the empty tree. Entries handed out by reads carry the
revision they were read at.
"""

import copy
import logging
import threading
from typing import Optional

from scriptdist.repository.protocol import FileEntryNotFoundError
from scriptdist.repository.types import LATEST, FileEntry, normalize_path

logger = logging.getLogger(__name__)


class InMemoryFileEntryRepository:
    """FileEntryRepository backed by per-owner snapshot lists."""

    def __init__(self) -> None:
        self._snapshots: dict[str, list[dict[str, FileEntry]]] = {}
        self._lock = threading.Lock()

    def latest_revision(self, owner: str) -> int:
        with self._lock:
            return len(self._history(owner)) - 1

    def save(self, owner: str, entry: FileEntry, encoding: Optional[str] = None) -> None:
        stored = copy.deepcopy(entry)
        stored.created_user = entry.created_user or owner
        stored.encoding = encoding or entry.encoding
        with self._lock:
            history = self._history(owner)
            revision = len(history)
            stored.revision = revision
            snapshot = dict(history[-1])
            snapshot[stored.path] = stored
            history.append(snapshot)
        logger.debug("Saved %s for %s at revision %d", stored.path, owner, revision)

    def delete(self, owner: str, path: str) -> None:
        """Remove path (and anything below it) as a new revision."""
        path = normalize_path(path)
        with self._lock:
            history = self._history(owner)
            snapshot = {
                p: e for p, e in history[-1].items()
                if p != path and not p.startswith(path + "/")
            }
            history.append(snapshot)

    def has_file_entry(self, owner: str, path: str, revision: int = LATEST) -> bool:
        with self._lock:
            _, snapshot = self._snapshot(owner, revision)
            return normalize_path(path) in snapshot

    def find_one(self, owner: str, path: str, revision: int = LATEST) -> FileEntry:
        path = normalize_path(path)
        with self._lock:
            resolved, snapshot = self._snapshot(owner, revision)
            entry = snapshot.get(path)
        if entry is None:
            raise FileEntryNotFoundError(path, revision)
        return _read_copy(entry, resolved)

    def find_all(
        self,
        owner: str,
        path_prefix: str,
        revision: int = LATEST,
        recursive: bool = False,
    ) -> list[FileEntry]:
        prefix = normalize_path(path_prefix)
        with self._lock:
            resolved, snapshot = self._snapshot(owner, revision)
            found: list[FileEntry] = []
            for path in sorted(snapshot):
                if prefix:
                    if not path.startswith(prefix + "/"):
                        continue
                    rest = path[len(prefix) + 1:]
                else:
                    rest = path
                if not recursive and "/" in rest:
                    continue
                found.append(_read_copy(snapshot[path], resolved))
        return found

    def _history(self, owner: str) -> list[dict[str, FileEntry]]:
        return self._snapshots.setdefault(owner, [{}])

    def _snapshot(self, owner: str, revision: int) -> tuple[int, dict[str, FileEntry]]:
        history = self._history(owner)
        if revision == LATEST:
            return len(history) - 1, history[-1]
        if revision < 0 or revision >= len(history):
            raise ValueError(
                f"Revision {revision} does not exist for {owner} "
                f"(latest is {len(history) - 1})"
            )
        return revision, history[revision]


def _read_copy(entry: FileEntry, revision: int) -> FileEntry:
    found = copy.deepcopy(entry)
    found.revision = revision
    return found
