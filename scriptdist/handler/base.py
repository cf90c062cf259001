"""Base class for all script handlers.

A handler owns one kind of script (a standalone Groovy file, a Groovy
Maven project, ...). It decides whether it applies to a script, lists the
files the script needs, maps repository paths into the bundle layout and
materializes the bundle. Subclasses fill in the parts that differ; the
copy loop in materialize() is shared.
"""

import logging
import posixpath
import shutil
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from scriptdist.handler.types import DistributionBundle, DistributionError
from scriptdist.repository.protocol import FileEntryRepository
from scriptdist.repository.types import LATEST, FileEntry

logger = logging.getLogger(__name__)


def strip_base_path(base_path: str, path: str) -> str:
    """Return path relative to base_path, with exactly one leading '/'.

    Paths outside base_path (including already-stripped ones) are returned
    with a leading '/' only, which makes the transform idempotent.
    """
    base = base_path.strip("/")
    rel = path.lstrip("/")
    if base and (rel == base or rel.startswith(base + "/")):
        rel = rel[len(base):]
    return "/" + rel.lstrip("/")


class ScriptHandler(ABC):
    """Abstract base for packaging strategies.

    order decides registry priority (lower is tried first), display_order
    the position in user-facing listings.
    """

    #: Registry key, also the template set name
    key: str = ""

    #: Human-readable name
    title: str = ""

    #: Script file extension this handler owns
    extension: str = ""

    order: int = 500
    display_order: int = 500

    def __init__(self, repository: FileEntryRepository):
        self.repository = repository

    @abstractmethod
    def can_handle(self, entry: FileEntry) -> bool:
        """Return True if this handler owns entry. Never raises for a mismatch."""
        ...

    @abstractmethod
    def collect(self, owner: str, script: FileEntry, revision: int) -> list[FileEntry]:
        """List the files script needs at revision, in copy order.

        The script itself is not included.
        """
        ...

    def get_base_path(self, script: FileEntry) -> str:
        return posixpath.dirname(script.path)

    def remap(self, base_path: str, entry: FileEntry) -> str:
        return strip_base_path(base_path, entry.path)

    def is_project_handler(self) -> bool:
        return False

    def materialize(
        self,
        test_id: int,
        owner: str,
        script: FileEntry,
        target_dir: Path,
        revision: int = LATEST,
    ) -> DistributionBundle:
        """Write script and everything it needs into a fresh target_dir.

        Every repository read uses one revision; LATEST is pinned to the
        head revision before the first read.

        Raises:
            FileEntryNotFoundError: If a required file is missing.
            DistributionError: If a bundle path would escape target_dir.
        """
        target_dir = Path(target_dir)
        if revision == LATEST:
            revision = self.repository.latest_revision(owner)

        if target_dir.exists():
            shutil.rmtree(target_dir)
        target_dir.mkdir(parents=True)
        bundle = DistributionBundle(root=target_dir)

        entries = self.collect(owner, script, revision)
        entries.append(self.repository.find_one(owner, script.path, revision))
        base_path = self.get_base_path(script)

        for each in entries:
            # Directories are not subject to be distributed.
            if each.is_dir:
                continue
            sub_path = self.remap(base_path, each)
            destination = _resolve_inside(target_dir, sub_path)
            bundle.println(f"{each.path} is being written.")
            logger.info(
                "%s is being written in %s for test %s", each.path, destination.parent, test_id,
            )
            destination.parent.mkdir(parents=True, exist_ok=True)
            destination.write_bytes(each.to_bytes())
            bundle.copied.append((each.path, sub_path))

        bundle.success = True
        self.prepare_dist_more(test_id, owner, script, target_dir, bundle)
        return bundle

    def prepare_dist_more(
        self,
        test_id: int,
        owner: str,
        script: FileEntry,
        target_dir: Path,
        bundle: DistributionBundle,
    ) -> None:
        """Hook for handler-specific steps after files are copied."""

    def default_quick_test_entry(self, path: str) -> Optional[FileEntry]:
        """Return the entry a quick test in path should target, if any."""
        return None


def _resolve_inside(root: Path, sub_path: str) -> Path:
    destination = (root / sub_path.lstrip("/")).resolve()
    if not destination.is_relative_to(root.resolve()):
        raise DistributionError(f"'{sub_path}' escapes bundle root {root}")
    return destination
