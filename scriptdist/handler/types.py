"""Types for the handler module."""

from dataclasses import dataclass, field
from pathlib import Path


@dataclass
class DistributionBundle:
    """Result of materializing one script into a target directory.

    copied lists (repository path, bundle path) pairs in write order.
    log collects human-readable progress lines; write() makes the bundle
    usable as a text sink so build-tool output interleaves with pipeline
    messages in arrival order.
    """

    root: Path
    copied: list[tuple[str, str]] = field(default_factory=list)
    success: bool = False
    log: list[str] = field(default_factory=list)
    _pending: str = field(default="", init=False, repr=False, compare=False)

    def println(self, line: str = "") -> None:
        self.flush()
        self.log.append(line)

    def write(self, text: str) -> int:
        """Append complete lines; an unterminated tail waits for flush()."""
        *lines, self._pending = (self._pending + text).split("\n")
        self.log.extend(line.rstrip("\r") for line in lines)
        return len(text)

    def flush(self) -> None:
        if self._pending:
            self.log.append(self._pending.rstrip("\r"))
            self._pending = ""

    def to_dict(self) -> dict:
        return {
            "root": str(self.root),
            "copied": [{"source": s, "destination": d} for s, d in self.copied],
            "success": self.success,
            "log": self.log,
        }


class ScaffoldError(Exception):
    """Raised when a project cannot be created from its templates.

    Carries the name of the template file (or directory) that failed.
    Entries saved before the failure are left in place.
    """

    def __init__(self, file_name: str, message: str = ""):
        self.file_name = file_name
        super().__init__(message or f"Error while saving {file_name}")


class DistributionError(Exception):
    """Raised when a bundle path would land outside the bundle root."""


class NoHandlerError(LookupError):
    """Raised when no registered handler accepts a script."""
