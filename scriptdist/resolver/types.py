"""DependencyResolver protocol.

A resolver runs an external build tool against a staged directory. It
reports the tool's exit status and streams the tool's output into the
given sinks; a non-zero status is a normal outcome, not an exception.
"""

from pathlib import Path
from typing import Protocol, TextIO, runtime_checkable


@runtime_checkable
class DependencyResolver(Protocol):
    def run(
        self,
        goal: str,
        args: list[str],
        working_dir: Path,
        stdout: TextIO,
        stderr: TextIO,
    ) -> int:
        """Run goal with args in working_dir and return the exit code."""
        ...  # noqa: PLR6301
