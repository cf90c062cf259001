"""Maven invoker used to copy a project's dependencies into a bundle.

A MavenInvoker is cheap to build and holds no state between calls; the
materializer constructs a fresh one for every bundle because Maven runs
are not guaranteed reentrant.
"""

import logging
import subprocess
import time
from pathlib import Path
from typing import Optional, TextIO

from scriptdist.core.config import get_settings
from scriptdist.sandbox.limits import resource_limiter

logger = logging.getLogger(__name__)

# Exit codes reported when Maven itself could not produce one
TIMEOUT_EXIT_CODE = -1
LAUNCH_FAILURE_EXIT_CODE = -2


class MavenInvoker:
    """Runs `mvn --batch-mode <goal> <args...>` as a subprocess."""

    def __init__(
        self,
        executable: Optional[str] = None,
        timeout: Optional[int] = None,
        mem_limit_bytes: Optional[int] = None,
        cpu_limit_seconds: Optional[int] = None,
    ):
        settings = get_settings()
        self.executable = executable or settings.maven_executable
        self.timeout = timeout or settings.resolver_timeout_seconds
        self._preexec = resource_limiter(
            settings.resolver_mem_limit_bytes if mem_limit_bytes is None else mem_limit_bytes,
            cpu_limit_seconds or settings.resolver_cpu_limit_seconds,
        )

    def build_command(self, goal: str, args: list[str]) -> list[str]:
        return [self.executable, "--batch-mode", goal, *args]

    def run(
        self,
        goal: str,
        args: list[str],
        working_dir: Path,
        stdout: TextIO,
        stderr: TextIO,
    ) -> int:
        """Execute Maven and copy its output into the sinks.

        Maven's stderr is merged into stdout so warnings and errors keep
        their position relative to the build log. Raises no exceptions for
        tool failures; timeouts and launch errors are reported through
        negative exit codes and a stderr line.
        """
        command = self.build_command(goal, args)
        logger.info("Running maven: %s (cwd=%s)", " ".join(command), working_dir)
        start = time.monotonic()

        try:
            result = subprocess.run(
                command,
                cwd=str(working_dir),
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                text=True,
                timeout=self.timeout,
                preexec_fn=self._preexec,
            )
        except subprocess.TimeoutExpired:
            stderr.write(f"Timed out after {self.timeout} seconds\n")
            logger.warning("Maven goal '%s' timed out after %ds", goal, self.timeout)
            return TIMEOUT_EXIT_CODE
        except OSError as exc:
            stderr.write(f"{exc}\n")
            logger.warning("Maven could not be launched: %s", exc)
            return LAUNCH_FAILURE_EXIT_CODE

        if result.stdout:
            stdout.write(result.stdout)
        logger.info(
            "Maven goal '%s' exited with %d (%.1fs)",
            goal, result.returncode, time.monotonic() - start,
        )
        if result.returncode != 0 and result.stdout:
            logger.warning("Maven output (tail):\n%s", _truncate_output(result.stdout))
        return result.returncode


def _truncate_output(text: str, max_lines: int = 60, max_chars: int = 4000) -> str:
    """Return a concise tail of command output for logs."""
    if not text:
        return ""
    lines = text.splitlines()
    joined = "\n".join(lines[-max_lines:])
    if len(joined) > max_chars:
        joined = joined[-max_chars:]
    return joined
