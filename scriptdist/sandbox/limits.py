"""Subprocess resource limits for the dependency resolver.

Provides a `preexec_fn`-compatible callable that sets hard resource limits
on the child process before exec. The wall-clock timeout in
subprocess.run() is the primary guard; rlimits bound CPU time and virtual
memory of Maven's JVM even if the wall-clock guard is bypassed.

Maven starts a JVM that maps several GB of virtual address space at
startup, so the default memory cap is generous (12 GB). A cap of 0 (or
less) skips RLIMIT_AS entirely.

Platform notes:
  - Linux / macOS: `resource` module is available and rlimits are enforced.
  - Windows: `resource` is unavailable and apply_resource_limits() is a
    no-op.
"""

import functools
import logging
import sys
from typing import Callable

logger = logging.getLogger(__name__)

_DEFAULT_MEM_LIMIT_BYTES = 12 * 1024 * 1024 * 1024  # 12 GB
_DEFAULT_CPU_LIMIT_SECONDS = 600


def apply_resource_limits(
    mem_limit_bytes: int = _DEFAULT_MEM_LIMIT_BYTES,
    cpu_limit_seconds: int = _DEFAULT_CPU_LIMIT_SECONDS,
) -> None:
    """Set per-process resource limits before exec. No-op on Windows.

    Executes in the child process context after `fork()` but before
    `exec()`; bind the limits with resource_limiter() and pass the result
    as `preexec_fn`.
    """
    if sys.platform == "win32":
        return

    try:
        import resource

        if mem_limit_bytes and mem_limit_bytes > 0:
            resource.setrlimit(resource.RLIMIT_AS, (mem_limit_bytes, resource.RLIM_INFINITY))

        if cpu_limit_seconds <= 0:
            cpu_limit_seconds = _DEFAULT_CPU_LIMIT_SECONDS
        resource.setrlimit(resource.RLIMIT_CPU, (cpu_limit_seconds, resource.RLIM_INFINITY))

        logger.debug(
            "Resource limits applied: mem=%s cpu=%ds",
            f"{mem_limit_bytes / (1024**3):.1f}GB" if mem_limit_bytes > 0 else "unlimited",
            cpu_limit_seconds,
        )

    except (ImportError, ValueError, OSError) as exc:
        logger.warning("Failed to apply resource limits: %s", exc)


def resource_limiter(mem_limit_bytes: int, cpu_limit_seconds: int) -> Callable[[], None]:
    """Bind limits into a zero-argument callable usable as `preexec_fn`."""
    return functools.partial(
        apply_resource_limits,
        mem_limit_bytes=mem_limit_bytes,
        cpu_limit_seconds=cpu_limit_seconds,
    )
