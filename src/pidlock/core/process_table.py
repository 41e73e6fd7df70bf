"""Process table access.

The lock coordinator only needs to know whether a pid exists and when it
started. That capability is kept behind the ProcessTable protocol so tests
can substitute a fake table instead of relying on real OS pids.
"""

import logging
from datetime import UTC, datetime
from typing import Protocol

import psutil

from ..errors import ProcessQueryError

logger = logging.getLogger(__name__)


class ProcessTable(Protocol):
    """Read-only view of the operating system's process table."""

    def exists(self, pid: int) -> bool:
        """Return True if a process with the given pid is running."""
        ...

    def creation_time(self, pid: int) -> datetime | None:
        """Return the process start time, or None if no such process exists."""
        ...


class PsutilProcessTable:
    """ProcessTable backed by psutil.

    Creation times are truncated to whole seconds and returned in UTC.
    """

    def exists(self, pid: int) -> bool:
        if pid <= 0:
            return False
        try:
            return psutil.pid_exists(pid)
        except (psutil.Error, OSError) as e:
            raise ProcessQueryError(f"Failed to look up process {pid}: {e}", pid) from e

    def creation_time(self, pid: int) -> datetime | None:
        if pid <= 0:
            return None
        try:
            created = psutil.Process(pid).create_time()
        except psutil.NoSuchProcess:
            logger.debug(f"Process {pid} not found")
            return None
        except (psutil.Error, OSError) as e:
            raise ProcessQueryError(
                f"Failed to get creation time of process {pid}: {e}", pid
            ) from e
        return datetime.fromtimestamp(int(created), tz=UTC)
