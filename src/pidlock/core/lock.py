"""Pidfile-based advisory locking.

A pidfile lock is held while the pidfile exists and the process it names is
the same process that wrote it (see validity.py). Nothing is cached: every
call re-reads the pidfile and re-queries the process table.

Locking is advisory and best-effort across processes. lock() checks for a
valid holder and then writes, so two processes racing at the same instant
can both observe no holder and both write; the later write wins. Callers that
need strict mutual exclusion should not rely on this module alone.
"""

import logging
import os
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE
from ..errors import (
    LockHeldError,
    OwnershipError,
    PidfileError,
    PidfileIOError,
    PidfileNotFoundError,
    ProcessQueryError,
)
from ..models import LockStatus, PidRecord
from .pidfile import Pidfile
from .process_table import ProcessTable, PsutilProcessTable
from .validity import ValidityCheck, mtime_validity

logger = logging.getLogger(__name__)


class PidfileLock:
    """Single-instance lock backed by a pidfile.

    Args:
        path: Location of the pidfile
        processes: Process table to validate holders against (psutil by default)
        validity: Strategy deciding whether a recorded pid still holds the lock
        dir_mode: Permissions for created parent directories
        file_mode: Permissions for the pidfile
    """

    def __init__(
        self,
        path: Path | str,
        processes: ProcessTable | None = None,
        validity: ValidityCheck = mtime_validity,
        dir_mode: int = DEFAULT_DIR_MODE,
        file_mode: int = DEFAULT_FILE_MODE,
    ) -> None:
        self.pidfile = Pidfile(path, dir_mode=dir_mode, file_mode=file_mode)
        self.processes = processes if processes is not None else PsutilProcessTable()
        self.validity = validity

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.path)!r})"

    @property
    def path(self) -> Path:
        """Configured pidfile path."""
        return self.pidfile.path

    def write(self, pid: int = 0) -> None:
        """Write the pidfile unconditionally. See Pidfile.write."""
        self.pidfile.write(pid)

    def read(self) -> int:
        """Read the recorded pid without validating it. See Pidfile.read."""
        return self.pidfile.read()

    def read_record(self) -> PidRecord:
        """Read the recorded pid and mtime. See Pidfile.read_record."""
        return self.pidfile.read_record()

    def _is_valid(self, record: PidRecord) -> bool:
        try:
            return self.validity(record, self.processes)
        except ProcessQueryError as e:
            raise ProcessQueryError(
                f"Failed to validate lock in {self.path}: {e}", e.pid, self.path
            ) from e

    def _valid_record(self) -> PidRecord | None:
        """Read the pidfile and return its record if the lock is valid.

        Raises:
            PidfileNotFoundError: If the pidfile does not exist
        """
        record = self.pidfile.read_record()
        if not self._is_valid(record):
            logger.debug(f"Stale pidfile {self.path} (PID {record.pid} no longer holds it)")
            return None
        return record

    def holder(self) -> int:
        """Return the pid holding the lock, or 0 if the lock is free.

        The lock is held only if the pidfile exists, the process it names is
        running, and that process started before the pidfile was written.

        Raises:
            PidfileMalformedError: If the pidfile content is not a pid
            PidfileIOError: If the pidfile cannot be read
            ProcessQueryError: If the process table query fails
        """
        try:
            record = self._valid_record()
        except PidfileNotFoundError:
            return 0
        return record.pid if record is not None else 0

    def lock(self, pid: int = 0) -> None:
        """Take the lock by writing pid to the pidfile.

        Stale pidfiles are overwritten. The lock is not re-entrant: if it is
        already validly held, even by pid itself, LockHeldError is raised.

        Args:
            pid: Pid to record as holder; 0 means the current process

        Raises:
            LockHeldError: If a valid holder exists
            PidfileError: If the existing pidfile cannot be examined or the
                new one cannot be written
        """
        if pid == 0:
            pid = os.getpid()

        current = self.holder()
        if current != 0:
            raise LockHeldError(self.path, current)

        self.pidfile.write(pid)
        logger.info(f"Acquired lock {self.path} for PID {pid}")

    def unlock(self, pid: int = 0) -> None:
        """Release the lock by removing the pidfile.

        Stale pidfiles are left on disk.

        Args:
            pid: Pid expected to hold the lock; 0 means the current process

        Raises:
            PidfileNotFoundError: If the pidfile is absent or stale
            OwnershipError: If the lock is validly held by a different pid
            PidfileIOError: If the pidfile cannot be removed; the lock is
                still held
        """
        if pid == 0:
            pid = os.getpid()

        record = self._valid_record()
        if record is None:
            raise PidfileNotFoundError(f"Pidfile lock {self.path} is not held", self.path)

        if record.pid != pid:
            raise OwnershipError(self.path, record.pid, pid)

        try:
            self.path.unlink()
        except OSError as e:
            raise PidfileIOError(
                f"Failed to remove pidfile {self.path}: {e}", self.path, "remove"
            ) from e
        logger.info(f"Released lock {self.path} for PID {pid}")

    def status(self) -> LockStatus:
        """Return a snapshot of the pidfile and its holder.

        Unlike holder(), a malformed pidfile is reported as present with no
        recorded pid instead of raising.
        """
        status = LockStatus(path=self.path)
        try:
            record = self.pidfile.read_record()
        except PidfileNotFoundError:
            return status
        except PidfileError as e:
            logger.debug(f"Unreadable pidfile {self.path}: {e}")
            status.exists = self.path.exists()
            return status

        status.exists = True
        status.recorded_pid = record.pid
        status.mtime = record.mtime
        if self._is_valid(record):
            status.holder = record.pid
        return status

    @contextmanager
    def hold(self, pid: int = 0) -> Iterator["PidfileLock"]:
        """Hold the lock for the duration of a with block.

        Raises:
            LockHeldError: If a valid holder already exists on entry
        """
        self.lock(pid)
        try:
            yield self
        finally:
            try:
                self.unlock(pid)
            except PidfileError as e:
                logger.warning(f"Failed to release lock {self.path}: {e}")


def new_lock(
    path: Path | str,
    processes: ProcessTable | None = None,
    validity: ValidityCheck = mtime_validity,
) -> PidfileLock:
    """Create a PidfileLock for the given path."""
    return PidfileLock(path, processes=processes, validity=validity)
