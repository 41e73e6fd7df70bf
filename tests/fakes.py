"""Test doubles for pidlock tests."""

import os
from datetime import UTC, datetime
from pathlib import Path

from pidlock.errors import ProcessQueryError

# Any date before the test process started
LONG_AGO = datetime(2001, 1, 1, tzinfo=UTC)


class FakeProcessTable:
    """In-memory process table.

    Maps pids to creation times; pids listed in ``failures`` raise
    ProcessQueryError as if the OS denied the query.
    """

    def __init__(self) -> None:
        self.processes: dict[int, datetime] = {}
        self.failures: set[int] = set()
        self.queries: list[int] = []

    def add(self, pid: int, created: datetime) -> None:
        self.processes[pid] = created

    def exists(self, pid: int) -> bool:
        self.queries.append(pid)
        if pid in self.failures:
            raise ProcessQueryError(f"Permission denied for {pid}", pid)
        return pid in self.processes

    def creation_time(self, pid: int) -> datetime | None:
        if pid in self.failures:
            raise ProcessQueryError(f"Permission denied for {pid}", pid)
        return self.processes.get(pid)


def set_mtime(path: Path, when: datetime) -> None:
    """Set both atime and mtime of path."""
    ts = when.timestamp()
    os.utime(path, (ts, ts))
