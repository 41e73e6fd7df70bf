"""Lock validity strategies.

Operating systems recycle pids, so a recorded pid that is alive today may
belong to a different process than the one that wrote the pidfile. The
default strategy compares the pidfile's modification time against the start
time of the recorded process: the writer must have been running before the
file was written. This is a heuristic. It trusts file mtimes and assumes the
wall clock does not move backwards.

A strategy is any callable taking the record and a process table and
returning whether the lock is still valid. Process-not-found answers False;
any other query failure raises ProcessQueryError.
"""

from collections.abc import Callable

from ..models import PidRecord
from .process_table import ProcessTable

ValidityCheck = Callable[[PidRecord, ProcessTable], bool]


def mtime_validity(record: PidRecord, processes: ProcessTable) -> bool:
    """Check that the recorded process started before the pidfile was written.

    Args:
        record: Pid and modification time read from the pidfile
        processes: Process table to query

    Returns:
        True if the recorded process exists and its creation time is
        strictly earlier than the pidfile mtime
    """
    if record.pid <= 0:
        return False
    if not processes.exists(record.pid):
        return False

    created = processes.creation_time(record.pid)
    if created is None:
        # Exited between the two queries
        return False
    return created < record.mtime
