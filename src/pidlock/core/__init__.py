"""Core pidfile and locking logic for pidlock.

- atomic_file: Temporary-file-and-rename writes
- pidfile: Reading and writing the recorded pid
- process_table: Process existence and start time lookups
- validity: Strategies deciding whether a recorded pid still holds the lock
- lock: The lock coordinator (holder, lock, unlock)
"""

from .atomic_file import AtomicFile
from .lock import PidfileLock, new_lock
from .pidfile import Pidfile, parse_pid
from .process_table import ProcessTable, PsutilProcessTable
from .validity import ValidityCheck, mtime_validity

__all__ = [
    "AtomicFile",
    "Pidfile",
    "PidfileLock",
    "ProcessTable",
    "PsutilProcessTable",
    "ValidityCheck",
    "mtime_validity",
    "new_lock",
    "parse_pid",
]
