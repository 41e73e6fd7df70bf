"""pidlock: advisory single-instance locking with pidfiles.

Example:
    >>> import os
    >>> from pidlock import PidfileLock
    >>> lock = PidfileLock("/run/myapp/myapp.pid")
    >>> lock.lock()
    >>> lock.holder() == os.getpid()
    True
    >>> lock.unlock()
"""

from .core import Pidfile, PidfileLock, ProcessTable, PsutilProcessTable, mtime_validity, new_lock
from .errors import (
    LockHeldError,
    OwnershipError,
    PidfileError,
    PidfileIOError,
    PidfileMalformedError,
    PidfileNotFoundError,
    ProcessQueryError,
)
from .models import LockStatus, PidRecord

__version__ = "0.1.0"

__all__ = [
    "LockHeldError",
    "LockStatus",
    "OwnershipError",
    "PidRecord",
    "Pidfile",
    "PidfileError",
    "PidfileIOError",
    "PidfileLock",
    "PidfileMalformedError",
    "PidfileNotFoundError",
    "ProcessQueryError",
    "ProcessTable",
    "PsutilProcessTable",
    "__version__",
    "mtime_validity",
    "new_lock",
]
