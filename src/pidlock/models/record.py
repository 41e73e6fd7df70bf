"""Pidfile record model.

A record is the (path, pid, mtime) triple read back from a pidfile. The
modification time is part of the lock validity witness, so it travels with
the pid rather than being looked up separately.
"""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from ..constants import PID_MAX, PID_MIN


class PidRecord(BaseModel):
    """Pid recorded in a pidfile, as read from disk.

    Records are built fresh on every read and never cached.

    Attributes:
        path: Location of the pidfile.
        pid: Process ID stored in the file.
        mtime: Last modification time of the file (timezone-aware, UTC).
    """

    path: Path = Field(description="Path to the pidfile")
    pid: int = Field(ge=PID_MIN, le=PID_MAX, description="Recorded process ID")
    mtime: datetime = Field(description="Pidfile modification time")
