"""Lock status snapshot model."""

from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field


class LockStatus(BaseModel):
    """Point-in-time view of a pidfile lock.

    Attributes:
        path: Location of the pidfile.
        exists: Whether the pidfile is present on disk.
        recorded_pid: Pid stored in the file, if it could be read.
        mtime: Modification time of the file, if present.
        holder: Pid of the valid lock holder, or 0 when unlocked.
    """

    path: Path
    exists: bool = False
    recorded_pid: int | None = None
    mtime: datetime | None = None
    holder: int = Field(default=0, description="Valid holder pid, 0 if none")

    @property
    def held(self) -> bool:
        """Return True if a valid holder exists."""
        return self.holder != 0

    @property
    def stale(self) -> bool:
        """Return True if a pidfile exists but its holder is not valid."""
        return self.exists and self.holder == 0
