"""Pidfile record accessor.

Reads and writes a single decimal pid to a file. Writes are atomic: the file
is replaced in one step and a failed write leaves the previous content alone.
The accessor has no notion of lock validity; see lock.py for that.
"""

import logging
import os
import re
from datetime import UTC, datetime
from pathlib import Path

from ..constants import DEFAULT_DIR_MODE, DEFAULT_FILE_MODE, PID_MAX, PID_MIN
from ..errors import PidfileIOError, PidfileMalformedError, PidfileNotFoundError
from ..models import PidRecord
from .atomic_file import AtomicFile

logger = logging.getLogger(__name__)

_PID_PATTERN = re.compile(r"[+-]?[0-9]+")


def parse_pid(content: str, path: Path) -> int:
    """Parse pidfile content as a signed 32-bit decimal integer.

    Args:
        content: Raw file content
        path: Pidfile path, for error context

    Returns:
        Parsed pid

    Raises:
        PidfileMalformedError: If content is empty, non-numeric or out of range
    """
    text = content.strip()
    if not _PID_PATTERN.fullmatch(text):
        raise PidfileMalformedError(
            f"Failed to parse pid from pidfile {path}: {text!r}", path, content
        )
    pid = int(text)
    if not PID_MIN <= pid <= PID_MAX:
        raise PidfileMalformedError(f"Pid out of range in pidfile {path}: {pid}", path, content)
    return pid


class Pidfile:
    """A file on disk that records one process id."""

    def __init__(
        self,
        path: Path | str,
        dir_mode: int = DEFAULT_DIR_MODE,
        file_mode: int = DEFAULT_FILE_MODE,
    ) -> None:
        self._path = Path(path)
        self.dir_mode = dir_mode
        self.file_mode = file_mode

    @property
    def path(self) -> Path:
        """Configured pidfile path."""
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self._path)!r})"

    def write(self, pid: int = 0) -> None:
        """Write the pidfile atomically.

        Parent directories are created as needed.

        Args:
            pid: Pid to record; 0 means the current process

        Raises:
            ValueError: If pid is negative or does not fit in 32 bits
            PidfileIOError: If any stage of the write fails; the file on disk
                is left as it was
        """
        if pid == 0:
            pid = os.getpid()
        if not 0 < pid <= PID_MAX:
            raise ValueError(f"Invalid pid: {pid}")

        path = self._path
        try:
            path.parent.mkdir(mode=self.dir_mode, parents=True, exist_ok=True)
        except OSError as e:
            raise PidfileIOError(
                f"Failed to create parent directories of pidfile {path}: {e}",
                path,
                "create parent directories",
            ) from e

        try:
            f = AtomicFile(path, self.file_mode)
        except OSError as e:
            raise PidfileIOError(f"Error opening pidfile {path}: {e}", path, "open") from e

        with f:
            try:
                f.write(str(pid))
            except OSError as e:
                raise PidfileIOError(
                    f"Failed to write pid to pidfile {path}: {e}", path, "write"
                ) from e
            try:
                f.commit()
            except OSError as e:
                raise PidfileIOError(f"Failed to commit pidfile {path}: {e}", path, "commit") from e

        logger.debug(f"Wrote PID {pid} to {path}")

    def read(self) -> int:
        """Read the pid recorded in the pidfile.

        Raises:
            PidfileNotFoundError: If the pidfile does not exist
            PidfileMalformedError: If the content is not a pid
            PidfileIOError: If the file cannot be read
        """
        return self.read_record().pid

    def read_record(self) -> PidRecord:
        """Read the recorded pid together with the file's modification time.

        Raises:
            PidfileNotFoundError: If the pidfile does not exist
            PidfileMalformedError: If the content is not a pid
            PidfileIOError: If the file cannot be read or stat'ed
        """
        path = self._path
        try:
            with open(path, encoding="ascii", errors="replace") as f:
                content = f.read()
                st = os.fstat(f.fileno())
        except FileNotFoundError:
            raise PidfileNotFoundError(f"Pidfile not found: {path}", path) from None
        except OSError as e:
            raise PidfileIOError(f"Failed to read pidfile {path}: {e}", path, "read") from e

        pid = parse_pid(content, path)
        mtime = datetime.fromtimestamp(st.st_mtime, tz=UTC)
        logger.debug(f"Read PID {pid} from {path} (mtime {mtime.isoformat()})")
        return PidRecord(path=path, pid=pid, mtime=mtime)
