"""Atomic file replacement.

Content is written to a temporary sibling of the target and moved into place
with os.replace(), so readers see either the old file or the complete new one.
"""

import contextlib
import os
import tempfile
from pathlib import Path
from types import TracebackType

from ..constants import DEFAULT_FILE_MODE


class AtomicFile:
    """Temporary file that replaces its target on commit.

    Use as a context manager; leaving the block without calling commit()
    discards everything written so far.
    """

    def __init__(self, path: Path, mode: int = DEFAULT_FILE_MODE) -> None:
        self.path = path
        self.mode = mode
        fd, tmp = tempfile.mkstemp(dir=str(path.parent), prefix=f".{path.name}.", suffix=".tmp")
        self._file = os.fdopen(fd, "w", encoding="ascii")
        self._tmp_path = Path(tmp)
        self._done = False

    @property
    def tmp_path(self) -> Path:
        """Path of the temporary file backing this write."""
        return self._tmp_path

    def write(self, data: str) -> int:
        """Write data to the temporary file."""
        return self._file.write(data)

    def commit(self) -> None:
        """Flush the temporary file to disk and move it over the target."""
        if self._done:
            raise ValueError(f"Atomic write to {self.path} already finished")
        self._file.flush()
        os.fsync(self._file.fileno())
        self._file.close()
        os.chmod(self._tmp_path, self.mode)
        os.replace(self._tmp_path, self.path)
        self._done = True

    def abort(self) -> None:
        """Discard the temporary file. No-op after commit or a previous abort."""
        if self._done:
            return
        self._done = True
        self._file.close()
        with contextlib.suppress(FileNotFoundError):
            self._tmp_path.unlink()

    def __enter__(self) -> "AtomicFile":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.abort()
