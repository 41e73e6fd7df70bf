"""Pidfile and lock errors."""

from pathlib import Path


class PidfileError(Exception):
    """Base exception for pidfile and lock errors."""

    def __init__(self, message: str, path: Path | str | None = None) -> None:
        super().__init__(message)
        self.path = Path(path) if path is not None else None


class PidfileNotFoundError(PidfileError):
    """Raised when the pidfile does not exist or its lock is stale."""


class PidfileMalformedError(PidfileError):
    """Raised when pidfile content does not parse as a pid."""

    def __init__(self, message: str, path: Path | str, content: str) -> None:
        super().__init__(message, path)
        self.content = content


class LockHeldError(PidfileError):
    """Raised when the lock is already validly held."""

    def __init__(self, path: Path | str, holder: int) -> None:
        super().__init__(f"Pidfile {path} is already held by PID {holder}", path)
        self.holder = holder


class OwnershipError(PidfileError):
    """Raised when a lock is released by a pid that does not hold it."""

    def __init__(self, path: Path | str, holder: int, requested: int) -> None:
        super().__init__(
            f"Pidfile {path} is held by {holder}; lock cannot be released by {requested}",
            path,
        )
        self.holder = holder
        self.requested = requested


class PidfileIOError(PidfileError):
    """Raised when a filesystem operation on the pidfile fails."""

    def __init__(self, message: str, path: Path | str, stage: str) -> None:
        super().__init__(message, path)
        self.stage = stage


class ProcessQueryError(PidfileError):
    """Raised when the process table cannot be queried for a pid."""

    def __init__(self, message: str, pid: int, path: Path | str | None = None) -> None:
        super().__init__(message, path)
        self.pid = pid
