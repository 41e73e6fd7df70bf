"""Shared helpers for pidlock CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

import typer

from ..config import PidlockConfig
from ..core import PidfileLock
from ..errors import (
    LockHeldError,
    OwnershipError,
    PidfileError,
    PidfileNotFoundError,
)
from ..output import get_output_context

# Exit codes
EXIT_LOCK_STATE = 1
EXIT_USAGE = 2
EXIT_FAILURE = 3

_config: PidlockConfig | None = None


def get_config() -> PidlockConfig:
    """Get the loaded config, or defaults if none was loaded."""
    if _config is None:
        return PidlockConfig()
    return _config


def set_config(config: PidlockConfig) -> None:
    """Set the global config. Called by CLI main callback."""
    global _config
    _config = config


def resolve_lock(path: Path | None) -> PidfileLock:
    """Build a lock for the given path, falling back to the configured one."""
    cfg = get_config().pidfile
    if path is None:
        path = cfg.path
    if path is None:
        get_output_context().error("No pidfile path given and none configured")
        raise typer.Exit(EXIT_USAGE)
    return PidfileLock(path, dir_mode=cfg.dir_mode, file_mode=cfg.file_mode)


@contextmanager
def report_errors() -> Iterator[None]:
    """Turn pidfile errors into CLI errors with matching exit codes."""
    ctx = get_output_context()
    try:
        yield
    except LockHeldError as e:
        ctx.error(str(e), {"path": str(e.path), "holder": e.holder})
        raise typer.Exit(EXIT_LOCK_STATE) from None
    except OwnershipError as e:
        ctx.error(str(e), {"path": str(e.path), "holder": e.holder, "requested": e.requested})
        raise typer.Exit(EXIT_LOCK_STATE) from None
    except PidfileNotFoundError as e:
        ctx.error(str(e), {"path": str(e.path)})
        raise typer.Exit(EXIT_LOCK_STATE) from None
    except PidfileError as e:
        ctx.error(str(e), {"path": str(e.path) if e.path else None})
        raise typer.Exit(EXIT_FAILURE) from None
    except ValueError as e:
        ctx.error(str(e))
        raise typer.Exit(EXIT_FAILURE) from None
