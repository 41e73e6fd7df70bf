"""Pidfile and lock commands."""

import os
from pathlib import Path

import typer

from ..config import write_config_template
from ..constants import CONFIG_FILE
from ..output import get_output_context
from .common import EXIT_USAGE, report_errors, resolve_lock

PATH_ARGUMENT = typer.Argument(None, help="Pidfile path (defaults to the configured path)")
PID_OPTION = typer.Option(0, "--pid", "-p", help="Pid to use (0 = this process)")


def _effective_pid(pid: int) -> int:
    return pid or os.getpid()


def path_cmd(path: Path | None = PATH_ARGUMENT) -> None:
    """Show the pidfile path."""
    ctx = get_output_context()
    lock = resolve_lock(path)
    ctx.result({"path": str(lock.path)}, str(lock.path))


def read(path: Path | None = PATH_ARGUMENT) -> None:
    """Print the pid recorded in the pidfile, without validating it."""
    ctx = get_output_context()
    lock = resolve_lock(path)
    with report_errors():
        pid = lock.read()
    ctx.result({"path": str(lock.path), "pid": pid}, str(pid))


def write(path: Path | None = PATH_ARGUMENT, pid: int = PID_OPTION) -> None:
    """Write a pid to the pidfile, ignoring any current holder."""
    ctx = get_output_context()
    lock = resolve_lock(path)
    with report_errors():
        lock.write(pid)
    written = _effective_pid(pid)
    ctx.success(f"Wrote PID {written} to {lock.path}", {"path": str(lock.path), "pid": written})


def holder(path: Path | None = PATH_ARGUMENT) -> None:
    """Print the pid holding the lock, or 0 if it is free."""
    ctx = get_output_context()
    lock = resolve_lock(path)
    with report_errors():
        pid = lock.holder()
    ctx.result({"path": str(lock.path), "holder": pid}, str(pid))


def lock(path: Path | None = PATH_ARGUMENT, pid: int = PID_OPTION) -> None:
    """Take the lock if no valid holder exists."""
    ctx = get_output_context()
    pidfile_lock = resolve_lock(path)
    with report_errors():
        pidfile_lock.lock(pid)
    locked = _effective_pid(pid)
    ctx.success(
        f"Locked {pidfile_lock.path} for PID {locked}",
        {"path": str(pidfile_lock.path), "pid": locked},
    )


def unlock(path: Path | None = PATH_ARGUMENT, pid: int = PID_OPTION) -> None:
    """Release the lock held by the given pid."""
    ctx = get_output_context()
    pidfile_lock = resolve_lock(path)
    with report_errors():
        pidfile_lock.unlock(pid)
    released = _effective_pid(pid)
    ctx.success(
        f"Unlocked {pidfile_lock.path} (PID {released})",
        {"path": str(pidfile_lock.path), "pid": released},
    )


def status(path: Path | None = PATH_ARGUMENT) -> None:
    """Show the pidfile and whether its lock is held."""
    ctx = get_output_context()
    lock = resolve_lock(path)
    with report_errors():
        snapshot = lock.status()
    ctx.lock_status(snapshot)


def init_config(
    output: Path = typer.Option(
        Path(CONFIG_FILE), "--output", "-o", help="Where to write the config file"
    ),
    pidfile: Path | None = typer.Option(None, "--pidfile", help="Default pidfile path"),
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite an existing config"),
) -> None:
    """Write a config file template."""
    ctx = get_output_context()
    if output.exists() and not force:
        ctx.error(f"Config already exists: {output} (use --force to overwrite)")
        raise typer.Exit(EXIT_USAGE)
    written = write_config_template(output, pidfile)
    ctx.success(f"Wrote config to {written}", {"config": str(written)})
