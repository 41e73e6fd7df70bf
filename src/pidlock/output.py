"""Output formatting for the pidlock CLI."""

import json
from dataclasses import dataclass
from typing import Any

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .models import LockStatus


@dataclass
class OutputContext:
    """Context for output formatting."""

    console: Console
    json_mode: bool = False

    def print_json(self, data: dict[str, Any]) -> None:
        """Print JSON data."""
        if self.json_mode:
            print(json.dumps(data, indent=2, default=str))

    def result(self, data: dict[str, Any], message: str = "") -> None:
        """Print result in appropriate format."""
        if self.json_mode:
            self.print_json(data)
        elif message:
            self.console.print(message)

    def error(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print error in appropriate format."""
        if self.json_mode:
            self.print_json({"error": message, **(data or {})})
        else:
            self.console.print(f"[red]Error: {escape(message)}[/red]")

    def success(self, message: str, data: dict[str, Any] | None = None) -> None:
        """Print success message in appropriate format."""
        if self.json_mode:
            self.print_json({"success": message, **(data or {})})
        else:
            self.console.print(f"[green]{escape(message)}[/green]")

    def lock_status(self, status: LockStatus) -> None:
        """Print a lock status snapshot."""
        if self.json_mode:
            self.print_json({**status.model_dump(mode="json"), "held": status.held})
            return

        table = Table(show_header=False, box=None)
        table.add_row("Path", str(status.path))
        table.add_row("Exists", "yes" if status.exists else "no")
        if status.recorded_pid is not None:
            table.add_row("Recorded PID", str(status.recorded_pid))
        if status.mtime is not None:
            table.add_row("Written", status.mtime.strftime("%Y-%m-%d %H:%M:%S %Z"))
        if status.held:
            table.add_row("State", f"[green]LOCKED[/green] by PID {status.holder}")
        elif status.stale:
            table.add_row("State", "[yellow]STALE[/yellow]")
        else:
            table.add_row("State", "UNLOCKED")
        self.console.print(table)


_ctx: OutputContext | None = None


def get_output_context() -> OutputContext:
    """Get the current output context.

    Returns a default OutputContext if not yet initialized by CLI.
    """
    if _ctx is None:
        return OutputContext(Console())
    return _ctx


def set_output_context(ctx: OutputContext) -> None:
    """Set the global output context. Called by CLI main callback."""
    global _ctx
    _ctx = ctx
