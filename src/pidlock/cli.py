"""pidlock CLI: inspect and manage pidfile locks."""

import logging
import tomllib
from pathlib import Path

import typer
from pydantic import ValidationError
from rich.console import Console

from pidlock import __version__

from .commands import holder, init_config, lock, path_cmd, read, status, unlock, write
from .commands.common import EXIT_USAGE, set_config
from .config import PidlockConfig, load_config
from .constants import CONFIG_FILE
from .logging import configure_logging
from .output import OutputContext, set_output_context

logger = logging.getLogger(__name__)


def _version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"pidlock {__version__}")
        raise typer.Exit()


app = typer.Typer(
    name="pidlock",
    help="Advisory single-instance locking with pidfiles",
    no_args_is_help=True,
)


@app.callback()
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        False,
        "--version",
        "-V",
        callback=_version_callback,
        is_eager=True,
        help="Show version and exit",
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v, -vv)",
    ),
    quiet: bool = typer.Option(
        False,
        "--quiet",
        "-q",
        help="Suppress non-error output",
    ),
    json_output: bool = typer.Option(
        False,
        "--json",
        help="Output in JSON format for automation",
    ),
    no_color: bool = typer.Option(
        False,
        "--no-color",
        help="Disable colored output",
    ),
    config: Path | None = typer.Option(
        None,
        "--config",
        "-c",
        help="Config file (defaults to ./pidlock.toml)",
    ),
) -> None:
    """pidlock - advisory single-instance locking with pidfiles."""
    configure_logging(
        verbosity=verbose,
        quiet=quiet,
        no_color=no_color,
    )
    console = Console(no_color=no_color, soft_wrap=True)
    output = OutputContext(console=console, json_mode=json_output)
    set_output_context(output)

    try:
        set_config(load_config(config))
    except (tomllib.TOMLDecodeError, ValidationError) as e:
        if ctx.invoked_subcommand == "init-config":
            # Allow rewriting a broken config
            logger.debug(f"Existing config invalid, using defaults: {e}")
            set_config(PidlockConfig())
            return
        output.error(f"Invalid config file {config or CONFIG_FILE}: {e}")
        raise typer.Exit(EXIT_USAGE) from None


app.command("path")(path_cmd)
app.command()(read)
app.command()(write)
app.command()(holder)
app.command()(lock)
app.command()(unlock)
app.command()(status)
app.command("init-config")(init_config)
