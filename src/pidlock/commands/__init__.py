"""CLI command implementations for pidlock.

This package contains the implementation of each CLI command,
separated from the CLI framework setup in cli.py.
"""

from .lock import holder, init_config, lock, path_cmd, read, status, unlock, write

__all__ = [
    "holder",
    "init_config",
    "lock",
    "path_cmd",
    "read",
    "status",
    "unlock",
    "write",
]
