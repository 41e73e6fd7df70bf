"""Pydantic data models for pidlock.

- Pid records read back from pidfiles (PidRecord)
- Lock status snapshots for inspection tooling (LockStatus)
"""

from .record import PidRecord
from .status import LockStatus

__all__ = [
    "LockStatus",
    "PidRecord",
]
