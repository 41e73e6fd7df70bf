"""Tests for the psutil-backed process table."""

import os
from datetime import UTC, datetime
from unittest import mock

import psutil
import pytest

from pidlock.core import PsutilProcessTable
from pidlock.errors import ProcessQueryError


class TestExists:
    """Tests for PsutilProcessTable.exists."""

    def test_current_process_exists(self) -> None:
        """The running test process exists."""
        assert PsutilProcessTable().exists(os.getpid()) is True

    @pytest.mark.parametrize("pid", [0, -1])
    def test_non_positive_pids_never_exist(self, pid: int) -> None:
        """Zero and negative pids are never reported as existing."""
        assert PsutilProcessTable().exists(pid) is False

    def test_missing_process(self) -> None:
        """A pid psutil does not know about does not exist."""
        with mock.patch("pidlock.core.process_table.psutil.pid_exists", return_value=False):
            assert PsutilProcessTable().exists(99999) is False

    def test_query_failure(self) -> None:
        """Unexpected OS errors surface as ProcessQueryError."""
        with (
            mock.patch(
                "pidlock.core.process_table.psutil.pid_exists",
                side_effect=PermissionError("denied"),
            ),
            pytest.raises(ProcessQueryError) as exc_info,
        ):
            PsutilProcessTable().exists(4242)
        assert exc_info.value.pid == 4242


class TestCreationTime:
    """Tests for PsutilProcessTable.creation_time."""

    def test_current_process(self) -> None:
        """The current process has a creation time in the past."""
        created = PsutilProcessTable().creation_time(os.getpid())
        assert created is not None
        assert created.tzinfo is not None
        assert created <= datetime.now(UTC)

    def test_truncated_to_seconds(self) -> None:
        """Creation times are truncated to whole seconds."""
        process = mock.Mock()
        process.create_time.return_value = 1700000000.9
        with mock.patch("pidlock.core.process_table.psutil.Process", return_value=process):
            created = PsutilProcessTable().creation_time(4242)
        assert created == datetime.fromtimestamp(1700000000, tz=UTC)

    def test_no_such_process(self) -> None:
        """A vanished process yields None."""
        with mock.patch(
            "pidlock.core.process_table.psutil.Process",
            side_effect=psutil.NoSuchProcess(4242),
        ):
            assert PsutilProcessTable().creation_time(4242) is None

    def test_access_denied(self) -> None:
        """Permission problems are errors, not absence."""
        with (
            mock.patch(
                "pidlock.core.process_table.psutil.Process",
                side_effect=psutil.AccessDenied(4242),
            ),
            pytest.raises(ProcessQueryError, match="creation time of process 4242"),
        ):
            PsutilProcessTable().creation_time(4242)

    def test_non_positive_pid(self) -> None:
        """Non-positive pids have no creation time."""
        assert PsutilProcessTable().creation_time(0) is None
