"""Tests for output formatting."""

import io
import json
from pathlib import Path

from rich.console import Console

from pidlock.models import LockStatus
from pidlock.output import OutputContext


def make_context(json_mode: bool = False) -> tuple[OutputContext, io.StringIO]:
    """Create an output context writing to a buffer."""
    output = io.StringIO()
    console = Console(file=output, force_terminal=False, width=200)
    return OutputContext(console=console, json_mode=json_mode), output


class TestOutputContextMessages:
    """Tests for success and error output."""

    def test_success_in_normal_mode(self) -> None:
        """success prints the message to the console."""
        ctx, output = make_context()
        ctx.success("Locked")
        assert "Locked" in output.getvalue()

    def test_error_in_normal_mode(self) -> None:
        """error prefixes the message."""
        ctx, output = make_context()
        ctx.error("boom")
        assert "Error: boom" in output.getvalue()

    def test_error_in_json_mode(self, capsys) -> None:
        """error prints a JSON object with extra data."""
        ctx, output = make_context(json_mode=True)
        ctx.error("boom", {"holder": 42})
        data = json.loads(capsys.readouterr().out)
        assert data == {"error": "boom", "holder": 42}
        assert output.getvalue() == ""

    def test_result_in_json_mode(self, capsys) -> None:
        """result prints data, not the message, in JSON mode."""
        ctx, _ = make_context(json_mode=True)
        ctx.result({"pid": 7}, "7")
        assert json.loads(capsys.readouterr().out) == {"pid": 7}


class TestLockStatusOutput:
    """Tests for OutputContext.lock_status."""

    def test_locked(self) -> None:
        """A held lock shows its holder."""
        ctx, output = make_context()
        ctx.lock_status(LockStatus(path=Path("app.pid"), exists=True, recorded_pid=7, holder=7))
        text = output.getvalue()
        assert "LOCKED" in text
        assert "PID 7" in text

    def test_stale(self) -> None:
        """A stale pidfile is labelled as such."""
        ctx, output = make_context()
        ctx.lock_status(LockStatus(path=Path("app.pid"), exists=True, recorded_pid=7))
        assert "STALE" in output.getvalue()

    def test_unlocked(self) -> None:
        """A missing pidfile is unlocked."""
        ctx, output = make_context()
        ctx.lock_status(LockStatus(path=Path("app.pid")))
        assert "UNLOCKED" in output.getvalue()

    def test_json(self, capsys) -> None:
        """JSON status includes the derived held flag."""
        ctx, _ = make_context(json_mode=True)
        ctx.lock_status(LockStatus(path=Path("app.pid"), exists=True, recorded_pid=7, holder=7))
        data = json.loads(capsys.readouterr().out)
        assert data["held"] is True
        assert data["holder"] == 7
        assert data["path"] == "app.pid"


class TestMarkupEscaping:
    """Tests that messages are printed literally."""

    def test_error_with_brackets(self) -> None:
        """Bracketed text in errors is not parsed as rich markup."""
        ctx, output = make_context()
        ctx.error("Input should be a valid integer [type=int_parsing, input_value='rw']")
        assert "[type=int_parsing, input_value='rw']" in output.getvalue()
