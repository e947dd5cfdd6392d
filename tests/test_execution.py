"""Tests for the execution driver: failure translation and exit codes.

Coverage:
* ``execute_without_error_handling`` propagates everything except a
  zero-code :class:`ExitSignal`.
* ``execute`` never raises, reports on stderr and records exit codes.
* The recorded exit code is never overwritten once non-zero.
"""

from __future__ import annotations

import asyncio

import pytest
from conftest import RecordingAction

from actionline.cli import exit_codes
from actionline.cli.parser import CommandLineParser
from actionline.exceptions import ActionlineError, ExitSignal


def _parser(action: RecordingAction) -> CommandLineParser:
    parser = CommandLineParser("demo", "A demo tool.")
    parser.add_action(action)
    return parser


# ---------------------------------------------------------------------------
# execute_without_error_handling
# ---------------------------------------------------------------------------

class TestWithoutErrorHandling:
    def test_grammar_violation_propagates_as_signal(self) -> None:
        parser = _parser(RecordingAction("build"))

        with pytest.raises(ExitSignal) as exc_info:
            asyncio.run(parser.execute_without_error_handling(["build", "--bogus"]))
        assert exc_info.value.exit_code == exit_codes.USAGE_ERROR
        assert "--bogus" in exc_info.value.message

    def test_action_fault_propagates_unchanged(self) -> None:
        failure = RuntimeError("boom")
        parser = _parser(RecordingAction("build", failure=failure))

        with pytest.raises(RuntimeError) as exc_info:
            asyncio.run(parser.execute_without_error_handling(["build"]))
        assert exc_info.value is failure

    def test_zero_signal_from_action_is_success(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        parser = _parser(RecordingAction("build", failure=ExitSignal(0, "Nothing to do.")))

        asyncio.run(parser.execute_without_error_handling(["build"]))

        assert capsys.readouterr().out.strip() == "Nothing to do."

    def test_process_exit_code_untouched(self) -> None:
        parser = _parser(RecordingAction("build", failure=RuntimeError("boom")))

        with pytest.raises(RuntimeError):
            asyncio.run(parser.execute_without_error_handling(["build"]))
        assert exit_codes.get_process_exit_code() == exit_codes.SUCCESS


# ---------------------------------------------------------------------------
# execute
# ---------------------------------------------------------------------------

class TestExecute:
    def test_success_returns_true(self) -> None:
        assert asyncio.run(_parser(RecordingAction("build")).execute(["build"])) is True
        assert exit_codes.get_process_exit_code() == exit_codes.SUCCESS

    def test_action_fault_reported_with_error_prefix(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        parser = _parser(RecordingAction("build", failure=RuntimeError("  disk full \n")))

        assert asyncio.run(parser.execute(["build"])) is False
        assert capsys.readouterr().err.strip() == "Error: disk full"
        assert exit_codes.get_process_exit_code() == exit_codes.GENERAL_ERROR

    def test_fault_without_message(self, capsys: pytest.CaptureFixture[str]) -> None:
        parser = _parser(RecordingAction("build", failure=RuntimeError()))

        assert asyncio.run(parser.execute(["build"])) is False
        assert "Error: An unknown error occurred" in capsys.readouterr().err

    def test_markup_in_messages_is_not_interpreted(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        parser = _parser(RecordingAction("build", failure=ValueError("bad [bold]value[/bold]")))

        asyncio.run(parser.execute(["build"]))

        assert "bad [bold]value[/bold]" in capsys.readouterr().err

    def test_usage_fault_hint_is_shown(self, capsys: pytest.CaptureFixture[str]) -> None:
        failure = ActionlineError("Misconfigured.", hint="Fix the wiring.")
        parser = _parser(RecordingAction("build", failure=failure))

        asyncio.run(parser.execute(["build"]))

        err = capsys.readouterr().err
        assert "Error: Misconfigured." in err
        assert "Hint: Fix the wiring." in err

    def test_nonzero_signal_sets_its_code(self, capsys: pytest.CaptureFixture[str]) -> None:
        parser = _parser(RecordingAction("build", failure=ExitSignal(4, "Stopped early.")))

        assert asyncio.run(parser.execute(["build"])) is False
        captured = capsys.readouterr()
        assert captured.err.strip() == "Stopped early."
        assert captured.out == ""
        assert exit_codes.get_process_exit_code() == 4

    def test_nonzero_signal_without_message_prints_nothing(
        self, capsys: pytest.CaptureFixture[str],
    ) -> None:
        parser = _parser(RecordingAction("build", failure=ExitSignal(3)))

        assert asyncio.run(parser.execute(["build"])) is False
        assert capsys.readouterr().err == ""
        assert exit_codes.get_process_exit_code() == 3

    def test_existing_exit_code_is_not_overwritten(self) -> None:
        exit_codes.set_process_exit_code(5)
        parser = _parser(RecordingAction("build", failure=RuntimeError("boom")))

        assert asyncio.run(parser.execute(["build"])) is False
        assert exit_codes.get_process_exit_code() == 5

    def test_grammar_violation(self, capsys: pytest.CaptureFixture[str]) -> None:
        parser = _parser(RecordingAction("build"))

        assert asyncio.run(parser.execute(["build", "--bogus"])) is False
        assert "unrecognized arguments: --bogus" in capsys.readouterr().err
        assert exit_codes.get_process_exit_code() == exit_codes.USAGE_ERROR

    def test_keyboard_interrupt_is_not_swallowed(self) -> None:
        parser = _parser(RecordingAction("build", failure=KeyboardInterrupt()))

        with pytest.raises(KeyboardInterrupt):
            asyncio.run(parser.execute(["build"]))


# ---------------------------------------------------------------------------
# Process exit status
# ---------------------------------------------------------------------------

class TestProcessExitCode:
    def test_starts_at_success(self) -> None:
        assert exit_codes.get_process_exit_code() == exit_codes.SUCCESS

    def test_first_nonzero_code_wins(self) -> None:
        assert exit_codes.set_process_exit_code(2) is True
        assert exit_codes.set_process_exit_code(1) is False
        assert exit_codes.get_process_exit_code() == 2

    def test_reset(self) -> None:
        exit_codes.set_process_exit_code(1)
        exit_codes.reset_process_exit_code()
        assert exit_codes.get_process_exit_code() == exit_codes.SUCCESS
