"""Exit-code constants and the recorded process exit status.

Centralised here so that every exit path uses a well-known, tested
value rather than magic integers scattered across the codebase.

The framework never terminates the process itself.  Failures are
recorded with :func:`set_process_exit_code` and the embedding program
passes :func:`get_process_exit_code` to :func:`sys.exit` when it is done.
"""

from __future__ import annotations

SUCCESS: int = 0
"""Clean exit — command completed without error."""

GENERAL_ERROR: int = 1
"""An action raised, or the parser was misused."""

USAGE_ERROR: int = 2
"""The command line was rejected by the grammar (argparse convention)."""

KEYBOARD_INTERRUPT: int = 130
"""User pressed Ctrl+C.  Follows POSIX convention (128 + SIGINT=2)."""

_process_exit_code: int = SUCCESS


def get_process_exit_code() -> int:
    """Return the exit code recorded so far (``0`` when nothing failed)."""
    return _process_exit_code


def set_process_exit_code(code: int) -> bool:
    """Record *code* unless a non-zero code was already recorded.

    Returns ``True`` when *code* was stored.
    """
    global _process_exit_code
    if _process_exit_code != SUCCESS:
        return False
    _process_exit_code = code
    return True


def reset_process_exit_code() -> None:
    """Forget any recorded failure.  Intended for tests and long-lived hosts."""
    global _process_exit_code
    _process_exit_code = SUCCESS
