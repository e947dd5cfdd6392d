"""The ``actionline`` reference tool and its script-level error boundary.

``actionline`` wires the framework end to end: a parser with a global
``--debug`` flag and two actions (``greet`` and ``doctor``).  It doubles
as a template for tools built on the framework.

* :func:`main` runs one parser over *argv* and returns the recorded
  process exit code.
* :func:`cli` is the console-script entry point; it only adds the
  ``KeyboardInterrupt`` mapping and the final :func:`sys.exit`.
"""

from __future__ import annotations

import asyncio
import logging
import sys
from collections.abc import Sequence

from actionline.cli import exit_codes
from actionline.cli.console import console
from actionline.cli.doctor import DoctorAction
from actionline.cli.greet import GreetAction
from actionline.cli.logging_config import configure_logging
from actionline.cli.parser import CommandLineParser

logger = logging.getLogger(__name__)


class ActionlineToolParser(CommandLineParser):
    """Parser for the ``actionline`` reference tool."""

    def __init__(self) -> None:
        super().__init__(
            "actionline",
            "Reference tool for the actionline command-line framework.",
        )
        self.add_action(GreetAction())
        self.add_action(DoctorAction())

    def on_define_parameters(self) -> None:
        self._debug = self.parameters.define_flag_parameter(
            "debug",
            description="Write debug logging to stderr.",
        )

    async def on_execute(self) -> None:
        configure_logging(debug=self._debug.value)
        logger.debug("Running action %r", self.selected_action)
        await super().on_execute()


# ---------------------------------------------------------------------------
# Main entry point
# ---------------------------------------------------------------------------

def main(argv: Sequence[str] | None = None) -> int:
    """Run the actionline CLI.

    Parameters
    ----------
    argv:
        Explicit argument list.  When ``None`` (default), ``sys.argv[1:]``
        is used.

    Returns
    -------
    int
        OS process exit code.
    """
    parser = ActionlineToolParser()
    asyncio.run(parser.execute(argv))
    return exit_codes.get_process_exit_code()


# ---------------------------------------------------------------------------
# Script-level error boundary
# ---------------------------------------------------------------------------

def cli() -> None:
    """Top-level boundary invoked by the console-script entry point."""
    try:
        code = main()
    except KeyboardInterrupt:
        console.print("\n[yellow]Aborted by user.[/yellow]")
        sys.exit(exit_codes.KEYBOARD_INTERRUPT)
    sys.exit(code)
