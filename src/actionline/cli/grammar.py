"""Adapter over :mod:`argparse`, the grammar engine.

:mod:`argparse` handles tokenization, ``--help`` / ``-h`` and error
message formatting.  Out of the box it terminates the process on help
and on bad input; :class:`ExitSignalArgumentParser` turns both into a
raised :class:`~actionline.exceptions.ExitSignal` instead, so the
execution driver decides what happens to the process.

Nothing in this module knows about actions or parameter handles; it
only accepts :class:`~actionline.core.models.ArgumentSpec` primitives
and returns a flat ``{key: raw value}`` mapping.
"""

from __future__ import annotations

import argparse
from collections.abc import Iterable, Sequence
from typing import Any, NoReturn

from actionline.cli import exit_codes
from actionline.core.models import ArgumentSpec, ToolMetadata
from actionline.exceptions import ExitSignal

ACTION_KEY: str = "action"
"""Key under which the engine reports the selected action name."""

ACTION_METAVAR: str = "<command>"


class ExitSignalArgumentParser(argparse.ArgumentParser):
    """``ArgumentParser`` that raises :class:`ExitSignal` instead of exiting."""

    def exit(self, status: int = 0, message: str | None = None) -> NoReturn:
        raise ExitSignal(status, message or "")

    def error(self, message: str) -> NoReturn:
        raise ExitSignal(
            exit_codes.USAGE_ERROR,
            f"{self.format_usage()}{self.prog}: error: {message}\n",
        )


def build_tool_grammar(
    metadata: ToolMetadata,
) -> tuple[ExitSignalArgumentParser, argparse._SubParsersAction[ExitSignalArgumentParser]]:
    """Create the top-level grammar and its required sub-command selector."""
    parser = ExitSignalArgumentParser(
        prog=metadata.tool_filename,
        description=metadata.tool_description,
        epilog=(
            "For detailed help about a specific command, use: "
            f"{metadata.tool_filename} {ACTION_METAVAR} -h"
        ),
    )
    selector = parser.add_subparsers(
        metavar=ACTION_METAVAR,
        dest=ACTION_KEY,
        required=True,
    )
    return parser, selector


def add_action_grammar(
    selector: argparse._SubParsersAction[ExitSignalArgumentParser],
    action_name: str,
    *,
    summary: str,
    documentation: str,
) -> ExitSignalArgumentParser:
    """Reserve a slot for *action_name* in the sub-command selector."""
    return selector.add_parser(action_name, help=summary, description=documentation)


def register_arguments(parser: argparse.ArgumentParser, specs: Iterable[ArgumentSpec]) -> None:
    for spec in specs:
        parser.add_argument(*spec.flags, **spec.options)


def parse_arguments(parser: argparse.ArgumentParser, args: Sequence[str]) -> dict[str, Any]:
    """Run the grammar over *args* and return the flat raw-value mapping.

    Raises
    ------
    ExitSignal
        On ``--help`` (code 0) or any grammar violation (non-zero code).
    """
    return vars(parser.parse_args(list(args)))
