"""``CommandLineParser`` — the tool-level entry point and execution driver.

This module is the **error boundary** of the framework.  A parser owns
the tool identity, the global parameters and an ordered registry of
:class:`~actionline.cli.action.CommandLineAction` objects.  It parses
the command line once, dispatches to exactly one action, awaits its
body and translates the outcome:

* :meth:`CommandLineParser.execute_without_error_handling` lets every
  failure propagate, except an :class:`~actionline.exceptions.ExitSignal`
  with code ``0`` (e.g. after ``--help``), which is a successful exit.
* :meth:`CommandLineParser.execute` never raises.  It reports failures
  on stderr, records the process exit code and resolves to ``False``.

A parser is single-use: its lifecycle is tracked by
:class:`~actionline.core.models.ParserState` and a second execution is a
usage fault.
"""

from __future__ import annotations

import logging
import sys
from collections.abc import Sequence

from actionline.cli import console, exit_codes, grammar
from actionline.cli.action import CommandLineAction
from actionline.core.models import ParserState, ToolMetadata
from actionline.core.parameters import ParameterProvider
from actionline.exceptions import (
    ActionlineError,
    ActionNotFoundError,
    DuplicateActionNameError,
    ExitSignal,
    ParserAlreadyExecutedError,
    ParserStateError,
    UnrecognizedActionError,
)

logger = logging.getLogger(__name__)


class CommandLineParser:
    """Parse the command line and run the selected action.

    Subclasses usually declare global parameters in
    :meth:`on_define_parameters` and register their actions in
    ``__init__``::

        parser = MyToolParser()
        succeeded = asyncio.run(parser.execute())
        sys.exit(exit_codes.get_process_exit_code())
    """

    def __init__(self, tool_filename: str, tool_description: str) -> None:
        self.metadata: ToolMetadata = ToolMetadata(
            tool_filename=tool_filename,
            tool_description=tool_description,
        )
        self.parameters: ParameterProvider = ParameterProvider(owner=tool_filename)
        self._actions: list[CommandLineAction] = []
        self._selected_action: CommandLineAction | None = None
        self._state: ParserState = ParserState.DEFINED
        self._argument_parser, self._selector = grammar.build_tool_grammar(self.metadata)

        self.on_define_parameters()

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def tool_filename(self) -> str:
        return self.metadata.tool_filename

    @property
    def tool_description(self) -> str:
        return self.metadata.tool_description

    @property
    def actions(self) -> tuple[CommandLineAction, ...]:
        """Registered actions, in the order they were added."""
        return tuple(self._actions)

    @property
    def selected_action(self) -> CommandLineAction | None:
        """The action chosen on the command line; set before :meth:`on_execute` runs."""
        return self._selected_action

    @property
    def state(self) -> ParserState:
        return self._state

    # ------------------------------------------------------------------
    # Action registry
    # ------------------------------------------------------------------

    def add_action(self, action: CommandLineAction) -> None:
        """Register *action* as a sub-command of this tool.

        Raises
        ------
        DuplicateActionNameError
            When an action with the same name is already registered.
        """
        if self._state is not ParserState.DEFINED:
            raise ParserAlreadyExecutedError(
                f"Cannot add {action.action_name!r}: the parser has already been executed.",
            )
        if self.try_get_action(action.action_name) is not None:
            raise DuplicateActionNameError(
                f"The action {action.action_name!r} is already defined "
                f"for {self.tool_filename!r}.",
            )
        action._build_parser(self._selector)
        self._actions.append(action)

    def get_action(self, action_name: str) -> CommandLineAction:
        """Return the action named *action_name* or raise :class:`ActionNotFoundError`."""
        action = self.try_get_action(action_name)
        if action is None:
            raise ActionNotFoundError(f"The action {action_name!r} was not defined.")
        return action

    def try_get_action(self, action_name: str) -> CommandLineAction | None:
        """Return the action named *action_name*, or ``None``."""
        return next(
            (action for action in self._actions if action.action_name == action_name),
            None,
        )

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def on_define_parameters(self) -> None:
        """Declare global parameters on :attr:`parameters`.  Called from ``__init__``."""

    async def on_execute(self) -> None:
        """Run the selected action.

        Override to add behaviour before or after the action; overrides
        must still await ``super().on_execute()``.
        """
        if self._selected_action is None:
            raise ParserStateError("on_execute() was called before an action was selected.")
        await self._selected_action._execute()

    # ------------------------------------------------------------------
    # Execution driver
    # ------------------------------------------------------------------

    async def execute(self, args: Sequence[str] | None = None) -> bool:
        """Parse *args* (default ``sys.argv[1:]``) and run the selected action.

        Never raises.  On failure the message is written to stderr, the
        process exit code is recorded (unless an earlier failure already
        recorded one) and ``False`` is returned.
        """
        try:
            await self.execute_without_error_handling(args)
        except ExitSignal as signal:
            if signal.message:
                console.print_verbatim(signal.message)
            exit_codes.set_process_exit_code(signal.exit_code)
            return False
        except Exception as exc:  # noqa: BLE001
            logger.debug("Execution of %r failed", self.tool_filename, exc_info=True)
            console.print_error(str(exc).strip() or "An unknown error occurred")
            if isinstance(exc, ActionlineError) and exc.hint:
                console.print_hint(exc.hint)
            exit_codes.set_process_exit_code(exit_codes.GENERAL_ERROR)
            return False
        return True

    async def execute_without_error_handling(self, args: Sequence[str] | None = None) -> None:
        """Like :meth:`execute`, but failures propagate to the caller.

        An :class:`ExitSignal` with exit code ``0`` is still treated as a
        successful early exit: its message, if any, goes to stdout.
        """
        if self._state is not ParserState.DEFINED:
            raise ParserAlreadyExecutedError(
                "execute() was already called for this parser instance.",
            )
        self._transition(ParserState.PARSING)

        try:
            await self._parse_and_dispatch(sys.argv[1:] if args is None else args)
        except ExitSignal as signal:
            if signal.exit_code != exit_codes.SUCCESS:
                self._transition(ParserState.FAILED)
                raise
            if signal.message:
                console.print_verbatim(signal.message, stderr=False)
        except BaseException:
            self._transition(ParserState.FAILED)
            raise
        self._transition(ParserState.SUCCEEDED)

    async def _parse_and_dispatch(self, args: Sequence[str]) -> None:
        grammar.register_arguments(self._argument_parser, self.parameters._argument_specs())

        if not args:
            self._argument_parser.print_help()
            return

        data = grammar.parse_arguments(self._argument_parser, args)
        self.parameters._process_parsed_data(data)

        action_name = data.get(grammar.ACTION_KEY)
        action = self.try_get_action(action_name) if action_name else None
        if action is None:
            raise UnrecognizedActionError(f"Unrecognized action {action_name!r}.")

        self._transition(ParserState.DISPATCHING)
        self._selected_action = action
        action._process_parsed_data(data)

        self._transition(ParserState.RUNNING)
        await self.on_execute()

    def _transition(self, state: ParserState) -> None:
        logger.debug("%s: %s -> %s", self.tool_filename, self._state.value, state.value)
        self._state = state
