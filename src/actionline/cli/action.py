"""``CommandLineAction`` — one named, independently documented sub-command.

An action owns a :class:`~actionline.core.parameters.ParameterProvider`
for its own parameters and an asynchronous body.  Subclasses declare
parameters in :meth:`CommandLineAction.on_define_parameters` and do
their work in :meth:`CommandLineAction.on_execute`::

    class GreetAction(CommandLineAction):
        def __init__(self) -> None:
            super().__init__("greet", summary="Say hello", documentation="...")

        def on_define_parameters(self) -> None:
            self._name = self.parameters.define_string_parameter("name", required=True)

        async def on_execute(self) -> None:
            print(f"Hello, {self._name.value}!")
"""

from __future__ import annotations

import abc
import argparse
import logging
from collections.abc import Mapping
from typing import Any

from actionline.cli import grammar
from actionline.core.naming import validate_action_name
from actionline.core.parameters import ParameterProvider
from actionline.exceptions import ActionAlreadyRegisteredError, ActionDefinitionError

logger = logging.getLogger(__name__)


class CommandLineAction(abc.ABC):
    """Base class for a sub-command such as ``git commit``.

    Parameters
    ----------
    action_name:
        The token typed on the command line to select this action.
    summary:
        One-line description shown in the tool's command listing.
    documentation:
        Full description shown by ``<tool> <action> -h``.
    """

    def __init__(self, action_name: str, *, summary: str, documentation: str) -> None:
        self.action_name: str = validate_action_name(action_name)
        if not summary.strip():
            raise ActionDefinitionError(f"The action {action_name!r} needs a summary.")
        if not documentation.strip():
            raise ActionDefinitionError(f"The action {action_name!r} needs documentation.")
        self.summary: str = summary
        self.documentation: str = documentation
        self.parameters: ParameterProvider = ParameterProvider(owner=action_name)
        self._registered: bool = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.action_name!r})"

    # ------------------------------------------------------------------
    # Hooks for subclasses
    # ------------------------------------------------------------------

    def on_define_parameters(self) -> None:
        """Declare this action's parameters on :attr:`parameters`.

        Invoked once, when the action is added to a parser.  The default
        declares nothing.
        """

    @abc.abstractmethod
    async def on_execute(self) -> None:
        """The action body.  Parameter values are readable by the time it runs."""

    # ------------------------------------------------------------------
    # Parser-facing internals
    # ------------------------------------------------------------------

    def _build_parser(self, selector: argparse._SubParsersAction[Any]) -> None:
        """Define parameters and register them in the tool's sub-command grammar.

        The action only counts as registered once its grammar slot exists.
        If the define hook fails, its partial declarations are discarded so
        the action can be added again.
        """
        if self._registered:
            raise ActionAlreadyRegisteredError(
                f"The action {self.action_name!r} was already added to a parser.",
            )

        try:
            self.on_define_parameters()
            specs = self.parameters._argument_specs()
        except BaseException:
            self.parameters = ParameterProvider(owner=self.action_name)
            raise

        action_parser = grammar.add_action_grammar(
            selector,
            self.action_name,
            summary=self.summary,
            documentation=self.documentation,
        )
        grammar.register_arguments(action_parser, specs)
        self._registered = True
        logger.debug(
            "Registered action %r with %d parameter(s)",
            self.action_name,
            len(self.parameters.parameters),
        )

    def _process_parsed_data(self, data: Mapping[str, Any]) -> None:
        self.parameters._process_parsed_data(data)

    async def _execute(self) -> None:
        await self.on_execute()
