"""Shared pytest fixtures and configuration for the actionline test suite.

Guidelines
----------
* Coroutines are driven with :func:`asyncio.run`; no event-loop plugin.
* The recorded process exit code is global state — it is reset around
  every test.
* Stream assertions use ``capsys``; nothing writes to a real terminal.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from actionline.cli import exit_codes
from actionline.cli.action import CommandLineAction
from actionline.cli.logging_config import LOGGER_NAME


@pytest.fixture(autouse=True)
def _clean_process_state() -> Iterator[None]:
    exit_codes.reset_process_exit_code()
    yield
    exit_codes.reset_process_exit_code()
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
    logger.setLevel(logging.NOTSET)


class RecordingAction(CommandLineAction):
    """Action whose body records that it ran and can be told to fail."""

    def __init__(
        self,
        action_name: str = "build",
        *,
        failure: BaseException | None = None,
    ) -> None:
        super().__init__(
            action_name,
            summary=f"Run {action_name}.",
            documentation=f"Runs the {action_name} action for tests.",
        )
        self.failure: BaseException | None = failure
        self.define_calls: int = 0
        self.executed: bool = False

    def on_define_parameters(self) -> None:
        self.define_calls += 1
        self.verbose = self.parameters.define_flag_parameter("verbose", short_name="-v")

    async def on_execute(self) -> None:
        self.executed = True
        if self.failure is not None:
            raise self.failure
