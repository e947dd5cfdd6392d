"""Logging setup for tools built on actionline.

Library modules only create ``logging.getLogger(__name__)`` loggers and
never install handlers.  A tool calls :func:`configure_logging` once,
typically from its parser's ``on_execute`` hook after global parameters
have been parsed.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler

from actionline.cli.console import get_rich_console

LOGGER_NAME: str = "actionline"


def configure_logging(*, debug: bool = False, logger_name: str = LOGGER_NAME) -> logging.Logger:
    """Attach a Rich stderr handler to *logger_name* and set its level.

    Calling this again replaces the handler installed by a previous call
    instead of stacking a second one.
    """
    logger = logging.getLogger(logger_name)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=get_rich_console(stderr=True),
        show_time=False,
        show_path=debug,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if debug else logging.WARNING)
    return logger
