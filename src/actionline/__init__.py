"""actionline — sub-command parsing and asynchronous action dispatch.

Built on :mod:`argparse` for the argument grammar and Rich for console
output.
"""

from actionline.cli.action import CommandLineAction
from actionline.cli.exit_codes import get_process_exit_code
from actionline.cli.parser import CommandLineParser
from actionline.core.models import ParserState, ToolMetadata
from actionline.core.parameters import (
    ChoiceParameter,
    FlagParameter,
    IntegerParameter,
    ParameterProvider,
    StringListParameter,
    StringParameter,
)
from actionline.exceptions import ActionlineError, ExitSignal
from actionline.version import __version__

__all__: list[str] = [
    "ActionlineError",
    "ChoiceParameter",
    "CommandLineAction",
    "CommandLineParser",
    "ExitSignal",
    "FlagParameter",
    "IntegerParameter",
    "ParameterProvider",
    "ParserState",
    "StringListParameter",
    "StringParameter",
    "ToolMetadata",
    "__version__",
    "get_process_exit_code",
]
