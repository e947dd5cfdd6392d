"""Domain models for actionline.

All models are **frozen** dataclasses or enums — immutable value objects
with no behaviour beyond data access.  They carry zero I/O and no
dependency on the grammar engine.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from typing import Any


# ---------------------------------------------------------------------------
# Tool identity
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ToolMetadata:
    """Identity of a command-line tool, fixed at parser construction."""

    tool_filename: str
    """The name of the tool when invoked from the command line."""

    tool_description: str
    """General documentation included in the ``--help`` main page."""


# ---------------------------------------------------------------------------
# Parameter declarations
# ---------------------------------------------------------------------------

class ParameterKind(enum.Enum):
    """The value shapes a parameter can take."""

    FLAG = "flag"
    STRING = "string"
    INTEGER = "integer"
    CHOICE = "choice"
    STRING_LIST = "string_list"


@dataclass(frozen=True, slots=True)
class ParameterDefinition:
    """A single typed parameter declaration."""

    name: str
    """Long name without the leading dashes (e.g. ``verbose``)."""

    kind: ParameterKind

    description: str = ""

    short_name: str | None = None
    """Optional single-letter alias including its dash (e.g. ``-v``)."""

    required: bool = False

    default_value: Any = None

    allowed_values: tuple[str, ...] = ()
    """Permitted values; only meaningful for :attr:`ParameterKind.CHOICE`."""

    argument_name: str | None = None
    """Placeholder shown in help text for parameters that take a value."""

    @property
    def long_name(self) -> str:
        return f"--{self.name}"


@dataclass(frozen=True, slots=True)
class ArgumentSpec:
    """A declaration flattened into primitives the grammar engine accepts.

    ``flags`` are the option strings and ``options`` the keyword arguments
    passed to :meth:`argparse.ArgumentParser.add_argument`.
    """

    flags: tuple[str, ...]
    options: dict[str, Any] = field(default_factory=dict)


# ---------------------------------------------------------------------------
# Parser lifecycle
# ---------------------------------------------------------------------------

class ParserState(enum.Enum):
    """Lifecycle of a single-use :class:`CommandLineParser`."""

    DEFINED = "defined"
    PARSING = "parsing"
    DISPATCHING = "dispatching"
    RUNNING = "running"
    SUCCEEDED = "succeeded"
    FAILED = "failed"

    @property
    def is_terminal(self) -> bool:
        return self in (ParserState.SUCCEEDED, ParserState.FAILED)
