"""Custom exception hierarchy for actionline.

Every *usage fault* (a programming error in how a tool wires up its
parser, actions and parameters) inherits from :class:`ActionlineError`.
These are not expected in a correctly wired program and are never
translated into a friendly exit code by the framework itself.

:class:`ExitSignal` is deliberately **not** part of that hierarchy: it
is a control-flow value used to unwind out of argument parsing with a
process exit code, and code ``0`` is a successful exit.

Hierarchy
---------
ActionlineError
├── ParameterDefinitionError
│   ├── DuplicateParameterError
│   ├── InvalidDefaultError
│   ├── InvalidParameterNameError
│   └── ParameterDefinitionClosedError
├── ParameterStateError
│   ├── ParameterNotReadyError
│   └── ParametersAlreadyParsedError
├── ParameterNotFoundError
├── ActionDefinitionError
│   ├── InvalidActionNameError
│   ├── DuplicateActionNameError
│   └── ActionAlreadyRegisteredError
├── ActionNotFoundError
└── ParserStateError
    ├── ParserAlreadyExecutedError
    └── UnrecognizedActionError

ExitSignal
"""

from __future__ import annotations


class ActionlineError(Exception):
    """Base exception for all actionline usage faults."""

    def __init__(self, message: str, *, hint: str | None = None) -> None:
        super().__init__(message)
        self.hint: str | None = hint
        """Optional actionable guidance shown below the error message."""


# --- Parameter definition --------------------------------------------------

class ParameterDefinitionError(ActionlineError):
    """Raised when a parameter declaration is malformed."""


class DuplicateParameterError(ParameterDefinitionError):
    """Raised when a parameter name is defined twice on one provider."""


class InvalidDefaultError(ParameterDefinitionError):
    """Raised when a default value is incompatible with its declaration."""


class InvalidParameterNameError(ParameterDefinitionError):
    """Raised when a long or short parameter name is not well formed."""


class ParameterDefinitionClosedError(ParameterDefinitionError):
    """Raised when a parameter is defined after parsing has begun."""


# --- Parameter values ------------------------------------------------------

class ParameterStateError(ActionlineError):
    """Raised when parameter values are accessed out of lifecycle order."""


class ParameterNotReadyError(ParameterStateError):
    """Raised when a handle's value is read before parsing completed."""


class ParametersAlreadyParsedError(ParameterStateError):
    """Raised when parsed data is supplied to a provider a second time."""


class ParameterNotFoundError(ActionlineError):
    """Raised when looking up a parameter name that was never defined."""


# --- Actions ---------------------------------------------------------------

class ActionDefinitionError(ActionlineError):
    """Raised when an action is malformed or registered incorrectly."""


class InvalidActionNameError(ActionDefinitionError):
    """Raised when an action name does not match the command-token grammar."""


class DuplicateActionNameError(ActionDefinitionError):
    """Raised when two actions with the same name are added to a parser."""


class ActionAlreadyRegisteredError(ActionDefinitionError):
    """Raised when one action instance is added to a second parser."""


class ActionNotFoundError(ActionlineError):
    """Raised by :meth:`CommandLineParser.get_action` for unknown names."""


# --- Parser lifecycle ------------------------------------------------------

class ParserStateError(ActionlineError):
    """Raised when a parser is used outside its single-use lifecycle."""


class ParserAlreadyExecutedError(ParserStateError):
    """Raised when a parser instance is executed (or extended) twice."""


class UnrecognizedActionError(ParserStateError):
    """Raised when the grammar accepted an action name the registry lacks."""


# --- Control flow ----------------------------------------------------------

class ExitSignal(Exception):
    """Unwind out of parsing or execution with a process exit code.

    ``exit_code == 0`` denotes a successful early exit (for example after
    ``--help`` was printed); any other code is a user-facing failure whose
    *message* is shown on standard error.
    """

    def __init__(self, exit_code: int, message: str = "") -> None:
        super().__init__(message)
        self.exit_code: int = exit_code
        self.message: str = message

    def __repr__(self) -> str:
        return f"ExitSignal(exit_code={self.exit_code!r}, message={self.message!r})"
