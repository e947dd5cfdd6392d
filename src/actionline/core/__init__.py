"""Core layer — parameter declarations, typed values and domain models.

Rules
-----
* No ``print()`` calls.
* No imports from ``cli``.
* No dependency on the grammar engine beyond plain
  :class:`~actionline.core.models.ArgumentSpec` primitives.
"""

from actionline.core.models import (
    ArgumentSpec,
    ParameterDefinition,
    ParameterKind,
    ParserState,
    ToolMetadata,
)
from actionline.core.parameters import (
    ChoiceParameter,
    FlagParameter,
    IntegerParameter,
    ParameterHandle,
    ParameterProvider,
    StringListParameter,
    StringParameter,
)

__all__: list[str] = [
    "ArgumentSpec",
    "ChoiceParameter",
    "FlagParameter",
    "IntegerParameter",
    "ParameterDefinition",
    "ParameterHandle",
    "ParameterKind",
    "ParameterProvider",
    "ParserState",
    "StringListParameter",
    "StringParameter",
    "ToolMetadata",
]
