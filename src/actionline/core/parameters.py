"""Typed parameter declarations and their parsed values.

A :class:`ParameterProvider` is the component both the tool-level parser
and every action hold to declare their parameters.  Declaring returns an
opaque handle; the handle's :attr:`~ParameterHandle.value` becomes
readable only after the provider has processed the grammar engine's
parsed data.

The provider talks to the grammar engine through exactly two private
methods:

* :meth:`ParameterProvider._argument_specs` flattens every declaration
  into :class:`~actionline.core.models.ArgumentSpec` primitives.
* :meth:`ParameterProvider._process_parsed_data` converts the engine's
  flat raw-value mapping into typed handle values, once.

Each declaration is stored under an engine key unique across all
providers in the process, so global and per-action declarations never
collide in the engine's flat mapping.
"""

from __future__ import annotations

import itertools
import logging
from collections.abc import Iterable, Iterator, Mapping
from typing import Any, Generic, TypeVar

from actionline.core.models import ArgumentSpec, ParameterDefinition, ParameterKind
from actionline.core.naming import normalize_long_name, validate_short_name
from actionline.exceptions import (
    DuplicateParameterError,
    InvalidDefaultError,
    InvalidParameterNameError,
    ParameterDefinitionClosedError,
    ParameterDefinitionError,
    ParameterNotFoundError,
    ParameterNotReadyError,
    ParametersAlreadyParsedError,
)

logger = logging.getLogger(__name__)

T = TypeVar("T")
_H = TypeVar("_H", bound="ParameterHandle[Any]")

_RESERVED_LONG_NAMES: frozenset[str] = frozenset({"help"})
_RESERVED_SHORT_NAMES: frozenset[str] = frozenset({"-h"})

_engine_keys: Iterator[int] = itertools.count(1)


# ---------------------------------------------------------------------------
# Handles
# ---------------------------------------------------------------------------

class ParameterHandle(Generic[T]):
    """Opaque reference to one declared parameter.

    Reading :attr:`value` before parsing has completed raises
    :class:`~actionline.exceptions.ParameterNotReadyError` rather than
    returning a silent default.
    """

    def __init__(self, definition: ParameterDefinition) -> None:
        self._definition: ParameterDefinition = definition
        self._engine_key: str = f"parameter_{next(_engine_keys)}"
        self._value: T | None = None
        self._ready: bool = False

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._definition.long_name!r})"

    @property
    def definition(self) -> ParameterDefinition:
        return self._definition

    @property
    def long_name(self) -> str:
        return self._definition.long_name

    @property
    def value(self) -> T:
        if not self._ready:
            raise ParameterNotReadyError(
                f"The value of {self.long_name} is not available until parsing has completed.",
            )
        return self._value  # type: ignore[return-value]

    # -- engine boundary ---------------------------------------------------

    def _to_argument_spec(self) -> ArgumentSpec:
        definition = self._definition
        flags = (definition.long_name,)
        if definition.short_name:
            flags = (definition.short_name, definition.long_name)
        options: dict[str, Any] = {
            "dest": self._engine_key,
            "help": definition.description or None,
        }
        options.update(self._engine_options())
        return ArgumentSpec(flags=flags, options=options)

    def _engine_options(self) -> dict[str, Any]:
        definition = self._definition
        return {
            "required": definition.required,
            "default": definition.default_value,
            "metavar": definition.argument_name,
        }

    def _set_raw_value(self, raw: Any) -> None:
        self._value = self._convert(raw)
        self._ready = True

    def _convert(self, raw: Any) -> T | None:
        return raw


class FlagParameter(ParameterHandle[bool]):
    """A switch that is ``True`` when present and ``False`` otherwise."""

    def _engine_options(self) -> dict[str, Any]:
        return {"action": "store_true"}

    def _convert(self, raw: Any) -> bool:
        return bool(raw)


class StringParameter(ParameterHandle[str | None]):
    """A parameter taking one free-form text value."""


class IntegerParameter(ParameterHandle[int | None]):
    """A parameter taking one whole-number value."""

    def _engine_options(self) -> dict[str, Any]:
        options = super()._engine_options()
        options["type"] = int
        return options


class ChoiceParameter(ParameterHandle[str | None]):
    """A parameter whose value must be one of a fixed set of strings."""

    def _engine_options(self) -> dict[str, Any]:
        options = super()._engine_options()
        del options["metavar"]
        options["choices"] = self._definition.allowed_values
        return options


class StringListParameter(ParameterHandle[tuple[str, ...]]):
    """A parameter that may be repeated; each occurrence appends a value."""

    def _engine_options(self) -> dict[str, Any]:
        options = super()._engine_options()
        options["action"] = "append"
        options["default"] = None
        return options

    def _convert(self, raw: Any) -> tuple[str, ...]:
        return tuple(raw or ())


# ---------------------------------------------------------------------------
# Provider
# ---------------------------------------------------------------------------

class ParameterProvider:
    """Declare named, typed parameters and later expose their parsed values.

    Parameters
    ----------
    owner:
        Human-readable label of whatever holds this provider (a tool or
        action name).  Only used in error messages and log records.
    """

    def __init__(self, owner: str = "") -> None:
        self._owner: str = owner
        self._handles: dict[str, ParameterHandle[Any]] = {}
        self._short_names: set[str] = set()
        self._closed: bool = False
        self._parsed: bool = False

    @property
    def parameters(self) -> tuple[ParameterHandle[Any], ...]:
        """All declared handles, in definition order."""
        return tuple(self._handles.values())

    @property
    def is_parsed(self) -> bool:
        return self._parsed

    def get_parameter(self, name: str) -> ParameterHandle[Any]:
        """Return the handle declared as *name* (with or without ``--``)."""
        bare = name[2:] if name.startswith("--") else name
        try:
            return self._handles[bare]
        except KeyError:
            raise ParameterNotFoundError(
                f"The parameter --{bare} was not defined{self._owner_suffix()}.",
            ) from None

    # ------------------------------------------------------------------
    # Definition
    # ------------------------------------------------------------------

    def define_flag_parameter(
        self,
        name: str,
        *,
        short_name: str | None = None,
        description: str = "",
    ) -> FlagParameter:
        """Define a switch whose value is ``True`` when it appears."""
        definition = self._make_definition(
            name, ParameterKind.FLAG, short_name=short_name, description=description,
        )
        return self._register(FlagParameter(definition))

    def define_string_parameter(
        self,
        name: str,
        *,
        short_name: str | None = None,
        description: str = "",
        required: bool = False,
        default_value: str | None = None,
        argument_name: str = "TEXT",
    ) -> StringParameter:
        definition = self._make_definition(
            name,
            ParameterKind.STRING,
            short_name=short_name,
            description=description,
            required=required,
            default_value=default_value,
            argument_name=argument_name,
        )
        return self._register(StringParameter(definition))

    def define_integer_parameter(
        self,
        name: str,
        *,
        short_name: str | None = None,
        description: str = "",
        required: bool = False,
        default_value: int | None = None,
        argument_name: str = "NUMBER",
    ) -> IntegerParameter:
        if default_value is not None and (
            isinstance(default_value, bool) or not isinstance(default_value, int)
        ):
            raise InvalidDefaultError(
                f"The default value for --{name.lstrip('-')} must be an integer, "
                f"got {default_value!r}.",
            )
        definition = self._make_definition(
            name,
            ParameterKind.INTEGER,
            short_name=short_name,
            description=description,
            required=required,
            default_value=default_value,
            argument_name=argument_name,
        )
        return self._register(IntegerParameter(definition))

    def define_choice_parameter(
        self,
        name: str,
        allowed_values: Iterable[str],
        *,
        short_name: str | None = None,
        description: str = "",
        required: bool = False,
        default_value: str | None = None,
    ) -> ChoiceParameter:
        """Define a parameter restricted to *allowed_values*.

        Raises
        ------
        InvalidDefaultError
            When *default_value* is not one of *allowed_values*.
        """
        choices = tuple(dict.fromkeys(allowed_values))
        if not choices:
            raise ParameterDefinitionError(
                f"The choice parameter --{name.lstrip('-')} needs at least one allowed value.",
            )
        if default_value is not None and default_value not in choices:
            raise InvalidDefaultError(
                f"The default value {default_value!r} for --{name.lstrip('-')} "
                "is not one of the allowed values.",
                hint="Allowed values: " + ", ".join(choices),
            )
        definition = self._make_definition(
            name,
            ParameterKind.CHOICE,
            short_name=short_name,
            description=description,
            required=required,
            default_value=default_value,
            allowed_values=choices,
        )
        return self._register(ChoiceParameter(definition))

    def define_string_list_parameter(
        self,
        name: str,
        *,
        short_name: str | None = None,
        description: str = "",
        required: bool = False,
        argument_name: str = "TEXT",
    ) -> StringListParameter:
        definition = self._make_definition(
            name,
            ParameterKind.STRING_LIST,
            short_name=short_name,
            description=description,
            required=required,
            argument_name=argument_name,
        )
        return self._register(StringListParameter(definition))

    # ------------------------------------------------------------------
    # Engine boundary
    # ------------------------------------------------------------------

    def _argument_specs(self) -> tuple[ArgumentSpec, ...]:
        """Flatten every declaration for the grammar engine.

        Calling this closes the provider to further definitions.
        """
        self._closed = True
        return tuple(handle._to_argument_spec() for handle in self._handles.values())

    def _process_parsed_data(self, data: Mapping[str, Any]) -> None:
        """Populate every handle from the engine's flat raw-value mapping."""
        if self._parsed:
            raise ParametersAlreadyParsedError(
                f"Parsed data was already processed{self._owner_suffix()}.",
            )
        for handle in self._handles.values():
            handle._set_raw_value(data.get(handle._engine_key))
        self._parsed = True
        logger.debug("Processed %d parameter(s)%s", len(self._handles), self._owner_suffix())

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _make_definition(
        self,
        name: str,
        kind: ParameterKind,
        *,
        short_name: str | None,
        description: str,
        required: bool = False,
        default_value: Any = None,
        allowed_values: tuple[str, ...] = (),
        argument_name: str | None = None,
    ) -> ParameterDefinition:
        if self._closed:
            raise ParameterDefinitionClosedError(
                f"Cannot define {name!r}{self._owner_suffix()}: parameters are "
                "already registered with the parser.",
                hint="Define parameters inside on_define_parameters().",
            )

        long_name = normalize_long_name(name)
        if long_name in _RESERVED_LONG_NAMES:
            raise InvalidParameterNameError(f"The parameter name --{long_name} is reserved.")
        if long_name in self._handles:
            raise DuplicateParameterError(
                f"The parameter --{long_name} is already defined{self._owner_suffix()}.",
            )

        if short_name is not None:
            validate_short_name(short_name)
            if short_name in _RESERVED_SHORT_NAMES:
                raise InvalidParameterNameError(f"The short name {short_name} is reserved.")
            if short_name in self._short_names:
                raise DuplicateParameterError(
                    f"The short name {short_name} is already defined{self._owner_suffix()}.",
                )

        if required and default_value is not None:
            raise InvalidDefaultError(
                f"The parameter --{long_name} is required, so it cannot have a default value.",
            )

        return ParameterDefinition(
            name=long_name,
            kind=kind,
            description=description,
            short_name=short_name,
            required=required,
            default_value=default_value,
            allowed_values=allowed_values,
            argument_name=argument_name,
        )

    def _register(self, handle: _H) -> _H:
        definition = handle.definition
        self._handles[definition.name] = handle
        if definition.short_name:
            self._short_names.add(definition.short_name)
        return handle

    def _owner_suffix(self) -> str:
        return f" for {self._owner!r}" if self._owner else ""
