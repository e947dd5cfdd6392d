"""Validation of the tokens users type: action names and parameter names.

Pure functions only — each returns the normalised token or raises an
:class:`~actionline.exceptions.ActionlineError` subclass.
"""

from __future__ import annotations

import re

from actionline.exceptions import InvalidActionNameError, InvalidParameterNameError

ACTION_NAME_PATTERN: re.Pattern[str] = re.compile(r"[a-z][a-z0-9]*([-:][a-z0-9]+)*")
"""Action names are lower-case words joined by ``-`` or ``:``."""

LONG_NAME_PATTERN: re.Pattern[str] = re.compile(r"[a-z][a-z0-9]*(-[a-z0-9]+)*")

SHORT_NAME_PATTERN: re.Pattern[str] = re.compile(r"-[a-zA-Z]")


def validate_action_name(action_name: str) -> str:
    """Return *action_name* unchanged or raise :class:`InvalidActionNameError`."""
    if not ACTION_NAME_PATTERN.fullmatch(action_name):
        raise InvalidActionNameError(
            f"Invalid action name {action_name!r}.",
            hint="Use lower-case words separated by '-' or ':' (e.g. 'build' or 'cache:clear').",
        )
    return action_name


def normalize_long_name(name: str) -> str:
    """Strip an optional ``--`` prefix and validate the remaining long name.

    >>> normalize_long_name("--dry-run")
    'dry-run'
    """
    bare = name[2:] if name.startswith("--") else name
    if not LONG_NAME_PATTERN.fullmatch(bare):
        raise InvalidParameterNameError(
            f"Invalid parameter name {name!r}.",
            hint="Use lower-case words separated by '-' (e.g. 'verbose' or '--dry-run').",
        )
    return bare


def validate_short_name(short_name: str) -> str:
    if not SHORT_NAME_PATTERN.fullmatch(short_name):
        raise InvalidParameterNameError(
            f"Invalid short parameter name {short_name!r}.",
            hint="A short name is a dash followed by a single letter (e.g. '-v').",
        )
    return short_name
