"""Tests for ``CommandLineAction`` (cli/action.py).

Coverage:
* Action-name grammar and required documentation.
* The define hook runs exactly once, at registration.
* An action instance belongs to one parser only.
* A define hook that fails leaves the action free to be added again.
"""

from __future__ import annotations

import asyncio

import pytest
from conftest import RecordingAction

from actionline.cli.action import CommandLineAction
from actionline.cli.parser import CommandLineParser
from actionline.exceptions import (
    ActionAlreadyRegisteredError,
    ActionDefinitionError,
    InvalidActionNameError,
)


# ---------------------------------------------------------------------------
# Construction
# ---------------------------------------------------------------------------

class TestConstruction:
    @pytest.mark.parametrize("name", ["build", "build-all", "cache:clear", "v2"])
    def test_valid_names(self, name: str) -> None:
        assert RecordingAction(name).action_name == name

    @pytest.mark.parametrize("name", ["", "Build", "build!", "-x", "build--all", "2build", "cache:", "build\n"])
    def test_invalid_names(self, name: str) -> None:
        with pytest.raises(InvalidActionNameError):
            RecordingAction(name)

    def test_summary_is_required(self) -> None:
        class Quiet(RecordingAction):
            def __init__(self) -> None:
                CommandLineAction.__init__(self, "quiet", summary=" ", documentation="Docs.")

        with pytest.raises(ActionDefinitionError, match="summary"):
            Quiet()

    def test_documentation_is_required(self) -> None:
        class Quiet(RecordingAction):
            def __init__(self) -> None:
                CommandLineAction.__init__(self, "quiet", summary="Quiet.", documentation="")

        with pytest.raises(ActionDefinitionError, match="documentation"):
            Quiet()

    def test_base_class_is_abstract(self) -> None:
        with pytest.raises(TypeError):
            CommandLineAction("build", summary="s", documentation="d")  # type: ignore[abstract]

    def test_parameters_are_owned_per_action(self) -> None:
        first = RecordingAction("first")
        second = RecordingAction("second")
        assert first.parameters is not second.parameters


# ---------------------------------------------------------------------------
# Registration
# ---------------------------------------------------------------------------

class TestRegistration:
    def test_define_hook_runs_once_when_added(self) -> None:
        action = RecordingAction()
        assert action.define_calls == 0

        CommandLineParser("demo", "Demo tool.").add_action(action)

        assert action.define_calls == 1
        assert [p.long_name for p in action.parameters.parameters] == ["--verbose"]

    def test_action_cannot_join_two_parsers(self) -> None:
        action = RecordingAction()
        CommandLineParser("one", "First tool.").add_action(action)

        with pytest.raises(ActionAlreadyRegisteredError, match="build"):
            CommandLineParser("two", "Second tool.").add_action(action)
        assert action.define_calls == 1

    def test_values_unreadable_until_dispatch(self) -> None:
        action = RecordingAction()
        CommandLineParser("demo", "Demo tool.").add_action(action)

        assert action.parameters.is_parsed is False

    def test_failed_define_hook_allows_retry(self) -> None:
        class FlakyAction(RecordingAction):
            def on_define_parameters(self) -> None:
                super().on_define_parameters()
                if self.define_calls == 1:
                    raise ValueError("hook failed")

        action = FlakyAction()
        parser = CommandLineParser("demo", "Demo tool.")

        with pytest.raises(ValueError, match="hook failed"):
            parser.add_action(action)
        assert parser.actions == ()
        assert action.parameters.parameters == ()

        parser.add_action(action)

        assert parser.actions == (action,)
        assert action.define_calls == 2
        assert [p.long_name for p in action.parameters.parameters] == ["--verbose"]

        asyncio.run(parser.execute_without_error_handling(["build", "-v"]))
        assert action.executed is True
        assert action.verbose.value is True
