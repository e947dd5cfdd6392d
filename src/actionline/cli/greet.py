"""``actionline greet`` — the smallest useful action.

Demonstrates each common parameter kind: a required string, a choice
with a default, an integer with a default and a flag.
"""

from __future__ import annotations

from actionline.cli.action import CommandLineAction
from actionline.cli.console import output

GREETINGS: tuple[str, ...] = ("hello", "hi", "hey")


class GreetAction(CommandLineAction):
    """Print a greeting for ``--name`` one or more times."""

    def __init__(self) -> None:
        super().__init__(
            "greet",
            summary="Print a greeting.",
            documentation=(
                "Greets the person given by --name. Use --times to repeat the "
                "greeting and --shout to print it in upper case."
            ),
        )

    def on_define_parameters(self) -> None:
        self._name = self.parameters.define_string_parameter(
            "name",
            short_name="-n",
            required=True,
            argument_name="NAME",
            description="Who to greet.",
        )
        self._greeting = self.parameters.define_choice_parameter(
            "greeting",
            GREETINGS,
            default_value="hello",
            description="Which greeting to use.",
        )
        self._times = self.parameters.define_integer_parameter(
            "times",
            default_value=1,
            description="How many times to print the greeting.",
        )
        self._shout = self.parameters.define_flag_parameter(
            "shout",
            description="Print the greeting in upper case.",
        )

    def build_message(self) -> str:
        message = f"{self._greeting.value.capitalize()}, {self._name.value}!"
        return message.upper() if self._shout.value else message

    async def on_execute(self) -> None:
        times = self._times.value
        if times < 1:
            raise ValueError(f"--times must be at least 1, got {times}.")
        message = self.build_message()
        for _ in range(times):
            output.print(message, markup=False)
