"""``actionline doctor`` — environment diagnostics action.

Gathers system information and renders a Rich table summarising
whether the runtime environment satisfies actionline's requirements.
A failing critical check ends the action with a non-zero
:class:`~actionline.exceptions.ExitSignal`.
"""

from __future__ import annotations

import platform
import sys
from importlib import metadata

from rich.table import Table

from actionline.cli import exit_codes
from actionline.cli.action import CommandLineAction
from actionline.cli.console import output
from actionline.exceptions import ExitSignal
from actionline.version import __version__

MINIMUM_PYTHON: tuple[int, int] = (3, 10)


# ---------------------------------------------------------------------------
# Diagnostic collectors
# ---------------------------------------------------------------------------

def _python_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the Python version row."""
    version = platform.python_version()
    ok = sys.version_info[:2] >= MINIMUM_PYTHON
    required = ".".join(str(part) for part in MINIMUM_PYTHON)
    status = "[green]OK[/green]" if ok else f"[red]FAIL (>={required} required)[/red]"
    return "Python", version, status


def _rich_version_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the rich version row."""
    try:
        return "rich", metadata.version("rich"), "[green]OK[/green]"
    except metadata.PackageNotFoundError:
        # Importable (we rendered this far) but installed without metadata.
        return "rich", "unknown", "[yellow]WARN[/yellow]"


def _os_check() -> tuple[str, str, str]:
    """Return (label, value, status) for the OS row."""
    system_raw = platform.system()
    system_display = {
        "Windows": "Windows",
        "Linux": "Linux",
        "Darwin": "macOS",
    }.get(system_raw, system_raw)
    value = f"{system_display} {platform.release()} ({platform.machine()})"
    return "OS", value, "[green]OK[/green]"


def _actionline_version_check() -> tuple[str, str, str]:
    return "actionline", __version__, "[green]OK[/green]"


def collect_checks() -> list[tuple[str, str, str]]:
    return [
        _actionline_version_check(),
        _python_version_check(),
        _rich_version_check(),
        _os_check(),
    ]


def render_checks(checks: list[tuple[str, str, str]]) -> Table:
    table = Table(
        title="actionline doctor",
        show_header=True,
        header_style="bold cyan",
        border_style="dim",
    )
    table.add_column("Component", style="bold", min_width=12)
    table.add_column("Value", min_width=20)
    table.add_column("Status", justify="center", min_width=8)
    for label, value, status in checks:
        table.add_row(label, value, status)
    return table


# ---------------------------------------------------------------------------
# Action
# ---------------------------------------------------------------------------

class DoctorAction(CommandLineAction):
    """Check the runtime environment and report the results as a table."""

    def __init__(self) -> None:
        super().__init__(
            "doctor",
            summary="Check the runtime environment.",
            documentation=(
                "Prints the versions of actionline, Python and rich together with "
                "the operating system, and fails when a critical check does not pass."
            ),
        )

    async def on_execute(self) -> None:
        checks = collect_checks()
        output.print(render_checks(checks))

        if any("FAIL" in status for _, _, status in checks):
            raise ExitSignal(exit_codes.GENERAL_ERROR, "Some checks failed.")
        output.print("[bold green]All checks passed.[/bold green]")
