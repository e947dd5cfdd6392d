"""CLI layer — argument grammar, dispatch, console output and the error boundary.

This package is the outermost layer of the framework.  It may import
from ``core``, but ``core`` never imports from ``cli``.
"""

from actionline.cli.action import CommandLineAction
from actionline.cli.parser import CommandLineParser

__all__: list[str] = [
    "CommandLineAction",
    "CommandLineParser",
]
