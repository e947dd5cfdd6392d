"""Allow ``python -m actionline`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m actionline`` behaves identically to the ``actionline``
console script.
"""

from __future__ import annotations

from actionline.cli.app import cli

if __name__ == "__main__":
    cli()
