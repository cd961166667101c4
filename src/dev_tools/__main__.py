"""Allow ``python -m dev_tools`` invocation.

This module simply delegates to the CLI error-boundary entry point so
that ``python -m dev_tools`` behaves identically to the ``dev-tools``
console script.
"""

from __future__ import annotations

from dev_tools.cli.app import cli

if __name__ == "__main__":
    cli()
