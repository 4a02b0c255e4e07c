"""CLI commands for Trade Risk Manager.

This package provides the command-line interface, including the
one-shot plan, the interactive session and config commands.
"""

from riskmanager.cli.main import cli, main

__all__ = ["cli", "main"]
