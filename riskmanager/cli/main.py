"""Main CLI entry point for Trade Risk Manager.

This module provides the main click group and lazy loading
for subcommand modules.
"""

import logging

import click
from rich.console import Console

class LazyGroup(click.Group):
    """A click Group that imports a command's module on first use."""

    def __init__(self, *args, lazy_subcommands: dict[str, tuple[str, str]] | None = None, **kwargs):
        """Initialize the lazy group.

        Args:
            lazy_subcommands: Mapping of command names to
                ``(module path, attribute name)``.
        """
        super().__init__(*args, **kwargs)
        self._lazy_subcommands = lazy_subcommands or {}

    def list_commands(self, ctx: click.Context) -> list[str]:
        """List all available commands."""
        return sorted(set(super().list_commands(ctx)) | set(self._lazy_subcommands))

    def get_command(self, ctx: click.Context, cmd_name: str) -> click.Command | None:
        """Get a command by name, importing its module if needed."""
        if cmd_name not in self.commands and cmd_name in self._lazy_subcommands:
            import importlib

            module_path, attr_name = self._lazy_subcommands[cmd_name]
            cmd = getattr(importlib.import_module(module_path), attr_name)
            self.add_command(cmd, cmd_name)
        return self.commands.get(cmd_name)


LAZY_SUBCOMMANDS = {
    "plan": ("riskmanager.cli.plan", "plan"),
    "tips": ("riskmanager.cli.plan", "tips"),
    "session": ("riskmanager.cli.session", "session"),
    "config": ("riskmanager.cli.settings", "config_group"),
}


CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"]}


def _configure_logging(verbose: bool) -> None:
    """Route log records through rich; DEBUG when verbose."""
    from rich.logging import RichHandler

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


@click.group(cls=LazyGroup, lazy_subcommands=LAZY_SUBCOMMANDS, context_settings=CONTEXT_SETTINGS)
@click.version_option(package_name="trade-risk-manager")
@click.option("-v", "--verbose", is_flag=True, default=False, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """Trade Risk Manager - plan daily risk for discretionary FX trading.

    Derives daily and per-trade risk, SL/TP distances and prices, and
    best/worst-case outcomes from your funds, risk % and risk:reward.

    \b
    Quick Start:
      riskmanager plan --funds 1000 --risk-pct 2   # One-shot plan
      riskmanager plan --entry 1.1 --json          # Plan as JSON
      riskmanager session                          # Interactive form
      riskmanager tips                             # Best practices
    """
    _configure_logging(verbose)


def main() -> None:
    """Main entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
