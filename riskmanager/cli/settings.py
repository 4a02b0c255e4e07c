"""Configuration commands for Trade Risk Manager CLI."""

import click
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from riskmanager import config as app_config

console = Console()


@click.group(name="config")
def config_group() -> None:
    """Manage the defaults configuration file.

    \b
    Commands:
      init  - Write a template config file
      show  - Show the effective default inputs
    """
    pass


@config_group.command("init")
@click.option("--force", is_flag=True, default=False, help="Overwrite an existing config file.")
def init_config(force: bool) -> None:
    """Write a template config file with the built-in defaults."""
    config_path = app_config.CONFIG_PATH

    if config_path.exists() and not force:
        console.print(Panel(
            f"[yellow]Config already exists:[/yellow] {config_path}\n\n"
            "Use [cyan]--force[/cyan] to overwrite it.",
            title="[bold yellow]Config[/bold yellow]",
            border_style="yellow",
        ))
        raise SystemExit(1)

    try:
        written = app_config.create_template_config(config_path)
    except OSError as e:
        console.print(Panel(
            f"[red]Failed to write config:[/red]\n\n{e}",
            title="[bold red]Error[/bold red]",
            border_style="red",
        ))
        raise SystemExit(1)

    console.print(f"[green]✓ Created config at {written}[/green]")


@config_group.command("show")
def show_config() -> None:
    """Show the default inputs used by plan and session."""
    config_path = app_config.CONFIG_PATH
    loaded = app_config.get_config(config_path)
    defaults = app_config.get_default_input(loaded)

    source = str(config_path) if loaded is not None else "built-in defaults"

    table = Table(title=f"Defaults ({source})", show_header=True, header_style="bold cyan")
    table.add_column("Field", style="bold")
    table.add_column("Value", justify="right")

    for field, value in defaults.model_dump().items():
        table.add_row(field, str(value))

    console.print(table)
