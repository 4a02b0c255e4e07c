"""Interactive session command for Trade Risk Manager CLI.

The session keeps one PlanInput in memory, applies edits field by field
and re-derives the whole plan after every edit. Nothing is saved when
the session ends.
"""

import logging

import click
from rich.console import Console
from rich.panel import Panel

from riskmanager.calculator import InputError, derive_plan, resolve_field_name, update_input
from riskmanager.cli.render import render_plan, render_tips
from riskmanager.config import get_config, get_default_input
from riskmanager.models import PlanInput

console = Console()
logger = logging.getLogger(__name__)

QUIT_COMMANDS = {"quit", "exit", "q"}

SESSION_HELP = (
    "[bold]Edit a field:[/bold]  [cyan]field=value[/cyan]  or just [cyan]field[/cyan]\n"
    "[bold]Fields:[/bold]        funds, trades, risk, rr, pip, entry, notes\n"
    "[bold]Commands:[/bold]      show, tips, reset, help, quit"
)


def apply_edit(current: PlanInput, line: str) -> PlanInput:
    """Apply a ``field=value`` edit to the current input.

    Args:
        current: The session's current input.
        line: Edit text, e.g. ``funds=2500`` or ``rr = 3``.

    Returns:
        New PlanInput with the field replaced and clamped.

    Raises:
        InputError: If the field name is unknown.
    """
    name, _, raw = line.partition("=")
    return update_input(current, name, raw.strip())


def _prompt_value(current: PlanInput, name: str) -> PlanInput:
    """Prompt for a single field's value, defaulting to its current value."""
    field = resolve_field_name(name)
    raw = click.prompt(field, default=str(getattr(current, field)), show_default=True)
    return update_input(current, field, raw)


def run_session(initial: PlanInput) -> PlanInput:
    """Run the interactive edit loop until the user quits.

    Args:
        initial: Starting input, restored by ``reset``.

    Returns:
        The input as it stood when the session ended.
    """
    current = initial
    render_plan(console, current, derive_plan(current))
    console.print(Panel(SESSION_HELP, title="Session", border_style="dim"))

    while True:
        try:
            line = click.prompt("edit", default="", show_default=False).strip()
        except click.Abort:
            console.print()
            break

        if not line:
            continue

        command = line.lower()
        if command in QUIT_COMMANDS:
            break
        if command == "help":
            console.print(Panel(SESSION_HELP, title="Session", border_style="dim"))
            continue
        if command == "tips":
            render_tips(console)
            continue
        if command == "show":
            render_plan(console, current, derive_plan(current))
            continue
        if command == "reset":
            current = initial
            render_plan(console, current, derive_plan(current))
            continue

        try:
            if "=" in line:
                current = apply_edit(current, line)
            else:
                current = _prompt_value(current, line)
        except InputError as e:
            console.print(f"[yellow]{e}. Type 'help' for field names.[/yellow]")
            continue
        except click.Abort:
            console.print()
            break

        logger.debug("Input updated: %s", current)
        render_plan(console, current, derive_plan(current))

    console.print("[dim]Session ended. Inputs are not saved.[/dim]")
    return current


@click.command()
def session() -> None:
    """Start an interactive risk planning session.

    Shows the plan for the configured defaults, then recalculates it
    after every edit. Non-numeric entries keep the field's current value.

    \b
    Examples:
      riskmanager session
      edit: funds=2500
      edit: rr=3
      edit: entry
      entry_price [0.0]: 1.0850
      edit: quit
    """
    run_session(get_default_input(get_config()))
