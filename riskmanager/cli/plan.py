"""Plan commands for Trade Risk Manager CLI.

Handles the one-shot risk plan and the best-practices list.
"""

import logging
from typing import Optional

import click
from rich.console import Console

from riskmanager.calculator import derive_plan, update_input
from riskmanager.cli.render import render_plan, render_tips
from riskmanager.config import get_config, get_default_input
from riskmanager.models import PlanInput

console = Console()
logger = logging.getLogger(__name__)


def resolve_plan_input(overrides: dict) -> PlanInput:
    """Start from the configured defaults and apply explicit overrides.

    Args:
        overrides: Field name to raw value; None values are skipped.

    Returns:
        Clamped PlanInput.
    """
    plan_input = get_default_input(get_config())

    for field, raw in overrides.items():
        if raw is None:
            continue
        plan_input = update_input(plan_input, field, raw)

    logger.debug("Resolved plan input: %s", plan_input)
    return plan_input


@click.command()
@click.option("-f", "--funds", type=float, default=None, help="Total funds (account balance).")
@click.option("-n", "--trades", "num_trades", type=int, default=None, help="Number of trades planned for the day.")
@click.option("-r", "--risk-pct", "daily_risk_pct", type=float, default=None, help="Percent of funds to risk across the day (0-100).")
@click.option("--rr", "risk_reward", type=float, default=None, help="Reward multiple per unit of risk (1:R).")
@click.option("--pip-size", type=float, default=None, help="Pip size, e.g. 0.0001 for most pairs, 0.01 for JPY pairs.")
@click.option("-e", "--entry", "entry_price", type=float, default=None, help="Manual entry price for SL/TP prices.")
@click.option("--notes", type=str, default=None, help="Free-text notes shown with the plan.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print the plan as JSON.")
def plan(
    funds: Optional[float],
    num_trades: Optional[int],
    daily_risk_pct: Optional[float],
    risk_reward: Optional[float],
    pip_size: Optional[float],
    entry_price: Optional[float],
    notes: Optional[str],
    as_json: bool,
) -> None:
    """Calculate a daily risk plan.

    Options not given fall back to the [defaults] section of the config
    file, then to built-in defaults. Out-of-range values are clamped.

    \b
    Examples:
      riskmanager plan                              # Defaults
      riskmanager plan -f 5000 -n 3 -r 1.5 --rr 3   # Custom plan
      riskmanager plan --entry 1.1                  # With SL/TP prices
      riskmanager plan --pip-size 0.01 --entry 150  # JPY pair
    """
    plan_input = resolve_plan_input({
        "funds": funds,
        "num_trades": num_trades,
        "daily_risk_pct": daily_risk_pct,
        "risk_reward": risk_reward,
        "pip_size": pip_size,
        "entry_price": entry_price,
        "notes": notes,
    })
    risk_plan = derive_plan(plan_input)

    if as_json:
        click.echo(risk_plan.model_dump_json(indent=2))
        return

    render_plan(console, plan_input, risk_plan)


@click.command()
def tips() -> None:
    """Show best daily trading practices."""
    render_tips(console)
