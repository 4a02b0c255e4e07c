"""Rich renderables for risk plans."""

from rich.console import Console, Group
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from riskmanager.formatting import (
    BEST_PRACTICES,
    format_amount,
    format_pips,
    format_price,
    format_signed_amount,
    format_suggested_trades,
)
from riskmanager.models import PlanInput, RiskPlan


def build_inputs_table(plan_input: PlanInput, plan: RiskPlan) -> Table:
    """Build the table of current inputs."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Field", style="dim")
    table.add_column("Value", justify="right")

    table.add_row("Total funds", format_amount(plan_input.funds))
    table.add_row(
        "Number of trades",
        f"{plan_input.num_trades} "
        f"[dim](suggested max: {format_suggested_trades(plan.suggested_max_trades)})[/dim]",
    )
    table.add_row("Daily risk %", f"{plan_input.daily_risk_pct:g}")
    table.add_row("Risk:Reward", f"1:{plan_input.risk_reward:g}")
    table.add_row("Pip size", f"{plan_input.pip_size:g}")
    table.add_row("Entry price", format_price(plan_input.entry_price))

    return table


def build_summary_table(plan: RiskPlan) -> Table:
    """Build the summary of derived values."""
    table = Table(show_header=False, box=None, padding=(0, 2))
    table.add_column("Metric")
    table.add_column("Value", justify="right", style="bold")

    table.add_row("Daily risk amount", format_amount(plan.daily_risk_amount))
    table.add_row("Per-trade risk", format_amount(plan.per_trade_risk))
    table.add_row("SL (pips)", format_pips(plan.sl_pips))
    table.add_row("TP (pips)", format_pips(plan.tp_pips))
    table.add_row("SL price", format_price(plan.sl_price))
    table.add_row("TP price", format_price(plan.tp_price))
    table.add_row(
        "Loss if all lose",
        f"[red]{format_signed_amount(plan.loss_if_lose_all, '-')}[/red]",
    )
    table.add_row("Balance if all lose", format_amount(plan.balance_if_lose_all))
    table.add_row(
        "Gain if all win",
        f"[green]{format_signed_amount(plan.total_gain_if_win_all, '+')}[/green]",
    )
    table.add_row("Balance if all win", format_amount(plan.balance_if_win_all))

    return table


def build_trade_table(plan: RiskPlan) -> Table:
    """Build the per-trade plan table."""
    table = Table(title="Per-Trade Plan", show_header=True, header_style="bold cyan")
    table.add_column("Trade", style="bold")
    table.add_column("Risk Amount", justify="right")
    table.add_column("SL (pips)", justify="right")
    table.add_column("TP (pips)", justify="right")
    table.add_column("Reward Amount", justify="right")

    for line in plan.trade_lines:
        table.add_row(
            f"#{line.trade}",
            format_amount(line.risk_amount),
            format_pips(line.sl_pips),
            format_pips(line.tp_pips),
            f"[green]{format_signed_amount(line.reward_amount, '+')}[/green]",
        )

    return table


def render_plan(console: Console, plan_input: PlanInput, plan: RiskPlan) -> None:
    """Print the inputs, summary, per-trade plan and notes."""
    console.print(Panel(
        Group(build_inputs_table(plan_input, plan), "", build_summary_table(plan)),
        title="[bold]Trade Risk Manager[/bold]",
        border_style="cyan",
    ))
    console.print(build_trade_table(plan))

    if plan.notes:
        console.print(Panel(Text(plan.notes), title="Notes", border_style="dim"))


def render_tips(console: Console) -> None:
    """Print the best daily trading practices."""
    body = "\n".join(f"• {tip}" for tip in BEST_PRACTICES)
    console.print(Panel(
        body,
        title="[bold blue]Best Daily Trading Practices[/bold blue]",
        border_style="blue",
    ))
