"""Risk derivations for a day's trading plan.

Every function here is pure: the same inputs always give the same
outputs, nothing is logged and nothing raises. Degenerate arithmetic
(division by zero, non-finite intermediates) resolves to 0.
"""

import math

from riskmanager.models import PlanInput, RiskPlan, TradeLine

# Upper bound on the suggested number of trades per day
MAX_SUGGESTED_TRADES = 10

# Decimal places kept on SL/TP prices
PRICE_DECIMALS = 5


def _finite_or_zero(value: float) -> float:
    """Return value, or 0.0 if it is NaN or infinite."""
    return value if math.isfinite(value) else 0.0


def calculate_suggested_max_trades(daily_risk_pct: float) -> int:
    """Calculate the suggested maximum number of trades for the day.

    Uses ``min(floor(100 / daily_risk_pct), 10)``.

    Args:
        daily_risk_pct: Percent of funds at risk for the day.

    Returns:
        Suggested trade count. 0 when the daily risk is not positive,
        meaning there is no suggestion to make.
    """
    if not math.isfinite(daily_risk_pct) or daily_risk_pct <= 0:
        return 0
    ratio = 100 / daily_risk_pct
    if not math.isfinite(ratio):
        return MAX_SUGGESTED_TRADES
    return min(math.floor(ratio), MAX_SUGGESTED_TRADES)


def calculate_daily_risk_amount(funds: float, daily_risk_pct: float) -> float:
    """Calculate the amount at risk across the whole day."""
    return _finite_or_zero(funds * (daily_risk_pct / 100))


def calculate_per_trade_risk(daily_risk_amount: float, num_trades: int) -> float:
    """Split the daily risk evenly across the planned trades.

    Returns 0 when no trades are planned.
    """
    if num_trades <= 0:
        return 0.0
    return _finite_or_zero(daily_risk_amount / num_trades)


def calculate_sl_pips(per_trade_risk: float, pip_size: float, funds: float) -> float:
    """Calculate the stop-loss distance in pips.

    Args:
        per_trade_risk: Amount at risk on one trade.
        pip_size: Minimum price increment of the instrument.
        funds: Account balance.

    Returns:
        ``per_trade_risk / (pip_size * funds)``, or 0 if there is nothing
        at risk or the denominator is 0.
    """
    denominator = pip_size * funds
    if per_trade_risk <= 0 or denominator == 0:
        return 0.0
    return _finite_or_zero(per_trade_risk / denominator)


def calculate_tp_pips(sl_pips: float, risk_reward: float) -> float:
    """Calculate the take-profit distance in pips."""
    return _finite_or_zero(sl_pips * risk_reward)


def calculate_sl_price(entry_price: float, sl_pips: float, pip_size: float) -> float:
    """Calculate the stop-loss price below the entry.

    Returns 0 if the entry price is unset (0) or there is no SL distance.
    """
    if not entry_price or not sl_pips:
        return 0.0
    return _finite_or_zero(round(entry_price - sl_pips * pip_size, PRICE_DECIMALS))


def calculate_tp_price(entry_price: float, tp_pips: float, pip_size: float) -> float:
    """Calculate the take-profit price above the entry.

    Returns 0 if the entry price is unset (0) or there is no TP distance.
    """
    if not entry_price or not tp_pips:
        return 0.0
    return _finite_or_zero(round(entry_price + tp_pips * pip_size, PRICE_DECIMALS))


def generate_trade_lines(
    num_trades: int,
    risk_amount: float,
    sl_pips: float,
    tp_pips: float,
    reward_amount: float,
) -> tuple[TradeLine, ...]:
    """Generate the uniform per-trade plan.

    Args:
        num_trades: Number of rows to generate.
        risk_amount: Amount at risk on each trade.
        sl_pips: Stop-loss distance on each trade.
        tp_pips: Take-profit distance on each trade.
        reward_amount: Gain on each winning trade.

    Returns:
        Tuple of ``num_trades`` rows numbered from 1, identical apart
        from their number. Empty if ``num_trades`` is not positive.
    """
    return tuple(
        TradeLine(
            trade=i + 1,
            risk_amount=risk_amount,
            sl_pips=sl_pips,
            tp_pips=tp_pips,
            reward_amount=reward_amount,
        )
        for i in range(max(0, num_trades))
    )


def derive_plan(plan_input: PlanInput) -> RiskPlan:
    """Derive the complete risk plan from the trader's inputs.

    Args:
        plan_input: The current input record.

    Returns:
        RiskPlan with every derived value and the per-trade rows.
    """
    funds = plan_input.funds
    num_trades = plan_input.num_trades

    daily_risk_amount = calculate_daily_risk_amount(funds, plan_input.daily_risk_pct)
    per_trade_risk = calculate_per_trade_risk(daily_risk_amount, num_trades)
    sl_pips = calculate_sl_pips(per_trade_risk, plan_input.pip_size, funds)
    tp_pips = calculate_tp_pips(sl_pips, plan_input.risk_reward)

    gain_per_trade = _finite_or_zero(per_trade_risk * plan_input.risk_reward)
    total_gain_if_win_all = _finite_or_zero(gain_per_trade * num_trades)

    return RiskPlan(
        suggested_max_trades=calculate_suggested_max_trades(plan_input.daily_risk_pct),
        daily_risk_amount=daily_risk_amount,
        per_trade_risk=per_trade_risk,
        sl_pips=sl_pips,
        tp_pips=tp_pips,
        sl_price=calculate_sl_price(plan_input.entry_price, sl_pips, plan_input.pip_size),
        tp_price=calculate_tp_price(plan_input.entry_price, tp_pips, plan_input.pip_size),
        loss_if_lose_all=daily_risk_amount,
        balance_if_lose_all=_finite_or_zero(funds - daily_risk_amount),
        gain_per_trade=gain_per_trade,
        total_gain_if_win_all=total_gain_if_win_all,
        balance_if_win_all=_finite_or_zero(funds + total_gain_if_win_all),
        trade_lines=generate_trade_lines(
            num_trades, per_trade_risk, sl_pips, tp_pips, gain_per_trade
        ),
        notes=plan_input.notes,
    )
