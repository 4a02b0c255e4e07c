"""Risk calculation module."""

from riskmanager.calculator.inputs import (
    FIELD_DEFAULTS,
    InputError,
    build_input,
    coerce_field,
    resolve_field_name,
    update_input,
)
from riskmanager.calculator.risk import (
    calculate_daily_risk_amount,
    calculate_per_trade_risk,
    calculate_sl_pips,
    calculate_sl_price,
    calculate_suggested_max_trades,
    calculate_tp_pips,
    calculate_tp_price,
    derive_plan,
    generate_trade_lines,
)

__all__ = [
    "FIELD_DEFAULTS",
    "InputError",
    "build_input",
    "calculate_daily_risk_amount",
    "calculate_per_trade_risk",
    "calculate_sl_pips",
    "calculate_sl_price",
    "calculate_suggested_max_trades",
    "calculate_tp_pips",
    "calculate_tp_price",
    "coerce_field",
    "derive_plan",
    "generate_trade_lines",
    "resolve_field_name",
    "update_input",
]
