"""Input boundary for the risk calculator.

Raw entry (typed text or CLI values) is parsed and clamped here before
it reaches the calculator, so the calculator only ever sees numbers.
"""

import math
from typing import Any, Optional

from riskmanager.models import PlanInput


class InputError(ValueError):
    """Raised when an unknown input field is referenced."""


FIELD_DEFAULTS: dict[str, Any] = {
    "funds": 1000.0,
    "num_trades": 5,
    "daily_risk_pct": 2.0,
    "risk_reward": 2.0,
    "pip_size": 0.0001,
    "entry_price": 0.0,
    "notes": "",
}

# Alternative spellings accepted by resolve_field_name
FIELD_ALIASES = {
    "trades": "num_trades",
    "numtrades": "num_trades",
    "risk": "daily_risk_pct",
    "risk_pct": "daily_risk_pct",
    "dailyriskpct": "daily_risk_pct",
    "rr": "risk_reward",
    "riskreward": "risk_reward",
    "pip": "pip_size",
    "pipsize": "pip_size",
    "entry": "entry_price",
    "entryprice": "entry_price",
    "balance": "funds",
    "note": "notes",
}

MIN_NUM_TRADES = 1
MAX_NUM_TRADES = 100
MIN_RISK_REWARD = 0.1
MAX_DAILY_RISK_PCT = 100.0


def resolve_field_name(name: str) -> str:
    """Resolve a user-typed field name to a PlanInput field.

    Accepts snake_case, camelCase, dashes and short aliases
    (e.g. ``numTrades``, ``num-trades`` and ``trades``).

    Raises:
        InputError: If the name matches no field.
    """
    key = name.strip().replace("-", "_")
    if key in FIELD_DEFAULTS:
        return key

    folded = key.replace("_", "").lower()
    for field in FIELD_DEFAULTS:
        if field.replace("_", "") == folded:
            return field

    if key.lower() in FIELD_ALIASES:
        return FIELD_ALIASES[key.lower()]
    if folded in FIELD_ALIASES:
        return FIELD_ALIASES[folded]

    raise InputError(f"Unknown field: {name!r}")


def _parse_number(raw: Any) -> Optional[float]:
    """Parse raw entry as a finite float, or return None."""
    if isinstance(raw, bool) or raw is None:
        return None
    try:
        value = float(raw.strip()) if isinstance(raw, str) else float(raw)
    except (TypeError, ValueError):
        return None
    if not math.isfinite(value):
        return None
    return value


def coerce_field(name: str, raw: Any, fallback: Any = None) -> Any:
    """Parse and clamp a raw value for one input field.

    Args:
        name: PlanInput field name (aliases are resolved).
        raw: Raw value, typically typed text.
        fallback: Value used when ``raw`` is not a finite number.
            Defaults to the field's default.

    Returns:
        The clamped value, typed for the field.

    Raises:
        InputError: If the field name is unknown.
    """
    field = resolve_field_name(name)
    if fallback is None:
        fallback = FIELD_DEFAULTS[field]

    if field == "notes":
        return "" if raw is None else str(raw)

    value = _parse_number(raw)
    if value is None:
        value = float(fallback)

    if field == "num_trades":
        return min(max(MIN_NUM_TRADES, int(value)), MAX_NUM_TRADES)
    if field == "daily_risk_pct":
        return min(max(value, 0.0), MAX_DAILY_RISK_PCT)
    if field == "risk_reward":
        return max(value, MIN_RISK_REWARD)
    if field == "pip_size":
        return value if value > 0 else FIELD_DEFAULTS["pip_size"]
    # funds and entry_price
    return max(value, 0.0)


def build_input(**fields: Any) -> PlanInput:
    """Build a clamped PlanInput from raw field values.

    Fields that are not given (or given as None) take their defaults.

    Raises:
        InputError: If any field name is unknown.
    """
    values = dict(FIELD_DEFAULTS)
    for name, raw in fields.items():
        field = resolve_field_name(name)
        if raw is None:
            continue
        values[field] = coerce_field(field, raw)
    return PlanInput(**values)


def update_input(current: PlanInput, name: str, raw: Any) -> PlanInput:
    """Return a copy of ``current`` with one field replaced.

    Non-numeric entry keeps the field's current value.

    Raises:
        InputError: If the field name is unknown.
    """
    field = resolve_field_name(name)
    value = coerce_field(field, raw, fallback=getattr(current, field))
    return current.model_copy(update={field: value})
