"""Plan input and derived risk plan data models."""

from pydantic import BaseModel, Field


class PlanInput(BaseModel):
    """Represents the trader's inputs for a day's risk plan.

    No range constraints are declared here. Raw entry is clamped by
    ``riskmanager.calculator.inputs`` before it reaches this model, and
    the calculator accepts any numeric record.
    """

    funds: float = Field(default=1000.0, description="Account balance")
    num_trades: int = Field(default=5, description="Planned trades for the day")
    daily_risk_pct: float = Field(default=2.0, description="Percent of funds at risk for the day")
    risk_reward: float = Field(default=2.0, description="Reward multiple per unit of risk")
    pip_size: float = Field(default=0.0001, description="Minimum price increment")
    entry_price: float = Field(default=0.0, description="Manual entry price (0 = unset)")
    notes: str = Field(default="", description="Free-text notes")

    model_config = {"frozen": True}


class TradeLine(BaseModel):
    """Represents one row of the per-trade plan."""

    trade: int = Field(..., ge=1, description="1-based trade number")
    risk_amount: float = Field(..., description="Amount risked on the trade")
    sl_pips: float = Field(..., description="Stop-loss distance in pips")
    tp_pips: float = Field(..., description="Take-profit distance in pips")
    reward_amount: float = Field(..., description="Amount gained if the trade wins")

    model_config = {"frozen": True}


class RiskPlan(BaseModel):
    """Represents every value derived from a PlanInput."""

    suggested_max_trades: int = Field(..., ge=0, description="Suggested trade cap (0 = no suggestion)")
    daily_risk_amount: float = Field(..., description="Total amount at risk for the day")
    per_trade_risk: float = Field(..., description="Amount at risk per trade")
    sl_pips: float = Field(..., description="Stop-loss distance in pips")
    tp_pips: float = Field(..., description="Take-profit distance in pips")
    sl_price: float = Field(..., description="Stop-loss price (0 = entry unset)")
    tp_price: float = Field(..., description="Take-profit price (0 = entry unset)")
    loss_if_lose_all: float = Field(..., description="Loss if every trade hits SL")
    balance_if_lose_all: float = Field(..., description="Balance if every trade hits SL")
    gain_per_trade: float = Field(..., description="Gain per winning trade")
    total_gain_if_win_all: float = Field(..., description="Gain if every trade hits TP")
    balance_if_win_all: float = Field(..., description="Balance if every trade hits TP")
    trade_lines: tuple[TradeLine, ...] = Field(default=(), description="Per-trade plan rows")
    notes: str = Field(default="", description="Notes carried from the input")

    model_config = {"frozen": True}
