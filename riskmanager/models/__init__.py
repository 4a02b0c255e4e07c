"""Data models for Trade Risk Manager."""

from riskmanager.models.plan import PlanInput, RiskPlan, TradeLine

__all__ = [
    "PlanInput",
    "RiskPlan",
    "TradeLine",
]
