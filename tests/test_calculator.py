"""Property-based tests for the risk calculator."""

import math

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st
from pydantic import ValidationError

from riskmanager.calculator import (
    calculate_sl_pips,
    calculate_suggested_max_trades,
    derive_plan,
    generate_trade_lines,
)
from riskmanager.models import PlanInput, RiskPlan


def plan_input_strategy():
    """Generate PlanInputs within the ranges the input boundary allows."""
    return st.builds(
        PlanInput,
        funds=st.floats(min_value=0.0, max_value=1e7, allow_nan=False, allow_infinity=False),
        num_trades=st.integers(min_value=1, max_value=50),
        daily_risk_pct=st.floats(min_value=0.0, max_value=100.0, allow_nan=False, allow_infinity=False),
        risk_reward=st.floats(min_value=0.1, max_value=20.0, allow_nan=False, allow_infinity=False),
        pip_size=st.sampled_from([0.0001, 0.001, 0.01, 0.1, 1.0]),
        entry_price=st.one_of(
            st.just(0.0),
            st.floats(min_value=0.5, max_value=200.0, allow_nan=False, allow_infinity=False),
        ),
        notes=st.text(max_size=20),
    )


def all_numbers(plan: RiskPlan) -> list[float]:
    """Collect every numeric value of a plan, trade lines included."""
    values = [v for k, v in plan.model_dump().items() if isinstance(v, (int, float))]
    for line in plan.trade_lines:
        values.extend([line.risk_amount, line.sl_pips, line.tp_pips, line.reward_amount])
    return values


class TestReferenceScenarios:
    """Worked examples with known results."""

    def test_default_plan_without_entry(self):
        plan = derive_plan(PlanInput(
            funds=1000, num_trades=5, daily_risk_pct=2, risk_reward=2,
            pip_size=0.0001, entry_price=0,
        ))

        assert plan.daily_risk_amount == pytest.approx(20.0)
        assert plan.per_trade_risk == pytest.approx(4.0)
        assert plan.sl_pips == pytest.approx(40.0)
        assert plan.tp_pips == pytest.approx(80.0)
        assert plan.sl_price == 0
        assert plan.tp_price == 0
        assert plan.loss_if_lose_all == pytest.approx(20.0)
        assert plan.balance_if_lose_all == pytest.approx(980.0)
        assert plan.gain_per_trade == pytest.approx(8.0)
        assert plan.total_gain_if_win_all == pytest.approx(40.0)
        assert plan.balance_if_win_all == pytest.approx(1040.0)
        assert plan.suggested_max_trades == 10

    def test_entry_price_sets_sl_and_tp_prices(self):
        plan = derive_plan(PlanInput(
            funds=1000, num_trades=5, daily_risk_pct=2, risk_reward=2,
            pip_size=0.0001, entry_price=1.1,
        ))

        assert plan.sl_price == pytest.approx(1.096, abs=1e-9)
        assert plan.tp_price == pytest.approx(1.108, abs=1e-9)

    def test_prices_rounded_to_five_decimals(self):
        plan = derive_plan(PlanInput(
            funds=1000, num_trades=3, daily_risk_pct=1, risk_reward=1.7,
            pip_size=0.0001, entry_price=1.23456,
        ))

        assert plan.sl_price == round(plan.sl_price, 5)
        assert plan.tp_price == round(plan.tp_price, 5)

    def test_zero_funds_gives_zero_everywhere(self):
        plan = derive_plan(PlanInput(funds=0, entry_price=1.1))

        assert plan.daily_risk_amount == 0
        assert plan.per_trade_risk == 0
        assert plan.sl_pips == 0
        assert plan.tp_pips == 0
        assert plan.sl_price == 0
        assert plan.tp_price == 0
        assert plan.balance_if_lose_all == 0
        assert plan.balance_if_win_all == 0
        assert plan.total_gain_if_win_all == 0

    def test_zero_daily_risk(self):
        plan = derive_plan(PlanInput(daily_risk_pct=0))

        assert plan.daily_risk_amount == 0
        assert plan.per_trade_risk == 0
        assert plan.sl_pips == 0
        assert plan.suggested_max_trades == 0
        assert plan.balance_if_lose_all == plan.balance_if_win_all == 1000

    def test_single_trade_matches_daily_totals(self):
        plan = derive_plan(PlanInput(num_trades=1, funds=1000, daily_risk_pct=2, risk_reward=2))

        assert len(plan.trade_lines) == 1
        line = plan.trade_lines[0]
        assert line.trade == 1
        assert line.risk_amount == pytest.approx(plan.daily_risk_amount)
        assert line.reward_amount == pytest.approx(plan.total_gain_if_win_all)

    def test_notes_have_no_effect_on_numbers(self):
        with_notes = derive_plan(PlanInput(notes="London open only"))
        without_notes = derive_plan(PlanInput())

        assert with_notes.notes == "London open only"
        assert all_numbers(with_notes) == all_numbers(without_notes)


class TestDegenerateInputs:
    """Degenerate arithmetic resolves to 0 instead of raising."""

    def test_zero_pip_size(self):
        plan = derive_plan(PlanInput(pip_size=0, entry_price=1.1))

        assert plan.sl_pips == 0
        assert plan.tp_pips == 0
        assert plan.sl_price == 0
        assert plan.tp_price == 0

    def test_zero_trades_guarded(self):
        plan = derive_plan(PlanInput(num_trades=0))

        assert plan.per_trade_risk == 0
        assert plan.trade_lines == ()
        assert plan.total_gain_if_win_all == 0

    @pytest.mark.parametrize(
        "fields",
        [
            {"funds": -1000},
            {"risk_reward": -2},
            {"pip_size": -0.0001, "entry_price": 1.1},
            {"daily_risk_pct": -5},
            {"entry_price": -1.1},
            {"num_trades": -3},
            {"funds": -1000, "daily_risk_pct": -2, "pip_size": -0.0001},
        ],
    )
    def test_negative_inputs_do_not_raise(self, fields):
        plan = derive_plan(PlanInput(**fields))

        assert all(math.isfinite(v) for v in all_numbers(plan))

    def test_negative_funds_give_no_sl_distance(self):
        plan = derive_plan(PlanInput(funds=-1000))

        assert plan.daily_risk_amount == pytest.approx(-20.0)
        assert plan.sl_pips == 0
        assert plan.tp_pips == 0

    @pytest.mark.parametrize("value", [float("inf"), float("-inf"), float("nan")])
    @pytest.mark.parametrize(
        "field", ["funds", "daily_risk_pct", "risk_reward", "pip_size", "entry_price"]
    )
    def test_non_finite_inputs_resolve_to_finite(self, field, value):
        fields = {"entry_price": 1.1}
        fields[field] = value
        plan = derive_plan(PlanInput(**fields))

        assert all(math.isfinite(v) for v in all_numbers(plan))

    def test_large_funds_keep_finite_daily_risk(self):
        plan = derive_plan(PlanInput(funds=1e308, daily_risk_pct=2))

        assert plan.daily_risk_amount == pytest.approx(2e306)
        assert plan.balance_if_lose_all == pytest.approx(1e308 - 2e306)

    def test_sl_pips_zero_denominator(self):
        assert calculate_sl_pips(4.0, 0.0001, 0.0) == 0
        assert calculate_sl_pips(4.0, 0.0, 1000.0) == 0


class TestSuggestedMaxTrades:
    """Suggested trade cap heuristic."""

    @pytest.mark.parametrize(
        "pct,expected",
        [(2, 10), (10, 10), (12, 8), (30, 3), (50, 2), (100, 1), (0, 0), (-1, 0), (0.5, 10)],
    )
    def test_values(self, pct, expected):
        assert calculate_suggested_max_trades(pct) == expected

    @given(pct=st.floats(min_value=0.0, max_value=100.0, allow_nan=False))
    @settings(max_examples=100)
    def test_always_within_bounds(self, pct: float):
        result = calculate_suggested_max_trades(pct)

        assert isinstance(result, int)
        assert 0 <= result <= 10


class TestRiskPlanProperties:
    """
    *For any* valid input, the derived plan stays internally consistent.
    """

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=200)
    def test_daily_risk_amount(self, plan_input: PlanInput):
        plan = derive_plan(plan_input)

        expected = plan_input.funds * (plan_input.daily_risk_pct / 100)
        assert math.isclose(plan.daily_risk_amount, expected, rel_tol=1e-12, abs_tol=1e-9)

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=200)
    def test_trade_lines_sum_to_daily_risk(self, plan_input: PlanInput):
        plan = derive_plan(plan_input)

        assert len(plan.trade_lines) == plan_input.num_trades
        total = sum(line.risk_amount for line in plan.trade_lines)
        assert math.isclose(total, plan.daily_risk_amount, rel_tol=1e-9, abs_tol=1e-6)
        assert all(line.risk_amount == plan.per_trade_risk for line in plan.trade_lines)

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=200)
    def test_balance_if_lose_all(self, plan_input: PlanInput):
        plan = derive_plan(plan_input)

        assert math.isclose(
            plan.balance_if_lose_all + plan.daily_risk_amount,
            plan_input.funds,
            rel_tol=1e-9,
            abs_tol=1e-6,
        )
        assert plan.loss_if_lose_all == plan.daily_risk_amount

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=200)
    def test_balance_if_win_all(self, plan_input: PlanInput):
        plan = derive_plan(plan_input)

        assert math.isclose(
            plan.balance_if_win_all - plan_input.funds,
            plan.total_gain_if_win_all,
            rel_tol=1e-9,
            abs_tol=1e-6,
        )
        assert plan.total_gain_if_win_all == plan.gain_per_trade * plan_input.num_trades

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=100)
    def test_derivation_is_idempotent(self, plan_input: PlanInput):
        assert derive_plan(plan_input) == derive_plan(plan_input)

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=200)
    def test_results_are_finite(self, plan_input: PlanInput):
        plan = derive_plan(plan_input)

        assert all(math.isfinite(v) for v in all_numbers(plan))

    @given(plan_input=plan_input_strategy())
    @settings(max_examples=100)
    def test_unset_entry_price_gives_zero_prices(self, plan_input: PlanInput):
        plan = derive_plan(plan_input.model_copy(update={"entry_price": 0.0}))

        assert plan.sl_price == 0
        assert plan.tp_price == 0


class TestTradeLineGeneration:
    """
    *For any* trade count, the schedule has that many uniform rows.
    """

    @given(
        num_trades=st.integers(min_value=1, max_value=100),
        risk=st.floats(min_value=0.0, max_value=1e6, allow_nan=False),
    )
    @settings(max_examples=100)
    def test_rows_numbered_and_uniform(self, num_trades: int, risk: float):
        lines = generate_trade_lines(num_trades, risk, 40.0, 80.0, risk * 2)

        assert [line.trade for line in lines] == list(range(1, num_trades + 1))
        assert len({(l.risk_amount, l.sl_pips, l.tp_pips, l.reward_amount) for l in lines}) == 1

    def test_generation_is_repeatable(self):
        first = generate_trade_lines(5, 4.0, 40.0, 80.0, 8.0)
        second = generate_trade_lines(5, 4.0, 40.0, 80.0, 8.0)

        assert first == second

    def test_rows_are_immutable(self):
        line = generate_trade_lines(1, 4.0, 40.0, 80.0, 8.0)[0]

        with pytest.raises(ValidationError):
            line.risk_amount = 5.0

    @pytest.mark.parametrize("num_trades", [0, -1])
    def test_non_positive_count_gives_no_rows(self, num_trades):
        assert generate_trade_lines(num_trades, 4.0, 40.0, 80.0, 8.0) == ()
