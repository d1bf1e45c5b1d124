"""Unit tests for insight ranking and the action plan"""

import pytest

from finhealth.domain import models
from finhealth.domain.indicators import compute_key_metrics
from finhealth.domain.insights import (
    MAINTENANCE_ACTION,
    build_action_plan,
    classify_impact,
    generate_insights,
)
from finhealth.domain.models import IndicatorScore


def indicator(name: str, score: float, benchmarks) -> IndicatorScore:
    return IndicatorScore(name, models.INDICATOR_LABELS[name], score, benchmarks.weight_for(name), "poor", "")


@pytest.mark.parametrize(
    "points,expected",
    [(15.0, "high"), (6.0, "high"), (5.99, "medium"), (3.0, "medium"), (2.99, "low"), (0.0, "low")],
)
def test_classify_impact(points, expected):
    assert classify_impact(points) == expected


def test_indicators_at_good_benchmark_produce_no_insight(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    scores = [indicator(name, 75.0, benchmarks) for name in models.INDICATORS]

    assert generate_insights(scores, profile, metrics, benchmarks) == ()


def test_equal_impact_ties_follow_priority(profile, benchmarks):
    """Spending and debt carry the same weight; debt management ranks first"""
    metrics = compute_key_metrics(profile, benchmarks)
    scores = [
        indicator(models.SPENDING_VS_INCOME, 0.0, benchmarks),
        indicator(models.DEBT_MANAGEMENT, 0.0, benchmarks),
        indicator(models.EMERGENCY_SAVINGS, 0.0, benchmarks),
    ]

    insights = generate_insights(scores, profile, metrics, benchmarks)

    assert [i.indicator for i in insights] == [
        models.DEBT_MANAGEMENT,
        models.EMERGENCY_SAVINGS,
        models.SPENDING_VS_INCOME,
    ]
    assert all(i.impact == "high" for i in insights)
    assert insights[0].points_at_stake == 15.0


def test_higher_impact_outranks_priority(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    scores = [
        indicator(models.DEBT_MANAGEMENT, 70.0, benchmarks),  # 4.5 points, medium
        indicator(models.BILL_PAYMENT, 25.0, benchmarks),  # 9 points, high
    ]

    insights = generate_insights(scores, profile, metrics, benchmarks)

    assert [i.indicator for i in insights] == [models.BILL_PAYMENT, models.DEBT_MANAGEMENT]


def test_timeframes_by_indicator(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    scores = [indicator(name, 10.0, benchmarks) for name in models.INDICATORS]
    timeframes = {i.indicator: i.timeframe for i in generate_insights(scores, profile, metrics, benchmarks)}

    assert timeframes[models.BILL_PAYMENT] == "short_term"
    assert timeframes[models.EMERGENCY_SAVINGS] == "medium_term"
    assert timeframes[models.RETIREMENT_PLANNING] == "long_term"


def test_emergency_insight_states_shortfall(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    insights = generate_insights([indicator(models.EMERGENCY_SAVINGS, 60.0, benchmarks)], profile, metrics, benchmarks)

    # 4 months of 2900 essentials is 11600; 10000 is saved
    assert insights[0].action.startswith("Add 1,600 to your emergency fund")
    assert "vs. a 4-month target" in insights[0].explanation


def test_credit_insight_targets_score_when_utilization_ok(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    insights = generate_insights([indicator(models.CREDIT_HEALTH, 40.0, benchmarks)], profile, metrics, benchmarks)

    # Utilization is already at the 20% guideline, so the advice targets the score itself
    assert insights[0].title == "Strengthen your credit score"
    assert metrics.credit_utilization == pytest.approx(0.20)


def test_build_action_plan_limits_and_orders(profile, benchmarks):
    metrics = compute_key_metrics(profile, benchmarks)
    scores = [indicator(name, 0.0, benchmarks) for name in models.INDICATORS]
    insights = generate_insights(scores, profile, metrics, benchmarks)

    plan = build_action_plan(insights, limit=3)

    assert plan == tuple(i.action for i in insights[:3])


def test_build_action_plan_without_gaps():
    assert build_action_plan(()) == (MAINTENANCE_ACTION,)
