"""Unit tests for overall scoring and tier classification"""

from dataclasses import replace

import pytest

from finhealth.domain import models
from finhealth.domain.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from finhealth.domain.insights import MAINTENANCE_ACTION
from finhealth.domain.models import IndicatorScore, Income
from finhealth.domain.scoring import calculate_overall_score, classify_tier, compute_analysis


def make_indicators(score: float) -> list[IndicatorScore]:
    return [
        IndicatorScore(name, name, score, weight, "fair", "")
        for name, weight in DEFAULT_BENCHMARKS.weights
    ]


def test_calculate_overall_score_weighted_sum():
    indicators = make_indicators(50.0)
    indicators[0] = replace(indicators[0], score=90.0)  # spending, weight 0.15

    # 50 everywhere plus 0.15 * 40 extra
    assert calculate_overall_score(indicators) == 56


def test_calculate_overall_score_rounds_ties_up():
    indicators = make_indicators(60.0)
    indicators[0] = replace(indicators[0], score=90.0)

    # 60 everywhere plus 0.15 * 30 extra lands on 64.5
    score = calculate_overall_score(indicators)
    assert score == 65
    assert classify_tier(score) == "good"


@pytest.mark.parametrize("high,low,expected", [(65, 64, 65), (35, 34, 35), (3, 2, 3)])
def test_calculate_overall_score_exact_half(high, low, expected):
    """Two half-weight indicators average to an exact .5"""
    indicators = [
        IndicatorScore(models.SPENDING_VS_INCOME, "", float(high), 0.5, "fair", ""),
        IndicatorScore(models.BILL_PAYMENT, "", float(low), 0.5, "fair", ""),
    ]
    assert calculate_overall_score(indicators) == expected


def test_calculate_overall_score_bounds():
    assert calculate_overall_score(make_indicators(100.0)) == 100
    assert calculate_overall_score(make_indicators(0.0)) == 0


def test_classify_tier_buckets():
    """Test tier mapping to score bands"""
    assert classify_tier(100) == "excellent"
    assert classify_tier(80) == "excellent"
    assert classify_tier(79) == "good"
    assert classify_tier(65) == "good"
    assert classify_tier(64) == "fair"
    assert classify_tier(50) == "fair"
    assert classify_tier(49) == "limited"
    assert classify_tier(35) == "limited"
    assert classify_tier(34) == "critical"
    assert classify_tier(0) == "critical"


def test_tiers_partition_every_integer_score():
    tiers = [tier for tier, _ in DEFAULT_BENCHMARKS.health_tiers]
    assigned = [classify_tier(score) for score in range(0, 101)]

    assert all(tier in tiers for tier in assigned)
    # Descending scores never move to a better tier
    ranks = [tiers.index(tier) for tier in reversed(assigned)]
    assert ranks == sorted(ranks)


def test_classify_tier_with_injected_table():
    table = BenchmarkTable(health_tiers=(("pass", 50), ("fail", 0)))
    assert classify_tier(72, table) == "pass"
    assert classify_tier(12, table) == "fail"


def test_sample_profile_scenario(profile):
    """Default sample lands in the good tier with a reproducible score"""
    result = compute_analysis(profile)

    # 15 + 12 + 0.15*68.10 + 0.15*41.07 + 0.13*75.68 + 10 + 0.12*41.67 + 0.08*65
    assert result.overall_score == 73
    assert result.tier == "good"
    assert not result.degraded

    emergency = [i for i in result.insights if i.indicator == models.EMERGENCY_SAVINGS]
    assert len(emergency) == 1
    assert "3.4 months" in emergency[0].explanation
    assert "4-month target" in emergency[0].explanation


def test_sample_profile_insight_ranking(profile):
    result = compute_analysis(profile)

    assert [i.indicator for i in result.insights] == [
        models.DEBT_MANAGEMENT,
        models.RETIREMENT_PLANNING,
        models.EMERGENCY_SAVINGS,
        models.FINANCIAL_PLANNING,
    ]
    assert [i.impact for i in result.insights] == ["high", "high", "medium", "low"]
    assert result.action_items == tuple(i.action for i in result.insights)


def test_strong_profile_scores_full_marks(strong_profile):
    result = compute_analysis(strong_profile)

    assert result.overall_score == 100
    assert result.tier == "excellent"
    assert result.insights == ()
    assert result.action_items == (MAINTENANCE_ACTION,)


def test_zero_income_scenario(profile):
    """Zero income resolves to sentinels and still yields a bounded score"""
    result = compute_analysis(replace(profile, income=Income()))

    assert 0 <= result.overall_score <= 100
    assert result.indicator(models.SPENDING_VS_INCOME).score == 0.0
    assert result.indicator(models.DEBT_MANAGEMENT).score == 0.0
    assert result.degraded
    assert any(w.startswith("zero_income") for w in result.warnings)


def test_compute_analysis_is_idempotent(profile):
    assert compute_analysis(profile) == compute_analysis(profile)


def test_max_action_items_limits_plan(profile):
    result = compute_analysis(profile, max_action_items=2)

    assert len(result.insights) == 4
    assert len(result.action_items) == 2


def test_negative_input_is_clamped_and_flagged(profile):
    broken = replace(profile, expenses=replace(profile.expenses, shopping=-500))
    result = compute_analysis(broken)

    assert result.degraded
    assert any("expenses.shopping" in w for w in result.warnings)
    assert result.key_metrics.monthly_expenses == 3600
    assert 0 <= result.overall_score <= 100


@pytest.mark.parametrize("salary", [0, 500, 2500, 5000, 20000, 1_000_000])
def test_overall_score_always_bounded(profile, salary):
    result = compute_analysis(replace(profile, income=replace(profile.income, primary_salary=salary)))
    assert 0 <= result.overall_score <= 100
    assert result.tier in {tier for tier, _ in DEFAULT_BENCHMARKS.health_tiers}
