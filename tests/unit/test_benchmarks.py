"""Unit tests for the benchmark table"""

import dataclasses
import math

import pytest

from finhealth.domain import models
from finhealth.domain.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable, BenchmarkTiers, load_benchmarks
from finhealth.domain.exceptions import ConfigurationError


def test_default_weights_sum_to_one():
    total = math.fsum(weight for _, weight in DEFAULT_BENCHMARKS.weights)
    assert abs(total - 1.0) <= 1e-9


def test_default_weights_cover_every_indicator_in_order():
    assert [name for name, _ in DEFAULT_BENCHMARKS.weights] == list(models.INDICATORS)


def test_default_tier_cutoffs_strictly_descending():
    cutoffs = [cutoff for _, cutoff in DEFAULT_BENCHMARKS.health_tiers]
    assert cutoffs == [80, 65, 50, 35, 0]
    assert all(a > b for a, b in zip(cutoffs, cutoffs[1:]))


def test_weights_not_summing_to_one_rejected():
    """Bad weights abort construction instead of being renormalized"""
    weights = tuple((name, 0.2) for name in models.INDICATORS)
    with pytest.raises(ConfigurationError, match="sum"):
        BenchmarkTable(weights=weights)


def test_missing_indicator_weight_rejected():
    weights = DEFAULT_BENCHMARKS.weights[:-1]
    with pytest.raises(ConfigurationError):
        BenchmarkTable(weights=weights)


def test_non_descending_cutoffs_rejected():
    tiers = (("excellent", 80), ("good", 80), ("fair", 50), ("limited", 35), ("critical", 0))
    with pytest.raises(ConfigurationError, match="descending"):
        BenchmarkTable(health_tiers=tiers)


def test_lowest_cutoff_must_be_zero():
    tiers = (("excellent", 80), ("good", 65), ("fair", 50), ("limited", 35), ("critical", 10))
    with pytest.raises(ConfigurationError):
        BenchmarkTable(health_tiers=tiers)


def test_benchmark_tiers_direction_enforced():
    with pytest.raises(ConfigurationError, match="debt_to_income"):
        BenchmarkTable(debt_to_income=BenchmarkTiers(0.50, 0.36, 0.28, 0.20, higher_is_better=False))


def test_table_is_read_only():
    with pytest.raises(dataclasses.FrozenInstanceError):
        DEFAULT_BENCHMARKS.version = "tampered"


def test_anchors_pair_benchmarks_with_tier_scores():
    anchors = DEFAULT_BENCHMARKS.anchors(DEFAULT_BENCHMARKS.emergency_fund_months)
    assert anchors == ((6, 100.0), (4, 75.0), (2, 50.0), (1, 25.0))


def test_load_benchmarks_without_overrides_returns_default():
    assert load_benchmarks() is DEFAULT_BENCHMARKS


def test_load_benchmarks_weight_override():
    table = load_benchmarks({"bill_payment": 0.10, "financial_planning": 0.10})

    assert table.weight_for("bill_payment") == 0.10
    assert table.weight_for("financial_planning") == 0.10
    assert table.weight_for("credit_health") == 0.13
    assert table.version.endswith("+custom")


def test_load_benchmarks_override_must_still_sum_to_one():
    with pytest.raises(ConfigurationError):
        load_benchmarks({"bill_payment": 0.50})


def test_load_benchmarks_unknown_indicator():
    with pytest.raises(ConfigurationError, match="Unknown"):
        load_benchmarks({"net_worth": 0.1})


def test_to_dict_exposes_tiers_and_weights():
    data = DEFAULT_BENCHMARKS.to_dict()

    assert data["health_tiers"][0] == {"tier": "excellent", "cutoff": 80}
    assert data["emergency_fund_months"]["good"] == 4
    assert data["credit_utilization"]["poor"] == 0.50
    assert len(data["weights"]) == 8


@pytest.mark.parametrize("bad_weight", [float("nan"), float("inf")])
def test_non_finite_weight_override_rejected(bad_weight):
    with pytest.raises(ConfigurationError, match="finite"):
        load_benchmarks({"bill_payment": bad_weight})


def test_nan_tier_cutoff_rejected():
    tiers = (("excellent", 80), ("good", float("nan")), ("fair", 50), ("limited", 35), ("critical", 0))
    with pytest.raises(ConfigurationError, match="finite"):
        BenchmarkTable(health_tiers=tiers)
