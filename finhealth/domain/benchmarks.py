"""
Benchmark table - research-derived thresholds and indicator weights.

Values follow the Financial Health Network 2024 standards. The table is
immutable and validated on construction: a table whose weights do not sum
to 1.0 or whose tier cutoffs are not strictly descending raises
ConfigurationError instead of being silently renormalized.
"""

import math
from dataclasses import dataclass, field, replace
from typing import Any, Dict, Mapping, Optional, Tuple

from finhealth.domain.exceptions import ConfigurationError
from finhealth.domain import models

WEIGHT_TOLERANCE = 1e-9


@dataclass(frozen=True)
class BenchmarkTiers:
    """Four reference values for one raw metric"""

    excellent: float
    good: float
    fair: float
    poor: float
    higher_is_better: bool = True

    def as_tuple(self) -> Tuple[float, float, float, float]:
        return (self.excellent, self.good, self.fair, self.poor)


DEFAULT_HEALTH_TIERS: Tuple[Tuple[str, float], ...] = (
    (models.EXCELLENT, 80),
    (models.GOOD, 65),
    (models.FAIR, 50),
    (models.LIMITED, 35),
    (models.CRITICAL, 0),
)

DEFAULT_WEIGHTS: Tuple[Tuple[str, float], ...] = (
    (models.SPENDING_VS_INCOME, 0.15),
    (models.BILL_PAYMENT, 0.12),
    (models.EMERGENCY_SAVINGS, 0.15),
    (models.DEBT_MANAGEMENT, 0.15),
    (models.CREDIT_HEALTH, 0.13),
    (models.INSURANCE_COVERAGE, 0.10),
    (models.RETIREMENT_PLANNING, 0.12),
    (models.FINANCIAL_PLANNING, 0.08),
)

# Retirement savings as a multiple of annual income, by age
DEFAULT_RETIREMENT_MULTIPLES: Tuple[Tuple[float, float], ...] = (
    (22, 0.0),
    (25, 0.5),
    (30, 1.0),
    (35, 2.0),
    (40, 3.0),
    (45, 4.0),
    (50, 5.0),
    (55, 7.0),
    (60, 10.0),
    (65, 12.0),
)


@dataclass(frozen=True)
class BenchmarkTable:
    """Read-only thresholds and weights consumed by the scoring engine"""

    version: str = "fhn-2024.1"
    health_tiers: Tuple[Tuple[str, float], ...] = DEFAULT_HEALTH_TIERS
    emergency_fund_months: BenchmarkTiers = field(default_factory=lambda: BenchmarkTiers(6, 4, 2, 1))
    debt_to_income: BenchmarkTiers = field(
        default_factory=lambda: BenchmarkTiers(0.20, 0.28, 0.36, 0.50, higher_is_better=False)
    )
    savings_rate: BenchmarkTiers = field(default_factory=lambda: BenchmarkTiers(0.20, 0.15, 0.10, 0.05))
    credit_utilization: BenchmarkTiers = field(
        default_factory=lambda: BenchmarkTiers(0.10, 0.20, 0.30, 0.50, higher_is_better=False)
    )
    weights: Tuple[Tuple[str, float], ...] = DEFAULT_WEIGHTS

    # Scores assigned at each tier breakpoint (excellent, good, fair, poor)
    tier_scores: Tuple[float, float, float, float] = (100.0, 75.0, 50.0, 25.0)

    # Heuristics for values the profile does not capture directly
    installment_payment_rate: float = 0.01  # monthly payment as fraction of loan balance
    insurance_target_ratio: float = 0.05
    insurance_dependent_step: float = 0.01
    insurance_target_cap: float = 0.10
    retirement_multiples: Tuple[Tuple[float, float], ...] = DEFAULT_RETIREMENT_MULTIPLES
    no_credit_line_score: float = 50.0

    def __post_init__(self) -> None:
        self._validate_weights()
        self._validate_tiers()
        for name in ("emergency_fund_months", "debt_to_income", "savings_rate", "credit_utilization"):
            self._validate_benchmark(name, getattr(self, name))

    def _validate_weights(self) -> None:
        names = [name for name, _ in self.weights]
        if sorted(names) != sorted(models.INDICATORS) or len(names) != len(set(names)):
            raise ConfigurationError(f"Weights must name each indicator exactly once, got {names}")

        for name, weight in self.weights:
            if not math.isfinite(weight):
                raise ConfigurationError(f"Weight for {name} is not a finite number: {weight}")
            if weight < 0:
                raise ConfigurationError(f"Weight for {name} is negative: {weight}")

        total = math.fsum(weight for _, weight in self.weights)
        if abs(total - 1.0) > WEIGHT_TOLERANCE:
            raise ConfigurationError(f"Indicator weights sum to {total}, expected 1.0")

    def _validate_tiers(self) -> None:
        if not self.health_tiers:
            raise ConfigurationError("At least one health tier is required")

        cutoffs = [cutoff for _, cutoff in self.health_tiers]
        if not all(math.isfinite(cutoff) for cutoff in cutoffs):
            raise ConfigurationError(f"Tier cutoffs must be finite numbers, got {cutoffs}")
        if any(upper <= lower for upper, lower in zip(cutoffs, cutoffs[1:])):
            raise ConfigurationError(f"Tier cutoffs must be strictly descending, got {cutoffs}")
        if cutoffs[-1] != 0:
            raise ConfigurationError(f"Lowest tier cutoff must be 0 so every score is classified, got {cutoffs[-1]}")
        if cutoffs[0] > 100:
            raise ConfigurationError(f"Highest tier cutoff exceeds 100: {cutoffs[0]}")

    @staticmethod
    def _validate_benchmark(name: str, tiers: BenchmarkTiers) -> None:
        values = tiers.as_tuple()
        if tiers.higher_is_better:
            ordered = all(a > b for a, b in zip(values, values[1:]))
        else:
            ordered = all(a < b for a, b in zip(values, values[1:]))
        if not ordered:
            direction = "descending" if tiers.higher_is_better else "ascending"
            raise ConfigurationError(f"{name} benchmarks must be strictly {direction}, got {values}")

    def weight_for(self, indicator: str) -> float:
        return dict(self.weights)[indicator]

    def anchors(self, tiers: BenchmarkTiers) -> Tuple[Tuple[float, float], ...]:
        """(metric value, score) breakpoints for piecewise interpolation"""
        return tuple(zip(tiers.as_tuple(), self.tier_scores))

    @property
    def good_score(self) -> float:
        """Score an indicator needs to count as meeting the "good" benchmark"""
        return self.tier_scores[1]

    def to_dict(self) -> Dict[str, Any]:
        def tiers_dict(tiers: BenchmarkTiers) -> Dict[str, float]:
            return {
                "excellent": tiers.excellent,
                "good": tiers.good,
                "fair": tiers.fair,
                "poor": tiers.poor,
            }

        return {
            "version": self.version,
            "health_tiers": [{"tier": tier, "cutoff": cutoff} for tier, cutoff in self.health_tiers],
            "emergency_fund_months": tiers_dict(self.emergency_fund_months),
            "debt_to_income": tiers_dict(self.debt_to_income),
            "savings_rate": tiers_dict(self.savings_rate),
            "credit_utilization": tiers_dict(self.credit_utilization),
            "weights": {name: weight for name, weight in self.weights},
        }


def load_benchmarks(
    weights: Optional[Mapping[str, float]] = None,
    base: Optional[BenchmarkTable] = None,
) -> BenchmarkTable:
    """
    Build a validated table, optionally overriding indicator weights.

    Overrides keep the declared indicator order. Raises ConfigurationError if
    the resulting table is inconsistent.
    """
    table = base or DEFAULT_BENCHMARKS
    if not weights:
        return table

    unknown = set(weights) - set(models.INDICATORS)
    if unknown:
        raise ConfigurationError(f"Unknown indicators in weight override: {sorted(unknown)}")

    merged = tuple((name, float(weights.get(name, weight))) for name, weight in table.weights)
    return replace(table, weights=merged, version=f"{table.version}+custom")


DEFAULT_BENCHMARKS = BenchmarkTable()
