"""Health scoring engine - core business logic for financial self-assessment"""

import logging
import math
from typing import Sequence

from finhealth.domain.assessments import assess_risk, calculate_financial_ratios, emergency_goal
from finhealth.domain.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from finhealth.domain.indicators import compute_key_metrics, score_indicators
from finhealth.domain.insights import build_action_plan, generate_insights
from finhealth.domain.models import AnalysisResult, FinancialProfile, IndicatorScore
from finhealth.domain.validation import detect_degenerate_inputs, sanitize_profile
from finhealth.utils.math_utils import clamp


def calculate_overall_score(indicators: Sequence[IndicatorScore]) -> int:
    """
    Weighted sum of indicator scores, clamped to 0-100 and rounded half up.

    Weights come from the benchmark table and sum to 1.0, so a profile
    scoring 100 on every indicator scores 100 overall.
    """
    total = math.fsum(item.weight * item.score for item in indicators)
    # Ties round up (64.5 -> 65); float noise below 1e-6 is ignored
    return int(math.floor(round(clamp(total), 6) + 0.5))


def classify_tier(score: float, benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS) -> str:
    """
    Map an overall score to a health tier.

    Tiers are checked best first; the first whose cutoff the score reaches
    wins. Default bands:
    - 80+:   excellent
    - 65-79: good
    - 50-64: fair
    - 35-49: limited
    - 0-34:  critical
    """
    for tier, cutoff in benchmarks.health_tiers:
        if score >= cutoff:
            return tier
    # Lowest cutoff is 0, so only negative scores land here
    return benchmarks.health_tiers[-1][0]


def compute_analysis(
    profile: FinancialProfile,
    benchmarks: BenchmarkTable = DEFAULT_BENCHMARKS,
    max_action_items: int = 5,
) -> AnalysisResult:
    """
    Main entry point: score a profile and build the full assessment.

    Deterministic and side-effect free apart from logging. Out-of-range fields
    are clamped and reported in `warnings` rather than raised.
    """
    profile, warnings = sanitize_profile(profile)
    warnings.extend(detect_degenerate_inputs(profile))

    metrics = compute_key_metrics(profile, benchmarks)
    indicators = score_indicators(profile, benchmarks, metrics)
    overall = calculate_overall_score(indicators)
    tier = classify_tier(overall, benchmarks)
    insights = generate_insights(indicators, profile, metrics, benchmarks)
    action_items = build_action_plan(insights, limit=max_action_items)
    risk = assess_risk(profile, metrics, benchmarks)

    logging.debug(
        "Analysis computed",
        extra={
            "step": "analysis",
            "overall_score": overall,
            "tier": tier,
            "insight_count": len(insights),
            "risk_level": risk.level,
            "degraded": bool(warnings),
        },
    )

    return AnalysisResult(
        overall_score=overall,
        tier=tier,
        indicators=indicators,
        insights=insights,
        action_items=action_items,
        key_metrics=metrics,
        ratios=calculate_financial_ratios(profile, metrics),
        risk=risk,
        emergency_goal=emergency_goal(profile, metrics, benchmarks),
        warnings=tuple(warnings),
        benchmark_version=benchmarks.version,
    )
