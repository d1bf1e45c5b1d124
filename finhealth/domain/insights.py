"""Insight and action-plan generation from indicator scores"""

from typing import List, Sequence, Tuple

from finhealth.domain import models
from finhealth.domain.benchmarks import BenchmarkTable
from finhealth.domain.indicators import insurance_target_ratio, retirement_target
from finhealth.domain.models import FinancialProfile, IndicatorScore, Insight, KeyMetrics

# Tie-break order when two insights share an impact level
PRIORITY = (
    models.DEBT_MANAGEMENT,
    models.EMERGENCY_SAVINGS,
    models.SPENDING_VS_INCOME,
    models.CREDIT_HEALTH,
    models.RETIREMENT_PLANNING,
    models.INSURANCE_COVERAGE,
    models.FINANCIAL_PLANNING,
    models.BILL_PAYMENT,
)

TIMEFRAMES = {
    models.BILL_PAYMENT: "short_term",
    models.SPENDING_VS_INCOME: "short_term",
    models.INSURANCE_COVERAGE: "short_term",
    models.EMERGENCY_SAVINGS: "medium_term",
    models.DEBT_MANAGEMENT: "medium_term",
    models.CREDIT_HEALTH: "medium_term",
    models.FINANCIAL_PLANNING: "medium_term",
    models.RETIREMENT_PLANNING: "long_term",
}

IMPACT_RANK = {"high": 0, "medium": 1, "low": 2}

# Overall-score points recoverable (weight x gap to 100)
HIGH_IMPACT_POINTS = 6.0
MEDIUM_IMPACT_POINTS = 3.0

MAINTENANCE_ACTION = "Keep your current habits and review your finances again in six months"


def classify_impact(points_at_stake: float) -> str:
    if points_at_stake >= HIGH_IMPACT_POINTS:
        return "high"
    elif points_at_stake >= MEDIUM_IMPACT_POINTS:
        return "medium"
    return "low"


def _describe_gap(
    indicator: str,
    profile: FinancialProfile,
    metrics: KeyMetrics,
    benchmarks: BenchmarkTable,
) -> Tuple[str, str, str]:
    """(title, explanation, imperative action) for one below-benchmark indicator"""
    if indicator == models.EMERGENCY_SAVINGS:
        target_months = benchmarks.emergency_fund_months.good
        target = metrics.essential_expenses * target_months
        shortfall = max(0.0, target - profile.assets.emergency_fund)
        return (
            "Build your emergency fund",
            f"Your emergency fund covers only {metrics.emergency_fund_months:.1f} months of essential "
            f"expenses vs. a {target_months:g}-month target.",
            f"Add {shortfall:,.0f} to your emergency fund to reach {target_months:g} months of essential expenses",
        )

    if indicator == models.DEBT_MANAGEMENT:
        if metrics.monthly_income <= 0:
            return (
                "Establish income to service debt",
                "No income was reported, so every debt payment is unfunded.",
                "Secure a steady income source before taking on new debt",
            )
        target = benchmarks.debt_to_income.good
        excess = max(0.0, metrics.debt_service - target * metrics.monthly_income)
        return (
            "Reduce your debt burden",
            f"Debt payments take {metrics.debt_to_income:.0%} of your income vs. a {target:.0%} guideline.",
            f"Cut monthly debt payments by {excess:,.0f} by paying down the highest-rate balances first",
        )

    if indicator == models.SPENDING_VS_INCOME:
        if metrics.monthly_income <= 0:
            return (
                "Spending exceeds income",
                "No income was reported while expenses continue.",
                "Build a bare-bones budget covering essentials until income resumes",
            )
        target_ratio = 1 - benchmarks.savings_rate.good
        spend_ratio = metrics.monthly_expenses / metrics.monthly_income
        excess = max(0.0, metrics.monthly_expenses - target_ratio * metrics.monthly_income)
        return (
            "Bring spending below income",
            f"You spend {spend_ratio:.0%} of your income vs. a {target_ratio:.0%} ceiling.",
            f"Trim {excess:,.0f} a month from discretionary spending such as shopping and entertainment",
        )

    if indicator == models.CREDIT_HEALTH:
        limit = profile.liabilities.total_credit_limit
        target = benchmarks.credit_utilization.good
        if limit > 0 and metrics.credit_utilization > target:
            paydown = profile.liabilities.credit_card_debt - target * limit
            return (
                "Lower your credit utilization",
                f"You use {metrics.credit_utilization:.0%} of your available credit vs. a {target:.0%} guideline.",
                f"Pay {paydown:,.0f} off your credit cards to bring utilization under {target:.0%}",
            )
        return (
            "Strengthen your credit score",
            f"A credit score of {profile.liabilities.credit_score} holds back your credit health.",
            "Pay every bill on time and keep card balances low to rebuild your credit score",
        )

    if indicator == models.RETIREMENT_PLANNING:
        if metrics.monthly_income <= 0:
            return (
                "Restart retirement saving",
                "No income was reported, so no retirement contributions are possible.",
                "Resume retirement contributions as soon as income returns",
            )
        target = retirement_target(profile, benchmarks)
        balance = profile.assets.retirement_accounts
        return (
            "Catch up on retirement savings",
            f"Your retirement savings of {balance:,.0f} trail the {target:,.0f} guideline for age "
            f"{profile.personal.age}.",
            "Raise retirement contributions toward 15% of income and capture any employer match",
        )

    if indicator == models.INSURANCE_COVERAGE:
        target = insurance_target_ratio(profile, benchmarks)
        return (
            "Review your insurance protection",
            f"Insurance spending is below the {target:.0%}-of-income guideline for your household.",
            "Get quotes for health, disability and term life coverage to close protection gaps",
        )

    if indicator == models.BILL_PAYMENT:
        return (
            "Pay every bill on time",
            "Late payments add fees and damage your credit history.",
            "Set up automatic payments for every recurring bill",
        )

    return (
        "Put a financial plan in place",
        "Your finances lack one or more basics: an emergency fund, manageable debt, or diversified savings.",
        "Write down a plan covering emergency savings, debt payoff and investing",
    )


def generate_insights(
    indicators: Sequence[IndicatorScore],
    profile: FinancialProfile,
    metrics: KeyMetrics,
    benchmarks: BenchmarkTable,
) -> Tuple[Insight, ...]:
    """
    One insight per indicator scoring below the "good" benchmark.

    Sorted by impact (high first); ties follow PRIORITY.
    """
    insights: List[Insight] = []
    for item in indicators:
        if item.score >= benchmarks.good_score:
            continue

        points = item.weight * (100.0 - item.score)
        title, explanation, action = _describe_gap(item.indicator, profile, metrics, benchmarks)
        insights.append(
            Insight(
                indicator=item.indicator,
                title=title,
                explanation=explanation,
                impact=classify_impact(points),
                points_at_stake=round(points, 2),
                timeframe=TIMEFRAMES[item.indicator],
                action=action,
            )
        )

    insights.sort(key=lambda i: (IMPACT_RANK[i.impact], PRIORITY.index(i.indicator)))
    return tuple(insights)


def build_action_plan(insights: Sequence[Insight], limit: int = 5) -> Tuple[str, ...]:
    """Top insights as imperative recommendations"""
    if not insights:
        return (MAINTENANCE_ACTION,)
    return tuple(insight.action for insight in insights[:limit])
