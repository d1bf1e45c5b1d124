"""
Supplementary analyses reported next to the health score.

Ratios, a rule-based risk assessment and the emergency-fund goal. None of
these feed the overall score; they give the renderer extra context.
"""

import math
from typing import Sequence, Tuple

from finhealth.domain.benchmarks import BenchmarkTable
from finhealth.domain.models import (
    EmergencyGoal,
    FinancialProfile,
    FinancialRatios,
    KeyMetrics,
    RiskAssessment,
    RiskFactor,
)
from finhealth.utils.math_utils import safe_ratio

HIGH = "high"
MEDIUM = "medium"
LOW = "low"

LIQUIDITY_RISK_MONTHS = 3.0

# Points deducted from a perfect risk score of 100
RISK_DEDUCTIONS = {
    "thin_emergency_fund": 20,
    "high_debt_to_income": 15,
    "high_credit_utilization": 10,
    "no_invested_assets": 15,
}


def calculate_financial_ratios(profile: FinancialProfile, metrics: KeyMetrics) -> FinancialRatios:
    """Liquidity, leverage and efficiency ratios; a zero denominator yields 0"""
    assets = profile.assets
    total_assets = assets.total
    total_liabilities = profile.liabilities.total

    return FinancialRatios(
        current_ratio=safe_ratio(assets.checking + assets.savings, total_liabilities),
        quick_ratio=safe_ratio(assets.checking, total_liabilities),
        debt_to_asset=safe_ratio(total_liabilities, total_assets),
        equity_ratio=safe_ratio(total_assets - total_liabilities, total_assets),
        expense_ratio=safe_ratio(metrics.monthly_expenses, metrics.monthly_income),
    )


def _short_of_liquidity(profile: FinancialProfile, metrics: KeyMetrics) -> bool:
    if metrics.essential_expenses <= 0:
        return profile.assets.emergency_fund <= 0
    return metrics.emergency_fund_months < LIQUIDITY_RISK_MONTHS


def identify_risk_factors(
    profile: FinancialProfile,
    metrics: KeyMetrics,
    benchmarks: BenchmarkTable,
) -> Tuple[RiskFactor, ...]:
    factors = []

    if profile.income.secondary_income == 0 and profile.income.business_income == 0:
        factors.append(
            RiskFactor(
                category="Income Concentration",
                level=HIGH,
                description="Dependent on a single income source",
                mitigation="Develop a second income stream or strengthen job security",
            )
        )

    if _short_of_liquidity(profile, metrics):
        factors.append(
            RiskFactor(
                category="Liquidity Risk",
                level=HIGH,
                description="Emergency fund covers less than three months of essential expenses",
                mitigation=f"Build the emergency fund to {benchmarks.emergency_fund_months.excellent:g} months of expenses",
            )
        )

    if metrics.credit_utilization > benchmarks.credit_utilization.fair:
        factors.append(
            RiskFactor(
                category="Credit Risk",
                level=MEDIUM,
                description="High credit utilization",
                mitigation="Pay down card balances or raise credit limits",
            )
        )

    return tuple(factors)


def overall_risk_level(factors: Sequence[RiskFactor]) -> str:
    """Two or more high factors is high risk, one is medium"""
    high_count = sum(1 for factor in factors if factor.level == HIGH)
    if high_count >= 2:
        return HIGH
    if high_count == 1:
        return MEDIUM
    return LOW


def calculate_risk_score(profile: FinancialProfile, metrics: KeyMetrics, benchmarks: BenchmarkTable) -> int:
    """
    Start at 100 and deduct for each weakness:
    - emergency fund under three months: -20
    - DTI above the fair benchmark: -15
    - credit utilization above the fair benchmark: -10
    - no retirement or brokerage balance: -15
    """
    score = 100
    if _short_of_liquidity(profile, metrics):
        score -= RISK_DEDUCTIONS["thin_emergency_fund"]
    if metrics.debt_to_income > benchmarks.debt_to_income.fair:
        score -= RISK_DEDUCTIONS["high_debt_to_income"]
    if metrics.credit_utilization > benchmarks.credit_utilization.fair:
        score -= RISK_DEDUCTIONS["high_credit_utilization"]
    if profile.assets.retirement_accounts + profile.assets.brokerage_accounts <= 0:
        score -= RISK_DEDUCTIONS["no_invested_assets"]
    return max(0, score)


def assess_risk(profile: FinancialProfile, metrics: KeyMetrics, benchmarks: BenchmarkTable) -> RiskAssessment:
    factors = identify_risk_factors(profile, metrics, benchmarks)
    return RiskAssessment(
        level=overall_risk_level(factors),
        score=calculate_risk_score(profile, metrics, benchmarks),
        factors=factors,
    )


def emergency_goal(profile: FinancialProfile, metrics: KeyMetrics, benchmarks: BenchmarkTable) -> EmergencyGoal:
    """
    Full-security emergency goal: total monthly expenses times the excellent
    emergency-fund benchmark, funded from emergency fund plus savings.

    Months to goal assumes all positive monthly cash flow goes to the fund.
    """
    target = metrics.monthly_expenses * benchmarks.emergency_fund_months.excellent
    current = profile.assets.emergency_fund + profile.assets.savings
    needed = target - current

    if needed <= 0:
        months_to_goal = 0
    elif metrics.monthly_cash_flow <= 0:
        months_to_goal = None
    else:
        months_to_goal = math.ceil(needed / metrics.monthly_cash_flow)

    return EmergencyGoal(
        target=target,
        current=current,
        progress=min(1.0, safe_ratio(current, target, default=1.0)),
        months_to_goal=months_to_goal,
    )
