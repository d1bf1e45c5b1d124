"""
Indicator scoring - one pure function per health indicator.

Every function maps (profile, benchmarks) to a score in [0, 100] and never
raises for in-range input. Zero denominators resolve to the sentinel scores
documented on each function instead of dividing by zero.
"""

from typing import Callable, Dict, Tuple

from finhealth.domain import models
from finhealth.domain.benchmarks import BenchmarkTable
from finhealth.domain.models import FinancialProfile, IndicatorScore, KeyMetrics
from finhealth.utils.math_utils import clamp, interpolate_piecewise, safe_ratio

# Score assigned when income is zero and an income-relative ratio is undefined
ZERO_INCOME_SCORE = 0.0

BILL_PAYMENT_SCORES = {
    "always_on_time": 100.0,
    "usually_on_time": 75.0,
    "sometimes_late": 50.0,
    "often_late": 25.0,
}
UNKNOWN_RELIABILITY_SCORE = 0.0

CREDIT_SCORE_MIN = 300
CREDIT_SCORE_MAX = 850


def monthly_debt_service(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """
    Estimated monthly payments on all listed debts.

    Credit-card payments are taken as reported. Student and auto loans are
    estimated at installment_payment_rate of their balance. Housing counts as
    the mortgage payment when a mortgage balance exists.
    """
    liabilities = profile.liabilities
    service = profile.expenses.credit_card_payments
    service += benchmarks.installment_payment_rate * (liabilities.student_loans + liabilities.auto_loans)
    if liabilities.mortgage_balance > 0:
        service += profile.expenses.housing
    return service


def compute_key_metrics(profile: FinancialProfile, benchmarks: BenchmarkTable) -> KeyMetrics:
    income = profile.income.total_monthly
    expenses = profile.expenses.total_monthly
    essential = profile.expenses.essential_monthly
    cash_flow = income - expenses
    debt_service = monthly_debt_service(profile, benchmarks)
    total_liabilities = profile.liabilities.total

    return KeyMetrics(
        monthly_income=income,
        monthly_expenses=expenses,
        essential_expenses=essential,
        monthly_cash_flow=cash_flow,
        savings_rate=safe_ratio(cash_flow, income),
        emergency_fund_months=safe_ratio(profile.assets.emergency_fund, essential),
        debt_service=debt_service,
        debt_to_income=safe_ratio(debt_service, income),
        credit_utilization=safe_ratio(profile.liabilities.credit_card_debt, profile.liabilities.total_credit_limit),
        net_worth=profile.assets.total - total_liabilities,
        liquidity_ratio=safe_ratio(profile.assets.liquid, total_liabilities),
    )


def _spending_anchors(benchmarks: BenchmarkTable) -> Tuple[Tuple[float, float], ...]:
    # Spending ratio is the complement of the savings rate
    rates = benchmarks.savings_rate.as_tuple()
    anchors = tuple((1.0 - rate, score) for rate, score in zip(rates, benchmarks.tier_scores))
    return anchors + ((1.0, 0.0),)


def score_spending_vs_income(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """Lower expenses/income scores higher. Zero income scores ZERO_INCOME_SCORE."""
    income = profile.income.total_monthly
    if income <= 0:
        return ZERO_INCOME_SCORE
    ratio = profile.expenses.total_monthly / income
    return interpolate_piecewise(ratio, _spending_anchors(benchmarks))


def score_bill_payment(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """
    Self-reported payment reliability.

    The profile carries no delinquency records, so on-time payment is assumed
    unless the user reports otherwise. Unknown values score 0.
    """
    reliability = profile.personal.bill_payment_reliability
    return BILL_PAYMENT_SCORES.get(reliability, UNKNOWN_RELIABILITY_SCORE)


def score_emergency_savings(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """
    Months of essential expenses covered by the emergency fund.

    With no essential expenses any fund scores 100 and an empty fund scores 0.
    """
    essential = profile.expenses.essential_monthly
    fund = profile.assets.emergency_fund
    if essential <= 0:
        return 100.0 if fund > 0 else 0.0
    anchors = ((0.0, 0.0),) + benchmarks.anchors(benchmarks.emergency_fund_months)
    return interpolate_piecewise(fund / essential, anchors)


def score_debt_management(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """Lower debt-to-income scores higher. Zero income scores ZERO_INCOME_SCORE."""
    income = profile.income.total_monthly
    if income <= 0:
        return ZERO_INCOME_SCORE
    ratio = monthly_debt_service(profile, benchmarks) / income
    anchors = benchmarks.anchors(benchmarks.debt_to_income) + ((1.0, 0.0),)
    return interpolate_piecewise(ratio, anchors)


def credit_score_component(credit_score: float) -> float:
    return clamp((credit_score - CREDIT_SCORE_MIN) / (CREDIT_SCORE_MAX - CREDIT_SCORE_MIN) * 100)


def utilization_component(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    liabilities = profile.liabilities
    if liabilities.total_credit_limit <= 0:
        # No revolving line: neutral without card debt, worst case with it
        return benchmarks.no_credit_line_score if liabilities.credit_card_debt <= 0 else 0.0
    utilization = liabilities.credit_card_debt / liabilities.total_credit_limit
    anchors = benchmarks.anchors(benchmarks.credit_utilization) + ((1.0, 0.0),)
    return interpolate_piecewise(utilization, anchors)


def score_credit_health(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """Equal blend of utilization and the 300-850 credit score"""
    utilization = utilization_component(profile, benchmarks)
    bureau = credit_score_component(profile.liabilities.credit_score)
    return clamp(0.5 * utilization + 0.5 * bureau)


def insurance_target_ratio(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    target = benchmarks.insurance_target_ratio + benchmarks.insurance_dependent_step * profile.personal.dependents
    return min(benchmarks.insurance_target_cap, target)


def score_insurance_coverage(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """
    Insurance spend relative to income, against a dependents-adjusted target.

    This approximates coverage from premiums paid; it does not audit policies.
    Zero income scores ZERO_INCOME_SCORE.
    """
    income = profile.income.total_monthly
    if income <= 0:
        return ZERO_INCOME_SCORE
    ratio = profile.expenses.insurance / income
    return clamp(ratio / insurance_target_ratio(profile, benchmarks) * 100)


def retirement_target(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """Retirement savings expected at this age: annual income times an age multiple"""
    multiple = interpolate_piecewise(profile.personal.age, benchmarks.retirement_multiples)
    return profile.income.total_monthly * 12 * multiple


def score_retirement_planning(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """
    Retirement balance as a share of the age-based target.

    Zero income scores ZERO_INCOME_SCORE. Ages with no expected savings yet
    score 100.
    """
    if profile.income.total_monthly <= 0:
        return ZERO_INCOME_SCORE
    target = retirement_target(profile, benchmarks)
    if target <= 0:
        return 100.0
    return clamp(profile.assets.retirement_accounts / target * 100)


def score_financial_planning(profile: FinancialProfile, benchmarks: BenchmarkTable) -> float:
    """Rule-based: emergency fund in place, manageable debt, diversified savings"""
    score = 0.0

    poor_score = benchmarks.tier_scores[-1]
    if score_emergency_savings(profile, benchmarks) >= poor_score:
        score += 35

    income = profile.income.total_monthly
    if income > 0 and monthly_debt_service(profile, benchmarks) / income <= benchmarks.debt_to_income.fair:
        score += 35

    if profile.assets.retirement_accounts > 0:
        score += 15
    if profile.assets.brokerage_accounts > 0:
        score += 15

    return score


INDICATOR_FUNCTIONS: Dict[str, Callable[[FinancialProfile, BenchmarkTable], float]] = {
    models.SPENDING_VS_INCOME: score_spending_vs_income,
    models.BILL_PAYMENT: score_bill_payment,
    models.EMERGENCY_SAVINGS: score_emergency_savings,
    models.DEBT_MANAGEMENT: score_debt_management,
    models.CREDIT_HEALTH: score_credit_health,
    models.INSURANCE_COVERAGE: score_insurance_coverage,
    models.RETIREMENT_PLANNING: score_retirement_planning,
    models.FINANCIAL_PLANNING: score_financial_planning,
}


def indicator_status(score: float) -> str:
    if score >= 90:
        return "excellent"
    elif score >= 75:
        return "good"
    elif score >= 50:
        return "fair"
    elif score >= 25:
        return "poor"
    else:
        return "critical"


def explain_indicator(
    indicator: str,
    score: float,
    profile: FinancialProfile,
    metrics: KeyMetrics,
    benchmarks: BenchmarkTable,
) -> str:
    """Plain-language reading of how an indicator score was reached"""
    if indicator == models.SPENDING_VS_INCOME:
        if metrics.monthly_income <= 0:
            return "No income was reported, so spending cannot be compared against it."
        spend_ratio = metrics.monthly_expenses / metrics.monthly_income
        return (
            f"You spend {spend_ratio:.0%} of your monthly income. "
            f"Spending {1 - benchmarks.savings_rate.good:.0%} or less leaves a healthy margin for saving."
        )

    if indicator == models.BILL_PAYMENT:
        reliability = profile.personal.bill_payment_reliability.replace("_", " ")
        return f"You reported paying bills {reliability}. On-time payments protect your credit and avoid fees."

    if indicator == models.EMERGENCY_SAVINGS:
        return (
            f"Your emergency fund covers {metrics.emergency_fund_months:.1f} months of essential expenses. "
            f"The target is {benchmarks.emergency_fund_months.good:g} months, "
            f"{benchmarks.emergency_fund_months.excellent:g} for full security."
        )

    if indicator == models.DEBT_MANAGEMENT:
        if metrics.monthly_income <= 0:
            return "No income was reported, so debt payments cannot be measured against it."
        return (
            f"Debt payments take {metrics.debt_to_income:.0%} of your gross monthly income. "
            f"Lenders consider {benchmarks.debt_to_income.good:.0%} or less healthy."
        )

    if indicator == models.CREDIT_HEALTH:
        if profile.liabilities.total_credit_limit <= 0:
            utilization = "no revolving credit line"
        else:
            utilization = f"{metrics.credit_utilization:.0%} credit utilization"
        return (
            f"A credit score of {profile.liabilities.credit_score} with {utilization}. "
            f"Keeping utilization under {benchmarks.credit_utilization.good:.0%} supports your score."
        )

    if indicator == models.INSURANCE_COVERAGE:
        if metrics.monthly_income <= 0:
            return "No income was reported, so insurance spending cannot be measured against it."
        ratio = profile.expenses.insurance / metrics.monthly_income
        target = insurance_target_ratio(profile, benchmarks)
        return (
            f"Insurance premiums are {ratio:.1%} of income against a {target:.0%} guideline. "
            "This estimates protection from premiums paid, not from policy terms."
        )

    if indicator == models.RETIREMENT_PLANNING:
        target = retirement_target(profile, benchmarks)
        if target <= 0:
            return "No retirement balance is expected at your age yet; early contributions compound the most."
        return (
            f"You have saved {profile.assets.retirement_accounts:,.0f} for retirement "
            f"against a {target:,.0f} guideline for age {profile.personal.age}."
        )

    return (
        f"Planning score {score:.0f}/100 reflects an emergency fund, manageable debt, "
        "and savings spread across retirement and brokerage accounts."
    )


def score_indicators(
    profile: FinancialProfile,
    benchmarks: BenchmarkTable,
    metrics: KeyMetrics,
) -> Tuple[IndicatorScore, ...]:
    """Score every indicator, in the order the benchmark weights declare them"""
    scores = []
    for name, weight in benchmarks.weights:
        score = clamp(INDICATOR_FUNCTIONS[name](profile, benchmarks))
        scores.append(
            IndicatorScore(
                indicator=name,
                label=models.INDICATOR_LABELS[name],
                score=score,
                weight=weight,
                status=indicator_status(score),
                explanation=explain_indicator(name, score, profile, metrics, benchmarks),
            )
        )
    return tuple(scores)
