"""Domain models - pure Python dataclasses representing a financial self-assessment"""

from dataclasses import dataclass, field
from typing import Optional, Tuple

# Indicator identifiers, in the order their weights are declared
SPENDING_VS_INCOME = "spending_vs_income"
BILL_PAYMENT = "bill_payment"
EMERGENCY_SAVINGS = "emergency_savings"
DEBT_MANAGEMENT = "debt_management"
CREDIT_HEALTH = "credit_health"
INSURANCE_COVERAGE = "insurance_coverage"
RETIREMENT_PLANNING = "retirement_planning"
FINANCIAL_PLANNING = "financial_planning"

INDICATORS = (
    SPENDING_VS_INCOME,
    BILL_PAYMENT,
    EMERGENCY_SAVINGS,
    DEBT_MANAGEMENT,
    CREDIT_HEALTH,
    INSURANCE_COVERAGE,
    RETIREMENT_PLANNING,
    FINANCIAL_PLANNING,
)

INDICATOR_LABELS = {
    SPENDING_VS_INCOME: "Spending vs Income",
    BILL_PAYMENT: "Bill Payment",
    EMERGENCY_SAVINGS: "Emergency Savings",
    DEBT_MANAGEMENT: "Debt Management",
    CREDIT_HEALTH: "Credit Health",
    INSURANCE_COVERAGE: "Insurance Coverage",
    RETIREMENT_PLANNING: "Retirement Planning",
    FINANCIAL_PLANNING: "Financial Planning",
}

# Health tiers, best first
EXCELLENT = "excellent"
GOOD = "good"
FAIR = "fair"
LIMITED = "limited"
CRITICAL = "critical"

BILL_PAYMENT_RELIABILITY = ("always_on_time", "usually_on_time", "sometimes_late", "often_late")


@dataclass(frozen=True)
class PersonalInfo:
    """Who the profile belongs to"""

    age: int = 30
    marital_status: str = "single"  # single | married | divorced | widowed
    dependents: int = 0
    employment_status: str = "employed"  # employed | self_employed | unemployed | retired
    employment_tenure: float = 3.0  # years
    bill_payment_reliability: str = "always_on_time"


@dataclass(frozen=True)
class Income:
    """Monthly income streams"""

    primary_salary: float = 0.0
    secondary_income: float = 0.0
    business_income: float = 0.0
    investment_income: float = 0.0
    rental_income: float = 0.0
    benefits_income: float = 0.0
    other_income: float = 0.0
    income_growth_rate: float = 0.0  # fraction per year
    income_variability: str = "stable"  # stable | variable | irregular
    effective_tax_rate: float = 0.0  # fraction

    @property
    def total_monthly(self) -> float:
        return (
            self.primary_salary
            + self.secondary_income
            + self.business_income
            + self.investment_income
            + self.rental_income
            + self.benefits_income
            + self.other_income
        )


@dataclass(frozen=True)
class Expenses:
    """Recurring monthly expenses"""

    housing: float = 0.0
    utilities: float = 0.0
    food: float = 0.0
    transportation: float = 0.0
    healthcare: float = 0.0
    insurance: float = 0.0
    entertainment: float = 0.0
    shopping: float = 0.0
    credit_card_payments: float = 0.0

    @property
    def total_monthly(self) -> float:
        return (
            self.housing
            + self.utilities
            + self.food
            + self.transportation
            + self.healthcare
            + self.insurance
            + self.entertainment
            + self.shopping
            + self.credit_card_payments
        )

    @property
    def essential_monthly(self) -> float:
        """Costs that continue during a loss of income"""
        return self.housing + self.utilities + self.food + self.transportation + self.healthcare


@dataclass(frozen=True)
class Assets:
    checking: float = 0.0
    savings: float = 0.0
    emergency_fund: float = 0.0
    retirement_accounts: float = 0.0
    brokerage_accounts: float = 0.0

    @property
    def liquid(self) -> float:
        return self.checking + self.savings + self.emergency_fund

    @property
    def total(self) -> float:
        return self.liquid + self.retirement_accounts + self.brokerage_accounts


@dataclass(frozen=True)
class Liabilities:
    credit_card_debt: float = 0.0
    student_loans: float = 0.0
    auto_loans: float = 0.0
    mortgage_balance: float = 0.0
    credit_score: int = 700  # 300-850
    total_credit_limit: float = 0.0

    @property
    def total(self) -> float:
        return self.credit_card_debt + self.student_loans + self.auto_loans + self.mortgage_balance


@dataclass(frozen=True)
class FinancialProfile:
    """Everything the user submitted for one assessment"""

    personal: PersonalInfo = field(default_factory=PersonalInfo)
    income: Income = field(default_factory=Income)
    expenses: Expenses = field(default_factory=Expenses)
    assets: Assets = field(default_factory=Assets)
    liabilities: Liabilities = field(default_factory=Liabilities)


@dataclass(frozen=True)
class KeyMetrics:
    """Raw ratios the indicators are scored from"""

    monthly_income: float
    monthly_expenses: float
    essential_expenses: float
    monthly_cash_flow: float
    savings_rate: float  # fraction of income
    emergency_fund_months: float
    debt_service: float  # monthly
    debt_to_income: float  # fraction of gross monthly income
    credit_utilization: float  # fraction of total limit
    net_worth: float
    liquidity_ratio: float  # liquid assets / total liabilities


@dataclass(frozen=True)
class FinancialRatios:
    """Balance-sheet and cash-flow ratios reported alongside the score"""

    current_ratio: float  # (checking + savings) / total liabilities
    quick_ratio: float  # checking / total liabilities
    debt_to_asset: float  # fraction
    equity_ratio: float  # (assets - liabilities) / assets
    expense_ratio: float  # expenses / income


@dataclass(frozen=True)
class RiskFactor:
    category: str
    level: str  # high | medium
    description: str
    mitigation: str


@dataclass(frozen=True)
class RiskAssessment:
    level: str  # high | medium | low
    score: int  # 0-100, higher is safer
    factors: Tuple[RiskFactor, ...]


@dataclass(frozen=True)
class EmergencyGoal:
    """Progress towards a fund covering the full-security number of months of spending"""

    target: float
    current: float  # emergency fund + savings
    progress: float  # fraction of target, capped at 1
    months_to_goal: Optional[int]  # 0 once reached, None while cash flow is not positive


@dataclass(frozen=True)
class IndicatorScore:
    """One of the eight sub-scores feeding the overall health score"""

    indicator: str
    label: str
    score: float  # 0-100
    weight: float
    status: str  # excellent | good | fair | poor | critical
    explanation: str


@dataclass(frozen=True)
class Insight:
    """A below-benchmark indicator with its estimated impact and remediation horizon"""

    indicator: str
    title: str
    explanation: str
    impact: str  # high | medium | low
    points_at_stake: float  # overall-score points recoverable
    timeframe: str  # short_term | medium_term | long_term
    action: str


@dataclass(frozen=True)
class AnalysisResult:
    """Output of a health assessment"""

    overall_score: int
    tier: str
    indicators: Tuple[IndicatorScore, ...]
    insights: Tuple[Insight, ...]
    action_items: Tuple[str, ...]
    key_metrics: KeyMetrics
    ratios: FinancialRatios
    risk: RiskAssessment
    emergency_goal: EmergencyGoal
    warnings: Tuple[str, ...] = ()
    benchmark_version: str = ""

    @property
    def degraded(self) -> bool:
        """True when inputs were clamped or a sentinel score was used"""
        return bool(self.warnings)

    def indicator(self, name: str) -> IndicatorScore:
        for item in self.indicators:
            if item.indicator == name:
                return item
        raise KeyError(name)


def sample_profile() -> FinancialProfile:
    """Default sample used in the benchmark documentation (5000/mo income, 3750/mo expenses)"""
    return FinancialProfile(
        personal=PersonalInfo(
            age=30,
            marital_status="single",
            dependents=0,
            employment_status="employed",
            employment_tenure=3,
        ),
        income=Income(
            primary_salary=5000,
            income_growth_rate=0.03,
            income_variability="stable",
            effective_tax_rate=0.22,
        ),
        expenses=Expenses(
            housing=1500,
            utilities=200,
            food=600,
            transportation=400,
            healthcare=200,
            insurance=300,
            entertainment=200,
            shopping=150,
            credit_card_payments=200,
        ),
        assets=Assets(
            checking=2000,
            savings=5000,
            emergency_fund=10000,
            retirement_accounts=25000,
            brokerage_accounts=15000,
        ),
        liabilities=Liabilities(
            credit_card_debt=5000,
            student_loans=20000,
            auto_loans=15000,
            mortgage_balance=200000,
            credit_score=720,
            total_credit_limit=25000,
        ),
    )
