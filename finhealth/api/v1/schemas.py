"""Pydantic schemas for API request/response validation"""

from typing import Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from finhealth.domain import models


class PersonalInfoSchema(BaseModel):
    age: int = Field(30, ge=0, le=120)
    marital_status: Literal["single", "married", "divorced", "widowed"] = "single"
    dependents: int = Field(0, ge=0)
    employment_status: Literal["employed", "self_employed", "unemployed", "retired"] = "employed"
    employment_tenure: float = Field(0.0, ge=0, description="Years with current employer")
    bill_payment_reliability: Literal["always_on_time", "usually_on_time", "sometimes_late", "often_late"] = (
        "always_on_time"
    )


class IncomeSchema(BaseModel):
    """Monthly income streams"""

    primary_salary: float = Field(0.0, ge=0)
    secondary_income: float = Field(0.0, ge=0)
    business_income: float = Field(0.0, ge=0)
    investment_income: float = Field(0.0, ge=0)
    rental_income: float = Field(0.0, ge=0)
    benefits_income: float = Field(0.0, ge=0)
    other_income: float = Field(0.0, ge=0)
    income_growth_rate: float = Field(0.0, ge=0, le=1)
    income_variability: Literal["stable", "variable", "irregular"] = "stable"
    effective_tax_rate: float = Field(0.0, ge=0, le=1)


class ExpensesSchema(BaseModel):
    """Monthly expenses"""

    housing: float = Field(0.0, ge=0)
    utilities: float = Field(0.0, ge=0)
    food: float = Field(0.0, ge=0)
    transportation: float = Field(0.0, ge=0)
    healthcare: float = Field(0.0, ge=0)
    insurance: float = Field(0.0, ge=0)
    entertainment: float = Field(0.0, ge=0)
    shopping: float = Field(0.0, ge=0)
    credit_card_payments: float = Field(0.0, ge=0)


class AssetsSchema(BaseModel):
    checking: float = Field(0.0, ge=0)
    savings: float = Field(0.0, ge=0)
    emergency_fund: float = Field(0.0, ge=0)
    retirement_accounts: float = Field(0.0, ge=0)
    brokerage_accounts: float = Field(0.0, ge=0)


class LiabilitiesSchema(BaseModel):
    credit_card_debt: float = Field(0.0, ge=0)
    student_loans: float = Field(0.0, ge=0)
    auto_loans: float = Field(0.0, ge=0)
    mortgage_balance: float = Field(0.0, ge=0)
    credit_score: int = Field(700, ge=300, le=850)
    total_credit_limit: float = Field(0.0, ge=0)


class AnalysisRequest(BaseModel):
    """Request body for POST /v1/analysis"""

    personal: PersonalInfoSchema = Field(default_factory=PersonalInfoSchema)
    income: IncomeSchema = Field(default_factory=IncomeSchema)
    expenses: ExpensesSchema = Field(default_factory=ExpensesSchema)
    assets: AssetsSchema = Field(default_factory=AssetsSchema)
    liabilities: LiabilitiesSchema = Field(default_factory=LiabilitiesSchema)

    def to_profile(self) -> models.FinancialProfile:
        return models.FinancialProfile(
            personal=models.PersonalInfo(**self.personal.model_dump()),
            income=models.Income(**self.income.model_dump()),
            expenses=models.Expenses(**self.expenses.model_dump()),
            assets=models.Assets(**self.assets.model_dump()),
            liabilities=models.Liabilities(**self.liabilities.model_dump()),
        )


class IndicatorSchema(BaseModel):
    indicator: str
    label: str
    score: float
    weight: float
    status: str
    explanation: str


class InsightSchema(BaseModel):
    indicator: str
    title: str
    explanation: str
    impact: Literal["high", "medium", "low"]
    points_at_stake: float
    timeframe: Literal["short_term", "medium_term", "long_term"]


class KeyMetricsSchema(BaseModel):
    monthly_income: float
    monthly_expenses: float
    essential_expenses: float
    monthly_cash_flow: float
    savings_rate: float
    emergency_fund_months: float
    debt_service: float
    debt_to_income: float
    credit_utilization: float
    net_worth: float
    liquidity_ratio: float


class FinancialRatiosSchema(BaseModel):
    current_ratio: float
    quick_ratio: float
    debt_to_asset: float
    equity_ratio: float
    expense_ratio: float


class RiskFactorSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    category: str
    level: Literal["high", "medium"]
    description: str
    mitigation: str


class RiskAssessmentSchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    level: Literal["high", "medium", "low"]
    score: int = Field(..., ge=0, le=100)
    factors: List[RiskFactorSchema]


class EmergencyGoalSchema(BaseModel):
    target: float
    current: float
    progress: float = Field(..., ge=0, le=1)
    months_to_goal: Optional[int] = None


class AnalysisResponse(BaseModel):
    """Response for POST /v1/analysis"""

    overall_score: int = Field(..., ge=0, le=100)
    tier: Literal["excellent", "good", "fair", "limited", "critical"]
    indicators: List[IndicatorSchema]
    insights: List[InsightSchema]
    action_items: List[str]
    key_metrics: KeyMetricsSchema
    ratios: FinancialRatiosSchema
    risk: RiskAssessmentSchema
    emergency_goal: EmergencyGoalSchema
    warnings: List[str]
    degraded: bool
    benchmark_version: str

    @classmethod
    def from_result(cls, result: models.AnalysisResult) -> "AnalysisResponse":
        return cls(
            overall_score=result.overall_score,
            tier=result.tier,
            indicators=[IndicatorSchema.model_validate(item, from_attributes=True) for item in result.indicators],
            insights=[InsightSchema.model_validate(item, from_attributes=True) for item in result.insights],
            action_items=list(result.action_items),
            key_metrics=KeyMetricsSchema.model_validate(result.key_metrics, from_attributes=True),
            ratios=FinancialRatiosSchema.model_validate(result.ratios, from_attributes=True),
            risk=RiskAssessmentSchema.model_validate(result.risk, from_attributes=True),
            emergency_goal=EmergencyGoalSchema.model_validate(result.emergency_goal, from_attributes=True),
            warnings=list(result.warnings),
            degraded=result.degraded,
            benchmark_version=result.benchmark_version,
        )


class TierCutoffSchema(BaseModel):
    tier: str
    cutoff: float


class BenchmarkTiersSchema(BaseModel):
    excellent: float
    good: float
    fair: float
    poor: float


class BenchmarksResponse(BaseModel):
    """Response for GET /v1/benchmarks"""

    version: str
    health_tiers: List[TierCutoffSchema]
    emergency_fund_months: BenchmarkTiersSchema
    debt_to_income: BenchmarkTiersSchema
    savings_rate: BenchmarkTiersSchema
    credit_utilization: BenchmarkTiersSchema
    weights: Dict[str, float]
