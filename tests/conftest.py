"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient

from finhealth.api.main import create_app
from finhealth.domain.benchmarks import DEFAULT_BENCHMARKS, BenchmarkTable
from finhealth.domain.models import (
    Assets,
    Expenses,
    FinancialProfile,
    Income,
    Liabilities,
    PersonalInfo,
    sample_profile,
)


@pytest.fixture
def client() -> TestClient:
    """FastAPI test client"""
    return TestClient(create_app())


@pytest.fixture
def benchmarks() -> BenchmarkTable:
    return DEFAULT_BENCHMARKS


@pytest.fixture
def profile() -> FinancialProfile:
    """Documented default sample: 5000/mo income, 3750/mo expenses"""
    return sample_profile()


@pytest.fixture
def strong_profile() -> FinancialProfile:
    """Meets or beats every benchmark"""
    return FinancialProfile(
        personal=PersonalInfo(age=30),
        income=Income(primary_salary=10000),
        expenses=Expenses(
            housing=2000,
            utilities=200,
            food=600,
            transportation=300,
            healthcare=200,
            insurance=600,  # 6% of income
        ),
        assets=Assets(
            checking=3000,
            emergency_fund=20000,  # > 6 months of 3300 essentials
            retirement_accounts=150000,  # target at 30 is 1x annual income
            brokerage_accounts=10000,
        ),
        liabilities=Liabilities(credit_score=850, total_credit_limit=20000),
    )


@pytest.fixture
def sample_payload() -> dict:
    """JSON body equivalent of the default sample profile"""
    return {
        "personal": {"age": 30, "dependents": 0, "employment_tenure": 3},
        "income": {"primary_salary": 5000, "income_growth_rate": 0.03, "effective_tax_rate": 0.22},
        "expenses": {
            "housing": 1500,
            "utilities": 200,
            "food": 600,
            "transportation": 400,
            "healthcare": 200,
            "insurance": 300,
            "entertainment": 200,
            "shopping": 150,
            "credit_card_payments": 200,
        },
        "assets": {
            "checking": 2000,
            "savings": 5000,
            "emergency_fund": 10000,
            "retirement_accounts": 25000,
            "brokerage_accounts": 15000,
        },
        "liabilities": {
            "credit_card_debt": 5000,
            "student_loans": 20000,
            "auto_loans": 15000,
            "mortgage_balance": 200000,
            "credit_score": 720,
            "total_credit_limit": 25000,
        },
    }
