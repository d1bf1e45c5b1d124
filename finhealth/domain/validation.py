"""
Profile sanitation.

Out-of-domain values are clamped to the nearest valid boundary and reported
as warnings; the analysis then proceeds and is flagged as degraded. Nothing
in here raises for a malformed field.
"""

import logging
from dataclasses import fields, replace
from typing import List, Tuple

from finhealth.domain.models import BILL_PAYMENT_RELIABILITY, FinancialProfile
from finhealth.domain.indicators import CREDIT_SCORE_MAX, CREDIT_SCORE_MIN

# (section, field) -> (low, high); everything else numeric is floored at 0
BOUNDED_FIELDS = {
    ("income", "income_growth_rate"): (0.0, 1.0),
    ("income", "effective_tax_rate"): (0.0, 1.0),
    ("liabilities", "credit_score"): (CREDIT_SCORE_MIN, CREDIT_SCORE_MAX),
}

SECTIONS = ("personal", "income", "expenses", "assets", "liabilities")


def _clamp_section(section_name: str, section, warnings: List[str]):
    changes = {}
    for f in fields(section):
        value = getattr(section, f.name)
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            continue

        low, high = BOUNDED_FIELDS.get((section_name, f.name), (0, None))
        clamped = max(low, value)
        if high is not None:
            clamped = min(high, clamped)

        if clamped != value:
            warnings.append(f"{section_name}.{f.name} out of range ({value}), clamped to {clamped}")
            changes[f.name] = type(value)(clamped)

    return replace(section, **changes) if changes else section


def sanitize_profile(profile: FinancialProfile) -> Tuple[FinancialProfile, List[str]]:
    """
    Clamp every numeric field into its documented domain.

    Returns the sanitized profile and one warning per adjusted field.
    """
    warnings: List[str] = []
    sections = {name: _clamp_section(name, getattr(profile, name), warnings) for name in SECTIONS}

    reliability = sections["personal"].bill_payment_reliability
    if reliability not in BILL_PAYMENT_RELIABILITY:
        warnings.append(f"personal.bill_payment_reliability unknown ({reliability!r}), scored as 0")

    if warnings:
        logging.warning("Profile sanitized", extra={"step": "sanitize", "adjustments": len(warnings)})

    return FinancialProfile(**sections), warnings


def detect_degenerate_inputs(profile: FinancialProfile) -> List[str]:
    """Warnings for zero denominators that force sentinel indicator scores"""
    warnings = []
    if profile.income.total_monthly <= 0:
        warnings.append(
            "zero_income: spending, debt, insurance and retirement indicators use the zero-income sentinel score"
        )
    if profile.expenses.essential_monthly <= 0:
        warnings.append("zero_essential_expenses: emergency savings scored on presence of a fund only")
    if profile.liabilities.total_credit_limit <= 0:
        warnings.append("zero_credit_limit: credit utilization replaced by the no-credit-line score")
    return warnings
