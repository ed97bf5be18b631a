"""Risk scoring engine - additive point model over borrower profile and loan request"""

import re
from typing import Optional
from lending_gateway.domain.models import BorrowerProfile, LoanRequest, RiskFactors
from lending_gateway.domain.exceptions import InvalidArgumentError

DEFAULT_INCOME_FLOOR = 25_000

# Points per income band; anything else (including no band) earns the floor value
INCOME_BAND_POINTS = {
    "200000+": 30,
    "100000-200000": 25,
    "50000-100000": 20,
    "25000-50000": 15,
}
INCOME_BAND_DEFAULT_POINTS = 10

_LEADING_INT = re.compile(r"^\s*(\d+)")


def credit_score_points(cibil_score: Optional[int]) -> int:
    """
    Credit bureau component, max 40 points.

    An unscored borrower (no score, or the form's initial 0) gets 15.
    """
    if not cibil_score:
        return 15
    if cibil_score >= 800:
        return 40
    elif cibil_score >= 750:
        return 35
    elif cibil_score >= 700:
        return 30
    elif cibil_score >= 650:
        return 20
    else:
        return 10


def income_points(monthly_income_band: Optional[str]) -> int:
    """Income component, max 30 points"""
    return INCOME_BAND_POINTS.get(monthly_income_band or "", INCOME_BAND_DEFAULT_POINTS)


def income_floor(monthly_income_band: Optional[str], default: int = DEFAULT_INCOME_FLOOR) -> int:
    """
    Lower bound of an income band, used as the borrower's monthly income.

    "50000-100000" → 50000, "200000+" → 200000, missing or unparseable → default.
    """
    if not monthly_income_band:
        return default

    match = _LEADING_INT.match(monthly_income_band)
    if match is None:
        return default

    floor = int(match.group(1))
    return floor if floor > 0 else default


def loan_to_income_points(ratio: float) -> int:
    """Loan-to-income component, max 20 points"""
    if ratio <= 0.3:
        return 20
    elif ratio <= 0.5:
        return 15
    elif ratio <= 0.7:
        return 10
    else:
        return 5


def tenure_points(tenure_months: int) -> int:
    """Tenure component, max 10 points (shorter is safer)"""
    if tenure_months <= 3:
        return 10
    elif tenure_months <= 6:
        return 8
    else:
        return 5


def analyze_profile(
    profile: BorrowerProfile,
    request: LoanRequest,
    default_income_floor: int = DEFAULT_INCOME_FLOOR,
) -> RiskFactors:
    """
    Break the risk score down into its four weighted factors.

    Weights:
    - 40: CIBIL score
    - 30: Monthly income band
    - 20: Monthly repayment burden vs income floor
    - 10: Tenure

    Missing inputs are defaulted, never rejected. A tenure below one month
    has no repayment burden to measure and raises InvalidArgumentError.
    """
    if request.tenure_months < 1:
        raise InvalidArgumentError(f"tenure_months must be >= 1, got {request.tenure_months}")

    monthly_income = income_floor(profile.monthly_income_band, default_income_floor)

    # Ratio uses principal only; interest is priced after the category is known
    ratio = (request.amount / request.tenure_months) / monthly_income

    return RiskFactors(
        credit_score_points=credit_score_points(profile.cibil_score),
        income_points=income_points(profile.monthly_income_band),
        loan_to_income_points=loan_to_income_points(ratio),
        tenure_points=tenure_points(request.tenure_months),
        loan_to_income_ratio=ratio,
    )


def compute_risk_score(profile: BorrowerProfile, request: LoanRequest) -> int:
    """Risk score in [0, 100]; higher means safer"""
    return analyze_profile(profile, request).total
