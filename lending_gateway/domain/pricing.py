"""Loan pricing - score, classify and amortize a loan request"""

from typing import Iterable
from lending_gateway.domain.models import (
    BorrowerProfile,
    LoanRequest,
    PlatformFeeSplit,
    PricingResult,
)
from lending_gateway.domain.exceptions import InvalidArgumentError, LoanRequestOutOfBoundsError
from lending_gateway.domain.scoring import analyze_profile, DEFAULT_INCOME_FLOOR
from lending_gateway.domain.classification import classify
from lending_gateway.domain.amortization import amortize

# Rates at or above this carry the higher platform margin
HIGH_RATE_THRESHOLD = 20.0
HIGH_RATE_PLATFORM_FEE = 4.0
STANDARD_PLATFORM_FEE = 2.0


def split_platform_fee(annual_rate: float) -> PlatformFeeSplit:
    """
    Divide the borrower's rate between the platform and the funding lenders.

    The platform keeps 4 percentage points on high-risk pricing (>= 20%) and
    2 points otherwise; lenders earn the remainder.
    """
    fee = HIGH_RATE_PLATFORM_FEE if annual_rate >= HIGH_RATE_THRESHOLD else STANDARD_PLATFORM_FEE
    return PlatformFeeSplit(platform_fee_rate=fee, lender_rate=annual_rate - fee)


def validate_loan_request(
    request: LoanRequest,
    min_amount: int,
    max_amount: int,
    allowed_tenures: Iterable[int],
) -> None:
    """
    Enforce the platform's advertised loan limits.

    Pricing itself accepts any positive amount and tenure; intake surfaces
    call this before evaluate_loan.

    Raises:
        LoanRequestOutOfBoundsError: amount outside [min_amount, max_amount]
            or tenure not in allowed_tenures
    """
    if not min_amount <= request.amount <= max_amount:
        raise LoanRequestOutOfBoundsError(
            f"Loan amount {request.amount} outside allowed range {min_amount}-{max_amount}"
        )

    tenures = sorted(set(allowed_tenures))
    if request.tenure_months not in tenures:
        raise LoanRequestOutOfBoundsError(
            f"Tenure of {request.tenure_months} months not offered (allowed: {tenures})"
        )


def evaluate_loan(
    profile: BorrowerProfile,
    request: LoanRequest,
    default_income_floor: int = DEFAULT_INCOME_FLOOR,
) -> PricingResult:
    """
    Main entry point: price a loan request for a borrower.

    Pipeline: risk factors → score → category → EMI → fee split.
    Pure function of its inputs; nothing is cached or persisted.

    Raises:
        InvalidArgumentError: tenure below one month or non-positive amount
    """
    if request.amount <= 0:
        raise InvalidArgumentError(f"amount must be positive, got {request.amount}")

    risk_factors = analyze_profile(profile, request, default_income_floor)
    score = risk_factors.total
    category = classify(score)
    amortization = amortize(request.amount, category.annual_rate, request.tenure_months)
    fee_split = split_platform_fee(category.annual_rate)

    return PricingResult(
        risk_score=score,
        risk_category=category,
        annual_interest_rate=category.annual_rate,
        monthly_emi=amortization.monthly_emi,
        total_payable=amortization.total_payable,
        total_interest=amortization.total_interest,
        risk_factors=risk_factors,
        platform_fee_rate=fee_split.platform_fee_rate,
        lender_rate=fee_split.lender_rate,
    )
