"""POST /v1/pricing/* - Loan pricing and repayment schedule endpoints"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from lending_gateway.api.v1.schemas import (
    QuoteRequest,
    QuoteResponse,
    ScheduleResponse,
    RiskCategorySchema,
    RiskFactorsSchema,
    InstallmentSchema,
)
from lending_gateway.api.dependencies import get_request_id, get_settings
from lending_gateway.config import Settings
from lending_gateway.domain.models import BorrowerProfile, LoanRequest, PricingResult
from lending_gateway.domain.pricing import evaluate_loan, validate_loan_request
from lending_gateway.domain.amortization import generate_repayment_schedule
from lending_gateway.domain.exceptions import InvalidArgumentError, LoanRequestOutOfBoundsError
from lending_gateway.infrastructure.observability.metrics import record_pricing, rejected_request_counter
from lending_gateway.infrastructure.observability.logging import log_pricing

router = APIRouter()


def _price(body: QuoteRequest, request_id: str, settings: Settings) -> PricingResult:
    """
    Shared flow for quote and schedule:
    1. Map request body onto domain value types
    2. Enforce platform loan limits
    3. Evaluate pricing
    4. Record metrics and logs
    """
    start_time = time.time()

    profile = BorrowerProfile(
        monthly_income_band=body.profile.monthly_income_band,
        cibil_score=body.profile.cibil_score,
    )
    loan = LoanRequest(
        amount=body.loan.amount,
        tenure_months=body.loan.tenure_months,
        purpose=body.loan.purpose,
    )

    try:
        validate_loan_request(
            loan,
            min_amount=settings.min_loan_amount,
            max_amount=settings.max_loan_amount,
            allowed_tenures=settings.allowed_tenures,
        )
        result = evaluate_loan(profile, loan, default_income_floor=settings.default_income_floor)

    except (LoanRequestOutOfBoundsError, InvalidArgumentError) as e:
        rejected_request_counter.labels(reason=e.kind).inc()
        logging.warning(f"Rejected loan request: {e}", extra={"request_id": request_id, "kind": e.kind})
        raise HTTPException(status_code=422, detail=str(e))

    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_pricing(result.risk_category.code, result.risk_score, loan.amount)
    log_pricing(
        request_id,
        loan.amount,
        loan.tenure_months,
        result.risk_score,
        result.risk_category.code,
        result.annual_interest_rate,
        duration_ms,
    )

    return result


def _to_quote_response(result: PricingResult) -> QuoteResponse:
    factors = result.risk_factors
    category = result.risk_category

    return QuoteResponse(
        risk_score=result.risk_score,
        risk_category=RiskCategorySchema(
            code=category.code,
            label=category.label,
            annual_rate=category.annual_rate,
            min_score=category.min_score,
        ),
        annual_interest_rate=result.annual_interest_rate,
        monthly_emi=result.monthly_emi,
        total_payable=result.total_payable,
        total_interest=result.total_interest,
        platform_fee_rate=result.platform_fee_rate,
        lender_rate=result.lender_rate,
        risk_factors=RiskFactorsSchema(
            credit_score_points=factors.credit_score_points,
            income_points=factors.income_points,
            loan_to_income_points=factors.loan_to_income_points,
            tenure_points=factors.tenure_points,
            loan_to_income_ratio=factors.loan_to_income_ratio,
        ),
    )


@router.post("/pricing/quote", response_model=QuoteResponse)
def create_quote(
    body: QuoteRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Price a loan request for a borrower profile.

    Returns risk score, category, annual rate, EMI and total payable.
    Recomputed from scratch on every call.
    """
    result = _price(body, get_request_id(request), settings)
    return _to_quote_response(result)


@router.post("/pricing/schedule", response_model=ScheduleResponse)
def create_schedule(
    body: QuoteRequest,
    request: Request,
    settings: Settings = Depends(get_settings),
):
    """
    Price a loan request and lay out its monthly repayment schedule.

    First installment falls due one month from today.
    """
    result = _price(body, get_request_id(request), settings)
    installments = generate_repayment_schedule(
        body.loan.amount,
        result.annual_interest_rate,
        body.loan.tenure_months,
    )

    return ScheduleResponse(
        quote=_to_quote_response(result),
        installments=[
            InstallmentSchema(
                number=inst.number,
                due_date=inst.due_date,
                amount=inst.amount,
                principal_component=inst.principal_component,
                interest_component=inst.interest_component,
                remaining_balance=inst.remaining_balance,
            )
            for inst in installments
        ],
    )
