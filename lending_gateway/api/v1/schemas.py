"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from datetime import date
from typing import List, Literal, Optional
from lending_gateway.domain.models import INCOME_BANDS, LOAN_PURPOSES

IncomeBand = Literal[INCOME_BANDS]
LoanPurpose = Literal[LOAN_PURPOSES]


class ProfileSchema(BaseModel):
    """Borrower attributes used for pricing"""

    monthly_income_band: Optional[IncomeBand] = Field(None, description="Monthly income range in rupees")
    cibil_score: Optional[int] = Field(None, ge=0, le=900, description="CIBIL score; omit or 0 if unscored")


class LoanSchema(BaseModel):
    """Requested loan parameters"""

    amount: int = Field(..., gt=0, description="Loan amount in rupees")
    tenure_months: int = Field(..., ge=1, description="Repayment tenure in months")
    purpose: Optional[LoanPurpose] = None


class QuoteRequest(BaseModel):
    """Request body for POST /v1/pricing/quote and /v1/pricing/schedule"""

    profile: ProfileSchema = Field(default_factory=ProfileSchema)
    loan: LoanSchema


class RiskFactorsSchema(BaseModel):
    """Per-factor contribution to the risk score"""

    credit_score_points: int
    income_points: int
    loan_to_income_points: int
    tenure_points: int
    loan_to_income_ratio: float


class RiskCategorySchema(BaseModel):
    """Single rung of the risk ladder"""

    code: str
    label: str
    annual_rate: float
    min_score: int


class QuoteResponse(BaseModel):
    """Response for POST /v1/pricing/quote"""

    risk_score: int
    risk_category: RiskCategorySchema
    annual_interest_rate: float
    monthly_emi: int
    total_payable: int
    total_interest: int
    platform_fee_rate: float
    lender_rate: float
    risk_factors: RiskFactorsSchema


class InstallmentSchema(BaseModel):
    """Single installment in a repayment schedule"""

    number: int
    due_date: date
    amount: int
    principal_component: int
    interest_component: int
    remaining_balance: int


class ScheduleResponse(BaseModel):
    """Response for POST /v1/pricing/schedule"""

    quote: QuoteResponse
    installments: List[InstallmentSchema]


class RiskCategoriesResponse(BaseModel):
    """Response for GET /v1/risk-categories"""

    categories: List[RiskCategorySchema]
