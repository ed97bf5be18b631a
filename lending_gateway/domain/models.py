"""Domain models - pure Python dataclasses representing business entities"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

# Income bands offered on the borrower profile form, lowest first
INCOME_BANDS: Tuple[str, ...] = (
    "15000-25000",
    "25000-50000",
    "50000-100000",
    "100000-200000",
    "200000+",
)

ALLOWED_TENURES: Tuple[int, ...] = (1, 3, 6)

LOAN_PURPOSES: Tuple[str, ...] = (
    "personal",
    "medical",
    "education",
    "business",
    "debt",
    "home",
    "travel",
    "other",
)


@dataclass(frozen=True)
class BorrowerProfile:
    """Subset of the borrower profile that drives pricing"""

    monthly_income_band: Optional[str] = None
    cibil_score: Optional[int] = None  # None or 0 = unscored


@dataclass(frozen=True)
class LoanRequest:
    """Requested loan parameters"""

    amount: int  # whole rupees
    tenure_months: int
    purpose: Optional[str] = None


@dataclass(frozen=True)
class RiskFactors:
    """Per-factor points that add up to the risk score"""

    credit_score_points: int
    income_points: int
    loan_to_income_points: int
    tenure_points: int
    loan_to_income_ratio: float

    @property
    def total(self) -> int:
        return (
            self.credit_score_points
            + self.income_points
            + self.loan_to_income_points
            + self.tenure_points
        )


@dataclass(frozen=True)
class RiskCategory:
    """One rung of the risk ladder"""

    code: str  # "A+", "A", "B+", "B", "C"
    label: str
    annual_rate: float
    min_score: int


@dataclass(frozen=True)
class Amortization:
    """Fixed-rate repayment summary in whole monetary units"""

    monthly_emi: int
    total_payable: int
    principal: int

    @property
    def total_interest(self) -> int:
        return self.total_payable - self.principal


@dataclass(frozen=True)
class PlatformFeeSplit:
    """How the borrower's annual rate is divided between platform and lender"""

    platform_fee_rate: float
    lender_rate: float


@dataclass(frozen=True)
class PricingResult:
    """Output of loan evaluation"""

    risk_score: int
    risk_category: RiskCategory
    annual_interest_rate: float
    monthly_emi: int
    total_payable: int
    total_interest: int
    risk_factors: RiskFactors
    platform_fee_rate: float
    lender_rate: float


@dataclass(frozen=True)
class Installment:
    """Single monthly payment in a repayment schedule"""

    number: int
    due_date: date
    amount: int
    principal_component: int
    interest_component: int
    remaining_balance: int
