"""Fixed-rate amortization: EMI pricing and monthly repayment schedules"""

from datetime import date
from typing import List
from lending_gateway.domain.models import Amortization, Installment
from lending_gateway.domain.exceptions import InvalidArgumentError
from lending_gateway.utils.date_utils import add_months, monthly_due_dates
from lending_gateway.utils.money import round_to_unit


def _check_terms(principal: float, annual_rate_pct: float, tenure_months: int) -> None:
    if tenure_months < 1:
        raise InvalidArgumentError(f"tenure_months must be >= 1, got {tenure_months}")
    if principal <= 0:
        raise InvalidArgumentError(f"principal must be positive, got {principal}")
    if annual_rate_pct < 0:
        raise InvalidArgumentError(f"annual_rate_pct must be non-negative, got {annual_rate_pct}")


def _raw_emi(principal: float, annual_rate_pct: float, tenure_months: int) -> float:
    monthly_rate = annual_rate_pct / 100 / 12
    if monthly_rate == 0:
        return principal / tenure_months

    growth = (1 + monthly_rate) ** tenure_months
    return principal * monthly_rate * growth / (growth - 1)


def amortize(principal: float, annual_rate_pct: float, tenure_months: int) -> Amortization:
    """
    Price a loan with the standard equated monthly installment formula.

        r   = annual_rate_pct / 100 / 12
        EMI = P * r * (1 + r)^n / ((1 + r)^n - 1)

    Total payable is EMI * n taken before rounding, so it can differ from
    rounded EMI * n by a few units.

    Example:
        ₹50,000 at 18% over 12 months → EMI 4584, total 55008

    Raises:
        InvalidArgumentError: tenure below one month, non-positive principal,
            or negative rate
    """
    _check_terms(principal, annual_rate_pct, tenure_months)

    emi = _raw_emi(principal, annual_rate_pct, tenure_months)

    return Amortization(
        monthly_emi=round_to_unit(emi),
        total_payable=round_to_unit(emi * tenure_months),
        principal=round_to_unit(principal),
    )


def generate_repayment_schedule(
    principal: int,
    annual_rate_pct: float,
    tenure_months: int,
    start_date: date | None = None,
) -> List[Installment]:
    """
    Generate monthly installments splitting each EMI into principal and interest.

    Requirements:
    - One installment per month, due on the same day of month as start_date
      (clamped to month end)
    - Interest accrues on the outstanding balance at r = annual_rate_pct / 1200
    - Amounts sum to total_payable, principal components sum to the principal,
      and no component is negative at any tenure

    Components are differences of rounded running totals (principal repaid and
    interest paid so far, both non-decreasing), so rounding never drifts into
    a negative month. Individual amounts may differ from the EMI by up to two units.

    Args:
        principal: Loan amount in whole units
        annual_rate_pct: Annual interest rate in percent
        tenure_months: Number of monthly payments
        start_date: First due date (default: one month from today)
    """
    amortization = amortize(principal, annual_rate_pct, tenure_months)
    monthly_rate = annual_rate_pct / 100 / 12
    emi = _raw_emi(amortization.principal, annual_rate_pct, tenure_months)

    if start_date is None:
        start_date = add_months(date.today(), 1)

    balance = float(amortization.principal)
    principal_paid = 0
    interest_paid = 0
    installments = []
    for number, due_date in enumerate(monthly_due_dates(start_date, tenure_months), start=1):
        balance = balance * (1 + monthly_rate) - emi

        if number < tenure_months:
            principal_to_date = round_to_unit(amortization.principal - balance)
            interest_to_date = round_to_unit(emi * number - (amortization.principal - balance))
        else:
            # Final payment lands exactly on the amortized totals
            principal_to_date = amortization.principal
            interest_to_date = amortization.total_interest

        principal_part = principal_to_date - principal_paid
        interest = interest_to_date - interest_paid
        principal_paid, interest_paid = principal_to_date, interest_to_date

        installments.append(
            Installment(
                number=number,
                due_date=due_date,
                amount=principal_part + interest,
                principal_component=principal_part,
                interest_component=interest,
                remaining_balance=amortization.principal - principal_paid,
            )
        )

    return installments
