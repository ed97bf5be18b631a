"""Unit tests for EMI pricing and repayment schedule generation"""

import pytest
from datetime import date, timedelta
from lending_gateway.domain.amortization import amortize, generate_repayment_schedule
from lending_gateway.domain.exceptions import InvalidArgumentError


def test_amortize_regression_fixture():
    """Test ₹50,000 at 18% over 12 months"""
    result = amortize(50000, 18, 12)

    assert result.monthly_emi == 4584
    assert result.total_payable == 55008  # From unrounded EMI 4583.9996 * 12
    assert result.total_interest == 5008


def test_amortize_short_tenures():
    """Test platform tenures of 1, 3 and 6 months"""
    assert amortize(50000, 28, 1).monthly_emi == 51167
    assert amortize(50000, 28, 1).total_payable == 51167

    three = amortize(25000, 12, 3)
    assert three.monthly_emi == 8501
    assert three.total_payable == 25502

    six = amortize(75000, 15, 6)
    assert six.monthly_emi == 13053
    assert six.total_payable == 78315


def test_amortize_zero_rate_is_straight_line():
    """Test interest-free loan splits principal evenly"""
    result = amortize(12000, 0, 3)

    assert result.monthly_emi == 4000
    assert result.total_payable == 12000


@pytest.mark.parametrize("tenure", [0, -1])
def test_amortize_rejects_tenure_below_one(tenure):
    """Test degenerate tenure fails fast instead of producing inf/NaN"""
    with pytest.raises(InvalidArgumentError) as exc_info:
        amortize(50000, 18, tenure)

    assert exc_info.value.kind == "InvalidArgument"


def test_amortize_rejects_bad_principal_and_rate():
    """Test non-positive principal and negative rate are rejected"""
    with pytest.raises(InvalidArgumentError):
        amortize(0, 18, 3)
    with pytest.raises(InvalidArgumentError):
        amortize(50000, -1, 3)


def test_generate_repayment_schedule_split():
    """Test interest on declining balance from rounded running totals"""
    start = date(2026, 1, 15)
    installments = generate_repayment_schedule(100000, 18, 3, start_date=start)

    # EMI 34338, total 103015, monthly rate 1.5%
    assert [i.amount for i in installments] == [34338, 34338, 34339]
    assert [i.interest_component for i in installments] == [1500, 1007, 508]
    assert [i.principal_component for i in installments] == [32838, 33331, 33831]
    assert [i.remaining_balance for i in installments] == [67162, 33831, 0]


def test_generate_repayment_schedule_totals():
    """Test amounts sum to total payable and principal is fully repaid"""
    installments = generate_repayment_schedule(75000, 15, 6, start_date=date(2026, 3, 1))

    assert len(installments) == 6
    assert [i.number for i in installments] == [1, 2, 3, 4, 5, 6]
    assert sum(i.amount for i in installments) == 78315
    assert sum(i.principal_component for i in installments) == 75000
    assert installments[-1].remaining_balance == 0
    assert all(i.interest_component >= 0 for i in installments)


@pytest.mark.parametrize(
    "principal, rate, tenure",
    [
        (1000, 12, 19),
        (1000, 28, 120),
        (9999, 0.1, 5),
        (2500, 15, 36),
        (123457, 22, 60),
        (500000, 18, 120),
        (12000, 0, 7),
    ],
)
def test_generate_repayment_schedule_long_tenures_never_negative(principal, rate, tenure):
    """Test rounding drift never produces a negative component at long tenures or low rates"""
    installments = generate_repayment_schedule(principal, rate, tenure, start_date=date(2026, 1, 1))
    expected = amortize(principal, rate, tenure)

    assert len(installments) == tenure
    assert all(i.principal_component >= 0 for i in installments)
    assert all(i.interest_component >= 0 for i in installments)
    assert sum(i.amount for i in installments) == expected.total_payable
    assert sum(i.principal_component for i in installments) == principal
    assert sum(i.interest_component for i in installments) == expected.total_interest
    assert all(abs(i.amount - expected.monthly_emi) <= 2 for i in installments)
    assert installments[-1].remaining_balance == 0


def test_generate_repayment_schedule_dates_clamp_to_month_end():
    """Test monthly due dates keep the anchor day where the month allows"""
    installments = generate_repayment_schedule(30000, 22, 3, start_date=date(2026, 1, 31))

    assert [i.due_date for i in installments] == [
        date(2026, 1, 31),
        date(2026, 2, 28),
        date(2026, 3, 31),
    ]


def test_generate_repayment_schedule_default_start():
    """Test first installment defaults to roughly one month out"""
    installments = generate_repayment_schedule(10000, 12, 1)

    assert len(installments) == 1
    gap = installments[0].due_date - date.today()
    assert timedelta(days=28) <= gap <= timedelta(days=31)


def test_generate_repayment_schedule_single_month():
    """Test one-month loan is a single bullet payment"""
    installments = generate_repayment_schedule(50000, 28, 1, start_date=date(2026, 6, 1))

    assert len(installments) == 1
    assert installments[0].amount == 51167
    assert installments[0].principal_component == 50000
    assert installments[0].interest_component == 1167
