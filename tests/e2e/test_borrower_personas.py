"""
E2E tests for borrower personas going through the pricing API.

User personas:
- salaried: Software engineer, good score, mid income, six-month medical loan
- business_owner: Good score, high income, asks for an unoffered 12-month tenure
- educator: Excellent score, modest income, short education loan
- gig_worker: No credit history, no declared income, one-month bullet loan
"""

from fastapi.testclient import TestClient


def _quote(client: TestClient, profile: dict, loan: dict):
    return client.post("/v1/pricing/quote", json={"profile": profile, "loan": loan})


def test_salaried_borrower_priced_a(client: TestClient):
    """
    salaried: 780 score, 50k-100k income, ₹75,000 over 6 months
    Expected: A (Very Good) at 15%
    """
    response = _quote(
        client,
        {"monthly_income_band": "50000-100000", "cibil_score": 780},
        {"amount": 75000, "tenure_months": 6, "purpose": "medical"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["risk_score"] == 83
    assert data["risk_category"]["code"] == "A"
    assert data["monthly_emi"] == 13053
    assert data["total_payable"] == 78315


def test_business_owner_tenure_not_offered(client: TestClient):
    """
    business_owner: asks for 12 months, platform offers 1/3/6
    Expected: rejected; re-quoted at 6 months lands in A
    """
    profile = {"monthly_income_band": "100000-200000", "cibil_score": 720}

    rejected = _quote(client, profile, {"amount": 150000, "tenure_months": 12, "purpose": "business"})
    assert rejected.status_code == 422, "12-month tenure should not be offered"

    response = _quote(client, profile, {"amount": 150000, "tenure_months": 6, "purpose": "business"})
    assert response.status_code == 200
    data = response.json()
    assert data["risk_score"] == 83
    assert data["annual_interest_rate"] == 15.0
    assert data["monthly_emi"] == 26105
    assert data["total_payable"] == 156630


def test_educator_short_education_loan(client: TestClient):
    """
    educator: 820 score, 25k-50k income, ₹25,000 over 3 months
    Expected: burden ratio 0.33 costs a notch, A at 15%
    """
    response = _quote(
        client,
        {"monthly_income_band": "25000-50000", "cibil_score": 820},
        {"amount": 25000, "tenure_months": 3, "purpose": "education"},
    )

    assert response.status_code == 200
    data = response.json()
    assert data["risk_score"] == 80
    assert data["risk_category"]["code"] == "A"
    assert data["monthly_emi"] == 8543
    assert data["total_payable"] == 25628


def test_gig_worker_high_risk(client: TestClient):
    """
    gig_worker: unscored, no income band, ₹50,000 in one month
    Expected: C (High Risk) at 28%, lenders earn 24%
    """
    response = _quote(client, {}, {"amount": 50000, "tenure_months": 1, "purpose": "personal"})

    assert response.status_code == 200
    data = response.json()
    assert data["risk_category"]["code"] == "C"
    assert data["annual_interest_rate"] == 28.0
    assert data["platform_fee_rate"] == 4.0
    assert data["lender_rate"] == 24.0
    assert data["monthly_emi"] == data["total_payable"] == 51167
