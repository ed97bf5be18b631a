"""Pytest fixtures for testing"""

import pytest
from fastapi.testclient import TestClient
from lending_gateway.api.main import create_app
from lending_gateway.api.dependencies import get_settings
from lending_gateway.config import Settings
from lending_gateway.domain.models import BorrowerProfile, LoanRequest


@pytest.fixture
def test_settings() -> Settings:
    """Settings isolated from any local .env"""
    return Settings(_env_file=None)


@pytest.fixture
def client(test_settings: Settings) -> TestClient:
    """Create FastAPI test client with isolated settings"""
    app = create_app()
    app.dependency_overrides[get_settings] = lambda: test_settings
    return TestClient(app)


@pytest.fixture
def prime_profile() -> BorrowerProfile:
    """Top credit score, top income band"""
    return BorrowerProfile(monthly_income_band="200000+", cibil_score=820)


@pytest.fixture
def unscored_profile() -> BorrowerProfile:
    """No credit history, no declared income"""
    return BorrowerProfile()


@pytest.fixture
def short_loan() -> LoanRequest:
    """Small three-month loan"""
    return LoanRequest(amount=25000, tenure_months=3, purpose="education")
