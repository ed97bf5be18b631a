"""Configuration management using Pydantic Settings"""

from typing import List
from pydantic_settings import BaseSettings, SettingsConfigDict

from lending_gateway.domain.models import ALLOWED_TENURES
from lending_gateway.domain.scoring import DEFAULT_INCOME_FLOOR


class Settings(BaseSettings):
    """Application configuration loaded from environment variables"""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_prefix="LENDING_",
        extra="ignore",
    )

    # Service
    service_name: str = "lending-gateway"
    log_level: str = "INFO"

    # Platform loan limits (rupees)
    min_loan_amount: int = 1_000
    max_loan_amount: int = 500_000
    allowed_tenures: List[int] = list(ALLOWED_TENURES)

    # Monthly income assumed when a borrower's band is missing or unreadable
    default_income_floor: int = DEFAULT_INCOME_FLOOR


settings = Settings()
