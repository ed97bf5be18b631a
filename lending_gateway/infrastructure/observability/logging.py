"""Structured JSON logging for production observability"""

import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

from lending_gateway.config import settings


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Custom JSON formatter with timestamp and service metadata"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]) -> None:
        super().add_fields(log_record, record, message_dict)
        log_record["timestamp"] = datetime.now(timezone.utc).isoformat()
        log_record["level"] = record.levelname
        log_record["service"] = settings.service_name


def setup_logging(level: str = "INFO") -> None:
    """Configure structured JSON logging"""
    logger = logging.getLogger()
    logger.setLevel(level)

    # Remove existing handlers
    logger.handlers.clear()

    # JSON handler for stdout
    handler = logging.StreamHandler(sys.stdout)
    formatter = CustomJsonFormatter(
        "%(timestamp)s %(level)s %(name)s %(message)s"
    )
    handler.setFormatter(formatter)
    logger.addHandler(handler)


def log_pricing(
    request_id: str,
    amount: int,
    tenure_months: int,
    risk_score: int,
    risk_category: str,
    annual_interest_rate: float,
    duration_ms: float,
) -> None:
    """Log structured pricing outcome for analysis"""
    logging.info(
        "Pricing completed",
        extra={
            "request_id": request_id,
            "step": "pricing_complete",
            "amount": amount,
            "tenure_months": tenure_months,
            "risk_score": risk_score,
            "risk_category": risk_category,
            "annual_interest_rate": annual_interest_rate,
            "duration_ms": duration_ms,
        },
    )
