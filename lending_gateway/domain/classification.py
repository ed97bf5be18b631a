"""Risk classification - maps a risk score onto a priced category"""

from typing import List, Tuple
from lending_gateway.domain.models import RiskCategory

# (min_score, code, label, annual_rate_pct), highest threshold first
RISK_LADDER: Tuple[Tuple[int, str, str, float], ...] = (
    (90, "A+", "A+ (Excellent)", 12.0),
    (80, "A", "A (Very Good)", 15.0),
    (70, "B+", "B+ (Good)", 18.0),
    (60, "B", "B (Fair)", 22.0),
)

# Catch-all rung below the lowest threshold
FLOOR_CATEGORY = RiskCategory(code="C", label="C (High Risk)", annual_rate=28.0, min_score=0)


def classify(score: int) -> RiskCategory:
    """
    Map risk score to category and annual interest rate.

    Thresholds are inclusive lower bounds tested top-down:
    - 90+:   A+ at 12%
    - 80-89: A  at 15%
    - 70-79: B+ at 18%
    - 60-69: B  at 22%
    - else:  C  at 28%
    """
    for min_score, code, label, rate in RISK_LADDER:
        if score >= min_score:
            return RiskCategory(code=code, label=label, annual_rate=rate, min_score=min_score)
    return FLOOR_CATEGORY


def list_risk_categories() -> List[RiskCategory]:
    """All categories, best first"""
    categories = [
        RiskCategory(code=code, label=label, annual_rate=rate, min_score=min_score)
        for min_score, code, label, rate in RISK_LADDER
    ]
    categories.append(FLOOR_CATEGORY)
    return categories
