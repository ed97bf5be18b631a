"""GET /v1/risk-categories - List the risk ladder and its interest rates"""

from fastapi import APIRouter

from lending_gateway.api.v1.schemas import RiskCategoriesResponse, RiskCategorySchema
from lending_gateway.domain.classification import list_risk_categories

router = APIRouter()


@router.get("/risk-categories", response_model=RiskCategoriesResponse)
def get_risk_categories():
    """
    Retrieve all risk categories, best first.

    Returns:
        Category code, display label, annual rate and minimum score
    """
    categories = [
        RiskCategorySchema(
            code=c.code,
            label=c.label,
            annual_rate=c.annual_rate,
            min_score=c.min_score,
        )
        for c in list_risk_categories()
    ]

    return RiskCategoriesResponse(categories=categories)
