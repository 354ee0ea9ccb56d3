"""API endpoints for scoring assessments."""

from fastapi import APIRouter

from wheel_of_life.core.categories import (
    DEFAULT_RATING,
    LIFE_CATEGORIES,
    MAX_RATING,
    MIN_RATING,
    category_label,
)
from wheel_of_life.core.insights import build_insights
from wheel_of_life.core.logging import get_logger
from wheel_of_life.core.schemas_assessment import (
    AssessmentData,
    AssessmentResultsResponse,
    CategoriesResponse,
    CategoryInfo,
)
from wheel_of_life.core.scoring import score_assessment

logger = get_logger(__name__)

router = APIRouter()


@router.get("/categories", response_model=CategoriesResponse)
async def list_categories() -> CategoriesResponse:
    """List the assessed categories in questionnaire order, with rating bounds."""
    return CategoriesResponse(
        categories=[CategoryInfo(category=c, label=category_label(c)) for c in LIFE_CATEGORIES],
        min_rating=MIN_RATING,
        max_rating=MAX_RATING,
        default_rating=DEFAULT_RATING,
    )


@router.post("/results", response_model=AssessmentResultsResponse)
async def assessment_results(assessment: AssessmentData) -> AssessmentResultsResponse:
    """
    Score an assessment and derive the results-panel insights.

    Args:
        assessment: Satisfaction and motivation ratings

    Returns:
        Scored results and insights
    """
    results = score_assessment(assessment)
    logger.debug(
        f"Scored assessment: answered={len(assessment.satisfaction)}/{len(assessment.motivation)}, "
        f"top={results.priority_ranked[0].category}"
    )
    return AssessmentResultsResponse(results=results, insights=build_insights(results))
