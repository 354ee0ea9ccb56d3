"""Pydantic schemas for Wheel of Life assessments."""

from types import MappingProxyType
from typing import Annotated

from pydantic import AfterValidator, BaseModel, ConfigDict, EmailStr, Field, PlainSerializer

from wheel_of_life.core.categories import MAX_RATING, MIN_RATING, LifeCategory

# Strict: floats, numeric strings and booleans are rejected, not coerced.
Rating = Annotated[int, Field(strict=True, ge=MIN_RATING, le=MAX_RATING)]

# Read-only per-category scores; serialized back to a plain dict.
CategoryScores = Annotated[
    dict[LifeCategory, int],
    AfterValidator(MappingProxyType),
    PlainSerializer(dict, return_type=dict[LifeCategory, int]),
]


# ============================================================================
# Input
# ============================================================================


class AssessmentData(BaseModel):
    """Raw ratings collected by the questionnaire.

    Both mappings are required, but either may omit categories; omitted
    categories are scored with the default rating.
    """

    model_config = ConfigDict(extra="forbid")

    satisfaction: dict[LifeCategory, Rating] = Field(
        ..., description="Current satisfaction per category (1-10)"
    )
    motivation: dict[LifeCategory, Rating] = Field(
        ..., description="Motivation to improve per category (1-10)"
    )


class EmailResultsRequest(BaseModel):
    """Request body for emailing assessment results."""

    model_config = ConfigDict(populate_by_name=True, extra="forbid")

    email: EmailStr = Field(..., description="Recipient address")
    name: str | None = Field(default=None, description="Display name")
    updates: bool = Field(default=False, description="Opted in to future updates")
    assessment_data: AssessmentData = Field(..., alias="assessmentData")


class EmailResultsResponse(BaseModel):
    """Response body for the email-results endpoint."""

    success: bool
    message: str


# ============================================================================
# Scored output
# ============================================================================


class ScoredCategory(BaseModel):
    """Derived scores for one category."""

    model_config = ConfigDict(frozen=True)

    category: LifeCategory
    label: str
    satisfaction: int
    motivation: int
    improvement: int = Field(..., ge=0, le=MAX_RATING - MIN_RATING)
    priority: int = Field(..., ge=0, le=(MAX_RATING - MIN_RATING) * MAX_RATING)


class ScoredResult(BaseModel):
    """Full scoring output; all mappings are in category enumeration order."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    satisfaction: CategoryScores
    motivation: CategoryScores
    improvement: CategoryScores
    priority: CategoryScores
    priority_ranked: tuple[ScoredCategory, ...] = Field(..., alias="priorityRanked")


# ============================================================================
# Insights
# ============================================================================


class PriorityHighlight(BaseModel):
    """One of the top priority areas shown on the results panel."""

    model_config = ConfigDict(frozen=True)

    rank: int
    category: LifeCategory
    label: str
    satisfaction: int
    motivation: int
    priority: int
    note: str


class RadarPoint(BaseModel):
    """Per-category point for the satisfaction wheel chart."""

    model_config = ConfigDict(frozen=True)

    category: str = Field(..., description="Category label")
    satisfaction: int
    full_mark: int = MAX_RATING


class AssessmentInsights(BaseModel):
    model_config = ConfigDict(frozen=True)

    top_priorities: tuple[PriorityHighlight, ...]
    strongest_areas: tuple[str, ...]
    strongest_areas_summary: str
    highest_priority: str
    radar: tuple[RadarPoint, ...]
    growth_tip: str


class AssessmentResultsResponse(BaseModel):
    results: ScoredResult
    insights: AssessmentInsights


class CategoryInfo(BaseModel):
    category: LifeCategory
    label: str


class CategoriesResponse(BaseModel):
    categories: list[CategoryInfo]
    min_rating: int
    max_rating: int
    default_rating: int
