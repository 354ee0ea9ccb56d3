"""Results-panel insights derived from a scored assessment."""

from wheel_of_life.core.categories import LIFE_CATEGORIES, MAX_RATING, category_label
from wheel_of_life.core.schemas_assessment import (
    AssessmentInsights,
    PriorityHighlight,
    RadarPoint,
    ScoredCategory,
    ScoredResult,
)

TOP_PRIORITY_COUNT = 3

# Satisfaction at or above this marks a strong area
STRONG_SATISFACTION_THRESHOLD = 7

PRIORITY_NOTES = (
    "High improvement potential × strong motivation",
    "Significant room for growth",
    "Balanced opportunity for enhancement",
)

NO_STRONG_AREAS = "No strong areas identified yet"

GROWTH_TIP = (
    "Start with your highest priority area and commit to one small, consistent action. "
    "Small steps in high-motivation areas often create momentum that spreads to other "
    "life domains."
)


def top_priorities(result: ScoredResult, count: int = TOP_PRIORITY_COUNT) -> list[ScoredCategory]:
    return list(result.priority_ranked[:count])


def strongest_areas(
    result: ScoredResult, threshold: int = STRONG_SATISFACTION_THRESHOLD
) -> list[str]:
    """Labels of categories with satisfaction >= threshold, in priority order."""
    return [entry.label for entry in result.priority_ranked if entry.satisfaction >= threshold]


def radar_points(result: ScoredResult) -> list[RadarPoint]:
    return [
        RadarPoint(
            category=category_label(category),
            satisfaction=result.satisfaction[category],
            full_mark=MAX_RATING,
        )
        for category in LIFE_CATEGORIES
    ]


def build_insights(result: ScoredResult) -> AssessmentInsights:
    """
    Build the insights shown next to the wheel chart.

    Args:
        result: Scored assessment (not modified)

    Returns:
        AssessmentInsights with the top 3 areas, strongest areas and chart data
    """
    highlights = [
        PriorityHighlight(
            rank=rank,
            category=entry.category,
            label=entry.label,
            satisfaction=entry.satisfaction,
            motivation=entry.motivation,
            priority=entry.priority,
            note=PRIORITY_NOTES[rank - 1],
        )
        for rank, entry in enumerate(top_priorities(result), 1)
    ]
    strong = strongest_areas(result)

    return AssessmentInsights(
        top_priorities=tuple(highlights),
        strongest_areas=tuple(strong),
        strongest_areas_summary=", ".join(strong) or NO_STRONG_AREAS,
        highest_priority=result.priority_ranked[0].label,
        radar=tuple(radar_points(result)),
        growth_tip=GROWTH_TIP,
    )
