"""Priority scoring for Wheel of Life assessments.

For every category:

    improvement = 10 - satisfaction
    priority    = improvement * motivation

Categories are then ranked by priority, highest first. Ties keep the fixed
category order, so the ranking is identical across runs and platforms.

This is the single scoring implementation; the HTTP API serves it to the
questionnaire front-end and the mail path uses it server-side.
"""

from collections.abc import Mapping

from wheel_of_life.core.categories import (
    CATEGORY_INDEX,
    DEFAULT_RATING,
    LIFE_CATEGORIES,
    MAX_RATING,
    LifeCategory,
    category_label,
)
from wheel_of_life.core.schemas_assessment import AssessmentData, ScoredCategory, ScoredResult


def _rating(ratings: Mapping[LifeCategory, int], category: LifeCategory) -> int:
    """Rating for a category, or DEFAULT_RATING when the category was not answered."""
    if category in ratings:
        return ratings[category]
    return DEFAULT_RATING


def improvement_potential(satisfaction: int) -> int:
    return MAX_RATING - satisfaction


def priority_score(satisfaction: int, motivation: int) -> int:
    return improvement_potential(satisfaction) * motivation


def _ranking_key(entry: ScoredCategory) -> tuple[int, int]:
    return (-entry.priority, CATEGORY_INDEX[entry.category])


def score_assessment(assessment: AssessmentData) -> ScoredResult:
    """
    Score a validated assessment.

    Args:
        assessment: Satisfaction and motivation ratings; missing categories
            default to DEFAULT_RATING

    Returns:
        ScoredResult with per-category mappings and all eight categories
        ranked by priority descending (ties in category order)
    """
    satisfaction: dict[LifeCategory, int] = {}
    motivation: dict[LifeCategory, int] = {}
    improvement: dict[LifeCategory, int] = {}
    priority: dict[LifeCategory, int] = {}

    for category in LIFE_CATEGORIES:
        sat = _rating(assessment.satisfaction, category)
        mot = _rating(assessment.motivation, category)

        satisfaction[category] = sat
        motivation[category] = mot
        improvement[category] = improvement_potential(sat)
        priority[category] = priority_score(sat, mot)

    entries = [
        ScoredCategory(
            category=category,
            label=category_label(category),
            satisfaction=satisfaction[category],
            motivation=motivation[category],
            improvement=improvement[category],
            priority=priority[category],
        )
        for category in LIFE_CATEGORIES
    ]

    return ScoredResult(
        satisfaction=satisfaction,
        motivation=motivation,
        improvement=improvement,
        priority=priority,
        priority_ranked=tuple(sorted(entries, key=_ranking_key)),
    )
