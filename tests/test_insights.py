"""Tests for results-panel insights."""

from wheel_of_life.core.insights import (
    GROWTH_TIP,
    NO_STRONG_AREAS,
    PRIORITY_NOTES,
    build_insights,
    strongest_areas,
)
from wheel_of_life.core.schemas_assessment import AssessmentData
from wheel_of_life.core.scoring import score_assessment


def test_top_priorities_carry_tier_notes():
    result = score_assessment(
        AssessmentData(satisfaction={"health": 7}, motivation={"health": 9})
    )

    insights = build_insights(result)

    assert [h.category for h in insights.top_priorities] == ["health", "relationships", "romance"]
    assert [h.rank for h in insights.top_priorities] == [1, 2, 3]
    assert [h.note for h in insights.top_priorities] == list(PRIORITY_NOTES)
    assert insights.top_priorities[0].priority == 27
    assert insights.highest_priority == "Health & Fitness"
    assert insights.growth_tip == GROWTH_TIP


def test_strongest_areas_in_priority_order():
    # health: (10-8)*1 = 2, career: (10-9)*1 = 1, everything else 9
    result = score_assessment(
        AssessmentData(satisfaction={"career": 9, "health": 8, "fun": 6}, motivation={})
    )

    assert strongest_areas(result) == ["Health & Fitness", "Career / Business"]
    insights = build_insights(result)
    assert insights.strongest_areas_summary == "Health & Fitness, Career / Business"


def test_no_strong_areas():
    insights = build_insights(score_assessment(AssessmentData(satisfaction={}, motivation={})))

    assert insights.strongest_areas == ()
    assert insights.strongest_areas_summary == NO_STRONG_AREAS


def test_radar_points_follow_category_order():
    result = score_assessment(AssessmentData(satisfaction={"finances": 6}, motivation={}))

    radar = build_insights(result).radar

    assert len(radar) == 8
    assert radar[0].category == "Health & Fitness"
    assert radar[-1].category == "Finances"
    assert radar[-1].satisfaction == 6
    assert all(point.full_mark == 10 for point in radar)


def test_does_not_modify_result():
    result = score_assessment(AssessmentData(satisfaction={"fun": 9}, motivation={}))
    before = result.model_dump()

    build_insights(result)

    assert result.model_dump() == before
