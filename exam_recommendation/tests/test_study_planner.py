import pytest

from exam_recommendation.logic import RecommendationEngine
from exam_recommendation.logic.study_planner import (
    build_study_plan,
    calculate_optimal_study_time,
    identify_weekly_focus,
)

from .factories import make_student


@pytest.fixture
def student():
    return make_student(
        weak=["Organic Chemistry", "Complex Numbers", "Optics", "Genetics"],
        strong=["Mechanics", "Algebra"],
        average=72,
    )


def test_weeks_cover_timeframe(student):
    assert [w.week for w in build_study_plan(student, 21)] == [1, 2, 3]
    assert len(build_study_plan(student, 22)) == 4
    assert len(build_study_plan(student, 1)) == 1
    assert build_study_plan(student, 0) == []


def test_focus_moves_from_weak_areas_to_review(student):
    plan = build_study_plan(student, 35)

    assert plan[0].focus_areas == ["Organic Chemistry", "Complex Numbers", "Optics"]
    assert plan[1].focus_areas == ["Organic Chemistry", "Complex Numbers", "Optics"]
    assert plan[2].focus_areas == ["Organic Chemistry", "Complex Numbers", "Mechanics"]
    assert plan[3].focus_areas == ["Organic Chemistry", "Complex Numbers", "Mechanics"]
    assert plan[4].focus_areas == ["Comprehensive Review", "Mock Tests"]


def test_focus_with_no_weak_or_strong_areas():
    student = make_student()
    assert identify_weekly_focus(student, 1, 10) == []
    assert identify_weekly_focus(student, 6, 10) == []
    assert identify_weekly_focus(student, 9, 10) == ["Comprehensive Review", "Mock Tests"]


@pytest.mark.parametrize("average,minutes", [(55, 180), (60, 144), (79.9, 144), (80, 120), (95, 120)])
def test_study_time_scales_with_average(average, minutes):
    assert calculate_optimal_study_time(make_student(average=average)) == minutes


def test_engine_plan_carries_recommendations(physics_student, science_exams, now):
    engine = RecommendationEngine()
    plan = engine.generate_study_plan(physics_student, 14, exams=science_exams, limit=2, now=now)

    assert len(plan) == 2
    for week in plan:
        assert [r.exam_id for r in week.recommendations] == ["phy", "chem"]
        assert week.study_time == 144


def test_engine_plan_without_exams(physics_student):
    plan = RecommendationEngine().generate_study_plan(physics_student, 7)
    assert len(plan) == 1
    assert plan[0].recommendations == []
