"""
Test the recommendation engine end to end.
"""

import pytest
from pydantic import ValidationError

from exam_recommendation.logic import (
    RecommendationEngine,
    get_recommendations,
    generate_mock_student_performance,
    generate_mock_exams,
)
from exam_recommendation.logic.constants import MIN_CONFIDENCE_THRESHOLD

from .factories import NOW, make_attempt, make_student, make_exam


def test_end_to_end_scenario(physics_student, science_exams, now):
    recommendations = get_recommendations(physics_student, science_exams, limit=8, now=now)

    assert [r.exam_id for r in recommendations] == ["phy", "chem", "bio", "math"]

    by_id = {r.exam_id: r for r in recommendations}
    assert by_id["phy"].confidence == pytest.approx(0.6738)
    assert by_id["chem"].confidence == pytest.approx(0.6725)
    assert by_id["bio"].confidence == pytest.approx(0.51)
    assert by_id["math"].confidence == pytest.approx(0.43)

    chemistry = by_id["chem"]
    assert chemistry.priority == "High"
    assert chemistry.reasons == [
        "Chemistry is one of your preferred subjects",
        "Targets your weak areas for improvement",
    ]
    assert chemistry.estimated_score == 65

    physics = by_id["phy"]
    assert physics.priority == "Medium"
    assert physics.reasons == [
        "Physics is one of your preferred subjects",
        "You have been performing well in this subject",
    ]
    assert physics.estimated_score == pytest.approx(78)

    assert by_id["bio"].reasons == ["Appropriate difficulty level for your current skill"]
    assert by_id["math"].reasons == ["Suitable for your learning goals"]
    assert by_id["math"].priority == "Low"


def test_output_invariants(physics_student, science_exams, now):
    recommendations = get_recommendations(physics_student, science_exams, limit=3, now=now)

    assert len(recommendations) <= 3
    confidences = [r.confidence for r in recommendations]
    assert confidences == sorted(confidences, reverse=True)
    for rec in recommendations:
        assert MIN_CONFIDENCE_THRESHOLD < rec.confidence <= 1.0
        assert rec.reasons


def test_empty_exams_and_non_positive_limit(physics_student, science_exams, now):
    assert get_recommendations(physics_student, [], now=now) == []
    assert get_recommendations(physics_student, science_exams, limit=0, now=now) == []
    assert get_recommendations(physics_student, science_exams, limit=-3, now=now) == []


def test_default_limit_is_five(physics_student, now):
    exams = [make_exam(f"e{i}", "Physics", difficulty="Medium") for i in range(8)]
    assert len(get_recommendations(physics_student, exams, now=now)) == 5


def test_low_confidence_exams_are_dropped():
    student = make_student(history=[make_attempt("Art", 0, days_ago=0)])
    exam = make_exam("art", "Art", difficulty="Hard")

    engine = RecommendationEngine()
    detail = engine.score_single_exam(student, exam, now=NOW)

    assert detail["confidence"] == pytest.approx(0.285)
    assert detail["recommended"] is False
    assert engine.generate_recommendations(student, [exam], now=NOW) == []


def test_ties_keep_input_order(physics_student, now):
    exams = [make_exam(f"dup-{i}", "Mathematics", difficulty="Medium") for i in range(4)]
    recommendations = get_recommendations(physics_student, exams, limit=10, now=now)
    assert [r.exam_id for r in recommendations] == ["dup-0", "dup-1", "dup-2", "dup-3"]


def test_is_deterministic(physics_student, science_exams, now):
    first = get_recommendations(physics_student, science_exams, limit=8, now=now)
    second = get_recommendations(physics_student, science_exams, limit=8, now=now)
    assert first == second


def test_empty_history_defaults(now):
    student = make_student(average=72)
    rec = get_recommendations(student, [make_exam("geo", "Geography", difficulty="Easy")], now=now)[0]

    assert rec.estimated_score == 62
    detail = RecommendationEngine().score_single_exam(student, make_exam("geo", "Geography"), now=now)
    assert detail["dimension_scores"]["performance_history"]["score"] == 0.5


def test_estimated_score_floor_without_history(now):
    student = make_student(average=30)
    rec = get_recommendations(student, [make_exam("geo", "Geography", difficulty="Easy")], now=now)[0]
    assert rec.estimated_score == 40


def test_estimated_score_adjusts_for_trend_and_difficulty(now):
    student = make_student(history=[
        make_attempt("Physics", 60, days_ago=6),
        make_attempt("Physics", 80, days_ago=3),
    ])
    easy, hard = get_recommendations(
        student,
        [make_exam("easy", "Physics", difficulty="Easy"), make_exam("hard", "Physics", difficulty="Hard")],
        limit=2,
        now=now,
    )
    # avg 70, trend 0.7 -> +4, Easy +10 / Hard +0
    assert easy.estimated_score == pytest.approx(84)
    assert hard.estimated_score == pytest.approx(74)


def test_estimated_score_is_clamped(now):
    student = make_student(history=[
        make_attempt("Physics", 80, days_ago=6),
        make_attempt("Physics", 100, days_ago=3),
    ])
    rec = get_recommendations(student, [make_exam("easy", "Physics", difficulty="Easy")], now=now)[0]
    assert rec.estimated_score == 100


def test_missing_exam_fields_are_resolved(now):
    student = make_student(preferred=["Physics"])
    rec = get_recommendations(student, [make_exam("x", "Physics", duration=200, total_marks=50)], now=now)[0]

    assert rec.difficulty == "Hard"
    assert rec.estimated_duration == 200
    assert rec.topics == []

    rec = get_recommendations(student, [make_exam("y", "Physics")], now=now)[0]
    assert rec.difficulty == "Medium"
    assert rec.estimated_duration == 60


def test_recommendations_are_immutable(physics_student, science_exams, now):
    rec = get_recommendations(physics_student, science_exams, now=now)[0]
    with pytest.raises(ValidationError):
        rec.confidence = 0.99


def test_inputs_are_not_mutated(physics_student, science_exams, now):
    before_student = physics_student.model_dump()
    before_exams = [e.model_dump() for e in science_exams]

    get_recommendations(physics_student, science_exams, limit=8, now=now)

    assert physics_student.model_dump() == before_student
    assert [e.model_dump() for e in science_exams] == before_exams


def test_custom_weights_change_ranking(physics_student, science_exams, now):
    engine = RecommendationEngine(weights={"weak_area_improvement": 0.6})
    recommendations = engine.generate_recommendations(physics_student, science_exams, limit=8, now=now)
    assert recommendations[0].exam_id == "chem"


def test_custom_weights_reject_unknown_dimension():
    with pytest.raises(ValidationError):
        RecommendationEngine(weights={"popularity": 0.2})


def test_confidence_is_capped_at_one(physics_student, science_exams, now):
    engine = RecommendationEngine(weights={k: 1.0 for k in (
        "subject_preference", "performance_history", "difficulty_progression",
        "weak_area_improvement", "recency",
    )})
    for rec in engine.generate_recommendations(physics_student, science_exams, limit=8, now=now):
        assert rec.confidence <= 1.0


def test_high_priority_from_confidence(now):
    student = make_student(
        history=[make_attempt("Physics", 90, days_ago=6), make_attempt("Physics", 95, days_ago=3)],
        preferred=["Physics"],
        weak=["Organic Chemistry"],
    )
    exam = make_exam("phy", "Physics", difficulty="Medium", topics=["Organic Chemistry"])
    rec = get_recommendations(student, [exam], now=now)[0]

    assert rec.confidence > 0.8
    assert rec.priority == "High"
    assert rec.reasons == [
        "Physics is one of your preferred subjects",
        "Strong performance history in Physics",
        "Targets your weak areas for improvement",
        "Appropriate difficulty level for your current skill",
        "You have been performing well in this subject",
    ]


def test_mock_data_produces_recommendations(now):
    engine = RecommendationEngine()
    recommendations = engine.recommend(generate_mock_student_performance(), use_mock=True, limit=8, now=now)

    assert 0 < len(recommendations) <= len(generate_mock_exams())
    chemistry = next(r for r in recommendations if r.subject == "Chemistry")
    assert chemistry.priority == "High"


def test_recommend_from_dict(now):
    engine = RecommendationEngine()
    recommendations = engine.recommend_from_dict(
        {"student_id": "s1", "preferred_subjects": ["Physics"], "average_score": 70},
        [{"id": "a", "title": "A", "subject": "Physics"}],
        now=now,
    )
    assert [r.exam_id for r in recommendations] == ["a"]
