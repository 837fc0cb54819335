"""
Study Planner

Splits a timeframe into weeks and assigns focus areas and daily study time.
Early weeks work on weak areas, middle weeks mix in strengths, and the final
stretch is review.
"""

import math
from typing import List, Optional

from .contracts import StudentPerformance, ExamRecommendation, StudyPlanWeek
from .constants import (
    BASE_STUDY_MINUTES,
    LOW_SCORE_THRESHOLD,
    MID_SCORE_THRESHOLD,
    LOW_SCORE_MULTIPLIER,
    MID_SCORE_MULTIPLIER,
    HIGH_SCORE_MULTIPLIER,
    EARLY_PHASE_FRACTION,
    MIDDLE_PHASE_FRACTION,
    REVIEW_FOCUS_AREAS,
)


def build_study_plan(
    student: StudentPerformance,
    timeframe_days: int,
    recommendations: Optional[List[ExamRecommendation]] = None
) -> List[StudyPlanWeek]:
    if timeframe_days <= 0:
        return []

    total_weeks = math.ceil(timeframe_days / 7)
    study_time = calculate_optimal_study_time(student)

    return [
        StudyPlanWeek(
            week=week,
            recommendations=list(recommendations or []),
            focus_areas=identify_weekly_focus(student, week, total_weeks),
            study_time=study_time,
        )
        for week in range(1, total_weeks + 1)
    ]


def identify_weekly_focus(
    student: StudentPerformance,
    week: int,
    total_weeks: int
) -> List[str]:
    weak_areas = student.weak_areas[:3]

    if week <= total_weeks * EARLY_PHASE_FRACTION:
        return list(weak_areas)
    if week <= total_weeks * MIDDLE_PHASE_FRACTION:
        return weak_areas[:2] + student.strong_areas[:1]
    return list(REVIEW_FOCUS_AREAS)


def calculate_optimal_study_time(student: StudentPerformance) -> int:
    """Daily study minutes; weaker students get more time."""
    if student.average_score < LOW_SCORE_THRESHOLD:
        multiplier = LOW_SCORE_MULTIPLIER
    elif student.average_score < MID_SCORE_THRESHOLD:
        multiplier = MID_SCORE_MULTIPLIER
    else:
        multiplier = HIGH_SCORE_MULTIPLIER

    return round(BASE_STUDY_MINUTES * multiplier)
