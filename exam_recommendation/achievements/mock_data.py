"""
Mock Data

Demo stats snapshot used when no real stats are supplied.
"""

from .contracts import UserStats, SubjectMastery


def generate_mock_user_stats() -> UserStats:
    return UserStats(
        total_exams_completed=12,
        average_score=78.5,
        current_streak=3,
        best_streak=8,
        total_study_time=450,
        perfect_scores=2,
        subject_mastery={
            "Physics": SubjectMastery(exams=5, avg_score=82, best_score=95),
            "Chemistry": SubjectMastery(exams=4, avg_score=75, best_score=88),
            "Mathematics": SubjectMastery(exams=3, avg_score=80, best_score=92),
        },
        total_points=890,
        level=3,
        experience_points=890,
        experience_to_next_level=1600 - 890,
    )
