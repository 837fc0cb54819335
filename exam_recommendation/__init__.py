"""
Exam recommendation and achievement scoring.
"""

from .logic import (
    RecommendationEngine,
    get_recommendations,
    StudentPerformance,
    ExamAttempt,
    CandidateExam,
    ExamRecommendation,
)
from .achievements import (
    evaluate_achievements,
    calculate_user_level,
    UserStats,
)

__all__ = [
    "RecommendationEngine",
    "get_recommendations",
    "StudentPerformance",
    "ExamAttempt",
    "CandidateExam",
    "ExamRecommendation",
    "evaluate_achievements",
    "calculate_user_level",
    "UserStats",
]
