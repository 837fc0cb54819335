"""
Recommendation Logic Module

Provides the deterministic scoring engine for exam recommendations.
"""

from .contracts import (
    StudentPerformance,
    ExamAttempt,
    CandidateExam,
    ExamRecommendation,
    RecommendationWeights,
    DimensionScore,
    ScoredExam,
    StudyPlanWeek,
)
from .engine import RecommendationEngine, get_recommendations
from .constants import Difficulty, Priority, StudyPattern
from .mock_data import generate_mock_student_performance, generate_mock_exams

__all__ = [
    # Main engine
    "RecommendationEngine",
    "get_recommendations",

    # Contracts
    "StudentPerformance",
    "ExamAttempt",
    "CandidateExam",
    "ExamRecommendation",
    "RecommendationWeights",
    "DimensionScore",
    "ScoredExam",
    "StudyPlanWeek",

    # Enums
    "Difficulty",
    "Priority",
    "StudyPattern",

    # Mock data
    "generate_mock_student_performance",
    "generate_mock_exams",
]
