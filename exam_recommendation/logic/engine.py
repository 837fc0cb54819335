"""
Recommendation Engine

Main orchestrator that combines all scoring components into a single pipeline.
This is the primary entry point for generating exam recommendations.
"""

import logging
from datetime import datetime
from typing import Dict, List, Optional

from .contracts import (
    StudentPerformance,
    CandidateExam,
    ExamRecommendation,
    RecommendationWeights,
    StudyPlanWeek,
)
from .aggregator import aggregate_scores, batch_aggregate
from .ranker import filter_confident, rank_exams, select_top
from .output_assembler import assemble_recommendation, generate_reasons, calculate_priority
from .study_planner import build_study_plan
from .mock_data import generate_mock_exams
from .constants import DEFAULT_LIMIT, MIN_CONFIDENCE_THRESHOLD

logger = logging.getLogger(__name__)


class RecommendationEngine:
    """
    Main recommendation engine that orchestrates the scoring pipeline.

    Pipeline flow:
    1. Sub-scoring - Score each dimension independently per exam
    2. Aggregation - Weighted sum into a confidence in [0, 1]
    3. Filtering - Drop exams at or below the confidence floor
    4. Ranking - Stable sort by confidence, truncate to the limit
    5. Output Assembly - Reasons, priority and estimated score

    The engine holds no state between calls; every call recomputes from scratch.
    """

    def __init__(self, weights: Optional[Dict[str, float]] = None):
        """
        Initialize the recommendation engine.

        Args:
            weights: Optional partial overrides of the default sub-score weights.
        """
        self.weights = RecommendationWeights().merged(weights)
        self.version = "1.0.0"

    def generate_recommendations(
        self,
        student: StudentPerformance,
        exams: List[CandidateExam],
        limit: int = DEFAULT_LIMIT,
        now: Optional[datetime] = None
    ) -> List[ExamRecommendation]:
        """
        Generate ranked exam recommendations for a student.

        Args:
            student: Student's historical performance
            exams: Candidate exams from the catalog
            limit: Maximum number of recommendations to return
            now: Reference time for the recency sub-score

        Returns:
            Recommendations sorted by descending confidence
        """
        if not exams or limit <= 0:
            return []

        scored = batch_aggregate(student, exams, self.weights, now)
        confident = filter_confident(scored)

        dropped = len(scored) - len(confident)
        if dropped:
            logger.debug(f"Dropped {dropped} exams at or below confidence {MIN_CONFIDENCE_THRESHOLD}")

        top = select_top(rank_exams(confident), limit)

        logger.info(
            f"Recommendations for student {student.student_id}: "
            f"{len(exams)} evaluated, {len(confident)} confident, {len(top)} returned"
        )

        return [assemble_recommendation(student, s) for s in top]

    def recommend(
        self,
        student: StudentPerformance,
        exams: Optional[List[CandidateExam]] = None,
        limit: int = DEFAULT_LIMIT,
        use_mock: bool = False,
        now: Optional[datetime] = None
    ) -> List[ExamRecommendation]:
        """
        Like generate_recommendations, falling back to the mock catalog
        when no exams are supplied or use_mock is set.
        """
        if use_mock or exams is None:
            exams = generate_mock_exams()
        return self.generate_recommendations(student, exams, limit, now)

    def recommend_from_dict(
        self,
        student_data: dict,
        exams_data: List[dict],
        **kwargs
    ) -> List[ExamRecommendation]:
        """
        Generate recommendations from plain dictionaries.

        Convenience method for API integration.
        """
        student = StudentPerformance(**student_data)
        exams = [CandidateExam(**exam) for exam in exams_data]
        return self.generate_recommendations(student, exams, **kwargs)

    def score_single_exam(
        self,
        student: StudentPerformance,
        exam: CandidateExam,
        now: Optional[datetime] = None
    ) -> dict:
        """
        Score a single exam for a student.

        Useful for seeing why a specific exam was or was not recommended.

        Returns:
            Dict with scoring details
        """
        scored = aggregate_scores(student, exam, self.weights, now)

        return {
            "exam_id": exam.id,
            "difficulty": scored.difficulty,
            "confidence": scored.confidence,
            "recommended": scored.confidence > MIN_CONFIDENCE_THRESHOLD,
            "priority": calculate_priority(scored.confidence, student, exam).value,
            "reasons": generate_reasons(student, scored),
            "dimension_scores": {
                dim: {
                    "score": score.score,
                    "weight": score.weight,
                    "weighted_score": score.weighted_score,
                    "explanation": score.explanation
                }
                for dim, score in scored.dimension_scores.items()
            },
        }

    def generate_study_plan(
        self,
        student: StudentPerformance,
        timeframe_days: int,
        exams: Optional[List[CandidateExam]] = None,
        limit: int = DEFAULT_LIMIT,
        now: Optional[datetime] = None
    ) -> List[StudyPlanWeek]:
        """
        Build a week-by-week study plan over ``timeframe_days``.

        Each week lists focus areas and daily study time; when ``exams`` is
        given, each week also carries the ranked recommendations for them.
        """
        recommendations: List[ExamRecommendation] = []
        if exams:
            recommendations = self.generate_recommendations(student, exams, limit, now)
        return build_study_plan(student, timeframe_days, recommendations)


# Convenience function for simple usage
def get_recommendations(
    student: StudentPerformance,
    exams: List[CandidateExam],
    limit: int = DEFAULT_LIMIT,
    now: Optional[datetime] = None
) -> List[ExamRecommendation]:
    """
    Convenience function to get recommendations with default weights.
    """
    engine = RecommendationEngine()
    return engine.generate_recommendations(student, exams, limit, now)
