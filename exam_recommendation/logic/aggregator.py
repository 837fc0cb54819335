"""
Score Aggregator

Combines individual sub-scores into an overall confidence.
Applies weighting and normalization.
"""

from datetime import datetime
from typing import List, Dict, Optional

from .contracts import (
    StudentPerformance,
    CandidateExam,
    DimensionScore,
    ScoredExam,
    RecommendationWeights,
)
from .dimension_scorers import (
    score_subject_preference,
    score_performance_history,
    score_difficulty_progression,
    score_weak_area_improvement,
    score_recency,
    resolve_difficulty,
)

SCORERS = {
    "subject_preference": score_subject_preference,
    "performance_history": score_performance_history,
    "difficulty_progression": score_difficulty_progression,
    "weak_area_improvement": score_weak_area_improvement,
    "recency": score_recency,
}


def aggregate_scores(
    student: StudentPerformance,
    exam: CandidateExam,
    weights: Optional[RecommendationWeights] = None,
    now: Optional[datetime] = None
) -> ScoredExam:
    """
    Compute all sub-scores and aggregate into a confidence.

    Args:
        student: Student's performance record
        exam: Candidate exam to score
        weights: Sub-score weights (defaults when omitted)
        now: Reference time for the recency sub-score

    Returns:
        ScoredExam with all sub-scores and the clamped confidence
    """
    weights = weights or RecommendationWeights()
    weight_map = weights.model_dump()
    dimension_scores: Dict[str, DimensionScore] = {}

    for dimension, scorer in SCORERS.items():
        score, explanation = scorer(student, exam, now)
        weight = weight_map[dimension]
        dimension_scores[dimension] = DimensionScore(
            dimension=dimension,
            score=score,
            weight=weight,
            weighted_score=score * weight,
            explanation=explanation,
        )

    confidence = sum(score.weighted_score for score in dimension_scores.values())

    # Normalize to ensure 0-1 range
    confidence = max(0.0, min(1.0, confidence))

    return ScoredExam(
        exam=exam,
        difficulty=resolve_difficulty(exam),
        dimension_scores=dimension_scores,
        confidence=confidence,
    )


def batch_aggregate(
    student: StudentPerformance,
    exams: List[CandidateExam],
    weights: Optional[RecommendationWeights] = None,
    now: Optional[datetime] = None
) -> List[ScoredExam]:
    """Score multiple exams in batch, preserving input order."""
    return [aggregate_scores(student, exam, weights, now) for exam in exams]
