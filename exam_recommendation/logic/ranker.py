"""
Ranker

Filters scored exams by the confidence floor and ranks the rest.
"""

from typing import List

from .contracts import ScoredExam
from .constants import MIN_CONFIDENCE_THRESHOLD


def filter_confident(
    scored_exams: List[ScoredExam],
    threshold: float = MIN_CONFIDENCE_THRESHOLD
) -> List[ScoredExam]:
    """Keep exams whose confidence is strictly above the threshold."""
    return [scored for scored in scored_exams if scored.confidence > threshold]


def rank_exams(scored_exams: List[ScoredExam]) -> List[ScoredExam]:
    """
    Rank exams by confidence (descending).
    sorted() is stable, so ties keep their input order.
    """
    return sorted(
        scored_exams,
        key=lambda x: x.confidence,
        reverse=True
    )


def select_top(ranked: List[ScoredExam], limit: int) -> List[ScoredExam]:
    """Take the first ``limit`` exams; a non-positive limit yields nothing."""
    if limit <= 0:
        return []
    return ranked[:limit]
