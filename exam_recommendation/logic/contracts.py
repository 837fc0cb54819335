"""
Data Contracts for the Exam Recommendation Engine

Defines Pydantic models for StudentPerformance / CandidateExam (input) and
ExamRecommendation (output).
These contracts are the API boundary for the recommendation engine.
"""

from datetime import datetime
from typing import List, Optional, Dict
from pydantic import BaseModel, Field

from .constants import Difficulty, Priority, StudyPattern, DIMENSION_WEIGHTS


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class ExamAttempt(BaseModel):
    """A single past exam attempt from the student's history."""
    exam_id: str
    subject: str
    score: float  # 0-100, not range-checked
    time_taken: float = 0  # minutes
    difficulty: Difficulty
    topics: List[str] = Field(default_factory=list)
    completed_at: datetime

    class Config:
        use_enum_values = True


class StudentPerformance(BaseModel):
    """
    Input contract for the recommendation engine.
    Represents a student's historical performance and preferences.
    """
    student_id: str

    # Chronological: the last entries are the most recent attempts
    exam_history: List[ExamAttempt] = Field(default_factory=list)

    # Most-preferred first, the position matters
    preferred_subjects: List[str] = Field(default_factory=list)

    # Topic-name fragments, matched case-insensitively as substrings
    weak_areas: List[str] = Field(default_factory=list)
    strong_areas: List[str] = Field(default_factory=list)

    average_score: float = 0.0
    study_pattern: StudyPattern = StudyPattern.EVENING

    class Config:
        use_enum_values = True


class CandidateExam(BaseModel):
    """An exam from the catalog that may be recommended."""
    id: str
    title: str
    subject: str
    difficulty: Optional[str] = None  # Inferred from duration/marks when absent
    duration: Optional[float] = None  # minutes
    total_marks: Optional[float] = None
    topics: List[str] = Field(default_factory=list)


class RecommendationWeights(BaseModel):
    """Weights applied to each sub-score. Defaults sum to 1.0."""
    subject_preference: float = DIMENSION_WEIGHTS["subject_preference"]
    performance_history: float = DIMENSION_WEIGHTS["performance_history"]
    difficulty_progression: float = DIMENSION_WEIGHTS["difficulty_progression"]
    weak_area_improvement: float = DIMENSION_WEIGHTS["weak_area_improvement"]
    recency: float = DIMENSION_WEIGHTS["recency"]

    class Config:
        extra = "forbid"

    def merged(self, overrides: Optional[Dict[str, float]] = None) -> "RecommendationWeights":
        """Return a copy with the given weights replaced."""
        if not overrides:
            return self
        return RecommendationWeights(**{**self.model_dump(), **overrides})


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class DimensionScore(BaseModel):
    """Individual sub-score with explanation."""
    dimension: str
    score: float
    weight: float
    weighted_score: float
    explanation: str = ""


class ExamRecommendation(BaseModel):
    """
    Single exam recommendation. Immutable once produced.
    """
    exam_id: str
    title: str
    subject: str
    difficulty: str
    estimated_score: float
    confidence: float = Field(ge=0.0, le=1.0)
    reasons: List[str] = Field(min_length=1)
    priority: Priority
    topics: List[str] = Field(default_factory=list)
    estimated_duration: float

    class Config:
        use_enum_values = True
        frozen = True


class StudyPlanWeek(BaseModel):
    """One week of a generated study plan."""
    week: int
    recommendations: List[ExamRecommendation] = Field(default_factory=list)
    focus_areas: List[str] = Field(default_factory=list)
    study_time: int  # minutes per day


# =============================================================================
# INTERMEDIATE DATA STRUCTURES
# =============================================================================

class ScoredExam(BaseModel):
    """
    A candidate exam with computed sub-scores.
    Used between aggregation and output assembly.
    """
    exam: CandidateExam
    difficulty: str
    dimension_scores: Dict[str, DimensionScore] = Field(default_factory=dict)
    confidence: float = 0.0

    def score_of(self, dimension: str) -> float:
        return self.dimension_scores[dimension].score
