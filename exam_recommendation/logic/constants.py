"""
Recommendation Engine Constants

Defines all weights, thresholds, sub-score levels, reason texts and enums used
by the exam recommendation engine.
All values are deterministic with no AI/ML components.
"""

from enum import Enum
from typing import Dict

# =============================================================================
# ENUMS
# =============================================================================

class Difficulty(str, Enum):
    """Difficulty tier of an exam or an exam attempt."""
    EASY = "Easy"
    MEDIUM = "Medium"
    HARD = "Hard"


class Priority(str, Enum):
    """Priority badge attached to a recommendation."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class StudyPattern(str, Enum):
    """When the student usually studies. Informational only."""
    MORNING = "Morning"
    AFTERNOON = "Afternoon"
    EVENING = "Evening"
    NIGHT = "Night"


# Ordinals used by the difficulty arithmetic
DIFFICULTY_LEVEL_MAP: Dict[str, int] = {
    Difficulty.EASY.value: 1,
    Difficulty.MEDIUM.value: 2,
    Difficulty.HARD.value: 3,
}
DEFAULT_DIFFICULTY_LEVEL = 2  # Unknown labels are treated as Medium

# =============================================================================
# DIMENSION WEIGHTS
# =============================================================================

# Weights for each sub-score (must sum to 1.0)
DIMENSION_WEIGHTS: Dict[str, float] = {
    "subject_preference": 0.25,      # Rank in preferred subjects
    "performance_history": 0.30,     # Subject average + recent trend
    "difficulty_progression": 0.20,  # Ready for this difficulty?
    "weak_area_improvement": 0.15,   # Overlap with weak areas
    "recency": 0.10,                 # Days since last attempt in subject
}

# =============================================================================
# SUB-SCORE LEVELS
# =============================================================================

# Subject preference
NON_PREFERRED_SUBJECT_SCORE = 0.3
PREFERRED_SUBJECT_FLOOR = 0.5
PREFERRED_SUBJECT_RANK_STEP = 0.15

# Performance history
NO_HISTORY_PERFORMANCE_SCORE = 0.5
PERFORMANCE_AVERAGE_WEIGHT = 0.7
PERFORMANCE_TREND_WEIGHT = 0.3

# Trend over the last attempts
RECENT_WINDOW = 3
NEUTRAL_TREND = 0.5

# Difficulty progression
NEW_SUBJECT_EASY_SCORE = 0.8
NEW_SUBJECT_OTHER_SCORE = 0.4
READY_FOR_HARDER_THRESHOLD = 80
STAY_MEDIUM_THRESHOLD = 60
READY_FOR_HARDER_SCORE = 0.9
STAY_MEDIUM_SCORE = 0.8
PRACTICE_EASY_SCORE = 0.7
MISMATCHED_DIFFICULTY_SCORE = 0.4

# Weak area improvement
NO_WEAK_AREA_OVERLAP_SCORE = 0.3
WEAK_AREA_BASE_SCORE = 0.5
WEAK_AREA_OVERLAP_WEIGHT = 0.5

# Recency (whole days since the last attempt in the subject)
NEVER_ATTEMPTED_RECENCY_SCORE = 0.8
OPTIMAL_GAP_DAYS = (1, 7)
ACCEPTABLE_GAP_DAYS = (8, 14)
OPTIMAL_GAP_SCORE = 0.9
ACCEPTABLE_GAP_SCORE = 0.7
POOR_GAP_SCORE = 0.4

# =============================================================================
# DIFFICULTY INFERENCE
# =============================================================================

HARD_DURATION_MINUTES = 180
HARD_TOTAL_MARKS = 300
EASY_DURATION_MINUTES = 60
EASY_TOTAL_MARKS = 100

# =============================================================================
# OUTPUT THRESHOLDS
# =============================================================================

MIN_CONFIDENCE_THRESHOLD = 0.3   # Strictly above this to be recommended
HIGH_PRIORITY_THRESHOLD = 0.8
MEDIUM_PRIORITY_THRESHOLD = 0.6

# Reasons
SUBJECT_PREFERENCE_REASON_THRESHOLD = 0.7
PERFORMANCE_HISTORY_REASON_THRESHOLD = 0.7
WEAK_AREA_REASON_THRESHOLD = 0.6
DIFFICULTY_REASON_THRESHOLD = 0.7
PERFORMING_WELL_AVERAGE = 75

REASON_PREFERRED_SUBJECT = "{subject} is one of your preferred subjects"
REASON_STRONG_HISTORY = "Strong performance history in {subject}"
REASON_WEAK_AREAS = "Targets your weak areas for improvement"
REASON_DIFFICULTY = "Appropriate difficulty level for your current skill"
REASON_PERFORMING_WELL = "You have been performing well in this subject"
REASON_FALLBACK = "Suitable for your learning goals"

# Estimated score
NO_HISTORY_SCORE_FLOOR = 40
NO_HISTORY_SCORE_PENALTY = 10
TREND_SCORE_SCALE = 20
DIFFICULTY_SCORE_STEP = 5

# =============================================================================
# DEFAULT VALUES
# =============================================================================

DEFAULT_LIMIT = 5
DEFAULT_EXAM_DURATION = 60
DEFAULT_TOTAL_MARKS = 100

# =============================================================================
# STUDY PLAN
# =============================================================================

BASE_STUDY_MINUTES = 120
LOW_SCORE_THRESHOLD = 60
MID_SCORE_THRESHOLD = 80
LOW_SCORE_MULTIPLIER = 1.5
MID_SCORE_MULTIPLIER = 1.2
HIGH_SCORE_MULTIPLIER = 1.0

EARLY_PHASE_FRACTION = 0.4
MIDDLE_PHASE_FRACTION = 0.8
REVIEW_FOCUS_AREAS = ("Comprehensive Review", "Mock Tests")
