"""
Dimension Scorers

Individual scoring functions for each recommendation sub-score.
Each scorer produces a score designed to land between 0.0 and 1.0, plus a
short explanation. Weights are applied by the aggregator.
All logic is deterministic - no AI/ML components.
"""

import math
from datetime import datetime, timezone
from typing import List, Optional, Tuple

from .contracts import StudentPerformance, CandidateExam, ExamAttempt
from .constants import (
    Difficulty,
    DIFFICULTY_LEVEL_MAP,
    DEFAULT_DIFFICULTY_LEVEL,
    NON_PREFERRED_SUBJECT_SCORE,
    PREFERRED_SUBJECT_FLOOR,
    PREFERRED_SUBJECT_RANK_STEP,
    NO_HISTORY_PERFORMANCE_SCORE,
    PERFORMANCE_AVERAGE_WEIGHT,
    PERFORMANCE_TREND_WEIGHT,
    RECENT_WINDOW,
    NEUTRAL_TREND,
    NEW_SUBJECT_EASY_SCORE,
    NEW_SUBJECT_OTHER_SCORE,
    READY_FOR_HARDER_THRESHOLD,
    STAY_MEDIUM_THRESHOLD,
    READY_FOR_HARDER_SCORE,
    STAY_MEDIUM_SCORE,
    PRACTICE_EASY_SCORE,
    MISMATCHED_DIFFICULTY_SCORE,
    NO_WEAK_AREA_OVERLAP_SCORE,
    WEAK_AREA_BASE_SCORE,
    WEAK_AREA_OVERLAP_WEIGHT,
    NEVER_ATTEMPTED_RECENCY_SCORE,
    OPTIMAL_GAP_DAYS,
    ACCEPTABLE_GAP_DAYS,
    OPTIMAL_GAP_SCORE,
    ACCEPTABLE_GAP_SCORE,
    POOR_GAP_SCORE,
    HARD_DURATION_MINUTES,
    HARD_TOTAL_MARKS,
    EASY_DURATION_MINUTES,
    EASY_TOTAL_MARKS,
)

SECONDS_PER_DAY = 60 * 60 * 24


def score_subject_preference(
    student: StudentPerformance,
    exam: CandidateExam,
    now: Optional[datetime] = None
) -> Tuple[float, str]:
    """
    Score how high the exam's subject ranks in the student's preferences.
    """
    if exam.subject not in student.preferred_subjects:
        return NON_PREFERRED_SUBJECT_SCORE, f"{exam.subject} is not a preferred subject"

    rank = student.preferred_subjects.index(exam.subject)
    score = max(PREFERRED_SUBJECT_FLOOR, 1.0 - rank * PREFERRED_SUBJECT_RANK_STEP)
    return score, f"Preference rank {rank + 1} of {len(student.preferred_subjects)}"


def score_performance_history(
    student: StudentPerformance,
    exam: CandidateExam,
    now: Optional[datetime] = None
) -> Tuple[float, str]:
    """
    Score past performance in the exam's subject.

    Combines:
    - All-time subject average (70%)
    - Trend over the most recent attempts (30%)
    """
    history = subject_history(student, exam.subject)
    if not history:
        return NO_HISTORY_PERFORMANCE_SCORE, "No history in this subject"

    avg_score = average_score(history)
    trend = calculate_trend(history[-RECENT_WINDOW:])

    score = min(
        1.0,
        (avg_score / 100) * PERFORMANCE_AVERAGE_WEIGHT + trend * PERFORMANCE_TREND_WEIGHT
    )
    return score, f"Subject average: {avg_score:.1f}, Trend: {trend:.2f}"


def score_difficulty_progression(
    student: StudentPerformance,
    exam: CandidateExam,
    now: Optional[datetime] = None
) -> Tuple[float, str]:
    """
    Score whether the exam's difficulty fits what the student is ready for,
    judged from the average of their most recent attempts in the subject.
    """
    exam_level = get_difficulty_level(resolve_difficulty(exam))
    history = subject_history(student, exam.subject)

    # Prefer easier exams for new subjects
    if not history:
        if exam_level == 1:
            return NEW_SUBJECT_EASY_SCORE, "New subject, easy start"
        return NEW_SUBJECT_OTHER_SCORE, "New subject, demanding start"

    recent_avg = average_score(history[-RECENT_WINDOW:])

    if recent_avg >= READY_FOR_HARDER_THRESHOLD and exam_level < 3:
        score = READY_FOR_HARDER_SCORE
    elif recent_avg >= STAY_MEDIUM_THRESHOLD and exam_level == 2:
        score = STAY_MEDIUM_SCORE
    elif recent_avg < STAY_MEDIUM_THRESHOLD and exam_level == 1:
        score = PRACTICE_EASY_SCORE
    else:
        score = MISMATCHED_DIFFICULTY_SCORE

    return score, f"Recent average: {recent_avg:.1f}, Exam level: {exam_level}"


def score_weak_area_improvement(
    student: StudentPerformance,
    exam: CandidateExam,
    now: Optional[datetime] = None
) -> Tuple[float, str]:
    """
    Score the share of exam topics that touch the student's weak areas.
    """
    overlap = sum(1 for topic in exam.topics if matches_weak_area(topic, student.weak_areas))

    if overlap == 0:
        return NO_WEAK_AREA_OVERLAP_SCORE, "No weak area overlap"

    ratio = overlap / len(exam.topics)
    score = min(1.0, WEAK_AREA_BASE_SCORE + ratio * WEAK_AREA_OVERLAP_WEIGHT)
    return score, f"Weak area topics: {overlap}/{len(exam.topics)}"


def score_recency(
    student: StudentPerformance,
    exam: CandidateExam,
    now: Optional[datetime] = None
) -> Tuple[float, str]:
    """
    Score the gap since the last attempt in the subject.
    1-7 days is the sweet spot; same-day or long gaps score low.
    """
    history = subject_history(student, exam.subject)
    if not history:
        return NEVER_ATTEMPTED_RECENCY_SCORE, "Subject never attempted"

    days = days_since(history[-1].completed_at, now)

    if OPTIMAL_GAP_DAYS[0] <= days <= OPTIMAL_GAP_DAYS[1]:
        score = OPTIMAL_GAP_SCORE
    elif ACCEPTABLE_GAP_DAYS[0] <= days <= ACCEPTABLE_GAP_DAYS[1]:
        score = ACCEPTABLE_GAP_SCORE
    else:
        score = POOR_GAP_SCORE

    return score, f"Days since last attempt: {days}"


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def subject_history(student: StudentPerformance, subject: str) -> List[ExamAttempt]:
    """Attempts in one subject, in chronological order."""
    return [attempt for attempt in student.exam_history if attempt.subject == subject]


def average_score(attempts: List[ExamAttempt]) -> float:
    if not attempts:
        return 0.0
    return sum(attempt.score for attempt in attempts) / len(attempts)


def calculate_trend(recent: List[ExamAttempt]) -> float:
    """
    Improvement between the first and last of the given attempts,
    centred on 0.5 and clamped to [0, 1].
    """
    if len(recent) < 2:
        return NEUTRAL_TREND

    improvement = recent[-1].score - recent[0].score
    return min(1.0, max(0.0, NEUTRAL_TREND + improvement / 100))


def infer_difficulty(exam: CandidateExam) -> str:
    """
    Infer difficulty from duration and total marks.
    The Hard rule is checked first, so it wins when the two signals disagree.
    """
    if _greater(exam.duration, HARD_DURATION_MINUTES) or _greater(exam.total_marks, HARD_TOTAL_MARKS):
        return Difficulty.HARD.value
    if _less(exam.duration, EASY_DURATION_MINUTES) or _less(exam.total_marks, EASY_TOTAL_MARKS):
        return Difficulty.EASY.value
    return Difficulty.MEDIUM.value


def resolve_difficulty(exam: CandidateExam) -> str:
    return exam.difficulty or infer_difficulty(exam)


def get_difficulty_level(difficulty: str) -> int:
    return DIFFICULTY_LEVEL_MAP.get(difficulty, DEFAULT_DIFFICULTY_LEVEL)


def matches_weak_area(topic: str, weak_areas: List[str]) -> bool:
    return any(_fuzzy_match(topic, weak) for weak in weak_areas)


def days_since(completed_at: datetime, now: Optional[datetime] = None) -> int:
    """Whole days elapsed since ``completed_at`` (floored, may be negative)."""
    if now is None:
        now = datetime.now(timezone.utc)
    now, completed_at = _as_utc(now), _as_utc(completed_at)
    return math.floor((now - completed_at).total_seconds() / SECONDS_PER_DAY)


def _fuzzy_match(term1: str, term2: str) -> bool:
    """Case-insensitive substring match in either direction."""
    t1 = term1.lower()
    t2 = term2.lower()
    return t1 in t2 or t2 in t1


def _as_utc(value: datetime) -> datetime:
    # Naive timestamps are taken as UTC
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value


def _greater(value: Optional[float], limit: float) -> bool:
    return value is not None and value > limit


def _less(value: Optional[float], limit: float) -> bool:
    return value is not None and value < limit
