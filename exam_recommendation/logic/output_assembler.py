"""
Output Assembler

Transforms internal scoring data into the final ExamRecommendation contract.
Derives the human-readable reasons, the priority badge and the estimated score.
"""

from typing import List

from .contracts import (
    StudentPerformance,
    CandidateExam,
    ScoredExam,
    ExamRecommendation,
)
from .dimension_scorers import (
    subject_history,
    average_score,
    calculate_trend,
    get_difficulty_level,
    matches_weak_area,
)
from .constants import (
    Priority,
    RECENT_WINDOW,
    NEUTRAL_TREND,
    HIGH_PRIORITY_THRESHOLD,
    MEDIUM_PRIORITY_THRESHOLD,
    SUBJECT_PREFERENCE_REASON_THRESHOLD,
    PERFORMANCE_HISTORY_REASON_THRESHOLD,
    WEAK_AREA_REASON_THRESHOLD,
    DIFFICULTY_REASON_THRESHOLD,
    PERFORMING_WELL_AVERAGE,
    REASON_PREFERRED_SUBJECT,
    REASON_STRONG_HISTORY,
    REASON_WEAK_AREAS,
    REASON_DIFFICULTY,
    REASON_PERFORMING_WELL,
    REASON_FALLBACK,
    NO_HISTORY_SCORE_FLOOR,
    NO_HISTORY_SCORE_PENALTY,
    TREND_SCORE_SCALE,
    DIFFICULTY_SCORE_STEP,
    DEFAULT_EXAM_DURATION,
)


def assemble_recommendation(
    student: StudentPerformance,
    scored: ScoredExam
) -> ExamRecommendation:
    """
    Convert a ScoredExam into an ExamRecommendation.

    Args:
        student: The student the exam was scored for
        scored: The scored exam

    Returns:
        ExamRecommendation object
    """
    exam = scored.exam

    return ExamRecommendation(
        exam_id=exam.id,
        title=exam.title,
        subject=exam.subject,
        difficulty=scored.difficulty,
        estimated_score=estimate_student_score(student, exam, scored.difficulty),
        confidence=scored.confidence,
        reasons=generate_reasons(student, scored),
        priority=calculate_priority(scored.confidence, student, exam),
        topics=list(exam.topics),
        estimated_duration=exam.duration or DEFAULT_EXAM_DURATION,
    )


def generate_reasons(student: StudentPerformance, scored: ScoredExam) -> List[str]:
    """
    Every applicable reason, in a fixed order.
    Falls back to a single generic reason when none apply.
    """
    subject = scored.exam.subject
    reasons: List[str] = []

    if scored.score_of("subject_preference") > SUBJECT_PREFERENCE_REASON_THRESHOLD:
        reasons.append(REASON_PREFERRED_SUBJECT.format(subject=subject))

    if scored.score_of("performance_history") > PERFORMANCE_HISTORY_REASON_THRESHOLD:
        reasons.append(REASON_STRONG_HISTORY.format(subject=subject))

    if scored.score_of("weak_area_improvement") > WEAK_AREA_REASON_THRESHOLD:
        reasons.append(REASON_WEAK_AREAS)

    if scored.score_of("difficulty_progression") > DIFFICULTY_REASON_THRESHOLD:
        reasons.append(REASON_DIFFICULTY)

    # Plain subject average, independent of the performance sub-score
    if average_score(subject_history(student, subject)) > PERFORMING_WELL_AVERAGE:
        reasons.append(REASON_PERFORMING_WELL)

    return reasons or [REASON_FALLBACK]


def calculate_priority(
    confidence: float,
    student: StudentPerformance,
    exam: CandidateExam
) -> Priority:
    weak_area_match = any(matches_weak_area(topic, student.weak_areas) for topic in exam.topics)

    if confidence > HIGH_PRIORITY_THRESHOLD or weak_area_match:
        return Priority.HIGH
    if confidence > MEDIUM_PRIORITY_THRESHOLD:
        return Priority.MEDIUM
    return Priority.LOW


def estimate_student_score(
    student: StudentPerformance,
    exam: CandidateExam,
    difficulty: str
) -> float:
    """
    Expected score on the exam.

    Without subject history this is a conservative guess from the overall
    average. Otherwise the subject average is nudged by the recent trend and
    by the difficulty (-5 for Hard up to +10 for Easy), clamped to [0, 100].
    """
    history = subject_history(student, exam.subject)

    if not history:
        return max(NO_HISTORY_SCORE_FLOOR, student.average_score - NO_HISTORY_SCORE_PENALTY)

    subject_avg = average_score(history)
    trend = calculate_trend(history[-RECENT_WINDOW:])
    adjustment = (3 - get_difficulty_level(difficulty)) * DIFFICULTY_SCORE_STEP

    estimate = subject_avg + (trend - NEUTRAL_TREND) * TREND_SCORE_SCALE + adjustment
    return min(100.0, max(0.0, estimate))
