"""
Builders for test inputs.
"""

from datetime import datetime, timedelta, timezone

from exam_recommendation.logic import ExamAttempt, StudentPerformance, CandidateExam

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)


def make_attempt(subject, score, days_ago=3, difficulty="Medium", topics=None, exam_id=None):
    return ExamAttempt(
        exam_id=exam_id or f"{subject.lower()}-{score}-{days_ago}",
        subject=subject,
        score=score,
        time_taken=60,
        difficulty=difficulty,
        topics=topics or [],
        completed_at=NOW - timedelta(days=days_ago),
    )


def make_student(history=None, preferred=None, weak=None, strong=None, average=75):
    return StudentPerformance(
        student_id="student-test",
        exam_history=history or [],
        preferred_subjects=preferred or [],
        weak_areas=weak or [],
        strong_areas=strong or [],
        average_score=average,
        study_pattern="Evening",
    )


def make_exam(exam_id="exam", subject="Physics", **kwargs):
    return CandidateExam(id=exam_id, title=f"{subject} Mock", subject=subject, **kwargs)
