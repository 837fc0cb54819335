"""
Mock Data

Demo student and exam catalog used when no real data is supplied.
"""

from datetime import datetime
from typing import List

from .contracts import StudentPerformance, ExamAttempt, CandidateExam


def generate_mock_student_performance() -> StudentPerformance:
    """A student with one Physics and one Chemistry attempt."""
    return StudentPerformance(
        student_id="student-123",
        exam_history=[
            ExamAttempt(
                exam_id="exam-1",
                subject="Physics",
                score=78,
                time_taken=120,
                difficulty="Medium",
                topics=["Mechanics", "Thermodynamics"],
                completed_at=datetime(2024, 1, 15),
            ),
            ExamAttempt(
                exam_id="exam-2",
                subject="Chemistry",
                score=65,
                time_taken=90,
                difficulty="Easy",
                topics=["Organic Chemistry", "Reactions"],
                completed_at=datetime(2024, 1, 20),
            ),
        ],
        preferred_subjects=["Physics", "Mathematics", "Chemistry"],
        weak_areas=["Organic Chemistry", "Complex Numbers"],
        strong_areas=["Mechanics", "Algebra"],
        average_score=72,
        study_pattern="Evening",
    )


def generate_mock_exams(count: int = 4) -> List[CandidateExam]:
    """
    Generate mock catalog exams for testing without a real catalog.

    Args:
        count: Number of mock exams to return (at most 4)
    """
    mock_data = [
        ("rec-1", "Advanced Physics Mock Test", "Physics", "Hard", 180, 300,
         ["Mechanics", "Thermodynamics", "Electromagnetism"]),
        ("rec-2", "Chemistry Fundamentals Assessment", "Chemistry", "Medium", 120, 200,
         ["Organic Chemistry", "Physical Chemistry"]),
        ("rec-3", "Mathematics Problem Solving", "Mathematics", "Medium", 150, 250,
         ["Calculus", "Algebra"]),
        ("rec-4", "Biology Comprehensive Test", "Biology", "Easy", 90, 150,
         ["Cell Biology", "Genetics"]),
    ]

    return [
        CandidateExam(
            id=exam_id,
            title=title,
            subject=subject,
            difficulty=difficulty,
            duration=duration,
            total_marks=total_marks,
            topics=topics,
        )
        for exam_id, title, subject, difficulty, duration, total_marks, topics in mock_data[:count]
    ]
