"""
Recommendation API Routes

Exposes the exam recommendation engine and achievement scoring via REST API.
No scoring happens here: handlers validate input, call the engine and
serialize the result.
"""

import logging
from datetime import datetime
from typing import Optional, List, Dict, Any

from fastapi import APIRouter, HTTPException, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field, ValidationError

from .config import load_settings
from .logic.contracts import StudentPerformance, CandidateExam
from .logic.engine import RecommendationEngine
from .logic.mock_data import generate_mock_student_performance
from .achievements.contracts import UserStats, AchievementState
from .achievements.evaluator import (
    evaluate_achievements,
    calculate_user_level,
    get_unlocked_badges,
    get_in_progress_achievements,
)

logger = logging.getLogger(__name__)

settings = load_settings()
engine = RecommendationEngine(settings.weight_overrides)

router = APIRouter(prefix="/recommendations", tags=["recommendations"])


# =============================================================================
# REQUEST/RESPONSE SCHEMAS
# =============================================================================

class RecommendationRequest(BaseModel):
    """Request body for the recommendations endpoint."""
    student_performance: Optional[Dict[str, Any]] = Field(
        default=None,
        description="Student performance record; the mock student is used when omitted",
    )
    exams: Optional[List[Dict[str, Any]]] = Field(
        default=None,
        description="Candidate exams; the mock catalog is used when omitted",
    )
    limit: int = Field(
        default=settings.default_limit,
        description="Max recommendations to return"
    )
    use_mock: bool = Field(
        default=False,
        description="Ignore supplied exams and use the mock catalog"
    )
    now: Optional[datetime] = Field(
        default=None,
        description="Reference time for recency scoring (defaults to now)"
    )


class ScoreExamRequest(BaseModel):
    student_performance: Dict[str, Any]
    exam: Dict[str, Any]
    now: Optional[datetime] = None


class StudyPlanRequest(BaseModel):
    student_performance: Dict[str, Any]
    timeframe_days: int = Field(..., description="Length of the plan in days")
    exams: Optional[List[Dict[str, Any]]] = None
    limit: int = settings.default_limit
    now: Optional[datetime] = None


class AchievementRequest(BaseModel):
    stats: Dict[str, Any]
    states: Dict[str, Dict[str, Any]] = Field(
        default_factory=dict,
        description="Previously persisted achievement states keyed by id"
    )
    now: Optional[datetime] = None


# =============================================================================
# ENDPOINTS
# =============================================================================

@router.post("", summary="Get exam recommendations")
@router.post("/", summary="Get exam recommendations", include_in_schema=False)
def get_recommendations(request: RecommendationRequest):
    """
    Generate ranked exam recommendations for a student.

    **Response:**
    - Recommendations sorted by confidence, each with reasons, priority
      and an estimated score
    """
    try:
        try:
            student = _parse_student(request.student_performance)
            exams = _parse_exams(request.exams)
        except ValidationError as e:
            raise HTTPException(status_code=400, detail=f"Invalid request: {e}")

        recommendations = engine.recommend(
            student,
            exams,
            limit=request.limit,
            use_mock=request.use_mock,
            now=request.now,
        )
        return {
            "student_id": student.student_id,
            "recommendations": [r.model_dump(mode="json") for r in recommendations],
            "count": len(recommendations),
            "engine_version": engine.version,
        }

    except HTTPException:
        raise
    except Exception as e:
        logger.exception("Recommendation request failed")
        return JSONResponse(status_code=500, content={"error": str(e)})


@router.post("/score", summary="Score a single exam for a student")
def score_exam(request: ScoreExamRequest):
    try:
        student = StudentPerformance(**request.student_performance)
        exam = CandidateExam(**request.exam)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid request: {e}")

    return engine.score_single_exam(student, exam, now=request.now)


@router.post("/study-plan", summary="Build a weekly study plan")
def study_plan(request: StudyPlanRequest):
    try:
        student = StudentPerformance(**request.student_performance)
        exams = _parse_exams(request.exams)
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid request: {e}")

    plan = engine.generate_study_plan(
        student,
        request.timeframe_days,
        exams=exams,
        limit=request.limit,
        now=request.now,
    )
    return {"weeks": [week.model_dump(mode="json") for week in plan]}


@router.post("/achievements/evaluate", summary="Evaluate achievements against user stats")
def evaluate(request: AchievementRequest):
    try:
        stats = UserStats(**request.stats)
        states = {
            achievement_id: AchievementState(**{**state, "achievement_id": achievement_id})
            for achievement_id, state in request.states.items()
        }
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=f"Invalid request: {e}")

    evaluation = evaluate_achievements(stats, states, now=request.now)
    return {
        "newly_unlocked": [s.model_dump(mode="json") for s in evaluation.newly_unlocked],
        "states": {k: s.model_dump(mode="json") for k, s in evaluation.states.items()},
        "badges": [b.model_dump(mode="json") for b in get_unlocked_badges(evaluation.states)],
        "in_progress": [d.id for d in get_in_progress_achievements(evaluation.states)],
        "level": calculate_user_level(stats.total_points).model_dump(),
    }


@router.get("/achievements/level", summary="Level for a points total")
def level(total_points: int = Query(..., ge=0)):
    return calculate_user_level(total_points).model_dump()


def _parse_student(data: Optional[Dict[str, Any]]) -> StudentPerformance:
    if data is None:
        return generate_mock_student_performance()
    return StudentPerformance(**data)


def _parse_exams(data: Optional[List[Dict[str, Any]]]) -> Optional[List[CandidateExam]]:
    if data is None:
        return None
    return [CandidateExam(**exam) for exam in data]


# =============================================================================
# HEALTH CHECK
# =============================================================================

@router.get("/health", summary="Recommendation engine health check")
def health_check():
    """Check if recommendation engine is operational."""
    return {"status": "ok", "engine": "exam_recommendation", "version": engine.version}
