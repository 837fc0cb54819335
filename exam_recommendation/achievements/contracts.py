"""
Data Contracts for Achievement Scoring

Definitions are static catalog data; states are what callers persist and
pass back in. Nothing here is mutated after construction.
"""

from datetime import datetime
from typing import Dict, List, Optional
from pydantic import BaseModel, Field

from .constants import RequirementType, AchievementRarity, AchievementCategory


# =============================================================================
# CATALOG
# =============================================================================

class AchievementRequirement(BaseModel):
    type: RequirementType
    target: float
    subject: Optional[str] = None

    class Config:
        use_enum_values = True
        frozen = True


class AchievementDefinition(BaseModel):
    """A single achievement in the catalog."""
    id: str
    title: str
    description: str
    icon: str = ""
    category: AchievementCategory
    rarity: AchievementRarity
    points: int
    requirements: AchievementRequirement
    max_progress: float

    class Config:
        use_enum_values = True
        frozen = True


# =============================================================================
# INPUT CONTRACTS
# =============================================================================

class SubjectMastery(BaseModel):
    exams: int = 0
    avg_score: float = 0.0
    best_score: float = 0.0


class UserStats(BaseModel):
    """Snapshot of a user's totals at evaluation time."""
    total_exams_completed: int = 0
    average_score: float = 0.0
    current_streak: int = 0
    best_streak: int = 0
    total_study_time: float = 0  # minutes
    perfect_scores: int = 0
    subject_mastery: Dict[str, SubjectMastery] = Field(default_factory=dict)
    total_points: int = 0
    level: int = 1
    experience_points: int = 0
    experience_to_next_level: int = 0


class AchievementState(BaseModel):
    """Per-user progress on one achievement."""
    achievement_id: str
    progress: float = 0.0
    unlocked: bool = False
    unlocked_at: Optional[datetime] = None

    class Config:
        frozen = True


# =============================================================================
# OUTPUT CONTRACTS
# =============================================================================

class AchievementEvaluation(BaseModel):
    """
    Result of evaluating the catalog against a stats snapshot.

    ``states`` holds the full updated state for every achievement;
    ``newly_unlocked`` lists only those that crossed their target in this call.
    """
    newly_unlocked: List[AchievementState] = Field(default_factory=list)
    states: Dict[str, AchievementState] = Field(default_factory=dict)


class LevelInfo(BaseModel):
    level: int
    current_level_xp: int   # XP at which the current level starts
    next_level_xp: int      # XP at which the next level starts
    xp_into_level: int
    xp_to_next_level: int


class Badge(BaseModel):
    achievement_id: str
    title: str
    icon: str
    rarity: str
    unlocked_at: datetime
    points: int
