"""
Achievement Scoring Module

Pure progress/unlock evaluation over a stats snapshot, plus the level curve.
"""

from .contracts import (
    AchievementDefinition,
    AchievementRequirement,
    AchievementState,
    AchievementEvaluation,
    UserStats,
    SubjectMastery,
    LevelInfo,
    Badge,
)
from .catalog import ACHIEVEMENT_CATALOG
from .constants import RequirementType, AchievementRarity, AchievementCategory
from .evaluator import (
    calculate_achievement_progress,
    evaluate_achievements,
    calculate_user_level,
    get_unlocked_badges,
    get_in_progress_achievements,
)
from .mock_data import generate_mock_user_stats

__all__ = [
    # Catalog
    "ACHIEVEMENT_CATALOG",

    # Evaluation
    "calculate_achievement_progress",
    "evaluate_achievements",
    "calculate_user_level",
    "get_unlocked_badges",
    "get_in_progress_achievements",

    # Contracts
    "AchievementDefinition",
    "AchievementRequirement",
    "AchievementState",
    "AchievementEvaluation",
    "UserStats",
    "SubjectMastery",
    "LevelInfo",
    "Badge",

    # Enums
    "RequirementType",
    "AchievementRarity",
    "AchievementCategory",

    # Mock data
    "generate_mock_user_stats",
]
