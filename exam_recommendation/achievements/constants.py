"""
Achievement Constants

Requirement types, rarity/category enums and the level curve parameters.
"""

from enum import Enum


class RequirementType(str, Enum):
    """What a requirement's progress is measured against."""
    EXAM_COUNT = "exam_count"
    SCORE_THRESHOLD = "score_threshold"
    STREAK = "streak"
    SPEED = "speed"  # Defined in the catalog but never progresses
    PERFECT = "perfect"
    SUBJECT_MASTER = "subject_master"
    TIME_SPENT = "time_spent"
    MILESTONE = "milestone"


class AchievementRarity(str, Enum):
    COMMON = "common"
    RARE = "rare"
    EPIC = "epic"
    LEGENDARY = "legendary"


class AchievementCategory(str, Enum):
    EXAM = "exam"
    STUDY = "study"
    PROGRESS = "progress"
    SOCIAL = "social"
    SPECIAL = "special"


# Exams needed in a subject before subject mastery can unlock
SUBJECT_MASTER_MIN_EXAMS = 10

# level = floor(sqrt(points / XP_PER_LEVEL_UNIT)) + 1
XP_PER_LEVEL_UNIT = 100
