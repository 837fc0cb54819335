"""
Achievement Catalog

Static, immutable achievement definitions. Per-user progress lives in
AchievementState objects owned by the caller.
"""

from typing import Dict, Optional, Tuple

from .contracts import AchievementDefinition, AchievementRequirement
from .constants import RequirementType, AchievementRarity, AchievementCategory


def _define(
    id: str,
    title: str,
    description: str,
    icon: str,
    category: AchievementCategory,
    rarity: AchievementRarity,
    points: int,
    requirement: RequirementType,
    target: float,
    max_progress: float,
    subject: Optional[str] = None
) -> AchievementDefinition:
    return AchievementDefinition(
        id=id,
        title=title,
        description=description,
        icon=icon,
        category=category,
        rarity=rarity,
        points=points,
        requirements=AchievementRequirement(type=requirement, target=target, subject=subject),
        max_progress=max_progress,
    )


ACHIEVEMENT_CATALOG: Tuple[AchievementDefinition, ...] = (
    # Exam count
    _define("first_exam", "First Steps", "Complete your first mock exam", "🎯",
            AchievementCategory.EXAM, AchievementRarity.COMMON, 10,
            RequirementType.EXAM_COUNT, 1, 1),
    _define("exam_warrior", "Exam Warrior", "Complete 10 mock exams", "⚔️",
            AchievementCategory.EXAM, AchievementRarity.RARE, 50,
            RequirementType.EXAM_COUNT, 10, 10),
    _define("exam_master", "Exam Master", "Complete 50 mock exams", "👑",
            AchievementCategory.EXAM, AchievementRarity.EPIC, 200,
            RequirementType.EXAM_COUNT, 50, 50),
    _define("exam_legend", "Exam Legend", "Complete 100 mock exams", "🏆",
            AchievementCategory.EXAM, AchievementRarity.LEGENDARY, 500,
            RequirementType.EXAM_COUNT, 100, 100),

    # Scores
    _define("first_perfect", "Perfect Score", "Score 100% on any exam", "💯",
            AchievementCategory.PROGRESS, AchievementRarity.RARE, 75,
            RequirementType.PERFECT, 1, 1),
    _define("high_achiever", "High Achiever", "Maintain an average score of 80% or higher", "📚",
            AchievementCategory.PROGRESS, AchievementRarity.RARE, 100,
            RequirementType.SCORE_THRESHOLD, 80, 80),
    _define("excellence_seeker", "Excellence Seeker", "Maintain an average score of 90% or higher", "⭐",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 200,
            RequirementType.SCORE_THRESHOLD, 90, 90),

    # Streaks
    _define("on_fire", "On Fire", "Complete exams for 5 days in a row", "🔥",
            AchievementCategory.STUDY, AchievementRarity.RARE, 60,
            RequirementType.STREAK, 5, 5),
    _define("unstoppable", "Unstoppable", "Complete exams for 10 days in a row", "💪",
            AchievementCategory.STUDY, AchievementRarity.EPIC, 150,
            RequirementType.STREAK, 10, 10),
    _define("dedication_master", "Dedication Master", "Complete exams for 30 days in a row", "💎",
            AchievementCategory.STUDY, AchievementRarity.LEGENDARY, 400,
            RequirementType.STREAK, 30, 30),

    # Subject mastery: target is the average score, max_progress the exam count
    _define("physics_master", "Physics Master", "Achieve 85% average in 10 Physics exams", "🧬",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 180,
            RequirementType.SUBJECT_MASTER, 85, 10, subject="Physics"),
    _define("chemistry_master", "Chemistry Master", "Achieve 85% average in 10 Chemistry exams", "⚗️",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 180,
            RequirementType.SUBJECT_MASTER, 85, 10, subject="Chemistry"),
    _define("math_master", "Mathematics Master", "Achieve 85% average in 10 Mathematics exams", "🔢",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 180,
            RequirementType.SUBJECT_MASTER, 85, 10, subject="Mathematics"),
    _define("biology_master", "Biology Master", "Achieve 85% average in 10 Biology exams", "🧪",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 180,
            RequirementType.SUBJECT_MASTER, 85, 10, subject="Biology"),

    # Speed (target is the percentage of allotted time)
    _define("speed_demon", "Speed Demon",
            "Complete an exam in under half the allotted time with 80%+ score", "⚡",
            AchievementCategory.SPECIAL, AchievementRarity.RARE, 120,
            RequirementType.SPEED, 50, 1),

    # Study time (minutes)
    _define("dedicated_learner", "Dedicated Learner", "Spend 10 hours studying", "📖",
            AchievementCategory.STUDY, AchievementRarity.RARE, 80,
            RequirementType.TIME_SPENT, 600, 600),

    # Level milestones
    _define("level_10", "Rising Star", "Reach Level 10", "🌟",
            AchievementCategory.PROGRESS, AchievementRarity.RARE, 100,
            RequirementType.MILESTONE, 10, 10),
    _define("level_25", "Skilled Practitioner", "Reach Level 25", "🎖️",
            AchievementCategory.PROGRESS, AchievementRarity.EPIC, 250,
            RequirementType.MILESTONE, 25, 25),
)


def catalog_by_id(
    definitions: Tuple[AchievementDefinition, ...] = ACHIEVEMENT_CATALOG
) -> Dict[str, AchievementDefinition]:
    return {definition.id: definition for definition in definitions}
