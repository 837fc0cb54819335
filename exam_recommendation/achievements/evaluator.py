"""
Achievement Evaluator

Pure functions over a UserStats snapshot:
- progress for each achievement, dispatched on requirement type
- unlock detection, returning new states instead of mutating the catalog
- the level curve and badge views
"""

import logging
import math
from datetime import datetime, timezone
from typing import Dict, List, Optional, Sequence

from .catalog import ACHIEVEMENT_CATALOG, catalog_by_id
from .contracts import (
    AchievementDefinition,
    AchievementState,
    AchievementEvaluation,
    UserStats,
    LevelInfo,
    Badge,
)
from .constants import RequirementType, SUBJECT_MASTER_MIN_EXAMS, XP_PER_LEVEL_UNIT

logger = logging.getLogger(__name__)


def calculate_achievement_progress(
    definition: AchievementDefinition,
    stats: UserStats
) -> float:
    """
    Raw progress of one achievement (before capping at max_progress).
    """
    requirement = definition.requirements
    req_type = requirement.type

    if req_type == RequirementType.EXAM_COUNT:
        return stats.total_exams_completed
    if req_type == RequirementType.SCORE_THRESHOLD:
        return stats.average_score
    if req_type == RequirementType.STREAK:
        return stats.current_streak
    if req_type == RequirementType.PERFECT:
        return stats.perfect_scores
    if req_type == RequirementType.SUBJECT_MASTER:
        mastery = stats.subject_mastery.get(requirement.subject) if requirement.subject else None
        if mastery is None:
            return 0
        if mastery.exams >= SUBJECT_MASTER_MIN_EXAMS and mastery.avg_score >= requirement.target:
            return requirement.target
        return min(mastery.avg_score, requirement.target)
    if req_type == RequirementType.TIME_SPENT:
        return stats.total_study_time
    if req_type == RequirementType.MILESTONE:
        return stats.level
    # SPEED needs per-exam timing data that UserStats does not carry
    return 0


def evaluate_achievements(
    stats: UserStats,
    states: Optional[Dict[str, AchievementState]] = None,
    definitions: Sequence[AchievementDefinition] = ACHIEVEMENT_CATALOG,
    now: Optional[datetime] = None
) -> AchievementEvaluation:
    """
    Recompute progress for every locked achievement and unlock those that
    reached their target.

    Args:
        stats: Current stats snapshot
        states: Previously persisted states keyed by achievement id
        definitions: Catalog to evaluate
        now: Unlock timestamp (defaults to current UTC time)

    Returns:
        AchievementEvaluation with the updated state map and the new unlocks.
        The inputs are left untouched.
    """
    states = states or {}
    now = now or datetime.now(timezone.utc)

    updated: Dict[str, AchievementState] = {}
    newly_unlocked: List[AchievementState] = []

    for definition in definitions:
        previous = states.get(definition.id)
        if previous is not None and previous.unlocked:
            updated[definition.id] = previous
            continue

        raw_progress = calculate_achievement_progress(definition, stats)
        unlocked = raw_progress >= definition.requirements.target

        state = AchievementState(
            achievement_id=definition.id,
            progress=min(raw_progress, definition.max_progress),
            unlocked=unlocked,
            unlocked_at=now if unlocked else None,
        )
        updated[definition.id] = state

        if unlocked:
            newly_unlocked.append(state)

    if newly_unlocked:
        logger.info(f"Unlocked achievements: {[s.achievement_id for s in newly_unlocked]}")

    return AchievementEvaluation(newly_unlocked=newly_unlocked, states=updated)


def calculate_user_level(total_points: float) -> LevelInfo:
    """
    Level curve: level = floor(sqrt(points / 100)) + 1.
    Level n starts at (n - 1)^2 * 100 XP.
    """
    points = max(0, total_points)
    level = math.floor(math.sqrt(points / XP_PER_LEVEL_UNIT)) + 1
    current_level_xp = (level - 1) ** 2 * XP_PER_LEVEL_UNIT
    next_level_xp = level ** 2 * XP_PER_LEVEL_UNIT

    return LevelInfo(
        level=level,
        current_level_xp=current_level_xp,
        next_level_xp=next_level_xp,
        xp_into_level=int(points - current_level_xp),
        xp_to_next_level=int(next_level_xp - points),
    )


def get_unlocked_badges(
    states: Dict[str, AchievementState],
    definitions: Sequence[AchievementDefinition] = ACHIEVEMENT_CATALOG
) -> List[Badge]:
    """Badges for unlocked achievements, most recent first."""
    by_id = catalog_by_id(tuple(definitions))
    badges = [
        Badge(
            achievement_id=state.achievement_id,
            title=by_id[state.achievement_id].title,
            icon=by_id[state.achievement_id].icon,
            rarity=by_id[state.achievement_id].rarity,
            unlocked_at=state.unlocked_at,
            points=by_id[state.achievement_id].points,
        )
        for state in states.values()
        if state.unlocked and state.unlocked_at is not None and state.achievement_id in by_id
    ]
    return sorted(badges, key=lambda b: b.unlocked_at, reverse=True)


def get_in_progress_achievements(
    states: Dict[str, AchievementState],
    definitions: Sequence[AchievementDefinition] = ACHIEVEMENT_CATALOG
) -> List[AchievementDefinition]:
    """Locked achievements with some progress, in catalog order."""
    return [
        definition
        for definition in definitions
        if definition.id in states
        and not states[definition.id].unlocked
        and states[definition.id].progress > 0
    ]
