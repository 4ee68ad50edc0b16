"""Character advancement: experience thresholds, levels and proficiency bonus."""

from dataclasses import dataclass
from typing import Tuple
from ..errors import RulesInvariantError


EFFECTIVE_LEVEL_MIN = 1
EFFECTIVE_LEVEL_MAX = 20
DEFAULT_PROFICIENCY_BONUS = 1


@dataclass(frozen=True)
class AdvancementEntry:
    """One row of the character advancement table."""

    required_experience_points: int
    level: int
    proficiency_bonus: int


ADVANCEMENT_TABLE: Tuple[AdvancementEntry, ...] = (
    AdvancementEntry(required_experience_points=0,      level=1,  proficiency_bonus=2),
    AdvancementEntry(required_experience_points=300,    level=2,  proficiency_bonus=2),
    AdvancementEntry(required_experience_points=900,    level=3,  proficiency_bonus=2),
    AdvancementEntry(required_experience_points=2700,   level=4,  proficiency_bonus=2),
    AdvancementEntry(required_experience_points=6500,   level=5,  proficiency_bonus=3),
    AdvancementEntry(required_experience_points=14000,  level=6,  proficiency_bonus=3),
    AdvancementEntry(required_experience_points=23000,  level=7,  proficiency_bonus=3),
    AdvancementEntry(required_experience_points=34000,  level=8,  proficiency_bonus=3),
    AdvancementEntry(required_experience_points=48000,  level=9,  proficiency_bonus=4),
    AdvancementEntry(required_experience_points=64000,  level=10, proficiency_bonus=4),
    AdvancementEntry(required_experience_points=85000,  level=11, proficiency_bonus=4),
    AdvancementEntry(required_experience_points=100000, level=12, proficiency_bonus=4),
    AdvancementEntry(required_experience_points=120000, level=13, proficiency_bonus=5),
    AdvancementEntry(required_experience_points=140000, level=14, proficiency_bonus=5),
    AdvancementEntry(required_experience_points=165000, level=15, proficiency_bonus=5),
    AdvancementEntry(required_experience_points=195000, level=16, proficiency_bonus=5),
    AdvancementEntry(required_experience_points=225000, level=17, proficiency_bonus=6),
    AdvancementEntry(required_experience_points=265000, level=18, proficiency_bonus=6),
    AdvancementEntry(required_experience_points=305000, level=19, proficiency_bonus=6),
    AdvancementEntry(required_experience_points=355000, level=20, proficiency_bonus=6),
)


def level_for_experience(
    experience_points: int,
    table: Tuple[AdvancementEntry, ...] = ADVANCEMENT_TABLE
) -> int:
    """Level reached with the given experience points."""
    level = EFFECTIVE_LEVEL_MIN
    for entry in table:
        if experience_points >= entry.required_experience_points:
            level = entry.level

    if not EFFECTIVE_LEVEL_MIN <= level <= EFFECTIVE_LEVEL_MAX:
        raise RulesInvariantError(
            f"Level {level} is outside [{EFFECTIVE_LEVEL_MIN}, {EFFECTIVE_LEVEL_MAX}]"
        )
    return level


def proficiency_bonus_for_experience(
    experience_points: int,
    table: Tuple[AdvancementEntry, ...] = ADVANCEMENT_TABLE
) -> int:
    """Proficiency bonus granted at the given experience points.

    Falls back to a bonus of 1 when no table entry qualifies, which the
    standard table (starting at 0 XP) never triggers.
    """
    bonus = DEFAULT_PROFICIENCY_BONUS
    for entry in table:
        if experience_points >= entry.required_experience_points:
            bonus = entry.proficiency_bonus
    return bonus


def experience_required_for_next_level(
    experience_points: int,
    table: Tuple[AdvancementEntry, ...] = ADVANCEMENT_TABLE
) -> int:
    """Experience points still needed to reach the next level; 0 at the cap."""
    for entry in table:
        if experience_points < entry.required_experience_points:
            return entry.required_experience_points - experience_points
    return 0
