"""Die rolls for hit points."""

from __future__ import annotations
import logging
import random
from typing import Optional

from pydantic import BaseModel, Field

from .models.character import Character, Die

log = logging.getLogger(__name__)

MIN_HIT_POINTS_PER_LEVEL = 1


class RollResult(BaseModel):
    minimum: int = Field(..., description="Lowest possible result (inclusive).")
    maximum: int = Field(..., description="Upper bound of the roll (exclusive).")
    roll: int = Field(..., description="The rolled value, in [minimum, maximum).")


def roll_die(die: Die, rng: Optional[random.Random] = None) -> RollResult:
    """
    Roll a die once, uniformly over [die.min, die.max).
    Pass a seeded ``random.Random`` for repeatable results.
    """
    rng = rng or random.Random()
    value = rng.randrange(die.min, die.max)
    log.debug("roll_die: rolled [%s, %s) -> %s", die.min, die.max, value)
    return RollResult(minimum=die.min, maximum=die.max, roll=value)


def roll_pending_hit_points(character: Character, rng: Optional[random.Random] = None) -> int:
    """
    Fill in hit points for every level without a recorded value and clear
    the pending-roll flag. Returns the character's new maximum hit points.
    """
    features = character.primary_class.features if character.primary_class else None
    if features is None:
        raise ValueError(f"{character.name} has no class to roll hit points for")

    con_modifier = character.ability_scores.con_modifier
    for level in range(1, character.level + 1):
        if level in character.hit_points_by_level:
            continue
        if level == 1:
            base = features.hit_points_starting
        else:
            base = roll_die(features.hit_points_from_level, rng).roll
        gained = max(MIN_HIT_POINTS_PER_LEVEL, base + con_modifier)
        character.hit_points_by_level[level] = gained
        log.info("%s gains %d hit points at level %d", character.name, gained, level)

    character.roll_hit_points = False
    return character.max_hit_points
