"""Character, race and armor documents, plus character creation."""

import logging
from typing import Dict, List, Optional

from pydantic import BaseModel

from .record_manager import RecordManager
from ..catalog import character_class
from ..models.abilities import EFFECTIVE_ABILITY_SCORE_MAX, INITIAL_ABILITY_SCORE, CharacterAbilities
from ..models.base import Ability, ClassType
from ..models.character import Character, RaceInfo
from ..models.currency import Denomination
from ..models.equipment import Armor


logger = logging.getLogger(__name__)


class CharacterSummary(BaseModel):
    """Summary information about a character."""
    name: str
    race: str
    classes: List[str]
    level: int
    experience_points: int
    experience_to_next_level: int
    proficiency_bonus: int
    max_hit_points: int
    roll_hit_points: bool
    wealth_gp: float


class CharacterManager(RecordManager[Character]):
    """Manages character documents and builds new characters."""

    record_type = Character
    default_filename = "characters.json"

    def create_character(
        self,
        name: str,
        race_info: RaceInfo,
        class_type: ClassType,
        scores: Optional[Dict[Ability, int]] = None,
        **kwargs
    ) -> Character:
        """Create a level 1 character from racial defaults.

        Racial ability modifiers are added to the given base scores and
        capped at the maximum ability score.

        Args:
            name: Character name
            race_info: Racial defaults to copy
            class_type: Starting class
            scores: Base ability scores; missing abilities start at 10
            **kwargs: Additional character attributes

        Returns:
            New character instance
        """
        adjusted = {ability: INITIAL_ABILITY_SCORE for ability in Ability}
        adjusted.update(scores or {})
        for race_trait in race_info.traits:
            for modifier in race_trait.ability_modifiers:
                increase = modifier.get_value()
                adjusted[increase.ability] = min(
                    adjusted[increase.ability] + increase.amount,
                    EFFECTIVE_ABILITY_SCORE_MAX
                )

        character = Character(
            name=name,
            race=race_info.race,
            age=race_info.age,
            classes=[character_class(class_type)],
            alignment=race_info.alignment,
            size=race_info.size,
            speed=race_info.speed,
            languages=list(race_info.languages),
            ability_scores=CharacterAbilities.from_scores(adjusted),
            traits=list(race_info.traits),
            roll_hit_points=True,
            **kwargs
        )
        logger.info(f"Created {race_info.race.value} {class_type.value} '{name}'")
        return character

    def get_character_summary(self, character: Character) -> CharacterSummary:
        """Get a summary of character information."""
        return CharacterSummary(
            name=character.name,
            race=character.race.value,
            classes=[c.class_type.value for c in character.classes],
            level=character.level,
            experience_points=character.experience_points,
            experience_to_next_level=character.experience_to_next_level,
            proficiency_bonus=character.proficiency_bonus,
            max_hit_points=character.max_hit_points,
            roll_hit_points=character.roll_hit_points,
            wealth_gp=character.wealth.total.in_denomination(Denomination.GOLD)
        )


class RaceManager(RecordManager[RaceInfo]):
    """Manages race documents."""

    record_type = RaceInfo
    default_filename = "races.json"


class ArmorManager(RecordManager[Armor]):
    """Manages armor documents."""

    record_type = Armor
    default_filename = "armor.json"
