"""Character model with advancement and derived statistics."""

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Any, Tuple
from .base import Ability, Alignment, ClassType, Language, Race, Size
from .abilities import AbilityScore, CharacterAbilities
from .currency import Wealth
from .traits import Trait
from ..rules.advancement import (
    EFFECTIVE_LEVEL_MAX,
    EFFECTIVE_LEVEL_MIN,
    experience_required_for_next_level,
    level_for_experience,
    proficiency_bonus_for_experience,
)
from ..rules.spell_slots import slots_for_spell_level


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Die:
    """A die rolled over the half-open range [min, max)."""

    min: int
    max: int

    def __post_init__(self):
        """Validate the range is not empty."""
        if self.min >= self.max:
            raise ValueError(f"Die range [{self.min}, {self.max}) is empty")

    @classmethod
    def with_faces(cls, faces: int) -> 'Die':
        """A standard die numbered 1 through faces."""
        return cls(min=1, max=faces + 1)

    @property
    def faces(self) -> int:
        """Number of distinct results."""
        return self.max - self.min

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'min': self.min, 'max': self.max}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Die':
        """Create from dictionary."""
        return cls(**data)


@dataclass(frozen=True)
class ClassFeatures:
    """Hit point progression of a class."""

    hit_dice: Die
    hit_points_starting: int
    hit_points_from_level: Die

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'hit_dice': self.hit_dice.to_dict(),
            'hit_points_starting': self.hit_points_starting,
            'hit_points_from_level': self.hit_points_from_level.to_dict()
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ClassFeatures':
        """Create from dictionary."""
        return cls(
            hit_dice=Die.from_dict(data['hit_dice']),
            hit_points_starting=data['hit_points_starting'],
            hit_points_from_level=Die.from_dict(data['hit_points_from_level'])
        )


@dataclass(frozen=True)
class CharacterClass:
    """A class taken by a character."""

    class_type: ClassType
    features: ClassFeatures

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'class_type': self.class_type.value, 'features': self.features.to_dict()}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CharacterClass':
        """Create from dictionary."""
        return cls(
            class_type=ClassType(data['class_type']),
            features=ClassFeatures.from_dict(data['features'])
        )


@dataclass(frozen=True)
class RaceInfo:
    """Racial defaults applied to a new character."""

    race: Race
    age: int
    alignment: Alignment
    size: Size
    speed: int
    languages: Tuple[Language, ...] = ()
    traits: Tuple[Trait, ...] = ()

    def __post_init__(self):
        """Store languages and traits as tuples."""
        object.__setattr__(self, 'languages', tuple(self.languages))
        object.__setattr__(self, 'traits', tuple(self.traits))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'race': self.race.value,
            'age': self.age,
            'alignment': self.alignment.value,
            'size': self.size.value,
            'speed': self.speed,
            'languages': [language.value for language in self.languages],
            'traits': [t.to_dict() for t in self.traits]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RaceInfo':
        """Create from dictionary."""
        return cls(
            race=Race(data['race']),
            age=data['age'],
            alignment=Alignment(data['alignment']),
            size=Size(data['size']),
            speed=data['speed'],
            languages=tuple(Language(language) for language in data['languages']),
            traits=tuple(Trait.from_dict(t) for t in data['traits'])
        )


class LevelTransition(Enum):
    """Outcome of reconciling a character's level with its experience."""
    AT_TARGET = "at_target"
    LEVELED_UP = "leveled_up"
    OVER_LEVELED = "over_leveled"


@dataclass
class Character:
    """A player character.

    ``level`` is stored rather than derived: it only moves when
    :meth:`gain_level` is called after experience changes.
    """

    name: str
    race: Race
    age: int = 0
    classes: List[CharacterClass] = field(default_factory=list)
    alignment: Alignment = Alignment.NEUTRAL
    size: Size = Size.MEDIUM
    speed: int = 30
    languages: List[Language] = field(default_factory=lambda: [Language.COMMON])
    experience_points: int = 0
    level: int = 1
    ability_scores: CharacterAbilities = field(
        default_factory=lambda: CharacterAbilities.from_scores({})
    )
    traits: List[Trait] = field(default_factory=list)
    roll_hit_points: bool = False
    wealth: Wealth = field(default_factory=Wealth)
    hit_points_by_level: Dict[int, int] = field(default_factory=dict)
    pending_class_feature_levels: List[int] = field(default_factory=list)

    def __post_init__(self):
        """Validate level and experience."""
        if not EFFECTIVE_LEVEL_MIN <= self.level <= EFFECTIVE_LEVEL_MAX:
            raise ValueError(
                f"Level must be between {EFFECTIVE_LEVEL_MIN} and {EFFECTIVE_LEVEL_MAX}, "
                f"got {self.level}"
            )
        if self.experience_points < 0:
            raise ValueError(f"Experience points cannot be negative, got {self.experience_points}")

    @property
    def primary_class(self) -> Optional[CharacterClass]:
        """The first class the character took."""
        return self.classes[0] if self.classes else None

    def has_class(self, class_type: ClassType) -> bool:
        """Check if the character has levels in a class."""
        return any(c.class_type == class_type for c in self.classes)

    def get_ability_score(self, ability: Ability) -> AbilityScore:
        """Get the full ability score entry."""
        return self.ability_scores[ability]

    @property
    def current_level(self) -> int:
        """Level the character's experience qualifies for."""
        return level_for_experience(self.experience_points)

    @property
    def proficiency_bonus(self) -> int:
        """Proficiency bonus from experience."""
        return proficiency_bonus_for_experience(self.experience_points)

    @property
    def experience_to_next_level(self) -> int:
        """Experience points still needed for the next level."""
        return experience_required_for_next_level(self.experience_points)

    @property
    def max_hit_points(self) -> int:
        """Sum of the hit points gained at every rolled level."""
        return sum(self.hit_points_by_level.values())

    def spell_slot_count(self, class_type: ClassType, spell_level: int) -> int:
        """Spell slots of a spell level granted by one of the character's classes."""
        if not self.has_class(class_type):
            raise ValueError(f"{self.name} has no levels in {class_type.name.title()}")
        return slots_for_spell_level(class_type, self.level, spell_level)

    def award_experience(self, points: int) -> None:
        """Add experience points; call :meth:`gain_level` afterwards to level up."""
        if points < 0:
            raise ValueError(f"Cannot award negative experience, got {points}")
        self.experience_points += points
        logger.debug("%s awarded %d XP (total %d)", self.name, points, self.experience_points)

    def gain_level(self) -> LevelTransition:
        """Bring the stored level up to the level earned by experience."""
        target_level = self.current_level

        if self.level < target_level:
            while self.level != target_level:
                self.roll_hit_points = True
                self.level += 1
                self.add_class_features_for_level(self.level)
                logger.info("%s reached level %d", self.name, self.level)
            return LevelTransition.LEVELED_UP

        if self.level > target_level:
            # No rule exists for reclaiming features, so the level is left as is.
            logger.warning(
                "%s is level %d but experience only supports level %d",
                self.name, self.level, target_level
            )
            return LevelTransition.OVER_LEVELED

        return LevelTransition.AT_TARGET

    def add_class_features_for_level(self, level: int) -> None:
        """Record that class features for a level are still to be granted.

        No per-level class feature content exists yet, so nothing is applied.
        """
        if level not in self.pending_class_feature_levels:
            self.pending_class_feature_levels.append(level)
        logger.debug("Class features for level %d of %s are pending", level, self.name)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            'name': self.name,
            'race': self.race.value,
            'age': self.age,
            'classes': [c.to_dict() for c in self.classes],
            'alignment': self.alignment.value,
            'size': self.size.value,
            'speed': self.speed,
            'languages': [language.value for language in self.languages],
            'experience_points': self.experience_points,
            'level': self.level,
            'ability_scores': [entry.to_dict() for entry in self.ability_scores],
            'traits': [t.to_dict() for t in self.traits],
            'roll_hit_points': self.roll_hit_points,
            'wealth': self.wealth.to_dict(),
            'hit_points_by_level': {
                str(level): hit_points for level, hit_points in self.hit_points_by_level.items()
            },
            'pending_class_feature_levels': list(self.pending_class_feature_levels)
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Character':
        """Create from dictionary."""
        return cls(
            name=data['name'],
            race=Race(data['race']),
            age=data['age'],
            classes=[CharacterClass.from_dict(c) for c in data['classes']],
            alignment=Alignment(data['alignment']),
            size=Size(data['size']),
            speed=data['speed'],
            languages=[Language(language) for language in data['languages']],
            experience_points=data['experience_points'],
            level=data['level'],
            ability_scores=CharacterAbilities(
                [AbilityScore.from_dict(entry) for entry in data['ability_scores']]
            ),
            traits=[Trait.from_dict(t) for t in data['traits']],
            roll_hit_points=data['roll_hit_points'],
            wealth=Wealth.from_dict(data['wealth']),
            # JSON object keys are strings
            hit_points_by_level={
                int(level): hit_points for level, hit_points in data['hit_points_by_level'].items()
            },
            pending_class_feature_levels=list(data['pending_class_feature_levels'])
        )
