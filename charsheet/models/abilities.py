"""Ability scores and modifiers for characters."""

import math
from dataclasses import dataclass
from typing import Dict, Any, Iterator, Sequence
from .base import Ability
from ..errors import RulesInvariantError


EFFECTIVE_ABILITY_SCORE_MIN = 0
EFFECTIVE_ABILITY_SCORE_MAX = 30
INITIAL_ABILITY_SCORE = 10
MIN_ABILITY_MODIFIER = -5
MAX_ABILITY_MODIFIER = 10


def derive_ability_modifier(score: int) -> int:
    """Derive the ability modifier for a raw ability score.

    The input is not range checked; the resulting modifier must fall
    within [-5, 10].
    """
    modifier = math.floor((score - INITIAL_ABILITY_SCORE) / 2.0)
    if not MIN_ABILITY_MODIFIER <= modifier <= MAX_ABILITY_MODIFIER:
        raise RulesInvariantError(
            f"Ability modifier {modifier} for score {score} is outside "
            f"[{MIN_ABILITY_MODIFIER}, {MAX_ABILITY_MODIFIER}]"
        )
    return modifier


@dataclass(frozen=True)
class AbilityScore:
    """A single ability score and its derived modifier."""

    ability: Ability
    score: int = INITIAL_ABILITY_SCORE
    modifier: int = 0

    def __post_init__(self):
        """Validate the score range and the stored modifier."""
        if not EFFECTIVE_ABILITY_SCORE_MIN <= self.score <= EFFECTIVE_ABILITY_SCORE_MAX:
            raise ValueError(
                f"Ability score must be between {EFFECTIVE_ABILITY_SCORE_MIN} and "
                f"{EFFECTIVE_ABILITY_SCORE_MAX}, got {self.score}"
            )
        expected = derive_ability_modifier(self.score)
        if self.modifier != expected:
            raise RulesInvariantError(
                f"{self.ability.name} modifier {self.modifier} does not match "
                f"score {self.score} (expected {expected})"
            )

    @classmethod
    def from_score(cls, ability: Ability, score: int) -> 'AbilityScore':
        """Create an ability score with its modifier derived."""
        return cls(ability=ability, score=score, modifier=derive_ability_modifier(score))

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'ability': self.ability.value,
            'score': self.score,
            'modifier': self.modifier
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AbilityScore':
        """Create from dictionary."""
        return cls(
            ability=Ability(data['ability']),
            score=data['score'],
            modifier=data['modifier']
        )


class CharacterAbilities:
    """The six ability scores of a character, unique by ability."""

    def __init__(self, scores: Sequence[AbilityScore]):
        kinds = [entry.ability for entry in scores]
        if len(scores) != len(Ability) or set(kinds) != set(Ability):
            raise RulesInvariantError(
                f"Expected exactly one score per ability, got {[k.value for k in kinds]}"
            )
        self._scores = list(scores)

    @classmethod
    def from_scores(cls, scores: Dict[Ability, int]) -> 'CharacterAbilities':
        """Build from raw scores; missing abilities start at 10."""
        return cls([
            AbilityScore.from_score(ability, scores.get(ability, INITIAL_ABILITY_SCORE))
            for ability in Ability
        ])

    def __getitem__(self, ability: Ability) -> AbilityScore:
        for entry in self._scores:
            if entry.ability == ability:
                return entry
        raise RulesInvariantError(f"Ability score not found: {ability.name}")

    def __iter__(self) -> Iterator[AbilityScore]:
        return iter(self._scores)

    def __len__(self) -> int:
        return len(self._scores)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterAbilities):
            return NotImplemented
        return all(self[ability] == other[ability] for ability in Ability)

    def __repr__(self) -> str:
        scores = ", ".join(f"{entry.ability.value}={entry.score}" for entry in self._scores)
        return f"CharacterAbilities({scores})"

    def get_score(self, ability: Ability) -> int:
        """Get ability score."""
        return self[ability].score

    def get_modifier(self, ability: Ability) -> int:
        """Get ability modifier."""
        return self[ability].modifier

    def set_score(self, ability: Ability, value: int) -> None:
        """Replace an ability score, recomputing its modifier."""
        replacement = AbilityScore.from_score(ability, value)
        self._scores = [
            replacement if entry.ability == ability else entry
            for entry in self._scores
        ]

    @property
    def strength(self) -> int:
        """Get Strength score."""
        return self.get_score(Ability.STRENGTH)

    @property
    def dexterity(self) -> int:
        """Get Dexterity score."""
        return self.get_score(Ability.DEXTERITY)

    @property
    def constitution(self) -> int:
        """Get Constitution score."""
        return self.get_score(Ability.CONSTITUTION)

    @property
    def intelligence(self) -> int:
        """Get Intelligence score."""
        return self.get_score(Ability.INTELLIGENCE)

    @property
    def wisdom(self) -> int:
        """Get Wisdom score."""
        return self.get_score(Ability.WISDOM)

    @property
    def charisma(self) -> int:
        """Get Charisma score."""
        return self.get_score(Ability.CHARISMA)

    @property
    def str_modifier(self) -> int:
        """Get Strength modifier."""
        return self.get_modifier(Ability.STRENGTH)

    @property
    def dex_modifier(self) -> int:
        """Get Dexterity modifier."""
        return self.get_modifier(Ability.DEXTERITY)

    @property
    def con_modifier(self) -> int:
        """Get Constitution modifier."""
        return self.get_modifier(Ability.CONSTITUTION)

    @property
    def int_modifier(self) -> int:
        """Get Intelligence modifier."""
        return self.get_modifier(Ability.INTELLIGENCE)

    @property
    def wis_modifier(self) -> int:
        """Get Wisdom modifier."""
        return self.get_modifier(Ability.WISDOM)

    @property
    def cha_modifier(self) -> int:
        """Get Charisma modifier."""
        return self.get_modifier(Ability.CHARISMA)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary keyed by ability abbreviation."""
        return {entry.ability.value: entry.score for entry in self._scores}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CharacterAbilities':
        """Create from dictionary; every ability must be present."""
        return cls([AbilityScore.from_score(ability, data[ability.value]) for ability in Ability])
