"""Traits and the modifiers they grant."""

from dataclasses import dataclass
from typing import Any, Dict, Iterator, List, Protocol, Tuple, Union
from .base import Ability, ArmorCategory, ModifierType, WeaponType


class Modifier(Protocol):
    """Capabilities shared by every modifier kind."""

    def get_name(self) -> str:
        ...

    def get_value(self) -> Any:
        ...

    def get_modifier_type(self) -> ModifierType:
        ...


@dataclass(frozen=True)
class WeaponProficiencyModifier:
    """Proficiency with a kind of weapon."""

    name: str
    value: WeaponType

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> WeaponType:
        return self.value

    def get_modifier_type(self) -> ModifierType:
        return ModifierType.WEAPON_PROFICIENCY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'name': self.name, 'value': self.value.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'WeaponProficiencyModifier':
        """Create from dictionary."""
        return cls(name=data['name'], value=WeaponType(data['value']))


@dataclass(frozen=True)
class ArmorProficiencyModifier:
    """Proficiency with an armor category."""

    name: str
    value: ArmorCategory

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> ArmorCategory:
        return self.value

    def get_modifier_type(self) -> ModifierType:
        return ModifierType.ARMOR_PROFICIENCY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {'name': self.name, 'value': self.value.value}

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'ArmorProficiencyModifier':
        """Create from dictionary."""
        return cls(name=data['name'], value=ArmorCategory(data['value']))


@dataclass(frozen=True)
class AbilityIncrease:
    """An increase to a single ability score."""

    ability: Ability
    amount: int


@dataclass(frozen=True)
class AbilityModifier:
    """A bonus applied to an ability score, such as a racial increase."""

    name: str
    value: AbilityIncrease

    def get_name(self) -> str:
        return self.name

    def get_value(self) -> AbilityIncrease:
        return self.value

    def get_modifier_type(self) -> ModifierType:
        return ModifierType.ABILITY

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'ability': self.value.ability.value,
            'amount': self.value.amount
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'AbilityModifier':
        """Create from dictionary."""
        return cls(
            name=data['name'],
            value=AbilityIncrease(Ability(data['ability']), int(data['amount']))
        )


AnyModifier = Union[WeaponProficiencyModifier, ArmorProficiencyModifier, AbilityModifier]


@dataclass(frozen=True)
class Trait:
    """A named feature that grants proficiencies or ability bonuses."""

    name: str
    description: str = ""
    weapon_proficiency_modifiers: Tuple[WeaponProficiencyModifier, ...] = ()
    armor_proficiency_modifiers: Tuple[ArmorProficiencyModifier, ...] = ()
    ability_modifiers: Tuple[AbilityModifier, ...] = ()

    def __post_init__(self):
        """Store modifier collections as tuples."""
        for name in (
            'weapon_proficiency_modifiers', 'armor_proficiency_modifiers', 'ability_modifiers'
        ):
            object.__setattr__(self, name, tuple(getattr(self, name)))

    def modifiers(self) -> Iterator[AnyModifier]:
        """Iterate every modifier regardless of kind."""
        yield from self.weapon_proficiency_modifiers
        yield from self.armor_proficiency_modifiers
        yield from self.ability_modifiers

    def modifiers_of_type(self, modifier_type: ModifierType) -> List[AnyModifier]:
        """Modifiers carrying the given type tag."""
        return [m for m in self.modifiers() if m.get_modifier_type() == modifier_type]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'description': self.description,
            'weapon_proficiency_modifiers': [m.to_dict() for m in self.weapon_proficiency_modifiers],
            'armor_proficiency_modifiers': [m.to_dict() for m in self.armor_proficiency_modifiers],
            'ability_modifiers': [m.to_dict() for m in self.ability_modifiers]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Trait':
        """Create from dictionary."""
        return cls(
            name=data['name'],
            description=data['description'],
            weapon_proficiency_modifiers=tuple(
                WeaponProficiencyModifier.from_dict(m)
                for m in data['weapon_proficiency_modifiers']
            ),
            armor_proficiency_modifiers=tuple(
                ArmorProficiencyModifier.from_dict(m)
                for m in data['armor_proficiency_modifiers']
            ),
            ability_modifiers=tuple(
                AbilityModifier.from_dict(m)
                for m in data['ability_modifiers']
            )
        )
