"""Weapon and armor models."""

from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Any, Optional, Tuple
from .abilities import AbilityScore
from .base import ArmorCategory, ArmorType, WeaponCategory, WeaponProperty, WeaponType
from .currency import Coin, Denomination


@dataclass(frozen=True)
class DamageRange:
    """Inclusive damage range of a weapon, e.g. 1-8 for a d8."""

    min: int
    max: int

    def __post_init__(self):
        """Validate the range."""
        if self.min > self.max:
            raise ValueError(f"Damage minimum {self.min} exceeds maximum {self.max}")

    def __str__(self) -> str:
        return f"{self.min}-{self.max}"


@dataclass(frozen=True)
class Weapon:
    """Weapon with combat statistics."""

    name: str
    cost: Coin = field(default_factory=Coin)
    damage: DamageRange = field(default_factory=lambda: DamageRange(1, 4))
    weapon_type: WeaponType = WeaponType.MELEE
    category: WeaponCategory = WeaponCategory.SIMPLE
    properties: Tuple[WeaponProperty, ...] = ()

    def __post_init__(self):
        """Store properties as a sorted multiset."""
        properties = tuple(sorted(Counter(self.properties).elements(), key=lambda p: p.value))
        object.__setattr__(self, 'properties', properties)

    @property
    def property_counts(self) -> Counter:
        """Copy of the properties counted by kind."""
        return Counter(self.properties)

    @property
    def is_ranged(self) -> bool:
        """Check if weapon is ranged."""
        return self.weapon_type == WeaponType.RANGED

    @property
    def is_melee(self) -> bool:
        """Check if weapon is melee."""
        return self.weapon_type == WeaponType.MELEE

    def has_property(self, weapon_property: WeaponProperty) -> bool:
        """Check if weapon carries a property."""
        return weapon_property in self.properties

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'name': self.name,
            'cost': self.cost.to_dict(),
            'damage': {'min': self.damage.min, 'max': self.damage.max},
            'weapon_type': self.weapon_type.value,
            'category': self.category.value,
            'properties': [p.value for p in self.properties]
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Weapon':
        """Create from dictionary."""
        return cls(
            name=data['name'],
            cost=Coin.from_dict(data['cost']),
            damage=DamageRange(**data['damage']),
            weapon_type=WeaponType(data['weapon_type']),
            category=WeaponCategory(data['category']),
            properties=tuple(WeaponProperty(p) for p in data['properties'])
        )


@dataclass(frozen=True)
class Armor:
    """Armor with defensive statistics."""

    armor_type: ArmorType
    category: ArmorCategory
    base_armor_class: int
    cost: Coin = field(default_factory=Coin)
    weight: int = 0
    ability_requirement: Optional[AbilityScore] = None
    has_stealth_disadvantage: bool = False

    @property
    def is_heavy(self) -> bool:
        """Check if armor is heavy."""
        return self.category == ArmorCategory.HEAVY

    @property
    def is_light(self) -> bool:
        """Check if armor is light."""
        return self.category == ArmorCategory.LIGHT

    @property
    def cost_gp(self) -> float:
        """Cost in gold pieces."""
        return self.cost.in_denomination(Denomination.GOLD)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary."""
        return {
            'armor_type': self.armor_type.value,
            'category': self.category.value,
            'base_armor_class': self.base_armor_class,
            'cost': self.cost.to_dict(),
            'weight': self.weight,
            'ability_requirement': (
                self.ability_requirement.to_dict() if self.ability_requirement else None
            ),
            'has_stealth_disadvantage': self.has_stealth_disadvantage
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Armor':
        """Create from dictionary."""
        requirement = data['ability_requirement']
        return cls(
            armor_type=ArmorType(data['armor_type']),
            category=ArmorCategory(data['category']),
            base_armor_class=data['base_armor_class'],
            cost=Coin.from_dict(data['cost']),
            weight=data['weight'],
            ability_requirement=AbilityScore.from_dict(requirement) if requirement else None,
            has_stealth_disadvantage=data['has_stealth_disadvantage']
        )
