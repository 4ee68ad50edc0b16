"""
Models package for the character sheet.

Leaf models are re-exported here; the character aggregate lives in
``charsheet.models.character``.
"""

from .base import (
    Race,
    Alignment,
    Size,
    Language,
    ClassType,
    Ability,
    ArmorCategory,
    ArmorType,
    WeaponType,
    WeaponCategory,
    WeaponProperty,
    ModifierType,
)

from .abilities import AbilityScore, CharacterAbilities, derive_ability_modifier

from .currency import Coin, Denomination, Wealth

from .traits import (
    Trait,
    WeaponProficiencyModifier,
    ArmorProficiencyModifier,
    AbilityModifier,
    AbilityIncrease,
)

from .equipment import DamageRange, Weapon, Armor

from .spellcasting import SpellSlot

__all__ = [
    # Base enums
    'Race',
    'Alignment',
    'Size',
    'Language',
    'ClassType',
    'Ability',
    'ArmorCategory',
    'ArmorType',
    'WeaponType',
    'WeaponCategory',
    'WeaponProperty',
    'ModifierType',

    # Abilities
    'AbilityScore',
    'CharacterAbilities',
    'derive_ability_modifier',

    # Currency
    'Coin',
    'Denomination',
    'Wealth',

    # Traits
    'Trait',
    'WeaponProficiencyModifier',
    'ArmorProficiencyModifier',
    'AbilityModifier',
    'AbilityIncrease',

    # Equipment
    'DamageRange',
    'Weapon',
    'Armor',

    # Spellcasting
    'SpellSlot',
]
