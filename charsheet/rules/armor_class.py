"""Armor class and armor proficiency checks."""

from ..models.base import Ability, ArmorCategory
from ..models.character import Character
from ..models.equipment import Armor


MEDIUM_ARMOR_DEX_CAP = 2


def base_armor_class(armor: Armor, character: Character) -> int:
    """Armor class from worn armor and the character's Dexterity.

    Light armor adds the full Dexterity modifier, medium armor adds it up to
    +2 (penalties are never capped) and heavy armor ignores it.
    """
    dex_modifier = character.ability_scores[Ability.DEXTERITY].modifier

    if armor.category == ArmorCategory.LIGHT:
        return armor.base_armor_class + dex_modifier
    if armor.category == ArmorCategory.MEDIUM:
        return armor.base_armor_class + min(dex_modifier, MEDIUM_ARMOR_DEX_CAP)
    return armor.base_armor_class


def has_armor_proficiency(armor: Armor, character: Character) -> bool:
    """Check if any of the character's traits grants proficiency with the armor.

    Wearing armor without proficiency carries penalties that the caller
    must apply.
    """
    return any(
        modifier.get_value() == armor.category
        for character_trait in character.traits
        for modifier in character_trait.armor_proficiency_modifiers
    )


def meets_ability_requirement(armor: Armor, character: Character) -> bool:
    """Check if the character meets the armor's minimum ability score."""
    requirement = armor.ability_requirement
    if requirement is None:
        return True
    return character.ability_scores[requirement.ability].score >= requirement.score
