"""
Read-only reference data: armor, weapons, class hit dice and races.
Values follow the System Reference Document equipment and class tables.
"""

from types import MappingProxyType
from typing import Mapping

from .models.abilities import AbilityScore
from .models.base import (
    Ability, Alignment, ArmorCategory, ArmorType, ClassType, Language, Race, Size,
    WeaponCategory, WeaponProperty, WeaponType
)
from .models.character import CharacterClass, ClassFeatures, Die, RaceInfo
from .models.currency import gold, silver
from .models.equipment import Armor, DamageRange, Weapon
from .models.traits import (
    AbilityIncrease, AbilityModifier, ArmorProficiencyModifier, Trait, WeaponProficiencyModifier
)


def _armor(armor_type, category, base, cost, weight, strength=None, stealth=False) -> Armor:
    return Armor(
        armor_type=armor_type,
        category=category,
        base_armor_class=base,
        cost=cost,
        weight=weight,
        ability_requirement=(
            AbilityScore.from_score(Ability.STRENGTH, strength) if strength else None
        ),
        has_stealth_disadvantage=stealth,
    )


ARMOR: Mapping[ArmorType, Armor] = MappingProxyType({
    # Light
    ArmorType.PADDED: _armor(ArmorType.PADDED, ArmorCategory.LIGHT, 11, gold(5), 8, stealth=True),
    ArmorType.LEATHER: _armor(ArmorType.LEATHER, ArmorCategory.LIGHT, 11, gold(10), 10),
    ArmorType.STUDDED_LEATHER: _armor(ArmorType.STUDDED_LEATHER, ArmorCategory.LIGHT, 12, gold(45), 13),
    # Medium
    ArmorType.HIDE: _armor(ArmorType.HIDE, ArmorCategory.MEDIUM, 12, gold(10), 12),
    ArmorType.CHAIN_SHIRT: _armor(ArmorType.CHAIN_SHIRT, ArmorCategory.MEDIUM, 13, gold(50), 20),
    ArmorType.SCALE_MAIL: _armor(ArmorType.SCALE_MAIL, ArmorCategory.MEDIUM, 14, gold(50), 45, stealth=True),
    ArmorType.BREASTPLATE: _armor(ArmorType.BREASTPLATE, ArmorCategory.MEDIUM, 14, gold(400), 20),
    ArmorType.HALF_PLATE: _armor(ArmorType.HALF_PLATE, ArmorCategory.MEDIUM, 15, gold(750), 40, stealth=True),
    # Heavy
    ArmorType.RING_MAIL: _armor(ArmorType.RING_MAIL, ArmorCategory.HEAVY, 14, gold(30), 40, stealth=True),
    ArmorType.CHAIN_MAIL: _armor(ArmorType.CHAIN_MAIL, ArmorCategory.HEAVY, 16, gold(75), 55, 13, True),
    ArmorType.SPLINT: _armor(ArmorType.SPLINT, ArmorCategory.HEAVY, 17, gold(200), 60, 15, True),
    ArmorType.PLATE: _armor(ArmorType.PLATE, ArmorCategory.HEAVY, 18, gold(1500), 65, 15, True),
})


WEAPONS: Mapping[str, Weapon] = MappingProxyType({
    weapon.name: weapon for weapon in (
        Weapon("Club", silver(1), DamageRange(1, 4), WeaponType.MELEE, WeaponCategory.SIMPLE,
               [WeaponProperty.LIGHT]),
        Weapon("Dagger", gold(2), DamageRange(1, 4), WeaponType.MELEE, WeaponCategory.SIMPLE,
               [WeaponProperty.FINESSE, WeaponProperty.LIGHT, WeaponProperty.THROWN]),
        Weapon("Quarterstaff", silver(2), DamageRange(1, 6), WeaponType.MELEE, WeaponCategory.SIMPLE,
               [WeaponProperty.VERSATILE]),
        Weapon("Light crossbow", gold(25), DamageRange(1, 8), WeaponType.RANGED, WeaponCategory.SIMPLE,
               [WeaponProperty.AMMUNITION, WeaponProperty.LOADING, WeaponProperty.TWO_HANDED]),
        Weapon("Shortbow", gold(25), DamageRange(1, 6), WeaponType.RANGED, WeaponCategory.SIMPLE,
               [WeaponProperty.AMMUNITION, WeaponProperty.TWO_HANDED]),
        Weapon("Battleaxe", gold(10), DamageRange(1, 8), WeaponType.MELEE, WeaponCategory.MARTIAL,
               [WeaponProperty.VERSATILE]),
        Weapon("Greataxe", gold(30), DamageRange(1, 12), WeaponType.MELEE, WeaponCategory.MARTIAL,
               [WeaponProperty.HEAVY, WeaponProperty.TWO_HANDED]),
        Weapon("Longsword", gold(15), DamageRange(1, 8), WeaponType.MELEE, WeaponCategory.MARTIAL,
               [WeaponProperty.VERSATILE]),
        Weapon("Longbow", gold(50), DamageRange(1, 8), WeaponType.RANGED, WeaponCategory.MARTIAL,
               [WeaponProperty.AMMUNITION, WeaponProperty.HEAVY, WeaponProperty.TWO_HANDED]),
    )
})


def _hit_dice(faces: int) -> ClassFeatures:
    die = Die.with_faces(faces)
    return ClassFeatures(hit_dice=die, hit_points_starting=faces, hit_points_from_level=die)


CLASS_FEATURES: Mapping[ClassType, ClassFeatures] = MappingProxyType({
    ClassType.BARBARIAN: _hit_dice(12),
    ClassType.BARD: _hit_dice(8),
    ClassType.CLERIC: _hit_dice(8),
    ClassType.DRUID: _hit_dice(8),
    ClassType.FIGHTER: _hit_dice(10),
    ClassType.MONK: _hit_dice(8),
    ClassType.PALADIN: _hit_dice(10),
    ClassType.RANGER: _hit_dice(10),
    ClassType.ROGUE: _hit_dice(8),
    ClassType.SORCERER: _hit_dice(6),
    ClassType.WARLOCK: _hit_dice(8),
    ClassType.WIZARD: _hit_dice(6),
})


def character_class(class_type: ClassType) -> CharacterClass:
    """A class entry with its catalog hit dice."""
    return CharacterClass(class_type=class_type, features=CLASS_FEATURES[class_type])


def _ability_trait(name: str, *increases: AbilityIncrease) -> Trait:
    return Trait(
        name=name,
        description=", ".join(f"{i.ability.name.title()} +{i.amount}" for i in increases),
        ability_modifiers=[AbilityModifier(name, increase) for increase in increases],
    )


# Race ages are the age of adulthood.
RACES: Mapping[Race, RaceInfo] = MappingProxyType({
    Race.DWARF: RaceInfo(
        race=Race.DWARF, age=50, alignment=Alignment.LAWFUL_GOOD, size=Size.MEDIUM, speed=25,
        languages=[Language.COMMON, Language.DWARVISH],
        traits=[
            _ability_trait("Dwarven Constitution", AbilityIncrease(Ability.CONSTITUTION, 2)),
            Trait(
                name="Dwarven Combat Training",
                description="Proficiency with the battleaxe, handaxe, light hammer and warhammer.",
                weapon_proficiency_modifiers=[
                    WeaponProficiencyModifier("Dwarven Combat Training", WeaponType.MELEE)
                ],
            ),
            Trait(
                name="Dwarven Armor Training",
                description="Proficiency with light and medium armor.",
                armor_proficiency_modifiers=[
                    ArmorProficiencyModifier("Dwarven Armor Training", ArmorCategory.LIGHT),
                    ArmorProficiencyModifier("Dwarven Armor Training", ArmorCategory.MEDIUM),
                ],
            ),
        ],
    ),
    Race.ELF: RaceInfo(
        race=Race.ELF, age=100, alignment=Alignment.CHAOTIC_GOOD, size=Size.MEDIUM, speed=30,
        languages=[Language.COMMON, Language.ELVISH],
        traits=[
            _ability_trait("Elven Dexterity", AbilityIncrease(Ability.DEXTERITY, 2)),
            Trait(
                name="Elf Weapon Training",
                description="Proficiency with the longsword, shortsword, shortbow and longbow.",
                weapon_proficiency_modifiers=[
                    WeaponProficiencyModifier("Elf Weapon Training", WeaponType.MELEE),
                    WeaponProficiencyModifier("Elf Weapon Training", WeaponType.RANGED),
                ],
            ),
        ],
    ),
    Race.HALFLING: RaceInfo(
        race=Race.HALFLING, age=20, alignment=Alignment.LAWFUL_GOOD, size=Size.SMALL, speed=25,
        languages=[Language.COMMON, Language.HALFLING],
        traits=[_ability_trait("Halfling Dexterity", AbilityIncrease(Ability.DEXTERITY, 2))],
    ),
    Race.HUMAN: RaceInfo(
        race=Race.HUMAN, age=18, alignment=Alignment.NEUTRAL, size=Size.MEDIUM, speed=30,
        languages=[Language.COMMON],
        traits=[
            _ability_trait("Human Versatility", *(AbilityIncrease(a, 1) for a in Ability))
        ],
    ),
    Race.GNOME: RaceInfo(
        race=Race.GNOME, age=40, alignment=Alignment.NEUTRAL_GOOD, size=Size.SMALL, speed=25,
        languages=[Language.COMMON, Language.GNOMISH],
        traits=[_ability_trait("Gnome Cunning", AbilityIncrease(Ability.INTELLIGENCE, 2))],
    ),
    Race.HALF_ORC: RaceInfo(
        race=Race.HALF_ORC, age=14, alignment=Alignment.CHAOTIC_NEUTRAL, size=Size.MEDIUM, speed=30,
        languages=[Language.COMMON, Language.ORC],
        traits=[
            _ability_trait(
                "Half-Orc Strength",
                AbilityIncrease(Ability.STRENGTH, 2),
                AbilityIncrease(Ability.CONSTITUTION, 1),
            )
        ],
    ),
})
