"""Base enumerations shared by the character sheet models."""

from enum import Enum
from typing import Protocol, Any, Dict


class Race(Enum):
    """Playable races."""
    DWARF = "dwarf"
    HILL_DWARF = "hill_dwarf"
    ELF = "elf"
    HIGH_ELF = "high_elf"
    HUMAN = "human"
    GNOME = "gnome"
    HALFLING = "halfling"
    DRAGONBORN = "dragonborn"
    HALF_ELF = "half_elf"
    HALF_ORC = "half_orc"
    TIEFLING = "tiefling"


class Alignment(Enum):
    """Character alignment options."""
    LAWFUL_GOOD = "LG"
    NEUTRAL_GOOD = "NG"
    CHAOTIC_GOOD = "CG"
    LAWFUL_NEUTRAL = "LN"
    NEUTRAL = "N"
    CHAOTIC_NEUTRAL = "CN"
    LAWFUL_EVIL = "LE"
    NEUTRAL_EVIL = "NE"
    CHAOTIC_EVIL = "CE"
    UNALIGNED = "U"


class Size(Enum):
    """Creature size categories."""
    SMALL = 2
    MEDIUM = 3
    LARGE = 4
    HUGE = 5


class Language(Enum):
    """Standard and exotic languages."""
    COMMON = "common"
    DWARVISH = "dwarvish"
    ELVISH = "elvish"
    GIANT = "giant"
    GNOMISH = "gnomish"
    GOBLIN = "goblin"
    HALFLING = "halfling"
    ORC = "orc"
    ABYSSAL = "abyssal"
    CELESTIAL = "celestial"
    DRACONIC = "draconic"
    DEEP_SPEECH = "deep_speech"
    INFERNAL = "infernal"
    PRIMORDIAL = "primordial"
    SYLVAN = "sylvan"
    UNDERCOMMON = "undercommon"


class ClassType(Enum):
    """Character classes."""
    BARBARIAN = "barbarian"
    BARD = "bard"
    CLERIC = "cleric"
    DRUID = "druid"
    FIGHTER = "fighter"
    MONK = "monk"
    PALADIN = "paladin"
    RANGER = "ranger"
    ROGUE = "rogue"
    SORCERER = "sorcerer"
    WARLOCK = "warlock"
    WIZARD = "wizard"


class Ability(Enum):
    """Ability scores."""
    STRENGTH = "str"
    DEXTERITY = "dex"
    CONSTITUTION = "con"
    INTELLIGENCE = "int"
    WISDOM = "wis"
    CHARISMA = "cha"


class ArmorCategory(Enum):
    """Armor categories."""
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"


class ArmorType(Enum):
    """Armor types from the equipment tables."""
    PADDED = "padded"
    LEATHER = "leather"
    STUDDED_LEATHER = "studded_leather"
    HIDE = "hide"
    CHAIN_SHIRT = "chain_shirt"
    SCALE_MAIL = "scale_mail"
    BREASTPLATE = "breastplate"
    HALF_PLATE = "half_plate"
    RING_MAIL = "ring_mail"
    CHAIN_MAIL = "chain_mail"
    SPLINT = "splint"
    PLATE = "plate"


class WeaponType(Enum):
    """How a weapon is used in an attack."""
    MELEE = "melee"
    RANGED = "ranged"


class WeaponCategory(Enum):
    """Weapon proficiency groups."""
    SHIELDS = "shields"
    SIMPLE = "simple"
    MARTIAL = "martial"


class WeaponProperty(Enum):
    """Weapon properties."""
    AMMUNITION = "ammunition"
    FINESSE = "finesse"
    HEAVY = "heavy"
    LIGHT = "light"
    LOADING = "loading"
    RANGE = "range"
    REACH = "reach"
    SPECIAL = "special"
    THROWN = "thrown"
    TWO_HANDED = "two_handed"
    VERSATILE = "versatile"


class ModifierType(Enum):
    """Kinds of modifier a trait can carry."""
    WEAPON_PROFICIENCY = "weapon_proficiency"
    ARMOR_PROFICIENCY = "armor_proficiency"
    ABILITY = "ability"


class SerializableModel(Protocol):
    """Protocol for serializable models."""

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary."""
        ...

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'SerializableModel':
        """Create model from dictionary."""
        ...
