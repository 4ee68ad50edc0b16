"""Spell slots per character level for spellcasting classes."""

import logging
from dataclasses import dataclass
from typing import Dict, Tuple
from ..errors import RulesInvariantError, UnsupportedClassError
from ..models.base import ClassType
from ..models.spellcasting import SpellSlot


logger = logging.getLogger(__name__)

EFFECTIVE_SPELL_LEVEL_MIN = 1
EFFECTIVE_SPELL_LEVEL_MAX = 9


@dataclass(frozen=True)
class SpellSlotEntry:
    """Slot counts at one character level.

    Ten counts are stored; spell level ``n`` reads ``spell_level_count[n - 1]``.
    """

    level: int
    spell_level_count: Tuple[int, ...]


WIZARD_SPELL_SLOTS: Tuple[SpellSlotEntry, ...] = (
    SpellSlotEntry(level=1,  spell_level_count=(3, 0, 0, 0, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=2,  spell_level_count=(3, 3, 0, 0, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=3,  spell_level_count=(3, 4, 2, 0, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=4,  spell_level_count=(4, 4, 3, 0, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=5,  spell_level_count=(4, 4, 3, 2, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=6,  spell_level_count=(4, 4, 3, 3, 0, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=7,  spell_level_count=(4, 4, 3, 3, 1, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=8,  spell_level_count=(4, 4, 3, 3, 2, 0, 0, 0, 0, 0)),
    SpellSlotEntry(level=9,  spell_level_count=(4, 4, 3, 3, 3, 1, 0, 0, 0, 0)),
    SpellSlotEntry(level=10, spell_level_count=(5, 4, 3, 3, 3, 2, 0, 0, 0, 0)),
    SpellSlotEntry(level=11, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 0, 0, 0)),
    SpellSlotEntry(level=12, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 0, 0, 0)),
    SpellSlotEntry(level=13, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 1, 0, 0)),
    SpellSlotEntry(level=14, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 1, 0, 0)),
    SpellSlotEntry(level=15, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 1, 1, 0)),
    SpellSlotEntry(level=16, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 1, 1, 0)),
    SpellSlotEntry(level=17, spell_level_count=(5, 4, 3, 3, 3, 2, 1, 1, 1, 1)),
    SpellSlotEntry(level=18, spell_level_count=(5, 4, 3, 3, 3, 3, 1, 1, 1, 1)),
    SpellSlotEntry(level=19, spell_level_count=(5, 4, 3, 3, 3, 3, 2, 1, 1, 1)),
    SpellSlotEntry(level=20, spell_level_count=(5, 4, 3, 3, 3, 3, 2, 2, 1, 1)),
)

# Classes without an entry here have no slot table yet.
SPELL_SLOT_TABLES: Dict[ClassType, Tuple[SpellSlotEntry, ...]] = {
    ClassType.WIZARD: WIZARD_SPELL_SLOTS,
}


def _validate_spell_level(spell_level: int) -> None:
    if not EFFECTIVE_SPELL_LEVEL_MIN <= spell_level <= EFFECTIVE_SPELL_LEVEL_MAX:
        raise RulesInvariantError(
            f"Spell level {spell_level} is outside "
            f"[{EFFECTIVE_SPELL_LEVEL_MIN}, {EFFECTIVE_SPELL_LEVEL_MAX}]"
        )


def find_slots_for_spell_level(
    table: Tuple[SpellSlotEntry, ...],
    level: int,
    spell_level: int
) -> int:
    """Look up the slot count in a single class table; 0 when no row matches."""
    _validate_spell_level(spell_level)
    for entry in table:
        if entry.level == level:
            return entry.spell_level_count[spell_level - 1]
    return 0


def slots_for_spell_level(class_type: ClassType, level: int, spell_level: int) -> int:
    """Number of spell slots a class has for a spell level at a character level.

    Raises:
        RulesInvariantError: If spell_level is outside 1-9
        UnsupportedClassError: If the class has no slot table
    """
    _validate_spell_level(spell_level)
    table = SPELL_SLOT_TABLES.get(class_type)
    if table is None:
        raise UnsupportedClassError(
            f"Spell slots are not implemented for {class_type.name.title()}"
        )
    return find_slots_for_spell_level(table, level, spell_level)


def allot_spell_slots(class_type: ClassType, level: int) -> Dict[int, SpellSlot]:
    """Fresh spell slots for every spell level at a character level."""
    slots = {
        spell_level: SpellSlot(
            spell_level=spell_level,
            total=slots_for_spell_level(class_type, level, spell_level)
        )
        for spell_level in range(EFFECTIVE_SPELL_LEVEL_MIN, EFFECTIVE_SPELL_LEVEL_MAX + 1)
    }
    logger.debug(
        "Allotted %s slots at level %d: %s",
        class_type.value, level, {k: v.total for k, v in slots.items()}
    )
    return slots
