#!/usr/bin/env python3
"""
Setup script to write sample race, armor and character documents.
Run this to initialize the sample data for testing and new users.
"""

import sys
from pathlib import Path

from charsheet.catalog import ARMOR, RACES
from charsheet.config import load_settings
from charsheet.managers import ArmorManager, CharacterManager, RaceManager
from charsheet.models.base import Ability, ArmorType, ClassType, Race
from charsheet.models.currency import Denomination


def create_sample_characters(data_dir: Path) -> CharacterManager:
    """Create sample characters."""
    manager = CharacterManager(data_dir)

    # Dwarf barbarian
    tishros = manager.create_character(
        "Tishros",
        RACES[Race.DWARF],
        ClassType.BARBARIAN,
        scores={
            Ability.STRENGTH: 15,
            Ability.DEXTERITY: 12,
            Ability.CONSTITUTION: 14,
            Ability.INTELLIGENCE: 8,
            Ability.WISDOM: 13,
            Ability.CHARISMA: 10,
        },
    )
    tishros.wealth.add(10, Denomination.GOLD)

    # Elf wizard
    ezren = manager.create_character(
        "Ezren",
        RACES[Race.ELF],
        ClassType.WIZARD,
        scores={
            Ability.STRENGTH: 8,
            Ability.DEXTERITY: 13,
            Ability.CONSTITUTION: 12,
            Ability.INTELLIGENCE: 15,
            Ability.WISDOM: 14,
            Ability.CHARISMA: 10,
        },
    )
    ezren.wealth.add(4, Denomination.GOLD)
    ezren.wealth.add(15, Denomination.SILVER)

    path = manager.save([tishros, ezren])
    print(f"✓ Created sample characters: {path}")
    return manager


def main():
    """Run the sample data setup."""
    print("\n" + "=" * 60)
    print("Setting up sample character sheet data")
    print("=" * 60 + "\n")

    settings = load_settings()
    data_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else settings.data_dir

    path = RaceManager(data_dir).save(list(RACES.values()))
    print(f"✓ Created races: {path}")

    path = ArmorManager(data_dir).save([ARMOR[armor_type] for armor_type in ArmorType])
    print(f"✓ Created armor: {path}")

    create_sample_characters(data_dir)

    print("\n✅ Sample data ready in", data_dir)


if __name__ == "__main__":
    main()
