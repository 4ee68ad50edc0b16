"""
Pytest configuration and shared fixtures.
"""

import pytest

from charsheet.catalog import character_class
from charsheet.models.abilities import CharacterAbilities
from charsheet.models.base import Ability, Alignment, ClassType, Language, Race, Size
from charsheet.models.character import Character
from charsheet.models.traits import Trait


@pytest.fixture
def data_dir(tmp_path):
    """Empty directory for documents."""
    directory = tmp_path / "data"
    directory.mkdir()
    return directory


@pytest.fixture
def make_character():
    """Factory for level 1 characters with chosen scores and traits."""
    def _make(name="Tishros", class_type=ClassType.BARBARIAN, scores=None, traits=None, **kwargs):
        return Character(
            name=name,
            race=kwargs.pop('race', Race.DWARF),
            age=kwargs.pop('age', 80),
            classes=[character_class(class_type)],
            alignment=kwargs.pop('alignment', Alignment.CHAOTIC_NEUTRAL),
            size=kwargs.pop('size', Size.MEDIUM),
            speed=kwargs.pop('speed', 25),
            languages=kwargs.pop('languages', [Language.DWARVISH]),
            ability_scores=CharacterAbilities.from_scores(scores or {}),
            traits=traits if traits is not None else [Trait(name="test", description="Hello")],
            **kwargs
        )
    return _make


@pytest.fixture
def sample_character(make_character):
    """A level 1 dwarf barbarian with average scores."""
    return make_character()


@pytest.fixture
def sample_wizard(make_character):
    """A level 1 elf wizard."""
    return make_character(
        name="Ezren",
        class_type=ClassType.WIZARD,
        race=Race.ELF,
        scores={Ability.INTELLIGENCE: 17, Ability.DEXTERITY: 15, Ability.CONSTITUTION: 12},
    )


def pytest_configure(config):
    """Configure pytest with custom markers."""
    config.addinivalue_line(
        "markers", "slow: mark test as slow"
    )
    config.addinivalue_line(
        "markers", "integration: mark test as integration test"
    )
