"""Document persistence for characters, races and armor."""

from .record_manager import RecordManager
from .character_manager import ArmorManager, CharacterManager, CharacterSummary, RaceManager

__all__ = [
    'RecordManager',
    'CharacterManager',
    'CharacterSummary',
    'RaceManager',
    'ArmorManager',
]
