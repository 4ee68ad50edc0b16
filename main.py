"""
Entry point for the character sheet.
No logic here; loads settings and prints the stored races and characters.
"""

import logging

from charsheet.config import load_settings
from charsheet.errors import RecordNotFoundError
from charsheet.managers import CharacterManager, RaceManager
from charsheet.utility.logging_config import setup_logging

log = logging.getLogger(__name__)


def main():
    settings = load_settings()
    setup_logging(settings.log_level)

    try:
        for race in RaceManager(settings.data_dir).load():
            print(race)
    except RecordNotFoundError as e:
        log.warning("No races loaded: %s", e)

    manager = CharacterManager(settings.data_dir)
    try:
        for character in manager.load():
            print(manager.get_character_summary(character).model_dump_json(indent=2))
    except RecordNotFoundError as e:
        log.warning("No characters loaded: %s", e)


if __name__ == "__main__":
    main()
