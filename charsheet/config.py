"""Runtime settings loaded from the environment and an optional .env file."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

log = logging.getLogger(__name__)

DEFAULT_DATA_DIR = "data"
DEFAULT_LOG_LEVEL = "INFO"


@dataclass(frozen=True)
class Settings:
    """Where documents live and how loudly to log."""

    data_dir: Path
    log_level: int


def load_settings(env_path: Optional[str] = None) -> Settings:
    """Load settings, reading ``env_path`` (or ``./.env``) first if present."""
    loaded = load_dotenv(env_path) if env_path else load_dotenv()
    log.debug("Loaded env file %s (loaded=%s)", env_path or ".env", loaded)

    data_dir = Path(os.getenv("CHARSHEET_DATA_DIR", DEFAULT_DATA_DIR))
    level_name = os.getenv("CHARSHEET_LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {level_name}")

    return Settings(data_dir=data_dir, log_level=level)
