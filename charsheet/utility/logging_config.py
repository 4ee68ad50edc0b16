# logging_config.py
import logging
import sys

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level=logging.INFO):
    handler = logging.StreamHandler(sys.stderr)  # stdout is reserved for command output
    formatter = logging.Formatter(LOG_FORMAT, "%H:%M:%S")
    handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=[handler], force=True)
