import logging
import os

LOG_LEVEL_ENV = "UTF8STR_LOG_LEVEL"


def configure_logging(verbosity: int = 0) -> None:
    """Route library logs to stderr, `-v` for INFO and `-vv` for DEBUG."""
    if verbosity >= 2:
        level = logging.DEBUG
    elif verbosity == 1:
        level = logging.INFO
    else:
        level = logging.getLevelName(os.environ.get(LOG_LEVEL_ENV, "WARNING").upper())
        if not isinstance(level, int):
            level = logging.WARNING
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")
