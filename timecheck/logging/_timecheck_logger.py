"""Named "timecheck" logger with colored level names on stderr."""

import logging


class ColoredFormatter(logging.Formatter):
    COLORS = {
        "DEBUG": "\033[94m",  # Blue
        "INFO": "\033[92m",  # Green
        "WARNING": "\033[93m",  # Yellow
        "ERROR": "\033[91m",  # Red
        "CRITICAL": "\033[95m",  # Magenta
    }
    RESET = "\033[0m"

    def format(self, record):
        # Restore the plain level name for other handlers
        levelname = record.levelname
        color = self.COLORS.get(levelname, self.RESET)
        record.levelname = f"{color}{levelname}{self.RESET}"
        try:
            return super().format(record)
        finally:
            record.levelname = levelname


def set_log_level(level: str) -> None:
    """Apply a level name such as ``"DEBUG"`` to the timecheck logger."""
    numeric = logging.getLevelName(level.upper())
    if not isinstance(numeric, int):
        raise ValueError(f"Unknown log level: {level}")
    TIMECHECK_LOGGER.setLevel(numeric)


TIMECHECK_LOGGER = logging.getLogger("timecheck")
TIMECHECK_LOGGER.setLevel(logging.INFO)

handler = logging.StreamHandler()
log_format = "%(asctime)s %(levelname)s %(message)s"
date_format = "%Y-%m-%d %H:%M:%S"
formatter = ColoredFormatter(fmt=log_format, datefmt=date_format)
handler.setFormatter(formatter)
TIMECHECK_LOGGER.handlers.clear()
TIMECHECK_LOGGER.addHandler(handler)
