"""Console logging for the command line."""

import logging
import sys

# Reduce noise from libraries
LOGGING_CONFIG = {
    "urllib3": logging.WARNING,
    "requests": logging.WARNING,
}


class ColoredFormatter(logging.Formatter):
    """Colored log formatter for console output."""

    COLORS = {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        levelname = record.levelname
        if levelname in self.COLORS:
            record.levelname = f"{self.COLORS[levelname]}{levelname}{self.RESET}"
        result = super().format(record)
        # Reset levelname for other handlers
        record.levelname = levelname
        return result


def setup_logging(verbose: bool = False) -> None:
    """Install a stderr handler on the propchain logger.

    Args:
        verbose: If True, log DEBUG messages, otherwise WARNING and above.
    """
    handler = logging.StreamHandler(sys.stderr)
    if sys.stderr.isatty():
        handler.setFormatter(ColoredFormatter("%(levelname)s %(name)s: %(message)s"))
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))

    logger = logging.getLogger("propchain")
    logger.handlers.clear()
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)

    for name, level in LOGGING_CONFIG.items():
        logging.getLogger(name).setLevel(level)
