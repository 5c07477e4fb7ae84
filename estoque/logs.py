# estoque/logs.py
import logging

from rich.logging import RichHandler

LOGGER_NAME = "estoque"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """Send the estoque loggers to a single rich handler."""
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level.upper())
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)
    logger.propagate = False
    return logger
