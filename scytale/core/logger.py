import logging

from rich.console import Console
from rich.logging import RichHandler

ROOT_LOGGER = "scytale"


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """
    Attach a Rich console handler to the package logger.

    Safe to call repeatedly; existing handlers are replaced so records are
    never emitted twice.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ...)

    Returns:
        The configured package logger
    """
    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.WARNING))
    logger.propagate = False
    logger.handlers.clear()

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        show_time=False,
        rich_tracebacks=True,
    )
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    logger.addHandler(handler)

    return logger
