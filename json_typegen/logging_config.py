"""Logging setup shared by the library and the command-line interface.

Library modules only ask for a logger; handlers are installed by
``setup_logging`` when running from the CLI.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "json_typegen"


def get_logger(name: str) -> logging.Logger:
    """Return a logger living under the package namespace."""
    if name == LOGGER_NAME or name.startswith(LOGGER_NAME + "."):
        return logging.getLogger(name)
    return logging.getLogger(f"{LOGGER_NAME}.{name}")


def setup_logging(level: int | str = logging.WARNING) -> logging.Logger:
    """Attach a rich handler to the package logger.

    Args:
        level: Logging level name or number.

    Returns:
        The configured package logger.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        # stdout is reserved for generated code
        handler = RichHandler(
            console=Console(stderr=True), show_path=False, rich_tracebacks=True
        )
        handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))
        logger.addHandler(handler)

    logger.propagate = False
    return logger
