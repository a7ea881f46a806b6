"""Logging helpers for standard-cache."""

import logging

from rich.logging import RichHandler

ROOT_LOGGER_NAME = "standard_cache"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Get a logger below the package root logger.

    Args:
        name: Dotted suffix, e.g. "item"

    Returns:
        Logger named "standard_cache.<name>"
    """
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def setup_logging(level: str | int = "INFO", console: bool = True) -> logging.Logger:
    """Configure the package root logger.

    Calling it again replaces the handler installed by a previous call.

    Args:
        level: Log level name or number
        console: Attach a rich console handler

    Returns:
        The package root logger
    """
    root = logging.getLogger(ROOT_LOGGER_NAME)
    root.setLevel(level)

    for handler in list(root.handlers):
        if isinstance(handler, RichHandler):
            root.removeHandler(handler)

    if console:
        handler = RichHandler(rich_tracebacks=True, show_path=False)
        handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
        root.addHandler(handler)

    return root
