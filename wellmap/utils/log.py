"""Logging setup: stdlib loggers rendered through rich."""

import logging

from rich.console import Console
from rich.logging import RichHandler


def setup_logging(level: str | int = "INFO", console: Console | None = None) -> None:
    """Route all ``wellmap`` loggers through a RichHandler."""
    handler = RichHandler(
        console=console,
        rich_tracebacks=True,
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s", datefmt="[%X]"))

    root = logging.getLogger()
    root.handlers = [handler]
    root.setLevel(level)

    # httpx logs every request at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)
