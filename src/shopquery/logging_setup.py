import logging
from typing import Optional

from rich.console import Console
from rich.logging import RichHandler

from shopquery.config import config


def setup_logging(level: Optional[str] = None, console: Optional[Console] = None) -> None:
    """
    Configure the root logger with a single rich handler.

    - Uses config.log_level (LOG_LEVEL env) if level is None.
    - Unknown level names fall back to INFO.
    - Calling it again replaces the previous handler instead of stacking one.
    """
    level_name = (level or config.log_level or "WARNING").upper()
    level_value = getattr(logging, level_name, logging.INFO)
    if not isinstance(level_value, int):
        level_value = logging.INFO

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    logging.basicConfig(
        level=level_value,
        format="%(name)s: %(message)s",
        handlers=[handler],
        force=True,
    )
