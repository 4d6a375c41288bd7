import logging
import os

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVEL_VAR = "MINIGREP_LOG_LEVEL"


def get_log_level(default: int = logging.WARNING) -> int:
    level = logging.getLevelName(os.environ.get(LOG_LEVEL_VAR, "").upper())
    # getLevelName returns a string for names it doesn't know
    return level if isinstance(level, int) else default


logger = logging.getLogger("minigrep")
logger.setLevel(get_log_level())
if not logger.handlers:
    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
