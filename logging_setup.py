import logging
import os
from typing import Optional

from logic.config import GameConfig


def setup_logging(level: Optional[str] = None) -> None:
    log_level = (level or os.getenv(GameConfig.LOG_LEVEL_ENV) or GameConfig.DEFAULT_LOG_LEVEL).upper()

    root = logging.getLogger()
    root.handlers.clear()
    root.setLevel(log_level)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(logging.Formatter(GameConfig.LOG_FORMAT))
    root.addHandler(stream_handler)
