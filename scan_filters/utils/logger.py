import logging
import sys
from pathlib import Path
from datetime import datetime
from typing import Optional, Union

from .. import config
from .locate_path import get_project_root

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def setup_project_logging(level: Optional[Union[int, str]] = None,
                          logs_dir: Optional[Union[str, Path]] = None) -> logging.Logger:
    """Attach a stdout handler and a dated file handler to the root logger, once."""
    root_logger = logging.getLogger()
    if getattr(root_logger, "_project_logging_configured", False):
        return root_logger

    if level is None:
        level = logging.DEBUG if config.DEBUG else config.LOG_LEVEL
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
    root_logger.setLevel(level)
    logs_dir = Path(logs_dir) if logs_dir is not None else get_project_root() / "logs"
    logs_dir.mkdir(parents=True, exist_ok=True)

    log_file_path = logs_dir / f"{datetime.now().strftime('%Y-%m-%d')}.log"
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    file_handler = logging.FileHandler(str(log_file_path))
    file_handler.setLevel(level)
    file_handler.setFormatter(formatter)
    root_logger.addHandler(file_handler)

    setattr(root_logger, "_project_logging_configured", True)
    return root_logger
