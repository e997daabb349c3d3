"""
Logging setup utilities for matches.

This module provides functions to configure logging with console and optional
file output, and to create timestamped run directories for match results.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import List, Optional

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

VERBOSITY_LEVELS = {
    0: logging.ERROR,
    1: logging.INFO,
    2: logging.DEBUG,
}


def verbosity_to_level(verbosity: int) -> int:
    """Map a 0/1/2 verbosity to ERROR/INFO/DEBUG; values above 2 mean DEBUG."""
    if verbosity <= 0:
        return logging.ERROR
    return VERBOSITY_LEVELS.get(verbosity, logging.DEBUG)


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[Path] = None,
    format_string: Optional[str] = None
) -> Optional[Path]:
    """
    Route all loggers to the console, and to log_file when one is given.

    Handlers already attached to the root logger are replaced, so calling this
    again never prints a record twice.

    Args:
        level: Minimum level for the root logger and every handler
        log_file: Optional log file, truncated on open; parent directories are created
        format_string: Record format, DEFAULT_FORMAT when None

    Returns:
        Path to the log file, or None when logging only to the console

    Example:
        >>> setup_logging(verbosity_to_level(2))
        >>> logging.getLogger("uct.search").debug("tree dumps are now visible")
    """
    formatter = logging.Formatter(format_string or DEFAULT_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    for old_handler in list(root_logger.handlers):
        root_logger.removeHandler(old_handler)

    handlers: List[logging.Handler] = []
    if log_file is not None:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, mode='w', encoding='utf-8'))
    handlers.append(logging.StreamHandler())

    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    return log_file


def create_run_directory(
    base_dir: Path = Path("runs"),
    experiment_name: Optional[str] = None
) -> Path:
    """
    Make <base_dir>/<YYYYMMDD>_<HHMMSS>_<experiment_name>/ and return it.

    experiment_name defaults to "run". Series summaries are written here.
    """
    stamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    run_dir = Path(base_dir) / f"{stamp}_{experiment_name or 'run'}"
    run_dir.mkdir(parents=True, exist_ok=True)
    return run_dir
